"""
Catalog markers and their discovery.
"""
from .inspector import (
    AnnotationInspector,
    MemberInfo,
    ReflectionAnnotationInspector,
    description_of,
    find_marker,
    is_hidden,
    tag_names,
)
from .markers import (
    DataMember,
    Description,
    ExternalDocs,
    Hidden,
    Tag,
    catalog_type,
    description,
    external_docs,
    hidden,
    tag,
)

__all__ = [
    "AnnotationInspector",
    "DataMember",
    "Description",
    "ExternalDocs",
    "Hidden",
    "MemberInfo",
    "ReflectionAnnotationInspector",
    "Tag",
    "catalog_type",
    "description",
    "description_of",
    "external_docs",
    "find_marker",
    "hidden",
    "is_hidden",
    "tag",
    "tag_names",
]
