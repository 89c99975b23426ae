"""
Schema catalog generation: graph walk over declared types and per-type conversion.
"""
from .definitions_builder import DefinitionsBuilder, build_catalog
from .type_converter import TypeConverter, enum_values

__all__ = [
    "DefinitionsBuilder",
    "TypeConverter",
    "build_catalog",
    "enum_values",
]
