"""
Type classification: declared Python types to catalog categories.
"""
from .type_classifier import DefaultTypeClassifier, TypeClassifier
from .type_utils import get_enumerable_type, type_identity, unwrap_type

__all__ = [
    "DefaultTypeClassifier",
    "TypeClassifier",
    "get_enumerable_type",
    "type_identity",
    "unwrap_type",
]
