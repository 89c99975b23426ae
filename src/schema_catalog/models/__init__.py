"""
Pydantic models for the schema catalog.
"""
from .catalog import (
    Definition,
    DefinitionProperty,
    DefinitionSchema,
    ExternalDocumentation,
    ParameterItems,
    index_definitions,
)
from .common import BasePydanticModel, ParameterType, TypeFormat

__all__ = [
    "BasePydanticModel",
    "Definition",
    "DefinitionProperty",
    "DefinitionSchema",
    "ExternalDocumentation",
    "ParameterItems",
    "ParameterType",
    "TypeFormat",
    "index_definitions",
]
