"""Module for the schema catalog models produced by the definitions builder."""
from typing import Iterable

from pydantic import Field

from .common import BasePydanticModel, TypeFormat


class ExternalDocumentation(BasePydanticModel):
    description: str | None = None
    url: str | None = None

class ParameterItems(BasePydanticModel):
    """Element description of an array-valued property."""
    type_format: TypeFormat
    ref: str | None = Field(default=None, alias="$ref")

class DefinitionProperty(BasePydanticModel):
    """One serialized member of an object definition."""
    title: str
    description: str | None = None
    type_format: TypeFormat
    required: bool = False
    ref: str | None = Field(default=None, alias="$ref")
    items: ParameterItems | None = None
    enum: list[str] | None = None

class DefinitionSchema(BasePydanticModel):
    """Shape of one type. `name` is the type identity other entries point at through `ref`."""
    name: str
    description: str | None = None
    external_documentation: ExternalDocumentation | None = Field(default=None, alias="externalDocs")
    type_format: TypeFormat
    enum: list[str] | None = None
    properties: list[DefinitionProperty] | None = None
    required: list[str] | None = None
    ref: str | None = Field(default=None, alias="$ref")

class Definition(BasePydanticModel):
    """A single schema catalog entry."""
    type_schema: DefinitionSchema = Field(alias="schema")

    @property
    def name(self) -> str:
        return self.type_schema.name


def index_definitions(definitions: Iterable[Definition]) -> dict[str, Definition]:
    """Maps type identity to its definition so `ref` values can be looked up.

    A `ref` without a matching key is expected: it points at a type that was hidden.
    """
    return {definition.name: definition for definition in definitions}
