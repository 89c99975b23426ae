from enum import Enum

from pydantic import BaseModel


class BasePydanticModel(BaseModel):
    model_config = {
        "extra": "forbid",
        "populate_by_name": True,
        "use_enum_values": True,
        "frozen": True,
    }

class ParameterType(str, Enum):
    STRING = "string"
    INTEGER = "integer"
    NUMBER = "number"
    BOOLEAN = "boolean"
    OBJECT = "object"
    ARRAY = "array"
    UNKNOWN = "unknown"

class TypeFormat(BasePydanticModel):
    """Semantic category of a type plus an optional format hint (e.g. "enum", "int64")."""
    type: ParameterType
    format: str | None = None

    @property
    def is_enum(self) -> bool:
        return self.type == ParameterType.STRING and self.format == "enum"
