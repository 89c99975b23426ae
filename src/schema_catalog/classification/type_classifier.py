"""
Maps declared Python types onto the catalog's semantic categories.
"""
import abc
import datetime
import decimal
import enum
import types
import uuid
from typing import Any, Literal, Mapping, TypeVar, Union, get_origin

import structlog

from ..models.common import ParameterType, TypeFormat
from .type_utils import is_iterable_type, is_mapping_type, runtime_class, unwrap_type

logger = structlog.get_logger(__name__)

# Checked in order: bool before int, datetime before date.
_PRIMITIVE_FORMATS: tuple[tuple[type, TypeFormat], ...] = (
    (bool, TypeFormat(type=ParameterType.BOOLEAN)),
    (int, TypeFormat(type=ParameterType.INTEGER, format="int64")),
    (float, TypeFormat(type=ParameterType.NUMBER, format="double")),
    (decimal.Decimal, TypeFormat(type=ParameterType.NUMBER, format="decimal")),
    (str, TypeFormat(type=ParameterType.STRING)),
    (bytes, TypeFormat(type=ParameterType.STRING, format="byte")),
    (bytearray, TypeFormat(type=ParameterType.STRING, format="byte")),
    (datetime.datetime, TypeFormat(type=ParameterType.STRING, format="date-time")),
    (datetime.date, TypeFormat(type=ParameterType.STRING, format="date")),
    (datetime.time, TypeFormat(type=ParameterType.STRING, format="time")),
    (datetime.timedelta, TypeFormat(type=ParameterType.STRING, format="duration")),
    (uuid.UUID, TypeFormat(type=ParameterType.STRING, format="uuid")),
)

ENUM_FORMAT = TypeFormat(type=ParameterType.STRING, format="enum")
ARRAY_FORMAT = TypeFormat(type=ParameterType.ARRAY)
OBJECT_FORMAT = TypeFormat(type=ParameterType.OBJECT)
UNKNOWN_FORMAT = TypeFormat(type=ParameterType.UNKNOWN)


class TypeClassifier(abc.ABC):
    """Deterministic mapping from a declared type to a category and format hint."""

    @abc.abstractmethod
    def classify(self, tp: Any) -> TypeFormat:
        """Classifies `tp`. Types that cannot be categorised come back as unknown."""
        pass


class DefaultTypeClassifier(TypeClassifier):
    """
    Static table for builtins and well-known stdlib types. Enums classify as string/enum,
    collections as array, mappings and any other class as object.
    `overrides` takes precedence over the table.
    """

    def __init__(self, overrides: Mapping[Any, TypeFormat] | None = None):
        self.overrides = dict(overrides or {})
        self.logger = logger.bind(service="DefaultTypeClassifier")

    def classify(self, tp: Any) -> TypeFormat:
        tp = unwrap_type(tp)
        if tp in self.overrides:
            return self.overrides[tp]

        if tp is Any or tp is None or tp is type(None) or isinstance(tp, TypeVar):
            return UNKNOWN_FORMAT
        origin = get_origin(tp)
        if origin is Union or origin is types.UnionType or origin is Literal:
            self.logger.debug("Cannot classify union or literal type.", declared_type=str(tp))
            return UNKNOWN_FORMAT

        cls = runtime_class(tp)
        if cls is None:
            self.logger.debug("Cannot classify declared type.", declared_type=str(tp))
            return UNKNOWN_FORMAT
        if cls in self.overrides:
            return self.overrides[cls]

        if issubclass(cls, enum.Enum):
            return ENUM_FORMAT
        for primitive, type_format in _PRIMITIVE_FORMATS:
            if issubclass(cls, primitive):
                return type_format
        if is_mapping_type(cls):
            return OBJECT_FORMAT
        if is_iterable_type(cls):
            return ARRAY_FORMAT
        return OBJECT_FORMAT
