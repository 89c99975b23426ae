"""
Converts one type, or one member of a type, into its schema catalog entry.
"""
import enum
from typing import AbstractSet, Any

import structlog

from ..annotations.inspector import AnnotationInspector, MemberInfo, description_of, is_hidden
from ..classification.type_classifier import TypeClassifier
from ..classification.type_utils import get_enumerable_type, runtime_class, type_identity
from ..models.catalog import (
    DefinitionProperty,
    DefinitionSchema,
    ExternalDocumentation,
    ParameterItems,
)
from ..models.common import ParameterType, TypeFormat

logger = structlog.get_logger(__name__)


def enum_values(enum_type: Any) -> list[str]:
    """Member names in declaration order.

    Aliases are not listed: an alias would only repeat the name of its canonical member.
    """
    cls = runtime_class(enum_type)
    if cls is None or not issubclass(cls, enum.Enum):
        return []
    return [member.name for member in cls]


class TypeConverter:
    """
    Builds `DefinitionSchema` and `DefinitionProperty` entries.

    Every referenced type found along the way is pushed onto the caller's `pending`
    stack; whether it still needs converting is decided by the caller.
    """

    def __init__(self, classifier: TypeClassifier, inspector: AnnotationInspector):
        self.classifier = classifier
        self.inspector = inspector
        self.logger = logger.bind(service="TypeConverter")

    def convert_type(self, tp: Any, hidden_tags: AbstractSet[str], pending: list[Any]) -> DefinitionSchema:
        name = type_identity(tp)
        markers = self.inspector.get_type_markers(tp)
        fields: dict[str, Any] = {
            "name": name,
            "description": description_of(markers),
            "external_documentation": self._external_documentation(tp),
        }

        type_format = self.classifier.classify(tp)
        fields["type_format"] = type_format
        if type_format.is_enum:
            fields["enum"] = enum_values(tp)
        elif type_format.type == ParameterType.ARRAY:
            element_type = get_enumerable_type(tp)
            if element_type is not None:
                fields["ref"] = type_identity(element_type)
                pending.append(element_type)
                self.logger.debug("Discovered element type.", type_name=name, element=fields["ref"])
        else:
            properties, required = self.convert_properties(tp, hidden_tags, pending)
            fields["properties"] = properties
            fields["required"] = required or None

        return DefinitionSchema(**fields)

    def _external_documentation(self, tp: Any) -> ExternalDocumentation | None:
        docs = self.inspector.external_docs(tp)
        if docs is None:
            return None
        if (docs.description or "").strip() or (docs.url or "").strip():
            return ExternalDocumentation(description=docs.description, url=docs.url)
        return None

    def convert_properties(
        self, tp: Any, hidden_tags: AbstractSet[str], pending: list[Any]
    ) -> tuple[list[DefinitionProperty], list[str]]:
        properties: list[DefinitionProperty] = []
        required: list[str] = []
        for member in self.inspector.get_members(tp):
            prop = self.convert_property(member, hidden_tags, pending)
            if prop is None:
                continue
            if prop.required:
                required.append(prop.title)
            properties.append(prop)
        return properties, required

    def convert_property(
        self, member: MemberInfo, hidden_tags: AbstractSet[str], pending: list[Any]
    ) -> DefinitionProperty | None:
        """Entry for one member, or None when the member is not serialized or is hidden."""
        data_member = self.inspector.data_member(member)
        if data_member is None or is_hidden(member.markers, hidden_tags):
            return None

        declared_type = member.declared_type
        type_format = self.classifier.classify(declared_type)
        fields: dict[str, Any] = {
            "title": data_member.name or member.name,
            "required": data_member.required,
            "description": description_of(member.markers),
            "type_format": type_format,
        }

        if type_format.type == ParameterType.OBJECT:
            pending.append(declared_type)
            fields["ref"] = type_identity(declared_type)
            return DefinitionProperty(**fields)

        if type_format.type == ParameterType.ARRAY:
            element_type = get_enumerable_type(declared_type)
            if element_type is not None:
                element_format = self.classifier.classify(element_type)
                element_ref = None
                if element_format.type == ParameterType.OBJECT:
                    pending.append(element_type)
                    element_ref = type_identity(element_type)
                fields["items"] = ParameterItems(type_format=element_format, ref=element_ref)
                # The format hint describes the element, not the array.
                fields["type_format"] = TypeFormat(type=type_format.type)

        if type_format.is_enum:
            fields["enum"] = enum_values(declared_type)

        return DefinitionProperty(**fields)
