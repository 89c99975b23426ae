"""
Discovery of catalog markers on types and their members.
"""
import abc
import inspect
import sys
import types
import typing
from dataclasses import dataclass
from typing import Annotated, Any, ClassVar, Iterable, Sequence, TypeVar, Union, get_args, get_origin

import structlog
from pydantic import BaseModel

from ..classification.type_utils import runtime_class, unwrap_type
from .markers import TYPE_MARKERS_ATTR, DataMember, Description, ExternalDocs, Hidden, Tag

logger = structlog.get_logger(__name__)

M = TypeVar("M")


@dataclass(frozen=True)
class MemberInfo:
    """A declared member of a type together with the markers attached to it."""
    name: str
    declared_type: Any
    markers: tuple[Any, ...]
    owner: type


def find_marker(markers: Iterable[Any], marker_type: type[M]) -> M | None:
    for marker in markers:
        if isinstance(marker, marker_type):
            return marker
    return None


def tag_names(markers: Iterable[Any]) -> list[str]:
    return [marker.name for marker in markers if isinstance(marker, Tag)]


def is_hidden(markers: Sequence[Any], hidden_tags: typing.AbstractSet[str]) -> bool:
    """True for an explicit Hidden marker or any Tag whose name is hidden."""
    if find_marker(markers, Hidden) is not None:
        return True
    return any(name in hidden_tags for name in tag_names(markers))


def description_of(markers: Iterable[Any]) -> str | None:
    marker = find_marker(markers, Description)
    return marker.text if marker is not None else None


def _split_annotated(hint: Any) -> tuple[Any, tuple[Any, ...]]:
    """Separates ``Annotated`` metadata from the type, also through an ``Optional`` wrapper."""
    origin = get_origin(hint)
    if origin is Union or origin is types.UnionType:
        args = [arg for arg in get_args(hint) if arg is not type(None)]
        if len(args) == 1:
            return _split_annotated(args[0])
    if origin is Annotated:
        declared_type, *extras = get_args(hint)
        return declared_type, tuple(extras)
    return hint, ()


class AnnotationInspector(abc.ABC):
    """Answers marker queries for types and their members."""

    @abc.abstractmethod
    def get_type_markers(self, tp: Any) -> Sequence[Any]:
        """Markers attached to the type itself."""
        pass

    @abc.abstractmethod
    def get_members(self, tp: Any) -> Sequence[MemberInfo]:
        """Declared members of the type in declaration order, with their markers."""
        pass

    def external_docs(self, tp: Any) -> ExternalDocs | None:
        return find_marker(self.get_type_markers(tp), ExternalDocs)

    def data_member(self, member: MemberInfo) -> DataMember | None:
        return find_marker(member.markers, DataMember)


class ReflectionAnnotationInspector(AnnotationInspector):
    """
    Reads markers from class decorators and ``Annotated`` class annotations.
    Works for plain annotated classes, dataclasses and pydantic models.
    """

    def __init__(self):
        self.logger = logger.bind(service="ReflectionAnnotationInspector")

    def get_type_markers(self, tp: Any) -> Sequence[Any]:
        cls = runtime_class(tp)
        if cls is None:
            return ()
        return tuple(cls.__dict__.get(TYPE_MARKERS_ATTR, ()))

    def get_members(self, tp: Any) -> Sequence[MemberInfo]:
        cls = runtime_class(tp)
        if cls is None:
            return []

        if issubclass(cls, BaseModel):
            return self._model_members(cls)

        members: list[MemberInfo] = []
        for name, hint in self._resolve_hints(cls).items():
            if name.startswith("__") or hint is ClassVar or get_origin(hint) is ClassVar:
                continue
            declared_type, markers = _split_annotated(hint)
            members.append(MemberInfo(name=name, declared_type=unwrap_type(declared_type), markers=markers, owner=cls))
        return members

    def _model_members(self, cls: type[BaseModel]) -> list[MemberInfo]:
        # pydantic keeps unrecognised Annotated metadata (our markers) in FieldInfo.metadata.
        members = []
        for name, field_info in cls.model_fields.items():
            declared_type, markers = _split_annotated(field_info.annotation)
            markers = tuple(field_info.metadata) + markers
            if field_info.description and find_marker(markers, Description) is None:
                markers += (Description(field_info.description),)
            members.append(MemberInfo(name=name, declared_type=unwrap_type(declared_type), markers=markers, owner=cls))
        return members

    def _resolve_hints(self, cls: type) -> dict[str, Any]:
        try:
            return typing.get_type_hints(cls, include_extras=True)
        except (NameError, TypeError, AttributeError, SyntaxError) as e:
            self.logger.warning(
                "Could not resolve type hints as a whole, resolving members one by one.",
                type_name=cls.__qualname__, error=str(e),
            )

        hints: dict[str, Any] = {}
        for klass in reversed(cls.__mro__):
            if klass is object:
                continue
            try:
                raw_annotations = inspect.get_annotations(klass)
            except (NameError, TypeError, AttributeError, SyntaxError) as e:
                self.logger.warning("Skipping annotations of unreadable class.", type_name=klass.__qualname__, error=str(e))
                continue
            module = sys.modules.get(klass.__module__)
            globalns = vars(module) if module is not None else {}
            for name, raw in raw_annotations.items():
                single_member = types.SimpleNamespace(__annotations__={name: raw})
                try:
                    hints.update(typing.get_type_hints(single_member, globalns=globalns, localns=dict(vars(klass)), include_extras=True))
                except (NameError, TypeError, AttributeError, SyntaxError) as e:
                    self.logger.warning(
                        "Skipping member with unresolvable type.",
                        type_name=cls.__qualname__, member=name, error=str(e),
                    )
        return hints
