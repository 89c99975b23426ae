"""
Markers that control how a type or one of its members shows up in the schema catalog.

Type-level markers are attached with the class decorators below. Member-level markers
go into ``typing.Annotated`` metadata on the class annotation::

    @tag("billing")
    @description("A line on an invoice.")
    class InvoiceLine:
        sku: Annotated[str, DataMember(required=True)]
        unit_price: Annotated[float, DataMember(name="unitPrice"), Description("Net price.")]
        cost_center: Annotated[str, DataMember(), Tag("internal")]
"""
from dataclasses import dataclass
from typing import Any, Callable, TypeVar

T = TypeVar("T", bound=type)

TYPE_MARKERS_ATTR = "__schema_catalog_markers__"


@dataclass(frozen=True)
class DataMember:
    """Marks a member as serialized. Members without it never appear in the catalog."""
    name: str | None = None
    required: bool = False

@dataclass(frozen=True)
class Hidden:
    """Always hides the type or member it is attached to."""

@dataclass(frozen=True)
class Tag:
    """Named category; hidden whenever the name is among the hidden tags of a build."""
    name: str

@dataclass(frozen=True)
class Description:
    text: str

@dataclass(frozen=True)
class ExternalDocs:
    """Type-level pointer to documentation kept outside the catalog."""
    description: str | None = None
    url: str | None = None


def catalog_type(*markers: Any) -> Callable[[T], T]:
    """Class decorator attaching markers to the decorated class only (subclasses do not inherit them)."""
    def decorator(cls: T) -> T:
        existing = cls.__dict__.get(TYPE_MARKERS_ATTR, ())
        setattr(cls, TYPE_MARKERS_ATTR, tuple(existing) + tuple(markers))
        return cls
    return decorator


def hidden(cls: T) -> T:
    return catalog_type(Hidden())(cls)


def tag(*names: str) -> Callable[[T], T]:
    return catalog_type(*(Tag(name) for name in names))


def description(text: str) -> Callable[[T], T]:
    return catalog_type(Description(text))


def external_docs(description: str | None = None, url: str | None = None) -> Callable[[T], T]:
    return catalog_type(ExternalDocs(description=description, url=url))
