"""
Helpers for naming and taking apart declared Python types.
"""
import collections
import collections.abc
import types
from typing import Annotated, Any, Union, get_args, get_origin

# Containers whose first type argument is the element type.
ITERABLE_ORIGINS: tuple[type, ...] = (
    list,
    tuple,
    set,
    frozenset,
    collections.deque,
    collections.abc.Iterable,
    collections.abc.Iterator,
    collections.abc.Collection,
    collections.abc.Sequence,
    collections.abc.MutableSequence,
    collections.abc.Set,
    collections.abc.MutableSet,
)

MAPPING_ORIGINS: tuple[type, ...] = (
    dict,
    collections.OrderedDict,
    collections.defaultdict,
    collections.abc.Mapping,
    collections.abc.MutableMapping,
)


def unwrap_type(tp: Any) -> Any:
    """Strips ``Annotated[...]`` and ``Optional[...]`` wrappers down to the underlying type."""
    while True:
        origin = get_origin(tp)
        if origin is Annotated:
            tp = get_args(tp)[0]
            continue
        if origin is Union or origin is types.UnionType:
            args = [arg for arg in get_args(tp) if arg is not type(None)]
            if len(args) == 1:
                tp = args[0]
                continue
        return tp


def type_identity(tp: Any) -> str:
    """Fully-qualified name used as the cross-reference key between catalog entries.

    Classes created inside a function share their qualname with every other class
    made by the same call site, so their name carries the object id as a suffix.
    """
    tp = unwrap_type(tp)
    origin = get_origin(tp)
    args = get_args(tp)
    if isinstance(origin, type) and args:
        arg_names = ", ".join("..." if arg is Ellipsis else type_identity(arg) for arg in args)
        return f"{type_identity(origin)}[{arg_names}]"
    if isinstance(tp, type):
        if tp.__module__ == "builtins":
            return tp.__qualname__
        name = f"{tp.__module__}.{tp.__qualname__}"
        if "<locals>" in tp.__qualname__:
            name = f"{name}@{id(tp):x}"
        return name
    return str(tp)


def runtime_class(tp: Any) -> type | None:
    """The class behind a declared type, e.g. ``list`` for ``list[int]``."""
    tp = unwrap_type(tp)
    if isinstance(tp, type):
        return tp
    origin = get_origin(tp)
    return origin if isinstance(origin, type) else None


def _has_base(cls: type, bases: tuple[type, ...]) -> bool:
    # Nominal check over the MRO. issubclass() against the abc.Iterable family is
    # structural and would match any class defining __iter__ (pydantic models do).
    return any(klass in bases for klass in cls.__mro__)


def is_mapping_type(tp: Any) -> bool:
    cls = runtime_class(tp)
    return cls is not None and _has_base(cls, MAPPING_ORIGINS)


def is_iterable_type(tp: Any) -> bool:
    cls = runtime_class(tp)
    if cls is None or _has_base(cls, (str, bytes, bytearray)) or is_mapping_type(cls):
        return False
    return _has_base(cls, ITERABLE_ORIGINS)


def get_enumerable_type(tp: Any) -> Any | None:
    """Element type of a collection type, or None when it cannot be determined.

    ``list[Widget]`` gives ``Widget``. A class such as ``class Widgets(list[Widget])``
    is resolved through its parametrised collection base.
    """
    if tp is None:
        return None
    tp = unwrap_type(tp)
    origin = get_origin(tp)
    if origin is not None:
        if origin in ITERABLE_ORIGINS:
            args = get_args(tp)
            return unwrap_type(args[0]) if args else None
        return None
    if not isinstance(tp, type):
        return None
    for klass in tp.__mro__:
        for base in klass.__dict__.get("__orig_bases__", ()):
            element = get_enumerable_type(base)
            if element is not None:
                return element
    return None
