"""Helpers for inspecting resolved type annotations."""

from __future__ import annotations

import collections.abc
import types
from typing import Annotated, Any, Union, get_args, get_origin

from .exceptions import SchemaError

# Origins accepted as "collection of X"
COLLECTION_TYPES: tuple[Any, ...] = (
    list,
    set,
    frozenset,
    tuple,
    collections.abc.Sequence,
    collections.abc.MutableSequence,
    collections.abc.Set,
    collections.abc.MutableSet,
    collections.abc.Collection,
    collections.abc.Iterable,
)

_UNION_TYPES = (Union, types.UnionType)


def strip_wrappers(tp: Any) -> Any:
    """Remove ``Annotated[...]`` and ``Optional`` wrappers around a type."""
    while True:
        origin = get_origin(tp)
        if origin is Annotated:
            tp = get_args(tp)[0]
            continue
        if origin in _UNION_TYPES:
            args = get_args(tp)
            non_null = [arg for arg in args if arg is not types.NoneType]
            if len(non_null) == 1 and len(non_null) < len(args):
                tp = non_null[0]
                continue
        return tp


def is_collection_type(tp: Any) -> bool:
    """Check whether ``tp`` declares a collection (parameterised or bare)."""
    tp = strip_wrappers(tp)
    return tp in COLLECTION_TYPES or get_origin(tp) in COLLECTION_TYPES


def resolve_element_type(
    tp: Any, owner: str | None = None, field_name: str | None = None
) -> Any:
    """Return the element type of a collection annotation, or ``tp`` itself.

    Only one level of collection is supported.

    Raises:
        SchemaError: If the collection has no usable element type or nests
            another collection
    """
    tp = strip_wrappers(tp)
    origin = get_origin(tp)
    if tp in COLLECTION_TYPES:
        raise SchemaError(
            f"collection type {short_name(tp)} has no element type",
            owner=owner,
            field_name=field_name,
        )
    if origin not in COLLECTION_TYPES:
        return tp

    args = get_args(tp)
    if origin is tuple:
        if len(args) == 2 and args[1] is Ellipsis:
            args = args[:1]
        else:
            raise SchemaError(
                f"tuple fields must be declared as tuple[T, ...], got {tp!r}",
                owner=owner,
                field_name=field_name,
            )
    if len(args) != 1:
        raise SchemaError(
            f"cannot resolve element type of {tp!r}",
            owner=owner,
            field_name=field_name,
        )

    element = strip_wrappers(args[0])
    if is_collection_type(element):
        raise SchemaError(
            f"nested collections are not supported: {tp!r}",
            owner=owner,
            field_name=field_name,
        )
    return element


def short_name(tp: Any) -> str:
    """Short display name of a type (``__name__`` where available)."""
    name = getattr(tp, "__name__", None)
    if isinstance(name, str) and get_origin(tp) is None:
        return name
    return repr(tp)
