"""Helpers for unwrapping annotations and resolving generic type arguments."""

from __future__ import annotations

import types
from typing import Annotated, Any, Union, get_args, get_origin

__all__ = [
    "NONE_TYPE",
    "is_union",
    "is_variadic_tuple",
    "resolve_type_arguments",
    "strip_annotated",
    "strip_newtype",
]

NONE_TYPE = type(None)


def strip_annotated(tp: Any) -> Any:
    """Return the underlying type of ``Annotated[T, ...]`` (repeatedly)."""

    while get_origin(tp) is Annotated:
        tp = get_args(tp)[0]
    return tp


def strip_newtype(tp: Any) -> Any:
    """Return the base type behind a chain of ``NewType`` definitions."""

    while hasattr(tp, "__supertype__"):
        tp = tp.__supertype__
    return tp


def is_union(tp: Any) -> bool:
    """Return ``True`` for ``Union[...]``, ``Optional[...]`` and ``A | B``."""

    return get_origin(tp) in (Union, types.UnionType)


def is_variadic_tuple(tp: Any) -> bool:
    """Return ``True`` for ``tuple[T, ...]``."""

    args = get_args(tp)
    return get_origin(tp) is tuple and len(args) == 2 and args[1] is Ellipsis


def resolve_type_arguments(tp: Any) -> tuple[Any, ...]:
    """Return the declared type parameters of ``tp`` in declaration order.

    ``Annotated`` and ``NewType`` wrappers are looked through.  For
    optional-shaped unions the ``None`` member is dropped, and the trailing
    ellipsis of ``tuple[T, ...]`` is omitted.  Non-parameterized or bare
    generic types give an empty tuple, which callers treat as an unknown
    element type.
    """

    tp = strip_newtype(strip_annotated(tp))
    args = get_args(tp)
    if is_union(tp):
        return tuple(a for a in args if a is not NONE_TYPE)
    if is_variadic_tuple(tp):
        return (args[0],)
    return args
