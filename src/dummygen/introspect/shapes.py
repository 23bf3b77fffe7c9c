"""Closed classification of annotations into value shapes.

Every annotation reaching the populator is classified exactly once into a
:class:`Shape`; the populator then dispatches on the shape through a handler
table.  Classification precedence follows the scalar → temporal → enum →
container → optional → object order, and anything not covered is
:attr:`Shape.UNRECOGNIZED`.
"""

from __future__ import annotations

import collections.abc as cabc
import sys
import typing
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Any, Literal, get_args, get_origin

from .generics import NONE_TYPE, is_union, is_variadic_tuple, strip_annotated
from .markers import Byte, Char, Float32, Instant, Long, Short

__all__ = ["Shape", "classify", "is_platform_type"]


class Shape(Enum):
    """Value shapes understood by the populator."""

    TEXT = "text"
    CHAR = "char"
    INTEGER = "integer"
    LONG = "long"
    SHORT = "short"
    BYTE = "byte"
    DOUBLE = "double"
    FLOAT32 = "float32"
    DECIMAL = "decimal"
    BOOLEAN = "boolean"
    DATE = "date"
    DATETIME = "datetime"
    INSTANT = "instant"
    ENUM = "enum"
    LITERAL = "literal"
    LIST = "list"
    TUPLE = "tuple"
    SET = "set"
    FROZENSET = "frozenset"
    MAPPING = "mapping"
    OPTIONAL = "optional"
    OBJECT = "object"
    UNRECOGNIZED = "unrecognized"


_SCALARS: dict[Any, Shape] = {
    str: Shape.TEXT,
    Char: Shape.CHAR,
    int: Shape.INTEGER,
    Long: Shape.LONG,
    Short: Shape.SHORT,
    Byte: Shape.BYTE,
    float: Shape.DOUBLE,
    Float32: Shape.FLOAT32,
    Decimal: Shape.DECIMAL,
    bool: Shape.BOOLEAN,
    date: Shape.DATE,
    datetime: Shape.DATETIME,
    Instant: Shape.INSTANT,
}

_CONTAINERS: dict[Any, Shape] = {
    list: Shape.LIST,
    cabc.Sequence: Shape.LIST,
    cabc.MutableSequence: Shape.LIST,
    set: Shape.SET,
    cabc.Set: Shape.SET,
    cabc.MutableSet: Shape.SET,
    frozenset: Shape.FROZENSET,
    dict: Shape.MAPPING,
    cabc.Mapping: Shape.MAPPING,
    cabc.MutableMapping: Shape.MAPPING,
}

_PLATFORM_ROOTS = frozenset(sys.stdlib_module_names) | {"builtins", "__future__"}


def is_platform_type(tp: type) -> bool:
    """Return ``True`` for classes defined by the standard library."""

    module = getattr(tp, "__module__", None) or ""
    return module.split(".", 1)[0] in _PLATFORM_ROOTS


def _lookup(table: dict[Any, Shape], key: Any) -> Shape | None:
    try:
        return table.get(key)
    except TypeError:  # unhashable annotation, e.g. Literal[[1]]
        return None


def classify(tp: Any) -> Shape:
    """Return the :class:`Shape` of annotation ``tp``."""

    tp = strip_annotated(tp)
    shape = _lookup(_SCALARS, tp)
    if shape is not None:
        return shape
    if hasattr(tp, "__supertype__"):
        return classify(tp.__supertype__)

    origin = get_origin(tp)
    if origin is Literal:
        return Shape.LITERAL if get_args(tp) else Shape.UNRECOGNIZED
    if is_union(tp):
        return Shape.OPTIONAL if NONE_TYPE in get_args(tp) else Shape.UNRECOGNIZED
    if origin is tuple or tp is tuple or tp is typing.Tuple:
        bare = not get_args(tp)
        return Shape.TUPLE if bare or is_variadic_tuple(tp) else Shape.UNRECOGNIZED

    shape = _lookup(_CONTAINERS, origin if origin is not None else tp)
    if shape is not None:
        return shape

    if isinstance(tp, type):
        if issubclass(tp, Enum):
            return Shape.ENUM
        if not is_platform_type(tp):
            return Shape.OBJECT
    return Shape.UNRECOGNIZED
