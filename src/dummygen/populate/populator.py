"""Recursive object-graph populator.

:class:`ObjectPopulator` instantiates a class with no arguments and fills
every non-static, non-final field with a value chosen from the field's
declared type and name.  Nested user classes are populated recursively;
lists, sets, mappings, tuples and optionals are generated element-wise.

Termination
-----------
Two guards run before any construction:

1. ``depth >= max_depth`` leaves the branch empty.  The root instance is at
   depth 0 and its fields are generated at depth 1.
2. A class that is already being expanded on the active branch leaves the
   branch empty, which breaks cycles such as ``A -> B -> A``.

Container elements are generated at the depth of the field that declares
the container, so a ``list[Node]`` field does not count as an extra level.

Absent values
-------------
"No value could be computed" is represented by :data:`ABSENT`, which is
distinct from ``None``: an empty optional is a legitimate ``None`` value.
Absent field values keep the constructor default unless
``allow_null_fields`` is enabled, in which case ``None`` is written.
Absent container elements and map entries are dropped.
"""

from __future__ import annotations

import inspect
import random
from collections.abc import Callable
from datetime import datetime
from typing import Any, Final, TypeVar

from dummygen.config import DummyConfig
from dummygen.introspect import FieldDescriptor, Shape, classify, fields, resolve_type_arguments
from dummygen.introspect.generics import strip_annotated, strip_newtype
from dummygen.utils.errors import (
    ConstructionError,
    FieldAssignmentError,
    InvalidRequestError,
    PopulationError,
)
from dummygen.utils.logging import get_logger
from dummygen.values import ValueGenerator, type_key

from .context import GenerationContext

__all__ = [
    "ABSENT",
    "DEFAULT_MAX_DEPTH",
    "ELEMENT_HINT",
    "ObjectPopulator",
    "assign",
    "instantiate",
]

log = get_logger(__name__)

T = TypeVar("T")

DEFAULT_MAX_DEPTH: Final = 5

# Name hint used for container elements instead of a field name
ELEMENT_HINT: Final = "value"


class _Absent:
    """Type of the :data:`ABSENT` sentinel."""

    __slots__ = ()

    def __repr__(self) -> str:
        return "ABSENT"


ABSENT: Final = _Absent()

_ScalarGenerator = Callable[[ValueGenerator, str], Any]

_SCALAR_GENERATORS: dict[Shape, _ScalarGenerator] = {
    Shape.TEXT: ValueGenerator.text,
    Shape.CHAR: lambda values, _hint: values.char(),
    Shape.INTEGER: ValueGenerator.integer,
    Shape.LONG: ValueGenerator.long,
    Shape.SHORT: ValueGenerator.short,
    Shape.BYTE: ValueGenerator.byte,
    Shape.DOUBLE: ValueGenerator.double,
    Shape.FLOAT32: ValueGenerator.float32,
    Shape.DECIMAL: ValueGenerator.decimal,
    Shape.BOOLEAN: lambda values, _hint: values.boolean(),
    Shape.DATE: ValueGenerator.local_date,
    Shape.DATETIME: ValueGenerator.date_time,
    Shape.INSTANT: ValueGenerator.instant,
}


# ---------------------------------------------------------------------------
# Construction and assignment
# ---------------------------------------------------------------------------


def instantiate(cls: type[T]) -> T:
    """Return ``cls()``; abstract classes and protocols are rejected."""

    if inspect.isabstract(cls):
        raise ConstructionError(cls, "Abstract classes cannot be instantiated.")
    if getattr(cls, "_is_protocol", False):
        raise ConstructionError(cls, "Protocols cannot be instantiated.")
    try:
        return cls()
    except Exception as exc:
        raise ConstructionError(
            cls, "Make sure it can be called without arguments."
        ) from exc


def assign(instance: object, field: FieldDescriptor, value: Any) -> None:
    """Write ``value`` bypassing ``__setattr__`` overrides and frozen dataclasses."""

    try:
        object.__setattr__(instance, field.name, value)
    except (AttributeError, TypeError) as exc:
        raise FieldAssignmentError(type(instance), field.name) from exc


# ---------------------------------------------------------------------------
# Populator
# ---------------------------------------------------------------------------


class ObjectPopulator:
    """Populate instances of arbitrary classes with placeholder data.

    The populator holds no per-call state and can be shared between threads;
    each :meth:`populate` call creates its own :class:`GenerationContext`.
    """

    def __init__(self, *, max_depth: int = DEFAULT_MAX_DEPTH) -> None:
        if max_depth < 1:
            raise ValueError("max_depth must be at least 1")
        self.max_depth = max_depth
        self._handlers: dict[Shape, Callable[[Any, GenerationContext, int], Any]] = {
            Shape.ENUM: self._enum_value,
            Shape.LITERAL: self._literal_value,
            Shape.LIST: self._list_value,
            Shape.TUPLE: self._tuple_value,
            Shape.SET: self._set_value,
            Shape.FROZENSET: self._frozenset_value,
            Shape.MAPPING: self._mapping_value,
            Shape.OPTIONAL: self._optional_value,
            Shape.OBJECT: self._object_value,
        }

    def populate(
        self,
        cls: type[T],
        config: DummyConfig | None = None,
        *,
        rng: random.Random | None = None,
        now: datetime | None = None,
    ) -> T:
        """Return a new, populated instance of ``cls``.

        Parameters
        ----------
        cls:
            Class to instantiate; must be callable without arguments.
        config:
            Generation settings; defaults to :meth:`DummyConfig.default`.
        rng:
            Optional random source for this call.  When omitted one is
            derived from ``config.seed`` (or the OS when unseeded).
        now:
            Reference instant for relative date ranges.

        Raises
        ------
        InvalidRequestError
            ``cls`` is ``None`` or not a class.
        PopulationError
            Construction or assignment failed anywhere in the graph.  The
            message names ``cls``; ``failed_type`` and ``__cause__`` identify
            the actual failure.
        """

        if cls is None:
            raise InvalidRequestError("Class cannot be None")
        if not isinstance(cls, type):
            raise InvalidRequestError(f"Expected a class, got {cls!r}")
        cfg = config if config is not None else DummyConfig.default()
        ctx = GenerationContext.start(cfg, key=type_key(cls), rng=rng, now=now)
        try:
            instance = self._populate(cls, ctx, 0)
        except Exception as exc:
            raise PopulationError(cls, failed_type=getattr(exc, "target", None)) from exc
        return instance

    # -- Recursion ----------------------------------------------------------

    def _populate(self, cls: type, ctx: GenerationContext, depth: int) -> Any:
        if depth >= self.max_depth:
            log.debug("max depth %d reached at %s", self.max_depth, cls.__qualname__)
            return ABSENT
        if cls in ctx.in_progress:
            log.debug("cycle detected at %s", cls.__qualname__)
            return ABSENT

        instance = instantiate(cls)
        ctx.in_progress.add(cls)
        try:
            for field in fields(cls):
                value = self.value_for(field.type, field.name.lower(), ctx, depth + 1)
                if value is ABSENT:
                    if not ctx.config.allow_null_fields:
                        continue
                    value = None
                assign(instance, field, value)
        finally:
            ctx.in_progress.discard(cls)
        return instance

    def value_for(self, tp: Any, hint: str, ctx: GenerationContext, depth: int) -> Any:
        """Return a value for annotation ``tp`` or :data:`ABSENT`.

        ``hint`` is the lower-cased field name, or :data:`ELEMENT_HINT` for
        container elements.
        """

        shape = classify(tp)
        scalar = _SCALAR_GENERATORS.get(shape)
        if scalar is not None:
            return scalar(ctx.values, hint)
        handler = self._handlers.get(shape)
        if handler is None:
            return ABSENT
        return handler(strip_newtype(strip_annotated(tp)), ctx, depth)

    def _element(self, tp: Any, ctx: GenerationContext, depth: int) -> Any:
        return self.value_for(tp, ELEMENT_HINT, ctx, depth)

    # -- Shape handlers -----------------------------------------------------

    def _enum_value(self, tp: Any, ctx: GenerationContext, depth: int) -> Any:
        members = list(tp)
        if not members:
            return ABSENT
        return ctx.rng.choice(members)

    def _literal_value(self, tp: Any, ctx: GenerationContext, depth: int) -> Any:
        return ctx.rng.choice(resolve_type_arguments(tp))

    def _elements(self, tp: Any, ctx: GenerationContext, depth: int) -> list[Any]:
        args = resolve_type_arguments(tp)
        if not args:
            return []
        candidates = (self._element(args[0], ctx, depth) for _ in range(ctx.collection_size()))
        return [value for value in candidates if value is not ABSENT]

    def _list_value(self, tp: Any, ctx: GenerationContext, depth: int) -> list[Any]:
        return self._elements(tp, ctx, depth)

    def _tuple_value(self, tp: Any, ctx: GenerationContext, depth: int) -> tuple[Any, ...]:
        return tuple(self._elements(tp, ctx, depth))

    def _set_value(self, tp: Any, ctx: GenerationContext, depth: int) -> set[Any]:
        return set(self._elements(tp, ctx, depth))

    def _frozenset_value(self, tp: Any, ctx: GenerationContext, depth: int) -> frozenset[Any]:
        return frozenset(self._elements(tp, ctx, depth))

    def _mapping_value(self, tp: Any, ctx: GenerationContext, depth: int) -> dict[Any, Any]:
        args = resolve_type_arguments(tp)
        if len(args) != 2:
            return {}
        key_type, value_type = args
        result: dict[Any, Any] = {}
        for _ in range(ctx.collection_size()):
            key = self._element(key_type, ctx, depth)
            value = self._element(value_type, ctx, depth)
            if key is not ABSENT and value is not ABSENT:
                result[key] = value
        return result

    def _optional_value(self, tp: Any, ctx: GenerationContext, depth: int) -> Any:
        if ctx.rng.random() < 0.5:
            return None
        args = resolve_type_arguments(tp)
        if len(args) != 1:
            return None
        inner = self._element(args[0], ctx, depth)
        return None if inner is ABSENT else inner

    def _object_value(self, tp: Any, ctx: GenerationContext, depth: int) -> Any:
        return self._populate(tp, ctx, depth)
