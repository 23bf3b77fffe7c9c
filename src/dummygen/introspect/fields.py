"""Field enumeration over a class and its ancestors.

Fields are the annotated attributes of a class.  Enumeration walks the MRO
from the class itself towards its bases, stopping before ``object``, and
reports each attribute name once (a subclass re-declaration wins).  Order
is stable: own fields in declaration order, then each ancestor's.

Modifiers mirror the two annotation qualifiers that make an attribute
unsuitable for population:

* ``ClassVar[...]`` → :attr:`Modifier.STATIC`
* ``Final[...]`` → :attr:`Modifier.FINAL`

Dataclass ``InitVar[...]`` pseudo-fields and dunder names are never fields.
Descriptors are derived on every call and never cached.
"""

from __future__ import annotations

import dataclasses
import inspect
import re
import typing
from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar, Final, get_origin

from dummygen.utils.logging import get_logger

from .generics import strip_annotated

__all__ = ["FieldDescriptor", "Modifier", "fields"]

log = get_logger(__name__)

_RX_STATIC = re.compile(r"^\s*(typing\.)?ClassVar\b")
_RX_FINAL = re.compile(r"^\s*(typing\.)?Final\b")
_RX_INITVAR = re.compile(r"^\s*(dataclasses\.)?InitVar\b")


class Modifier(Enum):
    """Qualifiers that exclude a field from population."""

    STATIC = "static"
    FINAL = "final"


@dataclass(slots=True, frozen=True)
class FieldDescriptor:
    """Name, declared type and modifiers of one field."""

    name: str
    type: Any
    owner: type
    modifiers: frozenset[Modifier] = frozenset()

    @property
    def is_static(self) -> bool:
        return Modifier.STATIC in self.modifiers

    @property
    def is_final(self) -> bool:
        return Modifier.FINAL in self.modifiers

    @property
    def skippable(self) -> bool:
        """Static and final fields are never written."""

        return bool(self.modifiers)


def _modifiers(hint: Any) -> frozenset[Modifier]:
    if isinstance(hint, str):
        found = set()
        if _RX_STATIC.match(hint):
            found.add(Modifier.STATIC)
        if _RX_FINAL.match(hint):
            found.add(Modifier.FINAL)
        return frozenset(found)
    hint = strip_annotated(hint)
    if hint is ClassVar or get_origin(hint) is ClassVar:
        return frozenset({Modifier.STATIC})
    if hint is Final or get_origin(hint) is Final:
        return frozenset({Modifier.FINAL})
    return frozenset()


def _is_initvar(hint: Any) -> bool:
    if isinstance(hint, str):
        return bool(_RX_INITVAR.match(hint))
    return hint is dataclasses.InitVar or isinstance(hint, dataclasses.InitVar)


_RESOLUTION_ERRORS = (NameError, SyntaxError, TypeError, AttributeError)


def _resolve_one(klass: type, name: str, hint: Any) -> Any:
    """Resolve a single annotation of ``klass`` or return it unchanged."""

    holder = type(
        klass.__name__,
        (),
        {"__annotations__": {name: hint}, "__module__": klass.__module__},
    )
    localns = {klass.__name__: klass, **vars(klass)}
    try:
        return typing.get_type_hints(holder, localns=localns, include_extras=True)[name]
    except _RESOLUTION_ERRORS:
        log.debug("unresolved annotation %s.%s: %r", klass.__qualname__, name, hint)
        return hint


def _own_annotations(klass: type) -> dict[str, Any]:
    """Return the annotations declared directly on ``klass``, resolved if possible.

    Resolution goes through :func:`typing.get_type_hints`, so forward
    references nested in generic arguments (``list["Node"]``,
    ``Optional["Node"]``) are resolved as well.  When the class as a whole
    cannot be resolved, each annotation is tried on its own and genuinely
    unresolvable ones are kept raw; they classify as unrecognized later on.
    """

    try:
        raw = inspect.get_annotations(klass)
    except NameError:
        log.warning("cannot read annotations of %s; skipping its fields", klass.__qualname__)
        return {}
    if not raw:
        return {}
    try:
        hints = typing.get_type_hints(klass, include_extras=True)
    except _RESOLUTION_ERRORS as exc:
        log.debug("resolving annotations of %s one by one: %s", klass.__qualname__, exc)
        return {name: _resolve_one(klass, name, hint) for name, hint in raw.items()}
    return {name: hints.get(name, hint) for name, hint in raw.items()}


def fields(cls: type, *, include_skipped: bool = False) -> list[FieldDescriptor]:
    """Return the fields of ``cls`` and its ancestors (excluding ``object``).

    Static and final fields are omitted unless ``include_skipped`` is set.
    A class without annotations yields an empty list.
    """

    seen: set[str] = set()
    result: list[FieldDescriptor] = []
    for klass in inspect.getmro(cls):
        if klass is object:
            break
        for name, hint in _own_annotations(klass).items():
            if name in seen or (name.startswith("__") and name.endswith("__")):
                continue
            seen.add(name)
            if _is_initvar(hint):
                continue
            descriptor = FieldDescriptor(
                name=name, type=hint, owner=klass, modifiers=_modifiers(hint)
            )
            if descriptor.skippable and not include_skipped:
                continue
            result.append(descriptor)
    return result
