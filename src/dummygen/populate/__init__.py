"""Recursive population of object graphs."""

from __future__ import annotations

import random
from datetime import datetime
from typing import TypeVar

from dummygen.config import DummyConfig

from .context import GenerationContext
from .populator import ABSENT, DEFAULT_MAX_DEPTH, ELEMENT_HINT, ObjectPopulator

__all__ = [
    "ABSENT",
    "DEFAULT_MAX_DEPTH",
    "ELEMENT_HINT",
    "GenerationContext",
    "ObjectPopulator",
    "populate",
]

T = TypeVar("T")

_DEFAULT_POPULATOR = ObjectPopulator()


def populate(
    cls: type[T],
    config: DummyConfig | None = None,
    *,
    rng: random.Random | None = None,
    now: datetime | None = None,
) -> T:
    """Populate ``cls`` with the shared default :class:`ObjectPopulator`."""

    return _DEFAULT_POPULATOR.populate(cls, config, rng=rng, now=now)
