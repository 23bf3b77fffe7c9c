"""Per-call generation state."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from datetime import datetime

from dummygen.config import DummyConfig
from dummygen.values import ValueGenerator, rng_for

__all__ = ["GenerationContext"]


@dataclass(slots=True)
class GenerationContext:
    """Mutable state owned by exactly one top-level populate call.

    ``in_progress`` holds the types currently being expanded on the active
    branch of the recursion; a type is removed again once its instance is
    complete so that sibling branches may reuse it.  The current depth is
    not stored here but passed down the recursion.
    """

    config: DummyConfig
    values: ValueGenerator
    in_progress: set[type] = field(default_factory=set)

    @classmethod
    def start(
        cls,
        config: DummyConfig,
        *,
        key: str,
        rng: random.Random | None = None,
        now: datetime | None = None,
    ) -> "GenerationContext":
        """Create the context for one call.

        Without an explicit ``rng`` a fresh one is derived from the
        configuration and ``key`` (see :func:`dummygen.values.rng_for`).
        """

        source = rng if rng is not None else rng_for(config, key=key)
        return cls(config=config, values=ValueGenerator(config, rng=source, now=now))

    @property
    def rng(self) -> random.Random:
        return self.values.rng

    def collection_size(self) -> int:
        """Return a container size drawn uniformly from ``[1, max_list_size]``.

        Non-positive ``max_list_size`` values still give one element.
        """

        return self.rng.randint(1, self.config.collection_upper_bound)
