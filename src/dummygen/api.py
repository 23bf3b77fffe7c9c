"""Static façade over the populator::

    @dataclass
    class User:
        email: str = ""
        age: int = 0

    user = generate(User)                      # user.email == "mary.lee@gmail.com"
    users = generate_many(User, 10, DummyConfig(seed=7))
"""

from __future__ import annotations

from datetime import datetime
from typing import TypeVar

from .config import DummyConfig
from .populate import ObjectPopulator
from .utils.errors import InvalidRequestError
from .values import rng_for, type_key

__all__ = ["generate", "generate_many"]

T = TypeVar("T")

_POPULATOR = ObjectPopulator()


def generate(
    cls: type[T],
    config: DummyConfig | None = None,
    *,
    now: datetime | None = None,
) -> T:
    """Return one populated instance of ``cls``.

    ``config`` defaults to English, meaningful content, lists of up to three
    elements and no ``None`` fields.  ``now`` pins the reference instant for
    relative date ranges.
    """

    if cls is None:
        raise InvalidRequestError("Class cannot be None")
    cfg = config if config is not None else DummyConfig.default()
    return _POPULATOR.populate(cls, cfg, now=now)


def generate_many(
    cls: type[T],
    count: int,
    config: DummyConfig | None = None,
    *,
    now: datetime | None = None,
) -> list[T]:
    """Return ``count`` independently populated instances of ``cls``.

    All instances draw from one random stream, so a seeded configuration
    gives a reproducible but varied list.
    """

    if cls is None:
        raise InvalidRequestError("Class cannot be None")
    if count < 0:
        raise InvalidRequestError(f"count must be >= 0, got {count}")
    cfg = config if config is not None else DummyConfig.default()
    rng = rng_for(cfg, key=type_key(cls))
    reference = now if now is not None else datetime.now()
    return [_POPULATOR.populate(cls, cfg, rng=rng, now=reference) for _ in range(count)]
