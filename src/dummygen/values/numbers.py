"""Numeric generation keyed by field-name hints.

Ranges are chosen by the first matching substring of the lower-cased hint,
e.g. ``age`` gives 1-80, ``salary`` 30000-129999 and ``price`` 1.00-1001.00
for floating fields.  Matching is plain substring search, so ``percentage``
falls under the ``age`` rule for integers.
"""

from __future__ import annotations

import random
import struct
import time

__all__ = [
    "BYTE_RANGE",
    "SHORT_RANGE",
    "generate_byte",
    "generate_double",
    "generate_float",
    "generate_int",
    "generate_long",
    "generate_short",
]

_LONG_MAX = 2**63 - 1
_YEAR_MS = 365 * 24 * 60 * 60 * 1000

BYTE_RANGE: tuple[int, int] = (-128, 127)
SHORT_RANGE: tuple[int, int] = (-32768, 32767)

# (substrings, low, high) inclusive integer ranges, first match wins
_INT_RULES: tuple[tuple[tuple[str, ...], int, int], ...] = (
    (("age",), 1, 80),
    (("year",), 1990, 2019),
    (("month",), 1, 12),
    (("day",), 1, 28),
    (("hour",), 0, 23),
    (("minute", "second"), 0, 59),
    (("price", "cost", "amount"), 1, 1000),
    (("salary",), 30000, 129999),
    (("count", "quantity", "size"), 1, 100),
    (("id",), 1, 10000),
    (("percentage", "percent"), 0, 100),
    (("score",), 0, 100),
    (("level",), 1, 10),
    (("weight",), 30, 229),
    (("height",), 140, 239),
)

# (substrings, offset, span, rounded) for offset + random() * span
_DOUBLE_RULES: tuple[tuple[tuple[str, ...], float, float, bool], ...] = (
    (("price", "cost", "amount"), 1.0, 1000.0, True),
    (("percentage", "percent"), 0.0, 100.0, True),
    (("rating", "score"), 0.0, 5.0, True),
    (("latitude", "lat"), -90.0, 180.0, False),
    (("longitude", "lng", "lon"), -180.0, 360.0, False),
    (("weight",), 30.0, 200.0, True),
    (("height",), 140.0, 100.0, True),
    (("temperature", "temp"), -10.0, 60.0, True),
)


def _matches(name: str, needles: tuple[str, ...]) -> bool:
    return any(n in name for n in needles)


def generate_int(hint: str, *, rng: random.Random) -> int:
    """Return an integer in a range suited to a field named ``hint``."""

    name = hint.lower()
    for needles, low, high in _INT_RULES:
        if _matches(name, needles):
            return rng.randint(low, high)
    return rng.randint(0, 999)


def generate_long(hint: str, *, rng: random.Random) -> int:
    """Return a 64-bit integer; ids and sizes use the full positive range.

    ``timestamp``/``time`` hints yield epoch milliseconds within the last
    year.  Other hints use :func:`generate_int` ranges.
    """

    name = hint.lower()
    if "id" in name:
        return rng.randint(0, _LONG_MAX)
    if "timestamp" in name or "time" in name:
        return int(time.time() * 1000) - rng.randrange(_YEAR_MS)
    if "size" in name or "length" in name or "bytes" in name:
        return rng.randint(0, _LONG_MAX)
    return generate_int(hint, rng=rng)


def generate_short(hint: str, *, rng: random.Random) -> int:
    return rng.randint(*SHORT_RANGE)


def generate_byte(hint: str, *, rng: random.Random) -> int:
    return rng.randint(*BYTE_RANGE)


def generate_double(hint: str, *, rng: random.Random) -> float:
    """Return a float suited to ``hint``, mostly rounded to two decimals."""

    name = hint.lower()
    for needles, offset, span, rounded in _DOUBLE_RULES:
        if _matches(name, needles):
            value = rng.random() * span + offset
            return round(value, 2) if rounded else value
    return round(rng.random() * 1000.0, 2)


def generate_float(hint: str, *, rng: random.Random) -> float:
    """Return :func:`generate_double` narrowed to single precision.

    The result is the shortest decimal that survives a float32 round trip,
    so ``12.34`` stays ``12.34`` rather than ``12.340000152587891``.
    """

    value = generate_double(hint, rng=rng)
    narrowed: float = struct.unpack("f", struct.pack("f", value))[0]
    return float(f"{narrowed:.7g}")
