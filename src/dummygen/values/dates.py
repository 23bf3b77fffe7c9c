"""Date and time generation keyed by field-name hints.

A hint selects a ``(start, end)`` range relative to a reference instant
``now``; the value is a uniformly random calendar day within the range
followed by an independent random time of day.  Date-only and timezone-aware
outputs are derived from the same naive value so they always agree.
"""

from __future__ import annotations

import calendar
import random
from datetime import date, datetime, timedelta
from datetime import time as dt_time

__all__ = [
    "BIRTH_RANGE",
    "date_range_for",
    "generate_date",
    "generate_date_time",
    "generate_local_date",
    "shift_months",
    "shift_years",
]

BIRTH_RANGE: tuple[datetime, datetime] = (
    datetime(1950, 1, 1, 0, 0),
    datetime(2005, 12, 31, 23, 59),
)


def shift_months(value: datetime, months: int) -> datetime:
    """Return ``value`` moved by ``months``, clamping the day to month end."""

    index = value.year * 12 + (value.month - 1) + months
    year, month = divmod(index, 12)
    day = min(value.day, calendar.monthrange(year, month + 1)[1])
    return value.replace(year=year, month=month + 1, day=day)


def shift_years(value: datetime, years: int) -> datetime:
    return shift_months(value, years * 12)


def date_range_for(hint: str, now: datetime) -> tuple[datetime, datetime]:
    """Return the ``(start, end)`` range for a field named ``hint``."""

    name = hint.lower()
    if "birth" in name or "born" in name:
        return BIRTH_RANGE
    if "created" in name or "registration" in name or "signup" in name:
        return shift_years(now, -5), now
    if "modified" in name or "updated" in name or "changed" in name:
        return shift_years(now, -1), now
    if "expir" in name or "due" in name or "deadline" in name:
        return now, shift_years(now, 2)
    if "start" in name:
        return shift_years(now, -2), shift_years(now, 1)
    if "end" in name or "finish" in name:
        return shift_years(now, -1), shift_years(now, 2)
    if "login" in name or "access" in name or "visit" in name:
        return now - timedelta(days=30), now
    if "order" in name or "purchase" in name or "payment" in name:
        return shift_months(now, -6), now
    if "scheduled" in name or "appointment" in name or "meeting" in name:
        return now, shift_months(now, 3)
    return shift_years(now, -1), now


def _between(start: datetime, end: datetime, rng: random.Random) -> datetime:
    first = start.date().toordinal()
    last = end.date().toordinal()
    day = date.fromordinal(rng.randint(first, last))
    moment = dt_time(rng.randrange(24), rng.randrange(60), rng.randrange(60))
    return datetime.combine(day, moment)


def generate_date_time(
    hint: str, *, rng: random.Random, now: datetime | None = None
) -> datetime:
    """Return a naive :class:`datetime` within the range for ``hint``."""

    reference = now if now is not None else datetime.now()
    start, end = date_range_for(hint, reference)
    return _between(start, end, rng)


def generate_local_date(
    hint: str, *, rng: random.Random, now: datetime | None = None
) -> date:
    return generate_date_time(hint, rng=rng, now=now).date()


def generate_date(
    hint: str, *, rng: random.Random, now: datetime | None = None
) -> datetime:
    """Return a timezone-aware instant in the local timezone."""

    return generate_date_time(hint, rng=rng, now=now).astimezone()
