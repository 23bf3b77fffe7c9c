"""Conversion of generated object graphs into JSON-compatible data."""

from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Any

from .introspect import fields

__all__ = ["to_plain"]


def to_plain(value: Any) -> Any:
    """Return ``value`` as nested dicts, lists and JSON scalars.

    Records become dicts of their populatable fields (dataclasses use their
    declared fields); enums become their values; dates become ISO 8601
    strings; decimals become strings; sets become lists.
    """

    if value is None or isinstance(value, (bool, int, float, str)):
        return value
    if isinstance(value, Enum):
        return to_plain(value.value)
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if isinstance(value, Decimal):
        return str(value)
    if isinstance(value, Mapping):
        return {str(to_plain(k)): to_plain(v) for k, v in value.items()}
    if isinstance(value, (list, tuple, set, frozenset)):
        return [to_plain(v) for v in value]
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {f.name: to_plain(getattr(value, f.name)) for f in dataclasses.fields(value)}
    return {
        f.name: to_plain(getattr(value, f.name, None))
        for f in fields(type(value))
    }
