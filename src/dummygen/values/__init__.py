"""Scalar value generators driven by field-name hints."""

from .dates import generate_date, generate_date_time, generate_local_date
from .generator import ValueGenerator
from .numbers import generate_double, generate_float, generate_int, generate_long
from .seed import rng_for, type_key
from .strings import generate_string

__all__ = [
    "ValueGenerator",
    "generate_date",
    "generate_date_time",
    "generate_double",
    "generate_float",
    "generate_int",
    "generate_local_date",
    "generate_long",
    "generate_string",
    "rng_for",
    "type_key",
]
