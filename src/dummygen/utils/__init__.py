"""Shared helpers: typed exceptions and logging."""

from .errors import (
    ConstructionError,
    DummyGenError,
    FieldAssignmentError,
    InvalidRequestError,
    PopulationError,
)
from .logging import configure_logging, get_logger

__all__ = [
    "ConstructionError",
    "DummyGenError",
    "FieldAssignmentError",
    "InvalidRequestError",
    "PopulationError",
    "configure_logging",
    "get_logger",
]
