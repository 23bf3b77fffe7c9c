"""dummygen: placeholder data for arbitrary Python record types.

Populate any zero-argument-constructible class (plain classes, dataclasses,
slotted classes, pydantic models) from its field names and annotations::

    from dummygen import DummyConfig, generate

    user = generate(User)
    turkish = generate(User, DummyConfig(language="tr"))
"""

from __future__ import annotations

from .api import generate, generate_many
from .config import DummyConfig, DummyConfigBuilder, Language, load_config
from .introspect import Byte, Char, Float32, Instant, Long, Short
from .populate import ObjectPopulator, populate
from .utils.errors import (
    ConstructionError,
    DummyGenError,
    FieldAssignmentError,
    InvalidRequestError,
    PopulationError,
)

__version__ = "0.1.0"

__all__ = [
    "Byte",
    "Char",
    "ConstructionError",
    "DummyConfig",
    "DummyConfigBuilder",
    "DummyGenError",
    "FieldAssignmentError",
    "Float32",
    "Instant",
    "InvalidRequestError",
    "Language",
    "Long",
    "ObjectPopulator",
    "PopulationError",
    "Short",
    "__version__",
    "generate",
    "generate_many",
    "load_config",
    "populate",
]
