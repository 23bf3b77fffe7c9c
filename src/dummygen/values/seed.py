"""Seeding helpers for per-call random sources.

Every top-level generation call owns its own :class:`random.Random`.  When
the configuration carries a ``seed``, the stream is derived from that seed
and the requested type's qualified name using SHA-256 with domain
separation, so that the same seed and the same type always produce the same
values while different types get unrelated streams.  Without a seed the RNG
is seeded from the operating system.

No module-level RNG is ever reseeded or shared between calls.
"""

from __future__ import annotations

import hashlib
import random
import re
import unicodedata
from typing import Final

from dummygen.config import DummyConfig

# ---------------------------------------------------------------------------
# Domain separation constants
# ---------------------------------------------------------------------------

_NS_RNG: Final = b"dummygen/v1/rng"


# ---------------------------------------------------------------------------
# Canonicalization
# ---------------------------------------------------------------------------


def canonicalize_key(key: str) -> str:
    """Normalize a derivation key for hashing.

    The normalization steps are:

    - strip leading/trailing whitespace
    - collapse internal whitespace runs to a single space
    - NFC normalize

    Case is preserved since qualified type names are case-sensitive.
    """

    normalized = unicodedata.normalize("NFC", key.strip())
    return re.sub(r"\s+", " ", normalized)


def type_key(tp: object) -> str:
    """Return the derivation key for a type: ``module.qualname``."""

    module = getattr(tp, "__module__", "")
    qualname = getattr(tp, "__qualname__", None) or repr(tp)
    return f"{module}.{qualname}"


# ---------------------------------------------------------------------------
# Reproducible RNG
# ---------------------------------------------------------------------------


def seed_digest(seed: int, key: str) -> bytes:
    """Return the SHA-256 digest binding ``seed`` to ``key``."""

    data = _NS_RNG + str(seed).encode("ascii") + b"\x00" + canonicalize_key(key).encode("utf-8")
    return hashlib.sha256(data).digest()


def rng_for(cfg: DummyConfig, *, key: str) -> random.Random:
    """Return a fresh RNG for one generation call.

    Seeded configurations yield a reproducible stream for ``key``; unseeded
    ones yield an OS-seeded stream.
    """

    if cfg.seed is None:
        return random.Random()
    seed_int = int.from_bytes(seed_digest(cfg.seed, key), "big")
    return random.Random(seed_int)


__all__ = ["canonicalize_key", "rng_for", "seed_digest", "type_key"]
