"""Typed configuration schema, builder and loader for the dummygen package."""

from __future__ import annotations

import os
from collections.abc import Mapping
from enum import Enum
from importlib import resources as importlib_resources
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, field_validator

DEFAULT_LANGUAGE = "en"
DEFAULT_MAX_LIST_SIZE = 3

# ---------------------------------------------------------------------------
# Language tags
# ---------------------------------------------------------------------------


class Language(str, Enum):
    """Languages with dedicated word lists."""

    EN = "en"
    TR = "tr"

    @classmethod
    def resolve(cls, code: str | None) -> "Language":
        """Return the language for ``code``; unknown codes map to English."""

        try:
            return cls((code or DEFAULT_LANGUAGE).strip().lower())
        except ValueError:
            return cls.EN


# ---------------------------------------------------------------------------
# Pydantic model
# ---------------------------------------------------------------------------


class DummyConfig(BaseModel):
    """Immutable settings shared by every generator during one call."""

    language: str = DEFAULT_LANGUAGE
    meaningful_content: bool = True
    max_list_size: int = DEFAULT_MAX_LIST_SIZE
    allow_null_fields: bool = False
    seed: int | None = None

    model_config = ConfigDict(extra="forbid", frozen=True)

    @field_validator("language")
    @classmethod
    def _normalize_language(cls, value: str) -> str:
        return value.strip().lower() or DEFAULT_LANGUAGE

    @property
    def lang(self) -> Language:
        """Resolved language; unknown tags fall back to English."""

        return Language.resolve(self.language)

    @property
    def collection_upper_bound(self) -> int:
        """Upper bound for generated collection sizes, never below one."""

        return max(1, self.max_list_size)

    @classmethod
    def default(cls) -> "DummyConfig":
        """Return the default configuration (English, meaningful, 3, no nulls)."""

        return cls()

    @classmethod
    def builder(cls) -> "DummyConfigBuilder":
        return DummyConfigBuilder()


class DummyConfigBuilder:
    """Fluent constructor for :class:`DummyConfig`.

    Non-positive list sizes passed to :meth:`max_list_size` are replaced by
    the default size.
    """

    def __init__(self) -> None:
        self._values: dict[str, Any] = {}

    def language(self, language: str) -> "DummyConfigBuilder":
        self._values["language"] = language
        return self

    def meaningful_content(self, enabled: bool) -> "DummyConfigBuilder":
        self._values["meaningful_content"] = enabled
        return self

    def max_list_size(self, size: int | None) -> "DummyConfigBuilder":
        self._values["max_list_size"] = (
            size if size is not None and size > 0 else DEFAULT_MAX_LIST_SIZE
        )
        return self

    def allow_null_fields(self, allowed: bool) -> "DummyConfigBuilder":
        self._values["allow_null_fields"] = allowed
        return self

    def seed(self, seed: int | None) -> "DummyConfigBuilder":
        self._values["seed"] = seed
        return self

    def build(self) -> DummyConfig:
        return DummyConfig(**self._values)


# ---------------------------------------------------------------------------
# Loader utilities
# ---------------------------------------------------------------------------

ENV_PREFIX = "DUMMYGEN_"
_ENV_FIELDS = ("language", "meaningful_content", "max_list_size", "allow_null_fields", "seed")


def deep_merge_dicts(a: dict[str, Any], b: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge mapping ``b`` onto ``a`` returning a new dict."""

    result: dict[str, Any] = dict(a)
    for key, b_val in b.items():
        if key in result and isinstance(result[key], dict) and isinstance(b_val, dict):
            result[key] = deep_merge_dicts(result[key], b_val)
        else:
            result[key] = b_val
    return result


def _env_overrides(environ: Mapping[str, str]) -> dict[str, Any]:
    overrides: dict[str, Any] = {}
    for name in _ENV_FIELDS:
        raw = environ.get(ENV_PREFIX + name.upper())
        if raw is None:
            continue
        # pydantic coerces "true"/"0"/"42"; an empty seed clears it
        overrides[name] = None if name == "seed" and not raw.strip() else raw
    return overrides


def load_config(
    path: str | os.PathLike[str] | None = None,
    *,
    env: Mapping[str, str] | None = None,
) -> DummyConfig:
    """Load configuration from defaults and optional user overrides.

    Precedence of sources: package ``defaults.yml`` < user-provided YAML <
    ``DUMMYGEN_*`` environment variables.
    """

    with (
        importlib_resources.files("dummygen.config")
        .joinpath("defaults.yml")
        .open("r", encoding="utf-8") as f
    ):
        defaults = yaml.safe_load(f) or {}

    if path is not None:
        with Path(path).open("r", encoding="utf-8") as f:
            overrides = yaml.safe_load(f) or {}
        merged = deep_merge_dicts(defaults, overrides)
    else:
        merged = defaults

    environ = env if env is not None else os.environ
    merged = deep_merge_dicts(merged, _env_overrides(environ))

    return DummyConfig.model_validate(merged)


__all__ = [
    "DEFAULT_LANGUAGE",
    "DEFAULT_MAX_LIST_SIZE",
    "DummyConfig",
    "DummyConfigBuilder",
    "Language",
    "deep_merge_dicts",
    "load_config",
]
