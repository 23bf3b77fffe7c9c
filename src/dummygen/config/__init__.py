"""Configuration loading utilities.

Precedence of configuration sources:
    1. Package defaults (``defaults.yml``)
    2. Optional user-provided YAML passed to :func:`load_config`
    3. ``DUMMYGEN_*`` environment variables
"""

from .schema import DummyConfig, DummyConfigBuilder, Language, load_config

__all__ = ["DummyConfig", "DummyConfigBuilder", "Language", "load_config"]
