"""Global configuration for versioning_scheme.

Holds the default scheme name used by the registry and the registry's
replacement policy. Settings can be overridden via environment variables
or explicit configuration.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

_FALSE_VALUES = {"0", "false", "no", "off"}


@dataclass
class SchemeConfig:
    """Top-level configuration for scheme lookup."""

    # Registry
    default_scheme: str = "dotted"
    strict_registry: bool = True

    @classmethod
    def from_env(cls) -> SchemeConfig:
        """Build config from environment variables, falling back to defaults."""
        config = cls()

        if val := os.environ.get("VERSIONING_SCHEME_DEFAULT"):
            config.default_scheme = val.strip().lower()
        if val := os.environ.get("VERSIONING_SCHEME_STRICT_REGISTRY"):
            config.strict_registry = val.strip().lower() not in _FALSE_VALUES

        return config


# Module-level singleton
_config: SchemeConfig | None = None


def get_config() -> SchemeConfig:
    """Return the global config, lazily initialized from env."""
    global _config
    if _config is None:
        _config = SchemeConfig.from_env()
    return _config


def set_config(config: SchemeConfig | None) -> None:
    """Override the global config (useful in tests). ``None`` re-reads env on next use."""
    global _config
    _config = config
