"""versioning_scheme core — option records, errors, and configuration.

Import the most commonly used types from here for convenience:

    from versioning_scheme.core import BumpOptions, InvalidVersion, Underflow
"""

from versioning_scheme.core.config import SchemeConfig, get_config, set_config
from versioning_scheme.core.types import (
    AmbiguousBump,
    BumpOptions,
    InvalidOption,
    InvalidVersion,
    NormalizeOptions,
    Underflow,
    UnknownScheme,
    VersioningError,
    VersionScheme,
)

__all__ = [
    "AmbiguousBump",
    "BumpOptions",
    "InvalidOption",
    "InvalidVersion",
    "NormalizeOptions",
    "SchemeConfig",
    "Underflow",
    "UnknownScheme",
    "VersionScheme",
    "VersioningError",
    "get_config",
    "set_config",
]
