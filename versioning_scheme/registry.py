"""Named registry of versioning schemes.

Maps scheme names to scheme instances so callers can pick a scheme from
configuration instead of importing a class:

    from versioning_scheme.registry import get_scheme

    scheme = get_scheme("perl")
    scheme.bump("1.2.999")  # 'v1.3.0'

The built-in schemes are registered at import time. Names are
case-insensitive.
"""

from __future__ import annotations

import logging
from typing import Any

from versioning_scheme.core.config import get_config
from versioning_scheme.core.types import (
    BumpOptions,
    InvalidOption,
    NormalizeOptions,
    UnknownScheme,
    VersionScheme,
)
from versioning_scheme.schemes.dotted import DottedScheme
from versioning_scheme.schemes.monotonic import MonotonicScheme
from versioning_scheme.schemes.perl import PerlScheme

logger = logging.getLogger(__name__)

_schemes: dict[str, VersionScheme] = {}


def register_scheme(
    scheme: VersionScheme, name: str | None = None, replace: bool = False
) -> None:
    """Register ``scheme`` under ``name`` (defaults to ``scheme.name``).

    Replacing an existing name requires ``replace=True`` unless the config
    has ``strict_registry`` turned off.
    """
    key = (name or getattr(scheme, "name", "") or "").strip().lower()
    if not key:
        raise InvalidOption("name", name, "scheme name must not be empty")

    if key in _schemes and _schemes[key] is not scheme:
        if not replace and get_config().strict_registry:
            raise InvalidOption("name", key, "scheme already registered, pass replace=True")
        logger.warning("Replacing registered scheme %r", key)

    _schemes[key] = scheme
    logger.debug("Registered scheme %r (%s)", key, type(scheme).__name__)


def unregister_scheme(name: str) -> VersionScheme:
    """Remove and return the scheme registered under ``name``."""
    key = name.strip().lower()
    if key not in _schemes:
        raise UnknownScheme(name, _schemes)
    return _schemes.pop(key)


def get_scheme(name: str | None = None) -> VersionScheme:
    """Look up a scheme by name, or the configured default when ``name`` is None."""
    key = (name if name is not None else get_config().default_scheme).strip().lower()
    try:
        return _schemes[key]
    except KeyError:
        raise UnknownScheme(key, _schemes) from None


def list_schemes() -> list[str]:
    """Sorted names of all registered schemes."""
    return sorted(_schemes)


# ---------------------------------------------------------------------------
# Convenience wrappers
# ---------------------------------------------------------------------------


def is_valid(version: str, *, scheme: str | None = None) -> bool:
    return get_scheme(scheme).is_valid(version)


def normalize(
    version: str,
    options: NormalizeOptions | dict[str, Any] | None = None,
    *,
    scheme: str | None = None,
) -> str:
    return get_scheme(scheme).normalize(version, options)


def compare(v1: str, v2: str, *, scheme: str | None = None) -> int:
    return get_scheme(scheme).compare(v1, v2)


def bump(
    version: str,
    options: BumpOptions | dict[str, Any] | None = None,
    *,
    scheme: str | None = None,
) -> str:
    return get_scheme(scheme).bump(version, options)


for _builtin in (MonotonicScheme(), DottedScheme(), PerlScheme()):
    register_scheme(_builtin)
