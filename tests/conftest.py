"""Shared fixtures for the versioning_scheme test suite."""

from __future__ import annotations

import pytest

from versioning_scheme import registry
from versioning_scheme.core.config import SchemeConfig, set_config


@pytest.fixture(autouse=True)
def _isolated_config(monkeypatch):
    """Start each test from default config and the built-in registry."""
    monkeypatch.delenv("VERSIONING_SCHEME_DEFAULT", raising=False)
    monkeypatch.delenv("VERSIONING_SCHEME_STRICT_REGISTRY", raising=False)
    set_config(SchemeConfig())
    saved = dict(registry._schemes)
    yield
    registry._schemes.clear()
    registry._schemes.update(saved)
    set_config(None)
