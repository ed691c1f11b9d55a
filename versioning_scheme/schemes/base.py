"""Shared plumbing for the built-in schemes.

BaseScheme turns option arguments into option records, resolves
right-relative part indices, and derives sorting from ``compare``.
Subclasses supply the grammar and the arithmetic.
"""

from __future__ import annotations

import functools
from abc import ABC, abstractmethod
from typing import Any, Iterable

from versioning_scheme.core.types import (
    BumpOptions,
    InvalidOption,
    InvalidVersion,
    NormalizeOptions,
)


def coerce_bump_options(options: BumpOptions | dict[str, Any] | None) -> BumpOptions:
    if options is None:
        return BumpOptions()
    if isinstance(options, BumpOptions):
        return options
    if isinstance(options, dict):
        return BumpOptions.from_dict(options)
    raise InvalidOption("options", options, "expected BumpOptions or dict")


def coerce_normalize_options(
    options: NormalizeOptions | dict[str, Any] | None,
) -> NormalizeOptions:
    if options is None:
        return NormalizeOptions()
    if isinstance(options, NormalizeOptions):
        return options
    if isinstance(options, dict):
        return NormalizeOptions.from_dict(options)
    raise InvalidOption("options", options, "expected NormalizeOptions or dict")


def resolve_part(part: int, length: int) -> int:
    """Turn a possibly negative ``part`` into an absolute index.

    Raises InvalidOption unless ``-length <= part <= length - 1``.
    """
    if part < -length:
        raise InvalidOption("part", part, f"must not be smaller than -{length}")
    if part > length - 1:
        raise InvalidOption("part", part, f"must not be larger than {length - 1}")
    return length + part if part < 0 else part


def segment_int(text: str, version: str, scheme: str) -> int:
    """Convert one digit run, mapping interpreter conversion limits to InvalidVersion."""
    try:
        return int(text)
    except ValueError:
        raise InvalidVersion(version, scheme) from None


def sign(value: int) -> int:
    return (value > 0) - (value < 0)


class BaseScheme(ABC):
    """Abstract base for schemes. See ``VersionScheme`` for the contract."""

    name: str = ""

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"

    # ------------------------------------------------------------------
    # Contract
    # ------------------------------------------------------------------

    def is_valid(self, version: str) -> bool:
        if not isinstance(version, str):
            return False
        try:
            self.parse(version)
        except InvalidVersion:
            return False
        return True

    @abstractmethod
    def parse(self, version: str) -> tuple[int, ...]:
        """Return the integer segments of ``version`` or raise InvalidVersion."""

    @abstractmethod
    def normalize(
        self, version: str, options: NormalizeOptions | dict[str, Any] | None = None
    ) -> str:
        ...

    @abstractmethod
    def compare(self, v1: str, v2: str) -> int:
        ...

    @abstractmethod
    def bump(self, version: str, options: BumpOptions | dict[str, Any] | None = None) -> str:
        ...

    # ------------------------------------------------------------------
    # Derived helpers
    # ------------------------------------------------------------------

    def sort_versions(self, versions: Iterable[str], reverse: bool = False) -> list[str]:
        """Sort version strings by this scheme's ordering. Inputs are not normalized."""
        items = list(versions)
        for version in items:
            self.parse(version)
        return sorted(items, key=functools.cmp_to_key(self.compare), reverse=reverse)

    def latest_version(self, versions: Iterable[str]) -> str:
        """Return the greatest version from a list of version strings."""
        ordered = self.sort_versions(versions)
        if not ordered:
            raise ValueError("Empty version list")
        return ordered[-1]

    # ------------------------------------------------------------------
    # Helpers for subclasses
    # ------------------------------------------------------------------

    def _invalid(self, version: Any) -> InvalidVersion:
        return InvalidVersion(version, self.name)

    def _reject_parts(self, options: NormalizeOptions | dict[str, Any] | None) -> None:
        opts = coerce_normalize_options(options)
        if opts.parts is not None:
            raise InvalidOption("parts", opts.parts, f"not supported by the {self.name} scheme")
