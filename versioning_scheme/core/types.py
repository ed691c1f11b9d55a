"""Core data types for versioning schemes.

Option records, the error taxonomy, and the structural interface every
scheme implements. Option records round-trip through to_dict/from_dict so
callers can pass plain dicts where that is more convenient.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from typing import Any, Iterable, Protocol


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------


class VersioningError(ValueError):
    """Base class for every failure raised by a versioning scheme."""


class InvalidVersion(VersioningError):
    """Raised when a string does not match a scheme's grammar."""

    def __init__(self, version: Any, scheme: str = "") -> None:
        self.version = version
        self.scheme = scheme
        where = f" for scheme '{scheme}'" if scheme else ""
        super().__init__(f"Invalid version {version!r}{where}")


class InvalidOption(VersioningError):
    """Raised when an option is structurally invalid."""

    def __init__(self, option: str, value: Any, reason: str) -> None:
        self.option = option
        self.value = value
        super().__init__(f"Invalid '{option}' ({value!r}): {reason}")


class Underflow(VersioningError):
    """Raised when a bump would drive a segment below its floor."""

    def __init__(self, version: str, index: int, reason: str) -> None:
        self.version = version
        self.index = index
        super().__init__(f"Cannot decrease version {version!r}: {reason}")


class AmbiguousBump(Underflow):
    """Raised when a negative step could only be satisfied by borrowing
    from a more significant segment, which no scheme defines."""


class UnknownScheme(VersioningError, KeyError):
    """Raised when a scheme name is not registered."""

    def __init__(self, name: str, known: Iterable[str]) -> None:
        self.name = name
        super().__init__(f"Unknown scheme {name!r} (known: {', '.join(sorted(known))})")

    def __str__(self) -> str:
        return str(self.args[0])


# ---------------------------------------------------------------------------
# Options
# ---------------------------------------------------------------------------


def _check_keys(cls: type, data: dict[str, Any]) -> None:
    known = {f.name for f in fields(cls)}
    for key in data:
        if key not in known:
            raise InvalidOption(key, data[key], f"unknown option, expected one of {sorted(known)}")


@dataclass(frozen=True)
class BumpOptions:
    """How to bump a version.

    num: signed step size, never zero.
    part: segment index; negative values count from the rightmost segment.
    reset_smaller: zero the segments right of ``part`` after a positive bump.
    """

    num: int = 1
    part: int = -1
    reset_smaller: bool = True

    def __post_init__(self) -> None:
        if not isinstance(self.num, int) or isinstance(self.num, bool):
            raise InvalidOption("num", self.num, "must be an integer")
        if self.num == 0:
            raise InvalidOption("num", self.num, "must be non-zero")
        if not isinstance(self.part, int) or isinstance(self.part, bool):
            raise InvalidOption("part", self.part, "must be an integer")
        if not isinstance(self.reset_smaller, bool):
            raise InvalidOption("reset_smaller", self.reset_smaller, "must be a boolean")

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> BumpOptions:
        _check_keys(cls, data)
        return cls(
            num=data.get("num", 1),
            part=data.get("part", -1),
            reset_smaller=data.get("reset_smaller", True),
        )


@dataclass(frozen=True)
class NormalizeOptions:
    """Scheme-specific normalization knobs. Only the dotted scheme uses ``parts``."""

    parts: int | None = None

    def __post_init__(self) -> None:
        if self.parts is None:
            return
        if not isinstance(self.parts, int) or isinstance(self.parts, bool):
            raise InvalidOption("parts", self.parts, "must be an integer")
        if self.parts < 1:
            raise InvalidOption("parts", self.parts, "must at least be 1")

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> NormalizeOptions:
        _check_keys(cls, data)
        return cls(parts=data.get("parts"))


# ---------------------------------------------------------------------------
# Protocols (structural typing interfaces)
# ---------------------------------------------------------------------------


class VersionScheme(Protocol):
    """The operations every versioning scheme provides.

    Any object with these methods can be registered, no inheritance needed.
    All operations are pure: identical inputs give identical outputs or
    identical failures.
    """

    name: str

    def is_valid(self, version: str) -> bool:
        """Whether ``version`` matches the grammar. Never raises."""
        ...

    def parse(self, version: str) -> tuple[int, ...]:
        """Integer segments, most significant first."""
        ...

    def normalize(
        self, version: str, options: NormalizeOptions | dict[str, Any] | None = None
    ) -> str:
        """Canonical rendering of ``version``."""
        ...

    def compare(self, v1: str, v2: str) -> int:
        """Three-way comparison returning -1, 0 or 1."""
        ...

    def bump(self, version: str, options: BumpOptions | dict[str, Any] | None = None) -> str:
        """Return a new version with one segment stepped by ``options.num``."""
        ...

    def sort_versions(self, versions: Iterable[str], reverse: bool = False) -> list[str]:
        ...

    def latest_version(self, versions: Iterable[str]) -> str:
        ...
