"""Self-contained parser for Perl-style version strings.

Follows the lax rules of Perl's ``version`` module:

- Dotted-decimal: ``v`` followed by dot-separated integers (``v1``,
  ``v1.2.3.4``), or at least three dot-separated integers without the
  ``v`` (``1.2.3``). Without the ``v`` the leading integer may be omitted,
  so ``.1.2`` means ``v0.1.2``.
- Decimal: an integer with an optional fraction (``1``, ``1.``, ``1.02``,
  ``.5``). The fraction is right-padded to a multiple of three digits and
  read as three-digit segments, so ``1.02`` means ``v1.20.0`` and
  ``1.002003`` means ``v1.2.3``.

The canonical ("normal") rendering is ``v`` plus at least three segments.
"""

from __future__ import annotations

import functools
import re
from dataclasses import dataclass
from itertools import zip_longest

from versioning_scheme.core.types import InvalidVersion
from versioning_scheme.schemes.base import segment_int

_DOTTED_V_RE = re.compile(r"\Av([0-9]+(?:\.[0-9]+)*)\Z")
_DOTTED_RE = re.compile(r"\A([0-9]*(?:\.[0-9]+){2,})\Z")
_DECIMAL_RE = re.compile(r"\A([0-9]*)(?:\.([0-9]*))?\Z")

MIN_NORMAL_SEGMENTS = 3
DECIMAL_GROUP = 3


@functools.total_ordering
@dataclass(frozen=True, eq=False)
class PerlVersion:
    """A parsed Perl-style version."""

    segments: tuple[int, ...]
    dotted: bool = True

    @classmethod
    def parse(cls, version: str) -> PerlVersion:
        """Parse ``version`` in either dotted-decimal or decimal form."""
        if not isinstance(version, str):
            raise InvalidVersion(version, "perl")

        match = _DOTTED_V_RE.match(version) or _DOTTED_RE.match(version)
        if match:
            segments = match.group(1).split(".")
            return cls(
                tuple(segment_int(seg or "0", version, "perl") for seg in segments),
                dotted=True,
            )

        match = _DECIMAL_RE.match(version)
        if match is None:
            raise InvalidVersion(version, "perl")
        integer, fraction = match.group(1), match.group(2) or ""
        if not integer and not fraction:
            # rejects "", "." and "1x"-style leftovers
            raise InvalidVersion(version, "perl")

        segments = [segment_int(integer or "0", version, "perl")]
        if fraction:
            width = -(-len(fraction) // DECIMAL_GROUP) * DECIMAL_GROUP
            fraction = fraction.ljust(width, "0")
            segments.extend(
                int(fraction[i : i + DECIMAL_GROUP]) for i in range(0, width, DECIMAL_GROUP)
            )
        return cls(tuple(segments), dotted=False)

    def normal(self) -> str:
        """Canonical dotted-decimal rendering with a leading ``v``."""
        segments = list(self.segments)
        segments.extend(0 for _ in range(MIN_NORMAL_SEGMENTS - len(segments)))
        return "v" + ".".join(str(seg) for seg in segments)

    def compare(self, other: PerlVersion) -> int:
        for a, b in zip_longest(self.segments, other.segments, fillvalue=0):
            if a != b:
                return -1 if a < b else 1
        return 0

    def __str__(self) -> str:
        return self.normal()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PerlVersion):
            return NotImplemented
        return self.compare(other) == 0

    def __lt__(self, other: PerlVersion) -> bool:
        if not isinstance(other, PerlVersion):
            return NotImplemented
        return self.compare(other) < 0

    def __hash__(self) -> int:
        segments = list(self.segments)
        while segments and segments[-1] == 0:
            segments.pop()
        return hash(tuple(segments))
