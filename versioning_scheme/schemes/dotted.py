"""Dotted versioning: one or more non-negative integers separated by dots.

Examples of valid versions: ``1``, ``1.2``, ``1.100.0394``, ``3.4.5.6``.
This is not the Perl scheme: there is no leading ``v`` and segments keep
the digits they were written with, including leading zeros.
"""

from __future__ import annotations

import logging
import re
from itertools import zip_longest
from typing import Any

from versioning_scheme.core.types import BumpOptions, NormalizeOptions, Underflow
from versioning_scheme.schemes.base import (
    BaseScheme,
    coerce_bump_options,
    coerce_normalize_options,
    resolve_part,
    segment_int,
)

logger = logging.getLogger(__name__)

_RE = re.compile(r"\A[0-9]+(?:\.[0-9]+)*\Z")


def _pad(value: int, width: int) -> str:
    """Render ``value`` zero-padded to ``width``; wider values keep all digits."""
    return f"{value:0{width}d}"


class DottedScheme(BaseScheme):
    """General N-part dotted integer versions."""

    name = "dotted"

    def _split(self, version: str) -> list[str]:
        if not isinstance(version, str) or not _RE.match(version):
            raise self._invalid(version)
        return version.split(".")

    def parse(self, version: str) -> tuple[int, ...]:
        return tuple(segment_int(seg, version, self.name) for seg in self._split(version))

    def normalize(
        self, version: str, options: NormalizeOptions | dict[str, Any] | None = None
    ) -> str:
        """Validate ``version``; with ``parts``, truncate or zero-extend to that many segments."""
        self.parse(version)
        segments = version.split(".")
        opts = coerce_normalize_options(options)
        if opts.parts is not None:
            segments = segments[: opts.parts]
            segments.extend("0" for _ in range(opts.parts - len(segments)))
        return ".".join(segments)

    def compare(self, v1: str, v2: str) -> int:
        left = self.parse(v1)
        right = self.parse(v2)
        for a, b in zip_longest(left, right, fillvalue=0):
            if a != b:
                return -1 if a < b else 1
        return 0

    def bump(self, version: str, options: BumpOptions | dict[str, Any] | None = None) -> str:
        values = self.parse(version)
        segments = version.split(".")
        opts = coerce_bump_options(options)

        idx = resolve_part(opts.part, len(segments))
        current = segments[idx]
        value = values[idx] + opts.num
        if value < 0:
            raise Underflow(version, idx, "would result in a negative part")
        segments[idx] = _pad(value, len(current))

        if opts.reset_smaller and opts.num > 0:
            for i in range(idx + 1, len(segments)):
                segments[i] = _pad(0, len(segments[i]))

        bumped = ".".join(segments)
        logger.debug("Bumped %s -> %s (num=%d, part=%d)", version, bumped, opts.num, opts.part)
        return bumped
