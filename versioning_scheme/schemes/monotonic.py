"""Monotonic versioning: ``COMPATIBILITY.RELEASE``.

COMPATIBILITY starts at 0 and RELEASE at 1, neither with a zero prefix.
An optional trailing ``.0`` is accepted for compatibility with semantic
versioning and stripped by ``normalize``. RELEASE always moves: bumping
COMPATIBILITY also steps RELEASE by one in the same direction.

    >>> scheme = MonotonicScheme()
    >>> scheme.bump("1.2")
    '1.3'
    >>> scheme.bump("1.2", {"part": 0})
    '2.3'
"""

from __future__ import annotations

import logging
import re
from typing import Any

from versioning_scheme.core.types import BumpOptions, NormalizeOptions, Underflow
from versioning_scheme.schemes.base import (
    BaseScheme,
    coerce_bump_options,
    resolve_part,
    segment_int,
    sign,
)

logger = logging.getLogger(__name__)

_RE = re.compile(r"\A(0|[1-9][0-9]*)\.([1-9][0-9]*)(\.0)?\Z")

COMPATIBILITY = 0
RELEASE = 1


class MonotonicScheme(BaseScheme):
    """Two-part monotonic versions, optionally with a ``.0`` suffix."""

    name = "monotonic"

    def _match(self, version: str) -> re.Match[str]:
        match = _RE.match(version) if isinstance(version, str) else None
        if match is None:
            raise self._invalid(version)
        return match

    def parse(self, version: str) -> tuple[int, ...]:
        match = self._match(version)
        return (
            segment_int(match.group(1), version, self.name),
            segment_int(match.group(2), version, self.name),
        )

    def normalize(
        self, version: str, options: NormalizeOptions | dict[str, Any] | None = None
    ) -> str:
        match = self._match(version)
        self.parse(version)
        self._reject_parts(options)
        return f"{match.group(1)}.{match.group(2)}"

    def compare(self, v1: str, v2: str) -> int:
        left = self.parse(v1)
        right = self.parse(v2)
        return (left > right) - (left < right)

    def bump(self, version: str, options: BumpOptions | dict[str, Any] | None = None) -> str:
        match = self._match(version)
        opts = coerce_bump_options(options)
        suffix = match.group(3) or ""
        parts = list(self.parse(version))

        idx = resolve_part(opts.part, len(parts))
        if idx == COMPATIBILITY:
            if parts[COMPATIBILITY] + opts.num < 0:
                raise Underflow(version, idx, "would result in a negative compatibility part")
            parts[COMPATIBILITY] += opts.num
            # release keeps moving with compatibility
            parts[RELEASE] += sign(opts.num)
        else:
            parts[RELEASE] += opts.num

        if parts[RELEASE] < 1:
            raise Underflow(version, RELEASE, "would result in a zero/negative release part")

        bumped = f"{parts[COMPATIBILITY]}.{parts[RELEASE]}{suffix}"
        logger.debug("Bumped %s -> %s (num=%d, part=%d)", version, bumped, opts.num, opts.part)
        return bumped
