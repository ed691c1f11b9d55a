"""Perl-style versioning on top of PerlVersion.

Validation, normalization, and comparison are those of the parser in
``perl_version``. Bumping works on the normalized segments: except for the
first (most significant) segment, a segment bumped to 1000 or more
overflows into its left neighbour, so bumping ``v1.0.999`` gives
``v1.1.0``.

    >>> PerlScheme().bump("1.2.999")
    'v1.3.0'
"""

from __future__ import annotations

import logging
from typing import Any

from versioning_scheme.core.types import (
    AmbiguousBump,
    BumpOptions,
    NormalizeOptions,
    Underflow,
)
from versioning_scheme.schemes.base import BaseScheme, coerce_bump_options, resolve_part
from versioning_scheme.schemes.perl_version import MIN_NORMAL_SEGMENTS, PerlVersion

logger = logging.getLogger(__name__)

SEGMENT_LIMIT = 1000


class PerlScheme(BaseScheme):
    """Dotted versions with Perl ``version.pm`` normalization rules."""

    name = "perl"

    def parse(self, version: str) -> tuple[int, ...]:
        """Integer segments of the normal form, so always at least three of them.

        Decimal input is read the way ``normal`` reads it: ``1.02`` gives
        ``(1, 20, 0)``, not the digit groups as written.
        """
        segments = PerlVersion.parse(version).segments
        return segments + (0,) * (MIN_NORMAL_SEGMENTS - len(segments))

    def normalize(
        self, version: str, options: NormalizeOptions | dict[str, Any] | None = None
    ) -> str:
        parsed = PerlVersion.parse(version)
        self._reject_parts(options)
        return parsed.normal()

    def compare(self, v1: str, v2: str) -> int:
        return PerlVersion.parse(v1).compare(PerlVersion.parse(v2))

    def bump(self, version: str, options: BumpOptions | dict[str, Any] | None = None) -> str:
        parts = list(self.parse(version))
        opts = coerce_bump_options(options)

        idx = resolve_part(opts.part, len(parts))
        if parts[idx] + opts.num < 0:
            if idx == 0:
                raise Underflow(version, idx, "would result in a negative part")
            # borrowing from a more significant part is not defined
            raise AmbiguousBump(
                version, idx, f"part {idx} would need to borrow from part {idx - 1}"
            )

        i = idx
        carry = opts.num
        while True:
            total = parts[i] + carry
            if i == 0 or total < SEGMENT_LIMIT:
                parts[i] = total
                break
            parts[i] = total % SEGMENT_LIMIT
            carry = total // SEGMENT_LIMIT
            i -= 1

        if opts.reset_smaller and opts.num > 0:
            for j in range(idx + 1, len(parts)):
                parts[j] = 0

        bumped = PerlVersion(tuple(parts)).normal()
        logger.debug("Bumped %s -> %s (num=%d, part=%d)", version, bumped, opts.num, opts.part)
        return bumped
