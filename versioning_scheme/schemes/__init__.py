"""Built-in versioning schemes.

Usage:
    from versioning_scheme.schemes import DottedScheme, MonotonicScheme, PerlScheme

    DottedScheme().bump("1.2.3", {"part": -2})   # '1.3.0'
    MonotonicScheme().bump("1.2", {"part": 0})   # '2.3'
    PerlScheme().normalize("1.02")               # 'v1.20.0'
"""

from versioning_scheme.schemes.base import BaseScheme
from versioning_scheme.schemes.dotted import DottedScheme
from versioning_scheme.schemes.monotonic import MonotonicScheme
from versioning_scheme.schemes.perl import PerlScheme
from versioning_scheme.schemes.perl_version import PerlVersion

__all__ = [
    "BaseScheme",
    "DottedScheme",
    "MonotonicScheme",
    "PerlScheme",
    "PerlVersion",
]
