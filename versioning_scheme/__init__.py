"""versioning_scheme — validate, normalize, compare, and bump version strings.

Three schemes share one contract:

- ``monotonic``: ``COMPATIBILITY.RELEASE`` with an optional ``.0``
- ``dotted``: any number of non-negative integer segments
- ``perl``: dotted versions with Perl ``version.pm`` rules and 1000-carry

Usage:
    from versioning_scheme import get_scheme

    get_scheme("dotted").bump("1.2.3", {"part": -2})  # '1.3.0'
"""

from versioning_scheme.core import (
    AmbiguousBump,
    BumpOptions,
    InvalidOption,
    InvalidVersion,
    NormalizeOptions,
    SchemeConfig,
    Underflow,
    UnknownScheme,
    VersioningError,
    VersionScheme,
    get_config,
    set_config,
)
from versioning_scheme.registry import (
    bump,
    compare,
    get_scheme,
    is_valid,
    list_schemes,
    normalize,
    register_scheme,
    unregister_scheme,
)
from versioning_scheme.schemes import (
    BaseScheme,
    DottedScheme,
    MonotonicScheme,
    PerlScheme,
    PerlVersion,
)

__version__ = "0.1.0"

__all__ = [
    "AmbiguousBump",
    "BaseScheme",
    "BumpOptions",
    "DottedScheme",
    "InvalidOption",
    "InvalidVersion",
    "MonotonicScheme",
    "NormalizeOptions",
    "PerlScheme",
    "PerlVersion",
    "SchemeConfig",
    "Underflow",
    "UnknownScheme",
    "VersionScheme",
    "VersioningError",
    "bump",
    "compare",
    "get_config",
    "get_scheme",
    "is_valid",
    "list_schemes",
    "normalize",
    "register_scheme",
    "set_config",
    "unregister_scheme",
]
