# SPDX-License-Identifier: MIT
"""Semantic version parsing, precedence and ranges.

This package provides utilities for parsing and comparing semantic versions
following the SemVer 2.0.0 specification, and for testing whether a version
lies within a range.

Example:
    >>> from semver_core import parse_version, compare_versions, VersionRange
    >>>
    >>> version = parse_version("1.2.3-alpha.1+001")
    >>> version.major
    1
    >>> version.prerelease
    'alpha.1'
    >>>
    >>> compare_versions("1.0.0-beta.2", "1.0.0-beta.11")
    -1
    >>>
    >>> "1.5.0" in VersionRange.parse("[1.0.0, 2.0.0)")
    True
"""

__version__ = "0.1.0"

from .errors import (
    VERSION_GRAMMAR,
    EmptyInputError,
    InvalidFieldError,
    InvalidIdentifierError,
    InvalidRangeBoundaryError,
    MalformedRangeError,
    MalformedVersionError,
    VersionError,
)
from .semver import (
    Version,
    parse_version,
    is_valid_semver,
)
from .compare import (
    compare_versions,
    precedence_equal,
    version_key,
)
from .version_range import (
    FLOOR_VERSION,
    VersionRange,
    parse_range,
)
from .version_math import (
    max_version,
    min_version,
)

__all__ = [
    # Version parsing
    "Version",
    "parse_version",
    "is_valid_semver",
    # Version comparison
    "compare_versions",
    "precedence_equal",
    "version_key",
    # Ranges
    "VersionRange",
    "parse_range",
    "FLOOR_VERSION",
    # Reduction
    "min_version",
    "max_version",
    # Errors
    "VERSION_GRAMMAR",
    "VersionError",
    "MalformedVersionError",
    "InvalidFieldError",
    "InvalidIdentifierError",
    "InvalidRangeBoundaryError",
    "MalformedRangeError",
    "EmptyInputError",
]
