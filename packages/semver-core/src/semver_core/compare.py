# SPDX-License-Identifier: MIT
"""Version precedence following SemVer 2.0.0.

Pre-release ordering compares dot-separated identifiers left to right:
numeric identifiers numerically, others by ASCII order, and numeric
identifiers always sort before alphanumeric ones.
Build metadata is ignored in comparisons per SemVer spec.
"""

from __future__ import annotations

from typing import Optional, Union

from .semver import Version, is_numeric_identifier, parse_version


def _as_version(version: Union[str, Version]) -> Version:
    return parse_version(version) if isinstance(version, str) else version


def _sign(a, b) -> int:
    return (a > b) - (a < b)


def _compare_prerelease(pre1: Optional[str], pre2: Optional[str]) -> int:
    """Compare two pre-release strings.

    Returns:
        -1 if pre1 < pre2
        0 if pre1 == pre2
        1 if pre1 > pre2

    Per SemVer: a version without pre-release has higher precedence
    than one with pre-release (1.0.0 > 1.0.0-alpha).
    """
    # No pre-release > any pre-release
    if pre1 is None and pre2 is None:
        return 0
    if pre1 is None:
        return 1
    if pre2 is None:
        return -1

    parts1 = pre1.split(".")
    parts2 = pre2.split(".")

    for p1, p2 in zip(parts1, parts2):
        is_num1 = is_numeric_identifier(p1)
        is_num2 = is_numeric_identifier(p2)

        if is_num1 and is_num2:
            # No leading zeros, so a longer numeral is a larger number
            result = _sign((len(p1), p1), (len(p2), p2))
        elif is_num1:
            # Numeric < alphanumeric per SemVer
            return -1
        elif is_num2:
            return 1
        else:
            result = _sign(p1, p2)
        if result:
            return result

    # All compared parts equal - longer pre-release has higher precedence
    return _sign(len(parts1), len(parts2))


def compare_versions(version1: Union[str, Version], version2: Union[str, Version]) -> int:
    """Compare the precedence of two semantic versions.

    Args:
        version1: First version (string or Version object)
        version2: Second version (string or Version object)

    Returns:
        -1 if version1 < version2
        0 if version1 and version2 have equal precedence
        1 if version1 > version2

    Raises:
        MalformedVersionError: If either version string is invalid

    Note:
        Build metadata is ignored, so ``0`` does not imply ``version1 == version2``.

    Examples:
        >>> compare_versions("1.0.0", "2.0.0")
        -1
        >>> compare_versions("1.0.0+build.1", "1.0.0+build.2")
        0
        >>> compare_versions("1.0.0-beta.11", "1.0.0-beta.2")
        1
        >>> compare_versions("1.0.0-rc.1", "1.0.0")
        -1
    """
    v1 = _as_version(version1)
    v2 = _as_version(version2)

    for attr in ("major", "minor", "patch"):
        result = _sign(getattr(v1, attr), getattr(v2, attr))
        if result:
            return result

    return _compare_prerelease(v1.prerelease, v2.prerelease)


def precedence_equal(version1: Union[str, Version], version2: Union[str, Version]) -> bool:
    """Return True if two versions have equal precedence (build metadata ignored)."""
    return compare_versions(version1, version2) == 0


def version_key(version: Union[str, Version]) -> tuple:
    """Return a sort key for a version, consistent with :func:`compare_versions`.

    Examples:
        >>> sorted(["1.0.0", "2.0.0", "1.0.0-alpha"], key=version_key)
        ['1.0.0-alpha', '1.0.0', '2.0.0']
    """
    v = _as_version(version)

    # Release sorts after every pre-release of the same triple
    if v.prerelease is None:
        prerelease_key: tuple = (1,)
    else:
        parts = []
        for part in v.prerelease_identifiers:
            if is_numeric_identifier(part):
                parts.append((0, len(part), part))
            else:
                parts.append((1, 0, part))
        prerelease_key = (0, tuple(parts))

    return (v.major, v.minor, v.patch, prerelease_key)
