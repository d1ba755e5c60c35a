# SPDX-License-Identifier: MIT
"""Minimum and maximum of a set of versions by precedence."""

from __future__ import annotations

from .compare import compare_versions
from .errors import EmptyInputError
from .semver import Version


def min_version(*versions: Version) -> Version:
    """Return the version with the lowest precedence.

    The first of several precedence-equal candidates wins.

    Raises:
        EmptyInputError: If no versions are given
    """
    if not versions:
        raise EmptyInputError("minimum")
    minimum = versions[0]
    for version in versions[1:]:
        if compare_versions(minimum, version) > 0:
            minimum = version
    return minimum


def max_version(*versions: Version) -> Version:
    """Return the version with the highest precedence.

    The first of several precedence-equal candidates wins.

    Raises:
        EmptyInputError: If no versions are given
    """
    if not versions:
        raise EmptyInputError("maximum")
    maximum = versions[0]
    for version in versions[1:]:
        if compare_versions(maximum, version) < 0:
            maximum = version
    return maximum
