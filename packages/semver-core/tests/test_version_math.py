# SPDX-License-Identifier: MIT
"""Unit tests for min/max reduction."""

import pytest

from semver_core import EmptyInputError, Version, max_version, min_version


class TestMinVersion:
    """Tests for min_version function."""

    def test_minimum(self):
        assert min_version(Version(1, 0, 0), Version(0, 0, 0), Version(0, 1, 0)) == Version(0, 0, 0)

    def test_single(self):
        assert min_version(Version(1, 2, 3)) == Version(1, 2, 3)

    def test_prerelease_is_lower(self):
        assert min_version(Version(1, 0, 0), Version(1, 0, 0, "rc.1")) == Version(1, 0, 0, "rc.1")

    def test_first_wins_on_tie(self):
        """Precedence-equal candidates keep the first one seen."""
        first = Version(1, 0, 0, None, "first")
        second = Version(1, 0, 0, None, "second")
        assert min_version(first, second) is first

    def test_empty(self):
        with pytest.raises(EmptyInputError) as exc_info:
            min_version()
        assert exc_info.value.operation == "minimum"


class TestMaxVersion:
    """Tests for max_version function."""

    def test_maximum(self):
        assert max_version(Version(1, 0, 0), Version(0, 0, 0), Version(0, 1, 0)) == Version(1, 0, 0)

    def test_unpacked_list(self):
        versions = [Version.parse(v) for v in ["1.0.0-beta.2", "1.0.0-beta.11", "1.0.0-alpha"]]
        assert max_version(*versions) == Version(1, 0, 0, "beta.11")

    def test_first_wins_on_tie(self):
        first = Version(2, 0, 0, None, "first")
        second = Version(2, 0, 0, None, "second")
        assert max_version(Version(1, 0, 0), first, second) is first

    def test_empty(self):
        with pytest.raises(EmptyInputError) as exc_info:
            max_version()
        assert exc_info.value.operation == "maximum"
