# SPDX-License-Identifier: MIT
"""Semantic version parsing and validation.

Supports MAJOR.MINOR.PATCH format with optional pre-release and build metadata:
- Pre-release: -alpha, -alpha.1, -0.3.7, -x.7.z.92
- Build metadata: +001, +build.123, +exp.sha.5114f85

The grammar (SemVer 2.0.0, ASCII only, anchored at both ends)::

    version    := numeric "." numeric "." numeric ["-" prerelease] ["+" build]
    numeric    := "0" | [1-9][0-9]*
    prerelease := prid ("." prid)*
    prid       := numeric | [0-9A-Za-z-]* containing at least one non-digit
    build      := bid ("." bid)*
    bid        := [0-9A-Za-z-]+
"""

from __future__ import annotations

import string
import sys
from dataclasses import dataclass
from typing import Any, Optional

from .errors import (
    InvalidFieldError,
    InvalidIdentifierError,
    MalformedVersionError,
)

_DIGITS = frozenset(string.digits)
_IDENTIFIER_CHARACTERS = frozenset(string.ascii_letters + string.digits + "-")


def _is_digits(text: str) -> bool:
    return bool(text) and all(c in _DIGITS for c in text)


def _is_numeric(text: str) -> bool:
    """numeric := "0" | [1-9][0-9]*"""
    return _is_digits(text) and (text == "0" or text[0] != "0")


def _is_build_identifier(identifier: str) -> bool:
    """bid := [0-9A-Za-z-]+"""
    return bool(identifier) and all(c in _IDENTIFIER_CHARACTERS for c in identifier)


def _is_prerelease_identifier(identifier: str) -> bool:
    """prid := numeric | identifier with at least one non-digit."""
    if not _is_build_identifier(identifier):
        return False
    if _is_digits(identifier):
        return _is_numeric(identifier)
    return True


def _invalid_identifier(text: str, rule) -> Optional[str]:
    """Return the first identifier in ``text`` rejected by ``rule``, if any."""
    for identifier in text.split("."):
        if not rule(identifier):
            return identifier
    return None


def is_numeric_identifier(identifier: str) -> bool:
    """Return True if a pre-release identifier takes numeric precedence."""
    return _is_digits(identifier)


@dataclass(frozen=True, slots=True)
class Version:
    """Represents a semantic version.

    Equality (``==`` and ``hash``) covers all five fields, build metadata
    included. Ordering (``<``, ``<=``, ``>``, ``>=``, :meth:`compare`) follows
    SemVer precedence, which ignores build metadata. Two versions may therefore
    be neither less nor greater than each other and still compare unequal;
    use :meth:`precedence_equals` to ask whether they share precedence.

    Attributes:
        major: Major version number (breaking changes)
        minor: Minor version number (new features, backward compatible)
        patch: Patch version number (bug fixes, backward compatible)
        prerelease: Optional pre-release identifiers (e.g., "alpha.1", "0.3.7")
        build: Optional build metadata (e.g., "001", "exp.sha.5114f85")

    Raises:
        InvalidFieldError: If a numeric field is negative or not an integer
        InvalidIdentifierError: If pre-release or build metadata is malformed
    """

    major: int
    minor: int
    patch: int
    prerelease: Optional[str] = None
    build: Optional[str] = None

    def __post_init__(self) -> None:
        for field_name in ("major", "minor", "patch"):
            value = getattr(self, field_name)
            if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                raise InvalidFieldError(field_name, value)

        for field_name in ("prerelease", "build"):
            value = getattr(self, field_name)
            if value is not None and not isinstance(value, str):
                raise TypeError(f"{field_name} must be a string or None, got {type(value).__name__}")

        # Empty strings mean "absent"
        if not self.prerelease:
            object.__setattr__(self, "prerelease", None)
        if not self.build:
            object.__setattr__(self, "build", None)

        if self.prerelease is not None:
            bad = _invalid_identifier(self.prerelease, _is_prerelease_identifier)
            if bad is not None:
                raise InvalidIdentifierError("pre-release", self.prerelease, bad)
        if self.build is not None:
            bad = _invalid_identifier(self.build, _is_build_identifier)
            if bad is not None:
                raise InvalidIdentifierError("build", self.build, bad)

    @classmethod
    def parse(cls, version_string: str) -> "Version":
        """Parse a version string. See :func:`parse_version`."""
        return parse_version(version_string)

    def __str__(self) -> str:
        """Return the canonical string representation of the version."""
        version = f"{self.major}.{self.minor}.{self.patch}"
        if self.prerelease is not None:
            version += f"-{self.prerelease}"
        if self.build is not None:
            version += f"+{self.build}"
        return version

    def compare(self, other: "Version | str") -> int:
        """Compare precedence with another version, returning -1, 0 or 1."""
        from .compare import compare_versions

        return compare_versions(self, other)

    def precedence_equals(self, other: "Version | str") -> bool:
        """Return True if both versions have the same precedence.

        Unlike ``==``, build metadata is ignored:

            >>> Version.parse("1.0.0+a").precedence_equals("1.0.0+b")
            True
        """
        return self.compare(other) == 0

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) < 0

    def __le__(self, other: Any) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) <= 0

    def __gt__(self, other: Any) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) > 0

    def __ge__(self, other: Any) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) >= 0

    @property
    def is_prerelease(self) -> bool:
        """Return True if this is a pre-release version."""
        return self.prerelease is not None

    @property
    def is_stable(self) -> bool:
        """Return True once the public API is declared stable (major > 0)."""
        return self.major > 0

    @property
    def base_version(self) -> str:
        """Return the base version without pre-release or build metadata."""
        return f"{self.major}.{self.minor}.{self.patch}"

    @property
    def prerelease_identifiers(self) -> tuple[str, ...]:
        """Return the dot-separated pre-release identifiers."""
        return tuple(self.prerelease.split(".")) if self.prerelease else ()

    @property
    def build_identifiers(self) -> tuple[str, ...]:
        """Return the dot-separated build metadata identifiers."""
        return tuple(self.build.split(".")) if self.build else ()


def _match(version_string: str) -> Optional[tuple[str, str, str, Optional[str], Optional[str]]]:
    """Match ``version_string`` against the grammar.

    Returns the five fields as text on success, or None if any rule fails.
    """
    rest, has_build, build = version_string.partition("+")
    if has_build and _invalid_identifier(build, _is_build_identifier) is not None:
        return None

    # Numeric fields cannot contain a hyphen, so the first one starts the pre-release
    core, has_prerelease, prerelease = rest.partition("-")
    if has_prerelease and _invalid_identifier(prerelease, _is_prerelease_identifier) is not None:
        return None

    numbers = core.split(".")
    if len(numbers) != 3 or not all(_is_numeric(n) for n in numbers):
        return None

    major, minor, patch = numbers
    return (
        major,
        minor,
        patch,
        prerelease if has_prerelease else None,
        build if has_build else None,
    )


def parse_version(version_string: str) -> Version:
    """Parse a semantic version string into a Version object.

    The whole string must match; surrounding whitespace is not stripped.

    Args:
        version_string: A string following semantic versioning format
            (MAJOR.MINOR.PATCH[-prerelease][+build])

    Returns:
        A Version object with parsed components

    Raises:
        MalformedVersionError: If the string does not follow semantic versioning

    Examples:
        >>> parse_version("1.2.3")
        Version(major=1, minor=2, patch=3, prerelease=None, build=None)

        >>> parse_version("1.0.0-alpha.1")
        Version(major=1, minor=0, patch=0, prerelease='alpha.1', build=None)

        >>> parse_version("1.2.3-alpha.1+001")
        Version(major=1, minor=2, patch=3, prerelease='alpha.1', build='001')
    """
    if not isinstance(version_string, str):
        raise MalformedVersionError(
            version_string,
            f"Version must be a string, got {type(version_string).__name__}",
        )

    fields = _match(version_string)
    if fields is None:
        raise MalformedVersionError(version_string)

    major, minor, patch, prerelease, build = fields
    try:
        numbers = [int(n) for n in (major, minor, patch)]
    except ValueError:
        # int() refuses strings longer than sys.get_int_max_str_digits()
        raise MalformedVersionError(
            version_string,
            f"Numeric field of {version_string!r} exceeds {sys.get_int_max_str_digits()} digits",
        ) from None
    return Version(*numbers, prerelease=prerelease, build=build)


def is_valid_semver(version_string: str) -> bool:
    """Check if a string is a valid semantic version.

    Examples:
        >>> is_valid_semver("1.0.0")
        True
        >>> is_valid_semver("1.0")
        False
        >>> is_valid_semver("1.0.0-alpha")
        True
    """
    try:
        parse_version(version_string)
    except MalformedVersionError:
        return False
    return True
