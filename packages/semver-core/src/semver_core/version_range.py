# SPDX-License-Identifier: MIT
"""Version ranges with inclusive or exclusive boundaries.

A range is rendered in interval notation, e.g. ``[1.0.0, 2.0.0)`` includes
1.0.0 and everything up to but excluding 2.0.0. A range without an upper
boundary renders as ``[1.0.0, )``. A range never lacks a lower boundary:
an absent minimum becomes an exclusive 0.0.0.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

from .compare import compare_versions
from .errors import InvalidRangeBoundaryError, MalformedRangeError
from .semver import Version, parse_version

# Version every range falls back to when no minimum is given
FLOOR_VERSION = Version(0, 0, 0)


@dataclass(frozen=True, slots=True)
class VersionRange:
    """Represents a set of versions between two boundaries.

    Attributes:
        minimum: Lower boundary (0.0.0, excluded, when not given)
        minimum_included: Whether the lower boundary itself is in the range
        maximum: Upper boundary, or None for no upper boundary
        maximum_included: Whether the upper boundary itself is in the range

    Raises:
        InvalidRangeBoundaryError: If an absent boundary is marked as included
    """

    minimum: Optional[Version] = None
    minimum_included: bool = False
    maximum: Optional[Version] = None
    maximum_included: bool = False

    def __post_init__(self) -> None:
        if isinstance(self.minimum, str):
            object.__setattr__(self, "minimum", parse_version(self.minimum))
        if isinstance(self.maximum, str):
            object.__setattr__(self, "maximum", parse_version(self.maximum))
        for boundary in ("minimum", "maximum"):
            value = getattr(self, boundary)
            if value is not None and not isinstance(value, Version):
                raise TypeError(
                    f"{boundary} must be a Version, a version string or None, "
                    f"got {type(value).__name__}"
                )

        if self.minimum is None:
            if self.minimum_included:
                raise InvalidRangeBoundaryError("lower")
            object.__setattr__(self, "minimum", FLOOR_VERSION)
        if self.maximum is None and self.maximum_included:
            raise InvalidRangeBoundaryError("upper")

    @classmethod
    def parse(cls, text: str) -> "VersionRange":
        """Parse a range in interval notation. See :func:`parse_range`."""
        return parse_range(text)

    def includes(self, version: Union[str, Version]) -> bool:
        """Return True if the version lies within this range.

        Examples:
            >>> r = VersionRange(Version(1, 0, 0), True, Version(2, 0, 0), False)
            >>> r.includes("1.5.0")
            True
            >>> r.includes("2.0.0")
            False
        """
        version = parse_version(version) if isinstance(version, str) else version

        minimum_comparison = compare_versions(self.minimum, version)
        if minimum_comparison > 0:
            return False
        if minimum_comparison == 0 and not self.minimum_included:
            return False

        if self.maximum is not None:
            maximum_comparison = compare_versions(self.maximum, version)
            if maximum_comparison < 0:
                return False
            if maximum_comparison == 0 and not self.maximum_included:
                return False

        return True

    def __contains__(self, version: Union[str, Version]) -> bool:
        return self.includes(version)

    @property
    def is_bounded(self) -> bool:
        """Return True if the range has an upper boundary."""
        return self.maximum is not None

    def __str__(self) -> str:
        left = "[" if self.minimum_included else "("
        right = "]" if self.maximum_included else ")"
        maximum = "" if self.maximum is None else str(self.maximum)
        return f"{left}{self.minimum}, {maximum}{right}"


def parse_range(text: str) -> VersionRange:
    """Parse a range from its interval notation.

    Accepts exactly what ``str(VersionRange)`` produces: an opening ``[`` or
    ``(``, the minimum, a comma followed by one space, an optional maximum,
    and a closing ``]`` or ``)``.

    Raises:
        MalformedRangeError: If the text is not in interval notation
        MalformedVersionError: If a boundary is not a valid version
        InvalidRangeBoundaryError: If ``]`` closes a range without a maximum

    Examples:
        >>> str(parse_range("[1.0.0, 2.0.0)"))
        '[1.0.0, 2.0.0)'
        >>> parse_range("(0.0.0, )").maximum is None
        True
    """
    if not isinstance(text, str):
        raise MalformedRangeError(text, f"Range must be a string, got {type(text).__name__}")
    if len(text) < 2 or text[0] not in "[(" or text[-1] not in "])":
        raise MalformedRangeError(text)

    minimum_text, separator, maximum_text = text[1:-1].partition(", ")
    if not separator or not minimum_text:
        raise MalformedRangeError(text)

    return VersionRange(
        minimum=parse_version(minimum_text),
        minimum_included=text[0] == "[",
        maximum=parse_version(maximum_text) if maximum_text else None,
        maximum_included=text[-1] == "]",
    )
