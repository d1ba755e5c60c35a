# SPDX-License-Identifier: MIT
"""Exceptions raised by version parsing, construction and reduction."""

from __future__ import annotations

from typing import Any

# Human-readable form of the version grammar, quoted in parse errors
VERSION_GRAMMAR = "MAJOR.MINOR.PATCH[-PRERELEASE][+BUILD]"

# Human-readable form of the range display format
RANGE_GRAMMAR = "{[|(}MINIMUM, [MAXIMUM]{]|)}"


class VersionError(ValueError):
    """Base class for all errors raised by semver_core."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class MalformedVersionError(VersionError):
    """Raised when a string does not match the semantic version grammar."""

    def __init__(self, version: Any, message: str = ""):
        self.version = version
        super().__init__(
            message
            or f"Invalid semantic version: {version!r} (expected {VERSION_GRAMMAR})"
        )


class InvalidFieldError(VersionError):
    """Raised when a numeric version field is negative or not an integer."""

    def __init__(self, field: str, value: Any):
        self.field = field
        self.value = value
        super().__init__(f"The {field} version must be a non-negative integer, got {value!r}")


class InvalidIdentifierError(VersionError):
    """Raised when pre-release or build metadata contains an invalid identifier."""

    def __init__(self, field: str, value: str, identifier: str):
        self.field = field
        self.value = value
        self.identifier = identifier
        super().__init__(f"Invalid {field} identifier {identifier!r} in {value!r}")


class InvalidRangeBoundaryError(VersionError):
    """Raised when an absent range boundary is marked as included."""

    def __init__(self, boundary: str):
        self.boundary = boundary
        super().__init__(f"If there is no {boundary} boundary, it cannot be included")


class MalformedRangeError(VersionError):
    """Raised when a string does not match the range display format."""

    def __init__(self, text: Any, message: str = ""):
        self.text = text
        super().__init__(
            message or f"Invalid version range: {text!r} (expected {RANGE_GRAMMAR})"
        )


class EmptyInputError(VersionError):
    """Raised when a min/max reduction receives no versions."""

    def __init__(self, operation: str):
        self.operation = operation
        super().__init__(
            f"At least one version needs to be provided for {operation} calculation"
        )
