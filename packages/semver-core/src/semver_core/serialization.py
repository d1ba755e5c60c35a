# SPDX-License-Identifier: MIT
"""Pydantic models for exchanging versions and ranges as structured data.

The models only carry wire data. Converting a model into a domain value goes
through the validating :class:`~semver_core.semver.Version` and
:class:`~semver_core.version_range.VersionRange` constructors, so serialized
data is rejected exactly like directly supplied fields:

    >>> version_from_json('{"major": 1, "minor": 2, "patch": 3, "prerelease": "alpha.1"}')
    Version(major=1, minor=2, patch=3, prerelease='alpha.1', build=None)
"""

from __future__ import annotations

from typing import Any, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, StrictBool, StrictInt, StrictStr

from .semver import Version
from .version_range import VersionRange


class VersionModel(BaseModel):
    """Wire representation of a Version.

    Absent ``prerelease``/``build`` keys map to None. The field names used by
    older payloads (``preReleaseInformation``, ``buildMetadata``) are accepted
    on input. Fields are strict: booleans, floats and numeric strings are not
    coerced into integers, nor numbers into strings.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    major: StrictInt
    minor: StrictInt
    patch: StrictInt
    prerelease: Optional[StrictStr] = Field(
        default=None,
        validation_alias=AliasChoices("prerelease", "preReleaseInformation"),
    )
    build: Optional[StrictStr] = Field(
        default=None,
        validation_alias=AliasChoices("build", "buildMetadata"),
    )

    @classmethod
    def from_version(cls, version: Version) -> "VersionModel":
        return cls(
            major=version.major,
            minor=version.minor,
            patch=version.patch,
            prerelease=version.prerelease,
            build=version.build,
        )

    def to_version(self) -> Version:
        """Build the Version, raising the same errors as ``Version(...)``."""
        return Version(
            major=self.major,
            minor=self.minor,
            patch=self.patch,
            prerelease=self.prerelease,
            build=self.build,
        )


class VersionRangeModel(BaseModel):
    """Wire representation of a VersionRange."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    minimum: Optional[VersionModel] = None
    minimum_included: StrictBool = Field(
        default=False,
        validation_alias=AliasChoices("minimum_included", "minimumIncluded"),
    )
    maximum: Optional[VersionModel] = None
    maximum_included: StrictBool = Field(
        default=False,
        validation_alias=AliasChoices("maximum_included", "maximumIncluded"),
    )

    @classmethod
    def from_range(cls, version_range: VersionRange) -> "VersionRangeModel":
        maximum = version_range.maximum
        return cls(
            minimum=VersionModel.from_version(version_range.minimum),
            minimum_included=version_range.minimum_included,
            maximum=VersionModel.from_version(maximum) if maximum is not None else None,
            maximum_included=version_range.maximum_included,
        )

    def to_range(self) -> VersionRange:
        """Build the VersionRange, raising the same errors as ``VersionRange(...)``."""
        return VersionRange(
            minimum=self.minimum.to_version() if self.minimum is not None else None,
            minimum_included=self.minimum_included,
            maximum=self.maximum.to_version() if self.maximum is not None else None,
            maximum_included=self.maximum_included,
        )


def version_to_dict(version: Version) -> dict[str, Any]:
    """Return the five version fields as a plain dictionary."""
    return VersionModel.from_version(version).model_dump()


def version_from_dict(data: dict[str, Any]) -> Version:
    """Build a Version from a dictionary of fields.

    Raises:
        pydantic.ValidationError: If the data is structurally invalid
        VersionError: If the fields violate version invariants
    """
    return VersionModel.model_validate(data).to_version()


def version_to_json(version: Version) -> str:
    return VersionModel.from_version(version).model_dump_json()


def version_from_json(data: str | bytes) -> Version:
    """Build a Version from a JSON object. See :func:`version_from_dict`."""
    return VersionModel.model_validate_json(data).to_version()


def range_to_json(version_range: VersionRange) -> str:
    return VersionRangeModel.from_range(version_range).model_dump_json()


def range_from_json(data: str | bytes) -> VersionRange:
    """Build a VersionRange from a JSON object.

    Raises:
        pydantic.ValidationError: If the data is structurally invalid
        VersionError: If a boundary or the range itself is invalid
    """
    return VersionRangeModel.model_validate_json(data).to_range()
