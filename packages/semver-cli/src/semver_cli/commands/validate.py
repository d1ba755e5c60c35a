# SPDX-License-Identifier: MIT
"""Validate version strings against the SemVer 2.0.0 grammar."""

from __future__ import annotations

import click

from semver_core import MalformedVersionError, parse_version

from ..main import Context, echo_error, echo_json, echo_success, echo_warning, pass_context


@click.command()
@click.argument("versions", nargs=-1, required=True)
@click.option(
    "--strict",
    is_flag=True,
    help="Treat pre-1.0.0 (initial development) versions as errors.",
)
@pass_context
def validate(ctx: Context, versions: tuple[str, ...], strict: bool) -> None:
    """Validate each of VERSIONS.

    Exits with status 1 if any version is invalid.

    \b
    Examples:
        semver validate 1.0.0 1.0.0-alpha.1 01.0.0
        semver validate --strict 0.9.0
    """
    errors: dict[str, str] = {}
    warnings: dict[str, str] = {}

    for version in versions:
        try:
            parsed = parse_version(version)
        except MalformedVersionError as e:
            errors[version] = e.message
            continue
        if not parsed.is_stable:
            warnings[version] = f"Version '{version}' is in initial development (0.y.z)"

    if strict:
        errors.update(warnings)
        warnings = {}

    if ctx.json_output:
        echo_json(
            {
                "valid": not errors,
                "errors": errors,
                "warnings": warnings,
            }
        )
    else:
        for message in warnings.values():
            echo_warning(message)
        for message in errors.values():
            echo_error(message)
        if not errors:
            echo_success("Validation passed")

    if errors:
        raise SystemExit(1)
