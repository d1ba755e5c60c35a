# SPDX-License-Identifier: MIT
"""Check versions against a range."""

from __future__ import annotations

import click

from semver_core import VersionError, parse_range, parse_version

from ..main import Context, echo_info, echo_json, echo_success, fail, pass_context


@click.command()
@click.argument("version_range", metavar="RANGE")
@click.argument("versions", nargs=-1, required=True)
@pass_context
def check(ctx: Context, version_range: str, versions: tuple[str, ...]) -> None:
    """Check whether each of VERSIONS lies within RANGE.

    RANGE uses interval notation: "[" or "(" for an inclusive or exclusive
    minimum, then ", ", an optional maximum, and "]" or ")".

    Exits with status 1 if any version is outside the range.

    \b
    Examples:
        semver check "[1.0.0, 2.0.0)" 1.5.0 2.0.0
        semver check "(0.0.0, )" 0.1.0
    """
    try:
        parsed_range = parse_range(version_range)
        parsed = [parse_version(v) for v in versions]
    except VersionError as e:
        fail(e)

    results = [(str(v), parsed_range.includes(v)) for v in parsed]

    if ctx.json_output:
        echo_json(
            {
                "range": str(parsed_range),
                "results": [
                    {"version": version, "included": included} for version, included in results
                ],
            }
        )
    else:
        for version, included in results:
            if included:
                echo_success(f"{version} is in {parsed_range}")
            else:
                echo_info(f"{version} is not in {parsed_range}")

    if not all(included for _, included in results):
        raise SystemExit(1)
