# SPDX-License-Identifier: MIT
"""Show the fields of a semantic version."""

from __future__ import annotations

import click

from semver_core import MalformedVersionError, parse_version
from semver_core.serialization import version_to_dict

from ..main import Context, echo_info, echo_json, fail, pass_context


@click.command()
@click.argument("version")
@pass_context
def parse(ctx: Context, version: str) -> None:
    """Parse VERSION and print its fields.

    \b
    Examples:
        semver parse 1.2.3-alpha.1+001
        semver --format json parse 1.0.0
    """
    try:
        parsed = parse_version(version)
    except MalformedVersionError as e:
        fail(e)

    fields = version_to_dict(parsed)
    fields["stable"] = parsed.is_stable

    if ctx.json_output:
        echo_json(fields)
        return

    for name, value in fields.items():
        echo_info(f"{name}: {'' if value is None else value}")
