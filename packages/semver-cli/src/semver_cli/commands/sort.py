# SPDX-License-Identifier: MIT
"""Sort versions by precedence."""

from __future__ import annotations

import click

from semver_core import MalformedVersionError, parse_version, version_key

from ..main import Context, echo_info, echo_json, fail, pass_context


@click.command()
@click.argument("versions", nargs=-1, required=True)
@click.option("--reverse", "-r", is_flag=True, help="Highest precedence first.")
@pass_context
def sort(ctx: Context, versions: tuple[str, ...], reverse: bool) -> None:
    """Print VERSIONS ordered by precedence, one per line.

    Versions with equal precedence keep their input order.

    \b
    Examples:
        semver sort 2.0.0 1.0.0 1.0.0-rc.1
        semver sort --reverse 1.0.0-alpha 1.0.0-beta
    """
    try:
        parsed = [parse_version(v) for v in versions]
    except MalformedVersionError as e:
        fail(e)

    ordered = [str(v) for v in sorted(parsed, key=version_key, reverse=reverse)]

    if ctx.json_output:
        echo_json(ordered)
        return

    for version in ordered:
        echo_info(version)
