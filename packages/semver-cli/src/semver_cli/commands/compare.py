# SPDX-License-Identifier: MIT
"""Compare the precedence of two versions."""

from __future__ import annotations

import click

from semver_core import MalformedVersionError, compare_versions, parse_version

from ..main import Context, echo_info, echo_json, fail, pass_context

_RELATIONS = {-1: "<", 0: "=", 1: ">"}


@click.command()
@click.argument("version1")
@click.argument("version2")
@pass_context
def compare(ctx: Context, version1: str, version2: str) -> None:
    """Compare VERSION1 with VERSION2 by precedence.

    Prints -1, 0 or 1. Build metadata is ignored, so 0 means equal
    precedence, not identical versions.

    \b
    Examples:
        semver compare 1.0.0-beta.2 1.0.0-beta.11   # -1
        semver compare 1.0.0+a 1.0.0+b              # 0
    """
    try:
        v1 = parse_version(version1)
        v2 = parse_version(version2)
    except MalformedVersionError as e:
        fail(e)

    result = compare_versions(v1, v2)

    if ctx.json_output:
        echo_json({"version1": str(v1), "version2": str(v2), "result": result})
        return

    if ctx.verbose:
        echo_info(f"{v1} {_RELATIONS[result]} {v2}")
        if result == 0 and v1 != v2:
            echo_info("  (equal precedence, different build metadata)")
    echo_info(str(result))
