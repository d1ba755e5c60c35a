# SPDX-License-Identifier: MIT
"""Pick the lowest or highest version."""

from __future__ import annotations

from typing import Callable

import click

from semver_core import (
    MalformedVersionError,
    Version,
    max_version,
    min_version,
    parse_version,
)

from ..main import Context, echo_info, echo_json, fail, pass_context


def _reduce(ctx: Context, versions: tuple[str, ...], reducer: Callable[..., Version]) -> None:
    try:
        parsed = [parse_version(v) for v in versions]
    except MalformedVersionError as e:
        fail(e)

    result = str(reducer(*parsed))
    if ctx.json_output:
        echo_json(result)
    else:
        echo_info(result)


@click.command("min")
@click.argument("versions", nargs=-1, required=True)
@pass_context
def min_command(ctx: Context, versions: tuple[str, ...]) -> None:
    """Print the version with the lowest precedence."""
    _reduce(ctx, versions, min_version)


@click.command("max")
@click.argument("versions", nargs=-1, required=True)
@pass_context
def max_command(ctx: Context, versions: tuple[str, ...]) -> None:
    """Print the version with the highest precedence."""
    _reduce(ctx, versions, max_version)
