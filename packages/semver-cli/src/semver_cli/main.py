# SPDX-License-Identifier: MIT
"""CLI entry point for the semver command."""

from __future__ import annotations

import json
import sys
from typing import Any, NoReturn, Optional

import click

from semver_core import VersionError

from .config import OUTPUT_FORMATS, CLIConfig, ConfigError, load_config


class Context:
    """CLI context object passed to commands."""

    def __init__(self) -> None:
        self.config: Optional[CLIConfig] = None
        self.verbose: bool = False
        self.output_format: Optional[str] = None

    def load_config(self) -> CLIConfig:
        """Load configuration, caching the result."""
        if self.config is None:
            self.config = load_config()
        return self.config

    @property
    def json_output(self) -> bool:
        """Return True if results should be printed as JSON."""
        return (self.output_format or self.load_config().output_format) == "json"


pass_context = click.make_pass_decorator(Context, ensure=True)


def _color() -> Optional[bool]:
    """Return False when colors are disabled, None to let click decide."""
    ctx = click.get_current_context(silent=True)
    if ctx is None or ctx.ensure_object(Context).load_config().color:
        return None
    return False


def echo_error(message: str) -> None:
    """Print an error message to stderr."""
    click.secho(f"Error: {message}", fg="red", err=True, color=_color())


def echo_success(message: str) -> None:
    """Print a success message."""
    click.secho(message, fg="green", color=_color())


def echo_info(message: str) -> None:
    """Print an info message."""
    click.echo(message)


def echo_warning(message: str) -> None:
    """Print a warning message."""
    click.secho(f"Warning: {message}", fg="yellow", err=True, color=_color())


def echo_json(data: Any) -> None:
    """Print data as a JSON document."""
    click.echo(json.dumps(data, indent=2))


def fail(error: VersionError) -> NoReturn:
    """Report a version error and exit with status 1."""
    echo_error(str(error))
    raise SystemExit(1)


@click.group()
@click.version_option(package_name="semver-commons")
@click.option(
    "-v",
    "--verbose",
    is_flag=True,
    help="Enable verbose output.",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(OUTPUT_FORMATS),
    default=None,
    help="Output format (defaults to $SEMVER_OUTPUT_FORMAT or text).",
)
@pass_context
def cli(ctx: Context, verbose: bool, output_format: Optional[str]) -> None:
    """Semantic version toolkit.

    Parse, compare, sort and range-check SemVer 2.0.0 versions.

    \b
    Examples:
        semver parse 1.2.3-alpha.1+001
        semver compare 1.0.0-beta.2 1.0.0-beta.11
        semver sort 2.0.0 1.0.0 1.0.0-rc.1
        semver check "[1.0.0, 2.0.0)" 1.5.0
    """
    ctx.verbose = verbose
    ctx.output_format = output_format


# Import and register commands
from .commands import check, compare, extremes, parse, sort, validate

cli.add_command(parse.parse)
cli.add_command(compare.compare)
cli.add_command(sort.sort)
cli.add_command(extremes.min_command)
cli.add_command(extremes.max_command)
cli.add_command(check.check)
cli.add_command(validate.validate)


def main() -> None:
    """Main entry point for the CLI."""
    try:
        cli()
    except ConfigError as e:
        echo_error(str(e))
        sys.exit(1)
    except VersionError as e:
        echo_error(str(e))
        sys.exit(1)
    except Exception as e:
        echo_error(f"Unexpected error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
