# SPDX-License-Identifier: MIT
"""CLI entry point for segver command."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional

import click

from ..errors import VersionError
from ..number import Segment, VersionNumber
from .config import CLIConfig, ConfigError, load_config


class Context:
    """CLI context object passed to commands."""

    def __init__(self) -> None:
        self.config: Optional[CLIConfig] = None
        self.project_dir: Optional[Path] = None

    def load_config(self) -> CLIConfig:
        """Load configuration, caching the result."""
        if self.config is None:
            self.config = load_config(self.project_dir)
        return self.config


pass_context = click.make_pass_decorator(Context, ensure=True)


def echo_error(message: str) -> None:
    """Print an error message to stderr."""
    click.secho(f"Error: {message}", fg="red", err=True)


def echo_success(message: str) -> None:
    """Print a success message."""
    click.secho(message, fg="green")


def echo_info(message: str) -> None:
    """Print an info message."""
    click.echo(message)


def parse_or_exit(value: str) -> VersionNumber:
    """Parse a version argument, exiting with status 1 when it is invalid."""
    try:
        return VersionNumber(value)
    except VersionError as e:
        echo_error(e.message)
        raise SystemExit(1) from e


class SegmentType(click.ParamType):
    """Click parameter accepting a segment name such as ``minor``."""

    name = "segment"

    def convert(self, value, param, ctx):
        if isinstance(value, Segment):
            return value
        try:
            return Segment.from_name(value)
        except ValueError as e:
            self.fail(str(e), param, ctx)


SEGMENT = SegmentType()


@click.group()
@click.version_option(package_name="segver")
@click.option(
    "-v",
    "--verbose",
    is_flag=True,
    help="Enable verbose output.",
)
@click.option(
    "-C",
    "--directory",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    help="Read configuration from this project directory.",
)
@pass_context
def cli(ctx: Context, verbose: bool, directory: Optional[Path]) -> None:
    """Version number tool.

    Inspect, compare, bump and match version numbers and caret ranges.

    \b
    Examples:
        segver inspect 1.2.0-alpha.12
        segver compare 1.2.3 1.1.9
        segver bump 1.2.3 --segment minor
        segver next 1.0.0 1.2.0 1.1.4
        segver range ^2.1.2 1.0.0 2.1.1 2.2.0 3.0.0
    """
    ctx.project_dir = directory
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")


# Import and register commands
from .commands import bump, compare, inspect, ranges

cli.add_command(inspect.inspect)
cli.add_command(inspect.match)
cli.add_command(compare.compare)
cli.add_command(compare.sort)
cli.add_command(bump.bump)
cli.add_command(bump.next_version)
cli.add_command(ranges.range_)


def main() -> None:
    """Main entry point for the CLI."""
    try:
        cli()
    except (ConfigError, VersionError) as e:
        echo_error(str(e))
        sys.exit(1)
    except Exception as e:
        echo_error(f"Unexpected error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
