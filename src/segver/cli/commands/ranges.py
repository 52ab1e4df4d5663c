# SPDX-License-Identifier: MIT
"""Check version numbers against caret ranges."""

from __future__ import annotations

import logging
from typing import Optional

import click

from ...errors import InvalidFormatError
from ...range import VersionRange
from ..config import ConfigError
from ..main import Context, echo_error, echo_info, parse_or_exit, pass_context

logger = logging.getLogger(__name__)


@click.command("range")
@click.argument("range_text", metavar="RANGE")
@click.argument("versions", nargs=-1, required=True)
@click.option(
    "--below",
    help="Only consider versions strictly lower than this one.",
)
@pass_context
def range_(
    ctx: Context,
    range_text: str,
    versions: tuple[str, ...],
    below: Optional[str],
) -> None:
    """Print the highest VERSION inside RANGE.

    RANGE is a caret range such as ^2.1. Pass '-' to use [tool.segver].range
    from the project configuration. Exits with status 1 when nothing matches.

    \b
    Examples:
        segver range ^2.1.2 1.0.0 2.1.1 2.2.0 3.0.0   # 2.2.0
        segver range ^2.1.2 2.1.2 2.2.0 2.3.0 --below 2.3.0
    """
    if range_text == "-":
        try:
            range_text = ctx.load_config().range
        except ConfigError as e:
            echo_error(str(e))
            raise SystemExit(1) from e
        if not range_text:
            echo_error("No [tool.segver].range configured")
            raise SystemExit(1)

    try:
        version_range = VersionRange(range_text)
    except InvalidFormatError as e:
        echo_error(e.message)
        raise SystemExit(1) from e

    ceiling = parse_or_exit(below) if below is not None else None

    if logger.isEnabledFor(logging.DEBUG):
        for version in versions:
            if not version_range.is_in_range(version):
                logger.debug("%s is outside %s", version, version_range)

    match = version_range.get_highest_match(versions, below=ceiling)
    if match is None:
        echo_error(f"No version within {version_range}")
        raise SystemExit(1)

    echo_info(str(match))
