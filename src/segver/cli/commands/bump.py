# SPDX-License-Identifier: MIT
"""Bump version numbers."""

from __future__ import annotations

from typing import Optional

import click

from ...compare import get_next
from ...errors import InvalidFormatError
from ...number import Segment
from ..config import ConfigError
from ..main import SEGMENT, Context, echo_error, echo_info, parse_or_exit, pass_context


@click.command()
@click.argument("version", required=False)
@click.option(
    "--segment",
    "-s",
    type=SEGMENT,
    help="Segment to change. Defaults to [tool.segver].default-segment or the least significant one.",
)
@click.option(
    "--decrement",
    is_flag=True,
    help="Decrement instead of increment.",
)
@click.option(
    "--no-change",
    is_flag=True,
    help="Do not increment or decrement, only apply --alpha/--beta/--stable.",
)
@click.option(
    "--alpha",
    "pre_release",
    flag_value="alpha",
    help="Make the result an alpha pre-release.",
)
@click.option(
    "--beta",
    "pre_release",
    flag_value="beta",
    help="Make the result a beta pre-release.",
)
@click.option(
    "--pre-number",
    type=click.IntRange(min=0),
    help="Pre-release number to use with --alpha/--beta.",
)
@click.option(
    "--stable",
    is_flag=True,
    help="Make the result stable (drops pre-release, promotes 0.x to 1.0).",
)
@pass_context
def bump(
    ctx: Context,
    version: Optional[str],
    segment: Optional[Segment],
    decrement: bool,
    no_change: bool,
    pre_release: Optional[str],
    pre_number: Optional[int],
    stable: bool,
) -> None:
    """Increment or decrement a version number and print the result.

    VERSION defaults to the [project].version of the current project.

    \b
    Examples:
        segver bump 1.2.3                 # 1.2.4
        segver bump 1.0.3-beta.3          # 1.0.3-beta.4
        segver bump 1.2.3 -s minor --beta # 1.3.0-beta.1
        segver bump 0.4.1 --no-change --stable # 1.0.0
    """
    if stable and pre_release:
        echo_error("--stable cannot be combined with --alpha or --beta")
        raise SystemExit(1)
    if pre_number is not None and not pre_release:
        echo_error("--pre-number requires --alpha or --beta")
        raise SystemExit(1)

    try:
        config = ctx.load_config()
    except ConfigError as e:
        echo_error(str(e))
        raise SystemExit(1) from e

    if version is None:
        if not config.version:
            echo_error("No VERSION given and no [project].version found")
            raise SystemExit(1)
        version = config.version

    parsed = parse_or_exit(version)
    segment = segment or config.default_segment

    if not no_change:
        if decrement:
            parsed.decrement(segment)
        else:
            parsed.increment(segment)

    if pre_release == "alpha":
        parsed.set_alpha(pre_number)
    elif pre_release == "beta":
        parsed.set_beta(pre_number)

    if stable:
        parsed.set_stable()

    echo_info(str(parsed))


@click.command("next")
@click.argument("versions", nargs=-1, required=True)
@click.option(
    "--segment",
    "-s",
    type=SEGMENT,
    help="Segment to increment. Defaults to the least significant one of the highest version.",
)
def next_version(versions: tuple[str, ...], segment: Optional[Segment]) -> None:
    """Print the version following the highest of the given versions.

    \b
    Examples:
        segver next 1.0.0 1.2.0 1.1.4      # 1.2.1
        segver next 1.0.0 1.2.0 -s minor   # 1.3.0
    """
    try:
        echo_info(str(get_next(list(versions), segment)))
    except InvalidFormatError as e:
        echo_error(e.message)
        raise SystemExit(1) from e
