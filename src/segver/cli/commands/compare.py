# SPDX-License-Identifier: MIT
"""Compare and sort version numbers."""

from __future__ import annotations

import click

from ...compare import sort_versions
from ...number import Segment
from ..main import SEGMENT, echo_info, parse_or_exit


@click.command()
@click.argument("version1")
@click.argument("version2")
@click.option(
    "--segment",
    "-s",
    "segments",
    type=SEGMENT,
    multiple=True,
    help="Only compare this segment (repeatable). Compares all segments by default.",
)
def compare(version1: str, version2: str, segments: tuple[Segment, ...]) -> None:
    """Compare two version numbers.

    Prints 1 if VERSION1 is higher, -1 if it is lower and 0 if they are equal.

    \b
    Examples:
        segver compare 1.2.3 1.1.9
        segver compare 1.2.3 1.0.3-beta.3 -s major -s patch
    """
    mask = Segment(0)
    for segment in segments:
        mask |= segment

    first = parse_or_exit(version1)
    second = parse_or_exit(version2)
    echo_info(str(first.compare(second, mask)))


@click.command()
@click.argument("versions", nargs=-1, required=True)
@click.option(
    "--descending",
    "-d",
    is_flag=True,
    help="Sort highest first.",
)
def sort(versions: tuple[str, ...], descending: bool) -> None:
    """Sort version numbers, one per output line.

    \b
    Examples:
        segver sort 1.0 1 1.0.0-beta 0.9
        segver sort --descending 2.0.0 2.0.0-alpha.3 1.9
    """
    parsed = [parse_or_exit(version) for version in versions]
    for version in sort_versions(parsed, descending=descending):
        echo_info(str(version))
