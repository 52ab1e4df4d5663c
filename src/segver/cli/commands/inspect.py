# SPDX-License-Identifier: MIT
"""Inspect version numbers and match them against patterns."""

from __future__ import annotations

import json

import click

from ...number import VersionNumber
from ..main import echo_error, echo_info, echo_success, parse_or_exit


def _tier(version: VersionNumber) -> str:
    """Name the tier of change a version number represents."""
    if version.is_aux():
        return "aux"
    if version.is_patch():
        return "patch"
    if version.is_minor():
        return "minor"
    return "major"


def _describe(version: VersionNumber) -> dict:
    return {
        "version": str(version),
        "major": version.major,
        "minor": version.minor,
        "patch": version.patch,
        "aux": version.aux,
        "pre_release_type": version.pre_release_type,
        "pre_release_number": version.pre_release_number,
        "stable": version.is_stable(),
        "tier": _tier(version),
    }


@click.command()
@click.argument("version")
@click.option(
    "--json",
    "as_json",
    is_flag=True,
    help="Print the segments as JSON.",
)
def inspect(version: str, as_json: bool) -> None:
    """Show the segments of a version number.

    \b
    Examples:
        segver inspect 1.2.0-alpha.12
        segver inspect 2.1 --json
    """
    details = _describe(parse_or_exit(version))

    if as_json:
        click.echo(json.dumps(details, indent=2))
        return

    for key, value in details.items():
        if value is None:
            value = "-"
        elif isinstance(value, bool):
            value = "yes" if value else "no"
        echo_info(f"{key + ':':<20}{value}")


@click.command()
@click.argument("version")
@click.argument("pattern")
def match(version: str, pattern: str) -> None:
    """Check a version number against a wildcard pattern.

    '*' matches any run of digits and '?' a single digit. Exits with status 1
    when the version does not match.

    \b
    Examples:
        segver match 1.2.13 '1.*.13'
        segver match 1.2.13 '?.?.1?'
    """
    parsed = parse_or_exit(version)

    if parsed.matches(pattern):
        echo_success(f"{parsed} matches {pattern}")
    else:
        echo_error(f"{parsed} does not match {pattern}")
        raise SystemExit(1)
