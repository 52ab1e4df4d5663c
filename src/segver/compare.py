# SPDX-License-Identifier: MIT
"""Version comparison and ordering helpers.

Pre-release ordering: alpha < beta < release
More specific notations sort higher: 1 < 1.0 < 1.0.0
"""

from __future__ import annotations

from functools import cmp_to_key
from typing import Any, Callable, Iterable, Optional, Union

from .number import Segment, VersionLike, VersionNumber, _coerce


def compare_versions(
    version1: VersionLike,
    version2: VersionLike,
    segment: Union[int, Segment, None] = None,
) -> int:
    """Compare two versions.

    Args:
        version1: First version (string or VersionNumber)
        version2: Second version (string or VersionNumber)
        segment: Mask of segments to compare, all by default

    Returns:
        -1 if version1 < version2
        0 if version1 == version2
        1 if version1 > version2

    Raises:
        InvalidFormatError: If either version string is invalid

    Examples:
        >>> compare_versions("1.0.0", "2.0.0")
        -1
        >>> compare_versions("1.0.0-alpha", "1.0.0-beta")
        -1
        >>> compare_versions("1.0", "1")
        1
    """
    return _coerce(version1).compare(version2, segment)


def get_sorter(
    descending: bool = False,
    accessor: Optional[Callable[[Any], VersionLike]] = None,
) -> Callable[[Any], Any]:
    """Return a sort key for versions, suitable for ``sorted()``.

    Args:
        descending: Sort highest first
        accessor: Extracts the version from each item, for sorting arbitrary
            records. Items are used as-is when omitted.

    Examples:
        >>> sorted(["1.0.0", "2.0.0", "1.0.0-alpha"], key=get_sorter())
        ['1.0.0-alpha', '1.0.0', '2.0.0']
        >>> releases = [{"tag": "1.1"}, {"tag": "1.0"}]
        >>> sorted(releases, key=get_sorter(accessor=lambda r: r["tag"]))
        [{'tag': '1.0'}, {'tag': '1.1'}]
    """
    direction = -1 if descending else 1

    def comparator(item1: Any, item2: Any) -> int:
        value1 = accessor(item1) if accessor else item1
        value2 = accessor(item2) if accessor else item2
        return direction * compare_versions(value1, value2)

    return cmp_to_key(comparator)


def sort_versions(
    versions: Iterable[Any],
    descending: bool = False,
    accessor: Optional[Callable[[Any], VersionLike]] = None,
) -> list[Any]:
    """Return the given versions sorted, keeping each item as given.

    Raises:
        InvalidFormatError: If any version string is invalid
    """
    return sorted(versions, key=get_sorter(descending=descending, accessor=accessor))


def get_next(
    versions: Union[str, Iterable[VersionLike]],
    segment: Union[int, Segment, None] = None,
) -> VersionNumber:
    """Compute the version following the highest of the given versions.

    Args:
        versions: Versions, or a whitespace separated string of versions
        segment: Segment to increment, the least significant one of the
            highest version by default

    Returns:
        A new VersionNumber; the inputs are left untouched

    Raises:
        ValueError: If no versions are given
        InvalidFormatError: If any version string is invalid

    Examples:
        >>> str(get_next("1.0.0 1.2.0 1.1.4"))
        '1.2.1'
        >>> str(get_next(["1.0.0", "1.2.0-beta.2"], Segment.MINOR))
        '1.3.0'
    """
    if isinstance(versions, str):
        versions = versions.split()

    parsed = [_coerce(version) for version in versions]
    if not parsed:
        raise ValueError("At least one version is required")

    highest = sort_versions(parsed, descending=True)[0]
    return highest.copy().increment(segment)
