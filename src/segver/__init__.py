# SPDX-License-Identifier: MIT
"""Segmented version numbers with pre-release support and caret ranges.

Version numbers have one to four numeric segments (MAJOR, MINOR, PATCH, AUX)
and an optional alpha or beta pre-release marker. They can be compared,
incremented, matched against wildcard patterns and checked against caret
ranges.

Example:
    >>> from segver import VersionNumber, VersionRange, Segment
    >>>
    >>> version = VersionNumber("1.2.0-alpha.12")
    >>> version.is_alpha()
    True
    >>> version.pre_release_number
    12
    >>>
    >>> str(VersionNumber("1.2.3").increment())
    '1.2.4'
    >>>
    >>> VersionNumber("1.2.3").is_equal_to("1.0.3-beta.3", Segment.MAJOR | Segment.PATCH)
    True
    >>>
    >>> VersionRange("^2.0").is_in_range("2.0.0")
    True
"""

__version__ = "0.1.0"

from .errors import (
    VersionError,
    InvalidFormatError,
    InvalidNumberError,
)
from .number import (
    Segment,
    Standard,
    VersionNumber,
    iter_segments,
)
from .compare import (
    compare_versions,
    get_next,
    get_sorter,
    sort_versions,
)
from .range import VersionRange
from .templates import (
    extract_segments,
    glob_match,
)

__all__ = [
    # Errors
    "VersionError",
    "InvalidFormatError",
    "InvalidNumberError",
    # Version numbers
    "Segment",
    "Standard",
    "VersionNumber",
    "iter_segments",
    # Ordering
    "compare_versions",
    "get_next",
    "get_sorter",
    "sort_versions",
    # Ranges
    "VersionRange",
    # Templates
    "extract_segments",
    "glob_match",
]
