# SPDX-License-Identifier: MIT
"""Caret version ranges.

A range such as ``^2.1`` accepts every version with the same major version
that is not lower than the floor ``2.1``.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, Optional, Union

from .errors import InvalidFormatError
from .number import Segment, VersionLike, VersionNumber, _coerce, _coerce_or_none
from .compare import sort_versions
from .templates import extract_segments

logger = logging.getLogger(__name__)

RANGE_FORMAT = "^{tuple}"


class VersionRange:
    """A version number range, into which a version number may fall inside or outside.

    Example:
        >>> VersionRange("^2.1.2").get_highest_match(["2.1.0", "2.2.0", "3.0.0"])
        '2.2.0'
    """

    def __init__(self, value: Union["VersionRange", str]):
        if isinstance(value, VersionRange):
            self._version_number = value._version_number.copy()
            return

        if not isinstance(value, str):
            raise InvalidFormatError(value, f"Range must be a string, got {type(value).__name__}")

        parts = extract_segments(value, [RANGE_FORMAT], {"tuple": r"\S+"})
        if parts is None:
            raise InvalidFormatError(value)

        try:
            self._version_number = VersionNumber(parts["tuple"])
        except InvalidFormatError as e:
            raise InvalidFormatError(value) from e

    @classmethod
    def parse(cls, value: Union["VersionRange", str]) -> "VersionRange":
        """Parse a range string such as ``"^1.2.3"``.

        Raises:
            InvalidFormatError: If the string is not ``^`` followed by a version
        """
        return cls(value)

    @classmethod
    def is_valid(cls, value: Any) -> bool:
        """Check if a value is a range or a parseable range string."""
        if isinstance(value, VersionRange):
            return True
        if not isinstance(value, str):
            return False
        try:
            cls(value)
        except InvalidFormatError:
            return False
        return True

    @property
    def version_number(self) -> VersionNumber:
        """A copy of the floor version number of this range."""
        return self._version_number.copy()

    def is_in_range(self, version: Union[VersionNumber, str]) -> bool:
        """Indicate whether a version number falls within this range.

        Invalid version strings are never in range.
        """
        candidate = _coerce_or_none(version)
        if candidate is None:
            return False

        return not candidate.is_higher_than(
            self._version_number, Segment.MAJOR
        ) and not candidate.is_lower_than(self._version_number)

    def get_highest_match(
        self,
        versions: Iterable[Union[VersionNumber, str]],
        below: Optional[VersionLike] = None,
    ) -> Optional[Union[VersionNumber, str]]:
        """Provide the highest of the given versions that falls within this range.

        Args:
            versions: Candidate version numbers or strings; invalid strings are skipped
            below: Only consider candidates strictly lower than this version

        Returns:
            The matching candidate as it was given, or None

        Raises:
            InvalidFormatError: If below is not a valid version number
        """
        ceiling = _coerce(below) if below is not None else None

        candidates = []
        for version in versions:
            if VersionNumber.is_valid(version):
                candidates.append(version)
            else:
                logger.debug("Skipping invalid version %r", version)

        for version in sort_versions(candidates, descending=True):
            if ceiling is not None and not _coerce(version).is_lower_than(ceiling):
                continue
            if self.is_in_range(version):
                return version

        return None

    def is_equal_to(self, other: VersionLike, segment: Union[int, Segment, None] = None) -> bool:
        return self._version_number.is_equal_to(other, segment)

    def is_higher_than(self, other: VersionLike, segment: Union[int, Segment, None] = None) -> bool:
        return self._version_number.is_higher_than(other, segment)

    def is_lower_than(self, other: VersionLike, segment: Union[int, Segment, None] = None) -> bool:
        return self._version_number.is_lower_than(other, segment)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, VersionRange):
            return NotImplemented
        return self._version_number == other._version_number

    def __hash__(self) -> int:
        return hash(str(self))

    def __str__(self) -> str:
        return f"^{self._version_number}"

    def __repr__(self) -> str:
        return f"VersionRange({str(self)!r})"
