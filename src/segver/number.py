# SPDX-License-Identifier: MIT
"""Version number parsing, comparison and mutation.

Supports MAJOR[.MINOR[.PATCH[.AUX]]] with an optional pre-release suffix:
- Pre-release: -alpha, -alpha.1, -beta, -beta.2

Segments after MAJOR are optional and their presence is significant: ``1``
and ``1.0`` are different notations of the same numeric value, and ``1.0``
sorts above ``1`` because it is more specific.
"""

from __future__ import annotations

import logging
import re
from enum import Enum, IntFlag
from typing import TYPE_CHECKING, Any, Callable, Iterable, Iterator, Optional, Union

from .errors import InvalidFormatError, InvalidNumberError
from .templates import extract_segments, glob_match

if TYPE_CHECKING:
    from .range import VersionRange

logger = logging.getLogger(__name__)


class Segment(IntFlag):
    """Identifiers of the segments of a version number.

    Values are bit flags so that a subset can be selected with ``|``.
    """

    MAJOR = 1
    MINOR = 2
    PATCH = 4
    AUX = 8
    PRE = 16
    ALL = MAJOR | MINOR | PATCH | AUX | PRE

    @classmethod
    def from_name(cls, name: str) -> "Segment":
        """Look up a single segment by case-insensitive name."""
        if not isinstance(name, str):
            raise ValueError(f"Segment name must be a string, got {type(name).__name__}")
        try:
            segment = cls[name.strip().upper()]
        except KeyError:
            raise ValueError(f"Unknown version segment: {name!r}") from None
        if segment is cls.ALL:
            raise ValueError("ALL is not a single segment")
        return segment


# Most significant first
SEGMENT_ORDER = (Segment.MAJOR, Segment.MINOR, Segment.PATCH, Segment.AUX, Segment.PRE)

_NUMERIC_ATTRS = {
    Segment.MAJOR: "_major",
    Segment.MINOR: "_minor",
    Segment.PATCH: "_patch",
    Segment.AUX: "_aux",
}


def iter_segments(mask: Union[int, Segment, None] = None) -> Iterator[Segment]:
    """Yield the segments selected by mask in significance order.

    A mask of None or 0 selects every segment.
    """
    mask = mask or Segment.ALL
    for segment in SEGMENT_ORDER:
        if mask & segment:
            yield segment


class Standard(Enum):
    """Version numbering standards a version number can be validated against."""

    SEMVER_2_0_0 = 1


VersionLike = Union["VersionNumber", "VersionRange", str]

_DIGITS = re.compile(r"[0-9]+")


def _parse_number(value: Any) -> Optional[int]:
    """Parse a segment value into a non-negative integer (None stays None)."""
    if value is None:
        return None
    if isinstance(value, bool):
        raise InvalidNumberError(value)
    if isinstance(value, int):
        if value < 0:
            raise InvalidNumberError(value, f"The value [{value}] can not be a negative integer")
        return value
    if isinstance(value, str) and _DIGITS.fullmatch(value):
        return int(value)
    raise InvalidNumberError(value)


class VersionNumber:
    """A mutable version number such as ``4.2.1-beta.2``.

    Mutating methods act in place and return the instance, so calls can be
    chained:

        >>> str(VersionNumber("1.2.3").increment(Segment.MINOR).set_beta())
        '1.3.0-beta.1'
    """

    ALPHA = "alpha"
    BETA = "beta"

    MAJOR = Segment.MAJOR
    MINOR = Segment.MINOR
    PATCH = Segment.PATCH
    AUX = Segment.AUX
    PRE = Segment.PRE

    # Most specific first
    FORMATS = (
        "{major}.{minor}.{patch}.{aux}-{preType}.{preNumber}",
        "{major}.{minor}.{patch}.{aux}-{preType}",
        "{major}.{minor}.{patch}.{aux}",
        "{major}.{minor}.{patch}-{preType}.{preNumber}",
        "{major}.{minor}.{patch}-{preType}",
        "{major}.{minor}.{patch}",
        "{major}.{minor}-{preType}.{preNumber}",
        "{major}.{minor}-{preType}",
        "{major}.{minor}",
        "{major}-{preType}.{preNumber}",
        "{major}-{preType}",
        "{major}",
    )

    _PRE_RELEASE_RANK = {ALPHA: 0, BETA: 1}

    def __init__(self, value: Union["VersionNumber", str, None] = None):
        self._major: int = 0
        self._minor: Optional[int] = None
        self._patch: Optional[int] = None
        self._aux: Optional[int] = None
        self._pre_release_type: Optional[str] = None
        self._pre_release_number: Optional[int] = None

        if isinstance(value, VersionNumber):
            self._major = value._major
            self._minor = value._minor
            self._patch = value._patch
            self._aux = value._aux
            self._pre_release_type = value._pre_release_type
            self._pre_release_number = value._pre_release_number
        elif value is not None:
            self._parse_string(value)

    @classmethod
    def parse(cls, value: Union["VersionNumber", str]) -> "VersionNumber":
        """Parse a version string such as ``"1.2.0-alpha.12"``.

        Raises:
            InvalidFormatError: If the string is not on a supported format
        """
        return cls(value)

    @classmethod
    def is_valid(cls, value: Any) -> bool:
        """Check if a value is a version number or a parseable version string."""
        if isinstance(value, VersionNumber):
            return True
        if not isinstance(value, str):
            return False
        try:
            cls(value)
        except InvalidFormatError:
            return False
        return True

    def _parse_string(self, value: str) -> None:
        if not isinstance(value, str):
            raise InvalidFormatError(
                value, f"Version must be a string, got {type(value).__name__}"
            )

        segments = extract_segments(
            value.lower(),
            self.FORMATS,
            {"preType": f"{self.ALPHA}|{self.BETA}"},
        )
        if segments is None:
            raise InvalidFormatError(value)

        try:
            self.set_major(segments["major"])
            self.set_minor(segments.get("minor"))
            self.set_patch(segments.get("patch"))
            self.set_aux(segments.get("aux"))
            self.set_pre_release_type(segments.get("preType"))
            self.set_pre_release_number(segments.get("preNumber"))
        except InvalidNumberError as e:
            raise InvalidFormatError(value) from e

        logger.debug("Parsed version %r into segments %s", value, segments)

    # ------------------------------------------------------------------
    # Segment access
    # ------------------------------------------------------------------

    @property
    def major(self) -> int:
        """The major segment, always present."""
        return self._major

    @major.setter
    def major(self, value: Union[int, str, None]) -> None:
        self.set_major(value)

    @property
    def minor(self) -> Optional[int]:
        """The minor segment, or None when absent."""
        return self._minor

    @minor.setter
    def minor(self, value: Union[int, str, None]) -> None:
        self.set_minor(value)

    @property
    def patch(self) -> Optional[int]:
        """The patch segment, or None when absent."""
        return self._patch

    @patch.setter
    def patch(self, value: Union[int, str, None]) -> None:
        self.set_patch(value)

    @property
    def aux(self) -> Optional[int]:
        """The auxiliary fourth segment, or None when absent."""
        return self._aux

    @aux.setter
    def aux(self, value: Union[int, str, None]) -> None:
        self.set_aux(value)

    @property
    def pre_release_type(self) -> Optional[str]:
        """The pre-release type, ``"alpha"``, ``"beta"`` or None."""
        return self._pre_release_type

    @pre_release_type.setter
    def pre_release_type(self, value: Optional[str]) -> None:
        self.set_pre_release_type(value)

    @property
    def pre_release_number(self) -> Optional[int]:
        """The pre-release number, or None when untracked."""
        return self._pre_release_number

    @pre_release_number.setter
    def pre_release_number(self, value: Union[int, str, None]) -> None:
        self.set_pre_release_number(value)

    def set_major(self, number: Union[int, str, None]) -> "VersionNumber":
        """Set the major segment. None resets it to 0."""
        parsed = _parse_number(number)
        self._major = 0 if parsed is None else parsed
        return self

    def set_minor(self, number: Union[int, str, None]) -> "VersionNumber":
        """Set the minor segment. None removes minor and every lesser segment."""
        parsed = _parse_number(number)
        if parsed is None:
            self._minor = self._patch = self._aux = None
        else:
            self._minor = parsed
        return self

    def set_patch(self, number: Union[int, str, None]) -> "VersionNumber":
        """Set the patch segment, adding a zero minor segment if needed."""
        parsed = _parse_number(number)
        if parsed is None:
            self._patch = self._aux = None
            return self
        if self._minor is None:
            self._minor = 0
        self._patch = parsed
        return self

    def set_aux(self, number: Union[int, str, None]) -> "VersionNumber":
        """Set the auxiliary segment, adding zero minor/patch segments if needed."""
        parsed = _parse_number(number)
        if parsed is None:
            self._aux = None
            return self
        if self._patch is None:
            self.set_patch(0)
        self._aux = parsed
        return self

    def set_pre_release_type(self, pre_release_type: Optional[str]) -> "VersionNumber":
        """Set the pre-release type. None removes the whole pre-release marker.

        Raises:
            InvalidFormatError: If the type is neither alpha nor beta
        """
        if pre_release_type is None:
            self._pre_release_type = None
            self._pre_release_number = None
            return self
        normalized = str(pre_release_type).lower()
        if normalized not in self._PRE_RELEASE_RANK:
            raise InvalidFormatError(
                pre_release_type,
                f"Pre-release type must be {self.ALPHA!r} or {self.BETA!r}, got {pre_release_type!r}",
            )
        self._pre_release_type = normalized
        return self

    def set_pre_release_number(self, number: Union[int, str, None]) -> "VersionNumber":
        """Set the pre-release number.

        Raises:
            InvalidNumberError: If the number is not a non-negative integer
            ValueError: If a number is given while there is no pre-release type
        """
        parsed = _parse_number(number)
        if parsed is not None and self._pre_release_type is None:
            raise ValueError("A pre-release number requires a pre-release type")
        self._pre_release_number = parsed
        return self

    def has_segment(self, segment: Union[int, Segment]) -> bool:
        """Indicate whether every segment in the given mask is present."""
        for selected in iter_segments(segment):
            if selected is Segment.PRE:
                if self._pre_release_type is None:
                    return False
            elif getattr(self, _NUMERIC_ATTRS[selected]) is None:
                return False
        return True

    def has_major(self) -> bool:
        """Major is always present."""
        return True

    def has_minor(self) -> bool:
        """Check if the minor segment is present."""
        return self._minor is not None

    def has_patch(self) -> bool:
        """Check if the patch segment is present."""
        return self._patch is not None

    def has_aux(self) -> bool:
        """Check if the auxiliary segment is present."""
        return self._aux is not None

    def has_pre(self) -> bool:
        """Check if there is a pre-release marker."""
        return self._pre_release_type is not None

    def get_combined_segments(self) -> Segment:
        """Provide the mask of all segments present in this version number."""
        combined = Segment(0)
        for segment in SEGMENT_ORDER:
            if self.has_segment(segment):
                combined |= segment
        return combined

    def get_least_significant_segment(self) -> Segment:
        """Provide the rightmost present segment."""
        for segment in reversed(SEGMENT_ORDER):
            if self.has_segment(segment):
                return segment
        return Segment.MAJOR

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def adjust(self, segment: Union[int, Segment], delta: int) -> "VersionNumber":
        """Add delta to a single segment without changing which segments exist.

        The result is clamped at 0, or at 1 for the pre-release number. Absent
        segments and an untracked pre-release number are left alone.
        """
        segment = _single_segment(segment)
        if not self.has_segment(segment):
            return self

        if segment is Segment.PRE:
            current = self._pre_release_number
            if current is not None:
                self._pre_release_number = max(min(current, 1), current + delta)
            return self

        attr = _NUMERIC_ATTRS[segment]
        setattr(self, attr, max(0, getattr(self, attr) + delta))
        return self

    def increment(self, segment: Union[int, Segment, None] = None) -> "VersionNumber":
        """Increment a segment by 1, the least significant one by default.

        Incrementing a numeric segment resets every present lesser segment to 0
        and removes the pre-release marker, so ``5.2.1-beta.2`` incremented on
        MINOR becomes ``5.3.0``. Incrementing PRE bumps the pre-release number
        and is a no-op on a version without a pre-release marker.
        """
        segment = self.get_least_significant_segment() if segment is None else _single_segment(segment)
        if not self.has_segment(segment):
            return self

        if segment is Segment.PRE:
            if self._pre_release_number is None:
                self._pre_release_number = 1
            else:
                self.adjust(Segment.PRE, 1)
            return self

        self.adjust(segment, 1)
        for lesser in SEGMENT_ORDER[SEGMENT_ORDER.index(segment) + 1 : -1]:
            attr = _NUMERIC_ATTRS[lesser]
            if getattr(self, attr) is not None:
                setattr(self, attr, 0)
        self.set_pre_release_type(None)
        return self

    def decrement(self, segment: Union[int, Segment, None] = None) -> "VersionNumber":
        """Decrement a segment by 1, the least significant one by default."""
        segment = self.get_least_significant_segment() if segment is None else _single_segment(segment)
        return self.adjust(segment, -1)

    def _set_pre_release(self, pre_release_type: str, number: Union[int, str, None]) -> "VersionNumber":
        # A change of type restarts the number at 1, even when the old one was tracked
        if number is not None:
            parsed = _parse_number(number)
        elif self._pre_release_type == pre_release_type and self._pre_release_number is not None:
            parsed = self._pre_release_number
        else:
            parsed = 1
        self._pre_release_type = pre_release_type
        self._pre_release_number = parsed
        return self

    def set_alpha(self, number: Union[int, str, None] = None) -> "VersionNumber":
        """Make this version number an alpha pre-release.

        Without a number, an existing alpha number is kept and anything else
        starts over at 1.
        """
        return self._set_pre_release(self.ALPHA, number)

    def set_beta(self, number: Union[int, str, None] = None) -> "VersionNumber":
        """Make this version number a beta pre-release.

        Without a number, an existing beta number is kept and anything else
        starts over at 1.
        """
        return self._set_pre_release(self.BETA, number)

    def set_stable(self) -> "VersionNumber":
        """Alter this version number to the closest stable state.

        Examples of non-stable version numbers and their closest stable states:
        - 1.2.3-alpha.1 -> 1.2.3
        - 1.2.3-beta.2 -> 1.2.3
        - 0.2.3 -> 1.0.0
        - 0.2 -> 1.0
        """
        self.set_pre_release_type(None)

        # Major zero is never stable (https://semver.org/#spec-item-4)
        if self._major == 0:
            self._major = 1
            for attr in ("_minor", "_patch", "_aux"):
                if getattr(self, attr) is not None:
                    setattr(self, attr, 0)

        return self

    def copy(self) -> "VersionNumber":
        """Return an independent copy of this version number."""
        return VersionNumber(self)

    # ------------------------------------------------------------------
    # Classification
    # ------------------------------------------------------------------

    def is_stable(self) -> bool:
        """A version is stable if it has no pre-release marker and major > 0."""
        return self._pre_release_type is None and self._major > 0

    def is_alpha(self) -> bool:
        """Check if this is an alpha pre-release."""
        return self._pre_release_type == self.ALPHA

    def is_beta(self) -> bool:
        """Check if this is a beta pre-release."""
        return self._pre_release_type == self.BETA

    # The tier checks below treat an absent segment the same as 0

    def is_major(self) -> bool:
        """Indicate whether this version number represents a new major version."""
        return not self._minor and not self._patch and not self._aux

    def is_minor(self) -> bool:
        """Indicate whether this version number represents a new minor version."""
        return bool(self._minor) and not self._patch and not self._aux

    def is_patch(self) -> bool:
        """Indicate whether this version number represents a new patch version."""
        return bool(self._patch) and not self._aux

    def is_aux(self) -> bool:
        """Indicate whether this version number represents a new aux version."""
        return bool(self._aux)

    def is_valid_for(
        self, standard: Union[Standard, Callable[["VersionNumber"], bool]] = Standard.SEMVER_2_0_0
    ) -> bool:
        """Check this version number against a standard or a validator callable."""
        if isinstance(standard, Standard):
            return self.has_major() and self.has_minor() and self.has_patch()
        if callable(standard):
            return bool(standard(self))
        return False

    def matches(self, pattern: str) -> bool:
        """Check whether this version number matches a pattern like ``1.*.3`` or ``2.?.?``."""
        return glob_match(str(self), pattern)

    # ------------------------------------------------------------------
    # Comparison
    # ------------------------------------------------------------------

    def _compare_segment(self, other: "VersionNumber", segment: Segment) -> int:
        if segment is Segment.PRE:
            mine, theirs = self._pre_release_type, other._pre_release_type
            if mine is None or theirs is None:
                # No pre-release marker outranks any pre-release
                return (mine is None) - (theirs is None)
            rank = self._PRE_RELEASE_RANK[mine] - self._PRE_RELEASE_RANK[theirs]
            if rank:
                return 1 if rank > 0 else -1
            return _compare_optional(self._pre_release_number, other._pre_release_number)

        attr = _NUMERIC_ATTRS[segment]
        return _compare_optional(getattr(self, attr), getattr(other, attr))

    def _compare_to(self, other: "VersionNumber", mask: Union[int, Segment, None]) -> int:
        for segment in iter_segments(mask):
            result = self._compare_segment(other, segment)
            if result:
                return result
        return 0

    def is_equal_to(self, other: VersionLike, segment: Union[int, Segment, None] = None) -> bool:
        """Indicate whether another version number is equal to this one.

        Args:
            other: Version number, range (its floor is used) or version string
            segment: Mask of segments to compare, all by default

        An unparseable string is never equal.
        """
        version = _coerce_or_none(other)
        if version is None:
            return False
        return self._compare_to(version, segment) == 0

    def is_higher_than(self, other: VersionLike, segment: Union[int, Segment, None] = None) -> bool:
        """Indicate whether this version number is higher than another one.

        Segments are compared in significance order and the first difference
        decides. A present segment is higher than an absent one.
        """
        version = _coerce_or_none(other)
        if version is None:
            return False
        return self._compare_to(version, segment) > 0

    def is_lower_than(self, other: VersionLike, segment: Union[int, Segment, None] = None) -> bool:
        """Indicate whether this version number is lower than another one."""
        version = _coerce_or_none(other)
        if version is None:
            return False
        return not self.is_equal_to(version, segment) and not self.is_higher_than(version, segment)

    def compare(self, other: VersionLike, segment: Union[int, Segment, None] = None) -> int:
        """Compare with another version number.

        Returns:
            1 if this version is higher, -1 if it is lower, 0 if they are equal

        Raises:
            InvalidFormatError: If other is an unparseable string
        """
        version = _coerce(other)
        if self.is_equal_to(version, segment):
            return 0
        return 1 if self.is_higher_than(version, segment) else -1

    def min(self, other: VersionLike) -> "VersionNumber":
        """Provide the lower of this and another version number, this one on a tie."""
        version = _coerce(other)
        return version if version.is_lower_than(self) else self

    def max(self, other: VersionLike) -> "VersionNumber":
        """Provide the higher of this and another version number, this one on a tie."""
        version = _coerce(other)
        return version if version.is_higher_than(self) else self

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, VersionNumber):
            return NotImplemented
        return self._compare_to(other, None) == 0

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, VersionNumber):
            return NotImplemented
        return self._compare_to(other, None) < 0

    def __le__(self, other: object) -> bool:
        if not isinstance(other, VersionNumber):
            return NotImplemented
        return self._compare_to(other, None) <= 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, VersionNumber):
            return NotImplemented
        return self._compare_to(other, None) > 0

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, VersionNumber):
            return NotImplemented
        return self._compare_to(other, None) >= 0

    # Mutable, so not hashable
    __hash__ = None  # type: ignore[assignment]

    # ------------------------------------------------------------------
    # Ordering helpers
    # ------------------------------------------------------------------

    @staticmethod
    def sort(
        versions: Iterable[Any],
        descending: bool = False,
        accessor: Optional[Callable[[Any], VersionLike]] = None,
    ) -> list[Any]:
        """Sort version strings, version numbers or records. See :func:`segver.compare.sort_versions`."""
        from .compare import sort_versions

        return sort_versions(versions, descending=descending, accessor=accessor)

    @staticmethod
    def get_sorter(
        descending: bool = False,
        accessor: Optional[Callable[[Any], VersionLike]] = None,
    ) -> Callable[[Any], Any]:
        """Provide a sort key. See :func:`segver.compare.get_sorter`."""
        from .compare import get_sorter

        return get_sorter(descending=descending, accessor=accessor)

    @staticmethod
    def get_next(
        versions: Union[str, Iterable[VersionLike]],
        segment: Union[int, Segment, None] = None,
    ) -> "VersionNumber":
        """Provide the next version after the highest given one. See :func:`segver.compare.get_next`."""
        from .compare import get_next

        return get_next(versions, segment)

    def __str__(self) -> str:
        parts = [str(self._major)]
        for value in (self._minor, self._patch, self._aux):
            if value is None:
                break
            parts.append(str(value))
        text = ".".join(parts)

        if self._pre_release_type is not None:
            text += f"-{self._pre_release_type}"
            if self._pre_release_number is not None:
                text += f".{self._pre_release_number}"

        return text

    def __repr__(self) -> str:
        return f"VersionNumber({str(self)!r})"


def _single_segment(segment: Union[int, Segment]) -> Segment:
    segment = Segment(segment)
    if segment not in SEGMENT_ORDER:
        raise ValueError(f"Expected a single segment, got {segment!r}")
    return segment


def _compare_optional(mine: Optional[int], theirs: Optional[int]) -> int:
    """Compare two optional segment values, a present value beating an absent one."""
    if mine == theirs:
        return 0
    if mine is None:
        return -1
    if theirs is None:
        return 1
    return 1 if mine > theirs else -1


def _coerce(value: VersionLike) -> VersionNumber:
    """Turn a version number, range or string into a VersionNumber."""
    from .range import VersionRange

    if isinstance(value, VersionNumber):
        return value
    if isinstance(value, VersionRange):
        return value.version_number
    if isinstance(value, str):
        return VersionNumber(value)
    raise TypeError(f"Cannot compare a version number with {type(value).__name__}")


def _coerce_or_none(value: VersionLike) -> Optional[VersionNumber]:
    try:
        return _coerce(value)
    except InvalidFormatError:
        return None
