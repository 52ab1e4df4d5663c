# SPDX-License-Identifier: MIT
"""Property-based tests for version numbers.

These tests verify that:
- Canonical version strings survive a parse/format round trip
- Comparison is a total order consistent with equality
- Increment followed by decrement restores the version away from the floor
- Stability follows the pre-release marker and major zero
- set_stable is idempotent
"""

from __future__ import annotations

from hypothesis import given, settings, strategies as st

from segver import Segment, VersionNumber, VersionRange


# =============================================================================
# Strategies for generating test data
# =============================================================================

segment_values = st.integers(min_value=0, max_value=30)


@st.composite
def version_strings(draw, tracked_pre_release: bool = False):
    """Generate canonical version strings such as ``3.0.12-beta.2``."""
    arity = draw(st.integers(min_value=1, max_value=4))
    text = ".".join(str(draw(segment_values)) for _ in range(arity))

    pre_release_type = draw(st.sampled_from([None, "alpha", "beta"]))
    if pre_release_type is not None:
        text += f"-{pre_release_type}"
        if tracked_pre_release or draw(st.booleans()):
            text += f".{draw(segment_values)}"

    return text


versions = version_strings().map(VersionNumber)

segment_masks = st.integers(min_value=0, max_value=int(Segment.ALL))


# =============================================================================
# Property tests
# =============================================================================


class TestRoundTrip:
    """Formatting a parsed canonical string gives back the same string."""

    @given(text=version_strings())
    @settings(max_examples=200)
    def test_round_trip(self, text):
        assert str(VersionNumber(text)) == text

    @given(text=version_strings())
    def test_uppercase_round_trip(self, text):
        assert str(VersionNumber(text.upper())) == text


class TestOrdering:
    """Comparison is a total order consistent with equality."""

    @given(version=versions, mask=segment_masks)
    def test_equality_is_reflexive(self, version, mask):
        assert version.is_equal_to(version.copy(), mask)
        assert version.compare(version.copy(), mask) == 0

    @given(a=versions, b=versions, mask=segment_masks)
    @settings(max_examples=300)
    def test_equality_is_symmetric(self, a, b, mask):
        assert a.is_equal_to(b, mask) == b.is_equal_to(a, mask)

    @given(a=versions, b=versions, mask=segment_masks)
    @settings(max_examples=300)
    def test_exactly_one_relation_holds(self, a, b, mask):
        relations = [a.is_higher_than(b, mask), a.is_equal_to(b, mask), a.is_lower_than(b, mask)]
        assert relations.count(True) == 1

    @given(a=versions, b=versions)
    @settings(max_examples=300)
    def test_compare_is_antisymmetric(self, a, b):
        assert a.compare(b) == -b.compare(a)
        assert (a.compare(b) == 0) == a.is_equal_to(b)

    @given(a=versions, b=versions, c=versions)
    def test_transitivity(self, a, b, c):
        if a.is_higher_than(b) and b.is_higher_than(c):
            assert a.is_higher_than(c)

    @given(a=versions, b=versions)
    def test_min_max(self, a, b):
        assert a.max(b).compare(a.min(b)) >= 0


class TestMutation:
    """Properties of increment, decrement and set_stable."""

    @given(text=version_strings(tracked_pre_release=True))
    def test_increment_then_decrement(self, text):
        version = VersionNumber(text)
        segment = version.get_least_significant_segment()
        if segment is Segment.PRE:
            floor_ok = version.pre_release_number >= 1
        else:
            floor_ok = True

        if floor_ok:
            assert str(version.increment().decrement()) == text

    @given(version=versions)
    def test_increment_is_higher(self, version):
        before = version.copy()
        assert version.increment().is_higher_than(before)

    @given(text=version_strings())
    def test_stability_rule(self, text):
        version = VersionNumber(text)
        assert version.is_stable() == (version.pre_release_type is None and version.major > 0)

    @given(version=versions)
    def test_set_stable_is_idempotent(self, version):
        once = str(version.set_stable())
        assert version.is_stable()
        assert str(version.set_stable()) == once

    @given(version=versions, delta=st.integers(min_value=-50, max_value=50))
    def test_adjust_keeps_segments(self, version, delta):
        segments = version.get_combined_segments()
        for segment in (Segment.MAJOR, Segment.MINOR, Segment.PATCH, Segment.AUX, Segment.PRE):
            version.adjust(segment, delta)
        assert version.get_combined_segments() == segments


class TestRangeProperties:
    """Properties of caret ranges."""

    @given(floor=versions, candidate=versions)
    @settings(max_examples=300)
    def test_in_range_means_same_major_and_not_lower(self, floor, candidate):
        version_range = VersionRange(f"^{floor}")
        expected = candidate.major == floor.major and candidate.compare(floor) >= 0
        assert version_range.is_in_range(candidate) == expected

    @given(floor=versions, candidates=st.lists(versions, max_size=10))
    def test_highest_match_is_in_range(self, floor, candidates):
        version_range = VersionRange(f"^{floor}")
        match = version_range.get_highest_match(candidates)
        in_range = [c for c in candidates if version_range.is_in_range(c)]
        if match is None:
            assert not in_range
        else:
            assert version_range.is_in_range(match)
            assert all(match.compare(c) >= 0 for c in in_range)
