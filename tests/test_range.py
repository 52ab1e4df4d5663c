# SPDX-License-Identifier: MIT
"""Unit tests for caret version ranges."""

import pytest

from segver import InvalidFormatError, Segment, VersionNumber, VersionRange


CANDIDATES = ["1.0.0", "1.2.0", "2.0.0", "2.1.0", "2.1.1", "2.2.0", "3.0.0"]


class TestParseRange:
    """Tests for constructing ranges."""

    def test_version_number(self):
        version_range = VersionRange("^1.2.3")
        assert isinstance(version_range.version_number, VersionNumber)
        assert str(version_range.version_number) == "1.2.3"

    def test_floor_is_a_copy(self):
        version_range = VersionRange("^1.2.3")
        version_range.version_number.increment()
        assert str(version_range) == "^1.2.3"

    @pytest.mark.parametrize("text", ["^1.2.3", "^1.2.3-alpha", "^1.2.3-alpha.1", "^2"])
    def test_valid(self, text):
        assert VersionRange.is_valid(text)
        assert str(VersionRange.parse(text)) == text

    @pytest.mark.parametrize("text", ["^ 1.2.3", "1.2.3", "^", "^^1.2", "~1.2", "^1.2.x"])
    def test_invalid(self, text):
        assert not VersionRange.is_valid(text)
        with pytest.raises(InvalidFormatError) as exc_info:
            VersionRange(text)
        assert exc_info.value.value == text

    def test_is_valid_non_string(self):
        assert VersionRange.is_valid(VersionRange("^1"))
        assert not VersionRange.is_valid(None)

    def test_copy(self):
        assert VersionRange(VersionRange("^2.1")) == VersionRange("^2.1")


class TestIsInRange:
    """Tests for is_in_range."""

    @pytest.mark.parametrize("candidate", ["2.0", "2.0.0", "2.1.0", "2.9"])
    def test_in_range(self, candidate):
        assert VersionRange("^2.0").is_in_range(candidate) is True

    @pytest.mark.parametrize("candidate", ["2", "1.2.2", "3.0.0", "2.0-beta.1"])
    def test_out_of_range(self, candidate):
        assert VersionRange("^2.0").is_in_range(candidate) is False

    def test_invalid_candidate_is_false(self):
        assert VersionRange("^2.0").is_in_range("two") is False

    def test_version_number_candidate(self):
        assert VersionRange("^1.4").is_in_range(VersionNumber("1.5.2"))


class TestGetHighestMatch:
    """Tests for get_highest_match."""

    def test_example(self):
        assert VersionRange("^2.1.2").get_highest_match(CANDIDATES) == "2.2.0"

    def test_no_match(self):
        assert VersionRange("^4").get_highest_match(CANDIDATES) is None

    def test_below(self):
        version_range = VersionRange("^2.0.0")
        assert version_range.get_highest_match(CANDIDATES, below="2.2.0") == "2.1.1"
        assert version_range.get_highest_match(CANDIDATES, below="2.0.0") is None

    def test_invalid_below_raises(self):
        with pytest.raises(InvalidFormatError):
            VersionRange("^2.0.0").get_highest_match(CANDIDATES, below="latest")

    def test_returns_given_object(self):
        candidate = VersionNumber("1.3")
        assert VersionRange("^1.1").get_highest_match([VersionNumber("1.0"), candidate]) is candidate

    def test_skips_invalid_candidates(self):
        assert VersionRange("^1").get_highest_match(["latest", "1.4", "nightly"]) == "1.4"


class TestRangeComparison:
    """Tests for comparisons delegated to the floor."""

    def test_against_strings(self):
        version_range = VersionRange("^2.1")
        assert version_range.is_equal_to("2.1")
        assert version_range.is_higher_than("2.0.9")
        assert version_range.is_lower_than("2.1.0")

    def test_against_ranges(self):
        assert VersionRange("^2.1").is_higher_than(VersionRange("^2.0"))
        assert VersionRange("^2.1").is_lower_than(VersionRange("^3"))

    def test_masked(self):
        assert VersionRange("^2.1").is_equal_to("2.5", Segment.MAJOR)

    def test_invalid_other_is_false(self):
        version_range = VersionRange("^2.1")
        assert not version_range.is_equal_to("x")
        assert not version_range.is_higher_than("x")
        assert not version_range.is_lower_than("x")
