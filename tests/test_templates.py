# SPDX-License-Identifier: MIT
"""Unit tests for template extraction and wildcard matching."""

import pytest

from segver import extract_segments, glob_match


TEMPLATES = ["{major}.{minor}-{preType}", "{major}.{minor}", "{major}"]


class TestExtractSegments:
    """Tests for extract_segments."""

    def test_first_matching_template_wins(self):
        assert extract_segments("1.2-beta", TEMPLATES) == {
            "major": "1",
            "minor": "2",
            "preType": "beta",
        }

    def test_missing_placeholders_are_absent(self):
        assert extract_segments("4", TEMPLATES) == {"major": "4"}

    def test_no_match(self):
        assert extract_segments("1.2.3", TEMPLATES) is None

    def test_placeholders_stop_at_separators(self):
        assert extract_segments("1-2.3", ["{a}.{b}"]) is None

    def test_constraints(self):
        constraints = {"preType": "alpha|beta"}
        assert extract_segments("1.2-gamma", TEMPLATES, constraints) is None
        assert extract_segments("1.2-alpha", TEMPLATES, constraints)["preType"] == "alpha"

    def test_literal_punctuation_is_escaped(self):
        assert extract_segments("^1.0", ["^{tuple}"], {"tuple": r"\S+"}) == {"tuple": "1.0"}
        assert extract_segments("x1.0", ["^{tuple}"]) is None


class TestGlobMatch:
    """Tests for glob_match."""

    @pytest.mark.parametrize(
        ("text", "pattern", "expected"),
        [
            ("1.2.13", "1.2.13", True),
            ("1.2.13", "*.*.*", True),
            ("1.2.13", "?.?.??", True),
            ("1.2.13", "?.?.?", False),
            ("1.2.13", "1.*", False),
            ("1.2.13", "1*", False),
            ("1x2", "1?2", False),
            ("1.2.3-beta.1", "1.2.3-*.1", False),
            ("1.2.3-beta.1", "1.2.3-beta.*", True),
        ],
    )
    def test_glob_match(self, text, pattern, expected):
        assert glob_match(text, pattern) is expected
