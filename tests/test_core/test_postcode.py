"""
Tests for the UK/NI postcode locator.
"""

import pytest
from labelscan.core.postcode import (
    POSTCODE_PATTERN,
    PostcodeMatch,
    locate_postcode,
    normalize_postcode,
)


class TestPostcodePattern:
    """Tests for the postcode regex itself."""

    @pytest.mark.parametrize("postcode", [
        "SW1A 1AA",  # AA9A 9AA
        "BT1 1AA",   # AA9 9AA
        "M1 1AE",    # A9 9AA
        "B33 8TH",   # A99 9AA
        "CR2 6XH",   # AA9 9AA
        "DN55 1PT",  # AA99 9AA
        "W1A 0AX",   # A9A 9AA
        "EC1A1BB",   # no space
    ])
    def test_matches_all_outward_shapes(self, postcode):
        """Test every UK outward-code shape matches in full."""
        match = POSTCODE_PATTERN.search(postcode)
        assert match is not None
        assert match.group(0) == postcode

    def test_case_insensitive(self):
        """Test lowercase postcodes are recognised."""
        assert POSTCODE_PATTERN.search("bt7 1nn").group(0) == "bt7 1nn"

    @pytest.mark.parametrize("text", [
        "JOHN SMITH",
        "42 HIGH STREET",
        "1234567890",
        "AB1234567890123456789",
        "TRACKING123456789ABC",
        "",
    ])
    def test_non_postcodes(self, text):
        """Test address lines and tracking codes do not match."""
        assert POSTCODE_PATTERN.search(text) is None

    @pytest.mark.parametrize("text", [
        "Room12 3rd floor",
        "XSW1A 1AA",
        "SW1A 1AAB",
        "ABC12 3DEF",
    ])
    def test_requires_word_boundaries(self, text):
        """Test a postcode shape inside a longer token is not matched."""
        assert POSTCODE_PATTERN.search(text) is None

    def test_boundary_at_punctuation(self):
        """Test commas and full stops count as boundaries."""
        assert POSTCODE_PATTERN.search("LONDON,SW1A 1AA.").group(0) == "SW1A 1AA"


class TestLocatePostcode:
    """Tests for locate_postcode()."""

    def test_finds_postcode_line(self):
        """Test the index and matched text are returned."""
        lines = ["JOHN SMITH", "42 HIGH STREET", "LONDON", "SW1A 1AA"]
        assert locate_postcode(lines) == PostcodeMatch(index=3, text="SW1A 1AA")

    def test_returns_substring_not_line(self):
        """Test only the postcode part of a longer line is returned."""
        match = locate_postcode(["JOHN SMITH", "Belfast bt7 1nn"])
        assert match.index == 1
        assert match.text == "bt7 1nn"

    def test_first_line_wins(self):
        """Test a later postcode is ignored."""
        match = locate_postcode(["M1 1AE", "SW1A 1AA"])
        assert match == PostcodeMatch(index=0, text="M1 1AE")

    def test_first_match_on_line_wins(self):
        """Test a second postcode on the same line is ignored."""
        match = locate_postcode(["FROM M1 1AE TO SW1A 1AA"])
        assert match.text == "M1 1AE"

    def test_not_found(self):
        """Test None when no line holds a postcode."""
        assert locate_postcode(["hello", "world"]) is None

    def test_empty_list(self):
        """Test an empty line list."""
        assert locate_postcode([]) is None


class TestNormalizePostcode:
    """Tests for postcode normalisation."""

    def test_inserts_space(self):
        assert normalize_postcode("sw1a1aa") == "SW1A 1AA"

    def test_collapses_whitespace(self):
        assert normalize_postcode("bt1   1aa") == "BT1 1AA"

    def test_non_postcode_uppercased(self):
        """Test text that is not a postcode is only stripped and uppercased."""
        assert normalize_postcode(" hello ") == "HELLO"

    def test_match_property(self):
        """Test PostcodeMatch.normalized."""
        assert PostcodeMatch(index=0, text="m11ae").normalized == "M1 1AE"
