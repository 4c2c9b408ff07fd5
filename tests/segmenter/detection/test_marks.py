"""
Unit Tests for Trailing Mark Detection
"""

import pytest

from quiz_toolkit.segmenter.detection.marks import extract_trailing_marks, parse_number


class TestParseNumber:
    """Tests for parse_number."""

    def test_parse_when_ascii_digits_then_int(self):
        assert parse_number("12") == 12

    def test_parse_when_bengali_digits_then_int(self):
        assert parse_number("১২") == 12
        assert parse_number("৪") == 4

    def test_parse_when_not_digits_then_raises_error(self):
        with pytest.raises(ValueError, match="Not a number"):
            parse_number("4a")


class TestExtractTrailingMarks:
    """Tests for extract_trailing_marks."""

    def test_extract_when_parenthesized_then_removed(self):
        assert extract_trailing_marks("Explain with ray diagram. (4)") == (
            "Explain with ray diagram.", 4,
        )

    def test_extract_when_square_brackets_then_removed(self):
        assert extract_trailing_marks("State the law [2]") == ("State the law", 2)

    def test_extract_when_bengali_digits_then_parsed(self):
        assert extract_trailing_marks("লেন্স কী? (১)") == ("লেন্স কী?", 1)

    def test_extract_when_inner_spaces_then_parsed(self):
        assert extract_trailing_marks("Why? ( 3 )") == ("Why?", 3)

    def test_extract_when_no_marks_then_none(self):
        assert extract_trailing_marks("What is dye?  ") == ("What is dye?", None)

    def test_extract_when_parenthesis_not_trailing_then_none(self):
        assert extract_trailing_marks("Find (2) values") == ("Find (2) values", None)

    def test_extract_when_non_numeric_parenthesis_then_none(self):
        assert extract_trailing_marks("Name it (briefly)") == ("Name it (briefly)", None)

    def test_extract_when_bare_number_and_disabled_then_kept(self):
        assert extract_trailing_marks("Add 2 and 2") == ("Add 2 and 2", None)

    def test_extract_when_bare_number_and_enabled_then_parsed(self):
        assert extract_trailing_marks("কারণ লেখো। ২", allow_bare=True) == ("কারণ লেখো।", 2)
