"""
Unit Tests for Part Enumerators

Tests for the explicit Latin / Bengali label sets.
"""

import pytest

from quiz_toolkit.common.labels import (
    BENGALI_ENUMERATORS,
    LATIN_ENUMERATORS,
    PART_ENUMERATORS,
    enumerator_index,
    to_latin,
)


class TestEnumeratorSets:
    """Tests for the enumerator constants."""

    def test_bengali_set_starts_with_quiz_labels(self):
        assert BENGALI_ENUMERATORS[:4] == ("ক", "খ", "গ", "ঘ")

    def test_sets_contain_only_their_own_script(self):
        assert all("a" <= c <= "z" for c in LATIN_ENUMERATORS)
        assert all("\u0980" <= c <= "\u09ff" for c in BENGALI_ENUMERATORS)

    def test_gujarati_letters_are_not_enumerators(self):
        # Gujarati "ઘ" sits at the end of an accidental a-to-Gujarati range
        assert "\u0a98" not in PART_ENUMERATORS  # ઘ
        assert "\u0a95" not in PART_ENUMERATORS  # ક

    def test_combined_set_is_latin_then_bengali(self):
        assert PART_ENUMERATORS == LATIN_ENUMERATORS + BENGALI_ENUMERATORS


class TestToLatin:
    """Tests for to_latin / enumerator_index."""

    @pytest.mark.parametrize("letter,expected", [
        ("ক", "a"), ("খ", "b"), ("গ", "c"), ("ঘ", "d"), ("ঞ", "j"),
    ])
    def test_to_latin_when_bengali_then_maps_by_position(self, letter, expected):
        assert to_latin(letter) == expected

    def test_to_latin_when_upper_latin_then_lowered(self):
        assert to_latin("C") == "c"

    def test_to_latin_when_unknown_then_unchanged(self):
        assert to_latin("?") == "?"

    def test_enumerator_index_when_known_then_position(self):
        assert enumerator_index("d") == 3
        assert enumerator_index("গ") == 2
        assert enumerator_index("৩") is None
