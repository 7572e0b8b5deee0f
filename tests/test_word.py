"""Unit tests for single-word translation (pig_latin.core.word).

WHY: All of the translator's behaviour lives in translate_word() and its
helpers. Positional case restore and distance-from-end punctuation are
easy to get subtly wrong, and the errors only show up on specific words.

HOW: Tests are grouped by step (punctuation/case extraction, rule
application, restore), then by the end-to-end properties every
translated word must have.

RULES:
- Case restore is positional: "McCloud" -> "CcLoudmay" is correct
- Property tests use words made of lowercase letters only
"""

import pytest

from pig_latin.core.ir import PunctuationMark
from pig_latin.core.word import (
    apply_rules,
    is_punctuation,
    is_vowel,
    restore_word,
    strip_word,
    translate_word,
)


class TestClassification:

    @pytest.mark.parametrize("ch", [".", ",", ":", ";", "'", "\""])
    def test_punctuation_set(self, ch):
        assert is_punctuation(ch)

    @pytest.mark.parametrize("ch", ["!", "?", "-", "(", "a", " "])
    def test_not_punctuation(self, ch):
        assert not is_punctuation(ch)

    def test_vowels_are_lowercase_ascii_only(self):
        assert all(is_vowel(ch) for ch in "aeiou")
        assert not is_vowel("y")
        assert not is_vowel("A")
        assert not is_vowel("é")


class TestStripWord:
    """strip_word() removes punctuation and records case in one pass."""

    def test_plain_lowercase_word(self):
        stripped = strip_word("hello")
        assert stripped.residual == "hello"
        assert stripped.upper_case_indexes == []
        assert stripped.marks == []

    def test_records_uppercase_positions(self):
        stripped = strip_word("McCloud")
        assert stripped.residual == "mccloud"
        assert stripped.upper_case_indexes == [0, 2]

    def test_marks_anchored_from_end(self):
        stripped = strip_word("'three'.")
        assert stripped.residual == "three"
        assert stripped.marks == [
            PunctuationMark(distance_from_end=7, char="'"),
            PunctuationMark(distance_from_end=1, char="'"),
            PunctuationMark(distance_from_end=0, char="."),
        ]

    def test_uppercase_index_skips_removed_punctuation(self):
        """'"Hi': H is at original index 1 but residual index 0."""
        stripped = strip_word("\"Hi")
        assert stripped.residual == "hi"
        assert stripped.upper_case_indexes == [0]

    def test_pure_punctuation(self):
        stripped = strip_word("...")
        assert stripped.residual == ""
        assert [m.distance_from_end for m in stripped.marks] == [2, 1, 0]


class TestApplyRules:

    def test_consonant_moves_first_letter_and_adds_ay(self):
        assert apply_rules("hello") == "ellohay"

    def test_vowel_adds_way(self):
        assert apply_rules("apple") == "appleway"

    def test_way_ending_is_unchanged(self):
        assert apply_rules("stairway") == "stairway"
        assert apply_rules("way") == "way"

    def test_way_check_comes_before_vowel_check(self):
        assert apply_rules("anyway") == "anyway"

    def test_y_is_a_consonant(self):
        assert apply_rules("yellow") == "ellowyay"

    def test_single_consonant(self):
        assert apply_rules("x") == "xay"

    def test_empty_residual(self):
        assert apply_rules("") == ""


class TestRestoreWord:

    def test_uppercase_at_same_index(self):
        assert restore_word("eachbay", [0], []) == "Eachbay"

    def test_marks_inserted_back_to_front(self):
        marks = [
            PunctuationMark(distance_from_end=5, char="'"),
            PunctuationMark(distance_from_end=3, char="'"),
            PunctuationMark(distance_from_end=1, char="'"),
        ]
        assert restore_word("abcdway", [], marks) == "abcd'w'a'y"

    def test_nothing_to_restore(self):
        assert restore_word("ellohay", [], []) == "ellohay"


class TestTranslateWord:
    """translate_word() end to end."""

    def test_empty_word(self):
        assert translate_word("") == ""

    def test_none_is_rejected(self):
        with pytest.raises(ValueError, match="must not be None"):
            translate_word(None)

    def test_capitalized_consonant_word(self):
        assert translate_word("Hello") == "Ellohay"
        assert translate_word("Beach") == "Eachbay"

    def test_case_is_positional_not_semantic(self):
        """The capital M is lost; index 0 now holds the second letter."""
        assert translate_word("McCloud") == "CcLoudmay"

    def test_all_caps(self):
        assert translate_word("HELLO") == "ELLOHay"

    def test_apostrophe_keeps_distance_from_end(self):
        assert translate_word("can't") == "antca'y"
        assert translate_word("Don't") == "Ontda'y"

    def test_quotes_and_period(self):
        assert translate_word("\"end\".") == "end\"way\"."

    def test_alternating_apostrophes(self):
        assert translate_word("a'b'c'd") == "abcd'w'a'y"

    def test_pure_punctuation_is_unchanged(self):
        assert translate_word("...") == "..."
        assert translate_word("'") == "'"

    def test_hyphen_splits_into_two_words(self):
        assert translate_word("this-thing") == "histay-hingtay"

    def test_multiple_hyphens(self):
        assert translate_word("a-b-c-d") == "away-bay-cay-day"

    def test_leading_and_trailing_hyphens(self):
        assert translate_word("-pig") == "-igpay"
        assert translate_word("pig-") == "igpay-"
        assert translate_word("--") == "--"

    def test_hyphen_with_punctuation_on_each_side(self):
        assert translate_word("can't-stop.") == "antca'y-topsay."

    def test_non_ascii_letters_are_consonants(self):
        assert translate_word("über") == "berüay"

    def test_stairway_is_a_fixed_point(self):
        assert translate_word("stairway") == "stairway"
        assert translate_word(translate_word("stairway")) == "stairway"


class TestWordProperties:
    """Properties that hold for every plain lowercase word."""

    def test_length_change(self, plain_words):
        for word in plain_words:
            result = translate_word(word)
            if word.endswith("way"):
                expected = len(word)
            elif word[0] in "aeiou":
                expected = len(word) + 3
            else:
                expected = len(word) + 2
            assert len(result) == expected, word

    def test_letters_are_preserved(self, plain_words):
        for word in plain_words:
            result = translate_word(word)
            for letter in set(word):
                assert result.count(letter) >= word.count(letter), word

    def test_hyphen_decomposition(self, plain_words):
        for left in plain_words:
            for right in plain_words[:4]:
                joined = translate_word(left + "-" + right)
                assert joined == translate_word(left) + "-" + translate_word(right)

    @pytest.mark.parametrize("word", [
        "can't", "end.", "'three'.", "a'b'c'd", "\"end\".", "x;", ":colon", "..",
    ])
    def test_punctuation_distance_from_end_preserved(self, word):
        def distances(s):
            return [(len(s) - i - 1, ch) for i, ch in enumerate(s) if ch in ".,:;'\""]

        assert distances(translate_word(word)) == distances(word)
