"""Single-word Pig Latin translation with case and punctuation restore.

WHY: Words in real text carry capitals, apostrophes, quotes, and
trailing periods. The Pig Latin rules only make sense on bare lowercase
letters, so everything else has to be lifted out first and put back
afterwards without losing its place.

HOW: translate_word() runs four steps:
  1. Hyphenated words are split at the first hyphen and each half is
     translated on its own (the right half recurses again if needed).
  2. strip_word() scans once, left to right, removing punctuation and
     lowercasing letters while recording what was removed.
  3. apply_rules() applies the Pig Latin rule to the residual letters.
  4. restore_word() re-applies uppercase at the recorded positions and
     re-inserts punctuation at its recorded distance from the end.

RULES:
- Words ending in "way" are left unchanged
- Vowel-initial words (a, e, i, o, u) get "way" appended
- Consonant-initial words move their first letter to the end, then "ay"
- Uppercase is restored at the same numeric index, not the same letter:
  "McCloud" -> "CcLoudmay"
- Punctuation keeps its distance from the end of the word:
  "can't" -> "antca'y"
- Pure punctuation words come back unchanged; empty words stay empty
- None is a programming error and raises ValueError
"""

from __future__ import annotations

from typing import List

from pig_latin.config import AY_SUFFIX, HYPHEN, PUNCTUATION, VOWELS, WAY_SUFFIX
from pig_latin.core.ir import PunctuationMark, StrippedWord


def is_punctuation(ch: str) -> bool:
    """True if ch is one of . , : ; ' " (the marks kept in place)."""
    return ch in PUNCTUATION


def is_vowel(ch: str) -> bool:
    return ch in VOWELS


def strip_word(word: str) -> StrippedWord:
    """Remove punctuation and lowercase letters in a single left-to-right pass.

    WHY: The rules run on bare lowercase letters, but the removed
    punctuation and the uppercase positions are needed to rebuild the
    word afterwards.

    HOW: Each punctuation character becomes a PunctuationMark anchored by
    its distance from the end of the original word. Every other character
    is lowercased into the residual; if it was uppercase, its index in the
    residual (original index minus marks removed so far) is recorded.

    Args:
        word: A single word without hyphens.

    Returns:
        StrippedWord with the residual, uppercase indexes and marks.
    """
    length = len(word)
    residual: List[str] = []
    upper_case_indexes: List[int] = []
    marks: List[PunctuationMark] = []

    for i, ch in enumerate(word):
        if is_punctuation(ch):
            marks.append(PunctuationMark(distance_from_end=length - i - 1, char=ch))
            continue
        if ch.isupper():
            upper_case_indexes.append(i - len(marks))
        residual.append(ch.lower())

    return StrippedWord(
        residual="".join(residual),
        upper_case_indexes=upper_case_indexes,
        marks=marks,
    )


def apply_rules(residual: str) -> str:
    """Apply the Pig Latin rule to a lowercase, punctuation-free word.

    An empty residual (the word was all punctuation) stays empty.
    """
    if not residual:
        return ""

    # Already in Pig Latin form ("stairway")
    if residual.endswith(WAY_SUFFIX):
        return residual

    first = residual[0]
    if is_vowel(first):
        return residual + WAY_SUFFIX
    return residual[1:] + first + AY_SUFFIX


def restore_word(
    transformed: str,
    upper_case_indexes: List[int],
    marks: List[PunctuationMark],
) -> str:
    """Put case and punctuation back into a transformed word.

    WHY: The translated word must read like the original: same capitals
    in the same places, same punctuation at the same distance from the
    end.

    HOW: Uppercase is stamped at each recorded index as-is; the indexes
    are not shifted for the rotation done by the consonant rule. Marks are
    then inserted from the last found to the first found, each at
    ``len(chars) - distance_from_end`` measured at the time of insertion.

    RULES:
    - Case indexes are positional: index 0 uppercases whatever letter
      ends up first after the rule, not the letter that was first before
    - Marks are processed back to front so earlier inserts don't shift
      the positions of later ones
    """
    chars = list(transformed)

    for index in upper_case_indexes:
        chars[index] = chars[index].upper()

    for mark in reversed(marks):
        chars.insert(len(chars) - mark.distance_from_end, mark.char)

    return "".join(chars)


def translate_word(word: str) -> str:
    """Translate one space-free token into Pig Latin.

    Args:
        word: The token to translate. May contain hyphens and punctuation.

    Returns:
        The translated token. Empty input returns "".

    Raises:
        ValueError: If word is None.
    """
    if word is None:
        raise ValueError("word must not be None")
    if not word:
        return ""

    # Hyphens are treated as two words
    hyphen_index = word.find(HYPHEN)
    if hyphen_index >= 0:
        return (
            translate_word(word[:hyphen_index])
            + HYPHEN
            + translate_word(word[hyphen_index + 1:])
        )

    stripped = strip_word(word)
    transformed = apply_rules(stripped.residual)
    return restore_word(transformed, stripped.upper_case_indexes, stripped.marks)
