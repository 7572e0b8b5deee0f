"""Dataclasses shared by the translator core and the formatters.

WHY: A word's translation strips punctuation and case, transforms the
bare letters, then puts case and punctuation back. The bits removed in
the first step have to be carried to the last one. At the text level,
formatters need each line and token alongside its translation.

HOW: Five dataclasses:
  PunctuationMark: one removed punctuation character and its anchor
  StrippedWord: the residual word plus everything removed from it
  WordPair: one space-delimited token and its translation
  TranslatedLine: one input line and its tokens
  Translation: a whole document (the formatters' input)

RULES:
- Nothing here outlives a single translate call except Translation
- distance_from_end counts characters strictly after the mark in the
  original word, so it survives the length change of the transformation
- upper_case_indexes point into the residual word, in ascending order
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List


@dataclass(frozen=True)
class PunctuationMark:
    """A punctuation character removed from a word.

    Attributes:
        distance_from_end: Characters after the mark in the original word.
        char: The punctuation character itself.
    """

    distance_from_end: int
    char: str


@dataclass
class StrippedWord:
    """A word with its punctuation removed and its letters lowercased.

    Attributes:
        residual: Lowercase word without punctuation.
        upper_case_indexes: Positions in ``residual`` that were uppercase.
        marks: Removed punctuation, in the order found (left to right).
    """

    residual: str
    upper_case_indexes: List[int] = field(default_factory=list)
    marks: List[PunctuationMark] = field(default_factory=list)


@dataclass
class WordPair:
    source: str
    translated: str


@dataclass
class TranslatedLine:
    """One input line, its translation, and the per-token pairs."""

    source: str
    translated: str
    words: List[WordPair] = field(default_factory=list)


@dataclass
class Translation:
    """A translated document, as consumed by the formatters.

    Attributes:
        lines: Translated lines in input order.
        source_name: Where the text came from (file name, "stdin", "args").
    """

    lines: List[TranslatedLine]
    source_name: str = "stdin"

    @property
    def text(self) -> str:
        """All translated lines joined with newlines."""
        return "\n".join(line.translated for line in self.lines)

    @property
    def word_count(self) -> int:
        return sum(len(line.words) for line in self.lines)
