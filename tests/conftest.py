"""Shared test fixtures for the pig_latin test suite.

WHY: Several test modules need the same worked examples and a ready-made
Translation IR. Centralizing them here keeps the expected values in one
place.

HOW: WORKED_EXAMPLES holds the literal input/output pairs the translator
must reproduce. Pytest fixtures provide a multi-line Translation and the
sample plain words used by the property tests.

RULES:
- WORKED_EXAMPLES are exact strings; never loosen them to "contains" checks
- Fixtures build fresh objects per test (no shared mutable state)
"""

from typing import List, Tuple

import pytest

from pig_latin.core.ir import Translation
from pig_latin.core.text import translate_document


WORKED_EXAMPLES: List[Tuple[str, str]] = [
    ("   ", ""),
    ("Hello", "Ellohay"),
    ("apple", "appleway"),
    ("stairway", "stairway"),
    ("can't", "antca'y"),
    ("end.", "endway."),
    ("\"end\".", "end\"way\"."),
    ("this-thing", "histay-hingtay"),
    ("a-b-c-d", "away-bay-cay-day"),
    ("Beach", "Eachbay"),
    ("McCloud", "CcLoudmay"),
    ("a'b'c'd", "abcd'w'a'y"),
    ("pig-latin", "igpay-atinlay"),
    ("One two 'three'.", "Oneway wotay hr'eetay'."),
]

# Letters only: no hyphens, no punctuation, lowercase.
PLAIN_WORDS: List[str] = [
    "apple", "hello", "stairway", "beach", "x", "a", "way", "yellow",
    "rhythm", "igloo", "underway", "string", "queue", "e",
]


@pytest.fixture
def sample_translation() -> Translation:
    """A two-line document with capitals, punctuation and a hyphen."""
    return translate_document("Hello world.\nThe pig-latin can't wait", source_name="story.txt")


@pytest.fixture
def plain_words() -> List[str]:
    return list(PLAIN_WORDS)
