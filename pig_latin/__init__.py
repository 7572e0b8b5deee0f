"""Pig Latin translator: a case- and punctuation-preserving word game.

WHY: Turning free-form text into Pig Latin sounds trivial until the text
has capitals, apostrophes, quotes, and hyphenated compounds. This package
keeps the word rules in one pure core and puts every outer surface
(formatters, CLI) on top of it.

HOW: Two-stage pipeline: translate (core, pure functions) and format
(pluggable formatters). The CLI wires them together.

RULES:
- translate() is the public entry point for plain strings
- translate_word() is exposed for direct testing of single words
- translate_document() builds the Translation IR that formatters consume
"""

from pig_latin.core.text import translate, translate_document
from pig_latin.core.word import translate_word

__version__ = "0.1.0"

__all__ = [
    "translate",
    "translate_document",
    "translate_word",
    "__version__",
]
