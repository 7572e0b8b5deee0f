"""Text-level translation: split on spaces, translate tokens, rejoin.

WHY: Callers hand in sentences, not words. The word rules only need to
know about one token at a time, so this module is the glue that turns
text into tokens and back.

HOW: translate() trims the text, splits on the literal space character,
runs translate_word() on each token and joins with single spaces.
translate_line() does the same but keeps the per-token pairs, and
translate_document() applies it to each line of a multi-line input to
build the Translation IR the formatters consume.

RULES:
- None in, None out (distinct from "" in, "" out)
- Splitting is on " " only: consecutive spaces yield empty tokens,
  which translate to "" and are kept in the join
- Tabs and other whitespace inside a line are not separators
- translate_document() splits lines with str.splitlines(); an empty
  document is a single empty line
"""

from __future__ import annotations

from typing import List, Optional

from pig_latin.config import TOKEN_SEPARATOR
from pig_latin.core.ir import TranslatedLine, Translation, WordPair
from pig_latin.core.word import translate_word


def _tokens(text: str) -> List[str]:
    return text.strip().split(TOKEN_SEPARATOR)


def translate(text: Optional[str]) -> Optional[str]:
    """Translate a line of text into Pig Latin.

    Examples:
        >>> translate("Hello")
        'Ellohay'
        >>> translate("One two 'three'.")
        "Oneway wotay hr'eetay'."
        >>> translate("   ")
        ''
        >>> translate(None) is None
        True
    """
    if text is None:
        return None
    return TOKEN_SEPARATOR.join(translate_word(token) for token in _tokens(text))


def translate_line(line: str) -> TranslatedLine:
    """Translate one line, keeping each token next to its translation."""
    pairs = [WordPair(source=token, translated=translate_word(token)) for token in _tokens(line)]
    return TranslatedLine(
        source=line,
        translated=TOKEN_SEPARATOR.join(pair.translated for pair in pairs),
        words=pairs,
    )


def translate_document(text: str, source_name: str = "stdin") -> Translation:
    """Translate multi-line text into the Translation IR.

    Args:
        text: The whole input, possibly spanning several lines.
        source_name: Label recorded on the result (file name, "stdin", "args").

    Returns:
        Translation with one TranslatedLine per input line.
    """
    lines = text.splitlines() or [""]
    return Translation(
        lines=[translate_line(line) for line in lines],
        source_name=source_name,
    )
