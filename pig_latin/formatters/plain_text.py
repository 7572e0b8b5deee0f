"""Plain text formatter: the translated text, one line per input line.

WHY: The common case is reading the Pig Latin itself. This is the
simplest formatter and the CLI default.

HOW: Joins the translated lines with newlines and adds a trailing
newline so the output is a well-formed text file.

RULES:
- Line order and count match the input
- Exactly one trailing newline
- Output suffix: "-piglatin.txt"
- Media type: "text/plain"
"""

from __future__ import annotations

import logging
from typing import List

from pig_latin.core.ir import Translation
from pig_latin.formatters.base import BaseFormatter, FormatterOutput

logger = logging.getLogger(__name__)


class PlainTextFormatter(BaseFormatter):
    """Formatter that writes the translated text as-is."""

    @property
    def name(self) -> str:
        return "Plain Text"

    def format(self, translation: Translation) -> List[FormatterOutput]:
        content = translation.text + "\n"
        logger.debug(
            "Formatted %d line(s) from %s as plain text",
            len(translation.lines), translation.source_name,
        )
        return [
            FormatterOutput(
                suffix="-piglatin.txt",
                content=content,
                media_type="text/plain",
            )
        ]
