"""Output formatter registry.

WHY: The CLI needs a single lookup to find a formatter by name. A central
dict makes adding a format a one-line change.

HOW: FORMATTERS maps string keys to formatter *classes* (not instances).
Callers instantiate as needed: ``formatter = FORMATTERS["plain_text"]()``.

RULES:
- Keys are snake_case identifiers (used in --formats and PIG_LATIN_FORMATS)
- Values are BaseFormatter subclasses (not instances)
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Dict, Type

from pig_latin.formatters.plain_text import PlainTextFormatter
from pig_latin.formatters.translation_json import TranslationJSONFormatter

if TYPE_CHECKING:
    from pig_latin.formatters.base import BaseFormatter

FORMATTERS: Dict[str, Type[BaseFormatter]] = {
    "plain_text": PlainTextFormatter,
    "translation_json": TranslationJSONFormatter,
}
