"""JSON formatter with every token next to its translation.

WHY: Tools that post-process the output (diffing, alignment, teaching
material) need to know which source token produced which Pig Latin
token. Plain text loses that pairing.

HOW: Builds a dict with the source name and one entry per line, each
holding the line text, its translation, and the token pairs. The dict is
validated against translation_schema.json (shipped next to this module)
before it is serialized.

RULES:
- Schema validation failures raise jsonschema.ValidationError; they
  indicate a bug in this module, not bad input
- Empty tokens (from consecutive spaces) are kept as {"source": "", "translated": ""}
- JSON is indented by 2 and written with ensure_ascii=False
- Output suffix: "-piglatin.json"
- Media type: "application/json"
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

import jsonschema

from pig_latin.core.ir import Translation
from pig_latin.formatters.base import BaseFormatter, FormatterOutput

logger = logging.getLogger(__name__)

SCHEMA_PATH = Path(__file__).resolve().parent / "translation_schema.json"

_CACHED_SCHEMA: Optional[dict] = None


def get_schema() -> dict:
    """Load and cache the translation JSON schema."""
    global _CACHED_SCHEMA
    if _CACHED_SCHEMA is None:
        with open(SCHEMA_PATH, encoding="utf-8") as f:
            _CACHED_SCHEMA = json.load(f)
    return _CACHED_SCHEMA


def build_document(translation: Translation) -> Dict[str, Any]:
    """Convert the Translation IR into the JSON document structure."""
    return {
        "source": translation.source_name,
        "lines": [
            {
                "source": line.source,
                "translated": line.translated,
                "words": [
                    {"source": pair.source, "translated": pair.translated}
                    for pair in line.words
                ],
            }
            for line in translation.lines
        ],
    }


class TranslationJSONFormatter(BaseFormatter):
    """Formatter that writes a token-aligned JSON document."""

    @property
    def name(self) -> str:
        return "Translation JSON"

    def format(self, translation: Translation) -> List[FormatterOutput]:
        """Serialize the translation as schema-validated JSON.

        Raises:
            jsonschema.ValidationError: If the generated document does not
                conform to translation_schema.json.
        """
        document = build_document(translation)
        jsonschema.validate(instance=document, schema=get_schema())
        logger.debug(
            "Formatted %d token(s) from %s as JSON",
            translation.word_count, translation.source_name,
        )

        content = json.dumps(document, indent=2, ensure_ascii=False)
        return [
            FormatterOutput(
                suffix="-piglatin.json",
                content=content + "\n",
                media_type="application/json",
            )
        ]
