"""Rule constants, CLI defaults, and .env loading.

WHY: The word rules depend on a handful of literal character sets and
suffixes. Keeping them as plain module data (not buried in logic) makes
them easy to find. The CLI has a few defaults worth overriding per
machine, which come from the environment.

HOW: python-dotenv loads the .env file on import. Rule constants are
module-level strings. CLI defaults are read with os.getenv().

RULES:
- Rule constants are fixed; they are NOT read from the environment
- PUNCTUATION is the literal set . , : ; ' " (hyphen is handled separately)
- VOWELS is ASCII lowercase only, no "y"
- PIG_LATIN_LOG_LEVEL and PIG_LATIN_FORMATS override CLI defaults
"""

from __future__ import annotations

import logging
import os
from typing import Iterable, List

from dotenv import load_dotenv

# Load .env from the project root (where the script is run from)
load_dotenv()

# ---------------------------------------------------------------------------
# Word rules
# ---------------------------------------------------------------------------

PUNCTUATION = ".,:;'\""
"""Characters lifted out of a word and put back at the same distance from its end."""

VOWELS = "aeiou"
HYPHEN = "-"
WAY_SUFFIX = "way"
AY_SUFFIX = "ay"
TOKEN_SEPARATOR = " "

# ---------------------------------------------------------------------------
# CLI defaults
# ---------------------------------------------------------------------------

DEFAULT_LOG_LEVEL = os.getenv("PIG_LATIN_LOG_LEVEL", "WARNING")
DEFAULT_FORMATS = os.getenv("PIG_LATIN_FORMATS", "plain_text")

_LOG_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


def resolve_log_level(name: str) -> int:
    """Map a level name ("info", "DEBUG", ...) to a logging level.

    Raises:
        ValueError: If the name is not a standard logging level.
    """
    key = (name or "").strip().upper()
    if key not in _LOG_LEVELS:
        raise ValueError(
            "Unknown log level '{}'. Available: {}".format(
                name, ", ".join(_LOG_LEVELS.keys())
            )
        )
    return _LOG_LEVELS[key]


def parse_format_keys(value: str, available: Iterable[str]) -> List[str]:
    """Split a comma-separated formatter list and validate each key.

    WHY: Both the --formats flag and PIG_LATIN_FORMATS use the same
    comma-separated syntax, so parsing lives in one place.

    RULES:
    - Whitespace around keys is ignored, empty entries are dropped
    - Order is preserved, duplicates are removed
    - Any unknown key raises ValueError listing the available keys
    - An empty list raises ValueError
    """
    known = sorted(available)
    keys: List[str] = []
    for raw in value.split(","):
        key = raw.strip()
        if not key or key in keys:
            continue
        if key not in known:
            raise ValueError(
                "Unknown format '{}'. Available formats: {}".format(key, ", ".join(known))
            )
        keys.append(key)
    if not keys:
        raise ValueError("No output formats selected")
    return keys
