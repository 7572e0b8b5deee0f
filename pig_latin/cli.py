"""Command-line interface for the Pig Latin translator.

WHY: Users want to translate text from the terminal or a shell pipeline
without writing Python. The CLI wires input reading, translation,
formatter output, and file saving together behind a single command.

HOW: Uses argparse to accept text as positional words, an --input-file,
or standard input (in that order of precedence). Builds the Translation
IR with translate_document(), runs each selected formatter, then either
prints the contents to stdout or saves them to --output-dir.

RULES:
- Positional words are joined with single spaces and translated as one line
- Without positional words or --input-file, the whole of stdin is read
- --formats: comma-separated formatter keys (default: PIG_LATIN_FORMATS)
- Output naming: {stem}{suffix}, numeric suffix for conflicts (-piglatin-2.txt)
- Status and log output goes to stderr; translations go to stdout
- Exit codes: 0 = success, 1 = error
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from pig_latin import __version__
from pig_latin.config import (
    DEFAULT_FORMATS,
    DEFAULT_LOG_LEVEL,
    parse_format_keys,
    resolve_log_level,
)
from pig_latin.core.ir import Translation
from pig_latin.core.text import translate_document
from pig_latin.formatters import FORMATTERS
from pig_latin.formatters.base import FormatterOutput

logger = logging.getLogger(__name__)

DEFAULT_STEM = "translation"


def _status(msg: str) -> None:
    """Print a status message to stderr so stdout stays pipeable."""
    print(msg, file=sys.stderr, flush=True)


def _configure_logging(level_name: str, verbose: bool) -> None:
    level = logging.DEBUG if verbose else resolve_log_level(level_name)
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
        stream=sys.stderr,
    )


def _read_input(args: argparse.Namespace) -> Translation:
    """Read the text to translate and build the Translation IR.

    RULES:
    - Positional words win over --input-file, which wins over stdin
    - Files are read as UTF-8
    - source_name is "args", the file name, or "stdin"
    """
    if args.text:
        return translate_document(" ".join(args.text), source_name="args")

    if args.input_file:
        input_path = Path(args.input_file)
        if not input_path.is_file():
            raise ValueError("File not found: {}".format(input_path))
        logger.info("Reading %s", input_path)
        raw = input_path.read_text(encoding="utf-8")
        return translate_document(raw, source_name=input_path.name)

    logger.info("Reading standard input")
    return translate_document(sys.stdin.read(), source_name="stdin")


def _resolve_output_path(
    stem: str,
    suffix: str,
    output_dir: Path,
) -> Path:
    """Resolve the output file path, adding numeric suffix on conflict.

    WHY: Running the translator twice on the same file should not
    overwrite the previous output.

    HOW: Check if {stem}{suffix} exists. If so, increment a counter
    and insert it before the file extension until a free name is found.

    RULES:
    - First attempt: {stem}{suffix} (e.g. story-piglatin.txt)
    - Conflict: split suffix at last dot, insert counter before extension
      (e.g. story-piglatin-2.txt)
    - Counter starts at 2 and increments

    Returns:
        A Path that does not yet exist.
    """
    base_path = output_dir / "{}{}".format(stem, suffix)
    if not base_path.exists():
        return base_path

    dot_idx = suffix.rfind(".")
    if dot_idx > 0:
        suffix_name = suffix[:dot_idx]
        suffix_ext = suffix[dot_idx:]
    else:
        suffix_name = suffix
        suffix_ext = ""

    counter = 2
    while True:
        candidate = output_dir / "{}{}-{}{}".format(stem, suffix_name, counter, suffix_ext)
        if not candidate.exists():
            return candidate
        counter += 1


def _save_output(output: FormatterOutput, stem: str, output_dir: Path) -> Path:
    path = _resolve_output_path(stem, output.suffix, output_dir)
    path.write_text(output.content, encoding="utf-8")
    return path


def _run(args: argparse.Namespace) -> None:
    """Translate the input and emit every selected format.

    RULES:
    - Formats and output directory are validated before reading input
    - With --output-dir, one file per FormatterOutput; otherwise stdout
    """
    format_keys = parse_format_keys(args.formats, FORMATTERS.keys())

    output_dir: Optional[Path] = None
    if args.output_dir:
        output_dir = Path(args.output_dir).resolve()
        if not output_dir.is_dir():
            raise ValueError("Output directory does not exist: {}".format(output_dir))

    translation = _read_input(args)
    logger.info(
        "Translated %d line(s), %d token(s) from %s",
        len(translation.lines), translation.word_count, translation.source_name,
    )

    stem = Path(args.input_file).stem if args.input_file and not args.text else DEFAULT_STEM

    saved_files: List[Path] = []
    for key in format_keys:
        formatter = FORMATTERS[key]()
        logger.debug("Running %s formatter", formatter.name)
        for output in formatter.format(translation):
            if output_dir is None:
                sys.stdout.write(output.content)
                continue
            saved_path = _save_output(output, stem, output_dir)
            saved_files.append(saved_path)
            _status("Saved: {}".format(saved_path.name))

    if saved_files:
        _status("Done! Saved {} file(s) to {}".format(len(saved_files), output_dir))


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser for the CLI.

    RULES:
    - Positional: text (zero or more words)
    - Optional: --input-file, --formats, --output-dir
    - Optional: --log-level, --verbose, --version
    """
    parser = argparse.ArgumentParser(
        prog="pig-latin",
        description="Translate text into Pig Latin, keeping capitals and "
                    "punctuation in place.",
    )

    parser.add_argument(
        "text",
        nargs="*",
        help="Text to translate. Reads --input-file or stdin when omitted.",
    )

    parser.add_argument(
        "--input-file",
        default=None,
        help="Path to a UTF-8 text file to translate.",
    )

    parser.add_argument(
        "--formats",
        default=DEFAULT_FORMATS,
        help="Comma-separated list of output formats. "
             "Available: {}. Default: %(default)s.".format(", ".join(sorted(FORMATTERS.keys()))),
    )

    parser.add_argument(
        "--output-dir",
        default=None,
        help="Directory to save output files (default: print to stdout).",
    )

    parser.add_argument(
        "--log-level",
        default=DEFAULT_LOG_LEVEL,
        help="Logging level for stderr diagnostics (default: %(default)s).",
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Shortcut for --log-level DEBUG.",
    )

    parser.add_argument(
        "--version",
        action="version",
        version="%(prog)s {}".format(__version__),
    )

    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the CLI.

    RULES:
    - argv=None means use sys.argv (normal CLI invocation)
    - Explicit argv is for testing
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        _configure_logging(args.log_level, args.verbose)
        _run(args)
    except KeyboardInterrupt:
        _status("\nCancelled by user.")
        sys.exit(130)
    except (ValueError, OSError) as e:
        print("Error: {}".format(e), file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
