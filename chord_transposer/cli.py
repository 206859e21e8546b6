"""Command-line chord transposer.

Usage:
    chord-transpose song.txt -s 2
    chord-transpose song.txt -s -3 --key G --sheet -o song_in_e.txt
    cat song.txt | chord-transpose -s 5
"""

from __future__ import annotations

import argparse
import io
import logging
import sys
from dataclasses import replace
from pathlib import Path

from chord_transposer.config import TransposerConfig
from chord_transposer.sheet import transpose_sheet
from chord_transposer.transposer import transpose_key, transpose_text

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="chord-transpose",
        description="Transpose the chords of a chord sheet by a number of semitones.",
    )
    parser.add_argument(
        "input",
        nargs="?",
        default="-",
        help="Chord sheet to read (default: stdin)",
    )
    parser.add_argument(
        "-s",
        "--semitones",
        type=int,
        required=True,
        help="Semitones to shift, negative to go down",
    )
    parser.add_argument("-k", "--key", help="Original key; the transposed key is printed to stderr")
    parser.add_argument(
        "--sheet",
        action="store_true",
        default=None,
        help="Only transpose chord lines, leaving lyric lines untouched",
    )
    parser.add_argument(
        "--no-keep-columns",
        dest="keep_columns",
        action="store_false",
        default=None,
        help="In sheet mode, do not realign chords to their original columns",
    )
    parser.add_argument("-o", "--output", help="Output file (default: stdout)")
    parser.add_argument("--config", type=Path, help="JSON config file")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def load_config(args: argparse.Namespace) -> TransposerConfig:
    """Load the config file, if any, and apply command-line overrides."""
    config = TransposerConfig.load(args.config) if args.config else TransposerConfig()
    overrides: dict[str, bool] = {}
    if args.sheet is not None:
        overrides["sheet_mode"] = args.sheet
    if args.keep_columns is not None:
        overrides["keep_columns"] = args.keep_columns
    return replace(config, **overrides)


def read_input(path: str) -> str:
    """Read the sheet with its line endings untranslated."""
    if path == "-":
        if isinstance(sys.stdin, io.TextIOWrapper):
            sys.stdin.reconfigure(newline="")
        return sys.stdin.read()
    with open(path, encoding="utf-8", newline="") as f:
        return f.read()


def write_output(text: str, path: str | None) -> None:
    if path is None:
        if isinstance(sys.stdout, io.TextIOWrapper):
            sys.stdout.reconfigure(newline="")
        sys.stdout.write(text)
        return
    with open(path, "w", encoding="utf-8", newline="") as f:
        f.write(text)


def run(args: argparse.Namespace) -> int:
    config = load_config(args)
    text = read_input(args.input)

    if config.sheet_mode:
        result = transpose_sheet(text, args.semitones, keep_columns=config.keep_columns)
    else:
        result = transpose_text(text, args.semitones)
    write_output(result, args.output)

    key = transpose_key(args.key, args.semitones)
    if key is not None:
        sys.stderr.write(f"Key: {key}\n")
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        return run(args)
    except (OSError, ValueError) as e:
        logger.debug("Transposition failed", exc_info=True)
        sys.stderr.write(f"chord-transpose: error: {e}\n")
        return 1


if __name__ == "__main__":
    sys.exit(main())
