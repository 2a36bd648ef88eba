"""
Print the three most frequent word trigrams of a text file.

Usage: trigrams <text_file>
"""

import argparse
import sys

from trigrams.counter import TrigramTable, count_trigrams
from trigrams.errors import FileAccessError, TrigramError, UsageError
from trigrams.ranking import report
from trigrams.tokenizer import tokenize
from trigrams.utils.logger import get_logger

logger = get_logger("trigrams")


def load_text(path: str) -> str:
    try:
        with open(path, "r") as text_file:
            text = text_file.read()
    except (OSError, UnicodeDecodeError) as exc:
        raise FileAccessError(f"Error loading '{path}'") from exc

    logger.info(f"Loaded {len(text)} characters from '{path}'.")
    return text


def analyze(text: str) -> TrigramTable:
    tokens = tokenize(text)
    logger.info(f"Found {len(tokens)} words.")
    return count_trigrams(tokens)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="trigrams",
        description="Print the three most frequent word trigrams of a text file",
    )
    # Optional here so a missing path is reported as a UsageError like the other failures.
    parser.add_argument("input", nargs="?", help="Path to the input text file")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        if args.input is None:
            raise UsageError("Input file expected")
        table = analyze(load_text(args.input))
    except TrigramError as exc:
        logger.error(str(exc))
        return exc.exit_code

    report(table)
    return 0


def run():
    sys.exit(main())


if __name__ == "__main__":
    run()
