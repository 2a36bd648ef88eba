import sys
from typing import TextIO

from trigrams.config import TOP_COUNT
from trigrams.counter import TrigramTable


def top_trigrams(table: TrigramTable, limit: int = TOP_COUNT) -> list[tuple[str, int]]:
    """
    Return the most frequent trigrams, highest count first.
    Trigrams with equal counts stay in the order they were first seen.
    """

    ranked = sorted(table.items(), key=lambda item: item[1], reverse=True)
    return ranked[:limit]


def format_report(ranked: list[tuple[str, int]]) -> str:
    return "\n".join(f"{trigram} - {count}" for trigram, count in ranked)


def report(table: TrigramTable, stream: TextIO | None = None):
    stream = stream or sys.stdout
    stream.write(format_report(top_trigrams(table)) + "\n")
