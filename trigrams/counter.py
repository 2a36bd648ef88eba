from typing import Iterator

from trigrams.config import TRIGRAM_SIZE
from trigrams.errors import InsufficientDataError
from trigrams.utils.logger import get_logger

logger = get_logger("counter")


class TrigramTable:
    """
    Case-insensitive mapping from trigram text to its number of occurrences.
    The casing of the first occurrence is kept as the display key.
    """

    def __init__(self):
        # lowercased key -> [display key, count]
        self.entries: dict[str, list] = {}

    def add(self, key: str):
        entry = self.entries.get(key.lower())
        if entry is None:
            self.entries[key.lower()] = [key, 1]
        else:
            entry[1] += 1

    def items(self) -> list[tuple[str, int]]:
        return [(display, count) for display, count in self.entries.values()]

    def total(self) -> int:
        return sum(count for _, count in self.entries.values())

    def __getitem__(self, key: str) -> int:
        return self.entries[key.lower()][1]

    def __contains__(self, key: str) -> bool:
        return key.lower() in self.entries

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[str]:
        return (display for display, _ in self.entries.values())


def count_trigrams(tokens: list[str]) -> TrigramTable:
    """
    Slide a three word window over the tokens and count every trigram.
    Raise InsufficientDataError if not even one trigram can be formed.
    """

    if len(tokens) < TRIGRAM_SIZE:
        raise InsufficientDataError("Too few words")

    table = TrigramTable()
    for i in range(TRIGRAM_SIZE - 1, len(tokens)):
        table.add(" ".join(tokens[i - TRIGRAM_SIZE + 1 : i + 1]))

    logger.debug(f"Counted {table.total()} trigrams, {len(table)} distinct.")
    return table
