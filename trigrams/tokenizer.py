import re

from trigrams.config import TOKEN_PATTERN

WORD_RE = re.compile(TOKEN_PATTERN)


def tokenize(text: str) -> list[str]:
    """
    Split text into words, keeping their order.
    Separators are dropped, so no empty words are ever returned.
    """

    return WORD_RE.findall(text)
