from trigrams.counter import TrigramTable, count_trigrams
from trigrams.errors import FileAccessError, InsufficientDataError, TrigramError, UsageError
from trigrams.ranking import format_report, report, top_trigrams
from trigrams.tokenizer import tokenize

__all__ = [
    "TrigramTable",
    "count_trigrams",
    "tokenize",
    "top_trigrams",
    "format_report",
    "report",
    "TrigramError",
    "UsageError",
    "FileAccessError",
    "InsufficientDataError",
]
