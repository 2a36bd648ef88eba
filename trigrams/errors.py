class TrigramError(Exception):
    """Base class for every fatal error raised while analyzing a file."""

    exit_code = 1


class UsageError(TrigramError):
    """No input path was given on the command line."""

    exit_code = 2


class FileAccessError(TrigramError):
    """The input file is missing, unreadable, or cannot be decoded."""


class InsufficientDataError(TrigramError):
    """The text holds fewer words than a single trigram needs."""
