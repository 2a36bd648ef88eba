import logging
import os

TRIGRAM_SIZE = 3
TOP_COUNT = 3

# Words are runs of ASCII letters and apostrophes; anything else separates them.
TOKEN_PATTERN = r"[A-Za-z']+"


def _log_level() -> str:
    level = os.environ.get("TRIGRAMS_LOG_LEVEL", "WARNING").strip().upper()
    # getLevelName returns an int only for registered level names
    if not isinstance(logging.getLevelName(level), int):
        return "WARNING"
    return level


LOG_LEVEL = _log_level()
