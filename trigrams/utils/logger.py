import logging
import sys

from trigrams.config import LOG_LEVEL


class ColorFormatter(logging.Formatter):
    GREY = "\033[38;5;248m"
    PURPLE = "\033[38;5;129m"
    BLUE = "\033[38;5;32m"
    RESET = "\033[0m"

    def __init__(self, use_color: bool = True):
        super().__init__()
        self.use_color = use_color

    def _paint(self, color: str, text: str) -> str:
        if not self.use_color:
            return text
        return f"{color}{text}{self.RESET}"

    def format(self, record):
        asctime = self._paint(self.GREY, self.formatTime(record))
        levelname = self._paint(self.PURPLE, record.levelname)
        name = self._paint(self.BLUE, record.name)
        return f"{asctime} {levelname} [{name}] {record.getMessage()}"


def get_logger(name):
    logger = logging.getLogger(name)
    if not logger.handlers:
        logger.setLevel(LOG_LEVEL)
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(ColorFormatter(use_color=sys.stderr.isatty()))
        logger.addHandler(handler)
    return logger
