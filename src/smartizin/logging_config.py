"""Console logging for the smart-izin CLI and batch scripts.

The roster passes only emit records through module loggers; handlers are
attached here, on stderr, so stdout stays free for the parsed schedule.
"""

import logging
import sys

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s - %(message)s"
DATE_FORMAT = "%H:%M:%S"


class _LevelColorFormatter(logging.Formatter):
    """Colour the level name when writing to a terminal."""

    LEVEL_COLORS = {
        logging.DEBUG: "\033[36m",
        logging.INFO: "\033[32m",
        logging.WARNING: "\033[33m",
        logging.ERROR: "\033[31m",
        logging.CRITICAL: "\033[1;31m",
    }

    def format(self, record: logging.LogRecord) -> str:
        color = self.LEVEL_COLORS.get(record.levelno)
        if color is None:
            return super().format(record)
        # copy so other handlers see the plain level name
        record = logging.makeLogRecord(record.__dict__)
        record.levelname = f"{color}{record.levelname}\033[0m"
        return super().format(record)


def setup_logging(level: int | str = logging.WARNING) -> None:
    """Attach a single stderr handler to the root logger at ``level``."""
    if isinstance(level, str):
        level = getattr(logging, level.upper())

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    formatter_cls = _LevelColorFormatter if sys.stderr.isatty() else logging.Formatter
    handler.setFormatter(formatter_cls(LOG_FORMAT, datefmt=DATE_FORMAT))

    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(level)
    root.addHandler(handler)
