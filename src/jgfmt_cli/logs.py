import logging
import sys
from typing import TextIO

LOGGER_NAME = "jgfmt"
LOG_PATTERN = "%(message)s"


def configure_logging(stream: TextIO | None = None, level: int = logging.DEBUG) -> logging.Logger:
    """Send the jgfmt logger to a single plain-message console handler."""
    log = logging.getLogger(LOGGER_NAME)
    for handler in list(log.handlers):
        log.removeHandler(handler)
    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_PATTERN))
    log.addHandler(handler)
    log.setLevel(level)
    return log
