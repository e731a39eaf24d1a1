"""
Logging configuration for urlgrab.
"""
import logging
import sys
from pathlib import Path
from typing import Optional


LOGGER_NAME = "urlgrab"

# Marks handlers installed by setup_logging
HANDLER_TAG = "_urlgrab"


def own_handlers(logger: logging.Logger) -> list[logging.Handler]:
    """Return the handlers setup_logging attached to ``logger``."""
    return [h for h in logger.handlers if getattr(h, HANDLER_TAG, False)]


def setup_logging(level: int = logging.WARNING, log_file: Optional[Path] = None) -> logging.Logger:
    """Configure and return the root application logger.

    Logs go to stderr at ``level`` and, when ``log_file`` is given, to that
    file at DEBUG. Standard output is left alone since it carries the items.
    """
    logger = logging.getLogger(LOGGER_NAME)
    if own_handlers(logger):
        return logger

    logger.setLevel(logging.DEBUG)

    fmt = logging.Formatter(
        "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    # Console handler
    console = logging.StreamHandler(sys.stderr)
    console.setLevel(level)
    console.setFormatter(fmt)
    setattr(console, HANDLER_TAG, True)
    logger.addHandler(console)

    if log_file is not None:
        file_handler = logging.FileHandler(Path(log_file).expanduser(), encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(fmt)
        setattr(file_handler, HANDLER_TAG, True)
        logger.addHandler(file_handler)

    return logger


def get_logger(name: str) -> logging.Logger:
    """Return a child logger under the application root."""
    return logging.getLogger(f"{LOGGER_NAME}.{name}")
