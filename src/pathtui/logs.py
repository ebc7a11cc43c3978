from __future__ import annotations

import logging
import os
from pathlib import Path

from .paths import log_path

LOGGER_NAME = "pathtui"
LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def setup_logging(level: int = logging.WARNING, path: Path | None = None) -> logging.Logger:
    """Send package logs to a file; the terminal belongs to the UI."""
    path = path or log_path()
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    logger.propagate = False
    # Avoid duplicate handlers if main() runs more than once in a process.
    if not any(
        isinstance(handler, logging.FileHandler)
        and getattr(handler, "baseFilename", "") == os.path.abspath(path)
        for handler in logger.handlers
    ):
        handler = logging.FileHandler(path, encoding="utf-8")
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    return logger
