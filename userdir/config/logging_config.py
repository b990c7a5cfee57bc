"""Logging configuration for the user directory."""

import logging
from pathlib import Path
from typing import Optional

from .paths import LOG_FILE_NAME, ensure_dir
from .settings import LOG_FORMAT, LOGGER_NAME

def setup_logging(log_dir: Optional[Path] = None, level: int = logging.INFO) -> logging.Logger:
    """Setup application logging.

    Logs always go to stderr; pass ``log_dir`` to also write ``app.log`` there.
    """
    handlers = [logging.StreamHandler()]
    if log_dir is not None:
        ensure_dir(log_dir)
        handlers.append(logging.FileHandler(log_dir / LOG_FILE_NAME, encoding="utf-8"))

    logging.basicConfig(level=level, format=LOG_FORMAT, handlers=handlers)
    return logging.getLogger(LOGGER_NAME)
