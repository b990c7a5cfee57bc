"""Configuration module."""

from .logging_config import setup_logging
from .paths import ensure_dir
