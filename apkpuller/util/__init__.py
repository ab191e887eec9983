"""Utility module initialization."""

from .logging import get_logger, setup_logging
from .paths import ensure_directory, format_size

__all__ = [
    # logging
    "get_logger",
    "setup_logging",
    # paths
    "ensure_directory",
    "format_size",
]
