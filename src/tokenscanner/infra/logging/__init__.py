from __future__ import annotations

from .config import LEVEL_NAMES, LoggingConfig
from .core import configure_logging, get_logger, shutdown_logging

__all__ = [
    "LEVEL_NAMES",
    "LoggingConfig",
    "configure_logging",
    "get_logger",
    "shutdown_logging",
]
