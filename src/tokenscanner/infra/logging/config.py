from __future__ import annotations

"""
Logging Configuration Model.

Immutable settings consumed by configure_logging(), plus the mapping from
level names to the native logging constants.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Optional, Tuple

_LEVEL_MAP: Dict[str, int] = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}

# Level names accepted by LoggingConfig.level
LEVEL_NAMES: Tuple[str, ...] = tuple(_LEVEL_MAP)


@dataclass(frozen=True)
class LoggingConfig:
    """
    Settings for the logging subsystem.

    Attributes:
        level: Minimum severity level to capture.
        console: Emit records on stderr.
        log_file: Optional path of a rotating log file.
        max_bytes: Size of a log segment before rotation.
        backup_count: Number of rotated segments to keep.
        console_fmt: Format of stderr records.
        file_fmt: Format of file records.
        datefmt: Timestamp format for file records.
    """
    level: str = "WARNING"
    console: bool = True
    log_file: Optional[str] = None

    max_bytes: int = 1024 * 1024
    backup_count: int = 2

    console_fmt: str = "%(levelname)s | %(name)s | %(message)s"
    file_fmt: str = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
    datefmt: str = "%Y-%m-%d %H:%M:%S"
