from __future__ import annotations

"""
Logging Configuration Model.

A run either logs to the console only (library use, tests) or to the
console plus a rotated file (CLI with --log-file).
"""

import logging
from dataclasses import dataclass
from typing import Optional

CONSOLE_FORMAT = "%(levelname)s | %(message)s"
FILE_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


@dataclass(frozen=True)
class LoggingConfig:
    """
    Settings consumed by configure_logging.

    Attributes:
        level: Level name ("DEBUG", "INFO", ...). Unknown names mean INFO.
        console: Emit records on stderr.
        log_file: Also append records to this file, rotated by size.
        max_bytes: Rotation threshold of the log file.
        backup_count: Rotated segments kept next to the log file.
    """
    level: str = "INFO"
    console: bool = True
    log_file: Optional[str] = None
    max_bytes: int = 512 * 1024
    backup_count: int = 2

    @classmethod
    def for_cli(cls, debug: bool = False, log_file: Optional[str] = None) -> "LoggingConfig":
        """Console logging at INFO, or DEBUG when --debug is given."""
        return cls(level="DEBUG" if debug else "INFO", console=True, log_file=log_file)

    @property
    def level_int(self) -> int:
        value = logging.getLevelName(str(self.level or "").strip().upper())
        return value if isinstance(value, int) else logging.INFO
