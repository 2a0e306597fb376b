from __future__ import annotations

"""
Logging Configuration Models.

Describes how the CLI wires its diagnostics: warnings on stderr by default,
everything down to DEBUG with --debug, and an optional rotating log file
that records which scan worker emitted each line.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Optional

# Scan diagnostics are quiet unless something was skipped
DEFAULT_LEVEL: str = "WARNING"

_LEVEL_MAP: Dict[str, int] = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
}


@dataclass(frozen=True)
class LoggingConfig:
    """
    Immutable specification for the logging subsystem initialization.

    Attributes:
        level: Minimum severity level to capture.
        console: Flag to enable stderr output (the report itself goes to stdout).
        log_file: Optional path for persistent file storage.
        max_bytes: Maximum size per log segment before rotation.
        backup_count: Number of historical log segments to preserve.
        console_fmt: Format for stderr lines.
        file_fmt: Format for file entries, tagged with the worker thread name.
        datefmt: Timestamp format for file entries.
    """
    level: str = DEFAULT_LEVEL
    console: bool = True
    log_file: Optional[str] = None

    max_bytes: int = 1024 * 1024
    backup_count: int = 2

    console_fmt: str = "%(levelname)s: %(message)s"
    file_fmt: str = "%(asctime)s %(levelname)-7s [%(threadName)s] %(name)s: %(message)s"
    datefmt: str = "%Y-%m-%d %H:%M:%S"

    @classmethod
    def for_cli(cls, debug: bool, log_file: Optional[str] = None) -> LoggingConfig:
        """Build the configuration matching the --debug and --log-file options."""
        return cls(level="DEBUG" if debug else DEFAULT_LEVEL, console=True, log_file=log_file)
