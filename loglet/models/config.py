"""
Configuration models for Loglet loggers.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any

from .options import DEFAULT_LOG_PATH, FileLogTarget


class FileFormat(Enum):
    """On-disk layouts for persisted records. The two are not interchangeable."""

    JSON_ARRAY = "array"    # One pretty-printed JSON array, rewritten at the tail
    JSON_LINES = "lines"    # One compact JSON object per line, append-only


@dataclass
class LoggerConfig:
    """
    Construction-time configuration for a Logger.

    Individual calls may override ``file_log`` through LogOptions; nothing
    else changes after construction.
    """

    # File persistence
    file_log: Any = field(default_factory=FileLogTarget.disabled)
    default_path: Path = DEFAULT_LOG_PATH
    file_format: FileFormat = FileFormat.JSON_ARRAY

    # Console presentation
    show_spinner: bool = True
    spinner: str = "dots"

    # Rewrite INFO to WARN when saving fails (legacy behaviour, off by default)
    downgrade_on_file_error: bool = False

    # Internal diagnostics at DEBUG level
    verbose: bool = False

    # Termination
    exit_code_fatal: int = 1
    exit_code_panic: int = 2

    def __post_init__(self) -> None:
        self.file_log = FileLogTarget.coerce(self.file_log)
        self.default_path = Path(self.default_path)
        if not isinstance(self.file_format, FileFormat):
            self.file_format = FileFormat(self.file_format)
        if not self.spinner:
            raise ValueError("spinner name is required")
        if self.exit_code_fatal == 0 or self.exit_code_panic == 0:
            raise ValueError("exit codes for fatal and panic must be non-zero")


__all__ = [
    "FileFormat",
    "LoggerConfig",
]
