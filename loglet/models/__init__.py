"""
Core data models API surface for Loglet.

This file re-exports model classes from domain-specific modules so callers
can write ``from loglet.models import X``.
"""

from .logging import TIME_FORMAT, Level, LogRecord
from .options import (
    DEFAULT_LOG_PATH,
    FileLogMode,
    FileLogTarget,
    LogOptions,
)
from .config import FileFormat, LoggerConfig
from .outcome import LogOutcome

__all__ = [
    # Record models
    "TIME_FORMAT",
    "Level",
    "LogRecord",
    # Option models
    "DEFAULT_LOG_PATH",
    "FileLogMode",
    "FileLogTarget",
    "LogOptions",
    # Config models
    "FileFormat",
    "LoggerConfig",
    # Results
    "LogOutcome",
]
