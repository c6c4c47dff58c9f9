"""
Loglet - leveled console logging with optional JSON file persistence.
"""

__version__ = "0.1.0"

from .infrastructure.error_handler import (
    DirectoryCreationError,
    FileError,
    FileOpenError,
    InvalidFileLogSettingError,
    LogletError,
    PanicError,
    SerializationError,
    WriteError,
)
from .models import (
    FileFormat,
    FileLogTarget,
    Level,
    LogOptions,
    LogOutcome,
    LogRecord,
    LoggerConfig,
)
from .core import Formatter, Logger, get_logger, new
from .services import read_records

__all__ = [
    "__version__",
    # Logging
    "Logger",
    "new",
    "get_logger",
    "Formatter",
    # Models
    "FileFormat",
    "FileLogTarget",
    "Level",
    "LogOptions",
    "LogOutcome",
    "LogRecord",
    "LoggerConfig",
    "read_records",
    # Errors
    "LogletError",
    "FileError",
    "DirectoryCreationError",
    "FileOpenError",
    "SerializationError",
    "WriteError",
    "InvalidFileLogSettingError",
    "PanicError",
]
