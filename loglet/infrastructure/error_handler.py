"""
Error types and translation helpers for Loglet.

Every failure a sink can hit is reported as a ``FileError`` subclass so the
logger can attach it to the console line instead of raising it to the caller.
"""

import functools
from typing import Any, Callable, Optional, Type, TypeVar

from .logger import logger


F = TypeVar("F", bound=Callable[..., Any])


class LogletError(Exception):
    """Base exception for Loglet errors."""

    def __init__(self, message: str, original_error: Optional[Exception] = None):
        self.message = message
        self.original_error = original_error
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.original_error:
            return f"{self.message} (Original: {self.original_error})"
        return self.message


class FileError(LogletError):
    """Raised when a record cannot be persisted to disk."""

    operation = "file"

    def __init__(
        self,
        message: str,
        original_error: Optional[Exception] = None,
        operation: Optional[str] = None,
    ):
        super().__init__(message, original_error)
        if operation:
            self.operation = operation


class DirectoryCreationError(FileError):
    """Raised when the parent directory of a log file cannot be created."""

    operation = "directory creation"


class FileOpenError(FileError):
    """Raised when a log file cannot be created, opened or inspected."""

    operation = "file open"


class SerializationError(FileError):
    """Raised when a record cannot be encoded as JSON."""

    operation = "serialization"


class WriteError(FileError):
    """Raised when writing, truncating or seeking the log file fails."""

    operation = "write"


class InvalidFileLogSettingError(LogletError):
    """Raised when a file-log setting is neither a bool nor a path."""


class PanicError(LogletError):
    """
    Raised by ``Logger.panic`` after the message has been logged.

    Carries the outcome of the logging call so a recovery handler can
    inspect what was printed and saved.
    """

    def __init__(self, message: str, outcome: Any = None):
        super().__init__(message)
        self.outcome = outcome


def handle_file_errors(error_cls: Type[FileError], message: str) -> Callable[[F], F]:
    """
    Decorator translating low-level I/O failures into a ``FileError`` subclass.

    Args:
        error_cls: FileError subclass to raise
        message: Short description of the failed step, e.g. "truncate failed"

    Returns:
        Decorated function
    """
    def decorator(func: F) -> F:
        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            try:
                return func(*args, **kwargs)
            except LogletError:
                raise
            except (OSError, TypeError, ValueError) as e:
                logger.debug(f"{error_cls.operation} step failed in {func.__name__}: {e}")
                raise error_cls(message, e) from e

        return wrapper  # type: ignore[return-value]

    return decorator


__all__ = [
    "LogletError",
    "FileError",
    "DirectoryCreationError",
    "FileOpenError",
    "SerializationError",
    "WriteError",
    "InvalidFileLogSettingError",
    "PanicError",
    "handle_file_errors",
]
