"""
Formatting and level dispatch for Loglet.
"""

from .formatter import FormattedEntry, Formatter, format_duration
from .logger import Logger, get_logger, new

__all__ = [
    "FormattedEntry",
    "Formatter",
    "format_duration",
    "Logger",
    "get_logger",
    "new",
]
