"""
Result model returned by every log call.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from ..infrastructure.error_handler import LogletError
from .logging import Level, LogRecord


@dataclass
class LogOutcome:
    """What a single log call printed and persisted."""

    level: Level
    record: LogRecord
    line: str
    saved_to: Optional[Path] = None
    error: Optional[LogletError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def saved(self) -> bool:
        return self.saved_to is not None


__all__ = [
    "LogOutcome",
]
