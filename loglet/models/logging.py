"""
Log level and record models for Loglet.

``LogRecord`` is the JSON-serializable form of one log call; it is what the
file sinks persist and what ``read_records`` returns.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict


TIME_FORMAT = "%Y-%m-%d %H:%M:%S"


class Level(Enum):
    """Severity tags supported by the logger."""

    INFO = "INFO"
    WARN = "WARN"
    FATAL = "FATAL"
    PANIC = "PANIC"

    @classmethod
    def parse(cls, value: "str | Level") -> "Level":
        """Accept a Level or a case-insensitive level name."""

        if isinstance(value, Level):
            return value
        try:
            return cls(str(value).strip().upper())
        except ValueError:
            raise ValueError(
                f"Invalid level: {value!r}, expected one of "
                f"{', '.join(level.value for level in cls)}"
            ) from None

    @property
    def tag(self) -> str:
        return f"[{self.value}]"


@dataclass
class LogRecord:
    """Structured record of a single log call."""

    time: str
    level: str
    message: str
    process: str = ""
    duration: str = ""
    user: str = ""

    # Serialized key order; optional keys are dropped when empty
    FIELDS = ("time", "level", "process", "duration", "user", "message")
    OPTIONAL_FIELDS = ("process", "duration", "user")

    def to_dict(self) -> Dict[str, str]:
        data: Dict[str, str] = {}
        for name in self.FIELDS:
            value = getattr(self, name)
            if name in self.OPTIONAL_FIELDS and not value:
                continue
            data[name] = value
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "LogRecord":
        if not isinstance(data, dict):
            raise ValueError(f"Log record must be an object, got {type(data).__name__}")
        missing = [key for key in ("time", "level", "message") if key not in data]
        if missing:
            raise ValueError(f"Log record is missing fields: {', '.join(missing)}")
        return cls(
            time=str(data["time"]),
            level=str(data["level"]),
            message=str(data["message"]),
            process=str(data.get("process") or ""),
            duration=str(data.get("duration") or ""),
            user=str(data.get("user") or ""),
        )


__all__ = [
    "TIME_FORMAT",
    "Level",
    "LogRecord",
]
