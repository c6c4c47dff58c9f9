"""
Per-call option models for Loglet.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Any, Optional, Union

from ..infrastructure.error_handler import InvalidFileLogSettingError


DEFAULT_LOG_PATH = Path("./log.json")


class FileLogMode(Enum):
    """How a log call decides where, if anywhere, its record is saved."""

    DISABLED = "disabled"
    DEFAULT_PATH = "default"
    CUSTOM_PATH = "custom"


@dataclass(frozen=True)
class FileLogTarget:
    """Immutable file-log setting: disabled, the default path, or a custom path."""

    mode: FileLogMode
    path: Optional[Path] = None

    def __post_init__(self) -> None:
        if self.mode is FileLogMode.CUSTOM_PATH and not self.path:
            raise ValueError("A custom file log target requires a path")
        if self.mode is not FileLogMode.CUSTOM_PATH and self.path is not None:
            raise ValueError(f"{self.mode.value} file log target takes no path")

    @classmethod
    def disabled(cls) -> "FileLogTarget":
        return cls(FileLogMode.DISABLED)

    @classmethod
    def default_path(cls) -> "FileLogTarget":
        return cls(FileLogMode.DEFAULT_PATH)

    @classmethod
    def custom(cls, path: Union[str, "os.PathLike[str]"]) -> "FileLogTarget":
        return cls(FileLogMode.CUSTOM_PATH, Path(path))

    @classmethod
    def coerce(cls, value: Any) -> "FileLogTarget":
        """
        Build a target from the loose values callers tend to pass.

        ``True`` selects the default path, ``False``/``None``/``""`` disable
        file logging and any other string or path-like is a custom path.

        Raises:
            InvalidFileLogSettingError: For any other type
        """
        if isinstance(value, FileLogTarget):
            return value
        if value is None:
            return cls.disabled()
        if isinstance(value, bool):
            return cls.default_path() if value else cls.disabled()
        if isinstance(value, (str, os.PathLike)):
            raw = os.fspath(value)
            if not raw:
                return cls.disabled()
            return cls.custom(raw)
        raise InvalidFileLogSettingError(
            "log will not be saved, invalid file log setting type: "
            f"{type(value).__name__}, expected bool or path"
        )

    @property
    def enabled(self) -> bool:
        return self.mode is not FileLogMode.DISABLED

    def resolve(self, default_path: Path = DEFAULT_LOG_PATH) -> Optional[Path]:
        """Return the concrete file path, or None when disabled."""

        if self.mode is FileLogMode.DISABLED:
            return None
        if self.mode is FileLogMode.DEFAULT_PATH:
            return Path(default_path)
        return self.path


@dataclass
class LogOptions:
    """Optional context attached to a single log call."""

    start_time: Optional[datetime] = None
    process: str = ""
    user: str = ""
    # None defers to the logger's default; anything else is coerced per call
    file_log: Any = None


__all__ = [
    "DEFAULT_LOG_PATH",
    "FileLogMode",
    "FileLogTarget",
    "LogOptions",
]
