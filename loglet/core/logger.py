"""
Leveled logger tying together formatting, console output and file persistence.
"""

from __future__ import annotations

import dataclasses
import logging
import sys
from pathlib import Path
from typing import Any, Callable, NoReturn, Optional, Tuple

from rich.console import Console

from ..infrastructure.error_handler import (
    FileError,
    InvalidFileLogSettingError,
    LogletError,
    PanicError,
)
from ..infrastructure.logger import logger
from ..models import (
    FileLogTarget,
    Level,
    LogOptions,
    LogOutcome,
    LoggerConfig,
)
from ..services import ConsoleSink, RecordSink, sink_for
from .formatter import (
    FAILURE_MARKER,
    SUCCESS_MARKER,
    FormattedEntry,
    Formatter,
)


SAVED_SUFFIX = "Log saved!"


class Logger:
    """
    Console logger with optional JSON persistence.

    ``info`` and ``warn`` always return; ``fatal`` exits the process and
    ``panic`` raises PanicError once the message has been logged. File
    failures never escape a log call: they are shown on the console line
    and reported in the returned LogOutcome.
    """

    def __init__(
        self,
        config: Optional[LoggerConfig] = None,
        *,
        console: Optional[Console] = None,
        sink: Optional[RecordSink] = None,
        clock: Optional[Callable[..., Any]] = None,
        exit_func: Callable[[int], Any] = sys.exit,
        **overrides: Any
    ):
        """
        Initialize the logger.

        Args:
            config: Logger configuration; keyword overrides are applied on top
            console: rich Console to print to (defaults to stdout)
            sink: File sink; chosen from ``config.file_format`` when omitted
            clock: Callable returning the current datetime
            exit_func: Called with the exit code by ``fatal``
        """
        # Each logger owns its copy; set_default_file_log must not leak
        if config is None:
            config = LoggerConfig(**overrides)
        else:
            config = dataclasses.replace(config, **overrides)

        self.config = config
        self.formatter = Formatter(clock)
        self.console = ConsoleSink(
            console,
            show_spinner=config.show_spinner,
            spinner=config.spinner
        )
        self.sink = sink or sink_for(config.file_format)
        self.exit_func = exit_func
        self.verbose = config.verbose

        self.set_verbose(config.verbose)

    def set_verbose(self, verbose: bool) -> None:
        """Switch internal diagnostics between DEBUG and INFO."""

        self.verbose = verbose
        self.config.verbose = verbose
        logger.setLevel(logging.DEBUG if verbose else logging.INFO)

    def set_default_file_log(self, file_log: Any) -> None:
        """
        Change where calls without their own ``file_log`` option save.

        Args:
            file_log: FileLogTarget, bool or path

        Raises:
            InvalidFileLogSettingError: If the value has an unsupported type
        """
        self.config.file_log = FileLogTarget.coerce(file_log)
        logger.debug(f"Default file log set to {self.config.file_log}")

    @property
    def default_file_log(self) -> FileLogTarget:
        return self.config.file_log

    def info(self, message: str, options: Optional[LogOptions] = None, **fields: Any) -> LogOutcome:
        return self.log(Level.INFO, message, options, **fields)

    def warn(self, message: str, options: Optional[LogOptions] = None, **fields: Any) -> LogOutcome:
        return self.log(Level.WARN, message, options, **fields)

    def fatal(self, message: str, options: Optional[LogOptions] = None, **fields: Any) -> NoReturn:
        """
        Log at FATAL, then exit with ``config.exit_code_fatal``.

        SystemExit is raised even if a custom ``exit_func`` returns.
        """

        self.log(Level.FATAL, message, options, **fields)
        self.exit_func(self.config.exit_code_fatal)
        raise SystemExit(self.config.exit_code_fatal)

    def panic(self, message: str, options: Optional[LogOptions] = None, **fields: Any) -> NoReturn:
        """Log at PANIC, then raise PanicError carrying the message."""

        outcome = self.log(Level.PANIC, message, options, **fields)
        raise PanicError(message, outcome)

    def log(
        self,
        level: Level,
        message: str,
        options: Optional[LogOptions] = None,
        **fields: Any
    ) -> LogOutcome:
        """
        Format, print and optionally persist one message. Never terminates.

        Args:
            level: Severity (Level or its name)
            message: Text to log
            options: Per-call context
            **fields: LogOptions fields given as keywords

        Returns:
            LogOutcome describing what was printed and saved
        """
        level = Level.parse(level)
        opts = self._build_options(options, fields)
        entry = self.formatter.format(level, message, opts)

        with self.console:
            self.console.start(entry.parts[0], entry.timestamp)
            for text in entry.steps():
                self.console.update(text)

            path, error = self._resolve_path(opts)
            saved_to: Optional[Path] = None

            if error is None and path is not None:
                try:
                    self.sink.append(entry.record, path)
                    saved_to = path
                except FileError as e:
                    logger.warning(f"Could not save {level.value} record to {path}: {e}")
                    error = e

            entry = self._apply_downgrade(entry, error)
            line = self._closing_line(entry, saved_to, error)
            self.console.stop(line)

        return LogOutcome(
            level=entry.level,
            record=entry.record,
            line=line,
            saved_to=saved_to,
            error=error
        )

    def _build_options(self, options: Optional[LogOptions], fields: dict) -> LogOptions:
        if options is None:
            return LogOptions(**fields)
        if fields:
            return dataclasses.replace(options, **fields)
        return options

    def _resolve_path(self, opts: LogOptions) -> Tuple[Optional[Path], Optional[LogletError]]:
        setting = opts.file_log if opts.file_log is not None else self.config.file_log
        try:
            target = FileLogTarget.coerce(setting)
        except InvalidFileLogSettingError as e:
            logger.warning(str(e))
            return None, e
        return target.resolve(self.config.default_path), None

    def _apply_downgrade(self, entry: FormattedEntry, error: Optional[LogletError]) -> FormattedEntry:
        if (
            self.config.downgrade_on_file_error
            and isinstance(error, FileError)
            and entry.level is Level.INFO
        ):
            return entry.with_level(Level.WARN)
        return entry

    def _closing_line(
        self,
        entry: FormattedEntry,
        saved_to: Optional[Path],
        error: Optional[LogletError]
    ) -> str:
        if error is not None:
            return entry.render(FAILURE_MARKER, [f"Error: {error}"])
        if saved_to is not None:
            return entry.render(SUCCESS_MARKER, [SAVED_SUFFIX])
        return entry.render(SUCCESS_MARKER)


_default_logger: Optional[Logger] = None


def new(config: Optional[LoggerConfig] = None, **kwargs: Any) -> Logger:
    """Create a new Logger; file logging is disabled unless configured."""

    return Logger(config, **kwargs)


def get_logger() -> Logger:
    """Return the process-wide default Logger, creating it on first use."""

    global _default_logger
    if _default_logger is None:
        _default_logger = Logger()
    return _default_logger


__all__ = [
    "SAVED_SUFFIX",
    "Logger",
    "new",
    "get_logger",
]
