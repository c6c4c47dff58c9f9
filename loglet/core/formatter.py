"""
Message formatting for Loglet.

Turns a level, a message and optional context into the display parts shown
on the console and the LogRecord persisted to disk.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Callable, Iterable, Iterator, List, Optional

from ..models import TIME_FORMAT, Level, LogOptions, LogRecord


PART_SEPARATOR = " | "
LINE_MARKER = "|"
SUCCESS_MARKER = "✓"
FAILURE_MARKER = "x"


def format_duration(start_time: datetime, now: datetime) -> str:
    """Render the elapsed time between two instants as whole milliseconds."""

    # Naive values are local time
    if start_time.tzinfo is not None and now.tzinfo is None:
        now = now.astimezone()
    elif start_time.tzinfo is None and now.tzinfo is not None:
        start_time = start_time.astimezone()

    elapsed_ms = int((now - start_time) / timedelta(milliseconds=1))
    return f"{elapsed_ms} ms"


@dataclass
class FormattedEntry:
    """Display parts and record produced for one log call."""

    level: Level
    parts: List[str]
    record: LogRecord
    timestamp: datetime = field(default_factory=datetime.now)

    @property
    def line(self) -> str:
        return f"{LINE_MARKER} {PART_SEPARATOR.join(self.parts)}"

    @property
    def time_text(self) -> str:
        return self.timestamp.strftime(TIME_FORMAT)

    def steps(self) -> Iterator[str]:
        """Yield the joined parts as they grow, level first and message last."""

        for index in range(1, len(self.parts) + 1):
            yield PART_SEPARATOR.join(self.parts[:index])

    def with_level(self, level: Level) -> "FormattedEntry":
        """Copy of this entry under a different level tag."""

        parts = [level.tag] + self.parts[1:]
        record = LogRecord(**{**vars(self.record), "level": level.value})
        return FormattedEntry(level=level, parts=parts, record=record, timestamp=self.timestamp)

    def render(self, marker: str = SUCCESS_MARKER, extra: Iterable[str] = ()) -> str:
        """Build the closing console line: timestamp, marker, then all parts."""

        parts = list(self.parts) + [text for text in extra if text]
        return f"{self.time_text} {marker} {PART_SEPARATOR.join(parts)}"


class Formatter:
    """
    Builds FormattedEntry values.

    The clock is injectable so that durations and timestamps are
    deterministic under test.
    """

    def __init__(self, clock: Optional[Callable[[], datetime]] = None):
        self.clock = clock or datetime.now

    def format(
        self,
        level: Level,
        message: str,
        options: Optional[LogOptions] = None
    ) -> FormattedEntry:
        """
        Format a log call.

        Args:
            level: Severity of the call
            message: Text to log; empty strings are allowed
            options: Optional per-call context

        Returns:
            FormattedEntry with display parts and the matching record
        """
        level = Level.parse(level)
        opts = options or LogOptions()
        now = self.clock()

        parts = [level.tag]
        record = LogRecord(
            time=now.strftime(TIME_FORMAT),
            level=level.value,
            message=message
        )

        if opts.process:
            parts.append(opts.process)
            record.process = opts.process

        if opts.start_time is not None:
            duration = format_duration(opts.start_time, now)
            parts.append(duration)
            record.duration = duration

        if opts.user:
            parts.append(opts.user)
            record.user = opts.user

        parts.append(message)

        return FormattedEntry(level=level, parts=parts, record=record, timestamp=now)


__all__ = [
    "PART_SEPARATOR",
    "LINE_MARKER",
    "SUCCESS_MARKER",
    "FAILURE_MARKER",
    "format_duration",
    "FormattedEntry",
    "Formatter",
]
