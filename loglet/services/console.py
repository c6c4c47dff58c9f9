"""
Console presentation for Loglet built on rich.

A log call shows a spinner while it is formatted and saved, then replaces
it with a single closing line.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from rich.console import Console
from rich.status import Status
from rich.text import Text

from ..models import TIME_FORMAT


class ConsoleSink:
    """
    Writes display lines to a rich Console.

    The spinner only runs on an interactive terminal; otherwise only the
    closing line is printed.
    """

    def __init__(
        self,
        console: Optional[Console] = None,
        show_spinner: bool = True,
        spinner: str = "dots"
    ):
        self.console = console or Console(highlight=False)
        self.show_spinner = show_spinner
        self.spinner = spinner
        self._status: Optional[Status] = None
        self._prefix = ""

    @property
    def animated(self) -> bool:
        return self.show_spinner and self.console.is_terminal

    @property
    def active(self) -> bool:
        return self._status is not None

    def start(self, text: str = "", timestamp: Optional[datetime] = None) -> None:
        """Start the spinner prefixed with ``timestamp`` (default: now)."""

        if self._status is not None or not self.animated:
            return
        self._prefix = (timestamp or datetime.now()).strftime(TIME_FORMAT)
        self._status = self.console.status(self._status_text(text), spinner=self.spinner)
        self._status.start()

    def update(self, text: str) -> None:
        """Replace the trailing text next to the spinner."""

        if self._status is not None:
            self._status.update(self._status_text(text))

    def stop(self, final_line: Optional[str] = None) -> None:
        """Stop the spinner and print the closing line, if any."""

        if self._status is not None:
            self._status.stop()
            self._status = None
        if final_line is not None:
            self.console.print(
                final_line, markup=False, emoji=False, highlight=False, soft_wrap=True
            )

    def _status_text(self, text: str) -> Text:
        return Text(f"{self._prefix} {text}".strip())

    def __enter__(self) -> "ConsoleSink":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.stop()


__all__ = [
    "ConsoleSink",
]
