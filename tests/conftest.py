import io
from datetime import datetime, timedelta

import pytest
from rich.console import Console

from loglet import Logger


FIXED_NOW = datetime(2024, 5, 1, 12, 30, 45, 500000)
FIXED_NOW_TEXT = "2024-05-01 12:30:45"


class FixedClock:
    """Clock returning a settable instant."""

    def __init__(self, now: datetime = FIXED_NOW):
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> None:
        self.now += timedelta(**kwargs)


@pytest.fixture
def clock():
    return FixedClock()


@pytest.fixture
def console():
    return Console(file=io.StringIO(), width=200, force_terminal=False, no_color=True)


@pytest.fixture
def make_logger(clock, console, tmp_path):
    """Build a Logger printing to an in-memory console, saving under tmp_path."""

    def _make(**overrides) -> Logger:
        overrides.setdefault("show_spinner", False)
        overrides.setdefault("default_path", tmp_path / "log.json")
        return Logger(console=console, clock=clock, **overrides)

    return _make


