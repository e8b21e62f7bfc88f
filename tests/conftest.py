"""Pytest fixtures for rich-prompts tests."""

from __future__ import annotations

import pytest
from rich.text import Text

from rich_prompts import themes


class FakeTerminal:
    """Scripted terminal: returns queued keys and records every call.

    Calls are recorded as tuples, e.g. ("write", markup), ("move", rows),
    ("clear",), ("raw", True), ("cursor", False).
    """

    def __init__(self, keys=(), rows: int = 24, columns: int = 80):
        self.keys = list(keys)
        self.rows = rows
        self.columns = columns
        self.calls: list[tuple] = []
        self.raw = False
        self.cursor_visible = True
        self.flushes = 0

    def read_key(self) -> str:
        if not self.keys:
            raise AssertionError("prompt read more keys than were scripted")
        return self.keys.pop(0)

    def write(self, markup: str) -> None:
        self.calls.append(("write", markup))

    def move_cursor(self, rows: int) -> None:
        self.calls.append(("move", rows))

    def clear_line(self) -> None:
        self.calls.append(("clear",))

    def size(self) -> tuple[int, int]:
        return (self.rows, self.columns)

    def set_raw_mode(self, enabled: bool) -> None:
        self.raw = enabled
        self.calls.append(("raw", enabled))

    def show_cursor(self, visible: bool) -> None:
        self.cursor_visible = visible
        self.calls.append(("cursor", visible))

    def flush(self) -> None:
        self.flushes += 1

    @property
    def writes(self) -> list[str]:
        return [call[1] for call in self.calls if call[0] == "write"]

    @property
    def output(self) -> str:
        """Everything written, with markup stripped."""
        return "".join(Text.from_markup(markup).plain for markup in self.writes)


@pytest.fixture
def make_terminal():
    """Factory: make_terminal(*keys, rows=24, columns=80)."""

    def _make(*keys: str, rows: int = 24, columns: int = 80) -> FakeTerminal:
        return FakeTerminal(keys, rows=rows, columns=columns)

    return _make


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Isolate tests from the caller's environment and the active theme."""
    monkeypatch.delenv("RICH_PROMPTS_THEME", raising=False)
    monkeypatch.delenv("RICH_PROMPTS_MAX_ROWS", raising=False)
    monkeypatch.delenv("NO_COLOR", raising=False)
    monkeypatch.setattr(themes, "_current_theme", None)


@pytest.fixture
def plain():
    """Strip markup from a rendered line."""

    def _plain(markup: str) -> str:
        return Text.from_markup(markup).plain

    return _plain
