"""Incremental redraw of the prompt region.

Each state change produces a frame: the full list of markup lines for the
prompt. ``FrameRenderer`` remembers how many screen rows the last frame
took, moves back over them, clears them and draws the new frame. An
unchanged frame is not redrawn at all.
"""

from __future__ import annotations

from typing import Sequence

from rich.text import Text

from .terminal import Terminal

Frame = Sequence[str]


class FrameRenderer:
    """Draws frames on a terminal, replacing the previously drawn one.

    Args:
        terminal: Terminal to draw on.
    """

    def __init__(self, terminal: Terminal):
        self.terminal = terminal
        self._last_frame: list[str] | None = None
        self._height = 0

    @property
    def height(self) -> int:
        """Screen rows occupied by the last drawn frame."""
        return self._height

    def _rows_for(self, line: str, columns: int) -> int:
        """Screen rows a line occupies once the terminal wraps it."""
        width = Text.from_markup(line).cell_len
        if columns <= 0 or width <= columns:
            return 1
        return -(-width // columns)

    def clear(self) -> None:
        """Erase the drawn region and leave the cursor at its top."""
        if self._height:
            self.terminal.move_cursor(-self._height)
            for _ in range(self._height):
                self.terminal.clear_line()
                self.terminal.move_cursor(1)
            self.terminal.move_cursor(-self._height)
        self._height = 0
        self._last_frame = None

    def render(self, frame: Frame) -> None:
        """Draw ``frame`` in place of the previous one (no-op if unchanged)."""
        lines = list(frame)
        if lines == self._last_frame:
            return

        self.clear()
        _, columns = self.terminal.size()
        for line in lines:
            self.terminal.clear_line()
            self.terminal.write(line)
            self.terminal.write("\n")
        self.terminal.flush()

        self._height = sum(self._rows_for(line, columns) for line in lines)
        self._last_frame = lines

    def finish(self, summary: str | None = None, clear: bool = True) -> None:
        """End the interaction, leaving at most the summary line behind.

        Args:
            summary: Line written after the interactive region (None for none).
            clear: Erase the interactive region first. With False the last
                frame stays on screen above the summary.
        """
        if clear:
            self.clear()
        if summary is not None:
            self.terminal.clear_line()
            self.terminal.write(summary)
            self.terminal.write("\n")
        self.terminal.flush()
        self._height = 0
        self._last_frame = None
