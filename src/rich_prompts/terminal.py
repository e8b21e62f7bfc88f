"""Terminal abstraction used by the prompt loops.

``Terminal`` is the small set of operations a prompt needs: blocking key
reads, styled writes, relative cursor moves and line clearing.
``ConsoleTerminal`` implements it on top of a Rich ``Console`` for output
and ``readchar`` for key input.
"""

from __future__ import annotations

import sys
from typing import Protocol

import readchar
from rich.console import Console
from rich.control import Control
from rich.segment import ControlType
from rich.text import Text

try:
    import termios
except ImportError:  # Windows: readchar handles raw input itself
    termios = None

DEFAULT_ROWS = 24
DEFAULT_COLUMNS = 80


class Terminal(Protocol):
    """Interface for terminal I/O operations."""

    def read_key(self) -> str: ...

    def write(self, markup: str) -> None: ...

    def move_cursor(self, rows: int) -> None: ...

    def clear_line(self) -> None: ...

    def size(self) -> tuple[int, int]: ...

    def set_raw_mode(self, enabled: bool) -> None: ...

    def show_cursor(self, visible: bool) -> None: ...

    def flush(self) -> None: ...


class ConsoleTerminal:
    """Terminal backed by a Rich Console and readchar.

    Prompts render to stderr by default so that stdout stays free for the
    program's own output.

    Args:
        console: Rich Console to write to (created on stderr if None).
    """

    def __init__(self, console: Console | None = None):
        self.console = console or Console(stderr=True, highlight=False)
        self._saved_termios: list | None = None

    def read_key(self) -> str:
        """Block until a key is pressed and return it.

        Ctrl+C is returned as a key rather than raised, so prompts can treat
        it like Esc.
        """
        try:
            return readchar.readkey()
        except KeyboardInterrupt:
            return readchar.key.CTRL_C

    def write(self, markup: str) -> None:
        self.console.print(Text.from_markup(markup), end="", soft_wrap=True)

    def move_cursor(self, rows: int) -> None:
        if rows:
            self.console.control(Control.move(0, rows))

    def clear_line(self) -> None:
        self.console.control(
            Control(ControlType.CARRIAGE_RETURN, (ControlType.ERASE_IN_LINE, 2))
        )

    def size(self) -> tuple[int, int]:
        """Return (rows, columns), falling back to 24x80 when unknown."""
        width, height = self.console.size
        return (height or DEFAULT_ROWS, width or DEFAULT_COLUMNS)

    def set_raw_mode(self, enabled: bool) -> None:
        """Turn off echo and line buffering between key reads.

        readchar switches the terminal to raw mode for each individual read;
        this keeps keystrokes typed while a frame is being drawn from echoing
        into it. No-op when stdin is not a TTY.
        """
        if termios is None or not sys.stdin.isatty():
            return
        fd = sys.stdin.fileno()
        if enabled:
            if self._saved_termios is not None:
                return
            self._saved_termios = termios.tcgetattr(fd)
            attrs = termios.tcgetattr(fd)
            attrs[3] &= ~(termios.ECHO | termios.ICANON)
            termios.tcsetattr(fd, termios.TCSADRAIN, attrs)
        elif self._saved_termios is not None:
            termios.tcsetattr(fd, termios.TCSADRAIN, self._saved_termios)
            self._saved_termios = None

    def show_cursor(self, visible: bool) -> None:
        self.console.show_cursor(visible)

    def flush(self) -> None:
        self.console.file.flush()
