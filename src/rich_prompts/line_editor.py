"""Single-line text buffer with a cursor and history recall."""

from __future__ import annotations

from .history import History


class LineEditor:
    """Edit buffer for text prompts.

    The cursor is an offset in ``[0, len(text)]``. Every mutation keeps it
    in range.

    Args:
        text: Initial buffer contents (cursor starts at the end).
        history: Optional store walked by history_previous/history_next.
    """

    def __init__(self, text: str = "", history: History | None = None):
        self.text = text
        self.cursor = len(text)
        self.history = history
        self._history_pos: int | None = None
        self._draft = ""

    def current_text(self) -> str:
        return self.text

    def set_text(self, text: str) -> None:
        """Replace the buffer and put the cursor at the end."""
        self.text = text
        self.cursor = len(text)

    def clear(self) -> None:
        self.set_text("")

    # -- editing -----------------------------------------------------------

    def insert(self, chars: str) -> None:
        self.text = self.text[: self.cursor] + chars + self.text[self.cursor :]
        self.cursor += len(chars)

    def delete_backward(self) -> None:
        if self.cursor == 0:
            return
        self.text = self.text[: self.cursor - 1] + self.text[self.cursor :]
        self.cursor -= 1

    def delete_forward(self) -> None:
        if self.cursor >= len(self.text):
            return
        self.text = self.text[: self.cursor] + self.text[self.cursor + 1 :]

    def delete_word_backward(self) -> None:
        """Delete back to the start of the previous word (Ctrl+W)."""
        start = self.cursor
        while start > 0 and self.text[start - 1].isspace():
            start -= 1
        while start > 0 and not self.text[start - 1].isspace():
            start -= 1
        self.text = self.text[:start] + self.text[self.cursor :]
        self.cursor = start

    # -- cursor ------------------------------------------------------------

    def move_cursor(self, delta: int) -> None:
        self.cursor = max(0, min(self.cursor + delta, len(self.text)))

    def move_home(self) -> None:
        self.cursor = 0

    def move_end(self) -> None:
        self.cursor = len(self.text)

    # -- history -----------------------------------------------------------

    def set_from_history(self, text: str) -> None:
        self.set_text(text)

    def history_previous(self) -> bool:
        """Recall the next older entry. Returns False when there is none."""
        if self.history is None:
            return False
        entries = self.history.entries()
        if not entries:
            return False
        if self._history_pos is None:
            self._draft = self.text
            pos = len(entries) - 1
        elif self._history_pos > 0:
            pos = self._history_pos - 1
        else:
            return False
        self._history_pos = pos
        self.set_from_history(entries[pos])
        return True

    def history_next(self) -> bool:
        """Recall the next newer entry, or the draft past the newest one."""
        if self.history is None or self._history_pos is None:
            return False
        entries = self.history.entries()
        pos = self._history_pos + 1
        if pos >= len(entries):
            self._history_pos = None
            self.set_text(self._draft)
        else:
            self._history_pos = pos
            self.set_from_history(entries[pos])
        return True
