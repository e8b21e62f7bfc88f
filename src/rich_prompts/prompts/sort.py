"""Reordering list prompt."""

from __future__ import annotations

from ..keys import is_cancel, is_enter, is_exit, is_space, is_vim_down, is_vim_up
from ..navigator import VisibleRow
from .base import ListPrompt


class Sort(ListPrompt[list[int]]):
    """Let the user put items in order.

    Returns the permutation of ``items`` indices chosen by the user.

    Keyboard controls:
        - Up/Down or j/k: Move the highlight, or the grabbed item
        - Space: Grab/release the highlighted item
        - Enter: Confirm
        - Esc, q or Ctrl+C: Cancel

    Moving a grabbed item stops at the ends of the list.
    """

    help_hints = ("↑↓ navigate", "space grab/release", "enter confirm", "esc cancel")

    grabbed = False

    def _reset(self) -> None:
        super()._reset()
        self.grabbed = False

    def _item_line(self, row: VisibleRow) -> str:
        return self._theme.format_item(
            row.candidate.text,
            row.is_highlighted,
            is_grabbed=self.grabbed and row.is_highlighted,
        )

    def _handle_key(self, key: str) -> None:
        if is_cancel(key) or is_exit(key):
            self._cancel()
        elif is_space(key):
            self.grabbed = not self.grabbed
        elif is_enter(key):
            self._submit(list(self.nav.order))
        elif self.grabbed:
            if is_vim_up(key):
                self.nav.move_item(-1)
            elif is_vim_down(key):
                self.nav.move_item(+1)
        else:
            self._handle_nav_key(key)

    def _summary(self, value: list[int]) -> str | None:
        if not self.prompt:
            return None
        return self._theme.format_multi_summary(self.prompt, [self.items[i] for i in value])
