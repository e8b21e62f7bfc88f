"""Single-choice list prompt."""

from __future__ import annotations

from typing import Any, Iterable

from ..keys import is_cancel, is_enter, is_exit
from ..navigator import ListNavigator
from .base import ListPrompt


class Select(ListPrompt[int]):
    """Pick one item from a list.

    Returns the index of the chosen item in ``items``.

    Keyboard controls:
        - Up/Down, j/k or Ctrl+P/Ctrl+N: Navigate
        - Left/Right or PageUp/PageDown: Previous/next page
        - Home/End: First/last item
        - Enter: Confirm
        - Esc, q or Ctrl+C: Cancel

    Args:
        prompt: Text shown above the list.
        items: Items to choose from.
        default: Index highlighted initially.
        **kwargs: ListPrompt options (max_length, wrap, theme, terminal,
            report, clear, show_help).

    Example:
        choice = Select("Pick a color", ["red", "green", "blue"], default=1).interact()
    """

    def __init__(
        self,
        prompt: str = "",
        items: Iterable[Any] = (),
        *,
        default: int = 0,
        **kwargs: Any,
    ):
        self.default = default
        super().__init__(prompt, items, **kwargs)
        if not 0 <= default < len(self.items):
            raise ValueError(f"default {default} out of range for {len(self.items)} items")

    def _make_navigator(self) -> ListNavigator:
        return ListNavigator(self.items, wrap=self.wrap, highlight=self.default)

    def _handle_key(self, key: str) -> None:
        if is_cancel(key) or is_exit(key):
            self._cancel()
        elif is_enter(key):
            self._submit(self.nav.highlighted.index)
        else:
            self._handle_nav_key(key)

    def _summary(self, value: int) -> str | None:
        if not self.prompt:
            return None
        return self._theme.format_summary(self.prompt, self.items[value])
