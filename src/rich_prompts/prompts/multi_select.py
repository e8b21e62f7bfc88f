"""Checkbox list prompt."""

from __future__ import annotations

from typing import Any, Iterable, Sequence

from ..keys import is_cancel, is_enter, is_exit, is_space
from ..navigator import ListNavigator, VisibleRow
from ..validate import Validator, chain_validators
from .base import ListPrompt


class MultiSelect(ListPrompt[list[int]]):
    """Check any number of items from a list.

    Returns the indices of the checked items, in ``items`` order.

    Keyboard controls:
        - Up/Down, j/k or Ctrl+P/Ctrl+N: Navigate
        - Left/Right or PageUp/PageDown: Previous/next page
        - Space: Toggle the highlighted item
        - a: Toggle all items
        - Enter: Confirm
        - Esc, q or Ctrl+C: Cancel

    Args:
        prompt: Text shown above the list.
        items: Items to choose from.
        defaults: Initial check state per item (missing entries are unchecked).
        validator: Callable (or list of callables) run on the selected
            indices; returns an error message to reject.
        allow_empty: Accept confirming with nothing checked.
        **kwargs: ListPrompt options.
    """

    help_hints = ("↑↓ navigate", "space toggle", "a all", "enter confirm", "esc cancel")

    def __init__(
        self,
        prompt: str = "",
        items: Iterable[Any] = (),
        *,
        defaults: Sequence[bool] = (),
        validator: Validator | Iterable[Validator] | None = None,
        allow_empty: bool = True,
        **kwargs: Any,
    ):
        self.defaults = list(defaults)
        self.validators = chain_validators(validator)
        self.allow_empty = allow_empty
        super().__init__(prompt, items, **kwargs)

    def _make_navigator(self) -> ListNavigator:
        checked = [i for i, flag in enumerate(self.defaults) if flag]
        return ListNavigator(self.items, wrap=self.wrap, checked=checked)

    def _item_line(self, row: VisibleRow) -> str:
        return self._theme.format_item(row.candidate.text, row.is_highlighted, row.is_checked)

    def _handle_key(self, key: str) -> None:
        if is_cancel(key) or is_exit(key):
            self._cancel()
        elif is_space(key):
            self.nav.toggle_checked_at_highlight()
        elif key == "a":
            self.nav.toggle_all()
        elif is_enter(key):
            selection = self.nav.checked_indices()
            if not selection and not self.allow_empty:
                self._reject("select at least one item")
                return
            self._submit(selection, self.validators)
        else:
            self._handle_nav_key(key)

    def _summary(self, value: list[int]) -> str | None:
        if not self.prompt:
            return None
        return self._theme.format_multi_summary(self.prompt, [self.items[i] for i in value])
