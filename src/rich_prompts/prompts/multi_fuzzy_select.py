"""Checkbox list prompt filtered by a fuzzy-matched query."""

from __future__ import annotations

from typing import Any, Iterable, Sequence

from ..keys import is_cancel, is_enter, is_space
from ..navigator import ListNavigator, VisibleRow
from ..validate import Validator, chain_validators
from .base import handle_edit_key
from .fuzzy_select import FuzzySelect


class MultiFuzzySelect(FuzzySelect):
    """Check any number of items, narrowing the list by typing.

    Checked items stay checked while the query hides them. Space toggles
    the highlighted item, so the query cannot contain spaces.

    Returns the indices of the checked items, in ``items`` order.

    Keyboard controls:
        - Up/Down or Ctrl+P/Ctrl+N: Navigate
        - PageUp/PageDown: Previous/next page
        - Space: Toggle the highlighted item
        - Left/Right, Home/End: Move within the query
        - Backspace, Delete, Ctrl+W, Ctrl+U: Edit the query
        - Enter: Confirm
        - Esc or Ctrl+C: Cancel

    Args:
        prompt: Text shown before the query.
        items: Items to choose from.
        defaults: Initial check state per item (missing entries are unchecked).
        validator: Callable (or list of callables) run on the checked indices.
        allow_empty: Accept confirming with nothing checked.
        **kwargs: FuzzySelect options (initial_text, highlight_matches,
            case_sensitive, max_length, wrap, theme, terminal, report, clear,
            show_help).
    """

    help_hints = ("type to filter", "↑↓ navigate", "space toggle", "enter confirm", "esc cancel")

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
        nav = super()._make_navigator()
        nav.checked = {i for i, flag in enumerate(self.defaults) if flag and i < len(self.items)}
        return nav

    def _item_line(self, row: VisibleRow) -> str:
        positions = row.candidate.positions if self.highlight_matches else ()
        return self._theme.format_item(
            row.candidate.text, row.is_highlighted, row.is_checked, positions=positions
        )

    def _handle_key(self, key: str) -> None:
        if is_cancel(key):
            self._cancel()
        elif is_space(key):
            self.nav.toggle_checked_at_highlight()
        elif is_enter(key):
            selection = self.nav.checked_indices()
            if not selection and not self.allow_empty:
                self._reject("select at least one item")
                return
            self._submit(selection, self.validators)
        elif self._handle_nav_key(key, vim=False):
            return
        elif handle_edit_key(self.editor, key):
            if self.editor.text != self.nav.query:
                self.nav.set_query(self.editor.text)

    def _summary(self, value: list[int]) -> str | None:
        if not self.prompt:
            return None
        return self._theme.format_multi_summary(self.prompt, [self.items[i] for i in value])
