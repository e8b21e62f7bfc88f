"""List prompt filtered by a fuzzy-matched query."""

from __future__ import annotations

from typing import Any, Iterable

from ..keys import is_cancel, is_enter
from ..line_editor import LineEditor
from ..navigator import ListNavigator, VisibleRow
from .base import ListPrompt, handle_edit_key


class FuzzySelect(ListPrompt[int]):
    """Pick one item, narrowing the list by typing.

    Typed characters go into a query; only items containing the query as a
    subsequence stay listed, best matches first. Every query change moves
    the highlight back to the top of the list.

    Returns the index of the chosen item in ``items``.

    Keyboard controls:
        - Up/Down or Ctrl+P/Ctrl+N: Navigate
        - PageUp/PageDown: Previous/next page
        - Left/Right, Home/End: Move within the query
        - Backspace, Delete, Ctrl+W, Ctrl+U: Edit the query
        - Enter: Confirm (ignored while nothing matches)
        - Esc or Ctrl+C: Cancel

    Args:
        prompt: Text shown before the query.
        items: Items to choose from.
        default: Index highlighted initially (when the query starts empty).
        initial_text: Query to start with.
        highlight_matches: Emphasise the matched characters.
        case_sensitive: Match the query case-sensitively.
        **kwargs: ListPrompt options.
    """

    help_hints = ("type to filter", "↑↓ navigate", "enter confirm", "esc cancel")

    def __init__(
        self,
        prompt: str = "",
        items: Iterable[Any] = (),
        *,
        default: int = 0,
        initial_text: str = "",
        highlight_matches: bool = True,
        case_sensitive: bool = False,
        **kwargs: Any,
    ):
        self.default = default
        self.initial_text = initial_text
        self.highlight_matches = highlight_matches
        self.case_sensitive = case_sensitive
        super().__init__(prompt, items, **kwargs)
        if not 0 <= default < len(self.items):
            raise ValueError(f"default {default} out of range for {len(self.items)} items")

    def _make_navigator(self) -> ListNavigator:
        nav = ListNavigator(
            self.items,
            wrap=self.wrap,
            highlight=self.default,
            case_sensitive=self.case_sensitive,
        )
        if self.initial_text:
            nav.set_query(self.initial_text)
        return nav

    def _reset(self) -> None:
        super()._reset()
        self.editor = LineEditor(self.initial_text)

    def _reserved_rows(self) -> int:
        # The query line is always drawn, even without prompt text
        return 1 + 1 + (1 if self.show_help else 0)

    def _header(self) -> list[str]:
        return [self._theme.format_input_prompt(self.prompt, self.editor.text, self.editor.cursor)]

    def _item_line(self, row: VisibleRow) -> str:
        positions = row.candidate.positions if self.highlight_matches else ()
        return self._theme.format_item(row.candidate.text, row.is_highlighted, positions=positions)

    def _handle_key(self, key: str) -> None:
        if is_cancel(key):
            self._cancel()
        elif is_enter(key):
            candidate = self.nav.highlighted
            if candidate is not None:
                self._submit(candidate.index)
        elif self._handle_nav_key(key, vim=False):
            return
        elif handle_edit_key(self.editor, key):
            if self.editor.text != self.nav.query:
                self.nav.set_query(self.editor.text)

    def _summary(self, value: int) -> str | None:
        if not self.prompt:
            return None
        return self._theme.format_summary(self.prompt, self.items[value])
