"""Shared run loop for all prompts.

Every prompt is a small state machine driven by one blocking loop:

    EDITING -> VALIDATING -> EDITING (rejected)
                          -> CONFIRMED
    EDITING -> CANCELLED

Subclasses describe their screen with ``_body()`` and react to keys in
``_handle_key()``; they end the loop by calling ``_submit()`` or
``_cancel()``. The loop owns the terminal for its whole duration and
restores it on every exit path.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Generic, Iterable, TypeVar

from .. import config
from ..errors import PromptCancelled, TerminalIOError
from ..keys import (
    is_backspace,
    is_clear_line,
    is_delete,
    is_delete_word,
    is_down,
    is_end,
    is_home,
    is_left,
    is_page_down,
    is_page_up,
    is_printable,
    is_right,
    is_up,
    is_vim_down,
    is_vim_up,
)
from ..line_editor import LineEditor
from ..navigator import ListNavigator, VisibleRow
from ..render import FrameRenderer
from ..terminal import ConsoleTerminal, Terminal
from ..themes import Theme, get_theme
from ..validate import Err, ValidationResult, Validator, run_validators

logger = logging.getLogger(__name__)

T = TypeVar("T")


class State(Enum):
    EDITING = "editing"
    VALIDATING = "validating"
    CONFIRMED = "confirmed"
    CANCELLED = "cancelled"


def handle_edit_key(editor: LineEditor, key: str) -> bool:
    """Apply a line-editing key to ``editor``. Returns True if it was one."""
    if is_backspace(key):
        editor.delete_backward()
    elif is_delete(key):
        editor.delete_forward()
    elif is_delete_word(key):
        editor.delete_word_backward()
    elif is_clear_line(key):
        editor.clear()
    elif is_left(key):
        editor.move_cursor(-1)
    elif is_right(key):
        editor.move_cursor(+1)
    elif is_home(key):
        editor.move_home()
    elif is_end(key):
        editor.move_end()
    elif is_printable(key):
        editor.insert(key)
    else:
        return False
    return True


class Prompt(Generic[T]):
    """Base class for interactive prompts.

    Args:
        prompt: Text shown before the input or above the list.
        theme: Visual theme (the active theme from get_theme() if None).
        terminal: Terminal to run on (a stderr ConsoleTerminal if None).
        report: Leave a one-line summary of the answer on screen.
        clear: Erase the prompt once answered.
        show_help: Show a keybinding hint line.
    """

    help_hints: tuple[str, ...] = ("enter confirm", "esc cancel")

    def __init__(
        self,
        prompt: str = "",
        *,
        theme: Theme | None = None,
        terminal: Terminal | None = None,
        report: bool = True,
        clear: bool = True,
        show_help: bool = False,
    ):
        self.prompt = prompt
        self.theme = theme
        self.terminal = terminal
        self.report = report
        self.clear = clear
        self.show_help = show_help

        # Per-run state, reset by _run()
        self._theme: Theme = theme or get_theme()
        self._term: Terminal | None = None
        self._state = State.EDITING
        self._value: Any = None
        self._error: str | None = None

    # -- hooks for subclasses ----------------------------------------------

    def _reset(self) -> None:
        """Create fresh per-run state."""

    def _body(self) -> list[str]:
        raise NotImplementedError

    def _handle_key(self, key: str) -> None:
        raise NotImplementedError

    def _layout(self) -> None:
        """Adapt state to the terminal size before each render."""

    def _summary(self, value: T) -> str | None:
        return None

    # -- state transitions -------------------------------------------------

    def _submit(self, value: T, validators: Iterable[Validator] = ()) -> None:
        self._submit_result(run_validators(value, validators))

    def _submit_result(self, result: ValidationResult) -> None:
        self._state = State.VALIDATING
        if isinstance(result, Err):
            self._reject(result.message)
            return
        self._value = result.value
        self._state = State.CONFIRMED

    def _reject(self, message: str) -> None:
        logger.debug("%s rejected input: %s", type(self).__name__, message)
        self._error = message
        self._state = State.EDITING

    def _cancel(self) -> None:
        self._state = State.CANCELLED

    # -- rendering ---------------------------------------------------------

    def _reserved_rows(self) -> int:
        """Rows of the frame not available to list items."""
        return (1 if self.prompt else 0) + 1 + (1 if self.show_help else 0)

    def _frame(self) -> list[str]:
        lines = list(self._body())
        if self._error:
            lines.append(self._theme.format_error(self._error))
        if self.show_help:
            lines.append(self._theme.format_help(self.help_hints))
        return lines

    # -- run loop ----------------------------------------------------------

    def _restore_terminal(self, term: Terminal) -> None:
        try:
            term.set_raw_mode(False)
        except OSError as exc:
            logger.warning("Failed to leave raw mode: %s", exc)
        try:
            term.show_cursor(True)
        except OSError as exc:
            logger.warning("Failed to show cursor: %s", exc)

    def _run(self) -> State:
        self._theme = self.theme or get_theme()
        term = self._term = self.terminal or ConsoleTerminal()
        renderer = FrameRenderer(term)
        self._state = State.EDITING
        self._value = None
        self._error = None
        self._reset()

        logger.debug("Starting %s prompt %r", type(self).__name__, self.prompt)
        try:
            try:
                term.set_raw_mode(True)
                term.show_cursor(False)
                while self._state is State.EDITING:
                    self._layout()
                    renderer.render(self._frame())
                    key = term.read_key()
                    self._error = None
                    self._handle_key(key)

                if self._state is State.CONFIRMED:
                    summary = self._summary(self._value) if self.report else None
                    renderer.finish(summary, clear=self.clear)
                else:
                    renderer.finish(None, clear=self.clear)
            finally:
                self._restore_terminal(term)
        except TerminalIOError:
            raise
        except OSError as exc:
            logger.warning("Terminal failure in %s prompt: %s", type(self).__name__, exc)
            raise TerminalIOError(str(exc)) from exc

        logger.debug("%s prompt %s", type(self).__name__, self._state.value)
        return self._state

    def interact(self) -> T:
        """Run the prompt and return the confirmed value.

        Raises:
            PromptCancelled: If the user pressed Esc or Ctrl+C.
            TerminalIOError: If the terminal failed.
        """
        if self._run() is State.CANCELLED:
            raise PromptCancelled(self.prompt)
        return self._value

    def interact_opt(self) -> T | None:
        """Like interact(), but return None when the user cancels."""
        try:
            return self.interact()
        except PromptCancelled:
            return None


class ListPrompt(Prompt[T]):
    """Base class for prompts over a list of items.

    Args:
        prompt: Text shown above the list.
        items: Items to choose from (converted with str()).
        max_length: Most item rows to show at once (None = fit the terminal).
        wrap: Whether moving past either end wraps around.
        **kwargs: Prompt options (theme, terminal, report, clear, show_help).

    Raises:
        ValueError: If items is empty.
    """

    help_hints = ("↑↓ navigate", "enter confirm", "esc cancel")

    def __init__(
        self,
        prompt: str = "",
        items: Iterable[Any] = (),
        *,
        max_length: int | None = None,
        wrap: bool = True,
        **kwargs: Any,
    ):
        super().__init__(prompt, **kwargs)
        self.items = [str(item) for item in items]
        if not self.items:
            raise ValueError(f"Empty list of items given to {type(self).__name__}")
        if max_length is not None and max_length < 1:
            raise ValueError("max_length must be positive")
        self.max_length = max_length
        self.wrap = wrap
        self._indicators = True
        self.nav = self._make_navigator()

    def _make_navigator(self) -> ListNavigator:
        return ListNavigator(self.items, wrap=self.wrap)

    def _reset(self) -> None:
        self.nav = self._make_navigator()

    def _page_rows(self) -> int:
        """Item rows that fit: terminal height minus prompt, error, help and indicators."""
        rows, _ = self._term.size()
        available = rows - self._reserved_rows()
        cap = self.max_length or config.get_max_rows()
        page = min(cap, available) if cap else available
        self._indicators = True
        if self.nav.count > page:
            if available - 2 >= 1:
                page = min(page, available - 2)
            else:
                # Too short for "more above/below" rows
                self._indicators = False
        return max(1, page)

    def _layout(self) -> None:
        self.nav.set_page_size(self._page_rows())

    def _handle_nav_key(self, key: str, vim: bool = True) -> bool:
        """Apply a navigation key. Returns True if it was one.

        With ``vim`` the j/k letters move too, and Left/Right page; prompts
        with a text query pass False to keep those keys for editing.
        """
        up = is_vim_up if vim else is_up
        down = is_vim_down if vim else is_down
        if up(key):
            self.nav.move_highlight(-1)
        elif down(key):
            self.nav.move_highlight(+1)
        elif is_page_up(key) or (vim and is_left(key)):
            self.nav.move_page(-1)
        elif is_page_down(key) or (vim and is_right(key)):
            self.nav.move_page(+1)
        elif vim and is_home(key):
            self.nav.move_to_first()
        elif vim and is_end(key):
            self.nav.move_to_last()
        else:
            return False
        return True

    def _header(self) -> list[str]:
        return [self._theme.format_prompt(self.prompt)] if self.prompt else []

    def _item_line(self, row: VisibleRow) -> str:
        return self._theme.format_item(row.candidate.text, row.is_highlighted)

    def _body(self) -> list[str]:
        lines = self._header()
        if not self.nav.count:
            lines.append(self._theme.format_no_matches())
            return lines
        if self._indicators and self.nav.more_above:
            lines.append(self._theme.format_scroll_indicator(self.nav.more_above, above=True))
        lines.extend(self._item_line(row) for row in self.nav.current_visible())
        if self._indicators and self.nav.more_below:
            lines.append(self._theme.format_scroll_indicator(self.nav.more_below, above=False))
        return lines
