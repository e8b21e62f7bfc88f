"""Single-line text input prompt."""

from __future__ import annotations

from typing import Any, Callable, Iterable, Optional, TypeVar

from ..history import History
from ..keys import is_cancel, is_down, is_enter, is_tab, is_up
from ..line_editor import LineEditor
from ..validate import Validator, chain_validators, parse_and_validate
from .base import Prompt, State, handle_edit_key

T = TypeVar("T")

Completion = Callable[[str], Optional[str]]


class Input(Prompt[T]):
    """Read a line of text and convert it with ``parser``.

    On Enter the buffer is parsed and validated. A parse failure or a
    validator error is shown under the prompt and editing continues with
    the buffer intact. When the buffer is empty and a default is set, the
    default is validated and returned.

    Keyboard controls:
        - Printable keys: Insert at the cursor
        - Left/Right, Home/End (Ctrl+A/Ctrl+E): Move the cursor
        - Backspace, Delete, Ctrl+W, Ctrl+U: Delete
        - Up/Down: Walk the history
        - Tab: Complete via ``completion``
        - Enter: Confirm
        - Esc or Ctrl+C: Cancel

    Args:
        prompt: Text shown before the input.
        default: Value returned when the buffer is empty.
        show_default: Show the default as "[default]" after the prompt.
        initial_text: Text the buffer starts with.
        parser: Converts the text into the result (str by default). A
            ValueError rejects the input with its message.
        validator: Callable (or list of callables) run on the parsed value;
            returns an error message to reject.
        allow_empty: Accept an empty buffer when there is no default.
        history: Store to recall entries from and append confirmed text to.
        completion: Called with the buffer on Tab; a returned string
            replaces the buffer.
        post_completion_text: Prompt text used in the summary line.
        **kwargs: Prompt options (theme, terminal, report, clear, show_help).

    Example:
        age = Input("Age", parser=int, validator=lambda v: None if v > 0 else "must be positive").interact()
    """

    help_hints = ("enter confirm", "↑↓ history", "esc cancel")

    def __init__(
        self,
        prompt: str = "",
        *,
        default: T | None = None,
        show_default: bool = True,
        initial_text: str = "",
        parser: Callable[[str], T] = str,
        validator: Validator | Iterable[Validator] | None = None,
        allow_empty: bool = False,
        history: History | None = None,
        completion: Completion | None = None,
        post_completion_text: str | None = None,
        **kwargs: Any,
    ):
        super().__init__(prompt, **kwargs)
        self.default = default
        self.show_default = show_default
        self.initial_text = initial_text
        self.parser = parser
        self.validators = chain_validators(validator)
        self.allow_empty = allow_empty
        self.history = history
        self.completion = completion
        self.post_completion_text = post_completion_text
        self._submitted_text = ""

    def _reset(self) -> None:
        self.editor = LineEditor(self.initial_text, history=self.history)
        self._submitted_text = ""

    def _body(self) -> list[str]:
        default = None
        if self.show_default and self.default is not None:
            default = str(self.default)
        return [
            self._theme.format_input_prompt(
                self.prompt, self.editor.text, self.editor.cursor, default=default
            )
        ]

    def _complete(self) -> None:
        if self.completion is None:
            return
        completed = self.completion(self.editor.text)
        if completed is not None:
            self.editor.set_text(completed)

    def _confirm(self) -> None:
        text = self.editor.text
        if not text:
            if self.default is not None:
                # Defaults go through the validators like typed input
                self._submitted_text = str(self.default)
                self._submit(self.default, self.validators)
                return
            if not self.allow_empty:
                return

        self._submitted_text = text
        self._submit_result(parse_and_validate(text, self.parser, self.validators))
        if self.history is not None and self._state is State.CONFIRMED:
            self.history.append(text)

    def _handle_key(self, key: str) -> None:
        if is_cancel(key):
            self._cancel()
        elif is_enter(key):
            self._confirm()
        elif is_up(key):
            self.editor.history_previous()
        elif is_down(key):
            self.editor.history_next()
        elif is_tab(key):
            self._complete()
        else:
            handle_edit_key(self.editor, key)

    def _summary(self, value: T) -> str | None:
        label = self.post_completion_text or self.prompt
        if not label:
            return None
        return self._theme.format_summary(label, self._submitted_text)
