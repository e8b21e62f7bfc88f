"""Masked text input prompt."""

from __future__ import annotations

from typing import Any, Iterable

from ..keys import is_cancel, is_enter
from ..line_editor import LineEditor
from ..validate import Err, Validator, chain_validators, run_validators
from .base import Prompt, handle_edit_key


class Password(Prompt[str]):
    """Read a secret without echoing it.

    Editing works like Input; the typed text is drawn as mask characters.
    With ``confirmation`` set the secret is asked for twice and must match.
    The buffer contents are never logged.

    Args:
        prompt: Text shown before the input.
        confirmation: Prompt text for the second entry (None to ask once).
        mismatch_error: Error shown when the two entries differ.
        validator: Callable (or list of callables) run on the first entry.
        allow_empty: Accept an empty password.
        mask: Character drawn per typed character ("" hides the input).
        **kwargs: Prompt options (theme, terminal, report, clear, show_help).
    """

    def __init__(
        self,
        prompt: str = "",
        *,
        confirmation: str | None = None,
        mismatch_error: str = "passwords do not match",
        validator: Validator | Iterable[Validator] | None = None,
        allow_empty: bool = False,
        mask: str = "*",
        **kwargs: Any,
    ):
        super().__init__(prompt, **kwargs)
        self.confirmation = confirmation
        self.mismatch_error = mismatch_error
        self.validators = chain_validators(validator)
        self.allow_empty = allow_empty
        self.mask = mask

    def _reset(self) -> None:
        self.editor = LineEditor()
        self._first: str | None = None

    def _body(self) -> list[str]:
        label = self.confirmation if self._first is not None else self.prompt
        return [
            self._theme.format_input_prompt(
                label or "", self.editor.text, self.editor.cursor, mask=self.mask
            )
        ]

    def _confirm(self) -> None:
        text = self.editor.text
        if not text and not self.allow_empty:
            return

        if self.confirmation is None:
            self._submit(text, self.validators)
            return

        if self._first is None:
            result = run_validators(text, self.validators)
            if isinstance(result, Err):
                self._reject(result.message)
                return
            self._first = text
            self.editor.clear()
            return

        if text != self._first:
            self._first = None
            self.editor.clear()
            self._reject(self.mismatch_error)
            return
        self._submit(text)

    def _handle_key(self, key: str) -> None:
        if is_cancel(key):
            self._cancel()
        elif is_enter(key):
            self._confirm()
        else:
            handle_edit_key(self.editor, key)

    def _summary(self, value: str) -> str | None:
        if not self.prompt:
            return None
        return self._theme.format_password_summary(self.prompt)
