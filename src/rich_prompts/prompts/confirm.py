"""Yes/no prompt."""

from __future__ import annotations

from typing import Any

from ..keys import is_cancel, is_enter
from .base import Prompt


class Confirm(Prompt[bool]):
    """Ask a yes/no question.

    By default y/n answer immediately. With ``wait_for_newline`` they only
    change the shown choice and Enter commits it. Enter with neither a
    choice nor a default is ignored.

    Args:
        prompt: The question.
        default: Answer used when Enter is pressed without a choice.
        show_default: Show "[Y/n]" / "[y/N]" after the question.
        wait_for_newline: Require Enter after y/n.
        **kwargs: Prompt options (theme, terminal, report, clear, show_help).

    Example:
        if Confirm("Overwrite?", default=False).interact():
            ...
    """

    help_hints = ("y yes", "n no", "esc cancel")

    def __init__(
        self,
        prompt: str = "",
        *,
        default: bool | None = None,
        show_default: bool = True,
        wait_for_newline: bool = False,
        **kwargs: Any,
    ):
        super().__init__(prompt, **kwargs)
        self.default = default
        self.show_default = show_default
        self.wait_for_newline = wait_for_newline

    def _reset(self) -> None:
        self.choice: bool | None = None

    def _body(self) -> list[str]:
        default = self.default if self.show_default else None
        return [self._theme.format_confirm_prompt(self.prompt, default, self.choice)]

    def _answer(self, value: bool) -> None:
        if self.wait_for_newline:
            self.choice = value
        else:
            self._submit(value)

    def _handle_key(self, key: str) -> None:
        if is_cancel(key):
            self._cancel()
        elif key in ("y", "Y"):
            self._answer(True)
        elif key in ("n", "N"):
            self._answer(False)
        elif is_enter(key):
            value = self.choice if self.choice is not None else self.default
            if value is not None:
                self._submit(value)

    def _summary(self, value: bool) -> str | None:
        if not self.prompt:
            return None
        return self._theme.format_confirm_summary(self.prompt, value)
