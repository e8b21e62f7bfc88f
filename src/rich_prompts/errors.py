"""Exceptions raised by rich_prompts.

Three outcomes leave a prompt loop other than a confirmed value:

- ValidationError: input rejected. Never escapes the loop; the message is
  shown under the prompt and editing continues.
- TerminalIOError: the terminal device failed. Always escapes, after the
  terminal has been restored.
- PromptCancelled: the user pressed Esc or Ctrl+C. Escapes from
  ``interact()``; ``interact_opt()`` turns it into ``None``.
"""

from __future__ import annotations


class PromptError(Exception):
    """Base class for all rich_prompts errors."""


class ValidationError(PromptError):
    """Input was rejected by a parser or validator."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class TerminalIOError(PromptError, OSError):
    """Reading from or writing to the terminal failed."""


class PromptCancelled(PromptError):
    """The user declined to answer (Esc or Ctrl+C)."""

    def __init__(self, prompt: str = ""):
        super().__init__(f"Prompt cancelled: {prompt}" if prompt else "Prompt cancelled")
        self.prompt = prompt
