"""Keyboard input helpers for rich_prompts.

Keys are the strings returned by ``readchar.readkey()``. These helpers
replace repeated inline conditionals in the prompt loops with readable
function calls.
"""

from __future__ import annotations

import readchar


def is_enter(key: str) -> bool:
    """Check if key is Enter/Return."""
    return key in (readchar.key.ENTER, "\r", "\n")


def is_escape(key: str) -> bool:
    """Check if key is Escape (handles terminal variations)."""
    return key in (readchar.key.ESC, "\x1b", "\x1b\x1b")


def is_interrupt(key: str) -> bool:
    """Check if key is Ctrl+C."""
    return key == readchar.key.CTRL_C


def is_cancel(key: str) -> bool:
    """Check if key cancels the prompt (Esc or Ctrl+C)."""
    return is_escape(key) or is_interrupt(key)


def is_up(key: str) -> bool:
    """Check if key is up arrow or Ctrl+P."""
    return key in (readchar.key.UP, readchar.key.CTRL_P)


def is_down(key: str) -> bool:
    """Check if key is down arrow or Ctrl+N."""
    return key in (readchar.key.DOWN, readchar.key.CTRL_N)


def is_vim_up(key: str) -> bool:
    """Check if key is up arrow, Ctrl+P or vim 'k'."""
    return key == "k" or is_up(key)


def is_vim_down(key: str) -> bool:
    """Check if key is down arrow, Ctrl+N or vim 'j'."""
    return key == "j" or is_down(key)


def is_left(key: str) -> bool:
    return key == readchar.key.LEFT


def is_right(key: str) -> bool:
    return key == readchar.key.RIGHT


def is_page_up(key: str) -> bool:
    return key == readchar.key.PAGE_UP


def is_page_down(key: str) -> bool:
    return key == readchar.key.PAGE_DOWN


def is_home(key: str) -> bool:
    """Check if key is Home or Ctrl+A."""
    return key in (readchar.key.HOME, readchar.key.CTRL_A)


def is_end(key: str) -> bool:
    """Check if key is End or Ctrl+E."""
    return key in (readchar.key.END, readchar.key.CTRL_E)


def is_backspace(key: str) -> bool:
    """Check if key is backspace (handles terminal variations)."""
    return key in (readchar.key.BACKSPACE, "\x7f", "\b")


def is_delete(key: str) -> bool:
    """Check if key is forward delete."""
    return key in (readchar.key.DELETE, readchar.key.CTRL_D)


def is_delete_word(key: str) -> bool:
    """Check if key is Ctrl+W (delete previous word)."""
    return key == readchar.key.CTRL_W


def is_clear_line(key: str) -> bool:
    """Check if key is Ctrl+U (clear the line)."""
    return key == readchar.key.CTRL_U


def is_tab(key: str) -> bool:
    return key == readchar.key.TAB


def is_space(key: str) -> bool:
    """Check if key is space."""
    return key == " "


def is_printable(key: str) -> bool:
    """Check if key is a single printable character (space included)."""
    return len(key) == 1 and key.isprintable()


def is_exit(key: str) -> bool:
    """Check if key is the quit letter (q) used by list prompts without a query."""
    return key.lower() == "q"
