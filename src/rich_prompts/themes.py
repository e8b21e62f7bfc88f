"""Configurable themes for rich_prompts.

The Theme dataclass holds every visual element (styles, icons) and turns
semantic prompt elements into Rich markup lines. Formatting is pure: the
same arguments always produce the same line, which the frame renderer
relies on to skip redundant redraws.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Iterable, Sequence

from rich.markup import escape

from . import config


def _wrap(style: str, markup: str) -> str:
    """Wrap already-escaped markup in a style tag (no-op for empty styles)."""
    if not style or not markup:
        return markup
    return f"[{style}]{markup}[/{style}]"


@dataclass(frozen=True)
class Theme:
    """Visual theme for prompts.

    All styles use Rich style syntax (e.g. "green", "bold cyan", "dim").
    An empty style renders text unstyled.

    Attributes:
        name: Theme identifier used by set_theme().
        prompt_style: Style for the prompt text.
        defaults_style: Style for the "[default]" hint.
        error_style: Style for the "error" label.
        indicator_style: Style for the cursor and check marks.
        active_style: Style for the highlighted item.
        inactive_style: Style for the other items.
        values_style: Style for confirmed values in summaries.
        yes_style: Style for a "yes" confirmation summary.
        no_style: Style for a "no" confirmation summary.
        match_style: Style for fuzzy-matched characters.
        muted_style: Style for scroll indicators and hints.
        cursor_style: Style for the text cursor cell.

        prompt_suffix: Character appended after the prompt text.
        cursor_icon: Marker shown next to the highlighted item.
        checked_icon: Marker for checked items.
        unchecked_icon: Marker for unchecked items.
        grabbed_icon: Marker for the item being moved in a sort prompt.
        scroll_up_icon: Marker for "more above".
        scroll_down_icon: Marker for "more below".
        hidden_value: Summary text shown for passwords.
    """

    name: str = "default"

    # Styles
    prompt_style: str = "bold"
    defaults_style: str = "dim"
    error_style: str = "red"
    indicator_style: str = "bold cyan"
    active_style: str = ""
    inactive_style: str = "dim"
    values_style: str = "cyan"
    yes_style: str = "green"
    no_style: str = "green"
    match_style: str = "bold underline"
    muted_style: str = "dim"
    cursor_style: str = "reverse"

    # Icons
    prompt_suffix: str = ":"
    cursor_icon: str = "❯"
    checked_icon: str = "◉"
    unchecked_icon: str = "○"
    grabbed_icon: str = "↕"
    scroll_up_icon: str = "↑"
    scroll_down_icon: str = "↓"
    hidden_value: str = "[hidden]"

    # -- prompt lines ------------------------------------------------------

    def format_prompt(self, prompt: str) -> str:
        """Header line above a list of items."""
        return f"{_wrap(self.prompt_style, escape(prompt))}{escape(self.prompt_suffix)}"

    def _prompt_prefix(self, prompt: str, default: str | None) -> str:
        parts = []
        if prompt:
            parts.append(_wrap(self.prompt_style, escape(prompt)))
        if default is not None:
            parts.append(_wrap(self.defaults_style, escape(f"[{default}]")))
        if not parts:
            return ""
        return f"{' '.join(parts)}{escape(self.prompt_suffix)} "

    def format_input_prompt(
        self,
        prompt: str,
        text: str,
        cursor: int,
        default: str | None = None,
        mask: str | None = None,
    ) -> str:
        """Single-line prompt followed by the edit buffer and a cursor cell.

        Args:
            prompt: Prompt text.
            text: Current buffer contents.
            cursor: Cursor offset into ``text``.
            default: Default value hint, shown as "[default]".
            mask: None echoes text; a character masks each typed character;
                an empty string hides the input entirely.
        """
        if mask is not None:
            if mask:
                text = mask[0] * len(text)
            else:
                text, cursor = "", 0
        before = escape(text[:cursor])
        at = text[cursor] if cursor < len(text) else " "
        after = escape(text[cursor + 1 :])
        cell = _wrap(self.cursor_style, escape(at)) if self.cursor_style else escape(at)
        return f"{self._prompt_prefix(prompt, default)}{before}{cell}{after}"

    def format_confirm_prompt(
        self, prompt: str, default: bool | None, choice: bool | None = None
    ) -> str:
        """Yes/no prompt with a "[Y/n]" style hint and the pending choice."""
        line = _wrap(self.prompt_style, escape(prompt))
        if default is True:
            line += " " + _wrap(self.defaults_style, escape("[Y/n]"))
        elif default is False:
            line += " " + _wrap(self.defaults_style, escape("[y/N]"))
        if choice is not None:
            line += " " + ("yes" if choice else "no")
        return line

    # -- list rows ---------------------------------------------------------

    def _highlight_matches(self, text: str, positions: Iterable[int], base_style: str) -> str:
        marked = set(positions)
        if not marked:
            return _wrap(base_style, escape(text))
        chunks: list[str] = []
        run = ""
        run_matched = False
        for i, char in enumerate(text):
            matched = i in marked
            if run and matched != run_matched:
                chunks.append(_wrap(self.match_style if run_matched else base_style, escape(run)))
                run = ""
            run += char
            run_matched = matched
        if run:
            chunks.append(_wrap(self.match_style if run_matched else base_style, escape(run)))
        return "".join(chunks)

    def format_item(
        self,
        text: str,
        is_highlighted: bool,
        is_checked: bool | None = None,
        positions: Sequence[int] = (),
        is_grabbed: bool = False,
    ) -> str:
        """Render one list row.

        Args:
            text: Item display text.
            is_highlighted: Whether the cursor is on this row.
            is_checked: None for rows without a checkbox, else the check state.
            positions: Character offsets to emphasise (fuzzy matches).
            is_grabbed: Whether this row is being moved (sort prompts).
        """
        if is_highlighted:
            icon = self.grabbed_icon if is_grabbed else self.cursor_icon
            prefix = _wrap(self.indicator_style, escape(icon)) + " "
        else:
            prefix = " " * (len(self.cursor_icon) + 1)

        if is_checked is not None:
            if is_checked:
                mark = _wrap(self.indicator_style, escape(self.checked_icon))
            else:
                mark = escape(self.unchecked_icon)
            prefix += mark + " "

        style = self.active_style if is_highlighted else self.inactive_style
        return prefix + self._highlight_matches(text, positions, style)

    def format_scroll_indicator(self, count: int, above: bool) -> str:
        """Render a "N more above/below" row."""
        icon = self.scroll_up_icon if above else self.scroll_down_icon
        where = "above" if above else "below"
        return _wrap(self.muted_style, escape(f"  {icon} {count} more {where}"))

    def format_no_matches(self) -> str:
        return _wrap(self.muted_style, "  no matches")

    # -- feedback ----------------------------------------------------------

    def format_error(self, message: str) -> str:
        return f"{_wrap(self.error_style, 'error')}: {escape(message)}"

    def format_help(self, hints: Sequence[str]) -> str:
        """Return a dim keybinding hint line."""
        return _wrap(self.muted_style, escape(" · ".join(hints)))

    # -- summaries ---------------------------------------------------------

    def _summary_prefix(self, prompt: str) -> str:
        return f"{_wrap(self.prompt_style, escape(prompt))}{escape(self.prompt_suffix)}"

    def format_summary(self, prompt: str, value: str) -> str:
        """Line left on screen after a single value is confirmed."""
        return f"{self._summary_prefix(prompt)} {_wrap(self.values_style, escape(value))}"

    def format_multi_summary(self, prompt: str, values: Sequence[str]) -> str:
        joined = ", ".join(_wrap(self.values_style, escape(value)) for value in values)
        return f"{self._summary_prefix(prompt)} {joined}".rstrip()

    def format_confirm_summary(self, prompt: str, value: bool) -> str:
        answer = _wrap(self.yes_style, "yes") if value else _wrap(self.no_style, "no")
        return f"{_wrap(self.prompt_style, escape(prompt))} {answer}"

    def format_password_summary(self, prompt: str) -> str:
        return self.format_summary(prompt, self.hidden_value)


DEFAULT_THEME = Theme()

PLAIN_THEME = replace(
    DEFAULT_THEME,
    name="plain",
    prompt_style="",
    defaults_style="",
    error_style="",
    indicator_style="",
    active_style="",
    inactive_style="",
    values_style="",
    yes_style="",
    no_style="",
    match_style="",
    muted_style="",
    cursor_style="",
    cursor_icon=">",
    checked_icon="[x]",
    unchecked_icon="[ ]",
    grabbed_icon="*",
    scroll_up_icon="^",
    scroll_down_icon="v",
)

_THEMES: dict[str, Theme] = {
    DEFAULT_THEME.name: DEFAULT_THEME,
    PLAIN_THEME.name: PLAIN_THEME,
}

_current_theme: Theme | None = None


def register_theme(theme: Theme) -> None:
    """Make a custom theme selectable by name."""
    _THEMES[theme.name] = theme


def set_theme(theme: Theme | str | None = None) -> Theme:
    """Select the active theme.

    Accepts a Theme, a registered theme name, or None to fall back to the
    environment (RICH_PROMPTS_THEME / NO_COLOR). Unknown names select the
    default theme.
    """
    global _current_theme

    if isinstance(theme, Theme):
        _current_theme = theme
        return _current_theme

    name = theme if theme is not None else config.get_theme_name()
    _current_theme = _THEMES.get(name, DEFAULT_THEME)
    return _current_theme


def get_theme() -> Theme:
    """Return the active theme, resolving it from the environment on first use."""
    if _current_theme is None:
        return set_theme()
    return _current_theme
