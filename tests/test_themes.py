from __future__ import annotations

from rich_prompts import themes
from rich_prompts.themes import DEFAULT_THEME, PLAIN_THEME, Theme


def test_default_theme_without_env():
    assert themes.get_theme() is DEFAULT_THEME


def test_env_override(monkeypatch):
    monkeypatch.setenv("RICH_PROMPTS_THEME", "plain")
    assert themes.set_theme() is PLAIN_THEME


def test_no_color_selects_plain(monkeypatch):
    monkeypatch.setenv("NO_COLOR", "1")
    assert themes.get_theme() is PLAIN_THEME


def test_unknown_name_falls_back_to_default():
    assert themes.set_theme("does-not-exist") is DEFAULT_THEME


def test_register_custom_theme():
    custom = Theme(name="custom", cursor_icon="→")
    themes.register_theme(custom)
    assert themes.set_theme("custom") is custom
    assert themes.get_theme() is custom


def test_plain_item_rows(plain):
    assert plain(PLAIN_THEME.format_item("Apple", True)) == "> Apple"
    assert plain(PLAIN_THEME.format_item("Apple", False)) == "  Apple"
    assert plain(PLAIN_THEME.format_item("Apple", True, is_checked=True)) == "> [x] Apple"
    assert plain(PLAIN_THEME.format_item("Apple", False, is_checked=False)) == "  [ ] Apple"
    assert plain(PLAIN_THEME.format_item("Apple", True, is_grabbed=True)) == "* Apple"


def test_item_text_is_escaped(plain):
    line = DEFAULT_THEME.format_item("[bold]not markup", False)
    assert plain(line) == "  [bold]not markup"


def test_match_positions_are_styled(plain):
    line = DEFAULT_THEME.format_item("Banana", False, positions=(1, 2))
    assert "[bold underline]an[/bold underline]" in line
    assert plain(line) == "  Banana"


def test_input_prompt_with_default(plain):
    line = PLAIN_THEME.format_input_prompt("Name", "bob", 3, default="anon")
    assert plain(line) == "Name [anon]: bob "


def test_input_prompt_masks_text(plain):
    line = PLAIN_THEME.format_input_prompt("Password", "secret", 6, mask="*")
    assert plain(line) == "Password: ****** "
    hidden = PLAIN_THEME.format_input_prompt("Password", "secret", 6, mask="")
    assert "secret" not in hidden
    assert "*" not in plain(hidden)


def test_confirm_prompt_hints(plain):
    assert plain(PLAIN_THEME.format_confirm_prompt("Go?", True)) == "Go? [Y/n]"
    assert plain(PLAIN_THEME.format_confirm_prompt("Go?", False)) == "Go? [y/N]"
    assert plain(PLAIN_THEME.format_confirm_prompt("Go?", None, choice=True)) == "Go? yes"


def test_scroll_indicator_and_feedback(plain):
    assert plain(PLAIN_THEME.format_scroll_indicator(3, above=True)) == "  ^ 3 more above"
    assert plain(PLAIN_THEME.format_scroll_indicator(1, above=False)) == "  v 1 more below"
    assert plain(PLAIN_THEME.format_error("bad")) == "error: bad"
    assert plain(PLAIN_THEME.format_help(["a", "b"])) == "a · b"


def test_summaries(plain):
    assert plain(PLAIN_THEME.format_summary("Pick", "b")) == "Pick: b"
    assert plain(PLAIN_THEME.format_multi_summary("Pick", ["a", "c"])) == "Pick: a, c"
    assert plain(PLAIN_THEME.format_multi_summary("Pick", [])) == "Pick:"
    assert plain(PLAIN_THEME.format_confirm_summary("Go?", False)) == "Go? no"
    assert plain(PLAIN_THEME.format_password_summary("Password")) == "Password: [hidden]"
