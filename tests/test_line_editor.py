from __future__ import annotations

from rich_prompts.history import BasicHistory
from rich_prompts.line_editor import LineEditor


def test_initial_text_puts_cursor_at_end():
    editor = LineEditor("abc")
    assert editor.current_text() == "abc"
    assert editor.cursor == 3


def test_insert_at_cursor():
    editor = LineEditor("ac")
    editor.move_cursor(-1)
    editor.insert("b")
    assert editor.text == "abc"
    assert editor.cursor == 2


def test_delete_backward_and_forward():
    editor = LineEditor("abcd")
    editor.move_cursor(-2)
    editor.delete_backward()
    assert (editor.text, editor.cursor) == ("acd", 1)
    editor.delete_forward()
    assert (editor.text, editor.cursor) == ("ad", 1)


def test_deletes_at_bounds_are_noops():
    editor = LineEditor("ab")
    editor.delete_forward()
    assert editor.text == "ab"
    editor.move_home()
    editor.delete_backward()
    assert (editor.text, editor.cursor) == ("ab", 0)


def test_cursor_is_clamped():
    editor = LineEditor("ab")
    editor.move_cursor(+5)
    assert editor.cursor == 2
    editor.move_cursor(-9)
    assert editor.cursor == 0
    editor.move_end()
    assert editor.cursor == 2


def test_delete_word_backward():
    editor = LineEditor("git commit  ")
    editor.delete_word_backward()
    assert (editor.text, editor.cursor) == ("git ", 4)
    editor.delete_word_backward()
    assert editor.text == ""


def test_clear():
    editor = LineEditor("abc")
    editor.clear()
    assert (editor.text, editor.cursor) == ("", 0)


def test_history_walk_restores_draft():
    history = BasicHistory()
    history.append("first")
    history.append("second")
    editor = LineEditor("draft", history=history)

    assert editor.history_previous()
    assert editor.text == "second"
    assert editor.history_previous()
    assert editor.text == "first"
    assert not editor.history_previous()
    assert editor.text == "first"

    assert editor.history_next()
    assert editor.text == "second"
    assert editor.history_next()
    assert editor.text == "draft"
    assert editor.cursor == 5
    assert not editor.history_next()


def test_history_without_store():
    editor = LineEditor("x")
    assert not editor.history_previous()
    assert not editor.history_next()
    assert not LineEditor(history=BasicHistory()).history_previous()
