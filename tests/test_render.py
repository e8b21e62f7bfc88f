from __future__ import annotations

from rich_prompts.render import FrameRenderer


def test_first_render_writes_every_line(make_terminal):
    term = make_terminal()
    renderer = FrameRenderer(term)
    renderer.render(["one", "two"])
    assert term.writes == ["one", "\n", "two", "\n"]
    assert renderer.height == 2
    assert ("move", -2) not in term.calls


def test_unchanged_frame_is_not_redrawn(make_terminal):
    term = make_terminal()
    renderer = FrameRenderer(term)
    renderer.render(["one", "two"])
    before = list(term.calls)
    renderer.render(["one", "two"])
    assert term.calls == before


def test_shorter_frame_clears_previous_region(make_terminal):
    term = make_terminal()
    renderer = FrameRenderer(term)
    renderer.render(["a", "b", "c"])
    term.calls.clear()

    renderer.render(["x"])
    assert term.calls[0] == ("move", -3)
    first_write = term.calls.index(("write", "x"))
    clears_before_write = [c for c in term.calls[:first_write] if c == ("clear",)]
    assert len(clears_before_write) >= 3
    assert renderer.height == 1


def test_wrapped_lines_count_screen_rows(make_terminal):
    term = make_terminal(columns=10)
    renderer = FrameRenderer(term)
    renderer.render(["x" * 25, "[bold]short[/bold]"])
    assert renderer.height == 4


def test_finish_leaves_only_summary(make_terminal):
    term = make_terminal()
    renderer = FrameRenderer(term)
    renderer.render(["a", "b"])
    term.calls.clear()

    renderer.finish("done")
    assert term.calls[0] == ("move", -2)
    assert term.writes == ["done", "\n"]
    assert renderer.height == 0


def test_finish_without_clear_keeps_frame(make_terminal):
    term = make_terminal()
    renderer = FrameRenderer(term)
    renderer.render(["a"])
    term.calls.clear()

    renderer.finish(None, clear=False)
    assert term.calls == []
