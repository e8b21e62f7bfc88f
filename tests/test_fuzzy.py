from __future__ import annotations

from rich_prompts.fuzzy import Candidate, FuzzyMatch, filter_view, score


def test_query_must_be_subsequence():
    view = filter_view("an", ["Apple", "Banana", "Cherry"])
    assert [c.text for c in view] == ["Banana"]
    assert view[0].index == 1


def test_empty_query_keeps_everything_in_order():
    view = filter_view("", ["b", "a", "c"])
    assert [c.index for c in view] == [0, 1, 2]
    assert all(c.score == 0 and c.positions == () for c in view)


def test_no_match_returns_none():
    assert score("x", "hello") is None
    assert score("hello!", "hello") is None
    assert score("ba", "ab") is None


def test_empty_query_scores_zero():
    assert score("", "anything") == FuzzyMatch(score=0, positions=())


def test_word_boundary_positions():
    assert score("hw", "hello_world") == FuzzyMatch(score=28, positions=(0, 6))


def test_camel_case_hump_is_word_start():
    assert score("fb", "fooBar").positions == (0, 3)


def test_consecutive_beats_scattered():
    assert score("abc", "abcxyz").score > score("abc", "axbxcx").score


def test_boundary_beats_mid_word():
    assert score("b", "x_b").score > score("b", "xab").score


def test_shorter_candidate_wins_ties():
    assert score("ab", "ab").score > score("ab", "abc").score


def test_best_alignment_is_chosen():
    match = score("ab", "a_xab")
    assert match.positions == (3, 4)


def test_case_insensitive_by_default():
    assert score("APP", "apple") is not None
    assert score("APP", "apple", case_sensitive=True) is None
    assert score("App", "Apple", case_sensitive=True).positions == (0, 1, 2)


def test_filter_view_sorts_by_score_then_index():
    view = filter_view("a", ["xa", "ya", "a"])
    assert [c.index for c in view] == [2, 0, 1]


def test_filter_view_carries_positions():
    (candidate,) = filter_view("an", ["Banana"])
    assert candidate == Candidate(index=0, text="Banana", score=40, positions=(1, 2))


def test_positions_stay_aligned_with_non_ascii_text():
    # "İ".lower() is two code points
    assert score("a", "İa").positions == (1,)
    match = score("s", "İstanbul")
    assert "İstanbul"[match.positions[0]] == "s"


def test_filter_view_with_non_ascii_items():
    view = filter_view("l", ["İstanbul", "Ankara", "Oslo"])
    assert [c.text for c in view] == ["Oslo", "İstanbul"]
    assert view[1].positions == (7,)
