"""Fuzzy matching utilities.

A query matches a candidate when all query characters appear in the
candidate in order (not necessarily consecutive). Higher score = better
match.

Scoring:
- +16 per matched character
- +12 for each match directly following the previous one
- +10 for a match at a word start (index 0, after a separator, or a
  camelCase hump)
- -3 per character skipped between two matches
- -1 per unmatched character (shorter candidates win ties)

Example:
    >>> score("hw", "hello_world")
    FuzzyMatch(score=28, positions=(0, 6))
    >>> score("x", "hello") is None
    True
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

SEPARATORS = " -_./:\\"

SCORE_MATCH = 16
BONUS_CONSECUTIVE = 12
BONUS_BOUNDARY = 10
PENALTY_GAP = 3
PENALTY_UNMATCHED = 1


@dataclass(frozen=True)
class FuzzyMatch:
    """Result of a fuzzy match."""

    score: int
    positions: tuple[int, ...]  # Matched character offsets for highlighting


@dataclass(frozen=True)
class Candidate:
    """An item in a filtered view.

    ``index`` is the item's position in the original sequence and is its
    identity; ``score`` and ``positions`` come from the current query.
    """

    index: int
    text: str
    score: int = 0
    positions: tuple[int, ...] = ()


def _is_word_start(text: str, i: int) -> bool:
    if i == 0:
        return True
    prev = text[i - 1]
    return prev in SEPARATORS or (prev.islower() and text[i].isupper())


def _fold(text: str, case_sensitive: bool) -> list[str]:
    # Per character, so offsets stay aligned when lower() changes length (e.g. "İ")
    return list(text) if case_sensitive else [char.lower() for char in text]


def _find(haystack: list[str], char: str, start: int) -> int:
    for i in range(start, len(haystack)):
        if haystack[i] == char:
            return i
    return -1


def _align(query: list[str], haystack: list[str], start: int) -> list[int] | None:
    """Greedily place query characters from ``start`` onwards."""
    positions = [start]
    cursor = start + 1
    for char in query[1:]:
        found = _find(haystack, char, cursor)
        if found == -1:
            return None
        positions.append(found)
        cursor = found + 1
    return positions


def _score_positions(text: str, positions: Sequence[int]) -> int:
    total = SCORE_MATCH * len(positions)
    previous = -1
    for i in positions:
        if previous >= 0:
            if i == previous + 1:
                total += BONUS_CONSECUTIVE
            else:
                total -= PENALTY_GAP * (i - previous - 1)
        if _is_word_start(text, i):
            total += BONUS_BOUNDARY
        previous = i
    total -= PENALTY_UNMATCHED * (len(text) - len(positions))
    return total


def score(query: str, text: str, case_sensitive: bool = False) -> FuzzyMatch | None:
    """Match ``query`` against ``text``.

    Returns the best-scoring alignment, or None when ``query`` is not a
    subsequence of ``text``. Every occurrence of the first query character
    is tried as a starting point. An empty query matches with score 0.
    """
    if not query:
        return FuzzyMatch(score=0, positions=())
    if len(query) > len(text):
        return None

    needle = _fold(query, case_sensitive)
    haystack = _fold(text, case_sensitive)

    best: FuzzyMatch | None = None
    start = _find(haystack, needle[0], 0)
    while start != -1:
        positions = _align(needle, haystack, start)
        if positions is None:
            # Later starts only have less text left to match against
            break
        total = _score_positions(text, positions)
        if best is None or total > best.score:
            best = FuzzyMatch(score=total, positions=tuple(positions))
        start = _find(haystack, needle[0], start + 1)
    return best


def filter_view(
    query: str,
    items: Sequence[str],
    case_sensitive: bool = False,
) -> list[Candidate]:
    """Score every item and return the matches, best first.

    Ties keep the original item order. The whole list is re-scored on each
    call.
    """
    view: list[Candidate] = []
    for index, text in enumerate(items):
        match = score(query, text, case_sensitive=case_sensitive)
        if match is not None:
            view.append(Candidate(index, text, match.score, match.positions))
    view.sort(key=lambda candidate: (-candidate.score, candidate.index))
    return view
