"""Input history for text prompts.

Anything with ``append(text)`` and ``entries()`` can back an Input prompt's
history. ``BasicHistory`` keeps entries in memory for the life of the
process; persisting them is left to the caller.
"""

from __future__ import annotations

from typing import Protocol


class History(Protocol):
    """Store of previously submitted inputs, oldest first."""

    def append(self, text: str) -> None: ...

    def entries(self) -> list[str]: ...


class BasicHistory:
    """In-memory history.

    Args:
        max_entries: Oldest entries are dropped beyond this many (None = unbounded).
        deduplicate: Drop an earlier copy when the same text is appended again.
    """

    def __init__(self, max_entries: int | None = None, deduplicate: bool = True):
        if max_entries is not None and max_entries < 1:
            raise ValueError("max_entries must be positive")
        self.max_entries = max_entries
        self.deduplicate = deduplicate
        self._entries: list[str] = []

    def append(self, text: str) -> None:
        if self.deduplicate and text in self._entries:
            self._entries.remove(text)
        self._entries.append(text)
        if self.max_entries is not None and len(self._entries) > self.max_entries:
            del self._entries[: len(self._entries) - self.max_entries]

    def entries(self) -> list[str]:
        return list(self._entries)

    def __len__(self) -> int:
        return len(self._entries)
