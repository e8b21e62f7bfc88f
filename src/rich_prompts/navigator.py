"""List navigation state shared by the list prompts.

``ListNavigator`` owns the candidate list and everything the user changes
while moving through it: the highlighted row, checked items (multi-select),
the item order (sort) and the fuzzy query (fuzzy select). It also keeps
the viewport, the slice of the current view that fits on screen.

Invariants:
- ``highlight`` is a valid position in ``view`` (None only if the view is empty).
- The highlighted row lies inside the viewport.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence

from .fuzzy import Candidate, filter_view


@dataclass
class Viewport:
    """The contiguous range of view rows currently drawn."""

    first_visible: int = 0
    page_size: int = 0

    @property
    def end(self) -> int:
        return self.first_visible + self.page_size


@dataclass(frozen=True)
class VisibleRow:
    """One drawn row: the candidate plus its highlight and check state."""

    candidate: Candidate
    position: int
    is_highlighted: bool
    is_checked: bool


class ListNavigator:
    """Highlight, check, reorder and filter state for a list of items.

    Args:
        items: Display texts. Their positions are the item identities.
        wrap: Whether moving past either end wraps around.
        highlight: Initial highlighted position (clamped into range).
        checked: Original indices checked initially.
        case_sensitive: Whether fuzzy queries match case.

    Raises:
        ValueError: If items is empty.
    """

    def __init__(
        self,
        items: Sequence[str],
        *,
        wrap: bool = True,
        highlight: int = 0,
        checked: Iterable[int] = (),
        case_sensitive: bool = False,
    ):
        if not items:
            raise ValueError("Navigator must have at least one item")

        self.items = [str(item) for item in items]
        self.wrap = wrap
        self.case_sensitive = case_sensitive
        self.order = list(range(len(self.items)))
        self.checked: set[int] = {i for i in checked if 0 <= i < len(self.items)}
        self.query = ""
        self._view = self._build_view()
        self._rows: int | None = None
        self.viewport = Viewport(0, len(self._view))
        self.highlight: int | None = max(0, min(highlight, len(self._view) - 1))

    # -- view --------------------------------------------------------------

    def _build_view(self) -> list[Candidate]:
        if self.query:
            return filter_view(self.query, self.items, case_sensitive=self.case_sensitive)
        return [Candidate(index, self.items[index]) for index in self.order]

    @property
    def view(self) -> list[Candidate]:
        return self._view

    @property
    def count(self) -> int:
        return len(self._view)

    @property
    def highlighted(self) -> Candidate | None:
        if self.highlight is None:
            return None
        return self._view[self.highlight]

    def set_query(self, query: str) -> None:
        """Re-filter the items and move the highlight to the top of the new view."""
        self.query = query
        self._view = self._build_view()
        self.highlight = 0 if self._view else None
        self.viewport.first_visible = 0
        self._fit_viewport()

    # -- viewport ----------------------------------------------------------

    def set_page_size(self, rows: int) -> None:
        """Fit the viewport into ``rows`` rows (item count if that is smaller)."""
        self._rows = max(1, rows)
        self._fit_viewport()

    def _fit_viewport(self) -> None:
        rows = self.count if self._rows is None else self._rows
        self.viewport.page_size = min(rows, self.count)
        self._reveal()

    def _clamp_viewport(self) -> None:
        max_first = max(0, self.count - self.viewport.page_size)
        self.viewport.first_visible = max(0, min(self.viewport.first_visible, max_first))

    def _reveal(self) -> None:
        """Scroll the minimum amount to bring the highlight into view."""
        vp = self.viewport
        if self.highlight is not None and vp.page_size > 0:
            if self.highlight < vp.first_visible:
                vp.first_visible = self.highlight
            elif self.highlight >= vp.end:
                vp.first_visible = self.highlight - vp.page_size + 1
        self._clamp_viewport()

    @property
    def paged(self) -> bool:
        return self.count > self.viewport.page_size

    @property
    def more_above(self) -> int:
        return self.viewport.first_visible

    @property
    def more_below(self) -> int:
        return max(0, self.count - self.viewport.end)

    def current_visible(self) -> list[VisibleRow]:
        """Rows inside the viewport, top to bottom."""
        vp = self.viewport
        rows = []
        for position in range(vp.first_visible, min(vp.end, self.count)):
            candidate = self._view[position]
            rows.append(
                VisibleRow(
                    candidate=candidate,
                    position=position,
                    is_highlighted=position == self.highlight,
                    is_checked=candidate.index in self.checked,
                )
            )
        return rows

    # -- highlight movement ------------------------------------------------

    def move_highlight(self, delta: int) -> None:
        """Move the highlight by ``delta`` rows, wrapping if enabled."""
        if self.highlight is None:
            return
        target = self.highlight + delta
        if self.wrap:
            target %= self.count
        else:
            target = max(0, min(target, self.count - 1))
        self.highlight = target
        self._reveal()

    def move_page(self, delta: int) -> None:
        """Jump ``delta`` pages; the last page wraps to the first."""
        if self.highlight is None or not self.paged:
            return
        size = self.viewport.page_size
        pages = -(-self.count // size)
        page = (self.highlight // size + delta) % pages
        self.highlight = page * size
        self.viewport.first_visible = self.highlight
        self._clamp_viewport()

    def move_to_first(self) -> None:
        if self.highlight is not None:
            self.highlight = 0
            self._reveal()

    def move_to_last(self) -> None:
        if self.highlight is not None:
            self.highlight = self.count - 1
            self._reveal()

    # -- checking (multi-select) -------------------------------------------

    def toggle_checked_at_highlight(self) -> None:
        candidate = self.highlighted
        if candidate is None:
            return
        if candidate.index in self.checked:
            self.checked.discard(candidate.index)
        else:
            self.checked.add(candidate.index)

    def toggle_all(self) -> None:
        """Check everything, or uncheck everything if all are checked already."""
        if len(self.checked) == len(self.items):
            self.checked.clear()
        else:
            self.checked = set(range(len(self.items)))

    def checked_indices(self) -> list[int]:
        return sorted(self.checked)

    # -- reordering (sort) -------------------------------------------------

    def move_item(self, delta: int) -> bool:
        """Swap the highlighted item with its neighbour ``delta`` rows away.

        The highlight follows the moved item. Does nothing at the list
        boundary (no wraparound) or while a query filters the view.

        Returns:
            True if the order changed.
        """
        if self.highlight is None or self.query:
            return False
        source = self.highlight
        target = source + delta
        if not 0 <= target < self.count:
            return False
        self.order[source], self.order[target] = self.order[target], self.order[source]
        self._view = self._build_view()
        self.highlight = target
        self._reveal()
        return True
