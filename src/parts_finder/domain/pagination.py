from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Generic, Sequence, TypeVar

PAGE_SIZE = 30

# Pages shown on each side of the current page in the navigation window.
WINDOW_RADIUS = 2

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class PageWindow:
    """
    Page numbers offered for direct navigation around the current page.

    The boundary flags mirror what a paginated table renders:
    - show_first / show_last: a jump-to-boundary link to page 1 / the last page
    - leading_ellipsis / trailing_ellipsis: the window edge is more than one
      page away from the boundary, so a gap marker goes before the link
    - has_previous / has_next: the previous / next controls
    """

    pages: list[int]
    current_page: int
    total_pages: int
    show_first: bool
    leading_ellipsis: bool
    show_last: bool
    trailing_ellipsis: bool
    has_previous: bool
    has_next: bool


class ResultPaginator(Generic[T]):
    """
    Client-side pagination over a fetched result sequence.

    Holds only the source sequence and the current page; pages and windows
    are recomputed on every call. Out-of-range navigation is clamped, never
    reported.
    """

    def __init__(self, page_size: int = PAGE_SIZE) -> None:
        if page_size <= 0:
            raise ValueError("page_size must be > 0")
        self._page_size = page_size
        self._items: Sequence[T] = ()
        self._current_page = 1

    @property
    def page_size(self) -> int:
        return self._page_size

    @property
    def current_page(self) -> int:
        return self._current_page

    @property
    def total_count(self) -> int:
        return len(self._items)

    @property
    def controls_visible(self) -> bool:
        """Navigation is suppressed entirely when everything fits on one page."""
        return len(self._items) > self._page_size

    def set_results(self, items: Sequence[T]) -> None:
        self._items = items
        self._current_page = 1

    def total_pages(self) -> int:
        return max(1, math.ceil(len(self._items) / self._page_size))

    def page(self) -> list[T]:
        start = (self._current_page - 1) * self._page_size
        return list(self._items[start : start + self._page_size])

    def go_to(self, page: int) -> int:
        self._current_page = min(max(page, 1), self.total_pages())
        return self._current_page

    def next(self) -> int:
        return self.go_to(self._current_page + 1)

    def prev(self) -> int:
        return self.go_to(self._current_page - 1)

    def window(self) -> PageWindow:
        total = self.total_pages()
        current = self._current_page
        start = max(1, current - WINDOW_RADIUS)
        end = min(total, current + WINDOW_RADIUS)

        return PageWindow(
            pages=list(range(start, end + 1)),
            current_page=current,
            total_pages=total,
            show_first=start > 1,
            leading_ellipsis=start > 2,
            show_last=end < total,
            trailing_ellipsis=end < total - 1,
            has_previous=current != 1,
            has_next=current != total,
        )
