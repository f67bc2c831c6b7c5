"""Application pagination – paginate() and PageWindow."""
from __future__ import annotations

import dataclasses
import math


@dataclasses.dataclass(frozen=True, slots=True)
class PageWindow:
    """Clamped page position within a result set."""

    page: int
    total_pages: int

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages

    @property
    def has_previous(self) -> bool:
        return self.page > 1

    @property
    def offset_page(self) -> int:
        """Zero-based page index, handy for slicing."""
        return self.page - 1


def total_pages_for(total: int, limit: int) -> int:
    """Number of pages needed for *total* items; never less than one."""
    if limit < 1:
        raise ValueError("limit must be >= 1")
    if total < 0:
        raise ValueError("total must be >= 0")
    return max(1, math.ceil(total / limit))


def paginate(total: int, limit: int, requested_page: int) -> PageWindow:
    """Clamp *requested_page* into ``[1, total_pages]``.

    ``paginate(0, 12, 5)`` is ``PageWindow(page=1, total_pages=1)``: an empty
    result still has exactly one (empty) page.
    """
    total_pages = total_pages_for(total, limit)
    return PageWindow(page=min(max(requested_page, 1), total_pages), total_pages=total_pages)


__all__ = ["PageWindow", "paginate", "total_pages_for"]
