"""Application pagination – ResultPage."""
from __future__ import annotations

import dataclasses
from typing import Any, Callable, Generic, Sequence, TypeVar

from catalog_query.application.pagination.pager import PageWindow, paginate, total_pages_for

T = TypeVar("T")


@dataclasses.dataclass
class ResultPage(Generic[T]):
    """One page of a listing with computed navigation properties.

    ``limit`` is constant per listing; ``total`` is the size of the whole
    (filtered) result set, not of ``items``.
    """

    items: list[T]
    total: int
    page: int
    limit: int

    @property
    def total_pages(self) -> int:
        return total_pages_for(self.total, self.limit)

    @property
    def window(self) -> PageWindow:
        return paginate(self.total, self.limit, self.page)

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages

    @property
    def has_previous(self) -> bool:
        return self.page > 1

    def map(self, fn: Callable[[T], Any]) -> "ResultPage[Any]":
        """Return a new :class:`ResultPage` with each item transformed by *fn*."""
        return ResultPage(
            items=[fn(item) for item in self.items],
            total=self.total,
            page=self.page,
            limit=self.limit,
        )

    @classmethod
    def of(cls, all_items: Sequence[T], page: int, limit: int) -> "ResultPage[T]":
        """Build a :class:`ResultPage` by slicing *all_items*.

        The requested page is clamped first, so an out-of-range request
        yields the last page rather than an empty one.
        """
        window = paginate(len(all_items), limit, page)
        start = window.offset_page * limit
        return cls(
            items=list(all_items[start:start + limit]),
            total=len(all_items),
            page=window.page,
            limit=limit,
        )


__all__ = ["ResultPage"]
