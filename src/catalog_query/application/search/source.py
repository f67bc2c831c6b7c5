"""Application search – data-source ports and the in-memory implementation.

A listing page picks one :class:`PagedDataSource`: a remote paged endpoint
(:class:`~catalog_query.adapters.http.HttpPagedDataSource`) or
:class:`InMemoryDataSource` over a static / sample set. The controller never
branches on which one it was given.
"""
from __future__ import annotations

import dataclasses
from typing import Any, Callable, Generic, Protocol, Sequence, TypeVar, runtime_checkable

from catalog_query.application.search.filter import FilterEngine, record_view
from catalog_query.application.search.query import SearchQuery
from catalog_query.kernel.errors import ValidationError

T = TypeVar("T")

__all__ = ["FacetSource", "InMemoryDataSource", "ListParams", "Listing", "PagedDataSource"]


@dataclasses.dataclass(frozen=True)
class ListParams:
    """Request for one page of a listing."""

    page: int
    limit: int
    q: str | None = None
    facet: str | None = None
    sort: str | None = None

    def __post_init__(self) -> None:
        ValidationError.check(
            "Invalid list parameters",
            page=None if self.page >= 1 else "must be >= 1",
            limit=None if self.limit >= 1 else "must be >= 1",
        )

    @classmethod
    def for_query(cls, query: SearchQuery, *, limit: int, sort: str | None = None) -> "ListParams":
        return cls(page=query.page, limit=limit, q=query.text or None, facet=query.facet, sort=sort)

    def to_params(self, *, text_param: str = "q", facet_param: str = "facet") -> dict[str, str | int]:
        """Render as request parameters, leaving out absent ``q`` / facet / sort."""
        params: dict[str, str | int] = {"page": self.page, "limit": self.limit}
        if self.q:
            params[text_param] = self.q
        if self.facet:
            params[facet_param] = self.facet
        if self.sort:
            params["sort"] = self.sort
        return params


@dataclasses.dataclass
class Listing(Generic[T]):
    """Response of :meth:`PagedDataSource.list`."""

    items: list[T]
    total: int


@runtime_checkable
class PagedDataSource(Protocol[T]):
    async def list(self, params: ListParams) -> Listing[T]: ...


@runtime_checkable
class FacetSource(Protocol):
    async def list_facet_values(self) -> list[str]: ...


class InMemoryDataSource(Generic[T]):
    """Paged data source over a static record set.

    ``total`` is the filtered count. ``sort`` names a field, with a leading
    ``-`` for descending order; records missing the field sort last.
    """

    def __init__(
        self,
        items: Sequence[T],
        *,
        engine: FilterEngine[T] | None = None,
        key_fn: Callable[[T], dict[str, Any]] | None = None,
    ) -> None:
        self._items = list(items)
        self._key_fn: Callable[[T], dict[str, Any]] = key_fn or record_view
        self._engine: FilterEngine[T] = engine or FilterEngine(key_fn=self._key_fn)

    @property
    def engine(self) -> FilterEngine[T]:
        return self._engine

    async def list(self, params: ListParams) -> Listing[T]:
        query = SearchQuery(text=params.q or "", facet=params.facet or None)
        results = self._engine.filter(self._items, query)
        if params.sort:
            results = self._sorted(results, params.sort)
        start = (params.page - 1) * params.limit
        return Listing(items=results[start:start + params.limit], total=len(results))

    async def list_facet_values(self) -> list[str]:
        return self._engine.facet_values(self._items)

    def _sorted(self, results: list[T], sort: str) -> list[T]:
        descending = sort.startswith("-")
        field = sort.lstrip("-+")
        present = [r for r in results if self._key_fn(r).get(field) is not None]
        missing = [r for r in results if self._key_fn(r).get(field) is None]
        present.sort(key=lambda r: self._key_fn(r)[field], reverse=descending)
        return present + missing
