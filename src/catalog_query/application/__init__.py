"""Application – listing query state, pagination and filtering (framework-agnostic)."""

from catalog_query.application.pagination import PageWindow, ResultPage, paginate
from catalog_query.application.search import (
    Debouncer,
    FilterEngine,
    HistoryNamespace,
    InMemoryDataSource,
    ListingController,
    ListingView,
    QueryCodec,
    QueryStateStore,
    SearchHistoryStore,
    SearchQuery,
    ViewMode,
)

__all__ = [
    "Debouncer",
    "FilterEngine",
    "HistoryNamespace",
    "InMemoryDataSource",
    "ListingController",
    "ListingView",
    "PageWindow",
    "QueryCodec",
    "QueryStateStore",
    "ResultPage",
    "SearchHistoryStore",
    "SearchQuery",
    "ViewMode",
    "paginate",
]
