"""Application search – debounced, address-synced, race-safe listing queries."""
from catalog_query.application.search.controller import (
    DEFAULT_ERROR_MESSAGE,
    ListingController,
    ListingView,
)
from catalog_query.application.search.debounce import Debouncer
from catalog_query.application.search.filter import DEFAULT_TEXT_FIELDS, FilterEngine, record_view
from catalog_query.application.search.history import (
    DEFAULT_HISTORY_CAPACITY,
    HistoryNamespace,
    InMemoryKeyValueStore,
    KeyValueStore,
    NamespacedHistory,
    SearchHistoryStore,
)
from catalog_query.application.search.lifecycle import (
    InvalidTransitionError,
    Phase,
    PhaseChange,
    QueryLifecycle,
)
from catalog_query.application.search.query import QueryCodec, SearchQuery, ViewMode
from catalog_query.application.search.samples import (
    SAMPLE_CATEGORIES,
    SAMPLE_CONCEPTS,
    SAMPLE_DOMAINS,
    domain_record,
    sample_source,
)
from catalog_query.application.search.source import (
    FacetSource,
    InMemoryDataSource,
    Listing,
    ListParams,
    PagedDataSource,
)
from catalog_query.application.search.state import (
    Action,
    ActionType,
    AddressState,
    QueryStateStore,
    reduce,
    replace_query,
    set_facet,
    set_page,
    set_text,
    set_view,
)

__all__ = [
    "Action",
    "ActionType",
    "AddressState",
    "DEFAULT_ERROR_MESSAGE",
    "DEFAULT_HISTORY_CAPACITY",
    "DEFAULT_TEXT_FIELDS",
    "Debouncer",
    "FacetSource",
    "FilterEngine",
    "HistoryNamespace",
    "InMemoryDataSource",
    "InMemoryKeyValueStore",
    "InvalidTransitionError",
    "KeyValueStore",
    "ListParams",
    "Listing",
    "ListingController",
    "ListingView",
    "NamespacedHistory",
    "PagedDataSource",
    "Phase",
    "PhaseChange",
    "QueryCodec",
    "QueryLifecycle",
    "QueryStateStore",
    "SAMPLE_CATEGORIES",
    "SAMPLE_CONCEPTS",
    "SAMPLE_DOMAINS",
    "SearchHistoryStore",
    "SearchQuery",
    "ViewMode",
    "domain_record",
    "record_view",
    "reduce",
    "replace_query",
    "sample_source",
    "set_facet",
    "set_page",
    "set_text",
    "set_view",
]
