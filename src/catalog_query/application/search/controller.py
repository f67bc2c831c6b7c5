"""Application search – ListingController.

Wires the pieces of a browse page together::

    keystrokes ─▶ Debouncer ─▶ QueryStateStore ─▶ fetch (tagged) ─▶ paginate ─▶ ListingView
                      │                                                  │
                      └──▶ SearchHistoryStore          page correction ◀─┘

Every fetch is tagged with a generation number taken when it starts. A
response is applied only while its generation is still the latest one, so an
older query resolving after a newer one is discarded (last settled query
wins). Superseded requests are not aborted, only ignored.
"""
from __future__ import annotations

import asyncio
import dataclasses
from typing import Any, Callable, Generic, TypeVar

from catalog_query.application.pagination import ResultPage, paginate
from catalog_query.application.search.debounce import Debouncer
from catalog_query.application.search.filter import FilterEngine
from catalog_query.application.search.history import (
    KeyValueStore,
    NamespacedHistory,
    SearchHistoryStore,
)
from catalog_query.application.search.lifecycle import Phase, QueryLifecycle
from catalog_query.application.search.query import SearchQuery, ViewMode
from catalog_query.application.search.source import (
    FacetSource,
    Listing,
    ListParams,
    PagedDataSource,
)
from catalog_query.application.search.state import (
    QueryStateStore,
    set_facet,
    set_page,
    set_text,
    set_view,
)
from catalog_query.config.settings import ListingSettings
from catalog_query.kernel.errors import FetchFailure
from catalog_query.kernel.time import Scheduler
from catalog_query.observability.logging import get_logger

T = TypeVar("T")

__all__ = ["DEFAULT_ERROR_MESSAGE", "ListingController", "ListingView"]

DEFAULT_ERROR_MESSAGE = "Failed to load results. Please try again later."


@dataclasses.dataclass(frozen=True)
class ListingView(Generic[T]):
    """Everything a page needs to render its listing.

    ``page`` is the page actually shown and ``query.page`` the one requested.
    Once a fetch is displayed they agree unless ``error`` is set: a failed
    fetch shows an empty first page but keeps the requested page in the query
    (and the address), so a retry asks for the same page again.
    """

    query: SearchQuery
    result: ResultPage[T]
    phase: Phase = Phase.IDLE
    loading: bool = False
    error: str | None = None
    facets: tuple[str, ...] = ()
    history: tuple[str, ...] = ()

    @property
    def items(self) -> list[T]:
        return self.result.items

    @property
    def total(self) -> int:
        return self.result.total

    @property
    def page(self) -> int:
        return self.result.page

    @property
    def total_pages(self) -> int:
        return self.result.total_pages

    @property
    def limit(self) -> int:
        return self.result.limit

    @property
    def view_mode(self) -> ViewMode:
        return self.query.view_mode


class ListingController(Generic[T]):
    """Drives one listing page: input, query state, fetches and history.

    Must be used from inside a running event loop; fetches are scheduled as
    tasks on it. Nothing raised by the data sources or the history store
    escapes: failures become ``ListingView.error``.
    """

    def __init__(
        self,
        *,
        state: QueryStateStore,
        source: PagedDataSource[T],
        history: NamespacedHistory | None = None,
        facet_source: FacetSource | None = None,
        limit: int = 12,
        debounce_ms: int = 500,
        sort: str | None = None,
        scheduler: Scheduler | None = None,
        facet_field: str = "category",
        key_fn: Callable[[T], dict[str, Any]] | None = None,
        error_message: str = DEFAULT_ERROR_MESSAGE,
    ) -> None:
        if limit < 1:
            raise ValueError("limit must be >= 1")
        self._state = state
        self._source = source
        self._history = history
        self._facet_source = facet_source
        self._limit = limit
        self._sort = sort
        self._error_message = error_message
        self._facet_engine: FilterEngine[T] = FilterEngine(facet_field=facet_field, key_fn=key_fn)
        self._log = get_logger(__name__, listing=history.namespace if history else None)

        self._lifecycle = QueryLifecycle()
        self._generation = 0
        self._tasks: set[asyncio.Task[None]] = set()
        self._remote_facets: tuple[str, ...] = ()
        self._view_listeners: list[Callable[[ListingView[T]], None]] = []
        self._closed = False

        query = state.read()
        self._debouncer: Debouncer[str] = Debouncer(
            debounce_ms, self._on_settle, scheduler=scheduler, initial=query.text
        )
        self._view: ListingView[T] = ListingView(
            query=query,
            result=ResultPage(items=[], total=0, page=1, limit=limit),
            history=tuple(self._load_history()),
        )
        self._unsubscribe = state.subscribe(self._on_query_change)
        self._unsubscribe_navigation = state.on_navigate(self._on_navigate)

    @classmethod
    def from_settings(
        cls,
        settings: ListingSettings,
        *,
        state: QueryStateStore,
        source: PagedDataSource[T],
        namespace: str | None = None,
        store: KeyValueStore | None = None,
        **kwargs: Any,
    ) -> "ListingController[T]":
        history = None
        if namespace is not None:
            history = SearchHistoryStore(
                store,
                capacity=settings.history_capacity,
                key_prefix=settings.history_key_prefix,
            ).bind(namespace)
        kwargs.setdefault("sort", settings.default_sort)
        kwargs.setdefault("limit", settings.page_limit)
        kwargs.setdefault("debounce_ms", settings.debounce_ms)
        return cls(state=state, source=source, history=history, **kwargs)

    # ------------------------------------------------------------------
    # Read side
    # ------------------------------------------------------------------

    @property
    def view(self) -> ListingView[T]:
        return self._view

    @property
    def phase(self) -> Phase:
        return self._lifecycle.phase

    @property
    def query(self) -> SearchQuery:
        return self._state.read()

    @property
    def in_flight(self) -> int:
        return len(self._tasks)

    def subscribe(self, listener: Callable[[ListingView[T]], None]) -> Callable[[], None]:
        """Register a render callback; returns an unsubscribe callable."""
        self._view_listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._view_listeners:
                self._view_listeners.remove(listener)

        return unsubscribe

    # ------------------------------------------------------------------
    # User interactions
    # ------------------------------------------------------------------

    def type_text(self, raw: str) -> None:
        """Feed one keystroke's worth of search-box content."""
        if self._closed:
            return
        self._lifecycle.advance(Phase.EDITING)
        self._debouncer.observe(raw)
        self._publish(phase=Phase.EDITING)

    def submit_text(self) -> None:
        """Settle the pending search text now (e.g. on Enter)."""
        if not self._closed:
            self._debouncer.flush()

    def clear_text(self) -> None:
        """The search box's clear button: settles an empty text immediately."""
        self.type_text("")
        self.submit_text()

    def select_history(self, term: str) -> None:
        """Re-run a recent search."""
        self.type_text(term)
        self.submit_text()

    def remove_history(self, term: str) -> tuple[str, ...]:
        if self._history is not None:
            entries = self._guard_history(lambda h: h.remove(term))
            if entries is not None:
                self._publish(history=tuple(entries))
        return self._view.history

    def select_facet(self, facet: str | None) -> None:
        if not self._closed:
            self._state.dispatch(set_facet(facet))

    def go_to_page(self, page: int) -> None:
        if not self._closed:
            self._state.dispatch(set_page(page))

    def set_view_mode(self, view_mode: ViewMode | str) -> None:
        if not self._closed:
            self._state.dispatch(set_view(view_mode))

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    async def start(self) -> ListingView[T]:
        """Initial load on mount: results for the address query plus facets."""
        self._start_fetch(self._state.read())
        await self.load_facets()
        await self.wait_idle()
        return self._view

    async def refresh(self) -> ListingView[T]:
        self._start_fetch(self._state.read())
        await self.wait_idle()
        return self._view

    async def load_facets(self) -> tuple[str, ...]:
        """Fetch the distinct facet values; fall back to the loaded page's values."""
        if self._facet_source is not None:
            try:
                values = await self._facet_source.list_facet_values()
            except Exception as exc:  # noqa: BLE001 – non-fatal, derived facets are used
                self._log.warning("listing.facets_failed", error=repr(exc))
                values = []
            self._remote_facets = tuple(v for v in values if v)
        self._publish(facets=self._facets_for(self._view.items))
        return self._view.facets

    async def wait_idle(self) -> None:
        """Wait until no fetch is in flight, including page-correction re-fetches."""
        while self._tasks:
            await asyncio.gather(*list(self._tasks), return_exceptions=True)

    def close(self) -> None:
        """Unmount: no timer fires and no response is applied afterwards."""
        if self._closed:
            return
        self._closed = True
        self._debouncer.close()
        self._unsubscribe()
        self._unsubscribe_navigation()
        self._generation += 1
        for task in list(self._tasks):
            task.cancel()
        self._lifecycle.reset()
        self._view_listeners.clear()

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _on_settle(self, text: str) -> None:
        self._lifecycle.advance(Phase.SETTLED)
        if text.strip():
            entries = self._guard_history(lambda h: h.record(text))
            if entries is not None:
                self._publish(history=tuple(entries))
        self._state.dispatch(set_text(text))
        if self._lifecycle.phase is Phase.SETTLED:
            # nothing changed, so no fetch was started
            self._lifecycle.advance(Phase.FETCHING if self._tasks else Phase.IDLE)
            self._publish(phase=self._lifecycle.phase)

    def _on_navigate(self, query: SearchQuery) -> None:
        # an unsettled keystroke belongs to the entry being left
        if self._debouncer.pending:
            self._log.debug("listing.pending_text_dropped", query=query.fetch_key)
        self._debouncer.reset(query.text)
        if self._lifecycle.phase is Phase.EDITING:
            self._lifecycle.advance(Phase.FETCHING if self._tasks else Phase.IDLE)
            self._publish(phase=self._lifecycle.phase)

    def _on_query_change(self, new: SearchQuery, old: SearchQuery) -> None:
        if new.fetch_key != old.fetch_key:
            self._start_fetch(new)
        else:
            self._publish(query=new)

    def _start_fetch(self, query: SearchQuery) -> None:
        self._generation += 1
        generation = self._generation
        if self._lifecycle.phase is not Phase.EDITING:
            self._lifecycle.advance(Phase.FETCHING)
        self._publish(query=query, loading=True, phase=self._lifecycle.phase)
        self._log.debug("listing.fetch_started", generation=generation, query=query.fetch_key)
        task = asyncio.get_running_loop().create_task(self._fetch(generation, query))
        self._tasks.add(task)
        task.add_done_callback(self._task_done)

    def _task_done(self, task: asyncio.Task[None]) -> None:
        self._tasks.discard(task)
        if not task.cancelled() and task.exception() is not None:
            self._log.error("listing.task_failed", error=repr(task.exception()))

    async def _fetch(self, generation: int, query: SearchQuery) -> None:
        params = ListParams.for_query(query, limit=self._limit, sort=self._sort)
        listing: Listing[T] | None = None
        failure: FetchFailure | None = None
        try:
            listing = await self._source.list(params)
        except FetchFailure as exc:
            failure = exc
        except Exception as exc:  # noqa: BLE001 – mapped to an error view
            failure = FetchFailure(self._error_message, cause=exc)

        if generation != self._generation:
            self._log.debug("listing.stale_discarded", generation=generation, latest=self._generation)
            return
        if failure is not None:
            self._log.warning(
                "listing.fetch_failed",
                query=query.fetch_key,
                error_code=failure.code,
                error=repr(failure.cause or failure),
            )
            self._display([], 0, error=failure.user_message)
            return

        assert listing is not None
        try:
            total = max(0, int(listing.total))
            window = paginate(total, self._limit, query.page)
            if window.page != query.page:
                self._log.info("listing.page_corrected", requested=query.page, page=window.page, total=total)
                self._state.write(page=window.page)
                return
            self._display(list(listing.items), total)
        except Exception as exc:  # noqa: BLE001 – mapped to an error view
            self._log.error("listing.display_failed", query=query.fetch_key, error=repr(exc))
            self._display([], 0, error=self._error_message)

    def _display(self, items: list[T], total: int, *, error: str | None = None) -> None:
        query = self._state.read()
        window = paginate(total, self._limit, query.page)
        facets = self._facets_for(items)
        if self._lifecycle.phase is Phase.FETCHING:
            self._lifecycle.advance(Phase.DISPLAYED)
        self._publish(
            query=query,
            result=ResultPage(items=items, total=total, page=window.page, limit=self._limit),
            loading=False,
            error=error,
            facets=facets,
            phase=self._lifecycle.phase,
        )

    def _facets_for(self, items: list[T]) -> tuple[str, ...]:
        if self._remote_facets:
            return self._remote_facets
        try:
            return tuple(self._facet_engine.facet_values(items))
        except Exception as exc:  # noqa: BLE001 – facets are optional
            self._log.warning("listing.facets_underivable", error=repr(exc))
            return ()

    def _load_history(self) -> list[str]:
        if self._history is None:
            return []
        return self._guard_history(lambda h: h.load()) or []

    def _guard_history(self, op: Callable[[NamespacedHistory], list[str]]) -> list[str] | None:
        # persistence failures must not break the listing; history is best effort
        assert self._history is not None
        try:
            return op(self._history)
        except Exception as exc:  # noqa: BLE001
            self._log.warning("listing.history_unavailable", error=repr(exc))
            return None

    def _publish(self, **changes: Any) -> None:
        self._view = dataclasses.replace(self._view, **changes)
        for listener in list(self._view_listeners):
            listener(self._view)
