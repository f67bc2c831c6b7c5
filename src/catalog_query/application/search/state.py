"""Application search – QueryStateStore, tagged actions and the reducer.

The store owns the canonical :class:`SearchQuery` of one listing and keeps it
in step with the navigable address state in both directions:

* local changes (:meth:`QueryStateStore.write` / :meth:`~QueryStateStore.dispatch`)
  *replace* the address so typing never grows back/forward history;
* external navigation (``AddressState.on_change``) is parsed back into the
  store without being written out again.
"""
from __future__ import annotations

import dataclasses
import logging
from enum import Enum
from typing import Any, Callable, Protocol, runtime_checkable

from catalog_query.application.search.query import QueryCodec, SearchQuery, ViewMode

__all__ = [
    "Action",
    "ActionType",
    "AddressState",
    "QueryListener",
    "QueryStateStore",
    "reduce",
    "replace_query",
    "set_facet",
    "set_page",
    "set_text",
    "set_view",
]

logger = logging.getLogger(__name__)

QueryListener = Callable[[SearchQuery, SearchQuery], None]


@runtime_checkable
class AddressState(Protocol):
    """Port: the host's navigable address bar (query-string part only).

    ``replace`` rewrites the current entry without adding a history entry and
    must not notify ``on_change`` listeners; those fire only for navigation
    the store did not cause (back/forward, pasted links).
    """

    def read(self) -> str: ...
    def replace(self, raw: str) -> None: ...
    def on_change(self, listener: Callable[[str], None]) -> Callable[[], None]: ...


class ActionType(str, Enum):
    SET_TEXT = "SET_TEXT"
    SET_FACET = "SET_FACET"
    SET_PAGE = "SET_PAGE"
    SET_VIEW = "SET_VIEW"
    REPLACE = "REPLACE"


@dataclasses.dataclass(frozen=True)
class Action:
    type: ActionType
    value: Any = None


def set_text(text: str) -> Action:
    return Action(ActionType.SET_TEXT, text)


def set_facet(facet: str | None) -> Action:
    return Action(ActionType.SET_FACET, facet)


def set_page(page: int) -> Action:
    return Action(ActionType.SET_PAGE, page)


def set_view(view_mode: ViewMode | str) -> Action:
    return Action(ActionType.SET_VIEW, view_mode)


def replace_query(query: SearchQuery) -> Action:
    return Action(ActionType.REPLACE, query)


def reduce(query: SearchQuery, action: Action) -> SearchQuery:
    """Pure transition: a changed text or facet restarts paging at page one."""
    match action.type:
        case ActionType.SET_TEXT:
            if (action.value or "") == query.text:
                return query
            return query.merge(text=action.value, page=1)
        case ActionType.SET_FACET:
            if (action.value or None) == query.facet:
                return query
            return query.merge(facet=action.value, page=1)
        case ActionType.SET_PAGE:
            return query.merge(page=action.value)
        case ActionType.SET_VIEW:
            return query.merge(view_mode=action.value)
        case ActionType.REPLACE:
            if not isinstance(action.value, SearchQuery):
                raise TypeError("REPLACE expects a SearchQuery")
            return action.value
    raise ValueError(f"Unknown action type: {action.type!r}")


class QueryStateStore:
    """Holds the current query and mirrors it into the address state."""

    def __init__(self, address: AddressState, *, codec: QueryCodec | None = None) -> None:
        self._address = address
        self._codec = codec or QueryCodec()
        self._listeners: list[QueryListener] = []
        self._navigation_listeners: list[Callable[[SearchQuery], None]] = []
        raw = address.read()
        self._query = self._codec.parse(raw)
        self._sync_address(raw)
        self._detach: Callable[[], None] | None = address.on_change(self._on_navigate)

    @property
    def codec(self) -> QueryCodec:
        return self._codec

    def read(self) -> SearchQuery:
        return self._query

    def write(self, **partial: Any) -> SearchQuery:
        """Merge *partial* fields into the current query."""
        return self._commit(self._query.merge(**partial))

    def dispatch(self, action: Action) -> SearchQuery:
        return self._commit(reduce(self._query, action))

    def parse(self, raw: str | None) -> SearchQuery:
        return self._codec.parse(raw)

    def serialize(self, query: SearchQuery | None = None) -> str:
        return self._codec.serialize(self._query if query is None else query)

    def subscribe(self, listener: QueryListener) -> Callable[[], None]:
        """Register ``listener(new, old)``; returns an unsubscribe callable."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def on_navigate(self, listener: Callable[[SearchQuery], None]) -> Callable[[], None]:
        """Register ``listener(query)`` for navigation the store did not cause.

        Fires before the navigated query is committed and before ``subscribe``
        listeners see it, even when the query is unchanged.
        """
        self._navigation_listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._navigation_listeners:
                self._navigation_listeners.remove(listener)

        return unsubscribe

    def close(self) -> None:
        if self._detach is not None:
            self._detach()
            self._detach = None
        self._listeners.clear()
        self._navigation_listeners.clear()

    def _on_navigate(self, raw: str) -> None:
        query = self._codec.parse(raw)
        logger.debug("query_state.navigated raw=%r", raw)
        self._sync_address(raw, query)
        for listener in list(self._navigation_listeners):
            listener(query)
        self._commit(query, write_address=False)

    def _commit(self, query: SearchQuery, *, write_address: bool = True) -> SearchQuery:
        if query == self._query:
            return query
        old, self._query = self._query, query
        if write_address:
            self._sync_address(self._address.read())
        for listener in list(self._listeners):
            listener(query, old)
        return query

    def _sync_address(self, current_raw: str, query: SearchQuery | None = None) -> None:
        canonical = self._codec.serialize(self._query if query is None else query)
        if (current_raw or "").lstrip("?") != canonical:
            self._address.replace(canonical)
