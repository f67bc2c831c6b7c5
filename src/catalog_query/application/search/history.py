"""Application search – persisted recent-search history.

Ordering is most-recent-first: index 0 is the latest term recorded. A term
that is already present is left where it is (recording is a no-op), so the
list reflects first occurrence within the retained window.
"""
from __future__ import annotations

import json
import logging
from enum import Enum
from typing import Protocol, runtime_checkable

from catalog_query.kernel.errors import MalformedPersistedHistory

__all__ = [
    "DEFAULT_HISTORY_CAPACITY",
    "HistoryNamespace",
    "InMemoryKeyValueStore",
    "KeyValueStore",
    "NamespacedHistory",
    "SearchHistoryStore",
]

logger = logging.getLogger(__name__)

DEFAULT_HISTORY_CAPACITY = 5


class HistoryNamespace(str, Enum):
    """Listing types that keep independent search history."""

    DATA_CONCEPTS = "dataConcepts"
    DATA_DOMAINS = "dataDomains"
    DATA_CATEGORIES = "dataCategories"
    SUBJECT_CATEGORIES = "subjectCategories"
    LINE_OF_BUSINESS = "lineOfBusiness"
    KPIS = "kpis"


@runtime_checkable
class KeyValueStore(Protocol):
    """Port: synchronous string key-value persistence."""

    def get(self, key: str) -> str | None: ...
    def set(self, key: str, value: str) -> None: ...


class InMemoryKeyValueStore:
    """Process-local store; the default when nothing durable is wired in."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def keys(self) -> list[str]:
        return list(self._data)


class SearchHistoryStore:
    """Bounded, deduplicated, persisted search terms per listing namespace."""

    def __init__(
        self,
        store: KeyValueStore | None = None,
        *,
        capacity: int = DEFAULT_HISTORY_CAPACITY,
        key_prefix: str = "searchHistory",
    ) -> None:
        if capacity < 1:
            raise ValueError("capacity must be >= 1")
        self._store: KeyValueStore = store if store is not None else InMemoryKeyValueStore()
        self._capacity = capacity
        self._key_prefix = key_prefix

    @property
    def capacity(self) -> int:
        return self._capacity

    def key_for(self, namespace: str) -> str:
        return f"{self._key_prefix}:{_namespace(namespace)}"

    def bind(self, namespace: str) -> "NamespacedHistory":
        return NamespacedHistory(self, _namespace(namespace))

    def load(self, namespace: str) -> list[str]:
        key = self.key_for(namespace)
        raw = self._store.get(key)
        if raw is None:
            return []
        try:
            return self._decode(key, raw)
        except MalformedPersistedHistory as exc:
            logger.debug("history.payload_discarded key=%s reason=%s", key, exc.reason)
            return []

    def record(self, namespace: str, term: str) -> list[str]:
        """Prepend *term* unless it is blank or already present."""
        entries = self.load(namespace)
        if not term or not term.strip() or term in entries:
            return entries
        entries = [term, *entries][: self._capacity]
        self._save(namespace, entries)
        return entries

    def remove(self, namespace: str, term: str) -> list[str]:
        entries = self.load(namespace)
        if term not in entries:
            return entries
        entries = [e for e in entries if e != term]
        self._save(namespace, entries)
        return entries

    def clear(self, namespace: str) -> None:
        self._save(namespace, [])

    def _save(self, namespace: str, entries: list[str]) -> None:
        self._store.set(self.key_for(namespace), json.dumps(entries, ensure_ascii=False))

    def _decode(self, key: str, raw: str) -> list[str]:
        try:
            payload = json.loads(raw)
        except (TypeError, ValueError) as exc:
            raise MalformedPersistedHistory(key, "not valid JSON", cause=exc) from exc
        if not isinstance(payload, list):
            raise MalformedPersistedHistory(key, f"expected a list, got {type(payload).__name__}")
        if not all(isinstance(entry, str) for entry in payload):
            raise MalformedPersistedHistory(key, "entries must be strings")
        # payloads written by older clients may repeat terms or exceed the bound
        entries: list[str] = []
        for entry in payload:
            if entry and entry not in entries:
                entries.append(entry)
        return entries[: self._capacity]


class NamespacedHistory:
    """A :class:`SearchHistoryStore` bound to one listing namespace."""

    def __init__(self, store: SearchHistoryStore, namespace: str) -> None:
        self._store = store
        self.namespace = namespace

    def load(self) -> list[str]:
        return self._store.load(self.namespace)

    def record(self, term: str) -> list[str]:
        return self._store.record(self.namespace, term)

    def remove(self, term: str) -> list[str]:
        return self._store.remove(self.namespace, term)

    def clear(self) -> None:
        self._store.clear(self.namespace)


def _namespace(namespace: str) -> str:
    if isinstance(namespace, HistoryNamespace):
        return namespace.value
    if not namespace:
        raise ValueError("namespace must not be empty")
    return namespace
