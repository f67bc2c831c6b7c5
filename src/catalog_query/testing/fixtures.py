"""Testing fixtures – pytest fixtures for the listing fakes.

Enable in a ``conftest.py``::

    pytest_plugins = ["catalog_query.testing.fixtures"]
"""
from __future__ import annotations

import pytest

from catalog_query.application.search.history import SearchHistoryStore
from catalog_query.testing.fakes import (
    InMemoryAddressState,
    InMemoryKeyValueStore,
    ManualScheduler,
    ScriptedDataSource,
)


@pytest.fixture
def address_state() -> InMemoryAddressState:
    return InMemoryAddressState()


@pytest.fixture
def manual_scheduler() -> ManualScheduler:
    return ManualScheduler()


@pytest.fixture
def kv_store() -> InMemoryKeyValueStore:
    return InMemoryKeyValueStore()


@pytest.fixture
def history_store(kv_store: InMemoryKeyValueStore) -> SearchHistoryStore:
    return SearchHistoryStore(kv_store)


@pytest.fixture
def scripted_source() -> ScriptedDataSource:
    return ScriptedDataSource()


__all__ = ["address_state", "history_store", "kv_store", "manual_scheduler", "scripted_source"]
