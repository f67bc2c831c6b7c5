"""Unit tests for SearchHistoryStore."""
from __future__ import annotations

import json

import pytest
from hypothesis import given
from hypothesis import strategies as st

from catalog_query.application.search import (
    HistoryNamespace,
    InMemoryKeyValueStore,
    KeyValueStore,
    SearchHistoryStore,
)


class TestRecord:
    def test_most_recent_first(self, history_store: SearchHistoryStore) -> None:
        for term in ("customer", "order", "revenue"):
            history_store.record("dataConcepts", term)
        assert history_store.load("dataConcepts") == ["revenue", "order", "customer"]

    def test_evicts_oldest_beyond_capacity(self, history_store: SearchHistoryStore) -> None:
        for term in ("a", "b", "c", "d", "e", "f"):
            history_store.record("kpis", term)
        assert history_store.load("kpis") == ["f", "e", "d", "c", "b"]

    def test_duplicate_is_noop(self, history_store: SearchHistoryStore) -> None:
        history_store.record("kpis", "churn")
        history_store.record("kpis", "margin")
        assert history_store.record("kpis", "churn") == ["margin", "churn"]

    def test_duplicates_are_case_sensitive(self, history_store: SearchHistoryStore) -> None:
        history_store.record("kpis", "Churn")
        history_store.record("kpis", "churn")
        assert history_store.load("kpis") == ["churn", "Churn"]

    @pytest.mark.parametrize("term", ["", " ", "\t\n"])
    def test_blank_terms_not_recorded(self, history_store: SearchHistoryStore, term: str) -> None:
        assert history_store.record("kpis", term) == []
        assert history_store.load("kpis") == []

    def test_persists_json_under_namespace_key(
        self, history_store: SearchHistoryStore, kv_store: InMemoryKeyValueStore
    ) -> None:
        history_store.record(HistoryNamespace.DATA_DOMAINS, "sales")
        assert json.loads(kv_store.get("searchHistory:dataDomains")) == ["sales"]

    def test_namespaces_are_independent(self, history_store: SearchHistoryStore) -> None:
        history_store.record("dataConcepts", "customer")
        history_store.record("dataCategories", "finance")
        assert history_store.load("dataConcepts") == ["customer"]
        assert history_store.load("dataCategories") == ["finance"]

    def test_survives_new_store_instance(self, kv_store: InMemoryKeyValueStore) -> None:
        SearchHistoryStore(kv_store).record("kpis", "nps")
        assert SearchHistoryStore(kv_store).load("kpis") == ["nps"]

    @given(st.lists(st.text(min_size=1, max_size=4).filter(str.strip), max_size=30))
    def test_bounded_and_unique(self, terms: list[str]) -> None:
        store = SearchHistoryStore(capacity=5)
        for term in terms:
            entries = store.record("kpis", term)
            assert len(entries) <= 5
            assert len(set(entries)) == len(entries)


class TestLoad:
    def test_missing_key(self, history_store: SearchHistoryStore) -> None:
        assert history_store.load("kpis") == []

    @pytest.mark.parametrize("payload", ["not json", '{"a": 1}', '"text"', "[1, 2]", '["ok", null]'])
    def test_malformed_payload_yields_empty(self, payload: str) -> None:
        kv = InMemoryKeyValueStore({"searchHistory:kpis": payload})
        assert SearchHistoryStore(kv).load("kpis") == []

    def test_malformed_payload_is_overwritten_on_record(self) -> None:
        kv = InMemoryKeyValueStore({"searchHistory:kpis": "{broken"})
        store = SearchHistoryStore(kv)
        assert store.record("kpis", "nps") == ["nps"]
        assert json.loads(kv.get("searchHistory:kpis")) == ["nps"]

    def test_oversized_payload_truncated(self) -> None:
        kv = InMemoryKeyValueStore({"searchHistory:kpis": json.dumps(list("abcdefgh"))})
        assert SearchHistoryStore(kv).load("kpis") == ["a", "b", "c", "d", "e"]

    def test_duplicated_and_empty_entries_dropped(self) -> None:
        kv = InMemoryKeyValueStore({"searchHistory:kpis": json.dumps(["a", "", "a", "b"])})
        assert SearchHistoryStore(kv).load("kpis") == ["a", "b"]


class TestRemoveAndClear:
    def test_remove(self, history_store: SearchHistoryStore) -> None:
        for term in ("a", "b", "c"):
            history_store.record("kpis", term)
        assert history_store.remove("kpis", "b") == ["c", "a"]
        assert history_store.load("kpis") == ["c", "a"]

    def test_remove_absent_term(self, history_store: SearchHistoryStore) -> None:
        history_store.record("kpis", "a")
        assert history_store.remove("kpis", "zzz") == ["a"]

    def test_clear(self, history_store: SearchHistoryStore) -> None:
        history_store.record("kpis", "a")
        history_store.clear("kpis")
        assert history_store.load("kpis") == []


class TestConfiguration:
    def test_custom_capacity_and_prefix(self) -> None:
        kv = InMemoryKeyValueStore()
        store = SearchHistoryStore(kv, capacity=2, key_prefix="recent")
        for term in ("a", "b", "c"):
            store.record("kpis", term)
        assert kv.keys() == ["recent:kpis"]
        assert store.load("kpis") == ["c", "b"]

    def test_invalid_capacity(self) -> None:
        with pytest.raises(ValueError):
            SearchHistoryStore(capacity=0)

    def test_empty_namespace_rejected(self, history_store: SearchHistoryStore) -> None:
        with pytest.raises(ValueError):
            history_store.load("")

    def test_key_for_enum_namespace(self, history_store: SearchHistoryStore) -> None:
        assert history_store.key_for(HistoryNamespace.LINE_OF_BUSINESS) == "searchHistory:lineOfBusiness"

    def test_in_memory_store_satisfies_port(self) -> None:
        assert isinstance(InMemoryKeyValueStore(), KeyValueStore)


class TestNamespacedHistory:
    def test_bound_view(self, history_store: SearchHistoryStore) -> None:
        bound = history_store.bind(HistoryNamespace.SUBJECT_CATEGORIES)
        assert bound.namespace == "subjectCategories"
        bound.record("x")
        bound.record("y")
        assert bound.load() == ["y", "x"]
        assert bound.remove("x") == ["y"]
        bound.clear()
        assert bound.load() == []
