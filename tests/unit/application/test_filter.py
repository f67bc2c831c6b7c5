"""Unit tests for FilterEngine, InMemoryDataSource and the sample sets."""
from __future__ import annotations

import asyncio
import dataclasses
from typing import NamedTuple

import pytest

from catalog_query.application.search import (
    SAMPLE_CATEGORIES,
    SAMPLE_CONCEPTS,
    SAMPLE_DOMAINS,
    FacetSource,
    FilterEngine,
    HistoryNamespace,
    InMemoryDataSource,
    ListParams,
    PagedDataSource,
    SearchQuery,
    domain_record,
    record_view,
    sample_source,
)
from catalog_query.kernel.errors import ValidationError


def _ids(items) -> list[str]:
    return [item["id"] for item in items]


@dataclasses.dataclass
class Kpi:
    name: str
    description: str
    category: str
    tags: list[str]


_KPIS = [
    Kpi("Net Revenue", "Revenue after returns", "Finance", ["finance", "monthly"]),
    Kpi("Churn Rate", "Share of customers lost", "Customer", ["retention"]),
    Kpi("NPS", "Net promoter score", "Customer", ["survey", "Finance"]),
]


class TestFilterEngineText:
    def test_case_insensitive_substring_across_fields(self) -> None:
        engine = FilterEngine(facet_field="domain")
        result = engine.filter(SAMPLE_CONCEPTS, SearchQuery(text="CUSTOM"))
        assert _ids(result) == ["con-001", "con-002", "con-004", "con-007"]

    def test_list_field_matches_any_element(self) -> None:
        engine = FilterEngine(facet_field="owner")
        result = engine.filter(SAMPLE_CATEGORIES, SearchQuery(text="pii"))
        assert _ids(result) == ["cat-001", "cat-005"]

    def test_empty_text_is_identity(self) -> None:
        engine = FilterEngine()
        assert engine.filter(SAMPLE_CONCEPTS, SearchQuery()) == list(SAMPLE_CONCEPTS)

    def test_no_match(self) -> None:
        assert FilterEngine().filter(SAMPLE_CONCEPTS, SearchQuery(text="zzz")) == []

    def test_only_configured_fields_are_searched(self) -> None:
        engine = FilterEngine(text_fields=("name",))
        assert _ids(engine.filter(SAMPLE_CONCEPTS, SearchQuery(text="customer"))) == ["con-001"]

    def test_steward_is_not_searched_by_default(self) -> None:
        assert FilterEngine().filter(SAMPLE_CONCEPTS, SearchQuery(text="John Smith")) == []

    def test_objects_via_attributes(self) -> None:
        result = FilterEngine().filter(_KPIS, SearchQuery(text="net"))
        assert [k.name for k in result] == ["Net Revenue", "NPS"]

    def test_empty_text_fields_rejected(self) -> None:
        with pytest.raises(ValueError):
            FilterEngine(text_fields=())


class TestFilterEngineFacet:
    def test_exact_facet(self) -> None:
        engine = FilterEngine(facet_field="domain")
        result = engine.filter(SAMPLE_CONCEPTS, SearchQuery(facet="Finance"))
        assert _ids(result) == ["con-005", "con-008"]

    def test_facet_is_not_substring(self) -> None:
        engine = FilterEngine(facet_field="domain")
        assert engine.filter(SAMPLE_CONCEPTS, SearchQuery(facet="Fin")) == []

    def test_facet_and_text_combined(self) -> None:
        engine = FilterEngine(facet_field="domain")
        result = engine.filter(SAMPLE_CONCEPTS, SearchQuery(text="customer", facet="Sales"))
        assert _ids(result) == ["con-004", "con-007"]

    def test_list_valued_facet_membership(self) -> None:
        engine = FilterEngine(facet_field="tags")
        assert [k.name for k in engine.filter(_KPIS, SearchQuery(facet="Finance"))] == ["NPS"]

    def test_custom_key_fn(self) -> None:
        engine = FilterEngine(key_fn=lambda k: {"name": k.name, "category": k.category})
        assert [k.name for k in engine.filter(_KPIS, SearchQuery(facet="Customer"))] == ["Churn Rate", "NPS"]


class TestFacetValues:
    def test_sorted_distinct(self) -> None:
        engine = FilterEngine(facet_field="domain")
        assert engine.facet_values(SAMPLE_CONCEPTS) == [
            "Customer Management",
            "Finance",
            "Human Resources",
            "Product Management",
            "Sales",
        ]

    def test_blank_and_missing_values_skipped(self) -> None:
        items = [{"category": "B"}, {"category": " "}, {"category": None}, {}, {"category": "a"}]
        assert FilterEngine().facet_values(items) == ["a", "B"]


class TestListParams:
    def test_invalid_page_and_limit(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            ListParams(page=0, limit=0)
        assert {e["field"] for e in exc_info.value.errors} == {"page", "limit"}

    def test_for_query(self) -> None:
        params = ListParams.for_query(SearchQuery(text="rev", facet="Finance", page=2), limit=12, sort="-updatedAt")
        assert params == ListParams(page=2, limit=12, q="rev", facet="Finance", sort="-updatedAt")

    def test_for_query_drops_empty_text(self) -> None:
        assert ListParams.for_query(SearchQuery(), limit=12).q is None

    def test_to_params_only_present_keys(self) -> None:
        assert ListParams(page=1, limit=12).to_params() == {"page": 1, "limit": 12}

    def test_to_params_custom_names(self) -> None:
        params = ListParams(page=3, limit=12, q="nps", facet="Customer", sort="-updatedAt")
        assert params.to_params(facet_param="category") == {
            "page": 3,
            "limit": 12,
            "q": "nps",
            "category": "Customer",
            "sort": "-updatedAt",
        }


class TestInMemoryDataSource:
    def test_satisfies_ports(self) -> None:
        source = InMemoryDataSource(SAMPLE_CONCEPTS)
        assert isinstance(source, PagedDataSource)
        assert isinstance(source, FacetSource)

    def test_total_is_filtered_count(self) -> None:
        source = sample_source("dataConcepts")
        listing = asyncio.run(source.list(ListParams(page=1, limit=2, q="customer")))
        assert _ids(listing.items) == ["con-001", "con-002"]
        assert listing.total == 4

    def test_second_page(self) -> None:
        source = sample_source("dataConcepts")
        listing = asyncio.run(source.list(ListParams(page=2, limit=3)))
        assert _ids(listing.items) == ["con-004", "con-005", "con-006"]
        assert listing.total == 8

    def test_descending_sort(self) -> None:
        source = sample_source("dataConcepts")
        listing = asyncio.run(source.list(ListParams(page=2, limit=3, sort="-lastUpdated")))
        assert _ids(listing.items) == ["con-008", "con-001", "con-005"]

    def test_ascending_sort_missing_field_last(self) -> None:
        items = [{"id": "a", "rank": 2}, {"id": "b"}, {"id": "c", "rank": 1}]
        listing = asyncio.run(InMemoryDataSource(items).list(ListParams(page=1, limit=10, sort="rank")))
        assert _ids(listing.items) == ["c", "a", "b"]

    def test_out_of_range_page_is_empty(self) -> None:
        listing = asyncio.run(sample_source("dataConcepts").list(ListParams(page=9, limit=3)))
        assert listing.items == []
        assert listing.total == 8

    def test_facet_param(self) -> None:
        source = sample_source("dataCategories")
        listing = asyncio.run(source.list(ListParams(page=1, limit=12, facet="Operations")))
        assert _ids(listing.items) == ["cat-006"]

    def test_facet_values(self) -> None:
        values = asyncio.run(sample_source("dataCategories").list_facet_values())
        assert values[0] == "Customer Success Team"
        assert len(values) == 6


class TestSampleSource:
    def test_unknown_namespace(self) -> None:
        with pytest.raises(KeyError):
            sample_source("kpis")

    def test_accepts_history_namespace(self) -> None:
        listing = asyncio.run(sample_source(HistoryNamespace.DATA_DOMAINS).list(ListParams(page=1, limit=3)))
        assert listing.total == len(SAMPLE_DOMAINS) == 8
        assert [d["name"] for d in listing.items] == ["Customer", "Product", "Finance"]

    def test_domain_record(self) -> None:
        record = domain_record("Human Resources", 3)
        assert record["id"] == "dom-004"
        assert record["description"] == "Domain for Human Resources related data concepts"
        assert record["tags"] == ["human-resources"]

    def test_domains_searchable_by_tag(self) -> None:
        result = FilterEngine(facet_field="type").filter(SAMPLE_DOMAINS, SearchQuery(text="human-res"))
        assert [d["name"] for d in result] == ["Human Resources"]


@dataclasses.dataclass(slots=True)
class SlottedKpi:
    name: str
    category: str


class KpiRow(NamedTuple):
    name: str
    category: str


class TestRecordView:
    def test_dict_returned_as_is(self) -> None:
        record = {"name": "NPS"}
        assert record_view(record) is record

    def test_slotted_dataclass(self) -> None:
        assert record_view(SlottedKpi("NPS", "Customer")) == {"name": "NPS", "category": "Customer"}

    def test_namedtuple(self) -> None:
        assert record_view(KpiRow("NPS", "Customer")) == {"name": "NPS", "category": "Customer"}

    def test_plain_object(self) -> None:
        assert record_view(Kpi("NPS", "score", "Customer", []))["category"] == "Customer"

    @pytest.mark.parametrize("item", ["NPS", 42, None])
    def test_items_without_fields_view_as_empty(self, item: object) -> None:
        assert record_view(item) == {}

    def test_engine_over_slotted_records(self) -> None:
        items = [SlottedKpi("NPS", "Customer"), SlottedKpi("Net Revenue", "Finance")]
        engine: FilterEngine[SlottedKpi] = FilterEngine()
        assert engine.filter(items, SearchQuery(text="rev")) == [items[1]]
        assert engine.facet_values(items) == ["Customer", "Finance"]

    def test_strings_have_no_facets(self) -> None:
        engine: FilterEngine[str] = FilterEngine()
        assert engine.facet_values(["a", "b"]) == []
        assert engine.filter(["a", "b"], SearchQuery(facet="x")) == []
