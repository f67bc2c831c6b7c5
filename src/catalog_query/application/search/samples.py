"""Application search – sample record sets for pages without a backend.

Pages fall back to these through :class:`InMemoryDataSource` (see
:func:`sample_source`) when no paged endpoint is configured.
"""
from __future__ import annotations

from typing import Any

from catalog_query.application.search.filter import FilterEngine
from catalog_query.application.search.source import InMemoryDataSource

__all__ = [
    "SAMPLE_CATEGORIES",
    "SAMPLE_CONCEPTS",
    "SAMPLE_DOMAINS",
    "SAMPLE_DOMAIN_NAMES",
    "domain_record",
    "sample_source",
]

SAMPLE_CONCEPTS: tuple[dict[str, Any], ...] = (
    {
        "id": "con-001",
        "name": "Customer",
        "description": "An individual or entity that purchases goods or services from the organization",
        "domain": "Customer Management",
        "status": "approved",
        "steward": "John Smith",
        "lastUpdated": "2025-07-28",
        "relatedConcepts": ["Lead", "Account", "Contact"],
        "tags": ["core", "business", "customer"],
    },
    {
        "id": "con-002",
        "name": "Account",
        "description": "A formal business relationship between a customer and the company",
        "domain": "Customer Management",
        "status": "approved",
        "steward": "Emily Johnson",
        "lastUpdated": "2025-08-01",
        "relatedConcepts": ["Customer", "Contract", "Billing"],
        "tags": ["core", "finance", "customer"],
    },
    {
        "id": "con-003",
        "name": "Product",
        "description": "Any item or service that is offered for sale",
        "domain": "Product Management",
        "status": "approved",
        "steward": "Michael Davis",
        "lastUpdated": "2025-07-15",
        "relatedConcepts": ["SKU", "Inventory", "Price"],
        "tags": ["core", "product"],
    },
    {
        "id": "con-004",
        "name": "Order",
        "description": "A request from a customer to purchase one or more products",
        "domain": "Sales",
        "status": "approved",
        "steward": "Sarah Wilson",
        "lastUpdated": "2025-07-20",
        "relatedConcepts": ["Customer", "Product", "Invoice"],
        "tags": ["core", "sales", "transaction"],
    },
    {
        "id": "con-005",
        "name": "Revenue",
        "description": "Income generated from business activities",
        "domain": "Finance",
        "status": "approved",
        "steward": "Robert Brown",
        "lastUpdated": "2025-07-25",
        "relatedConcepts": ["Sales", "Profit", "Income"],
        "tags": ["finance", "metrics"],
    },
    {
        "id": "con-006",
        "name": "Employee",
        "description": "A person who works for the organization under an employment contract",
        "domain": "Human Resources",
        "status": "approved",
        "steward": "Jennifer Lee",
        "lastUpdated": "2025-08-02",
        "relatedConcepts": ["Department", "Position", "Compensation"],
        "tags": ["hr", "personnel"],
    },
    {
        "id": "con-007",
        "name": "Lead",
        "description": "A potential customer who has shown interest in the company's products or services",
        "domain": "Sales",
        "status": "draft",
        "steward": "David Garcia",
        "lastUpdated": "2025-08-03",
        "relatedConcepts": ["Customer", "Prospect", "Opportunity"],
        "tags": ["sales", "marketing"],
    },
    {
        "id": "con-008",
        "name": "Asset",
        "description": "Any resource owned or controlled by the company with economic value",
        "domain": "Finance",
        "status": "approved",
        "steward": "Linda Martinez",
        "lastUpdated": "2025-07-30",
        "relatedConcepts": ["Property", "Equipment", "Investment"],
        "tags": ["finance", "accounting"],
    },
)

SAMPLE_CATEGORIES: tuple[dict[str, Any], ...] = (
    {
        "id": "cat-001",
        "name": "Customer Data",
        "description": "All data related to customer information and interactions",
        "owner": "Customer Success Team",
        "assetCount": 24,
        "status": "active",
        "lastUpdated": "2025-08-01",
        "tags": ["PII", "customer", "gdpr"],
    },
    {
        "id": "cat-002",
        "name": "Product Data",
        "description": "All product catalog and inventory information",
        "owner": "Product Team",
        "assetCount": 15,
        "status": "active",
        "lastUpdated": "2025-08-02",
        "tags": ["products", "inventory", "specs"],
    },
    {
        "id": "cat-003",
        "name": "Financial Data",
        "description": "All financial and accounting information",
        "owner": "Finance Department",
        "assetCount": 18,
        "status": "active",
        "lastUpdated": "2025-08-01",
        "tags": ["financial", "confidential", "quarterly"],
    },
    {
        "id": "cat-004",
        "name": "Marketing Assets",
        "description": "All marketing campaign and analytics data",
        "owner": "Marketing Team",
        "assetCount": 12,
        "status": "active",
        "lastUpdated": "2025-07-28",
        "tags": ["marketing", "campaigns", "analytics"],
    },
    {
        "id": "cat-005",
        "name": "HR Records",
        "description": "Employee and HR-related information",
        "owner": "Human Resources",
        "assetCount": 8,
        "status": "active",
        "lastUpdated": "2025-07-25",
        "tags": ["HR", "employees", "confidential", "PII"],
    },
    {
        "id": "cat-006",
        "name": "Supply Chain Data",
        "description": "Vendor, logistics, and supply chain information",
        "owner": "Operations",
        "assetCount": 14,
        "status": "active",
        "lastUpdated": "2025-08-03",
        "tags": ["supply chain", "vendors", "logistics"],
    },
)

SAMPLE_DOMAIN_NAMES: tuple[str, ...] = (
    "Customer",
    "Product",
    "Finance",
    "Human Resources",
    "Marketing",
    "Operations",
    "Sales",
    "Technology",
)


def domain_record(name: str, index: int = 0) -> dict[str, Any]:
    """Expand a bare domain name, as some endpoints return them, into a full record."""
    return {
        "id": f"dom-{index + 1:03d}",
        "name": name,
        "description": f"Domain for {name} related data concepts",
        "owner": "Data Governance Team",
        "type": "Business Domain",
        "category": "Data Management",
        "status": "active",
        "tags": ["-".join(name.lower().split())],
    }


SAMPLE_DOMAINS: tuple[dict[str, Any], ...] = tuple(
    domain_record(name, i) for i, name in enumerate(SAMPLE_DOMAIN_NAMES)
)

_SAMPLES: dict[str, tuple[tuple[dict[str, Any], ...], str]] = {
    "dataConcepts": (SAMPLE_CONCEPTS, "domain"),
    "dataCategories": (SAMPLE_CATEGORIES, "owner"),
    "dataDomains": (SAMPLE_DOMAINS, "type"),
}


def sample_source(namespace: str) -> InMemoryDataSource[dict[str, Any]]:
    """In-memory source over the sample set of *namespace*, faceted appropriately."""
    key = getattr(namespace, "value", namespace)
    try:
        records, facet_field = _SAMPLES[key]
    except KeyError:
        raise KeyError(f"No sample data for listing '{key}'") from None
    return InMemoryDataSource(records, engine=FilterEngine(facet_field=facet_field))
