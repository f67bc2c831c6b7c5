"""Application search – FilterEngine for static / sample record sets."""
from __future__ import annotations

import dataclasses
from typing import Any, Callable, Generic, Iterable, Sequence, TypeVar

from catalog_query.application.search.query import SearchQuery

T = TypeVar("T")

__all__ = ["DEFAULT_TEXT_FIELDS", "FilterEngine", "record_view"]

DEFAULT_TEXT_FIELDS: tuple[str, ...] = ("name", "description", "domain", "category", "owner", "tags")


def record_view(item: Any) -> dict[str, Any]:
    """Default ``key_fn``: a field mapping for dicts, namedtuples, dataclasses
    (slotted ones included) and plain objects.

    Items with no fields at all (strings, numbers) view as ``{}``, so they match
    only an empty query and contribute no facet values.
    """
    if isinstance(item, dict):
        return item
    if hasattr(item, "_asdict"):
        return item._asdict()
    if dataclasses.is_dataclass(item) and not isinstance(item, type):
        return {f.name: getattr(item, f.name) for f in dataclasses.fields(item)}
    try:
        return vars(item)
    except TypeError:
        return {}


def _values(raw: Any) -> list[Any]:
    if raw is None:
        return []
    if isinstance(raw, (list, tuple, set, frozenset)):
        return [v for v in raw if v is not None]
    return [raw]


class FilterEngine(Generic[T]):
    """Client-side substring + facet matcher.

    Text matches when any of *text_fields* contains ``query.text``
    case-insensitively (list-valued fields match on any element). The facet
    matches on exact equality, or membership for list-valued fields, and is
    AND-combined with the text match. An empty query text matches everything.
    """

    def __init__(
        self,
        text_fields: Sequence[str] = DEFAULT_TEXT_FIELDS,
        *,
        facet_field: str = "category",
        key_fn: Callable[[T], dict[str, Any]] | None = None,
    ) -> None:
        if not text_fields:
            raise ValueError("text_fields must not be empty")
        self.text_fields = tuple(text_fields)
        self.facet_field = facet_field
        self._key_fn: Callable[[T], dict[str, Any]] = key_fn or record_view

    def matches(self, item: T, query: SearchQuery) -> bool:
        d = self._key_fn(item)
        if query.facet is not None and query.facet not in _values(d.get(self.facet_field)):
            return False
        if not query.text:
            return True
        needle = query.text.lower()
        return any(
            needle in str(value).lower()
            for field in self.text_fields
            for value in _values(d.get(field))
        )

    def filter(self, items: Iterable[T], query: SearchQuery) -> list[T]:
        return [item for item in items if self.matches(item, query)]

    def facet_values(self, items: Iterable[T]) -> list[str]:
        """Sorted distinct, non-blank facet values present in *items*."""
        seen: set[str] = set()
        for item in items:
            for value in _values(self._key_fn(item).get(self.facet_field)):
                label = str(value)
                if label.strip():
                    seen.add(label)
        return sorted(seen, key=str.casefold)
