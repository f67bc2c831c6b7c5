"""Application search – SearchQuery value object and QueryCodec."""
from __future__ import annotations

import dataclasses
import logging
from enum import Enum
from typing import Any
from urllib.parse import parse_qs, urlencode

from catalog_query.kernel.errors import MalformedAddressState

__all__ = ["QueryCodec", "SearchQuery", "ViewMode"]

logger = logging.getLogger(__name__)


class ViewMode(str, Enum):
    GRID = "grid"
    LIST = "list"


@dataclasses.dataclass(frozen=True)
class SearchQuery:
    """Canonical query state of one listing page."""

    text: str = ""
    facet: str | None = None
    page: int = 1
    view_mode: ViewMode = ViewMode.GRID

    @property
    def fetch_key(self) -> tuple[str, str | None, int]:
        """The fields a data source depends on; ``view_mode`` is presentation only."""
        return (self.text, self.facet, self.page)

    @property
    def is_default(self) -> bool:
        return self == SearchQuery()

    def merge(self, **changes: Any) -> "SearchQuery":
        """Return a copy with *changes* applied and normalised.

        An empty facet means "no facet", pages below one become one and view
        modes may be given as plain strings.
        """
        unknown = set(changes) - {f.name for f in dataclasses.fields(self)}
        if unknown:
            raise TypeError(f"Unknown query fields: {sorted(unknown)}")
        if "facet" in changes and not changes["facet"]:
            changes["facet"] = None
        if "page" in changes:
            changes["page"] = max(1, int(changes["page"]))
        if "view_mode" in changes:
            changes["view_mode"] = ViewMode(changes["view_mode"])
        if "text" in changes and changes["text"] is None:
            changes["text"] = ""
        return dataclasses.replace(self, **changes)


class QueryCodec:
    """Serialise :class:`SearchQuery` to and from a canonical query string.

    Fields at their default value are omitted, so the default query encodes
    to ``""``. Parsing is total: anything that cannot be decoded falls back
    to the field's default.
    """

    def __init__(
        self,
        *,
        text_param: str = "q",
        facet_param: str = "facet",
        page_param: str = "page",
        view_param: str = "view",
    ) -> None:
        names = (text_param, facet_param, page_param, view_param)
        if len(set(names)) != len(names):
            raise ValueError(f"Query parameter names must be distinct: {names}")
        self.text_param = text_param
        self.facet_param = facet_param
        self.page_param = page_param
        self.view_param = view_param

    def serialize(self, query: SearchQuery) -> str:
        pairs: list[tuple[str, str]] = []
        if query.text:
            pairs.append((self.text_param, query.text))
        if query.facet:
            pairs.append((self.facet_param, query.facet))
        if query.page > 1:
            pairs.append((self.page_param, str(query.page)))
        if query.view_mode is not ViewMode.GRID:
            pairs.append((self.view_param, query.view_mode.value))
        return urlencode(pairs)

    def parse(self, raw: str | None) -> SearchQuery:
        if not raw:
            return SearchQuery()
        try:
            params = parse_qs(raw.lstrip("?"), keep_blank_values=False)
        except ValueError:
            logger.debug("query.unparseable raw=%r", raw)
            return SearchQuery()

        def first(name: str) -> str | None:
            values = params.get(name)
            return values[0] if values else None

        return SearchQuery(
            text=first(self.text_param) or "",
            facet=first(self.facet_param) or None,
            page=self._field(self.page_param, first(self.page_param), self._page, 1),
            view_mode=self._field(self.view_param, first(self.view_param), ViewMode, ViewMode.GRID),
        )

    def _field(self, name: str, value: str | None, convert: Any, default: Any) -> Any:
        if value is None:
            return default
        try:
            return convert(value)
        except (ValueError, MalformedAddressState) as exc:
            logger.debug("query.field_defaulted field=%s value=%r exc=%r", name, value, exc)
            return default

    def _page(self, value: str) -> int:
        page = int(value.strip())
        if page < 1:
            raise MalformedAddressState(self.page_param, value)
        return page

