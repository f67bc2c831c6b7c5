"""HTTP adapter – HttpPagedDataSource.

Reads the listing envelope returned by the catalog API::

    {"data": [...], "count": 42, "pagination": {...}}

``items`` is accepted in place of ``data`` and ``total`` in place of
``count``; without either count the page length is used as the total.
"""
from __future__ import annotations

import logging
from typing import Any

from catalog_query.adapters.http.client import HttpxHttpClient
from catalog_query.application.search.source import Listing, ListParams
from catalog_query.kernel.errors import SerializationError

logger = logging.getLogger(__name__)


class HttpPagedDataSource:
    """Remote :class:`~catalog_query.application.search.PagedDataSource` over GET."""

    def __init__(
        self,
        client: HttpxHttpClient,
        path: str,
        *,
        facets_path: str | None = None,
        text_param: str = "q",
        facet_param: str = "category",
    ) -> None:
        self._client = client
        self._path = path
        self._facets_path = facets_path
        self._text_param = text_param
        self._facet_param = facet_param

    async def list(self, params: ListParams) -> Listing[dict[str, Any]]:
        query = params.to_params(text_param=self._text_param, facet_param=self._facet_param)
        body = await self._client.get_json(self._path, query)
        if not isinstance(body, dict):
            raise SerializationError(
                f"Expected a JSON object from {self._path}", payload_type="listing"
            )
        items = body.get("data", body.get("items"))
        if not isinstance(items, list):
            raise SerializationError(
                f"Listing from {self._path} has no 'data' array", payload_type="listing"
            )
        total = body.get("count", body.get("total"))
        if total is None:
            total = len(items)
        try:
            total = int(total)
        except (TypeError, ValueError) as exc:
            raise SerializationError(
                f"Listing from {self._path} has a non-numeric count {total!r}",
                payload_type="listing",
                cause=exc,
            ) from exc
        logger.debug("http_source.listed path=%s page=%s items=%s total=%s", self._path, params.page, len(items), total)
        return Listing(items=items, total=total)

    async def list_facet_values(self) -> list[str]:
        if self._facets_path is None:
            return []
        body = await self._client.get_json(self._facets_path, payload_type="facets")
        values = body.get("data") if isinstance(body, dict) else body
        if not isinstance(values, list):
            raise SerializationError(
                f"Facet values from {self._facets_path} are not a list", payload_type="facets"
            )
        return [str(v) for v in values if v]


__all__ = ["HttpPagedDataSource"]
