"""HTTP adapter – HttpxHttpClient for the catalog JSON API."""
from __future__ import annotations

import logging
import time
from typing import Any, Mapping

from catalog_query.kernel.errors import (
    ExternalServiceError,
    SerializationError,
    TimeoutError as AppTimeoutError,
)

logger = logging.getLogger(__name__)

_DEFAULT_HEADERS = {"Accept": "application/json"}


def _require_httpx() -> Any:
    try:
        import httpx  # type: ignore[import-untyped]
        return httpx
    except ImportError as exc:
        raise ImportError("Install 'catalog-query[http]' to use the HTTP data source") from exc


def _clean_params(params: Mapping[str, Any] | None) -> dict[str, Any] | None:
    # absent filters are left out of the query string entirely
    if params is None:
        return None
    return {k: v for k, v in params.items() if v is not None and v != ""}


class HttpxHttpClient:
    """Async GET-only client; every failure surfaces as a kernel error.

    * timeouts become :class:`~catalog_query.kernel.errors.TimeoutError`;
    * non-2xx answers and transport failures become
      :class:`~catalog_query.kernel.errors.ExternalServiceError`;
    * bodies that are not JSON (:meth:`get_json`) become
      :class:`~catalog_query.kernel.errors.SerializationError`.
    """

    def __init__(self, base_url: str = "", timeout: float = 10.0, **kwargs: Any) -> None:
        httpx = _require_httpx()
        headers = {**_DEFAULT_HEADERS, **kwargs.pop("headers", {})}
        self._base_url = base_url
        self._client = httpx.AsyncClient(base_url=base_url, timeout=timeout, headers=headers, **kwargs)

    @classmethod
    def from_settings(cls, settings: Any, **kwargs: Any) -> "HttpxHttpClient":
        """Build from :class:`~catalog_query.config.ListingSettings`."""
        return cls(base_url=settings.api_base_url, timeout=settings.request_timeout, **kwargs)

    async def __aenter__(self) -> "HttpxHttpClient":
        await self._client.__aenter__()
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self._client.__aexit__(*args)

    async def get(self, path: str, params: Mapping[str, Any] | None = None) -> Any:
        return await self._send(path, _clean_params(params))

    async def get_json(
        self,
        path: str,
        params: Mapping[str, Any] | None = None,
        *,
        payload_type: str = "listing",
    ) -> Any:
        response = await self.get(path, params)
        try:
            return response.json()
        except ValueError as exc:
            raise SerializationError(
                f"Response from {path} is not valid JSON",
                payload_type=payload_type,
                cause=exc,
            ) from exc

    async def aclose(self) -> None:
        await self._client.aclose()

    async def _send(self, path: str, params: dict[str, Any] | None) -> Any:
        httpx = _require_httpx()
        started = time.perf_counter()
        try:
            response = await self._client.get(path, params=params)
            response.raise_for_status()
        except httpx.TimeoutException as exc:
            logger.warning("http.timeout path=%s", path)
            raise AppTimeoutError(f"Catalog API timed out: GET {path}", cause=exc) from exc
        except httpx.HTTPStatusError as exc:
            status = exc.response.status_code
            logger.warning("http.status_error path=%s status=%s", path, status)
            raise ExternalServiceError(
                service=path,
                message=f"Catalog API answered {status} for GET {path}",
                status_code=status,
            ) from exc
        except httpx.HTTPError as exc:
            logger.warning("http.transport_error path=%s error=%r", path, exc)
            raise ExternalServiceError(service=path, message=str(exc) or type(exc).__name__) from exc
        logger.debug(
            "http.ok path=%s status=%s elapsed_ms=%.1f",
            path,
            response.status_code,
            (time.perf_counter() - started) * 1000,
        )
        return response


__all__ = ["HttpxHttpClient"]
