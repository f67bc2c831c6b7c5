"""Redis adapter – RedisKeyValueStore."""
from __future__ import annotations

from typing import Any


def _require_redis() -> Any:
    try:
        import redis
        return redis
    except ImportError as exc:
        raise ImportError("Install 'catalog-query[redis]' to use the Redis adapter") from exc


class RedisKeyValueStore:
    """Synchronous Redis-backed :class:`~catalog_query.application.search.KeyValueStore`.

    Search history is read on mount and written on settle, both from the
    event-loop thread, so the blocking client is used. Values are stored as
    UTF-8 strings; an optional *ttl* (seconds) expires idle history.
    """

    def __init__(self, url: str, *, ttl: int | None = None, **kwargs: Any) -> None:
        redis = _require_redis()
        kwargs.setdefault("decode_responses", True)
        self._client = redis.Redis.from_url(url, **kwargs)
        self._ttl = ttl

    def get(self, key: str) -> str | None:
        value = self._client.get(key)
        if isinstance(value, bytes):
            return value.decode("utf-8")
        return value

    def set(self, key: str, value: str) -> None:
        self._client.set(key, value, ex=self._ttl)

    def delete(self, key: str) -> None:
        self._client.delete(key)

    def close(self) -> None:
        self._client.close()


__all__ = ["RedisKeyValueStore"]
