"""Redis adapter – search-history persistence."""
from catalog_query.adapters.redis.store import RedisKeyValueStore

__all__ = ["RedisKeyValueStore"]
