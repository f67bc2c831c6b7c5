"""File adapter – local JSON search-history persistence."""
from catalog_query.adapters.file.store import JsonFileKeyValueStore

__all__ = ["JsonFileKeyValueStore"]
