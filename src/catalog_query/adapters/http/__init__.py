"""HTTP adapter – async httpx client and the remote paged data source."""
from catalog_query.adapters.http.client import HttpxHttpClient
from catalog_query.adapters.http.source import HttpPagedDataSource

__all__ = ["HttpPagedDataSource", "HttpxHttpClient"]
