"""
catalog_query – query state for data-catalog listing pages.

Import path convention::

    from catalog_query.application.search import ListingController, QueryStateStore
    from catalog_query.application.pagination import paginate
    from catalog_query.adapters.http import HttpPagedDataSource
    from catalog_query.testing.fakes import InMemoryAddressState
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
