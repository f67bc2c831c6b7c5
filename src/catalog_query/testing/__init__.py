"""Testing support – fakes and pytest fixtures for listing pages.

Import in your ``conftest.py``::

    pytest_plugins = ["catalog_query.testing.fixtures"]
"""

from catalog_query.testing.fakes import (
    InMemoryAddressState,
    InMemoryKeyValueStore,
    ManualScheduler,
    ScriptedCall,
    ScriptedDataSource,
)

__all__ = [
    "InMemoryAddressState",
    "InMemoryKeyValueStore",
    "ManualScheduler",
    "ScriptedCall",
    "ScriptedDataSource",
]
