"""Testing fakes – in-memory doubles for the listing ports."""
from catalog_query.application.search.history import InMemoryKeyValueStore
from catalog_query.kernel.time import ManualScheduler
from catalog_query.testing.fakes.address import InMemoryAddressState
from catalog_query.testing.fakes.source import ScriptedCall, ScriptedDataSource

__all__ = [
    "InMemoryAddressState",
    "InMemoryKeyValueStore",
    "ManualScheduler",
    "ScriptedCall",
    "ScriptedDataSource",
]
