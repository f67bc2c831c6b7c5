from catalog_query.testing.fixtures import (  # noqa: F401
    address_state,
    history_store,
    kv_store,
    manual_scheduler,
    scripted_source,
)
