# =============================================================================
# lib/ - Persistence Modules
# =============================================================================
# This package contains the storage side of the API:
# - database.py: Async engine, session factory, startup table creation
# - store.py: ProductStore interface with SQL and in-memory implementations
#
# These modules are self-contained and can be tested in isolation.
# =============================================================================

from lib.database import connect_db, create_engine_from_url, create_session_factory, ping_db
from lib.store import InMemoryProductStore, ProductStore, SqlProductStore

__all__ = [
    # Database
    "connect_db",
    "create_engine_from_url",
    "create_session_factory",
    "ping_db",
    # Store
    "InMemoryProductStore",
    "ProductStore",
    "SqlProductStore",
]
