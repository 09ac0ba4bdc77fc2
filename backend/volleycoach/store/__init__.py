"""
Store - row storage behind one interface.

Backends:
- MemoryStore: in-process rows, used when no database is configured
- SqlStore: SQLAlchemy async engine

The backend is chosen once at startup by ``create_store`` and handed
to route handlers through ``app.state.store``.
"""
from volleycoach.core.config import Settings
from volleycoach.core.logging import get_logger
from volleycoach.store.base import Store
from volleycoach.store.errors import BulkInsertError, StoreError
from volleycoach.store.memory import MemoryStore
from volleycoach.store.query import Query
from volleycoach.store.sql import SqlStore

logger = get_logger(__name__)


def create_store(settings: Settings) -> Store:
    """Build the store selected by configuration."""
    backend = settings.storage_backend()

    if backend == "memory":
        logger.warning("No database configured, running with in-memory store")
        return MemoryStore()

    if backend == "database":
        if not settings.DATABASE_URL:
            raise ValueError("STORAGE_BACKEND=database requires DATABASE_URL")
        return SqlStore(settings.DATABASE_URL, echo=settings.DATABASE_ECHO)

    raise ValueError(f"Unknown STORAGE_BACKEND: {settings.STORAGE_BACKEND}")


__all__ = [
    "Store",
    "MemoryStore",
    "SqlStore",
    "Query",
    "StoreError",
    "BulkInsertError",
    "create_store",
]
