"""
Store interface - keyed row storage used by every route handler.

Rows are plain dicts. The store assigns ``id``, ``created_at`` and
``updated_at``; calendar dates travel as ``YYYY-MM-DD`` strings and
timestamps as ISO-8601 strings.
"""
import uuid
from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from volleycoach.store.query import Query

TABLES = ("users", "workouts", "training_plans", "workout_sessions")


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def new_row_fields() -> Dict[str, Any]:
    """Identity and timestamps for a freshly inserted row."""
    now = utcnow()
    return {
        "id": str(uuid.uuid4()),
        "created_at": now,
        "updated_at": now,
    }


class Store(ABC):
    """Abstract row store."""

    name: str = "abstract"

    async def init(self) -> None:
        """Prepare the backend (create tables, open pools)."""

    async def close(self) -> None:
        """Release backend resources."""

    @abstractmethod
    async def insert(self, table: str, values: Dict[str, Any]) -> Dict[str, Any]:
        """Insert one row and return it with identity and timestamps."""

    @abstractmethod
    async def insert_many(
        self,
        table: str,
        rows: List[Dict[str, Any]]
    ) -> List[Dict[str, Any]]:
        """
        Insert a batch of rows atomically.

        Raises:
            BulkInsertError: if any row fails; nothing is persisted.
        """

    @abstractmethod
    async def get(self, table: str, row_id: str) -> Optional[Dict[str, Any]]:
        """Get a row by id, or None."""

    @abstractmethod
    async def select(self, query: Query) -> List[Dict[str, Any]]:
        """Return the rows matching a query, in the query's order."""

    @abstractmethod
    async def update(
        self,
        table: str,
        row_id: str,
        values: Dict[str, Any]
    ) -> Optional[Dict[str, Any]]:
        """Update a row by id. Returns the updated row, or None if missing."""

    @abstractmethod
    async def update_where(self, query: Query, values: Dict[str, Any]) -> int:
        """Update every matching row. Returns the number of rows changed."""

    @abstractmethod
    async def delete(self, table: str, row_id: str) -> bool:
        """Delete a row by id. Returns False if it did not exist."""

    @abstractmethod
    async def delete_where(self, query: Query) -> int:
        """Delete every matching row. Returns the number of rows removed."""
