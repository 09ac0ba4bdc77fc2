"""
In-process store keyed by row id.

Used when no database is configured. Data lives as long as the
process; each application instance owns its own MemoryStore.
"""
import copy
import itertools
from datetime import date, datetime
from typing import Any, Dict, List, Optional

from volleycoach.core.logging import get_logger
from volleycoach.store.base import TABLES, Store, new_row_fields, utcnow
from volleycoach.store.errors import BulkInsertError, StoreError
from volleycoach.store.query import Query

logger = get_logger(__name__)


def _serialize(value: Any) -> Any:
    """Dates and timestamps are held as ISO strings, like the SQL store returns them."""
    if isinstance(value, (date, datetime)):
        return value.isoformat()
    return copy.deepcopy(value)


class MemoryStore(Store):
    """Dict-of-dicts row store."""

    name = "memory"

    def __init__(self):
        self._tables: Dict[str, Dict[str, Dict[str, Any]]] = {t: {} for t in TABLES}
        # Insertion sequence breaks ordering ties deterministically
        self._sequence = itertools.count()
        self._inserted: Dict[str, int] = {}

    def _table(self, table: str) -> Dict[str, Dict[str, Any]]:
        try:
            return self._tables[table]
        except KeyError:
            raise StoreError(f"Unknown table: {table}")

    def _build_row(self, table: str, values: Dict[str, Any]) -> Dict[str, Any]:
        if not isinstance(values, dict):
            raise StoreError(f"Row for {table} must be a mapping")
        row = {k: _serialize(v) for k, v in new_row_fields().items()}
        row.update({k: _serialize(v) for k, v in values.items()})
        if row["id"] in self._tables[table]:
            raise StoreError(f"Duplicate id in {table}: {row['id']}")
        return row

    def _write(self, table: str, row: Dict[str, Any]) -> Dict[str, Any]:
        self._tables[table][row["id"]] = row
        self._inserted[row["id"]] = next(self._sequence)
        return copy.deepcopy(row)

    async def insert(self, table: str, values: Dict[str, Any]) -> Dict[str, Any]:
        self._table(table)
        return self._write(table, self._build_row(table, values))

    async def insert_many(
        self,
        table: str,
        rows: List[Dict[str, Any]]
    ) -> List[Dict[str, Any]]:
        self._table(table)
        # Build the whole batch before writing anything
        try:
            built = [self._build_row(table, values) for values in rows]
        except StoreError as e:
            raise BulkInsertError(table, len(rows), str(e)) from e

        ids = [row["id"] for row in built]
        if len(set(ids)) != len(ids):
            raise BulkInsertError(table, len(rows), "duplicate ids in batch")

        inserted = [self._write(table, row) for row in built]
        logger.debug("Inserted rows", table=table, count=len(inserted))
        return inserted

    async def get(self, table: str, row_id: str) -> Optional[Dict[str, Any]]:
        row = self._table(table).get(row_id)
        return copy.deepcopy(row) if row is not None else None

    async def select(self, query: Query) -> List[Dict[str, Any]]:
        rows = [r for r in self._table(query.table).values() if query.matches(r)]

        if query.order_by:
            column = query.order_by
            present = [r for r in rows if r.get(column) is not None]
            missing = [r for r in rows if r.get(column) is None]
            present.sort(
                key=lambda r: (r[column], self._inserted[r["id"]]),
                reverse=query.descending,
            )
            rows = present + missing

        return [copy.deepcopy(r) for r in rows]

    async def update(
        self,
        table: str,
        row_id: str,
        values: Dict[str, Any]
    ) -> Optional[Dict[str, Any]]:
        row = self._table(table).get(row_id)
        if row is None:
            return None
        row.update({k: _serialize(v) for k, v in values.items() if k != "id"})
        row["updated_at"] = _serialize(utcnow())
        return copy.deepcopy(row)

    async def update_where(self, query: Query, values: Dict[str, Any]) -> int:
        matching = [r for r in self._table(query.table).values() if query.matches(r)]
        for row in matching:
            await self.update(query.table, row["id"], values)
        return len(matching)

    async def delete(self, table: str, row_id: str) -> bool:
        removed = self._table(table).pop(row_id, None)
        self._inserted.pop(row_id, None)
        return removed is not None

    async def delete_where(self, query: Query) -> int:
        matching = [r["id"] for r in self._table(query.table).values() if query.matches(r)]
        for row_id in matching:
            await self.delete(query.table, row_id)
        return len(matching)
