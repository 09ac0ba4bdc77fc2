"""
Store exceptions.
"""


class StoreError(Exception):
    """A storage backend operation failed."""


class BulkInsertError(StoreError):
    """A batch insert failed; none of its rows were persisted."""

    def __init__(self, table: str, count: int, reason: str):
        self.table = table
        self.count = count
        self.reason = reason
        super().__init__(f"Failed to insert {count} rows into {table}: {reason}")
