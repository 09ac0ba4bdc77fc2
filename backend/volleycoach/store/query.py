"""
Query builder shared by every store backend.

Usage:
    query = (
        Query("workout_sessions")
        .eq("athlete_id", athlete_id)
        .gte("scheduled_date", "2025-01-01")
        .order("scheduled_date")
    )
    rows = await store.select(query)
"""
from dataclasses import dataclass, field
from typing import Any, List, Optional

OPERATORS = ("eq", "neq", "gte", "lte")


@dataclass(frozen=True)
class Condition:
    """A single column comparison."""
    column: str
    op: str
    value: Any

    def matches(self, row: dict) -> bool:
        actual = row.get(self.column)
        if self.op == "eq":
            return actual == self.value
        if self.op == "neq":
            return actual != self.value
        if actual is None or self.value is None:
            return False
        if self.op == "gte":
            return actual >= self.value
        return actual <= self.value


@dataclass
class Query:
    """Conditions and ordering against one table."""
    table: str
    conditions: List[Condition] = field(default_factory=list)
    order_by: Optional[str] = None
    descending: bool = False

    def _where(self, column: str, op: str, value: Any) -> "Query":
        self.conditions.append(Condition(column, op, value))
        return self

    def eq(self, column: str, value: Any) -> "Query":
        return self._where(column, "eq", value)

    def neq(self, column: str, value: Any) -> "Query":
        return self._where(column, "neq", value)

    def gte(self, column: str, value: Any) -> "Query":
        return self._where(column, "gte", value)

    def lte(self, column: str, value: Any) -> "Query":
        return self._where(column, "lte", value)

    def order(self, column: str, descending: bool = False) -> "Query":
        self.order_by = column
        self.descending = descending
        return self

    def matches(self, row: dict) -> bool:
        """Check a row against every condition."""
        return all(c.matches(row) for c in self.conditions)
