"""
SQLAlchemy-backed store.

One session per operation; ``insert_many`` runs inside a single
transaction so a failed batch leaves nothing behind.
"""
from datetime import date, datetime
from typing import Any, Dict, List, Optional, Type

from sqlalchemy import Date, DateTime, delete, select, update
from sqlalchemy.exc import SQLAlchemyError

from volleycoach.core.database import Base, create_engine, create_session_factory, init_db
from volleycoach.core.logging import get_logger
from volleycoach.models import TrainingPlan, User, Workout, WorkoutSession
from volleycoach.store.base import Store, new_row_fields, utcnow
from volleycoach.store.errors import BulkInsertError, StoreError
from volleycoach.store.query import Query

logger = get_logger(__name__)

MODELS: Dict[str, Type[Base]] = {
    "users": User,
    "workouts": Workout,
    "training_plans": TrainingPlan,
    "workout_sessions": WorkoutSession,
}


class SqlStore(Store):
    """Row store on top of an async SQLAlchemy engine."""

    name = "database"

    def __init__(self, database_url: str, echo: bool = False):
        self.engine = create_engine(database_url, echo=echo)
        self.session_factory = create_session_factory(self.engine)

    async def init(self) -> None:
        await init_db(self.engine)

    async def close(self) -> None:
        await self.engine.dispose()

    # ========================================
    # Conversion helpers
    # ========================================

    @staticmethod
    def _model(table: str) -> Type[Base]:
        try:
            return MODELS[table]
        except KeyError:
            raise StoreError(f"Unknown table: {table}")

    @staticmethod
    def _column(model: Type[Base], name: str):
        column = model.__table__.columns.get(name)
        if column is None:
            raise StoreError(f"Unknown column {model.__tablename__}.{name}")
        return column

    def _to_db_value(self, model: Type[Base], name: str, value: Any) -> Any:
        column = self._column(model, name)
        if isinstance(value, str):
            if isinstance(column.type, DateTime):
                return datetime.fromisoformat(value)
            if isinstance(column.type, Date):
                return date.fromisoformat(value)
        return value

    def _to_db(self, model: Type[Base], values: Dict[str, Any]) -> Dict[str, Any]:
        return {k: self._to_db_value(model, k, v) for k, v in values.items()}

    @staticmethod
    def _to_row(obj: Base) -> Dict[str, Any]:
        row = {}
        for column in obj.__table__.columns:
            value = getattr(obj, column.key)
            if isinstance(value, (date, datetime)):
                value = value.isoformat()
            row[column.key] = value
        return row

    def _where(self, model: Type[Base], query: Query) -> list:
        clauses = []
        for condition in query.conditions:
            column = self._column(model, condition.column)
            value = self._to_db_value(model, condition.column, condition.value)
            if condition.op == "eq":
                clauses.append(column.is_(None) if value is None else column == value)
            elif condition.op == "neq":
                clauses.append(column.is_not(None) if value is None else column != value)
            elif condition.op == "gte":
                clauses.append(column >= value)
            elif condition.op == "lte":
                clauses.append(column <= value)
            else:
                raise StoreError(f"Unsupported operator: {condition.op}")
        return clauses

    # ========================================
    # Store operations
    # ========================================

    async def insert(self, table: str, values: Dict[str, Any]) -> Dict[str, Any]:
        model = self._model(table)
        obj = model(**self._to_db(model, {**new_row_fields(), **values}))
        try:
            async with self.session_factory() as session:
                async with session.begin():
                    session.add(obj)
        except SQLAlchemyError as e:
            logger.error("Insert failed", table=table, error=str(e))
            raise StoreError(f"Failed to insert into {table}") from e
        return self._to_row(obj)

    async def insert_many(
        self,
        table: str,
        rows: List[Dict[str, Any]]
    ) -> List[Dict[str, Any]]:
        model = self._model(table)
        try:
            objs = [model(**self._to_db(model, {**new_row_fields(), **values})) for values in rows]
        except (StoreError, TypeError, ValueError) as e:
            raise BulkInsertError(table, len(rows), str(e)) from e

        try:
            async with self.session_factory() as session:
                async with session.begin():
                    session.add_all(objs)
        except SQLAlchemyError as e:
            logger.error("Bulk insert failed", table=table, count=len(rows), error=str(e))
            raise BulkInsertError(table, len(rows), type(e).__name__) from e

        logger.debug("Inserted rows", table=table, count=len(objs))
        return [self._to_row(obj) for obj in objs]

    async def get(self, table: str, row_id: str) -> Optional[Dict[str, Any]]:
        model = self._model(table)
        try:
            async with self.session_factory() as session:
                obj = await session.get(model, row_id)
        except SQLAlchemyError as e:
            raise StoreError(f"Failed to read {table}") from e
        return self._to_row(obj) if obj is not None else None

    async def select(self, query: Query) -> List[Dict[str, Any]]:
        model = self._model(query.table)
        stmt = select(model)
        clauses = self._where(model, query)
        if clauses:
            stmt = stmt.where(*clauses)
        if query.order_by:
            column = self._column(model, query.order_by)
            stmt = stmt.order_by(column.desc() if query.descending else column.asc())

        try:
            async with self.session_factory() as session:
                result = await session.execute(stmt)
                objs = result.scalars().all()
        except SQLAlchemyError as e:
            raise StoreError(f"Failed to query {query.table}") from e
        return [self._to_row(obj) for obj in objs]

    async def update(
        self,
        table: str,
        row_id: str,
        values: Dict[str, Any]
    ) -> Optional[Dict[str, Any]]:
        model = self._model(table)
        changes = self._to_db(model, {k: v for k, v in values.items() if k != "id"})
        try:
            async with self.session_factory() as session:
                async with session.begin():
                    obj = await session.get(model, row_id)
                    if obj is None:
                        return None
                    for key, value in changes.items():
                        setattr(obj, key, value)
                    obj.updated_at = utcnow()
        except SQLAlchemyError as e:
            raise StoreError(f"Failed to update {table}") from e
        return self._to_row(obj)

    async def update_where(self, query: Query, values: Dict[str, Any]) -> int:
        model = self._model(query.table)
        changes = self._to_db(model, {**values, "updated_at": utcnow()})
        stmt = update(model).values(**changes)
        clauses = self._where(model, query)
        if clauses:
            stmt = stmt.where(*clauses)
        try:
            async with self.session_factory() as session:
                async with session.begin():
                    result = await session.execute(stmt)
        except SQLAlchemyError as e:
            raise StoreError(f"Failed to update {query.table}") from e
        return result.rowcount

    async def delete(self, table: str, row_id: str) -> bool:
        self._model(table)
        return await self.delete_where(Query(table).eq("id", row_id)) > 0

    async def delete_where(self, query: Query) -> int:
        model = self._model(query.table)
        stmt = delete(model)
        clauses = self._where(model, query)
        if clauses:
            stmt = stmt.where(*clauses)
        try:
            async with self.session_factory() as session:
                async with session.begin():
                    result = await session.execute(stmt)
        except SQLAlchemyError as e:
            raise StoreError(f"Failed to delete from {query.table}") from e
        return result.rowcount
