"""
Relational storage backend (SQLAlchemy, async).

Each call opens its own session from the configured session maker and commits
before returning, so every insert/update/delete is visible to subsequent reads.
"""

import logging
from contextlib import asynccontextmanager
from typing import Sequence

from sqlalchemy import select, update, delete
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import async_sessionmaker, AsyncSession

import db
from db import session_execute, session_flush, session_commit
from enums.entity_kind import EntityKind
from exceptions.persistence import RecordNotFoundException, StorageOperationException
from models.base import Base
from models.cartItem import CartItem
from models.order import Order
from models.orderItem import OrderItem
from models.product import Product
from models.role_assignment import RoleAssignment
from models.user import UserProfile
from storage.base import StorageBackend, Ordering, RecordFilter

logger = logging.getLogger(__name__)


class SQLStorage(StorageBackend):
    MODELS: dict[EntityKind, type[Base]] = {
        EntityKind.PRODUCT: Product,
        EntityKind.ORDER: Order,
        EntityKind.ORDER_LINE_ITEM: OrderItem,
        EntityKind.ROLE_ASSIGNMENT: RoleAssignment,
        EntityKind.USER_PROFILE: UserProfile,
        EntityKind.CART_LINE: CartItem,
    }

    def __init__(self, session_maker: async_sessionmaker | None = None):
        self._session_maker = session_maker or db.session_maker

    @asynccontextmanager
    async def _session(self, operation: str, kind: EntityKind) -> AsyncSession:
        try:
            async with db.get_db_session(self._session_maker) as session:
                yield session
        except SQLAlchemyError as e:
            logger.error(f"SQL {operation} on {kind.value} failed: {e}")
            raise StorageOperationException(operation, kind.value, str(e)) from e

    @staticmethod
    def _to_dict(row) -> dict:
        return {column.key: getattr(row, column.key) for column in row.__table__.columns}

    def _columns(self, kind: EntityKind, record: dict) -> dict:
        model = self.MODELS[kind]
        column_keys = {column.key for column in model.__table__.columns}
        return {k: v for k, v in record.items() if k in column_keys}

    async def insert(self, kind: EntityKind, record: dict) -> int:
        model = self.MODELS[kind]
        async with self._session("insert", kind) as session:
            row = model(**self._columns(kind, record))
            session.add(row)
            await session_flush(session)
            await session_commit(session)
            return row.id

    async def insert_many(self, kind: EntityKind, records: Sequence[dict]) -> list[int]:
        model = self.MODELS[kind]
        async with self._session("insert", kind) as session:
            rows = [model(**self._columns(kind, record)) for record in records]
            session.add_all(rows)
            await session_flush(session)
            await session_commit(session)
            return [row.id for row in rows]

    async def update(self, kind: EntityKind, record_id: int, patch: dict) -> None:
        model = self.MODELS[kind]
        async with self._session("update", kind) as session:
            stmt = update(model).where(model.id == record_id).values(**self._columns(kind, patch))
            result = await session_execute(stmt, session)
            if result.rowcount == 0:
                raise RecordNotFoundException(kind.value, record_id)
            await session_commit(session)

    async def delete(self, kind: EntityKind, record_id: int) -> None:
        model = self.MODELS[kind]
        async with self._session("delete", kind) as session:
            stmt = delete(model).where(model.id == record_id)
            result = await session_execute(stmt, session)
            if result.rowcount == 0:
                raise RecordNotFoundException(kind.value, record_id)
            await session_commit(session)

    async def get(self, kind: EntityKind, record_id: int) -> dict | None:
        model = self.MODELS[kind]
        async with self._session("get", kind) as session:
            row = await session.get(model, record_id)
            return self._to_dict(row) if row is not None else None

    async def query(self, kind: EntityKind, filter: RecordFilter | None = None,
                    order_by: Sequence[Ordering] | None = None) -> list[dict]:
        model = self.MODELS[kind]
        stmt = select(model)
        for field, expected in (filter or {}).items():
            column = getattr(model, field)
            if isinstance(expected, (list, tuple, set, frozenset)):
                stmt = stmt.where(column.in_(list(expected)))
            else:
                stmt = stmt.where(column == expected)
        for ordering in order_by or []:
            column = getattr(model, ordering.field)
            stmt = stmt.order_by(column.desc() if ordering.descending else column.asc())
        async with self._session("query", kind) as session:
            result = await session_execute(stmt, session)
            return [self._to_dict(row) for row in result.scalars().all()]
