"""
SQLAlchemy binding of the ``UserRepository`` port.

Each call runs in its own session and transaction taken from the shared
session factory, so a repository instance is safe to use from many
concurrent requests.  ``SQLAlchemyError`` never escapes: it is logged and
re-raised as ``InternalError`` with the original chained as ``__cause__``.
"""
from __future__ import annotations

import logging
from contextlib import contextmanager

from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from userhub.errors import InternalError
from userhub.models import UserRecord
from userhub.ports import UserRepository
from userhub.schemas import UpdateUserInput, User, utcnow

logger = logging.getLogger(__name__)


@contextmanager
def _storage_errors(operation: str):
    try:
        yield
    except SQLAlchemyError as exc:
        logger.error("Database error during %s: %s", operation, exc)
        raise InternalError(f"database error during {operation}") from exc


def _to_domain(record: UserRecord) -> User:
    return User.model_validate(record)


class SqlAlchemyUserRepository(UserRepository):
    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self._session_factory = session_factory

    async def create(self, user: User) -> None:
        # A duplicate id or email is rejected by the schema and, like any other
        # storage fault, surfaces as InternalError.
        with _storage_errors("create"):
            async with self._session_factory() as session, session.begin():
                session.add(UserRecord(**user.model_dump()))

    async def get_by_id(self, user_id: str) -> User | None:
        with _storage_errors("get_by_id"):
            async with self._session_factory() as session:
                record = await session.get(UserRecord, user_id)
                return _to_domain(record) if record is not None else None

    async def get_by_email(self, email: str) -> User | None:
        with _storage_errors("get_by_email"):
            async with self._session_factory() as session:
                result = await session.execute(
                    select(UserRecord).where(UserRecord.email == email)
                )
                record = result.scalar_one_or_none()
                return _to_domain(record) if record is not None else None

    async def list(self, limit: int, offset: int) -> list[User]:
        q = (
            select(UserRecord)
            .order_by(UserRecord.created_at, UserRecord.id)
            .offset(offset)
            .limit(limit)
        )
        with _storage_errors("list"):
            async with self._session_factory() as session:
                result = await session.execute(q)
                return [_to_domain(r) for r in result.scalars().all()]

    async def update(self, user_id: str, data: UpdateUserInput) -> User | None:
        """
        Re-read the stored row, overwrite the fields present in *data* and
        refresh ``updated_at``.  Returns None when the row no longer exists.
        """
        with _storage_errors("update"):
            async with self._session_factory() as session, session.begin():
                record = await session.get(UserRecord, user_id)
                if record is None:
                    return None
                for field, value in data.changes().items():
                    setattr(record, field, value)
                record.updated_at = utcnow()
                await session.flush()
                return _to_domain(record)

    async def delete(self, user_id: str) -> None:
        with _storage_errors("delete"):
            async with self._session_factory() as session, session.begin():
                await session.execute(delete(UserRecord).where(UserRecord.id == user_id))
