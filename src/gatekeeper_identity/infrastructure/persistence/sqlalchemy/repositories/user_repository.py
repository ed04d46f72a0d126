"""User Store backed by the ``users`` table."""

import logging
from typing import Union
from uuid import UUID

from sqlalchemy import ColumnElement, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from gatekeeper_identity.domain.user import (
    Email,
    EmailAlreadyExistsError,
    User,
    UserNotFoundError,
    UserRepository,
)
from gatekeeper_identity.infrastructure.persistence.sqlalchemy.models import UserModel

logger = logging.getLogger(__name__)


def _is_unique_violation(error: IntegrityError) -> bool:
    # SQLite: "UNIQUE constraint failed", PostgreSQL: "duplicate key ... unique constraint"
    return "unique" in str(error.orig).lower()


class UserRepositorySQLAlchemy(UserRepository):
    """Async SQLAlchemy adapter for the UserRepository port.

    Writes are flushed, never committed: the caller owns the transaction
    and must roll back after a failed save.
    """

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_by_id(self, user_id: UUID) -> User | None:
        row = await self._first(UserModel.id == user_id)
        return None if row is None else self._to_user(row)

    async def find_by_email(self, email: Union[str, Email]) -> User | None:
        row = await self._first(UserModel.email == Email.of(email).value)
        return None if row is None else self._to_user(row)

    async def save(self, user: User) -> User:
        row = self._to_row(user)
        self._session.add(row)

        try:
            await self._session.flush()
        except IntegrityError as e:
            if not _is_unique_violation(e):
                raise
            logger.info("Insert rejected, email already taken: %s", user.email)
            raise EmailAlreadyExistsError(user.email) from e

        logger.info("Stored user %s", user.id)
        return self._to_user(row)

    async def delete(self, user_id: UUID) -> None:
        row = await self._first(UserModel.id == user_id)
        if row is None:
            raise UserNotFoundError(str(user_id))

        await self._session.delete(row)
        await self._session.flush()
        logger.info("Removed user %s", user_id)

    async def _first(self, condition: ColumnElement[bool]) -> UserModel | None:
        rows = await self._session.scalars(select(UserModel).where(condition).limit(1))
        return rows.first()

    @staticmethod
    def _to_user(row: UserModel) -> User:
        # An empty column means no hash was ever set
        return User.reconstitute(
            id=row.id,
            email=row.email,
            name=row.name,
            password_hash=row.password_hash or None,
            is_active=row.is_active,
        )

    @staticmethod
    def _to_row(user: User) -> UserModel:
        return UserModel(
            id=user.id,
            email=user.email,
            name=user.name,
            password_hash=user.password_hash or "",
            is_active=user.is_active,
        )
