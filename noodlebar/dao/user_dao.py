"""UserDAO — users table operations."""

import uuid
from typing import Any

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from noodlebar.dao.base import BaseDAO
from noodlebar.models.user import User


class DuplicateEmailError(ValueError):
    """Raised when the unique index on ``users.email`` rejects a write."""


class UserDAO(BaseDAO[User]):
    model = User

    async def get_by_email(self, session: AsyncSession, email: str) -> User | None:
        """Look up a user by exact email (signup and login flows)."""
        return await self.get_by_field(session, email=email)

    async def create(self, session: AsyncSession, **values: Any) -> User:
        """Insert a user. Raises :class:`DuplicateEmailError` on email collision.

        The insert runs in a SAVEPOINT so the caller's transaction stays
        usable after a constraint violation.
        """
        try:
            async with session.begin_nested():
                return await super().create(session, **values)
        except IntegrityError as exc:
            raise DuplicateEmailError(f"email {values.get('email')!r} already exists") from exc

    async def update(self, session: AsyncSession, pk: uuid.UUID, **values: Any) -> User | None:
        """Overwrite columns on one user. Raises :class:`DuplicateEmailError` on email collision."""
        try:
            async with session.begin_nested():
                return await super().update(session, pk, **values)
        except IntegrityError as exc:
            raise DuplicateEmailError(f"email {values.get('email')!r} already exists") from exc
