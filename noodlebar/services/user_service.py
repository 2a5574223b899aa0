"""UserService — user directory: list, update, delete."""

from __future__ import annotations

import uuid

import structlog
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from noodlebar.dao.user_dao import DuplicateEmailError, UserDAO
from noodlebar.models.user import User
from noodlebar.services import ConflictError, NotFoundError, PersistenceError, ValidationError
from noodlebar.services.validation import any_missing

log = structlog.get_logger(__name__)


class UserService:
    """Stateless service for reading and editing user records."""

    def __init__(self, user_dao: UserDAO) -> None:
        self._user_dao = user_dao

    async def list(self, session: AsyncSession) -> list[User]:
        """Return every user, unfiltered and unpaginated."""
        try:
            return await self._user_dao.list_all(session)
        except SQLAlchemyError as exc:
            log.exception("user.list_failed")
            raise PersistenceError("Error fetching users", detail=str(exc)) from exc

    async def update(
        self,
        session: AsyncSession,
        user_id: uuid.UUID,
        *,
        first_name: str | None,
        last_name: str | None,
        email: str | None,
    ) -> User:
        """Overwrite the name and email of one user. The password hash is never touched.

        Raises :class:`ValidationError` if a field is missing,
        :class:`NotFoundError` if the user does not exist, and
        :class:`ConflictError` if the email belongs to another user.
        """
        if any_missing(first_name, last_name, email):
            raise ValidationError("All fields are required")

        try:
            user = await self._user_dao.update(
                session,
                user_id,
                first_name=first_name,
                last_name=last_name,
                email=email,
            )
        except DuplicateEmailError as exc:
            raise ConflictError("Email already exists") from exc
        except SQLAlchemyError as exc:
            log.exception("user.update_failed", user_id=str(user_id))
            raise PersistenceError("Error updating user", detail=str(exc)) from exc

        if user is None:
            raise NotFoundError("User not found")
        log.info("user.updated", user_id=str(user_id))
        return user

    async def delete(self, session: AsyncSession, user_id: uuid.UUID) -> None:
        """Remove a user permanently.

        Raises :class:`NotFoundError` if the user does not exist.
        """
        try:
            deleted = await self._user_dao.delete(session, user_id)
        except SQLAlchemyError as exc:
            log.exception("user.delete_failed", user_id=str(user_id))
            raise PersistenceError("Error deleting user", detail=str(exc)) from exc

        if not deleted:
            raise NotFoundError("User not found")
        log.info("user.deleted", user_id=str(user_id))
