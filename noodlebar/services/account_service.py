"""AccountService — user signup."""

from __future__ import annotations

import structlog
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from noodlebar.dao.user_dao import DuplicateEmailError, UserDAO
from noodlebar.models.user import User
from noodlebar.services import ConflictError, PersistenceError, ValidationError
from noodlebar.services.passwords import PasswordHasher
from noodlebar.services.validation import any_missing, is_valid_email

log = structlog.get_logger(__name__)


class AccountService:
    """Stateless service that creates user accounts."""

    def __init__(self, user_dao: UserDAO, hasher: PasswordHasher) -> None:
        self._user_dao = user_dao
        self._hasher = hasher

    async def register(
        self,
        session: AsyncSession,
        *,
        first_name: str | None,
        last_name: str | None,
        email: str | None,
        password: str | None,
    ) -> User:
        """Validate signup input, hash the password, and persist a new user.

        Raises :class:`ValidationError` for missing fields or a malformed
        email, :class:`ConflictError` if the email is taken, and
        :class:`PersistenceError` if the store fails.

        The returned ORM object still carries ``password_hash``; response
        schemas must not serialize it.
        """
        if any_missing(first_name, last_name, email, password):
            raise ValidationError("Please fill all the fields")
        if not is_valid_email(email):
            raise ValidationError("Please provide a valid email address")

        try:
            if await self._user_dao.get_by_email(session, email) is not None:
                raise ConflictError("Email already exists")

            password_hash = await self._hasher.hash(password)
            user = await self._user_dao.create(
                session,
                first_name=first_name,
                last_name=last_name,
                email=email,
                password_hash=password_hash,
            )
        except DuplicateEmailError as exc:
            # lost the race against a concurrent signup; the unique index caught it
            raise ConflictError("Email already exists") from exc
        except SQLAlchemyError as exc:
            log.exception("account.register_failed")
            raise PersistenceError("Error creating user account", detail=str(exc)) from exc

        log.info("account.registered", user_id=str(user.id))
        return user
