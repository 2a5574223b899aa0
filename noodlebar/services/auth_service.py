"""AuthService — email/password credential check."""

from __future__ import annotations

import structlog
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from noodlebar.dao.user_dao import UserDAO
from noodlebar.services import AuthenticationError, PersistenceError, ValidationError
from noodlebar.services.passwords import PasswordHasher
from noodlebar.services.validation import any_missing

log = structlog.get_logger(__name__)

INVALID_CREDENTIALS = "Invalid credentials"


class AuthService:
    """Stateless authentication service.

    No token or session is issued; a successful login is only a yes.
    """

    def __init__(self, user_dao: UserDAO, hasher: PasswordHasher) -> None:
        self._user_dao = user_dao
        self._hasher = hasher

    async def login(self, session: AsyncSession, email: str | None, password: str | None) -> None:
        """Verify credentials. Returns None on success.

        Raises :class:`AuthenticationError` on invalid credentials.
        Does not distinguish between "user not found" and "wrong password".
        """
        if any_missing(email, password):
            raise ValidationError("Email and password are required")

        try:
            user = await self._user_dao.get_by_email(session, email)
        except SQLAlchemyError as exc:
            log.exception("auth.lookup_failed")
            raise PersistenceError("Error logging in", detail=str(exc)) from exc

        if user is None:
            # Constant-time: run bcrypt even when user doesn't exist
            await self._hasher.verify(password, self._hasher.dummy_hash)
            log.info("auth.login_failed")
            raise AuthenticationError(INVALID_CREDENTIALS)
        if not await self._hasher.verify(password, user.password_hash):
            log.info("auth.login_failed")
            raise AuthenticationError(INVALID_CREDENTIALS)

        log.info("auth.login_succeeded", user_id=str(user.id))
