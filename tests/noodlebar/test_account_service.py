"""Tests for AccountService."""

import uuid
from unittest.mock import AsyncMock

import bcrypt
import pytest
from sqlalchemy.exc import OperationalError

from noodlebar.dao.user_dao import DuplicateEmailError, UserDAO
from noodlebar.models.user import User
from noodlebar.services import ConflictError, PersistenceError, ValidationError
from noodlebar.services.account_service import AccountService
from noodlebar.services.passwords import PasswordHasher


def _make_service() -> tuple[AccountService, UserDAO]:
    dao = UserDAO()
    dao.get_by_email = AsyncMock(return_value=None)
    dao.create = AsyncMock(side_effect=lambda _session, **values: User(id=uuid.uuid4(), **values))
    return AccountService(dao, PasswordHasher(rounds=4)), dao


VALID = {
    "first_name": "Jo",
    "last_name": "Lin",
    "email": "jo@example.com",
    "password": "secret1",
}


class TestRegister:
    async def test_success_stores_hash(self):
        service, dao = _make_service()
        user = await service.register(AsyncMock(), **VALID)

        assert user.email == "jo@example.com"
        assert user.first_name == "Jo"
        assert user.last_name == "Lin"
        assert user.password_hash != "secret1"
        assert bcrypt.checkpw(b"secret1", user.password_hash.encode())
        dao.get_by_email.assert_awaited_once()
        dao.create.assert_awaited_once()
        assert "password" not in dao.create.call_args.kwargs

    @pytest.mark.parametrize("field", ["first_name", "last_name", "email", "password"])
    @pytest.mark.parametrize("blank", [None, "", "  "])
    async def test_missing_field(self, field, blank):
        service, dao = _make_service()
        with pytest.raises(ValidationError, match="Please fill all the fields"):
            await service.register(AsyncMock(), **{**VALID, field: blank})
        dao.create.assert_not_awaited()

    @pytest.mark.parametrize("email", ["a@b", "noatsign.com", "jo@example.c", "jo@@x.com"])
    async def test_malformed_email(self, email):
        service, dao = _make_service()
        with pytest.raises(ValidationError, match="Please provide a valid email address"):
            await service.register(AsyncMock(), **{**VALID, "email": email})
        dao.get_by_email.assert_not_awaited()

    @pytest.mark.parametrize(
        "overrides",
        [{}, {"first_name": "Other"}, {"password": "different"}, {"last_name": "X"}],
    )
    async def test_existing_email_conflicts(self, overrides):
        service, dao = _make_service()
        dao.get_by_email = AsyncMock(return_value=User(id=uuid.uuid4(), email="jo@example.com"))
        with pytest.raises(ConflictError, match="Email already exists"):
            await service.register(AsyncMock(), **{**VALID, **overrides})
        dao.create.assert_not_awaited()

    async def test_unique_index_race_conflicts(self):
        """Pre-check passes but the insert hits the unique index."""
        service, dao = _make_service()
        dao.create = AsyncMock(side_effect=DuplicateEmailError("dup"))
        with pytest.raises(ConflictError, match="Email already exists"):
            await service.register(AsyncMock(), **VALID)

    async def test_store_failure(self):
        service, dao = _make_service()
        dao.create = AsyncMock(side_effect=OperationalError("INSERT", {}, Exception("db down")))
        with pytest.raises(PersistenceError, match="Error creating user account") as excinfo:
            await service.register(AsyncMock(), **VALID)
        assert "db down" in excinfo.value.detail
