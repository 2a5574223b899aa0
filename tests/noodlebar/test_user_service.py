"""Tests for UserService."""

import uuid
from unittest.mock import AsyncMock

import pytest
from sqlalchemy.exc import OperationalError

from noodlebar.dao.user_dao import DuplicateEmailError, UserDAO
from noodlebar.models.user import User
from noodlebar.services import ConflictError, NotFoundError, PersistenceError, ValidationError
from noodlebar.services.user_service import UserService

USER_ID = uuid.uuid4()


def _user(**overrides) -> User:
    values = {
        "id": USER_ID,
        "first_name": "Jo",
        "last_name": "Lin",
        "email": "jo@example.com",
        "password_hash": "hash",
    }
    values.update(overrides)
    return User(**values)


def _make_service() -> tuple[UserService, UserDAO]:
    dao = UserDAO()
    return UserService(dao), dao


def _db_error() -> OperationalError:
    return OperationalError("stmt", {}, Exception("connection lost"))


class TestList:
    async def test_returns_all(self):
        service, dao = _make_service()
        users = [_user(), _user(id=uuid.uuid4(), email="b@example.com")]
        dao.list_all = AsyncMock(return_value=users)
        assert await service.list(AsyncMock()) == users

    async def test_store_failure(self):
        service, dao = _make_service()
        dao.list_all = AsyncMock(side_effect=_db_error())
        with pytest.raises(PersistenceError, match="Error fetching users"):
            await service.list(AsyncMock())


class TestUpdate:
    async def test_success_passes_only_three_fields(self):
        service, dao = _make_service()
        updated = _user(first_name="Joanna")
        dao.update = AsyncMock(return_value=updated)

        result = await service.update(
            AsyncMock(), USER_ID, first_name="Joanna", last_name="Lin", email="jo@example.com"
        )

        assert result is updated
        args = dao.update.call_args
        assert args.args[1] == USER_ID
        assert args.kwargs == {
            "first_name": "Joanna",
            "last_name": "Lin",
            "email": "jo@example.com",
        }

    @pytest.mark.parametrize("field", ["first_name", "last_name", "email"])
    async def test_missing_field(self, field):
        service, dao = _make_service()
        dao.update = AsyncMock()
        fields = {"first_name": "Jo", "last_name": "Lin", "email": "jo@example.com", field: ""}
        with pytest.raises(ValidationError, match="All fields are required"):
            await service.update(AsyncMock(), USER_ID, **fields)
        dao.update.assert_not_awaited()

    async def test_not_found(self):
        service, dao = _make_service()
        dao.update = AsyncMock(return_value=None)
        with pytest.raises(NotFoundError, match="User not found"):
            await service.update(
                AsyncMock(), uuid.uuid4(), first_name="A", last_name="B", email="a@example.com"
            )

    async def test_email_conflict(self):
        service, dao = _make_service()
        dao.update = AsyncMock(side_effect=DuplicateEmailError("dup"))
        with pytest.raises(ConflictError, match="Email already exists"):
            await service.update(
                AsyncMock(), USER_ID, first_name="A", last_name="B", email="taken@example.com"
            )

    async def test_store_failure(self):
        service, dao = _make_service()
        dao.update = AsyncMock(side_effect=_db_error())
        with pytest.raises(PersistenceError, match="Error updating user"):
            await service.update(
                AsyncMock(), USER_ID, first_name="A", last_name="B", email="a@example.com"
            )


class TestDelete:
    async def test_success(self):
        service, dao = _make_service()
        dao.delete = AsyncMock(return_value=True)
        assert await service.delete(AsyncMock(), USER_ID) is None
        dao.delete.assert_awaited_once()

    async def test_not_found(self):
        service, dao = _make_service()
        dao.delete = AsyncMock(return_value=False)
        with pytest.raises(NotFoundError, match="User not found"):
            await service.delete(AsyncMock(), uuid.uuid4())

    async def test_store_failure(self):
        service, dao = _make_service()
        dao.delete = AsyncMock(side_effect=_db_error())
        with pytest.raises(PersistenceError, match="Error deleting user") as excinfo:
            await service.delete(AsyncMock(), USER_ID)
        assert "connection lost" in excinfo.value.detail
