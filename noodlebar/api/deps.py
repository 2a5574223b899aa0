"""Dependency injection — database session and service handles.

Everything here reads from ``request.app.state``; the app factory and its
lifespan populate that state, so no engine or service lives at module level.
"""

from __future__ import annotations

from collections.abc import AsyncGenerator
from dataclasses import dataclass

from fastapi import Request
from sqlalchemy.ext.asyncio import AsyncSession

from noodlebar.core.config import Settings
from noodlebar.dao.order_dao import OrderDAO
from noodlebar.dao.user_dao import UserDAO
from noodlebar.services.account_service import AccountService
from noodlebar.services.auth_service import AuthService
from noodlebar.services.order_service import OrderService
from noodlebar.services.passwords import PasswordHasher
from noodlebar.services.user_service import UserService


@dataclass(frozen=True)
class Services:
    """Stateless service singletons wired to their DAOs."""

    account: AccountService
    auth: AuthService
    users: UserService
    orders: OrderService


def build_services(settings: Settings) -> Services:
    """Construct every service once, sharing DAOs and the password hasher."""
    user_dao = UserDAO()
    order_dao = OrderDAO()
    hasher = PasswordHasher(rounds=settings.bcrypt_rounds)
    return Services(
        account=AccountService(user_dao, hasher),
        auth=AuthService(user_dao, hasher),
        users=UserService(user_dao),
        orders=OrderService(order_dao),
    )


async def get_session(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """Yield a per-request session with automatic commit/rollback."""
    db = getattr(request.app.state, "db", None)
    if db is None or not db.is_open:
        raise RuntimeError("database is not open; the app lifespan has not run")
    async with db.session() as session:
        yield session


# ---------------------------------------------------------------------------
# Service getters (for Depends())
# ---------------------------------------------------------------------------


def get_account_service(request: Request) -> AccountService:
    return request.app.state.services.account


def get_auth_service(request: Request) -> AuthService:
    return request.app.state.services.auth


def get_user_service(request: Request) -> UserService:
    return request.app.state.services.users


def get_order_service(request: Request) -> OrderService:
    return request.app.state.services.orders
