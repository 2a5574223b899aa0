"""Auth router — signup and login."""

from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from noodlebar.api.deps import get_account_service, get_auth_service, get_session
from noodlebar.api.schemas.common import Envelope
from noodlebar.api.schemas.user import LoginRequest, SignupRequest, UserResponse
from noodlebar.services.account_service import AccountService
from noodlebar.services.auth_service import AuthService

router = APIRouter()


@router.post("/signup", response_model=Envelope[UserResponse], response_model_exclude_none=True)
async def signup(
    body: SignupRequest,
    session: AsyncSession = Depends(get_session),
    svc: AccountService = Depends(get_account_service),
) -> Envelope[UserResponse]:
    user = await svc.register(
        session,
        first_name=body.first_name,
        last_name=body.last_name,
        email=body.email,
        password=body.password,
    )
    return Envelope[UserResponse](
        message="User account created",
        status=True,
        data=UserResponse.model_validate(user),
    )


@router.post("/login", response_model=Envelope[None], response_model_exclude_none=True)
async def login(
    body: LoginRequest,
    session: AsyncSession = Depends(get_session),
    auth: AuthService = Depends(get_auth_service),
) -> Envelope[None]:
    await auth.login(session, body.email, body.password)
    return Envelope[None](message="Login successful", status=True)
