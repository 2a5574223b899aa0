"""Users router — directory listing, update, delete."""

from __future__ import annotations

import uuid

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from noodlebar.api.deps import get_session, get_user_service
from noodlebar.api.schemas.common import Envelope
from noodlebar.api.schemas.user import UserResponse, UserUpdateRequest
from noodlebar.services.user_service import UserService

router = APIRouter()


@router.get("/users", response_model=Envelope[list[UserResponse]], response_model_exclude_none=True)
async def list_users(
    session: AsyncSession = Depends(get_session),
    svc: UserService = Depends(get_user_service),
) -> Envelope[list[UserResponse]]:
    users = await svc.list(session)
    return Envelope[list[UserResponse]](
        message="Users fetched successfully",
        status=True,
        data=[UserResponse.model_validate(u) for u in users],
    )


@router.put("/user/{user_id}", response_model=Envelope[UserResponse], response_model_exclude_none=True)
async def update_user(
    user_id: uuid.UUID,
    body: UserUpdateRequest,
    session: AsyncSession = Depends(get_session),
    svc: UserService = Depends(get_user_service),
) -> Envelope[UserResponse]:
    user = await svc.update(
        session,
        user_id,
        first_name=body.first_name,
        last_name=body.last_name,
        email=body.email,
    )
    return Envelope[UserResponse](
        message="User updated successfully",
        status=True,
        data=UserResponse.model_validate(user),
    )


@router.delete("/user/{user_id}", response_model=Envelope[None], response_model_exclude_none=True)
async def delete_user(
    user_id: uuid.UUID,
    session: AsyncSession = Depends(get_session),
    svc: UserService = Depends(get_user_service),
) -> Envelope[None]:
    await svc.delete(session, user_id)
    return Envelope[None](message="User deleted successfully", status=True)
