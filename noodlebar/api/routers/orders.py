"""Orders router."""

from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from noodlebar.api.deps import get_order_service, get_session
from noodlebar.api.schemas.common import Envelope
from noodlebar.api.schemas.order import OrderRequest, OrderResponse
from noodlebar.services.order_service import OrderService

router = APIRouter()


@router.post(
    "/orders",
    status_code=201,
    response_model=Envelope[OrderResponse],
    response_model_exclude_none=True,
)
async def place_order(
    body: OrderRequest,
    session: AsyncSession = Depends(get_session),
    svc: OrderService = Depends(get_order_service),
) -> Envelope[OrderResponse]:
    order = await svc.place_order(
        session,
        title=body.title,
        price=body.price,
        quantity=body.quantity,
        noodle_type=body.noodle_type,
    )
    return Envelope[OrderResponse](
        message="Order placed successfully!",
        status=True,
        data=OrderResponse.model_validate(order),
    )
