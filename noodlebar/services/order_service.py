"""OrderService — order placement."""

from __future__ import annotations

import math

import structlog
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from noodlebar.dao.order_dao import OrderDAO
from noodlebar.models.order import Order
from noodlebar.services import PersistenceError, ValidationError
from noodlebar.services.validation import MAX_QUANTITY, any_missing

log = structlog.get_logger(__name__)


class OrderService:
    """Stateless service that records orders. Orders are never edited."""

    def __init__(self, order_dao: OrderDAO) -> None:
        self._order_dao = order_dao

    async def place_order(
        self,
        session: AsyncSession,
        *,
        title: str | None,
        price: float | None,
        quantity: int | None,
        noodle_type: str | None,
    ) -> Order:
        """Validate and persist one order.

        A zero price or quantity counts as missing; a non-finite price or a
        quantity beyond the column range is rejected. Raises
        :class:`ValidationError` on bad input and :class:`PersistenceError`
        if the store fails.
        """
        if any_missing(title, price, quantity, noodle_type):
            raise ValidationError("All fields are required.")
        if not math.isfinite(price):
            raise ValidationError("Price must be a finite number.")
        if price < 0 or quantity < 0:
            raise ValidationError("Price and quantity must be positive.")
        if quantity > MAX_QUANTITY:
            raise ValidationError("Quantity is too large.")

        try:
            order = await self._order_dao.create(
                session,
                title=title,
                price=price,
                quantity=quantity,
                noodle_type=noodle_type,
            )
        except SQLAlchemyError as exc:
            log.exception("order.place_failed")
            raise PersistenceError("Error placing order.", detail=str(exc)) from exc

        log.info("order.placed", order_id=str(order.id), noodle_type=noodle_type, quantity=quantity)
        return order
