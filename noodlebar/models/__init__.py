"""SQLAlchemy ORM models — one file per table."""

from noodlebar.models.order import Order
from noodlebar.models.user import User

__all__ = [
    "User",
    "Order",
]
