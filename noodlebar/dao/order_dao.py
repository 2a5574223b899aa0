"""OrderDAO — orders table operations.

Orders are append-only: the service layer only ever calls ``create``.
"""

from noodlebar.dao.base import BaseDAO
from noodlebar.models.order import Order


class OrderDAO(BaseDAO[Order]):
    model = Order
