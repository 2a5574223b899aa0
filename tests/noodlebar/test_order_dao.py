"""Tests for OrderDAO."""

import pytest

from noodlebar.dao.order_dao import OrderDAO
from noodlebar.models.order import Order


@pytest.fixture
def dao():
    return OrderDAO()


class TestCreate:
    async def test_persists_all_fields(self, dao, session):
        order = await dao.create(
            session, title="Spicy Ramen", price=12.5, quantity=2, noodle_type="ramen"
        )
        assert order.id is not None
        fetched = await session.get(Order, order.id)
        assert fetched.title == "Spicy Ramen"
        assert fetched.price == 12.5
        assert fetched.quantity == 2
        assert fetched.noodle_type == "ramen"

    async def test_each_create_adds_one_row(self, dao, session):
        await dao.create(session, title="A", price=1.0, quantity=1, noodle_type="udon")
        await dao.create(session, title="B", price=2.0, quantity=1, noodle_type="soba")
        orders = await dao.list_all(session)
        assert sorted(o.title for o in orders) == ["A", "B"]
