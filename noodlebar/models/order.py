"""orders table (append-only)."""

import uuid

from sqlalchemy import Float, Integer, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from noodlebar.core.database import Base, TimestampMixin


class Order(TimestampMixin, Base):
    __tablename__ = "orders"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    title: Mapped[str] = mapped_column(Text, nullable=False)
    price: Mapped[float] = mapped_column(Float, nullable=False)
    quantity: Mapped[int] = mapped_column(Integer, nullable=False)
    noodle_type: Mapped[str] = mapped_column(Text, nullable=False)
