"""Order request/response schemas."""

from __future__ import annotations

import uuid
from datetime import datetime

from pydantic import Field

from noodlebar.api.schemas.common import CamelModel
from noodlebar.services.validation import MAX_QUANTITY


class OrderRequest(CamelModel):
    title: str | None = None
    price: float | None = Field(None, allow_inf_nan=False)
    quantity: int | None = Field(None, le=MAX_QUANTITY)
    noodle_type: str | None = None


class OrderResponse(CamelModel):
    id: uuid.UUID
    title: str
    price: float
    quantity: int
    noodle_type: str
    created_at: datetime
    updated_at: datetime
