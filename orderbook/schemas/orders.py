# orderbook/schemas/orders.py
from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from .order_products import OrderProductOut


class OrderCreate(BaseModel):
    user_id: str = Field(min_length=1)
    # caller-assigned identifier; the store generates one when omitted
    id: Optional[str] = Field(default=None, min_length=1, max_length=36)


class OrderStatusUpdate(BaseModel):
    is_done: bool


class OrderOut(BaseModel):
    id: str
    user_id: str
    is_done: bool
    created_at: Optional[datetime] = None
    done_at: Optional[datetime] = None
    items: List[OrderProductOut] = []
