# orderbook/schemas/order_products.py
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class OrderProductCreate(BaseModel):
    product_id: str = Field(min_length=1)
    quantity: int = Field(gt=0)


class OrderProductUpdate(BaseModel):
    quantity: int = Field(gt=0)


class OrderProductOut(BaseModel):
    id: str
    order_id: str
    product_id: str
    quantity: int
    created_at: Optional[datetime] = None
