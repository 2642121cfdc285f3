# orderbook/schemas/dashboard.py
from typing import Optional

from pydantic import BaseModel


class ProductsInOrderOut(BaseModel):
    order_id: str
    is_order_done: bool
    product_name: str
    product_category: Optional[str] = None
    product_price: float
    product_quantity: int
    total_price: float
