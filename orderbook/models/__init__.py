# orderbook/models/__init__.py
from .user_model import User
from .product_model import Product
from .order_model import Order
from .order_product_model import OrderProduct

__all__ = ["User", "Product", "Order", "OrderProduct"]
