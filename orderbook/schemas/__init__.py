# orderbook/schemas/__init__.py

# orders
from .orders import OrderCreate, OrderStatusUpdate, OrderOut

# order products (line items)
from .order_products import OrderProductCreate, OrderProductUpdate, OrderProductOut

# users
from .users import UserCreate, UserUpdate, UserOut

# dashboard
from .dashboard import ProductsInOrderOut

__all__ = [
    # orders
    "OrderCreate", "OrderStatusUpdate", "OrderOut",
    # order products
    "OrderProductCreate", "OrderProductUpdate", "OrderProductOut",
    # users
    "UserCreate", "UserUpdate", "UserOut",
    # dashboard
    "ProductsInOrderOut",
]
