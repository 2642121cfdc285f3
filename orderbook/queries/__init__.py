# orderbook/queries/__init__.py
from .results import LedgerResult, Outcome
from .order_status import OrderStatusQueries, read_status
from .order_product_queries import OrderProductQueries
from .order_queries import OrderQueries
from .user_queries import UserQueries
from .dashboard_queries import DashboardQueries

__all__ = [
    "LedgerResult", "Outcome",
    "OrderStatusQueries", "read_status",
    "OrderProductQueries",
    "OrderQueries",
    "UserQueries",
    "DashboardQueries",
]
