# orderbook/routers/deps.py
# Components per request, built on the shared session factory.
# Tests swap these out with app.dependency_overrides.
from orderbook.config import get_settings
from orderbook.database.session import get_session_factory
from orderbook.queries import (
    DashboardQueries,
    OrderProductQueries,
    OrderQueries,
    OrderStatusQueries,
    UserQueries,
)


def get_order_product_queries() -> OrderProductQueries:
    return OrderProductQueries(get_session_factory(), default_timeout=get_settings().statement_timeout)


def get_order_queries() -> OrderQueries:
    return OrderQueries(get_session_factory(), default_timeout=get_settings().statement_timeout)


def get_order_status_queries() -> OrderStatusQueries:
    return OrderStatusQueries(get_session_factory(), default_timeout=get_settings().statement_timeout)


def get_user_queries() -> UserQueries:
    return UserQueries(get_session_factory(), default_timeout=get_settings().statement_timeout)


def get_dashboard_queries() -> DashboardQueries:
    return DashboardQueries(get_session_factory(), default_timeout=get_settings().statement_timeout)
