"""
============================================================================
Shared fixtures
============================================================================

Every test gets its own file-backed SQLite store (file-backed so several
threads can hold their own connections), seeded with the demo user, the
products prod-A / prod-B / prod-C and the open order "order-1".
============================================================================
"""

from typing import List, Tuple

import pytest
from sqlalchemy import select

from orderbook.database.demo_data import DEMO_ORDER_ID, DEMO_USER_ID, seed_demo_data
from orderbook.database.session import Base, make_engine, make_session_factory
from orderbook.models import OrderProduct
from orderbook.queries import (
    DashboardQueries,
    OrderProductQueries,
    OrderQueries,
    OrderStatusQueries,
    UserQueries,
)


@pytest.fixture
def engine(tmp_path):
    engine = make_engine(f"sqlite:///{tmp_path / 'orderbook.db'}")
    Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    factory = make_session_factory(engine)
    seed_demo_data(factory)
    return factory


@pytest.fixture
def order_id(session_factory) -> str:
    return DEMO_ORDER_ID


@pytest.fixture
def user_id(session_factory) -> str:
    return DEMO_USER_ID


@pytest.fixture
def ledger(session_factory) -> OrderProductQueries:
    return OrderProductQueries(session_factory)


@pytest.fixture
def orders(session_factory) -> OrderQueries:
    return OrderQueries(session_factory)


@pytest.fixture
def oracle(session_factory) -> OrderStatusQueries:
    return OrderStatusQueries(session_factory)


@pytest.fixture
def users(session_factory) -> UserQueries:
    return UserQueries(session_factory)


@pytest.fixture
def dashboard(session_factory) -> DashboardQueries:
    return DashboardQueries(session_factory)


def snapshot(session_factory) -> List[Tuple[str, str, str, int]]:
    """All line-item rows, for before/after comparisons."""
    with session_factory() as db:
        rows = db.execute(
            select(OrderProduct.id, OrderProduct.order_id, OrderProduct.product_id, OrderProduct.quantity)
            .order_by(OrderProduct.id)
        ).all()
    return [tuple(r) for r in rows]


@pytest.fixture
def take_snapshot(session_factory):
    return lambda: snapshot(session_factory)
