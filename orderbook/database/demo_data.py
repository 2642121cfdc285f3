# orderbook/database/demo_data.py
import logging
from decimal import Decimal
from typing import Dict

from sqlalchemy.orm import sessionmaker

from orderbook.database.session import Base, unit_of_work
from orderbook.models import Order, Product, User

logger = logging.getLogger(__name__)

DEMO_USER_ID = "user-demo"
DEMO_ORDER_ID = "order-1"
DEMO_PRODUCTS = [
    ("prod-A", "Espresso beans", "coffee", Decimal("12.50")),
    ("prod-B", "Milk frother", "equipment", Decimal("39.90")),
    ("prod-C", "Paper cups", "supplies", Decimal("4.25")),
]


def seed_demo_data(session_factory: sessionmaker) -> Dict[str, str]:
    """Create the tables plus a demo user, products and one open order. Safe to rerun."""
    with unit_of_work(session_factory) as db:
        Base.metadata.create_all(bind=db.connection())

        if db.get(User, DEMO_USER_ID) is not None:
            logger.info("Demo data already present")
            return {"user_id": DEMO_USER_ID, "order_id": DEMO_ORDER_ID}

        db.add(User(
            id=DEMO_USER_ID,
            first_name="Demo",
            last_name="User",
            user_name="demo",
            email="demo@example.com",
            password="demo-password",
        ))
        for pid, name, category, price in DEMO_PRODUCTS:
            db.add(Product(id=pid, name=name, category=category, price=price))
        db.flush()
        db.add(Order(id=DEMO_ORDER_ID, user_id=DEMO_USER_ID, is_done=False))

    logger.info("Created demo user, %d products and order %s", len(DEMO_PRODUCTS), DEMO_ORDER_ID)
    return {"user_id": DEMO_USER_ID, "order_id": DEMO_ORDER_ID}


if __name__ == "__main__":
    from orderbook.database.session import get_session_factory

    logging.basicConfig(level=logging.INFO)
    seed_demo_data(get_session_factory())
