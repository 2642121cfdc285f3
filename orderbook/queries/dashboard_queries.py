# orderbook/queries/dashboard_queries.py
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.orm import sessionmaker

from orderbook.database.session import unit_of_work
from orderbook.models.order_model import Order
from orderbook.models.order_product_model import OrderProduct
from orderbook.models.product_model import Product
from orderbook.schemas.dashboard import ProductsInOrderOut


class DashboardQueries:
    def __init__(self, session_factory: sessionmaker, default_timeout: Optional[float] = None):
        self._session_factory = session_factory
        self._default_timeout = default_timeout

    def products_in_orders(self, timeout: Optional[float] = None) -> List[ProductsInOrderOut]:
        """Every line item joined with its order and product, priced."""
        stmt = (
            select(
                OrderProduct.order_id,
                Order.is_done.label("is_order_done"),
                Product.name.label("product_name"),
                Product.category.label("product_category"),
                Product.price.label("product_price"),
                OrderProduct.quantity.label("product_quantity"),
                (Product.price * OrderProduct.quantity).label("total_price"),
            )
            .join(Order, Order.id == OrderProduct.order_id)
            .join(Product, Product.id == OrderProduct.product_id)
            .order_by(OrderProduct.order_id, OrderProduct.created_at)
        )
        if timeout is None:
            timeout = self._default_timeout
        with unit_of_work(self._session_factory, timeout) as db:
            rows = db.execute(stmt).all()
        return [
            ProductsInOrderOut(
                order_id=r.order_id,
                is_order_done=bool(r.is_order_done),
                product_name=r.product_name,
                product_category=r.product_category,
                product_price=float(r.product_price),
                product_quantity=r.product_quantity,
                total_price=float(r.total_price),
            )
            for r in rows
        ]
