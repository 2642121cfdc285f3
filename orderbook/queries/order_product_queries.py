# orderbook/queries/order_product_queries.py
import logging
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.orm import Session, sessionmaker

from orderbook.database.session import unit_of_work
from orderbook.models.order_product_model import OrderProduct
from orderbook.queries.order_status import read_status
from orderbook.queries.results import LedgerResult
from orderbook.schemas.order_products import OrderProductOut

logger = logging.getLogger(__name__)


def _to_out(item: OrderProduct) -> OrderProductOut:
    return OrderProductOut(
        id=item.id,
        order_id=item.order_id,
        product_id=item.product_id,
        quantity=item.quantity,
        created_at=item.created_at,
    )


class OrderProductQueries:
    """
    Line items of an order.

    Reads are always allowed. add/update/delete first read the order status
    with the order row locked, and change nothing once the order is done;
    the status read and the write share one transaction.

    ``fixed_item_id`` makes every inserted line item use that id. It exists for
    reproducible fixtures and is never set from the environment.
    """

    def __init__(
        self,
        session_factory: sessionmaker,
        fixed_item_id: Optional[str] = None,
        default_timeout: Optional[float] = None,
    ):
        self._session_factory = session_factory
        self._fixed_item_id = fixed_item_id
        self._default_timeout = default_timeout

    def _unit(self, timeout: Optional[float]):
        return unit_of_work(
            self._session_factory,
            timeout if timeout is not None else self._default_timeout,
        )

    @staticmethod
    def _find(db: Session, order_id: str, product_id: str, lock: bool = False) -> Optional[OrderProduct]:
        stmt = select(OrderProduct).where(
            OrderProduct.order_id == order_id,
            OrderProduct.product_id == product_id,
        )
        if lock:
            stmt = stmt.with_for_update()
        return db.execute(stmt).scalar_one_or_none()

    @staticmethod
    def _order_closed(action: str, order_id: str, product_id: str) -> LedgerResult:
        logger.info("Unable to %s product %s in order %s: order is done", action, product_id, order_id)
        return LedgerResult.order_closed()

    def add_product(
        self, order_id: str, product_id: str, quantity: int, timeout: Optional[float] = None
    ) -> LedgerResult:
        with self._unit(timeout) as db:
            if read_status(db, order_id, lock=True):
                return self._order_closed("add", order_id, product_id)

            item = OrderProduct(order_id=order_id, product_id=product_id, quantity=quantity)
            if self._fixed_item_id is not None:
                item.id = self._fixed_item_id
            db.add(item)
            db.flush()
            db.refresh(item)
            return LedgerResult.success(_to_out(item))

    def show_product(
        self, order_id: str, product_id: str, timeout: Optional[float] = None
    ) -> Optional[OrderProductOut]:
        with self._unit(timeout) as db:
            item = self._find(db, order_id, product_id)
            return _to_out(item) if item else None

    def show_all_products(self, order_id: str, timeout: Optional[float] = None) -> List[OrderProductOut]:
        with self._unit(timeout) as db:
            items = db.execute(
                select(OrderProduct)
                .where(OrderProduct.order_id == order_id)
                .order_by(OrderProduct.created_at, OrderProduct.id)
            ).scalars().all()
            return [_to_out(it) for it in items]

    def update_product_quantity(
        self, order_id: str, product_id: str, quantity: int, timeout: Optional[float] = None
    ) -> LedgerResult:
        with self._unit(timeout) as db:
            if read_status(db, order_id, lock=True):
                return self._order_closed("update", order_id, product_id)

            item = self._find(db, order_id, product_id, lock=True)
            if item is None:
                return LedgerResult.not_found()
            item.quantity = quantity
            db.flush()
            db.refresh(item)
            return LedgerResult.success(_to_out(item))

    def delete_product(self, order_id: str, product_id: str, timeout: Optional[float] = None) -> LedgerResult:
        with self._unit(timeout) as db:
            if read_status(db, order_id, lock=True):
                return self._order_closed("delete", order_id, product_id)

            item = self._find(db, order_id, product_id, lock=True)
            if item is None:
                return LedgerResult.not_found()
            last_known = _to_out(item)
            db.delete(item)
            db.flush()
            return LedgerResult.success(last_known)
