# orderbook/queries/order_queries.py
import logging
from typing import List, Optional

from sqlalchemy import Select, select
from sqlalchemy.orm import selectinload, sessionmaker

from orderbook.database.session import unit_of_work
from orderbook.models._ids import utcnow
from orderbook.models.order_model import Order
from orderbook.queries.order_product_queries import _to_out as _item_to_out
from orderbook.queries.results import LedgerResult
from orderbook.schemas.orders import OrderOut

logger = logging.getLogger(__name__)


def _to_out(o: Order) -> OrderOut:
    return OrderOut(
        id=o.id,
        user_id=o.user_id,
        is_done=bool(o.is_done),
        created_at=o.created_at,
        done_at=o.done_at,
        items=[_item_to_out(it) for it in sorted(o.items, key=lambda it: (it.created_at, it.id))],
    )


def order_statement(order_id: str, lock: bool = False) -> Select:
    stmt = select(Order).options(selectinload(Order.items)).where(Order.id == order_id)
    if lock:
        stmt = stmt.with_for_update(of=Order)
    return stmt


class OrderQueries:
    """Orders themselves. Finalizing is one-way: a done order is never reopened."""

    def __init__(self, session_factory: sessionmaker, default_timeout: Optional[float] = None):
        self._session_factory = session_factory
        self._default_timeout = default_timeout

    def _unit(self, timeout: Optional[float]):
        return unit_of_work(
            self._session_factory,
            timeout if timeout is not None else self._default_timeout,
        )

    @staticmethod
    def _load(db, order_id: str, lock: bool = False) -> Optional[Order]:
        return db.execute(order_statement(order_id, lock)).scalar_one_or_none()

    def create(self, user_id: str, order_id: Optional[str] = None, timeout: Optional[float] = None) -> OrderOut:
        with self._unit(timeout) as db:
            o = Order(user_id=user_id, is_done=False)
            if order_id is not None:
                o.id = order_id
            db.add(o)
            db.flush()
            db.refresh(o)
            return _to_out(o)

    def show(self, order_id: str, timeout: Optional[float] = None) -> Optional[OrderOut]:
        with self._unit(timeout) as db:
            o = self._load(db, order_id)
            return _to_out(o) if o else None

    def show_all(self, timeout: Optional[float] = None) -> List[OrderOut]:
        with self._unit(timeout) as db:
            orders = db.execute(
                select(Order).options(selectinload(Order.items)).order_by(Order.created_at, Order.id)
            ).scalars().all()
            return [_to_out(o) for o in orders]

    def update_status(self, order_id: str, is_done: bool, timeout: Optional[float] = None) -> LedgerResult:
        with self._unit(timeout) as db:
            o = self._load(db, order_id, lock=True)
            if o is None:
                return LedgerResult.not_found()
            if o.is_done and not is_done:
                logger.info("Refusing to reopen order %s: order is done", order_id)
                return LedgerResult.order_closed()
            if is_done and not o.is_done:
                o.is_done = True
                o.done_at = utcnow()
                db.flush()
                logger.info("Order %s finalized", order_id)
            return LedgerResult.success(_to_out(o))

    def delete(self, order_id: str, timeout: Optional[float] = None) -> LedgerResult:
        with self._unit(timeout) as db:
            o = self._load(db, order_id, lock=True)
            if o is None:
                return LedgerResult.not_found()
            if o.is_done:
                logger.info("Refusing to delete order %s: order is done", order_id)
                return LedgerResult.order_closed()
            last_known = _to_out(o)
            db.delete(o)
            db.flush()
            return LedgerResult.success(last_known)
