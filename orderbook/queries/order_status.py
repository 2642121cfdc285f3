# orderbook/queries/order_status.py
from typing import Optional

from sqlalchemy import Select, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from orderbook.database.session import unit_of_work
from orderbook.errors import LookupFailure, OperationTimeout, StoreFailure
from orderbook.models.order_model import Order


def status_statement(order_id: str, lock: bool = False) -> Select:
    stmt = select(Order.is_done).where(Order.id == order_id)
    if lock:
        stmt = stmt.with_for_update()
    return stmt


def read_status(db: Session, order_id: str, lock: bool = False) -> bool:
    """
    Return the order's ``is_done`` flag using the caller's transaction.

    With ``lock=True`` the order row stays locked (FOR UPDATE) until that
    transaction ends, so a concurrent finalize waits for the caller's mutation.
    Raises LookupFailure when the order does not exist or cannot be read.
    """
    try:
        row = db.execute(status_statement(order_id, lock)).first()
    except SQLAlchemyError as e:
        raise LookupFailure(order_id, str(e)) from e
    if row is None:
        raise LookupFailure(order_id, "order does not exist", missing=True)
    return bool(row.is_done)


class OrderStatusQueries:
    def __init__(self, session_factory: sessionmaker, default_timeout: Optional[float] = None):
        self._session_factory = session_factory
        self._default_timeout = default_timeout

    def is_finalized(self, order_id: str, timeout: Optional[float] = None) -> bool:
        if timeout is None:
            timeout = self._default_timeout
        try:
            with unit_of_work(self._session_factory, timeout) as db:
                return read_status(db, order_id)
        except (LookupFailure, OperationTimeout):
            raise
        except StoreFailure as e:
            # pool checkout or commit failed outside the lookup itself
            raise LookupFailure(order_id, str(e)) from e
