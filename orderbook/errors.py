# orderbook/errors.py
"""
Failures raised by the query layer.

Guard rejections and missing rows are not here: those come back as
``Outcome.ORDER_CLOSED`` / ``Outcome.NOT_FOUND`` on a ``LedgerResult``.
"""
from typing import Optional


class OrderbookError(Exception):
    """Base class for everything the query layer raises."""


class LookupFailure(OrderbookError):
    """The status of an order could not be determined."""

    def __init__(self, order_id: str, reason: str, missing: bool = False):
        super().__init__(f"Unable to check status of order {order_id}: {reason}")
        self.order_id = order_id
        self.reason = reason
        self.missing = missing


class ConstraintViolation(OrderbookError):
    """The store rejected a mutation (duplicate line item, bad foreign key, ...)."""


class StoreFailure(OrderbookError):
    """Any other error coming from the pool or from statement execution."""


class OperationTimeout(StoreFailure):
    def __init__(self, timeout: Optional[float], message: Optional[str] = None):
        super().__init__(message or f"Operation exceeded its deadline of {timeout}s")
        self.timeout = timeout
