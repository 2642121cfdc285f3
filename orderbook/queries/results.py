# orderbook/queries/results.py
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional


class Outcome(str, Enum):
    OK = "ok"
    ORDER_CLOSED = "order_closed"
    NOT_FOUND = "not_found"


@dataclass(frozen=True)
class LedgerResult:
    """What a mutating call did: OK with the row, or why nothing changed."""

    outcome: Outcome
    item: Optional[Any] = None

    @property
    def ok(self) -> bool:
        return self.outcome is Outcome.OK

    @classmethod
    def success(cls, item: Any) -> "LedgerResult":
        return cls(Outcome.OK, item)

    @classmethod
    def order_closed(cls) -> "LedgerResult":
        return cls(Outcome.ORDER_CLOSED)

    @classmethod
    def not_found(cls) -> "LedgerResult":
        return cls(Outcome.NOT_FOUND)
