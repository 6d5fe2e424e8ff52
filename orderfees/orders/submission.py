from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

from orderfees.securities.security import Number, to_decimal


@dataclass(frozen=True)
class OrderSubmissionData:
    """
    Quote observed when the venue accepted an order.

    Fee models prefer these prices over the live security quote since the
    order was priced against the book as it was at submission.
    """
    bid_price: Optional[Decimal]
    ask_price: Optional[Decimal]
    mid_price: Optional[Decimal] = None

    @classmethod
    def from_prices(cls, bid_price: Number, ask_price: Number, mid_price: Number = None) -> "OrderSubmissionData":
        bid = to_decimal(bid_price)
        ask = to_decimal(ask_price)
        mid = to_decimal(mid_price)
        if mid is None and bid is not None and ask is not None:
            mid = (bid + ask) / 2
        return cls(bid, ask, mid)

    @classmethod
    def from_security(cls, security) -> "OrderSubmissionData":
        """Snapshot the current quote of a security."""
        return cls.from_prices(security.bid_price, security.ask_price)
