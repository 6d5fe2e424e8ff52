from dataclasses import dataclass
from decimal import Decimal
from typing import Optional, Tuple

from orderfees.core.exceptions import InvalidFeeContextError
from orderfees.orders import Order, OrderSubmissionData
from orderfees.securities import Security


@dataclass(frozen=True)
class OrderFeeContext:
    """
    Everything a fee model may look at to price one order.

    Parameters
    ----------
    security : `Security`
        The instrument the order trades
    order : `Order`
        The order being priced
    submission_data : `OrderSubmissionData`, optional
        Quote captured when the order was accepted. When omitted the
        live security quote is used; see `from_order` to take the
        snapshot the order carries.
    """
    security: Security
    order: Order
    submission_data: Optional[OrderSubmissionData] = None

    def __post_init__(self):
        if self.security is None:
            raise InvalidFeeContextError("security")
        if self.order is None:
            raise InvalidFeeContextError("order")

    @classmethod
    def from_order(cls, security: Security, order: Order) -> "OrderFeeContext":
        """Context using the submission data recorded on the order, if any."""
        if order is None:
            raise InvalidFeeContextError("order")
        return cls(security, order, order.submission_data)

    @property
    def quote_currency(self) -> str:
        return self.security.quote_currency

    def prevailing_quote(self) -> Tuple[Optional[Decimal], Optional[Decimal]]:
        """
        Return the (bid, ask) the order is judged against.

        The submission snapshot wins whenever it is present; the live
        security quote is only a fallback.
        """
        if self.submission_data is not None:
            return self.submission_data.bid_price, self.submission_data.ask_price
        return self.security.bid_price, self.security.ask_price
