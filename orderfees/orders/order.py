import itertools
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Optional

from orderfees.core.enums import OrderType, OrderDirection
from orderfees.core.exceptions import ValidationError
from orderfees.securities.security import Number, to_decimal
from .properties import OrderProperties
from .submission import OrderSubmissionData


_order_ids = itertools.count(1)


@dataclass
class Order(ABC):
    """
    A request to trade a quantity of a security.

    The sign of the quantity carries the side: positive buys, negative sells.
    """
    symbol: str
    quantity: Decimal
    properties: OrderProperties = field(default_factory=OrderProperties)
    submission_data: Optional[OrderSubmissionData] = None
    id: int = field(default_factory=lambda: next(_order_ids))

    def __post_init__(self):
        self.quantity = to_decimal(self.quantity)

    @property
    @abstractmethod
    def type(self) -> OrderType:
        """Kind of order, fixed by the concrete class."""

    @property
    def direction(self) -> OrderDirection:
        if self.quantity > 0:
            return OrderDirection.BUY
        if self.quantity < 0:
            return OrderDirection.SELL
        return OrderDirection.HOLD

    @property
    def absolute_quantity(self) -> Decimal:
        return abs(self.quantity)


@dataclass
class MarketOrder(Order):
    """Order filled immediately at the prevailing price."""

    @property
    def type(self) -> OrderType:
        return OrderType.MARKET


@dataclass
class LimitOrder(Order):
    """Order that fills only at `limit_price` or better."""
    limit_price: Decimal = None

    def __post_init__(self):
        super().__post_init__()
        if self.limit_price is None:
            raise ValidationError("limit_price", message="Limit orders require a limit price")
        self.limit_price = to_decimal(self.limit_price)
        if self.limit_price <= 0:
            raise ValidationError("limit_price", str(self.limit_price), "Limit price must be positive")

    @property
    def type(self) -> OrderType:
        return OrderType.LIMIT


@dataclass
class StopMarketOrder(Order):
    """Market order released once the price trades through `stop_price`."""
    stop_price: Decimal = None

    def __post_init__(self):
        super().__post_init__()
        self.stop_price = to_decimal(self.stop_price)

    @property
    def type(self) -> OrderType:
        return OrderType.STOP_MARKET


def create_order(
    order_type: OrderType,
    symbol: str,
    quantity: Number,
    limit_price: Optional[Number] = None,
    stop_price: Optional[Number] = None,
    properties: Optional[OrderProperties] = None,
    submission_data: Optional[OrderSubmissionData] = None
) -> Order:
    """
    Build an order of the given type.

    Raises
    ------
    ValidationError
        If the order type has no concrete order class
    """
    properties = properties or OrderProperties()
    if order_type is OrderType.MARKET:
        return MarketOrder(symbol, quantity, properties, submission_data)
    if order_type is OrderType.LIMIT:
        return LimitOrder(symbol, quantity, properties, submission_data, limit_price=limit_price)
    if order_type is OrderType.STOP_MARKET:
        return StopMarketOrder(symbol, quantity, properties, submission_data, stop_price=stop_price)
    raise ValidationError("order_type", getattr(order_type, "value", str(order_type)), "Unsupported order type")
