"""
Minimal order model consumed by the fee models.
"""

from .order import Order, MarketOrder, LimitOrder, StopMarketOrder, create_order
from .properties import OrderProperties, BinanceOrderProperties
from .submission import OrderSubmissionData

__all__ = [
    "Order",
    "MarketOrder",
    "LimitOrder",
    "StopMarketOrder",
    "create_order",
    "OrderProperties",
    "BinanceOrderProperties",
    "OrderSubmissionData"
]
