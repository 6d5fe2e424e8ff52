"""
Order-related enums for the orderfees package.
"""

from enum import Enum


class OrderType(Enum):
    """Order types known to the order model."""
    MARKET = "market"
    LIMIT = "limit"
    STOP_MARKET = "stop_market"
    STOP_LIMIT = "stop_limit"


class OrderDirection(Enum):
    """Order direction derived from the sign of the quantity."""
    BUY = "buy"
    SELL = "sell"
    HOLD = "hold"
