"""
Fee-related enums for the orderfees package.
"""

from enum import Enum


class LiquidityRole(Enum):
    """Whether an order adds liquidity to the book or removes it."""
    MAKER = "maker"
    TAKER = "taker"


class OrderClassification(Enum):
    """
    Outcome of the maker/taker decision for one order.

    Each member maps to exactly one liquidity role.
    """
    MARKET = "market"
    LIMIT_POST_ONLY = "limit_post_only"
    LIMIT_CROSSING = "limit_crossing"
    LIMIT_RESTING = "limit_resting"

    @property
    def liquidity(self) -> LiquidityRole:
        if self in (OrderClassification.LIMIT_POST_ONLY, OrderClassification.LIMIT_RESTING):
            return LiquidityRole.MAKER
        return LiquidityRole.TAKER

    @property
    def is_maker(self) -> bool:
        return self.liquidity is LiquidityRole.MAKER
