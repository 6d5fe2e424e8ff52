"""
Core enums for the orderfees package.
"""

# Order enums
from .orders import (
    OrderType,
    OrderDirection
)

# Fee enums
from .fees import (
    LiquidityRole,
    OrderClassification
)

__all__ = [
    # Order enums
    'OrderType',
    'OrderDirection',

    # Fee enums
    'LiquidityRole',
    'OrderClassification'
]
