"""
Fee model system for trading operations.

Every fee model prices one order from an `OrderFeeContext` and returns an
`OrderFee` in the security's quote currency.
"""

from .order_fee import OrderFee
from .context import OrderFeeContext
from .base import FeeModel, get_order_fee
from .classification import classify_order, reference_price
from .zero_fee_model import ZeroFeeModel
from .percent_fee_model import PercentFeeModel
from .maker_taker_fee_model import MakerTakerFeeModel
from .binance_fee_model import BinanceFeeModel
from .tiered_fee_model import TieredFeeModel, BINANCE_SPOT_TIERS
from .factory import create_fee_model

__all__ = [
    "OrderFee",
    "OrderFeeContext",
    "FeeModel",
    "get_order_fee",
    "classify_order",
    "reference_price",
    "ZeroFeeModel",
    "PercentFeeModel",
    "MakerTakerFeeModel",
    "BinanceFeeModel",
    "TieredFeeModel",
    "BINANCE_SPOT_TIERS",
    "create_fee_model"
]
