from decimal import Decimal
from typing import Union

from .maker_taker_fee_model import MakerTakerFeeModel


class BinanceFeeModel(MakerTakerFeeModel):
    """
    Binance spot fee model.

    Defaults to the published tier 1 (regular user) rates. Pass custom
    rates to model a VIP tier or a promotional schedule.
    """

    MAKER_TIER1_FEE = Decimal('0.001')
    TAKER_TIER1_FEE = Decimal('0.001')

    def __init__(
        self,
        maker_rate: Union[float, str, Decimal] = MAKER_TIER1_FEE,
        taker_rate: Union[float, str, Decimal] = TAKER_TIER1_FEE
    ):
        super().__init__(maker_rate, taker_rate)
