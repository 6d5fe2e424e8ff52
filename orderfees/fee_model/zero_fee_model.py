from typing import Dict, Any

from .base import FeeModel
from .context import OrderFeeContext
from .order_fee import OrderFee


class ZeroFeeModel(FeeModel):
    """
    Fee model that charges nothing for any order.

    Useful for backtests that should measure a strategy without costs and
    for venues that do not charge trading fees.
    """

    def get_order_fee(self, context: OrderFeeContext) -> OrderFee:
        return OrderFee.zero(context.quote_currency)

    def get_fee_info(self) -> Dict[str, Any]:
        """Get information about this zero fee model."""
        base_info = super().get_fee_info()
        base_info.update({"fee_rate": 0.0})
        return base_info
