from decimal import Decimal
from typing import Union, Dict, Any, Optional

from orderfees.core.enums import OrderDirection
from .base import FeeModel
from .classification import reference_price
from .context import OrderFeeContext
from .order_fee import OrderFee


class PercentFeeModel(FeeModel):
    """
    Fee model that applies a flat percentage of traded value.

    Commonly used for brokers that do not distinguish makers from takers.
    Supports different rates for buy and sell orders if needed.
    """

    def __init__(
        self,
        fee_rate: Union[float, str, Decimal] = Decimal('0.001'),
        buy_rate: Optional[Union[float, str, Decimal]] = None,
        sell_rate: Optional[Union[float, str, Decimal]] = None
    ):
        """
        Initialize the percentage fee model.

        Parameters
        ----------
        fee_rate : float, optional
            Default fee rate as decimal (e.g., 0.001 = 0.1%)
        buy_rate : float, optional
            Specific fee rate for buy orders. If None, uses fee_rate
        sell_rate : float, optional
            Specific fee rate for sell orders. If None, uses fee_rate

        Raises
        ------
        InvalidFeeRateError
            If any fee rate is negative
        """
        super().__init__()
        self.fee_rate = self.validate_rate("fee_rate", fee_rate)
        self.buy_rate = self.validate_rate("buy_rate", buy_rate) if buy_rate is not None else self.fee_rate
        self.sell_rate = self.validate_rate("sell_rate", sell_rate) if sell_rate is not None else self.fee_rate

    def get_order_fee(self, context: OrderFeeContext) -> OrderFee:
        """Charge the side's rate on the order's traded value."""
        order = context.order
        price = reference_price(context, self.fee_type)
        rate = self.buy_rate if order.direction is OrderDirection.BUY else self.sell_rate
        amount = rate * price * order.absolute_quantity

        self.logger.debug(
            "Order fee computed",
            order_id=order.id,
            symbol=context.security.symbol,
            rate=str(rate),
            reference_price=str(price),
            fee=str(amount)
        )
        return OrderFee(amount, context.quote_currency)

    def get_fee_info(self) -> Dict[str, Any]:
        """Get information about this percentage fee model."""
        base_info = super().get_fee_info()
        base_info.update({
            "default_rate": float(self.fee_rate),
            "buy_rate": float(self.buy_rate),
            "sell_rate": float(self.sell_rate),
            "buy_rate_pct": f"{float(self.buy_rate) * 100:.4f}%",
            "sell_rate_pct": f"{float(self.sell_rate) * 100:.4f}%"
        })
        return base_info
