from decimal import Decimal
from typing import Union, Dict, Any

from orderfees.core.enums import OrderClassification
from .base import FeeModel
from .classification import classify_order, reference_price
from .context import OrderFeeContext
from .order_fee import OrderFee


class MakerTakerFeeModel(FeeModel):
    """
    Fee model implementing the maker/taker fee structure of crypto exchanges.

    Orders that rest on the book (makers) are charged `maker_rate`, orders
    that fill against resting liquidity (takers) are charged `taker_rate`.
    The fee is the rate times the reference price times the absolute
    quantity, in the security's quote currency.
    """

    def __init__(
        self,
        maker_rate: Union[float, str, Decimal] = Decimal('0.001'),
        taker_rate: Union[float, str, Decimal] = Decimal('0.001')
    ):
        """
        Initialize the maker/taker fee model.

        Parameters
        ----------
        maker_rate : float, optional
            Maker fee rate as decimal (e.g., 0.001 = 0.1%)
        taker_rate : float, optional
            Taker fee rate as decimal (e.g., 0.001 = 0.1%)

        Raises
        ------
        InvalidFeeRateError
            If any fee rate is negative
        """
        super().__init__()
        self._maker_rate = self.validate_rate("maker_rate", maker_rate)
        self._taker_rate = self.validate_rate("taker_rate", taker_rate)

    @property
    def maker_rate(self) -> Decimal:
        return self._maker_rate

    @property
    def taker_rate(self) -> Decimal:
        return self._taker_rate

    def classify(self, context: OrderFeeContext) -> OrderClassification:
        """Classify the context's order against its prevailing quote."""
        bid_price, ask_price = context.prevailing_quote()
        return classify_order(context.order, bid_price, ask_price, self.fee_type)

    def rate_for(self, classification: OrderClassification) -> Decimal:
        """Rate charged for a classified order."""
        return self._maker_rate if classification.is_maker else self._taker_rate

    def get_order_fee(self, context: OrderFeeContext) -> OrderFee:
        """
        Calculate the maker/taker fee for the order in the context.

        Parameters
        ----------
        context : OrderFeeContext
            Security, order and optional submission snapshot

        Returns
        -------
        OrderFee
            Fee in the security's quote currency
        """
        classification = self.classify(context)
        price = reference_price(context, self.fee_type)
        rate = self.rate_for(classification)
        amount = rate * price * context.order.absolute_quantity

        self.logger.debug(
            "Order fee computed",
            order_id=context.order.id,
            symbol=context.security.symbol,
            classification=classification.value,
            liquidity=classification.liquidity.value,
            rate=str(rate),
            reference_price=str(price),
            fee=str(amount)
        )
        return OrderFee(amount, context.quote_currency)

    def get_fee_info(self) -> Dict[str, Any]:
        """Get information about this maker/taker fee model."""
        base_info = super().get_fee_info()
        base_info.update({
            "maker_rate": float(self._maker_rate),
            "taker_rate": float(self._taker_rate),
            "maker_rate_pct": f"{float(self._maker_rate) * 100:.4f}%",
            "taker_rate_pct": f"{float(self._taker_rate) * 100:.4f}%"
        })
        return base_info

    def __repr__(self):
        return f"{self.fee_type}(maker_rate={self._maker_rate}, taker_rate={self._taker_rate})"
