from abc import ABC, abstractmethod
from decimal import Decimal, InvalidOperation
from typing import Any, Dict, Union

from orderfees.core.exceptions import InvalidFeeRateError
from orderfees.logger import get_orderfees_logger
from orderfees.orders import Order
from orderfees.securities import Security, to_decimal
from .context import OrderFeeContext
from .order_fee import OrderFee


class FeeModel(ABC):
    """
    Fee calculation interface for trading venues.

    A fee model prices the transaction cost of one order from an
    `OrderFeeContext`. Implementations hold only their configured rates,
    so one instance can be shared by any number of callers and threads.
    """

    def __init__(self):
        self.logger = get_orderfees_logger().bind(component=self.fee_type)

    @abstractmethod
    def get_order_fee(self, context: OrderFeeContext) -> OrderFee:
        """
        Calculate the fee charged for the order in the context.

        Parameters
        ----------
        context : OrderFeeContext
            The security, the order and the optional submission snapshot

        Returns
        -------
        OrderFee
            Fee amount (always >= 0) in the security's quote currency

        Raises
        ------
        UnsupportedOrderTypeError
            If the model cannot price the order's type
        MissingPriceDataError
            If a price needed to price the order is not available
        """
        raise NotImplementedError("Subclasses must implement get_order_fee()")

    @staticmethod
    def validate_rate(name: str, rate: Union[int, float, str, Decimal]) -> Decimal:
        """
        Convert a fee rate to Decimal, rejecting negative values.

        Raises
        ------
        InvalidFeeRateError
            If the rate is missing, not a finite number or negative
        """
        try:
            rate_decimal = to_decimal(rate)
        except (InvalidOperation, ValueError, TypeError):
            raise InvalidFeeRateError(name, rate) from None
        if rate_decimal is None or not rate_decimal.is_finite() or rate_decimal < 0:
            raise InvalidFeeRateError(name, rate)
        return rate_decimal

    @property
    def fee_type(self) -> str:
        """
        Get the type of fee model for identification.

        Returns
        -------
        str
            Fee model type identifier
        """
        return self.__class__.__name__

    def get_fee_info(self) -> Dict[str, Any]:
        """
        Get information about this fee model configuration.

        Returns
        -------
        Dict[str, Any]
            Fee model information and parameters
        """
        return {
            "type": self.fee_type,
            "description": self.__doc__.strip().split('\n')[0].strip() if self.__doc__ else "No description"
        }

    def __repr__(self):
        return f"{self.fee_type}()"


def get_order_fee(model: FeeModel, security: Security, order: Order) -> OrderFee:
    """
    Price an order with `model` without building a context first.

    Kept for call sites that only hold a security and an order. The context
    is built without a submission snapshot, so callers that captured the
    quote at submission should build an `OrderFeeContext` themselves.
    """
    return model.get_order_fee(OrderFeeContext(security, order))
