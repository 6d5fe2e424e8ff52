"""
Fee computation exceptions for the orderfees package.
"""

from .base import OrderFeesError, ValidationError, ConfigurationError


class InvalidFeeContextError(ValidationError):
    """Raised when a fee context is built without a security or an order."""

    def __init__(self, field: str, message: str = None):
        super().__init__(field, message=message or "a value is required")


class InvalidFeeRateError(ConfigurationError):
    """Raised when a fee model is constructed with a negative or non-numeric rate."""

    def __init__(self, rate_name: str, rate_value):
        self.rate_name = rate_name
        self.rate_value = rate_value
        super().__init__(rate_name, str(rate_value), "fee rates must be finite non-negative numbers")


class FeeConfigurationError(ConfigurationError):
    """Raised when a fee model configuration cannot be turned into a model."""

    def __init__(self, model_type: str = None, reason: str = None):
        self.model_type = model_type
        super().__init__("fee_model", model_type, reason)


class FeeCalculationError(OrderFeesError):
    """Base exception for failures while pricing an order fee."""

    def __init__(self, message: str, order_id: int = None):
        self.order_id = order_id
        if order_id is not None:
            message = f"Order {order_id}: {message}"
        super().__init__(message)


class UnsupportedOrderTypeError(FeeCalculationError):
    """Raised when a fee model does not know how to price an order type."""

    def __init__(self, order_type, fee_model: str, order_id: int = None):
        self.order_type = order_type
        self.fee_model = fee_model
        name = getattr(order_type, "value", order_type)
        super().__init__(f"{fee_model} does not support '{name}' orders", order_id)


class MissingPriceDataError(FeeCalculationError):
    """Raised when neither a submission snapshot nor the security quote has a usable price."""

    def __init__(self, symbol: str, price_field: str, order_id: int = None):
        self.symbol = symbol
        self.price_field = price_field
        super().__init__(f"No usable {price_field} price for {symbol}", order_id)


class InvalidFeeAmountError(FeeCalculationError):
    """Raised when a fee result would carry a negative amount."""

    def __init__(self, amount):
        self.amount = amount
        super().__init__(f"Fee amount must be non-negative, got {amount}")
