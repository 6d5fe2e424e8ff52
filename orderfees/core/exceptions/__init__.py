"""
Core exceptions for the orderfees package.

All exceptions derive from OrderFeesError so callers can catch fee
failures as a group and decide whether to abort an order or fall back
to a manual fee.
"""

from .base import (
    OrderFeesError,
    ValidationError,
    ConfigurationError
)

from .fees import (
    InvalidFeeContextError,
    InvalidFeeRateError,
    FeeConfigurationError,
    FeeCalculationError,
    UnsupportedOrderTypeError,
    MissingPriceDataError,
    InvalidFeeAmountError
)

__all__ = [
    # Base exceptions
    'OrderFeesError',
    'ValidationError',
    'ConfigurationError',

    # Fee exceptions
    'InvalidFeeContextError',
    'InvalidFeeRateError',
    'FeeConfigurationError',
    'FeeCalculationError',
    'UnsupportedOrderTypeError',
    'MissingPriceDataError',
    'InvalidFeeAmountError'
]
