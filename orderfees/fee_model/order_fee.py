from dataclasses import dataclass
from decimal import Decimal

from orderfees.core.exceptions import InvalidFeeAmountError


@dataclass(frozen=True)
class OrderFee:
    """Fee charged for an order, in the currency it is charged in."""
    amount: Decimal
    currency: str

    def __post_init__(self):
        if self.amount < 0:
            raise InvalidFeeAmountError(self.amount)

    @classmethod
    def zero(cls, currency: str) -> "OrderFee":
        return cls(Decimal('0'), currency)

    def __str__(self):
        return f"{self.amount} {self.currency}"
