from decimal import Decimal
from typing import Optional, Union

from orderfees.core.exceptions import ValidationError


Number = Union[int, float, str, Decimal]


def to_decimal(value: Optional[Number]) -> Optional[Decimal]:
    """Convert a numeric value to Decimal going through str to avoid float noise."""
    if value is None:
        return None
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


class Security(object):
    """
    A tradable instrument and its latest top-of-book quote.

    The fee models only read from a security. The quote is kept current by
    the data feed through `set_market_price`.

    Parameters
    ----------
    symbol : `str`
        Ticker of the instrument, e.g. 'ETHUSDT'
    quote_currency : `str`
        Currency prices are expressed in and fees are charged in
    base_currency : `str`, optional
        Currency being bought or sold
    bid_price, ask_price : optional
        Initial best bid and best ask
    """

    def __init__(
        self,
        symbol: str,
        quote_currency: str,
        base_currency: Optional[str] = None,
        bid_price: Optional[Number] = None,
        ask_price: Optional[Number] = None
    ):
        if not symbol:
            raise ValidationError("symbol", message="Security symbol cannot be empty")
        if not quote_currency:
            raise ValidationError("quote_currency", message="Quote currency cannot be empty")

        self.symbol = symbol
        self.quote_currency = quote_currency.upper()
        self.base_currency = base_currency.upper() if base_currency else None
        self.bid_price = to_decimal(bid_price)
        self.ask_price = to_decimal(ask_price)

    @property
    def price(self) -> Optional[Decimal]:
        """Mid of the current quote, or whichever side is available."""
        if self.has_quote:
            return (self.bid_price + self.ask_price) / 2
        return self.bid_price or self.ask_price

    @property
    def has_quote(self) -> bool:
        return bool(self.bid_price) and bool(self.ask_price)

    def set_market_price(self, bid_price: Number, ask_price: Number) -> None:
        """Update the top-of-book quote."""
        if bid_price is None or ask_price is None:
            raise ValidationError("market_price", f"{bid_price}/{ask_price}", "Both sides of the quote are required")
        bid = to_decimal(bid_price)
        ask = to_decimal(ask_price)
        if bid < 0 or ask < 0:
            raise ValidationError("market_price", f"{bid}/{ask}", "Quote prices cannot be negative")
        self.bid_price = bid
        self.ask_price = ask

    def __repr__(self):
        return (f"Security(symbol={self.symbol!r}, quote_currency={self.quote_currency!r}, "
                f"bid={self.bid_price}, ask={self.ask_price})")
