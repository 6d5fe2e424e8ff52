from dataclasses import dataclass


@dataclass(frozen=True)
class OrderProperties:
    """Venue independent order properties."""

    @property
    def post_only(self) -> bool:
        return False


@dataclass(frozen=True)
class BinanceOrderProperties(OrderProperties):
    """
    Binance specific order properties.

    A post-only limit order is rejected by the venue instead of being
    allowed to take liquidity.
    """
    post_only: bool = False
