"""
Shared pytest configuration and fixtures for the fee model tests.

The quote used throughout mirrors a wide ETHUSDT book: bid 100, ask 1000.
"""

import pytest
from decimal import Decimal

from orderfees.securities import Security
from orderfees.orders import (
    MarketOrder, LimitOrder, StopMarketOrder, BinanceOrderProperties, OrderSubmissionData
)


LOW_PRICE = Decimal('100')
HIGH_PRICE = Decimal('1000')
QUANTITY = Decimal('1')


@pytest.fixture
def security():
    """ETHUSDT quoted at 100 / 1000."""
    return Security('ETHUSDT', 'USDT', 'ETH', bid_price=LOW_PRICE, ask_price=HIGH_PRICE)


@pytest.fixture
def submission_data(security):
    """Snapshot equal to the live quote."""
    return OrderSubmissionData.from_security(security)


@pytest.fixture
def post_only():
    return BinanceOrderProperties(post_only=True)


@pytest.fixture
def market_buy():
    return MarketOrder('ETHUSDT', QUANTITY)


@pytest.fixture
def market_sell():
    return MarketOrder('ETHUSDT', -QUANTITY)


@pytest.fixture
def resting_buy():
    """Buy limit below the ask."""
    return LimitOrder('ETHUSDT', QUANTITY, limit_price=LOW_PRICE)


@pytest.fixture
def resting_sell():
    """Sell limit above the bid."""
    return LimitOrder('ETHUSDT', -QUANTITY, limit_price=HIGH_PRICE)


@pytest.fixture
def crossing_buy():
    """Buy limit at the ask."""
    return LimitOrder('ETHUSDT', QUANTITY, limit_price=HIGH_PRICE)


@pytest.fixture
def crossing_sell():
    """Sell limit at the bid."""
    return LimitOrder('ETHUSDT', -QUANTITY, limit_price=LOW_PRICE)


@pytest.fixture
def stop_order():
    return StopMarketOrder('ETHUSDT', QUANTITY, stop_price=HIGH_PRICE)


# Pytest marks for categorizing tests
pytestmark = pytest.mark.unit
