"""
Test suite for the order and security model used by the fee models.
"""

import pytest
from decimal import Decimal

from orderfees.core.enums import OrderDirection, OrderType
from orderfees.core.exceptions import ValidationError
from orderfees.orders import (
    LimitOrder, MarketOrder, StopMarketOrder, OrderProperties, BinanceOrderProperties,
    OrderSubmissionData, create_order
)
from orderfees.securities import Security


class TestOrder:

    def test_direction_from_quantity_sign(self):
        assert MarketOrder('ETHUSDT', 2).direction is OrderDirection.BUY
        assert MarketOrder('ETHUSDT', -2).direction is OrderDirection.SELL
        assert MarketOrder('ETHUSDT', 0).direction is OrderDirection.HOLD

    def test_quantity_is_decimal(self):
        order = MarketOrder('ETHUSDT', 0.1)
        assert order.quantity == Decimal('0.1')
        assert MarketOrder('ETHUSDT', -0.5).absolute_quantity == Decimal('0.5')

    def test_order_ids_are_unique(self):
        assert MarketOrder('ETHUSDT', 1).id != MarketOrder('ETHUSDT', 1).id

    def test_types(self):
        assert MarketOrder('ETHUSDT', 1).type is OrderType.MARKET
        assert LimitOrder('ETHUSDT', 1, limit_price=10).type is OrderType.LIMIT
        assert StopMarketOrder('ETHUSDT', 1, stop_price=10).type is OrderType.STOP_MARKET

    def test_limit_order_requires_price(self):
        with pytest.raises(ValidationError):
            LimitOrder('ETHUSDT', 1)
        with pytest.raises(ValidationError):
            LimitOrder('ETHUSDT', 1, limit_price=0)

    def test_default_properties_are_not_post_only(self):
        assert MarketOrder('ETHUSDT', 1).properties.post_only is False
        assert OrderProperties().post_only is False
        assert BinanceOrderProperties().post_only is False
        assert BinanceOrderProperties(post_only=True).post_only is True

    def test_create_order(self):
        order = create_order(OrderType.LIMIT, 'ETHUSDT', -1, limit_price='1500.5',
                             properties=BinanceOrderProperties(post_only=True))

        assert isinstance(order, LimitOrder)
        assert order.limit_price == Decimal('1500.5')
        assert order.properties.post_only

    def test_create_unsupported_order(self):
        with pytest.raises(ValidationError):
            create_order(OrderType.STOP_LIMIT, 'ETHUSDT', 1)


class TestSecurity:

    def test_quote(self):
        security = Security('ethusdt', 'usdt', 'eth', bid_price=100, ask_price=1000)

        assert security.quote_currency == 'USDT'
        assert security.base_currency == 'ETH'
        assert security.has_quote
        assert security.price == Decimal('550')

    def test_set_market_price(self):
        security = Security('ETHUSDT', 'USDT')
        assert not security.has_quote

        security.set_market_price(99.5, 100.5)

        assert security.bid_price == Decimal('99.5')
        assert security.ask_price == Decimal('100.5')

    def test_negative_quote_rejected(self):
        with pytest.raises(ValidationError):
            Security('ETHUSDT', 'USDT').set_market_price(-1, 1)

    @pytest.mark.parametrize("bid, ask", [(None, 100), (99, None), (None, None)])
    def test_missing_quote_side_rejected(self, bid, ask):
        security = Security('ETHUSDT', 'USDT', bid_price=1, ask_price=2)

        with pytest.raises(ValidationError):
            security.set_market_price(bid, ask)

        assert (security.bid_price, security.ask_price) == (Decimal('1'), Decimal('2'))

    def test_requires_quote_currency(self):
        with pytest.raises(ValidationError):
            Security('ETHUSDT', '')


class TestOrderSubmissionData:

    def test_mid_price_defaults_to_midpoint(self):
        data = OrderSubmissionData.from_prices(100, 1000)
        assert data.mid_price == Decimal('550')

    def test_from_security(self, security):
        data = OrderSubmissionData.from_security(security)
        assert (data.bid_price, data.ask_price) == (security.bid_price, security.ask_price)

    def test_without_quote(self):
        data = OrderSubmissionData.from_security(Security('ETHUSDT', 'USDT'))
        assert data.mid_price is None
