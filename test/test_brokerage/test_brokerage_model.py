import unittest
from decimal import Decimal

from orderfees.brokerage import BinanceBrokerageModel, BrokerageModel, DefaultBrokerageModel
from orderfees.config import FeeModelConfig, FeeModelType, get_fee_preset
from orderfees.fee_model import BinanceFeeModel, OrderFeeContext, TieredFeeModel, ZeroFeeModel
from orderfees.orders import MarketOrder
from orderfees.securities import Security


class TestBrokerageModels(unittest.TestCase):
    """
    Test that brokerage models hand out the fee model of their venue.
    """

    def setUp(self):
        self.security = Security('ETHUSDT', 'USDT', 'ETH', bid_price=100, ask_price=1000)

    def test_binance_fee_model(self):
        model = BinanceBrokerageModel()
        self.assertIsInstance(model.get_fee_model(self.security), BinanceFeeModel)

    def test_default_fee_model(self):
        model = DefaultBrokerageModel()
        self.assertIsInstance(model.get_fee_model(self.security), ZeroFeeModel)

    def test_fee_model_is_shared(self):
        model = BinanceBrokerageModel()
        other = Security('BTCUSDT', 'USDT', 'BTC', bid_price=1, ask_price=2)
        self.assertIs(model.get_fee_model(self.security), model.get_fee_model(other))

    def test_configured_fee_model(self):
        model = BrokerageModel(get_fee_preset('binance_vip'))
        self.assertIsInstance(model.get_fee_model(self.security), TieredFeeModel)

    def test_configured_rates_are_used(self):
        config = FeeModelConfig(FeeModelType.BINANCE, maker_rate=Decimal('0.0002'), taker_rate=Decimal('0.0004'))
        fee_model = BinanceBrokerageModel(config).get_fee_model(self.security)

        fee = fee_model.get_order_fee(OrderFeeContext(self.security, MarketOrder('ETHUSDT', 1)))

        self.assertEqual(fee.amount, Decimal('0.4000'))
        self.assertEqual(fee.currency, 'USDT')


if __name__ == "__main__":
    unittest.main()
