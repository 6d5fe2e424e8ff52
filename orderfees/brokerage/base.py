from typing import Optional

from orderfees.config.fees import FeeModelConfig, FeeModelType
from orderfees.fee_model import FeeModel, create_fee_model
from orderfees.logger import get_orderfees_logger
from orderfees.securities import Security


class BrokerageModel(object):
    """
    Describes the venue a security trades on.

    The engine asks a brokerage model which fee model applies to a
    security. The fee model is built once from the brokerage's fee
    configuration and shared by every security, since fee models are
    immutable.

    Parameters
    ----------
    fee_config : `FeeModelConfig`, optional
        Fee configuration. Defaults to a zero fee model.
    """

    name = "default"

    def __init__(self, fee_config: Optional[FeeModelConfig] = None):
        self.logger = get_orderfees_logger().bind(component=type(self).__name__)
        self.fee_config = fee_config or self.default_fee_config()
        self._fee_model = create_fee_model(self.fee_config)
        self.logger.info("Brokerage model ready", brokerage=self.name, fee_model=repr(self._fee_model))

    def default_fee_config(self) -> FeeModelConfig:
        return FeeModelConfig(model_type=FeeModelType.ZERO)

    def get_fee_model(self, security: Security) -> FeeModel:
        """Return the fee model that prices orders for `security`."""
        return self._fee_model


class DefaultBrokerageModel(BrokerageModel):
    """Brokerage without trading fees."""
    pass


class BinanceBrokerageModel(BrokerageModel):
    """Binance spot brokerage, tier 1 fees unless configured otherwise."""

    name = "binance"

    def default_fee_config(self) -> FeeModelConfig:
        return FeeModelConfig(model_type=FeeModelType.BINANCE)
