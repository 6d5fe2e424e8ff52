from orderfees.config.fees import FeeModelConfig, FeeModelType
from orderfees.core.exceptions import FeeConfigurationError
from .base import FeeModel
from .binance_fee_model import BinanceFeeModel
from .maker_taker_fee_model import MakerTakerFeeModel
from .percent_fee_model import PercentFeeModel
from .tiered_fee_model import TieredFeeModel
from .zero_fee_model import ZeroFeeModel


_FEE_MODELS = {
    FeeModelType.ZERO: ZeroFeeModel,
    FeeModelType.PERCENT: PercentFeeModel,
    FeeModelType.MAKER_TAKER: MakerTakerFeeModel,
    FeeModelType.BINANCE: BinanceFeeModel,
    FeeModelType.TIERED: TieredFeeModel,
}


def create_fee_model(config: FeeModelConfig) -> FeeModel:
    """
    Create the fee model described by a configuration.

    Raises
    ------
    FeeConfigurationError
        If the configuration names a model type with no implementation
    InvalidFeeRateError
        If a configured rate is negative
    """
    model_cls = _FEE_MODELS.get(config.model_type)
    if model_cls is None:
        raise FeeConfigurationError(getattr(config.model_type, "value", str(config.model_type)),
                                    "No fee model registered for this type")
    return model_cls(**config.to_kwargs())
