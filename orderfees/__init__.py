from orderfees.config import SystemConfig
from orderfees.logger import init_logger

from orderfees.fee_model import (
    FeeModel, OrderFee, OrderFeeContext, get_order_fee,
    ZeroFeeModel, PercentFeeModel, MakerTakerFeeModel, BinanceFeeModel, TieredFeeModel,
    create_fee_model
)

# Initialize configuration and logger
config = SystemConfig.from_env()
logger = init_logger(config)
