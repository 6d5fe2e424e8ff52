from .base import BrokerageModel, DefaultBrokerageModel, BinanceBrokerageModel

__all__ = ["BrokerageModel", "DefaultBrokerageModel", "BinanceBrokerageModel"]
