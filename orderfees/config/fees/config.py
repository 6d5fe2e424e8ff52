"""
Fee model configuration classes.
"""

from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from typing import Dict, Any, Optional, List

from orderfees.core.exceptions import FeeConfigurationError
from .schema import validate_fee_model_config


class FeeModelType(Enum):
    """Supported fee model types."""
    ZERO = "zero"
    PERCENT = "percent"
    MAKER_TAKER = "maker_taker"
    BINANCE = "binance"
    TIERED = "tiered"


def _optional_decimal(value) -> Optional[Decimal]:
    if value is None:
        return None
    return value if isinstance(value, Decimal) else Decimal(str(value))


@dataclass
class FeeModelConfig:
    """Fee model configuration."""
    model_type: FeeModelType = FeeModelType.BINANCE
    fee_rate: Optional[Decimal] = None
    maker_rate: Optional[Decimal] = None
    taker_rate: Optional[Decimal] = None
    tiers: Optional[List[Dict[str, Any]]] = None
    volume: Decimal = field(default_factory=lambda: Decimal('0'))

    def __post_init__(self):
        if not isinstance(self.model_type, FeeModelType):
            try:
                self.model_type = FeeModelType(self.model_type)
            except ValueError:
                raise FeeConfigurationError(str(self.model_type), "Unknown fee model type") from None
        self.fee_rate = _optional_decimal(self.fee_rate)
        self.maker_rate = _optional_decimal(self.maker_rate)
        self.taker_rate = _optional_decimal(self.taker_rate)
        self.volume = _optional_decimal(self.volume) or Decimal('0')

    def to_kwargs(self) -> Dict[str, Any]:
        """Convert to kwargs for fee model initialization."""
        kwargs = {}
        if self.model_type is FeeModelType.PERCENT and self.fee_rate is not None:
            kwargs['fee_rate'] = self.fee_rate
        if self.model_type in (FeeModelType.MAKER_TAKER, FeeModelType.BINANCE):
            if self.maker_rate is not None:
                kwargs['maker_rate'] = self.maker_rate
            if self.taker_rate is not None:
                kwargs['taker_rate'] = self.taker_rate
        if self.model_type is FeeModelType.TIERED:
            if self.tiers is not None:
                kwargs['tiers'] = [
                    (tier['min_volume'], tier['maker_rate'], tier['taker_rate']) for tier in self.tiers
                ]
            kwargs['volume'] = self.volume
        return kwargs

    def to_dict(self) -> Dict[str, Any]:
        """Plain representation suitable for YAML."""
        data = {'model_type': self.model_type.value}
        for name in ('fee_rate', 'maker_rate', 'taker_rate'):
            value = getattr(self, name)
            if value is not None:
                data[name] = str(value)
        if self.tiers is not None:
            data['tiers'] = [dict(tier) for tier in self.tiers]
        if self.model_type is FeeModelType.TIERED:
            data['volume'] = str(self.volume)
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "FeeModelConfig":
        """
        Build a configuration from a validated dictionary.

        Raises
        ------
        FeeConfigurationError
            If the dictionary does not pass validation
        """
        result = validate_fee_model_config(data)
        if not result.is_valid:
            raise FeeConfigurationError(data.get('model_type'), "; ".join(result.messages))

        return cls(
            model_type=FeeModelType(data['model_type']),
            fee_rate=data.get('fee_rate'),
            maker_rate=data.get('maker_rate'),
            taker_rate=data.get('taker_rate'),
            tiers=data.get('tiers'),
            volume=data.get('volume', 0)
        )
