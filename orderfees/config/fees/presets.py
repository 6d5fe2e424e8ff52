"""
Fee model configuration presets.
"""

from decimal import Decimal
from typing import List

from .config import FeeModelConfig, FeeModelType


def get_fee_preset(preset_name: str) -> FeeModelConfig:
    """
    Get a predefined fee model configuration.

    Parameters
    ----------
    preset_name : str
        Name of the preset (see `list_available_fee_presets`)

    Returns
    -------
    FeeModelConfig
        A fresh configuration object

    Raises
    ------
    ValueError
        If preset_name is not recognized
    """
    presets = {
        'default': _get_binance_preset,
        'binance': _get_binance_preset,
        'binance_bnb': _get_binance_bnb_preset,
        'binance_vip': _get_binance_vip_preset,
        'no_fee': _get_no_fee_preset,
        'flat': _get_flat_preset
    }

    if preset_name not in presets:
        raise ValueError(f"Unknown fee preset: {preset_name}. Available: {list(presets.keys())}")

    return presets[preset_name]()


def list_available_fee_presets() -> List[str]:
    """
    Get a list of available fee presets.

    Returns
    -------
    list[str]
        List of available preset names
    """
    return ['default', 'binance', 'binance_bnb', 'binance_vip', 'no_fee', 'flat']


def _get_binance_preset() -> FeeModelConfig:
    """Binance spot, regular user."""
    return FeeModelConfig(
        model_type=FeeModelType.BINANCE,
        maker_rate=Decimal('0.001'),
        taker_rate=Decimal('0.001')
    )


def _get_binance_bnb_preset() -> FeeModelConfig:
    """Binance spot, regular user paying fees in BNB (25% discount)."""
    return FeeModelConfig(
        model_type=FeeModelType.BINANCE,
        maker_rate=Decimal('0.00075'),
        taker_rate=Decimal('0.00075')
    )


def _get_binance_vip_preset() -> FeeModelConfig:
    """Binance spot VIP schedule, resolved from the trailing volume."""
    return FeeModelConfig(
        model_type=FeeModelType.TIERED,
        volume=Decimal('0')
    )


def _get_no_fee_preset() -> FeeModelConfig:
    return FeeModelConfig(model_type=FeeModelType.ZERO)


def _get_flat_preset() -> FeeModelConfig:
    """Flat 0.1% on traded value."""
    return FeeModelConfig(
        model_type=FeeModelType.PERCENT,
        fee_rate=Decimal('0.001')
    )
