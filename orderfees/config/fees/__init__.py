"""
Fee model configuration domain.
"""

from .config import FeeModelConfig, FeeModelType
from .schema import validate_fee_model_config, get_fee_model_schema, FEE_MODEL_SCHEMA
from .presets import get_fee_preset, list_available_fee_presets

__all__ = [
    'FeeModelConfig',
    'FeeModelType',
    'validate_fee_model_config',
    'get_fee_model_schema',
    'FEE_MODEL_SCHEMA',
    'get_fee_preset',
    'list_available_fee_presets'
]
