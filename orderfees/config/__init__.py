"""
Configuration management for the orderfees package.

- Fee model configurations, validation and presets
- System-level settings and logging
- YAML file and in-memory configuration providers
"""

from typing import Optional

from orderfees.core.exceptions import FeeConfigurationError

# Core infrastructure
from .core import (
    ConfigProvider, FileConfigProvider, RuntimeConfigProvider,
    ConfigValidator, SchemaValidator, BusinessValidator, ConfigValidationError, ValidationResult
)

# Domain configurations
from .fees import (
    FeeModelConfig, FeeModelType, validate_fee_model_config, get_fee_model_schema,
    get_fee_preset, list_available_fee_presets
)

from .system import SystemConfig, LogLevel


def load_fee_model_config(provider: ConfigProvider) -> FeeModelConfig:
    """
    Read a fee model configuration from a provider.

    An empty configuration yields the default preset.

    Raises
    ------
    FeeConfigurationError
        If the stored configuration is invalid
    """
    data = provider.get_config()
    if not data:
        return get_fee_preset('default')
    if 'preset' in data:
        try:
            return get_fee_preset(data['preset'])
        except ValueError as e:
            raise FeeConfigurationError(data['preset'], str(e)) from e
    return FeeModelConfig.from_dict(data)


def get_fee_config_provider(config_dir: Optional[str] = None) -> FileConfigProvider:
    """File provider for the `fees` domain."""
    if config_dir is None:
        config_dir = SystemConfig.from_env().config_dir
    return FileConfigProvider("fees", config_dir)


__all__ = [
    # Core infrastructure
    'ConfigProvider',
    'FileConfigProvider',
    'RuntimeConfigProvider',
    'ConfigValidator',
    'SchemaValidator',
    'BusinessValidator',
    'ConfigValidationError',
    'ValidationResult',

    # Fee domain
    'FeeModelConfig',
    'FeeModelType',
    'validate_fee_model_config',
    'get_fee_model_schema',
    'get_fee_preset',
    'list_available_fee_presets',

    # System domain
    'SystemConfig',
    'LogLevel',

    # Convenience functions
    'load_fee_model_config',
    'get_fee_config_provider'
]
