"""
Core configuration management components.

- ConfigProvider: Abstract provider interface and implementations
- ConfigValidator: Validation framework for configuration data
"""

from .provider import ConfigProvider, FileConfigProvider, RuntimeConfigProvider
from .validator import (
    ConfigValidator, SchemaValidator, BusinessValidator, ConfigValidationError, ValidationResult
)

__all__ = [
    # Providers
    'ConfigProvider',
    'FileConfigProvider',
    'RuntimeConfigProvider',

    # Validators
    'ConfigValidator',
    'SchemaValidator',
    'BusinessValidator',
    'ConfigValidationError',
    'ValidationResult'
]
