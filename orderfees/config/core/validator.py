"""
Configuration validation framework.

This module provides validation capabilities for configuration data.
"""

from abc import ABC, abstractmethod
from typing import Dict, Any, List, Optional

from orderfees.logger import get_orderfees_logger


class ConfigValidationError(Exception):
    """A single problem found while validating configuration data."""

    def __init__(self, message: str, field: Optional[str] = None, value: Any = None):
        self.message = message
        self.field = field
        self.value = value
        super().__init__(message)


class ValidationResult:
    """Result of configuration validation."""

    def __init__(
        self,
        is_valid: bool = True,
        errors: Optional[List[ConfigValidationError]] = None,
        warnings: Optional[List[str]] = None
    ):
        self.is_valid = is_valid
        self.errors = errors or []
        self.warnings = warnings or []

    def add_error(self, error: ConfigValidationError):
        """Add a validation error."""
        self.errors.append(error)
        self.is_valid = False

    def add_warning(self, warning: str):
        self.warnings.append(warning)

    def merge(self, other: "ValidationResult") -> "ValidationResult":
        """Combine two results into a new one."""
        return ValidationResult(
            is_valid=self.is_valid and other.is_valid,
            errors=self.errors + other.errors,
            warnings=self.warnings + other.warnings
        )

    @property
    def messages(self) -> List[str]:
        return [e.message for e in self.errors]

    def __bool__(self):
        return self.is_valid


class ConfigValidator(ABC):
    """Abstract base class for configuration validators."""

    def __init__(self, domain: str):
        self.domain = domain
        self.logger = get_orderfees_logger().bind(component=f"ConfigValidator_{domain}")

    @abstractmethod
    def validate(self, config: Dict[str, Any]) -> ValidationResult:
        """Validate configuration data."""
        pass


class SchemaValidator(ConfigValidator):
    """
    Schema-based configuration validator.

    A schema maps field names to either a type (or tuple of types) or a
    nested schema dict. Fields listed in `optional` may be missing or None.
    """

    def __init__(self, domain: str, schema: Dict[str, Any], optional: Optional[set] = None):
        super().__init__(domain)
        self.schema = schema
        self.optional = optional or set()

    def validate(self, config: Dict[str, Any]) -> ValidationResult:
        """Validate configuration against schema."""
        result = ValidationResult()
        if not isinstance(config, dict):
            result.add_error(ConfigValidationError(
                f"Configuration must be a dictionary, got {type(config).__name__}"
            ))
            return result

        self._validate_dict(config, self.schema, result)
        return result

    def _validate_dict(self, config: Dict[str, Any], schema: Dict[str, Any], result: ValidationResult, path: str = ""):
        """Recursively validate dictionary against schema."""
        for key, expected_type in schema.items():
            full_path = f"{path}.{key}" if path else key

            if config.get(key) is None:
                if full_path not in self.optional:
                    result.add_error(ConfigValidationError(f"Missing required field: {full_path}", field=key))
                continue

            value = config[key]

            if isinstance(expected_type, dict):
                if isinstance(value, dict):
                    self._validate_dict(value, expected_type, result, full_path)
                else:
                    result.add_error(ConfigValidationError(
                        f"Field {full_path} must be a dictionary, got {type(value).__name__}",
                        field=key, value=value
                    ))
            elif not isinstance(value, expected_type):
                names = expected_type.__name__ if isinstance(expected_type, type) else \
                    " or ".join(t.__name__ for t in expected_type)
                result.add_error(ConfigValidationError(
                    f"Field {full_path} must be of type {names}, got {type(value).__name__}",
                    field=key, value=value
                ))


class BusinessValidator(ConfigValidator):
    """Business logic validator for configuration data."""

    def __init__(self, domain: str, validation_rules: List[callable]):
        super().__init__(domain)
        self.validation_rules = validation_rules

    def validate(self, config: Dict[str, Any]) -> ValidationResult:
        """Validate configuration using business rules."""
        result = ValidationResult()

        for rule in self.validation_rules:
            rule_result = rule(config)
            if isinstance(rule_result, ValidationResult):
                result = result.merge(rule_result)
            elif rule_result is False:
                result.add_error(ConfigValidationError(f"Business rule {rule.__name__} failed"))

        for warning in result.warnings:
            self.logger.warning("Configuration warning", warning=warning)
        return result
