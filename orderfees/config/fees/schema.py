"""
Fee model configuration validation.

Schema validation checks shapes and types, business validation checks
that the rates a model type needs are present and sensible.
"""

from decimal import Decimal, InvalidOperation
from typing import Dict, Any

from ..core import SchemaValidator, BusinessValidator, ConfigValidationError, ValidationResult


_NUMBER = (int, float, str, Decimal)

FEE_MODEL_SCHEMA = {
    "model_type": str,
    "fee_rate": _NUMBER,
    "maker_rate": _NUMBER,
    "taker_rate": _NUMBER,
    "tiers": list,
    "volume": _NUMBER,
}

OPTIONAL_FIELDS = {"fee_rate", "maker_rate", "taker_rate", "tiers", "volume"}

MODEL_TYPES = ("zero", "percent", "maker_taker", "binance", "tiered")

# A rate above this is almost certainly a percentage typed as a fraction
HIGH_RATE_WARNING = Decimal('0.01')


def _as_decimal(value):
    """Finite Decimal for `value`, or None when it is not a usable number."""
    try:
        number = Decimal(str(value))
    except (InvalidOperation, ValueError):
        return None
    return number if number.is_finite() else None


def _check_rate(name: str, value, result: ValidationResult):
    rate = _as_decimal(value)
    if rate is None:
        result.add_error(ConfigValidationError(f"{name} must be numeric", field=name, value=value))
    elif rate < 0 or rate > 1:
        result.add_error(ConfigValidationError(f"{name} must be between 0 and 1, got {value}", field=name, value=value))
    elif rate > HIGH_RATE_WARNING:
        result.add_warning(f"{name} of {value} is above 1%")


def check_model_type(data: Dict[str, Any]) -> ValidationResult:
    result = ValidationResult()
    if data.get("model_type") not in MODEL_TYPES:
        result.add_error(ConfigValidationError(
            f"model_type must be one of {', '.join(MODEL_TYPES)}, got {data.get('model_type')!r}",
            field="model_type", value=data.get("model_type")
        ))
    return result


def check_rates(data: Dict[str, Any]) -> ValidationResult:
    result = ValidationResult()
    model_type = data.get("model_type")

    if model_type == "percent" and data.get("fee_rate") is None:
        result.add_error(ConfigValidationError("Percent fee model requires fee_rate parameter", field="fee_rate"))

    if model_type == "maker_taker":
        if data.get("maker_rate") is None or data.get("taker_rate") is None:
            result.add_error(ConfigValidationError("Maker-taker fee model requires both maker_rate and taker_rate"))

    for name in ("fee_rate", "maker_rate", "taker_rate"):
        if data.get(name) is not None:
            _check_rate(name, data[name], result)

    maker = _as_decimal(data.get("maker_rate")) if data.get("maker_rate") is not None else None
    taker = _as_decimal(data.get("taker_rate")) if data.get("taker_rate") is not None else None
    if maker is not None and taker is not None and maker > taker:
        result.add_warning("maker_rate is higher than taker_rate")

    return result


def check_tiers(data: Dict[str, Any]) -> ValidationResult:
    result = ValidationResult()
    if data.get("model_type") != "tiered":
        return result

    volume = data.get("volume")
    if volume is not None:
        volume_decimal = _as_decimal(volume)
        if volume_decimal is None or volume_decimal < 0:
            result.add_error(ConfigValidationError("volume must be a non-negative number", field="volume", value=volume))

    tiers = data.get("tiers")
    if tiers is None:
        return result
    if not tiers:
        result.add_error(ConfigValidationError("tiers cannot be empty", field="tiers"))
        return result

    for i, tier in enumerate(tiers):
        if not isinstance(tier, dict) or not {"min_volume", "maker_rate", "taker_rate"} <= set(tier):
            result.add_error(ConfigValidationError(
                f"tiers[{i}] must define min_volume, maker_rate and taker_rate", field="tiers"
            ))
            continue
        _check_rate(f"tiers[{i}].maker_rate", tier["maker_rate"], result)
        _check_rate(f"tiers[{i}].taker_rate", tier["taker_rate"], result)

    if result.is_valid:
        thresholds = [_as_decimal(tier["min_volume"]) for tier in tiers]
        if None in thresholds or min(thresholds) != 0:
            result.add_error(ConfigValidationError("The lowest tier must start at min_volume 0", field="tiers"))

    return result


def validate_fee_model_config(config_data: Dict[str, Any]) -> ValidationResult:
    """
    Validate fee model configuration data.

    Parameters
    ----------
    config_data : Dict[str, Any]
        Fee model configuration data to validate

    Returns
    -------
    ValidationResult
        Validation result with errors and warnings
    """
    schema_result = SchemaValidator("fees", FEE_MODEL_SCHEMA, OPTIONAL_FIELDS).validate(config_data)
    if not schema_result.is_valid:
        return schema_result

    business_result = BusinessValidator("fees", [check_model_type, check_rates, check_tiers]).validate(config_data)
    return schema_result.merge(business_result)


def get_fee_model_schema() -> Dict[str, Any]:
    """Get the fee model configuration schema."""
    return FEE_MODEL_SCHEMA.copy()
