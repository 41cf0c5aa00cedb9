"""Configuration validation utilities."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class ValidationError:
    """Represents a configuration validation error."""
    field: str
    message: str
    value: Any


def _is_positive_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


class ConfigValidator:
    """Validates configuration parameters."""

    @staticmethod
    def _validate_periods(section: str, params: dict[str, Any], names: tuple[str, ...]) -> list[ValidationError]:
        errors = []
        for name in names:
            if name in params and not _is_positive_int(params[name]):
                errors.append(ValidationError(
                    field=f"{section}.{name}",
                    message="Must be a positive integer",
                    value=params[name]
                ))
        return errors

    @staticmethod
    def validate_rsi_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate RSI parameters."""
        errors = ConfigValidator._validate_periods("rsi", params, ("period",))

        overbought = params.get("overbought")
        oversold = params.get("oversold")

        for name, value in (("overbought", overbought), ("oversold", oversold)):
            if value is not None and (not _is_number(value) or value < 0 or value > 100):
                errors.append(ValidationError(
                    field=f"rsi.{name}",
                    message="Must be a number between 0 and 100",
                    value=value
                ))

        if _is_number(overbought) and _is_number(oversold) and oversold >= overbought:
            errors.append(ValidationError(
                field="rsi.oversold",
                message="Must be lower than rsi.overbought",
                value=oversold
            ))

        return errors

    @staticmethod
    def validate_moving_average_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate moving average periods."""
        errors = ConfigValidator._validate_periods(
            "moving_average", params,
            ("sma_short", "sma_medium", "sma_long", "ema_fast", "ema_slow")
        )

        # Trend classification compares the short SMA against the medium one
        short, medium = params.get("sma_short"), params.get("sma_medium")
        if _is_positive_int(short) and _is_positive_int(medium) and short >= medium:
            errors.append(ValidationError(
                field="moving_average.sma_short",
                message="Must be shorter than moving_average.sma_medium",
                value=short
            ))

        return errors

    @staticmethod
    def validate_macd_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate MACD parameters."""
        errors = ConfigValidator._validate_periods(
            "macd", params, ("fast_period", "slow_period", "signal_period")
        )

        fast, slow = params.get("fast_period"), params.get("slow_period")
        if _is_positive_int(fast) and _is_positive_int(slow) and fast >= slow:
            errors.append(ValidationError(
                field="macd.fast_period",
                message="Must be shorter than macd.slow_period",
                value=fast
            ))

        return errors

    @staticmethod
    def validate_signal_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate composite signal weights and thresholds."""
        errors = []

        for name in ("rsi_weight", "trend_weight", "macd_weight"):
            if name in params:
                value = params[name]
                if not isinstance(value, int) or isinstance(value, bool) or value < 0:
                    errors.append(ValidationError(
                        field=f"signal.{name}",
                        message="Must be a non-negative integer",
                        value=value
                    ))

        thresholds = ("strong_sell_score", "sell_score", "buy_score", "strong_buy_score")
        for name in thresholds:
            if name in params and not _is_number(params[name]):
                errors.append(ValidationError(
                    field=f"signal.{name}",
                    message="Must be a number",
                    value=params[name]
                ))

        present = [(name, params[name]) for name in thresholds
                   if name in params and _is_number(params[name])]
        if len(present) == len(thresholds):
            # strong_sell <= sell < buy <= strong_buy
            values = [value for _, value in present]
            if not (values[0] <= values[1] < values[2] <= values[3]):
                errors.append(ValidationError(
                    field="signal",
                    message="Thresholds must satisfy strong_sell <= sell < buy <= strong_buy",
                    value=dict(present)
                ))

        return errors

    @staticmethod
    def validate_support_resistance_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate support/resistance parameters."""
        return ConfigValidator._validate_periods("support_resistance", params, ("min_points",))

    @staticmethod
    def validate_volatility_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate volatility parameters."""
        errors = ConfigValidator._validate_periods(
            "volatility", params, ("window", "annualization_periods")
        )

        if "cadence_tolerance" in params:
            value = params["cadence_tolerance"]
            if not _is_number(value) or value < 0 or value >= 1:
                errors.append(ValidationError(
                    field="volatility.cadence_tolerance",
                    message="Must be a number in [0, 1)",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_pattern_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate pattern detector heuristics."""
        errors = ConfigValidator._validate_periods("pattern", params, ("min_points", "half_window"))

        min_points, half_window = params.get("min_points"), params.get("half_window")
        if _is_positive_int(min_points) and _is_positive_int(half_window) and min_points < 2 * half_window:
            errors.append(ValidationError(
                field="pattern.min_points",
                message="Must be at least twice pattern.half_window",
                value=min_points
            ))

        if "trend_threshold" in params:
            value = params["trend_threshold"]
            if not _is_number(value) or value <= 0 or value > 1:
                errors.append(ValidationError(
                    field="pattern.trend_threshold",
                    message="Must be a positive number between 0 and 1",
                    value=value
                ))

        if "confidence_scale" in params:
            value = params["confidence_scale"]
            if not _is_number(value) or value <= 0:
                errors.append(ValidationError(
                    field="pattern.confidence_scale",
                    message="Must be a positive number",
                    value=value
                ))

        if "consolidation_confidence" in params:
            value = params["consolidation_confidence"]
            if not _is_number(value) or value < 0 or value > 1:
                errors.append(ValidationError(
                    field="pattern.consolidation_confidence",
                    message="Must be a number between 0 and 1",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_config(config: dict[str, Any]) -> list[ValidationError]:
        """Validate complete configuration."""
        validators = {
            "rsi": ConfigValidator.validate_rsi_params,
            "moving_average": ConfigValidator.validate_moving_average_params,
            "macd": ConfigValidator.validate_macd_params,
            "signal": ConfigValidator.validate_signal_params,
            "support_resistance": ConfigValidator.validate_support_resistance_params,
            "volatility": ConfigValidator.validate_volatility_params,
            "pattern": ConfigValidator.validate_pattern_params,
        }

        errors = []
        for section, validate in validators.items():
            if section not in config:
                continue
            params = config[section] or {}
            if not isinstance(params, dict):
                errors.append(ValidationError(field=section, message="Must be a mapping", value=params))
                continue
            errors.extend(validate(params))

        return errors
