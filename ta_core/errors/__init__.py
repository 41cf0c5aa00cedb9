"""
Error classification system for the technical analysis engine.

Insufficient data is never an error at the calculator boundary; these
exceptions describe malformed inputs, internal numeric failures and
configuration problems.
"""

from .data_quality import (
    DataQualityError,
    MissingDataError,
    MalformedDataError,
)
from .system_failures import (
    SystemFailureError,
    IndicatorCalculationError,
    ConfigurationError,
)

__all__ = [
    # Data Quality Errors
    "DataQualityError",
    "MissingDataError",
    "MalformedDataError",
    # System Failures
    "SystemFailureError",
    "IndicatorCalculationError",
    "ConfigurationError",
]
