"""Shared numeric helpers for indicator primitives"""

import math
from typing import Optional, Sequence

from ..errors import IndicatorCalculationError


def mean(values: Sequence[float]) -> float:
    """Arithmetic mean; raises ZeroDivisionError for an empty sequence."""
    return math.fsum(values) / len(values)


def ensure_finite(value: float, metric_name: str, calculation_input: Optional[dict] = None) -> float:
    """
    Reject NaN/inf results produced by a primitive.

    Raises:
        IndicatorCalculationError: If the value is not finite
    """
    if not math.isfinite(value):
        raise IndicatorCalculationError(
            f"Non-finite {metric_name} value: {value}",
            metric_name=metric_name,
            calculation_input=calculation_input,
        )
    return value
