"""Pivot point support and resistance levels"""

import structlog

from ..data.models import PriceSeries, extract_prices
from ..errors import IndicatorCalculationError
from ..models.indicators import SupportResistance
from .numeric import ensure_finite

logger = structlog.get_logger(__name__)


def calculate_pivot_levels(high: float, low: float, close: float) -> dict[str, float]:
    """
    Classic floor-trader pivot levels

    P  = (high + low + close) / 3
    R1 = 2P - low,   R2 = P + (high - low)
    S1 = 2P - high,  S2 = P - (high - low)
    """
    pivot = (high + low + close) / 3
    price_range = high - low

    return {
        "pivot": pivot,
        "r1": 2 * pivot - low,
        "r2": pivot + price_range,
        "s1": 2 * pivot - high,
        "s2": pivot - price_range,
    }


def calculate_support_resistance(series: PriceSeries, min_points: int = 10) -> SupportResistance:
    """
    Support and resistance levels from one pivot computation over the window

    Uses the window's highest and lowest prices and the last price as close.
    Support keeps only positive levels and is sorted descending; resistance
    is sorted ascending.

    Args:
        series: Price series in chronological order
        min_points: Minimum number of samples (default 10)

    Returns:
        SupportResistance, with both sides empty if insufficient data
    """
    if len(series) < min_points:
        return SupportResistance()

    prices = extract_prices(series)

    try:
        levels = calculate_pivot_levels(max(prices), min(prices), prices[-1])
        for name, value in levels.items():
            ensure_finite(value, f"pivot_{name}")
    except (ArithmeticError, ValueError, IndicatorCalculationError) as e:
        logger.warning("Indicator calculation failed", indicator="support_resistance", error=str(e))
        return SupportResistance()

    support = sorted((level for level in (levels["s1"], levels["s2"]) if level > 0), reverse=True)
    resistance = sorted((levels["r1"], levels["r2"]))

    return SupportResistance(support=tuple(support), resistance=tuple(resistance))
