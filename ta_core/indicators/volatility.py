"""Annualized volatility of simple returns"""

import math
from typing import Optional

import structlog

from ..data.models import PriceSeries, extract_prices
from ..errors import IndicatorCalculationError
from .numeric import ensure_finite, mean

logger = structlog.get_logger(__name__)


def simple_returns(prices: list[float]) -> list[float]:
    """(p_t - p_{t-1}) / p_{t-1} for each consecutive pair."""
    return [(prices[i] - prices[i - 1]) / prices[i - 1] for i in range(1, len(prices))]


def calculate_volatility(
    series: PriceSeries,
    window: int = 30,
    annualization_periods: int = 365
) -> Optional[float]:
    """
    Calculate annualized volatility

    Population standard deviation of the simple returns over the trailing
    `window` intervals, scaled by sqrt(annualization_periods). The default
    scaling assumes one sample per day; it is not adapted to the actual
    sampling cadence of the series.

    Args:
        series: Price series in chronological order
        window: Number of trailing returns (default 30)
        annualization_periods: Samples per year (default 365)

    Returns:
        Volatility >= 0, or None if fewer than window + 1 samples
    """
    if len(series) < window + 1:
        return None

    prices = extract_prices(series[-(window + 1):])

    try:
        returns = simple_returns(prices)
        avg_return = mean(returns)
        variance = mean([(r - avg_return) ** 2 for r in returns])
        volatility = math.sqrt(variance) * math.sqrt(annualization_periods)
        return ensure_finite(volatility, "volatility", {"window": window})
    except (ArithmeticError, ValueError, IndicatorCalculationError) as e:
        logger.warning("Indicator calculation failed", indicator="volatility", window=window, error=str(e))
        return None
