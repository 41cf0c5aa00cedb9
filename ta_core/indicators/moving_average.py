"""SMA (Simple Moving Average) and EMA (Exponential Moving Average) calculations"""

from typing import Optional, Sequence

import structlog

from ..errors import IndicatorCalculationError
from .numeric import ensure_finite, mean

logger = structlog.get_logger(__name__)


def sma_series(values: Sequence[float], period: int) -> list[float]:
    """
    Simple moving average at every index where a full window exists

    Args:
        values: Prices in chronological order
        period: Window length

    Returns:
        List of len(values) - period + 1 averages, empty if insufficient data
    """
    if len(values) < period:
        return []

    return [mean(values[i - period + 1:i + 1]) for i in range(period - 1, len(values))]


def ema_series(values: Sequence[float], period: int) -> list[float]:
    """
    Exponential moving average seeded from the SMA of the first window

    EMA_t = EMA_{t-1} + k * (price_t - EMA_{t-1}),  k = 2 / (period + 1)

    Args:
        values: Prices in chronological order
        period: Smoothing period

    Returns:
        List of len(values) - period + 1 values (the first one is the seed SMA),
        empty if insufficient data
    """
    if len(values) < period:
        return []

    k = 2.0 / (period + 1)
    ema = mean(values[:period])
    result = [ema]

    for price in values[period:]:
        ema = ema + k * (price - ema)
        result.append(ema)

    return result


def calculate_sma(prices: Sequence[float], period: int) -> Optional[float]:
    """
    Calculate the latest Simple Moving Average

    Args:
        prices: Prices in chronological order
        period: Window length

    Returns:
        Mean of the trailing `period` prices, or None if unavailable
    """
    if len(prices) < period:
        return None

    try:
        return ensure_finite(mean(prices[-period:]), "sma", {"period": period})
    except (ArithmeticError, ValueError, IndicatorCalculationError) as e:
        logger.warning("Indicator calculation failed", indicator="sma", period=period, error=str(e))
        return None


def calculate_ema(prices: Sequence[float], period: int) -> Optional[float]:
    """
    Calculate the latest Exponential Moving Average

    Args:
        prices: Prices in chronological order
        period: Smoothing period

    Returns:
        Latest EMA value, or None if unavailable
    """
    if len(prices) < period:
        return None

    try:
        return ensure_finite(ema_series(prices, period)[-1], "ema", {"period": period})
    except (ArithmeticError, ValueError, IndicatorCalculationError) as e:
        logger.warning("Indicator calculation failed", indicator="ema", period=period, error=str(e))
        return None
