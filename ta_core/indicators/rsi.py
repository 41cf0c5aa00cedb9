"""RSI (Relative Strength Index) calculation using Wilder smoothing"""

from typing import Optional, Sequence

import structlog

from ..errors import IndicatorCalculationError
from .numeric import ensure_finite, mean

logger = structlog.get_logger(__name__)


def _rsi_from_averages(avg_gain: float, avg_loss: float) -> float:
    """Map average gain/loss to the 0-100 oscillator."""
    if avg_loss == 0:
        # No movement at all reads as neutral rather than maximally overbought
        return 50.0 if avg_gain == 0 else 100.0
    if avg_gain == 0:
        return 0.0

    relative_strength = avg_gain / avg_loss
    return 100.0 - 100.0 / (1.0 + relative_strength)


def rsi_series(values: Sequence[float], period: int = 14) -> list[float]:
    """
    Wilder RSI at every index from `period` onwards

    The first average gain/loss is the simple mean over the first `period`
    price changes; each later average is
    (previous_average * (period - 1) + current) / period.

    Args:
        values: Prices in chronological order
        period: RSI period (default 14)

    Returns:
        List of len(values) - period RSI values, empty if insufficient data
    """
    if len(values) < period + 1:
        return []

    changes = [values[i] - values[i - 1] for i in range(1, len(values))]

    avg_gain = mean([max(change, 0.0) for change in changes[:period]])
    avg_loss = mean([max(-change, 0.0) for change in changes[:period]])
    result = [_rsi_from_averages(avg_gain, avg_loss)]

    for change in changes[period:]:
        gain = max(change, 0.0)
        loss = max(-change, 0.0)
        avg_gain = (avg_gain * (period - 1) + gain) / period
        avg_loss = (avg_loss * (period - 1) + loss) / period
        result.append(_rsi_from_averages(avg_gain, avg_loss))

    return result


def calculate_rsi(prices: Sequence[float], period: int = 14) -> Optional[float]:
    """
    Calculate the latest RSI

    RSI > 70: Overbought
    RSI < 30: Oversold

    Args:
        prices: Prices in chronological order
        period: RSI period (default 14)

    Returns:
        Latest RSI in [0, 100], or None if fewer than period + 1 prices
    """
    if len(prices) < period + 1:
        return None

    try:
        return ensure_finite(rsi_series(prices, period)[-1], "rsi", {"period": period})
    except (ArithmeticError, ValueError, IndicatorCalculationError) as e:
        logger.warning("Indicator calculation failed", indicator="rsi", period=period, error=str(e))
        return None
