"""MACD (Moving Average Convergence Divergence) calculation"""

from typing import Sequence

import structlog

from ..errors import IndicatorCalculationError
from ..models.indicators import MACDResult
from .moving_average import ema_series
from .numeric import ensure_finite

logger = structlog.get_logger(__name__)


def macd_line(values: Sequence[float], fast_period: int = 12, slow_period: int = 26) -> list[float]:
    """
    EMA(fast) - EMA(slow) from the first index where the slow EMA exists

    Returns:
        List of len(values) - slow_period + 1 values, empty if insufficient data
    """
    fast_ema = ema_series(values, fast_period)
    slow_ema = ema_series(values, slow_period)
    if not slow_ema:
        return []

    # Both series end on the latest price; align them on the slow EMA start
    offset = slow_period - fast_period
    return [fast - slow for fast, slow in zip(fast_ema[offset:], slow_ema)]


def calculate_macd(
    prices: Sequence[float],
    fast_period: int = 12,
    slow_period: int = 26,
    signal_period: int = 9
) -> MACDResult:
    """
    Calculate the latest MACD triple

    macd = EMA(fast) - EMA(slow)
    signal = EMA(macd series, signal_period)
    histogram = macd - signal

    Args:
        prices: Prices in chronological order
        fast_period: Fast EMA period (default 12)
        slow_period: Slow EMA period (default 26)
        signal_period: Signal line EMA period (default 9)

    Returns:
        MACDResult; all fields None if fewer than slow_period + signal_period prices
    """
    if len(prices) < slow_period + signal_period:
        return MACDResult()

    calculation_input = {
        "fast_period": fast_period,
        "slow_period": slow_period,
        "signal_period": signal_period,
    }

    try:
        line = macd_line(prices, fast_period, slow_period)
        signal_line = ema_series(line, signal_period)

        macd = ensure_finite(line[-1], "macd", calculation_input)
        signal = ensure_finite(signal_line[-1], "macd_signal", calculation_input)
        return MACDResult(macd=macd, signal=signal, histogram=macd - signal)
    except (ArithmeticError, ValueError, IndexError, IndicatorCalculationError) as e:
        logger.warning("Indicator calculation failed", indicator="macd", error=str(e), **calculation_input)
        return MACDResult()
