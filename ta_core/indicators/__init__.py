"""Indicator calculators for technical analysis of price series"""

from .calculator import IndicatorCalculator, calculate_all_indicators
from .levels import calculate_pivot_levels, calculate_support_resistance
from .macd import calculate_macd, macd_line
from .moving_average import calculate_ema, calculate_sma, ema_series, sma_series
from .patterns import detect_patterns
from .rsi import calculate_rsi, rsi_series
from .volatility import calculate_volatility

__all__ = [
    "IndicatorCalculator",
    "calculate_all_indicators",
    "calculate_rsi",
    "calculate_sma",
    "calculate_ema",
    "calculate_macd",
    "calculate_pivot_levels",
    "calculate_support_resistance",
    "calculate_volatility",
    "detect_patterns",
    "rsi_series",
    "sma_series",
    "ema_series",
    "macd_line",
]
