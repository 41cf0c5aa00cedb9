"""
TA Core - Technical Analysis Engine

Pure numeric transforms that turn a price time series into oscillator and
trend indicators, support/resistance levels, volatility and a synthesized
trading signal for the portfolio dashboard.
"""

__version__ = "0.1.0"
__author__ = "TA Core Team"

from .engine import TechnicalAnalysisEngine
from .indicators import (
    calculate_all_indicators,
    calculate_ema,
    calculate_macd,
    calculate_rsi,
    calculate_sma,
    calculate_support_resistance,
    calculate_volatility,
    detect_patterns,
)
from .signals import analyze_technical_indicators

__all__ = [
    "TechnicalAnalysisEngine",
    "calculate_rsi",
    "calculate_sma",
    "calculate_ema",
    "calculate_macd",
    "calculate_all_indicators",
    "analyze_technical_indicators",
    "calculate_support_resistance",
    "calculate_volatility",
    "detect_patterns",
]
