"""
Signal synthesis module.

Classifies indicator outputs and combines them into a weighted composite
trading signal, plus portfolio-level insights derived from those signals.
"""

from .insights import Insight, InsightKind, generate_insights
from .synthesizer import (
    SignalSynthesizer,
    analyze_technical_indicators,
    classify_macd,
    classify_rsi,
    classify_trend,
    score_to_signal,
)

__all__ = [
    "SignalSynthesizer",
    "analyze_technical_indicators",
    "classify_rsi",
    "classify_trend",
    "classify_macd",
    "score_to_signal",
    "Insight",
    "InsightKind",
    "generate_insights",
]
