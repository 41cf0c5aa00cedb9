"""Coarse trend/consolidation pattern detection"""

import structlog

from ..data.models import PriceSeries, extract_prices
from ..errors import IndicatorCalculationError
from ..models.indicators import PatternResult, PatternType
from .numeric import ensure_finite, mean

logger = structlog.get_logger(__name__)


def detect_patterns(
    series: PriceSeries,
    min_points: int = 20,
    half_window: int = 5,
    trend_threshold: float = 0.05,
    confidence_scale: float = 10.0,
    consolidation_confidence: float = 0.5
) -> PatternResult:
    """
    Classify the most recent price action

    Compares the mean of the last `half_window` prices with the mean of the
    `half_window` prices before them. A relative difference above
    `trend_threshold` is labelled an ascending or descending triangle with
    confidence min(difference * confidence_scale, 1); anything smaller is
    consolidation. This is a heuristic, not a chart-pattern recognizer.

    Args:
        series: Price series in chronological order
        min_points: Minimum number of samples (default 20)
        half_window: Size of each compared half (default 5)
        trend_threshold: Relative mean difference that counts as a trend (default 0.05)
        confidence_scale: Multiplier from difference to confidence (default 10)
        consolidation_confidence: Confidence reported for consolidation (default 0.5)

    Returns:
        PatternResult with confidence in [0, 1]
    """
    if len(series) < min_points:
        return PatternResult(
            pattern=None,
            confidence=0.0,
            description="Insufficient data for pattern analysis",
        )

    prices = extract_prices(series[-2 * half_window:])
    earlier = prices[:half_window]
    recent = prices[half_window:]

    try:
        recent_avg = mean(recent)
        earlier_avg = mean(earlier)
        strength = ensure_finite(abs(recent_avg - earlier_avg) / earlier_avg, "pattern_strength")
    except (ArithmeticError, ValueError, IndicatorCalculationError) as e:
        logger.warning("Indicator calculation failed", indicator="pattern", error=str(e))
        return PatternResult(
            pattern=None,
            confidence=0.0,
            description="Pattern analysis unavailable",
        )

    if strength > trend_threshold:
        trend = "upward" if recent_avg > earlier_avg else "downward"
        return PatternResult(
            pattern=PatternType.ASCENDING_TRIANGLE if trend == "upward" else PatternType.DESCENDING_TRIANGLE,
            confidence=max(0.0, min(strength * confidence_scale, 1.0)),
            description=f"{trend} trend detected with {strength * 100:.1f}% price movement",
        )

    return PatternResult(
        pattern=PatternType.CONSOLIDATION,
        confidence=consolidation_confidence,
        description="Price consolidating in range",
    )
