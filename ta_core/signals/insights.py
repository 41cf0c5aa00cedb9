"""Portfolio-level insights derived from per-coin signal analyses"""

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Mapping, Optional

from ..config.defaults import RSIParams
from ..models.indicators import IndicatorAnalysis, RSIState, Signal


class InsightKind(str, Enum):
    """Display category of an insight."""
    WARNING = "warning"
    INFO = "info"
    SUCCESS = "success"


@dataclass(frozen=True)
class Insight:
    """One human-readable observation across the analysed coins"""
    kind: InsightKind
    message: str
    symbols: tuple[str, ...]


def _format_threshold(value: float) -> str:
    return f"{value:g}"


def _group_by_threshold(
    symbols: tuple[str, ...],
    threshold_for: Callable[[str], float]
) -> list[tuple[float, tuple[str, ...]]]:
    """Group symbols by threshold, both in first-appearance order."""
    groups: dict[float, list[str]] = {}
    for symbol in symbols:
        groups.setdefault(threshold_for(symbol), []).append(symbol)
    return [(threshold, tuple(members)) for threshold, members in groups.items()]


def generate_insights(
    analyses: Mapping[str, IndicatorAnalysis],
    rsi_params: Optional[RSIParams] = None,
    rsi_params_by_symbol: Optional[Mapping[str, RSIParams]] = None
) -> list[Insight]:
    """
    Summarize overbought, oversold and strong-buy coins

    Args:
        analyses: Analysis per coin symbol, in display order
        rsi_params: Thresholds quoted in the messages
        rsi_params_by_symbol: Thresholds a coin was actually classified with,
            taking precedence over `rsi_params`

    Returns:
        Insights in fixed order (overbought, oversold, strong buy); groups
        with no members are omitted. Coins classified with different RSI
        thresholds get one insight per threshold.
    """
    rsi_params = rsi_params or RSIParams()
    rsi_params_by_symbol = rsi_params_by_symbol or {}

    def params_for(symbol: str) -> RSIParams:
        return rsi_params_by_symbol.get(symbol, rsi_params)

    overbought = tuple(s for s, a in analyses.items() if a.rsi_analysis == RSIState.OVERBOUGHT)
    oversold = tuple(s for s, a in analyses.items() if a.rsi_analysis == RSIState.OVERSOLD)
    strong_buys = tuple(s for s, a in analyses.items() if a.overall_signal == Signal.STRONG_BUY)

    insights = []

    for threshold, symbols in _group_by_threshold(overbought, lambda s: params_for(s).overbought):
        insights.append(Insight(
            kind=InsightKind.WARNING,
            message=(f"Overbought (RSI>{_format_threshold(threshold)}): "
                     f"{', '.join(symbols)} - Consider taking profits"),
            symbols=symbols,
        ))

    for threshold, symbols in _group_by_threshold(oversold, lambda s: params_for(s).oversold):
        insights.append(Insight(
            kind=InsightKind.INFO,
            message=(f"Oversold (RSI<{_format_threshold(threshold)}): "
                     f"{', '.join(symbols)} - Potential buying opportunity"),
            symbols=symbols,
        ))

    if strong_buys:
        insights.append(Insight(
            kind=InsightKind.SUCCESS,
            message=f"Strong buy signals: {', '.join(strong_buys)} - Technical indicators align bullishly",
            symbols=strong_buys,
        ))

    return insights
