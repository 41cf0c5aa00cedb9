"""Data models for indicator outputs and their classification"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional

from ..config.defaults import RSIParams


class RSIState(str, Enum):
    """RSI zone classification."""
    OVERBOUGHT = "overbought"
    OVERSOLD = "oversold"
    NEUTRAL = "neutral"


class TrendState(str, Enum):
    """Directional classification shared by trend and MACD analysis."""
    BULLISH = "bullish"
    BEARISH = "bearish"
    NEUTRAL = "neutral"


class Signal(str, Enum):
    """Composite trading recommendation."""
    STRONG_BUY = "strong_buy"
    BUY = "buy"
    HOLD = "hold"
    SELL = "sell"
    STRONG_SELL = "strong_sell"


class PatternType(str, Enum):
    """Coarse chart pattern labels."""
    ASCENDING_TRIANGLE = "ascending_triangle"
    DESCENDING_TRIANGLE = "descending_triangle"
    CONSOLIDATION = "consolidation"


@dataclass(frozen=True)
class MACDResult:
    """Latest MACD triple; every field is None when unavailable"""
    macd: Optional[float] = None
    signal: Optional[float] = None
    histogram: Optional[float] = None

    @property
    def is_available(self) -> bool:
        return self.macd is not None and self.signal is not None and self.histogram is not None


@dataclass(frozen=True)
class IndicatorSet:
    """Latest scalar indicator values for one price series"""
    rsi: Optional[float] = None
    sma20: Optional[float] = None
    sma50: Optional[float] = None
    sma200: Optional[float] = None
    ema12: Optional[float] = None
    ema26: Optional[float] = None
    macd: MACDResult = field(default_factory=MACDResult)


@dataclass(frozen=True)
class IndicatorAnalysis:
    """Categorical reading of an IndicatorSet at a given price"""
    rsi_analysis: RSIState = RSIState.NEUTRAL
    trend_analysis: TrendState = TrendState.NEUTRAL
    macd_analysis: TrendState = TrendState.NEUTRAL
    overall_signal: Signal = Signal.HOLD
    score: int = 0


@dataclass(frozen=True)
class SupportResistance:
    """Pivot-derived levels: support descending, resistance ascending"""
    support: tuple[float, ...] = ()
    resistance: tuple[float, ...] = ()


@dataclass(frozen=True)
class PatternResult:
    """Pattern detector output"""
    pattern: Optional[PatternType]
    confidence: float
    description: str


@dataclass(frozen=True)
class AnalysisResult:
    """Everything the pipeline derives from one price series"""
    coin_id: Optional[str]
    current_price: Optional[float]
    sample_count: int
    indicators: IndicatorSet
    analysis: IndicatorAnalysis
    support_resistance: SupportResistance
    volatility: Optional[float]
    pattern: PatternResult
    rsi_params: RSIParams = field(default_factory=RSIParams)

    def to_dict(self) -> dict[str, Any]:
        """JSON-friendly representation for display collaborators."""
        return {
            "coin_id": self.coin_id,
            "current_price": self.current_price,
            "sample_count": self.sample_count,
            "indicators": {
                "rsi": self.indicators.rsi,
                "sma20": self.indicators.sma20,
                "sma50": self.indicators.sma50,
                "sma200": self.indicators.sma200,
                "ema12": self.indicators.ema12,
                "ema26": self.indicators.ema26,
                "macd": {
                    "macd": self.indicators.macd.macd,
                    "signal": self.indicators.macd.signal,
                    "histogram": self.indicators.macd.histogram,
                },
            },
            "analysis": {
                "rsi_analysis": self.analysis.rsi_analysis.value,
                "trend_analysis": self.analysis.trend_analysis.value,
                "macd_analysis": self.analysis.macd_analysis.value,
                "overall_signal": self.analysis.overall_signal.value,
                "score": self.analysis.score,
            },
            "support_resistance": {
                "support": list(self.support_resistance.support),
                "resistance": list(self.support_resistance.resistance),
            },
            "volatility": self.volatility,
            "pattern": {
                "pattern": self.pattern.pattern.value if self.pattern.pattern else None,
                "confidence": self.pattern.confidence,
                "description": self.pattern.description,
            },
            "rsi_thresholds": {
                "overbought": self.rsi_params.overbought,
                "oversold": self.rsi_params.oversold,
            },
        }
