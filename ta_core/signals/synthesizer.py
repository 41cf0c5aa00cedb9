"""
Indicator classification and composite signal synthesis.

Each indicator is reduced to a categorical reading, then the readings are
combined into an integer score:

    RSI    oversold +1 / overbought -1
    Trend  bullish  +2 / bearish    -2
    MACD   bullish  +1 / bearish    -1

and the score is mapped to a recommendation with fixed thresholds
(>= 3 strong_buy, >= 1 buy, <= -3 strong_sell, <= -1 sell, else hold).
Weights and thresholds come from SignalParams; nothing is fitted.
"""

from typing import Optional

from ..config.defaults import DefaultConfig, RSIParams, SignalParams, get_default_config
from ..models.indicators import (
    IndicatorAnalysis,
    IndicatorSet,
    MACDResult,
    RSIState,
    Signal,
    TrendState,
)

_DIRECTION = {
    TrendState.BULLISH: 1,
    TrendState.BEARISH: -1,
    TrendState.NEUTRAL: 0,
}


def classify_rsi(rsi: Optional[float], overbought: float = 70.0, oversold: float = 30.0) -> RSIState:
    """Overbought strictly above `overbought`, oversold strictly below `oversold`."""
    if rsi is None:
        return RSIState.NEUTRAL
    if rsi > overbought:
        return RSIState.OVERBOUGHT
    if rsi < oversold:
        return RSIState.OVERSOLD
    return RSIState.NEUTRAL


def classify_trend(current_price: float, sma20: Optional[float], sma50: Optional[float]) -> TrendState:
    """
    Moving average trend reading

    Bullish when price > sma20 > sma50, bearish when price < sma20 < sma50,
    neutral otherwise or when either average is unavailable.
    """
    if sma20 is None or sma50 is None:
        return TrendState.NEUTRAL

    if current_price > sma20 > sma50:
        return TrendState.BULLISH
    if current_price < sma20 < sma50:
        return TrendState.BEARISH
    return TrendState.NEUTRAL


def classify_macd(macd: MACDResult) -> TrendState:
    """
    MACD momentum reading

    Bullish when macd > signal with a positive histogram, bearish when
    macd < signal with a negative histogram. Any missing component is neutral.
    """
    if not macd.is_available:
        return TrendState.NEUTRAL

    if macd.macd > macd.signal and macd.histogram > 0:
        return TrendState.BULLISH
    if macd.macd < macd.signal and macd.histogram < 0:
        return TrendState.BEARISH
    return TrendState.NEUTRAL


def compute_signal_score(
    rsi_state: RSIState,
    trend_state: TrendState,
    macd_state: TrendState,
    params: Optional[SignalParams] = None
) -> int:
    """Weighted sum of the three classifications."""
    params = params or SignalParams()

    # Oversold is a buy reading, overbought a sell reading
    rsi_direction = {RSIState.OVERSOLD: 1, RSIState.OVERBOUGHT: -1}.get(rsi_state, 0)

    return (
        rsi_direction * params.rsi_weight
        + _DIRECTION[trend_state] * params.trend_weight
        + _DIRECTION[macd_state] * params.macd_weight
    )


def score_to_signal(score: int, params: Optional[SignalParams] = None) -> Signal:
    """Map a composite score to a recommendation."""
    params = params or SignalParams()

    if score >= params.strong_buy_score:
        return Signal.STRONG_BUY
    if score >= params.buy_score:
        return Signal.BUY
    if score <= params.strong_sell_score:
        return Signal.STRONG_SELL
    if score <= params.sell_score:
        return Signal.SELL
    return Signal.HOLD


class SignalSynthesizer:
    """Classifies an IndicatorSet and synthesizes the composite signal."""

    def __init__(self, config: Optional[DefaultConfig] = None):
        self.config = config or get_default_config()

    @property
    def rsi_params(self) -> RSIParams:
        return self.config.rsi

    @property
    def signal_params(self) -> SignalParams:
        return self.config.signal

    def analyze(self, indicators: IndicatorSet, current_price: float) -> IndicatorAnalysis:
        """
        Classify indicators at the current price

        Args:
            indicators: Latest indicator values
            current_price: Price the trend reading is evaluated against

        Returns:
            IndicatorAnalysis including the composite score
        """
        rsi_state = classify_rsi(indicators.rsi, self.rsi_params.overbought, self.rsi_params.oversold)
        trend_state = classify_trend(current_price, indicators.sma20, indicators.sma50)
        macd_state = classify_macd(indicators.macd)

        score = compute_signal_score(rsi_state, trend_state, macd_state, self.signal_params)

        return IndicatorAnalysis(
            rsi_analysis=rsi_state,
            trend_analysis=trend_state,
            macd_analysis=macd_state,
            overall_signal=score_to_signal(score, self.signal_params),
            score=score,
        )


def analyze_technical_indicators(indicators: IndicatorSet, current_price: float) -> IndicatorAnalysis:
    """Analyze technical indicators with default thresholds and weights."""
    return SignalSynthesizer().analyze(indicators, current_price)
