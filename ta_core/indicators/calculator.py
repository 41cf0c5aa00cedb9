"""Indicator calculator coordinating all per-series calculations"""

from typing import Optional

import structlog

from ..config.defaults import DefaultConfig, get_default_config
from ..data.models import PriceSeries, extract_prices
from ..models.indicators import IndicatorSet, PatternResult, SupportResistance
from .levels import calculate_support_resistance
from .macd import calculate_macd
from .moving_average import calculate_ema, calculate_sma
from .patterns import detect_patterns
from .rsi import calculate_rsi
from .volatility import calculate_volatility

logger = structlog.get_logger(__name__)


class IndicatorCalculator:
    """
    Runs every indicator calculation with configured periods.

    Holds configuration only; each call is a pure function of its input
    series, so one instance can be shared across threads.
    """

    def __init__(self, config: Optional[DefaultConfig] = None):
        self.config = config or get_default_config()

    def calculate_indicators(self, series: PriceSeries) -> IndicatorSet:
        """
        Calculate RSI, SMAs, EMAs and MACD for a price series

        Args:
            series: Price series in chronological order

        Returns:
            IndicatorSet with None for every indicator lacking data
        """
        prices = extract_prices(series)
        ma = self.config.moving_average
        macd = self.config.macd

        indicators = IndicatorSet(
            rsi=calculate_rsi(prices, self.config.rsi.period),
            sma20=calculate_sma(prices, ma.sma_short),
            sma50=calculate_sma(prices, ma.sma_medium),
            sma200=calculate_sma(prices, ma.sma_long),
            ema12=calculate_ema(prices, ma.ema_fast),
            ema26=calculate_ema(prices, ma.ema_slow),
            macd=calculate_macd(prices, macd.fast_period, macd.slow_period, macd.signal_period),
        )

        logger.debug(
            "Indicators calculated",
            sample_count=len(prices),
            rsi=indicators.rsi,
            sma20=indicators.sma20,
            sma50=indicators.sma50,
            macd=indicators.macd.macd,
        )
        return indicators

    def calculate_support_resistance(self, series: PriceSeries) -> SupportResistance:
        return calculate_support_resistance(series, self.config.support_resistance.min_points)

    def calculate_volatility(self, series: PriceSeries) -> Optional[float]:
        params = self.config.volatility
        return calculate_volatility(series, params.window, params.annualization_periods)

    def detect_patterns(self, series: PriceSeries) -> PatternResult:
        params = self.config.pattern
        return detect_patterns(
            series,
            min_points=params.min_points,
            half_window=params.half_window,
            trend_threshold=params.trend_threshold,
            confidence_scale=params.confidence_scale,
            consolidation_confidence=params.consolidation_confidence,
        )

    def get_warmup_period(self) -> int:
        """Minimum number of samples for every indicator to be available"""
        ma = self.config.moving_average
        macd = self.config.macd
        return max(
            self.config.rsi.period + 1,
            ma.sma_short, ma.sma_medium, ma.sma_long,
            ma.ema_fast, ma.ema_slow,
            macd.slow_period + macd.signal_period,
            self.config.volatility.window + 1,
            self.config.pattern.min_points,
            self.config.support_resistance.min_points,
        )

    def is_warmed_up(self, series: PriceSeries) -> bool:
        return len(series) >= self.get_warmup_period()


def calculate_all_indicators(series: PriceSeries) -> IndicatorSet:
    """
    Calculate all technical indicators for a price series with default periods

    RSI(14), SMA(20/50/200), EMA(12/26), MACD(12/26/9).
    """
    return IndicatorCalculator().calculate_indicators(series)
