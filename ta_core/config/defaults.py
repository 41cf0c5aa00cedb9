"""Default configuration parameters for the technical analysis engine."""

from dataclasses import dataclass


@dataclass(frozen=True)
class RSIParams:
    """RSI calculation and classification parameters."""
    period: int = 14
    overbought: float = 70.0                          # Strictly above = overbought
    oversold: float = 30.0                            # Strictly below = oversold


@dataclass(frozen=True)
class MovingAverageParams:
    """Moving average periods used to build trend context."""
    sma_short: int = 20
    sma_medium: int = 50
    sma_long: int = 200
    ema_fast: int = 12
    ema_slow: int = 26


@dataclass(frozen=True)
class MACDParams:
    """MACD calculation parameters."""
    fast_period: int = 12
    slow_period: int = 26
    signal_period: int = 9


@dataclass(frozen=True)
class SignalParams:
    """Composite signal weights and score thresholds."""
    # Component weights
    rsi_weight: int = 1
    trend_weight: int = 2                             # Trend is the dominant factor
    macd_weight: int = 1

    # Score thresholds (inclusive)
    strong_buy_score: int = 3
    buy_score: int = 1
    sell_score: int = -1
    strong_sell_score: int = -3


@dataclass(frozen=True)
class SupportResistanceParams:
    """Pivot point support/resistance parameters."""
    min_points: int = 10


@dataclass(frozen=True)
class VolatilityParams:
    """Volatility estimation parameters."""
    window: int = 30
    annualization_periods: int = 365                  # Assumes daily sampling
    cadence_tolerance: float = 0.25                   # Relative slack for daily cadence check


@dataclass(frozen=True)
class PatternParams:
    """Pattern detector heuristics."""
    min_points: int = 20
    half_window: int = 5                              # Recent vs earlier half size
    trend_threshold: float = 0.05                     # Relative mean difference
    confidence_scale: float = 10.0
    consolidation_confidence: float = 0.5


@dataclass(frozen=True)
class DefaultConfig:
    """Complete default configuration."""
    rsi: RSIParams
    moving_average: MovingAverageParams
    macd: MACDParams
    signal: SignalParams
    support_resistance: SupportResistanceParams
    volatility: VolatilityParams
    pattern: PatternParams


def get_default_config() -> DefaultConfig:
    """Get the default configuration instance."""
    return DefaultConfig(
        rsi=RSIParams(),
        moving_average=MovingAverageParams(),
        macd=MACDParams(),
        signal=SignalParams(),
        support_resistance=SupportResistanceParams(),
        volatility=VolatilityParams(),
        pattern=PatternParams(),
    )
