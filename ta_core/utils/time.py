"""
Time utilities for price series timestamps.

Timestamps are epoch milliseconds. The sampling cadence helpers exist because
the volatility estimator annualizes with a fixed periods-per-year factor that
is only correct for daily samples.
"""

from datetime import datetime, timezone
from statistics import median
from typing import Optional

from ..data.models import PriceSeries

MS_PER_DAY = 24 * 60 * 60 * 1000


def ms_to_datetime(ts_ms: int) -> datetime:
    """Convert epoch milliseconds to a UTC datetime."""
    return datetime.fromtimestamp(ts_ms / 1000.0, tz=timezone.utc)


def median_interval_ms(series: PriceSeries) -> Optional[float]:
    """
    Median spacing between consecutive samples.

    Returns:
        Median interval in milliseconds, or None with fewer than two samples
    """
    if len(series) < 2:
        return None

    intervals = [
        series[i].timestamp - series[i - 1].timestamp
        for i in range(1, len(series))
    ]
    return float(median(intervals))


def is_daily_cadence(series: PriceSeries, tolerance: float = 0.25) -> Optional[bool]:
    """
    Check whether a series is sampled roughly once per day.

    Args:
        series: Price series ordered by timestamp
        tolerance: Allowed relative deviation of the median interval from one day

    Returns:
        True/False, or None when the cadence cannot be determined
    """
    interval = median_interval_ms(series)
    if interval is None:
        return None

    return abs(interval - MS_PER_DAY) <= tolerance * MS_PER_DAY
