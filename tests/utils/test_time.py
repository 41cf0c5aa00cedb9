"""Tests for timestamp and cadence utilities."""

from datetime import datetime, timezone

from ta_core.utils.time import MS_PER_DAY, is_daily_cadence, median_interval_ms, ms_to_datetime

HOUR_MS = 60 * 60 * 1000


class TestMsToDatetime:
    def test_utc_conversion(self):
        assert ms_to_datetime(1672531200000) == datetime(2023, 1, 1, tzinfo=timezone.utc)

    def test_sub_second(self):
        assert ms_to_datetime(1672531200500).microsecond == 500000


class TestMedianInterval:
    """Test sampling interval detection"""

    def test_too_short(self, make_series):
        assert median_interval_ms(()) is None
        assert median_interval_ms(make_series([1.0])) is None

    def test_daily(self, make_series):
        assert median_interval_ms(make_series([1.0, 2.0, 3.0])) == float(MS_PER_DAY)

    def test_median_ignores_single_gap(self, make_series):
        """Test one missing day does not move the median"""
        series = make_series([1.0] * 10)
        series = series[:5] + tuple(
            type(p)(timestamp=p.timestamp + MS_PER_DAY, price=p.price) for p in series[5:]
        )
        assert median_interval_ms(series) == float(MS_PER_DAY)


class TestIsDailyCadence:
    """Test daily cadence check"""

    def test_undetermined(self, make_series):
        assert is_daily_cadence(make_series([1.0])) is None

    def test_daily(self, make_series):
        assert is_daily_cadence(make_series([1.0] * 5)) is True

    def test_hourly(self, make_series):
        assert is_daily_cadence(make_series([1.0] * 5, interval_ms=HOUR_MS)) is False

    def test_within_tolerance(self, make_series):
        series = make_series([1.0] * 5, interval_ms=MS_PER_DAY + 3 * HOUR_MS)
        assert is_daily_cadence(series) is True
        assert is_daily_cadence(series, tolerance=0.1) is False
