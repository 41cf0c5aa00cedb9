"""Tests for SMA and EMA calculations"""

import pytest

from ta_core.indicators.moving_average import calculate_ema, calculate_sma, ema_series, sma_series


class TestSMA:
    """Test Simple Moving Average"""

    def test_sma_insufficient_data(self):
        """Test SMA with fewer prices than the period"""
        assert calculate_sma([1.0, 2.0], 3) is None

    def test_sma_exact_period(self):
        """Test SMA with exactly one full window"""
        assert calculate_sma([1.0, 2.0, 3.0], 3) == 2.0

    def test_sma_uses_trailing_window(self):
        """Test SMA only averages the last `period` prices"""
        assert calculate_sma([100.0, 1.0, 2.0, 3.0, 4.0, 5.0], 3) == 4.0

    def test_sma_constant_series(self):
        """Test SMA of a constant series equals the constant"""
        assert calculate_sma([42.5] * 60, 20) == pytest.approx(42.5)
        assert calculate_sma([0.1] * 200, 200) == pytest.approx(0.1)

    def test_sma_series(self):
        """Test SMA at every index with a full window"""
        assert sma_series([1.0, 2.0, 3.0, 4.0, 5.0], 3) == [2.0, 3.0, 4.0]
        assert sma_series([1.0, 2.0], 3) == []


class TestEMA:
    """Test Exponential Moving Average"""

    def test_ema_insufficient_data(self):
        """Test EMA with fewer prices than the period"""
        assert calculate_ema([1.0, 2.0], 3) is None

    def test_ema_seeded_from_sma(self):
        """Test EMA with exactly one window equals the SMA"""
        assert calculate_ema([1.0, 2.0, 3.0], 3) == 2.0

    def test_ema_smoothing(self):
        """Test EMA recursion with k = 2 / (period + 1)"""
        # k = 0.5: seed 2, then 2 + 0.5 * (4 - 2) = 3, then 3 + 0.5 * (5 - 3) = 4
        assert ema_series([1.0, 2.0, 3.0, 4.0, 5.0], 3) == [2.0, 3.0, 4.0]
        assert calculate_ema([10.0, 10.0, 10.0, 20.0], 3) == 15.0

    def test_ema_weights_recent_prices(self):
        """Test EMA reacts faster than SMA to a jump"""
        prices = [10.0] * 20 + [20.0] * 3
        assert calculate_ema(prices, 10) > calculate_sma(prices, 10)

    def test_ema_constant_series(self):
        """Test EMA of a constant series stays exactly constant"""
        assert calculate_ema([100.0] * 50, 26) == 100.0
