"""Tests for MACD calculation"""

import pytest

from ta_core.indicators.macd import calculate_macd, macd_line
from ta_core.indicators.moving_average import calculate_ema, ema_series
from ta_core.models.indicators import MACDResult


def wave(count: int) -> list[float]:
    """Deterministic non-trivial price path."""
    return [100.0 + (i % 7) * 1.5 - (i % 5) * 0.8 + i * 0.3 for i in range(count)]


class TestMACD:
    """Test MACD line, signal and histogram"""

    def test_macd_insufficient_data(self):
        """Test MACD needs slow + signal prices"""
        result = calculate_macd(wave(34))
        assert result == MACDResult(macd=None, signal=None, histogram=None)
        assert not result.is_available

    def test_macd_minimum_data(self):
        """Test MACD with exactly slow + signal prices"""
        result = calculate_macd(wave(35))
        assert result.is_available

    def test_macd_line_is_ema_difference(self):
        """Test MACD = EMA(fast) - EMA(slow) at the latest price"""
        prices = wave(80)
        result = calculate_macd(prices)
        assert result.macd == pytest.approx(calculate_ema(prices, 12) - calculate_ema(prices, 26))

    def test_macd_signal_is_ema_of_macd_line(self):
        """Test signal = EMA(MACD series, 9)"""
        prices = wave(80)
        result = calculate_macd(prices)
        line = macd_line(prices, 12, 26)
        assert len(line) == 80 - 26 + 1
        assert result.signal == pytest.approx(ema_series(line, 9)[-1])

    def test_macd_histogram_invariant(self):
        """Test histogram == macd - signal"""
        for count in (35, 50, 120, 250):
            result = calculate_macd(wave(count))
            assert result.histogram == result.macd - result.signal

    def test_macd_flat_series(self):
        """Test MACD of a flat series is exactly zero, not unavailable"""
        result = calculate_macd([50.0] * 60)
        assert result == MACDResult(macd=0.0, signal=0.0, histogram=0.0)
        assert result.is_available

    def test_macd_uptrend_is_positive(self):
        """Test MACD line above signal in an accelerating uptrend"""
        prices = [100.0 * 1.01 ** i for i in range(100)]
        result = calculate_macd(prices)
        assert result.macd > 0
        assert result.histogram > 0

    def test_macd_custom_periods(self):
        """Test MACD with non-default periods"""
        prices = wave(30)
        assert not calculate_macd(prices).is_available
        assert calculate_macd(prices, fast_period=5, slow_period=10, signal_period=4).is_available
