"""End-to-end tests from market-chart payload to portfolio insights."""

import json

import pytest

from ta_core import (
    TechnicalAnalysisEngine,
    analyze_technical_indicators,
    calculate_all_indicators,
)
from ta_core.data.parsers import parse_market_chart
from ta_core.models.indicators import PatternType, RSIState, Signal, TrendState
from ta_core.signals.insights import InsightKind

DAY_MS = 24 * 60 * 60 * 1000
START_MS = 1672531200000


def market_chart(prices):
    return {"prices": [[START_MS + i * DAY_MS, p] for i, p in enumerate(prices)]}


@pytest.fixture
def engine(tmp_path):
    return TechnicalAnalysisEngine(config_dir=tmp_path)


class TestScenarios:
    """Reference price paths and their expected readings"""

    def test_steady_rise(self, engine, rising_prices):
        """Test a 1% daily rise: overbought RSI tempers the buy"""
        result = engine.analyze_payload(market_chart(rising_prices), coin_id="bitcoin")

        assert result.indicators.rsi == 100.0
        assert result.indicators.sma20 > result.indicators.sma50 > result.indicators.sma200
        assert result.indicators.ema12 > result.indicators.ema26
        assert result.analysis.rsi_analysis == RSIState.OVERBOUGHT
        assert result.analysis.trend_analysis == TrendState.BULLISH
        assert result.analysis.macd_analysis == TrendState.BULLISH
        assert result.analysis.score == 2
        assert result.analysis.overall_signal == Signal.BUY
        assert result.volatility == pytest.approx(0.0, abs=1e-9)
        assert result.pattern.pattern == PatternType.ASCENDING_TRIANGLE

    def test_zigzag_uptrend(self, engine, zigzag_uptrend_prices):
        """Test an uptrend with pullbacks is a strong buy"""
        result = engine.analyze_payload(market_chart(zigzag_uptrend_prices))

        assert 30.0 < result.indicators.rsi < 70.0
        assert result.analysis.trend_analysis == TrendState.BULLISH
        assert result.analysis.macd_analysis == TrendState.BULLISH
        assert result.analysis.overall_signal == Signal.STRONG_BUY
        assert result.volatility > 0

    def test_steady_decline(self, engine, rising_prices):
        """Test a 1% daily decline: oversold RSI and a decelerating MACD offset the trend"""
        result = engine.analyze_payload(market_chart(list(reversed(rising_prices))))

        assert result.indicators.rsi == 0.0
        assert result.analysis.rsi_analysis == RSIState.OVERSOLD
        assert result.analysis.trend_analysis == TrendState.BEARISH
        assert result.indicators.macd.macd < 0
        assert result.analysis.macd_analysis == TrendState.BULLISH
        assert result.analysis.score == 0
        assert result.analysis.overall_signal == Signal.HOLD

    def test_flat(self, engine, flat_prices):
        """Test a constant price is neutral everywhere"""
        result = engine.analyze_payload(market_chart(flat_prices))

        assert result.indicators.rsi == 50.0
        assert result.indicators.sma20 == 100.0
        assert result.indicators.sma200 == 100.0
        assert result.indicators.ema26 == 100.0
        assert (result.indicators.macd.macd, result.indicators.macd.histogram) == (0.0, 0.0)
        assert result.analysis.score == 0
        assert result.analysis.overall_signal == Signal.HOLD
        assert result.volatility == 0.0
        assert result.support_resistance.support == (100.0, 100.0)
        assert result.support_resistance.resistance == (100.0, 100.0)
        assert result.pattern.pattern == PatternType.CONSOLIDATION
        assert result.pattern.confidence == 0.5

    def test_short_history(self, engine):
        """Test 13 samples: nothing available, hold"""
        result = engine.analyze_payload(market_chart([100.0 + i for i in range(13)]))

        assert result.indicators.rsi is None
        assert result.indicators.sma20 is None
        assert not result.indicators.macd.is_available
        assert result.analysis.overall_signal == Signal.HOLD
        assert result.volatility is None
        assert result.pattern.pattern is None
        assert result.pattern.description == "Insufficient data for pattern analysis"
        assert result.support_resistance.support != ()


class TestPipelineProperties:
    """Properties of the composed pipeline"""

    def test_functions_compose_like_engine(self, engine, zigzag_uptrend_prices):
        payload = market_chart(zigzag_uptrend_prices)
        series = parse_market_chart(payload)
        analysis = analyze_technical_indicators(calculate_all_indicators(series), series[-1].price)

        assert engine.analyze_payload(payload).analysis == analysis

    def test_idempotent(self, engine, zigzag_uptrend_prices):
        payload = json.dumps(market_chart(zigzag_uptrend_prices))
        assert engine.analyze_payload(payload) == engine.analyze_payload(payload)

    def test_to_dict_is_json_serializable(self, engine, rising_prices):
        data = engine.analyze_payload(market_chart(rising_prices), coin_id="bitcoin").to_dict()
        decoded = json.loads(json.dumps(data))

        assert decoded["coin_id"] == "bitcoin"
        assert decoded["analysis"]["overall_signal"] == "buy"
        assert decoded["pattern"]["pattern"] == "ascending_triangle"
        assert decoded["support_resistance"]["support"] == [pytest.approx(463.7675171, rel=1e-9)]
        assert len(decoded["support_resistance"]["resistance"]) == 2
        assert decoded["rsi_thresholds"] == {"overbought": 70.0, "oversold": 30.0}

    def test_portfolio_insights(self, engine, rising_prices, zigzag_uptrend_prices):
        results = engine.analyze_portfolio(
            {
                "BTC": parse_market_chart(market_chart(rising_prices)),
                "ETH": parse_market_chart(market_chart(zigzag_uptrend_prices)),
                "XRP": parse_market_chart(market_chart(list(reversed(rising_prices)))),
            },
            max_workers=3,
        )
        insights = engine.generate_insights(results)

        assert [i.kind for i in insights] == [InsightKind.WARNING, InsightKind.INFO, InsightKind.SUCCESS]
        assert insights[0].symbols == ("BTC",)
        assert insights[1].symbols == ("XRP",)
        assert insights[2].symbols == ("ETH",)
