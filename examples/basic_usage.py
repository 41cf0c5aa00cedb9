#!/usr/bin/env python3
"""
Basic Usage Example - TA Core Technical Analysis Engine

Demonstrates the engine on synthetic daily price series:
- Parsing a market-chart payload
- Running the full analysis for one coin
- Analyzing a small portfolio in parallel and printing insights

Run: python examples/basic_usage.py
"""

import json
import math

from ta_core.data.parsers import parse_market_chart
from ta_core.engine import TechnicalAnalysisEngine
from ta_core.logging import configure_logging

DAY_MS = 24 * 60 * 60 * 1000
START_MS = 1_693_526_400_000  # 2023-09-01T00:00:00Z


def make_market_chart(start_price: float, daily_change: float, days: int = 250,
                      wobble: float = 0.0) -> dict:
    """Build a market-chart payload with a steady drift and optional wobble."""
    prices = []
    price = start_price
    for day in range(days):
        prices.append([START_MS + day * DAY_MS, round(price * (1 + wobble * math.sin(day)), 6)])
        price *= 1 + daily_change
    return {"prices": prices, "market_caps": [], "total_volumes": []}


def print_result(result) -> None:
    """Print the headline numbers of an analysis result."""
    data = result.to_dict()
    indicators = data["indicators"]
    analysis = data["analysis"]

    print(f"  {data['coin_id']}: price={data['current_price']:.2f} samples={data['sample_count']}")
    print(f"    RSI={indicators['rsi']}  SMA20={indicators['sma20']}  SMA50={indicators['sma50']}")
    print(f"    MACD={indicators['macd']}")
    print(f"    rsi={analysis['rsi_analysis']} trend={analysis['trend_analysis']} "
          f"macd={analysis['macd_analysis']} -> {analysis['overall_signal']} (score {analysis['score']})")
    print(f"    support={data['support_resistance']['support']} "
          f"resistance={data['support_resistance']['resistance']}")
    print(f"    volatility={data['volatility']}  pattern={data['pattern']}")


def main():
    """Run the demo."""
    configure_logging(level="WARNING")
    engine = TechnicalAnalysisEngine()

    print("1. Single coin from a raw JSON payload")
    payload = json.dumps(make_market_chart(25_000.0, 0.004, wobble=0.02))
    print_result(engine.analyze_payload(payload, coin_id="bitcoin"))
    print()

    print("2. Portfolio analysis")
    series_by_coin = {
        "bitcoin": parse_market_chart(make_market_chart(25_000.0, 0.004, wobble=0.02)),
        "ethereum": parse_market_chart(make_market_chart(1_600.0, -0.006, wobble=0.01)),
        "dogecoin": parse_market_chart(make_market_chart(0.06, 0.0)),
    }
    results = engine.analyze_portfolio(series_by_coin, max_workers=3)
    for result in results.values():
        print_result(result)
    print()

    print("3. Insights")
    for insight in engine.generate_insights(results):
        print(f"  [{insight.kind.value}] {insight.message}")


if __name__ == "__main__":
    main()
