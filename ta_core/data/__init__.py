"""
Price data input module.

Canonical price point model and parsers that turn market-data payloads
into the immutable price series consumed by the indicator calculators.
"""

from .models import PricePoint, PriceSeries, extract_prices
from .parsers import parse_market_chart, parse_price_pairs

__all__ = [
    "PricePoint",
    "PriceSeries",
    "extract_prices",
    "parse_market_chart",
    "parse_price_pairs",
]
