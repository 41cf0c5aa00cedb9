"""
Canonical price data models.

A price series is an ordered sequence of immutable price points, ascending
by timestamp. Callers own ordering and de-duplication; the calculators only
read the series and never mutate it.
"""

from dataclasses import dataclass
from typing import Sequence


@dataclass(frozen=True)
class PricePoint:
    """Single price sample from the market-data feed."""
    timestamp: int     # Epoch milliseconds
    price: float


PriceSeries = Sequence[PricePoint]


def extract_prices(series: PriceSeries) -> list[float]:
    """Return the raw price values of a series, oldest first."""
    return [point.price for point in series]
