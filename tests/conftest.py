"""Pytest configuration and shared fixtures."""

from datetime import datetime, timezone
from typing import Callable, Sequence

import pytest

from ta_core.data.models import PricePoint

DAY_MS = 24 * 60 * 60 * 1000
START_MS = int(datetime(2023, 1, 1, tzinfo=timezone.utc).timestamp() * 1000)


def build_series(prices: Sequence[float], interval_ms: int = DAY_MS) -> tuple[PricePoint, ...]:
    """Price series with evenly spaced timestamps starting 2023-01-01."""
    return tuple(
        PricePoint(timestamp=START_MS + i * interval_ms, price=float(price))
        for i, price in enumerate(prices)
    )


@pytest.fixture
def make_series() -> Callable[..., tuple[PricePoint, ...]]:
    """Factory fixture turning raw prices into a daily price series."""
    return build_series


@pytest.fixture
def rising_prices() -> list[float]:
    """250 daily prices rising steadily by 1% per day."""
    return [100.0 * 1.01 ** i for i in range(250)]


@pytest.fixture
def zigzag_uptrend_prices() -> list[float]:
    """
    250 daily prices alternating +2% / -1.2% moves.

    Net drift is upward while pullbacks keep RSI out of the overbought zone.
    The last move is a gain.
    """
    prices = [100.0]
    for i in range(1, 250):
        prices.append(prices[-1] * (1.02 if i % 2 == 1 else 0.988))
    return prices


@pytest.fixture
def flat_prices() -> list[float]:
    """250 identical prices."""
    return [100.0] * 250


@pytest.fixture
def sample_market_chart() -> dict:
    """Market-chart payload in the shape returned by the market-data API."""
    return {
        "prices": [
            [START_MS, 25940.12],
            [START_MS + DAY_MS, 25801.44],
            [START_MS + 2 * DAY_MS, 26120.0],
        ],
        "market_caps": [[START_MS, 5.0e11]],
        "total_volumes": [[START_MS, 1.2e10]],
    }
