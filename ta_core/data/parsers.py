"""
Market-chart parsers for converting raw market-data payloads to price series.

The market-data collaborator returns historical prices in the market-chart
shape used by CoinGecko's ``/coins/{id}/market_chart`` endpoint:

    {
        "prices": [[1693526400000, 25940.12], [1693612800000, 25801.44], ...],
        "market_caps": [[...], ...],
        "total_volumes": [[...], ...]
    }

Only the ``prices`` array feeds the indicator calculators.
"""

import json
import math
from typing import Any, Iterable, Union

import structlog

from ..errors import MalformedDataError, MissingDataError
from .models import PricePoint

logger = structlog.get_logger(__name__)


def parse_market_chart(payload: Union[dict[str, Any], str, bytes]) -> tuple[PricePoint, ...]:
    """
    Parse a market-chart payload into an immutable price series.

    Args:
        payload: Decoded payload dict, or the raw JSON text/bytes

    Returns:
        Tuple of PricePoint in payload order

    Raises:
        MissingDataError: If the payload has no ``prices`` array
        MalformedDataError: If the payload or any price pair is invalid
    """
    if isinstance(payload, (str, bytes)):
        try:
            payload = json.loads(payload)
        except ValueError as e:
            raise MalformedDataError(
                f"Market chart payload is not valid JSON: {e}",
                raw_data=str(payload)[:100],
                expected_format="json",
            )

    if not isinstance(payload, dict):
        raise MalformedDataError(
            "Market chart payload must be an object",
            raw_data=str(payload)[:100],
            expected_format="object",
        )

    if "prices" not in payload or payload["prices"] is None:
        raise MissingDataError("Missing 'prices' field in market chart payload", data_type="prices")

    series = parse_price_pairs(payload["prices"])
    logger.debug("Parsed market chart", sample_count=len(series))
    return series


def parse_price_pairs(pairs: Iterable[Any]) -> tuple[PricePoint, ...]:
    """
    Parse ``[timestamp_ms, price]`` pairs into price points.

    Raises:
        MalformedDataError: If a pair is not a two-element sequence, the
            timestamp is not an integer number of milliseconds, or the price
            is not a finite positive number
    """
    if isinstance(pairs, (str, bytes, dict)):
        raise MalformedDataError("Price pairs must be a list", expected_format="[[ts_ms, price], ...]")

    points = []
    for i, pair in enumerate(pairs):
        points.append(_parse_single_pair(i, pair))

    return tuple(points)


def _parse_single_pair(index: int, pair: Any) -> PricePoint:
    """Parse one ``[timestamp_ms, price]`` pair."""
    if not isinstance(pair, (list, tuple)) or len(pair) < 2:
        raise MalformedDataError(
            f"Invalid price pair at index {index}: expected [timestamp, price]",
            raw_data=str(pair)[:100],
            expected_format="[ts_ms, price]",
        )

    raw_ts, raw_price = pair[0], pair[1]

    if isinstance(raw_ts, bool) or isinstance(raw_price, bool):
        raise MalformedDataError(f"Boolean value in price pair at index {index}", raw_data=str(pair))

    try:
        ts_value = float(raw_ts)
        price = float(raw_price)
    except (TypeError, ValueError) as e:
        raise MalformedDataError(f"Non-numeric price pair at index {index}: {e}", raw_data=str(pair))

    if not math.isfinite(ts_value) or ts_value != int(ts_value) or ts_value < 0:
        raise MalformedDataError(f"Invalid timestamp at index {index}: {raw_ts}", raw_data=str(pair))

    if not math.isfinite(price) or price <= 0:
        raise MalformedDataError(f"Price must be finite and positive at index {index}: {raw_price}",
                                 raw_data=str(pair))

    return PricePoint(timestamp=int(ts_value), price=price)
