"""Unit tests for market-chart parsing."""

import json

import pytest

from ta_core.data.models import PricePoint, extract_prices
from ta_core.data.parsers import parse_market_chart, parse_price_pairs
from ta_core.errors import DataQualityError, MalformedDataError, MissingDataError


class TestParseMarketChart:
    """Test payload-level parsing."""

    def test_dict_payload(self, sample_market_chart) -> None:
        series = parse_market_chart(sample_market_chart)
        assert isinstance(series, tuple)
        assert len(series) == 3
        assert series[0] == PricePoint(timestamp=sample_market_chart["prices"][0][0], price=25940.12)
        assert extract_prices(series) == [25940.12, 25801.44, 26120.0]

    def test_json_text_and_bytes(self, sample_market_chart) -> None:
        text = json.dumps(sample_market_chart)
        assert parse_market_chart(text) == parse_market_chart(sample_market_chart)
        assert parse_market_chart(text.encode()) == parse_market_chart(sample_market_chart)

    def test_empty_prices(self) -> None:
        assert parse_market_chart({"prices": []}) == ()

    @pytest.mark.parametrize("payload", [{}, {"prices": None}, {"total_volumes": [[1, 2.0]]}])
    def test_missing_prices(self, payload) -> None:
        with pytest.raises(MissingDataError) as exc_info:
            parse_market_chart(payload)
        assert exc_info.value.data_type == "prices"
        assert exc_info.value.recoverable is True

    def test_invalid_json(self) -> None:
        with pytest.raises(MalformedDataError) as exc_info:
            parse_market_chart("{not json")
        assert exc_info.value.expected_format == "json"

    def test_non_object_payload(self) -> None:
        with pytest.raises(MalformedDataError):
            parse_market_chart("[[1, 2.0]]")


class TestParsePricePairs:
    """Test pair-level validation."""

    def test_tuples_accepted(self) -> None:
        assert parse_price_pairs([(1000, 1.5), (2000, 2)]) == (
            PricePoint(timestamp=1000, price=1.5),
            PricePoint(timestamp=2000, price=2.0),
        )

    def test_float_timestamp_with_integer_value(self) -> None:
        assert parse_price_pairs([[1000.0, 1.5]])[0].timestamp == 1000

    def test_extra_elements_ignored(self) -> None:
        assert parse_price_pairs([[1000, 1.5, "extra"]]) == (PricePoint(timestamp=1000, price=1.5),)

    @pytest.mark.parametrize("pairs", [
        "prices",
        {"1000": 1.5},
        [[1000]],
        [1000, 1.5],
        [[1000, "abc"]],
        [[None, 1.5]],
        [[True, 1.5]],
        [[1000, False]],
        [[1000.5, 1.5]],
        [[-1000, 1.5]],
        [[1000, 0.0]],
        [[1000, -3.0]],
        [[1000, float("nan")]],
        [[1000, float("inf")]],
    ])
    def test_rejected(self, pairs) -> None:
        with pytest.raises(MalformedDataError):
            parse_price_pairs(pairs)

    def test_errors_are_data_quality_errors(self) -> None:
        with pytest.raises(DataQualityError):
            parse_price_pairs([[1000, -1.0]])
