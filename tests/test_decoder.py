import logging

import pytest

from intraday_quote.data import DecodeError, decode
from intraday_quote.models import Metadata, Quote


def test_decode_sample(sample_json) -> None:
    response = decode(sample_json)

    assert response.metadata.symbol == "TEST"
    assert response.metadata.time_zone == "US/Eastern"
    assert response.metadata.interval == "5min"
    assert response.metadata.output_size == "Compact"
    assert len(response.series) == 2
    assert response.notice is None
    assert response.raw == sample_json


def test_decode_entry_values(sample_json) -> None:
    entry = decode(sample_json).series["2025-04-20 11:20:00"]

    assert entry.close == "150.25"
    assert entry.volume == "10000"
    assert entry == Quote(
        open="150.00", high="150.50", low="149.80", close="150.25", volume="10000"
    )


def test_missing_fields_take_empty_values() -> None:
    response = decode(b'{"Meta Data": {"2. Symbol": "X"}}')

    assert response.metadata == Metadata(symbol="X")
    assert response.series == {}


def test_nulls_and_unknown_fields_are_tolerated() -> None:
    raw = (
        b'{"Meta Data": null, "extra": [1, 2],'
        b' "Time Series (5min)": {"2025-01-02 09:30:00": {"4. close": "1.5", "6. vwap": "1.4", "1. open": null}}}'
    )
    response = decode(raw)

    assert response.metadata == Metadata()
    assert response.series["2025-01-02 09:30:00"] == Quote(close="1.5")


@pytest.mark.parametrize(
    "raw",
    [
        b"<html>not json</html>",
        b"",
        b"[1, 2, 3]",
        b'{"Meta Data": ["not", "an", "object"]}',
        b'{"Meta Data": {"2. Symbol": 42}}',
        b'{"Time Series (5min)": {"2025-01-02 09:30:00": {"4. close": 1.5}}}',
        b'{"Time Series (5min)": {"2025-01-02 09:30:00": "1.5"}}',
    ],
)
def test_malformed_body_raises_decode_error_with_raw(raw) -> None:
    with pytest.raises(DecodeError) as exc_info:
        decode(raw)
    assert exc_info.value.raw == raw


def test_api_notice_is_recorded(caplog) -> None:
    raw = b'{"Error Message": "Invalid API call."}'

    with caplog.at_level(logging.WARNING):
        response = decode(raw)

    assert response.notice == "Invalid API call."
    assert response.series == {}
    assert "Invalid API call." in caplog.text
