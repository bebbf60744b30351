"""Decode Alpha Vantage intraday JSON into the response model.

Decoding is permissive about presence and strict about type: unknown keys
are ignored and missing (or null) keys take their empty value, but a key that
is present with the wrong JSON type is an error.
"""

import json
import logging
from typing import Any

from intraday_quote.data.errors import DecodeError
from intraday_quote.models import IntradayResponse, Metadata, Quote


logger = logging.getLogger(__name__)

META_DATA_KEY = "Meta Data"
TIME_SERIES_KEY = "Time Series (5min)"

METADATA_FIELDS = {
    "information": "1. Information",
    "symbol": "2. Symbol",
    "last_refreshed": "3. Last Refreshed",
    "interval": "4. Interval",
    "output_size": "5. Output Size",
    "time_zone": "6. Time Zone",
}

QUOTE_FIELDS = {
    "open": "1. open",
    "high": "2. high",
    "low": "3. low",
    "close": "4. close",
    "volume": "5. volume",
}

# API-level messages that arrive with a 200 status
NOTICE_KEYS = ("Error Message", "Note", "Information")


def _object(value: Any, where: str, raw: bytes) -> dict:
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise DecodeError(
            f"Error parsing JSON response: {where} is {type(value).__name__}, expected object",
            raw,
        )
    return value


def _string(value: Any, where: str, raw: bytes) -> str:
    if value is None:
        return ""
    if not isinstance(value, str):
        raise DecodeError(
            f"Error parsing JSON response: {where} is {type(value).__name__}, expected string",
            raw,
        )
    return value


def _fields(obj: dict, names: dict[str, str], where: str, raw: bytes) -> dict[str, str]:
    return {
        attr: _string(obj.get(key), f"{where}.{key!r}", raw)
        for attr, key in names.items()
    }


def decode(raw: bytes) -> IntradayResponse:
    """
    Deserialize a response body.

    Args:
        raw: Response body as returned by the fetcher

    Returns:
        IntradayResponse holding the metadata, the series and the raw body

    Raises:
        DecodeError: body is not JSON, not an object, or has a mistyped field
    """
    try:
        data = json.loads(raw)
    except ValueError as e:
        raise DecodeError(f"Error parsing JSON response: {e}", raw) from e

    data = _object(data, "response", raw)

    meta = _object(data.get(META_DATA_KEY), repr(META_DATA_KEY), raw)
    metadata = Metadata(**_fields(meta, METADATA_FIELDS, repr(META_DATA_KEY), raw))

    series = {}
    entries = _object(data.get(TIME_SERIES_KEY), repr(TIME_SERIES_KEY), raw)
    for timestamp, values in entries.items():
        where = f"{TIME_SERIES_KEY!r}[{timestamp!r}]"
        values = _object(values, where, raw)
        series[timestamp] = Quote(**_fields(values, QUOTE_FIELDS, where, raw))

    notice = None
    for key in NOTICE_KEYS:
        if key in data:
            notice = str(data[key])
            logger.warning(f"API {key}: {notice}")
            break

    return IntradayResponse(metadata=metadata, series=series, notice=notice, raw=raw)
