"""Data fetching and decoding."""

from .alphavantage_fetcher import AlphaVantageFetcher
from .decoder import decode
from .errors import (
    DecodeError,
    HTTPStatusError,
    IntradayQuoteError,
    TimestampParseError,
    TransportError,
)

__all__ = [
    "AlphaVantageFetcher",
    "decode",
    "DecodeError",
    "HTTPStatusError",
    "IntradayQuoteError",
    "TimestampParseError",
    "TransportError",
]
