"""Data models for the TIME_SERIES_INTRADAY response."""

from dataclasses import dataclass, field
from datetime import datetime


@dataclass(frozen=True)
class Metadata:
    """The "Meta Data" block of an intraday response."""

    information: str = ""
    symbol: str = ""
    last_refreshed: str = ""
    interval: str = ""
    output_size: str = ""
    time_zone: str = ""


@dataclass(frozen=True)
class Quote:
    """One OHLCV bar. Values are kept as the API's text."""

    open: str = ""
    high: str = ""
    low: str = ""
    close: str = ""
    volume: str = ""


@dataclass(frozen=True)
class IntradayResponse:
    """Decoded response: metadata plus series keyed by timestamp text."""

    metadata: Metadata = field(default_factory=Metadata)
    series: dict[str, Quote] = field(default_factory=dict)
    notice: str | None = None  # "Note" / "Information" / "Error Message"
    raw: bytes = b""


@dataclass(frozen=True)
class SelectedEntry:
    """The latest entry of a series."""

    timestamp: datetime  # timezone-aware
    key: str
    quote: Quote
