import pytest

from intraday_quote.config import Settings


# Mimics the Alpha Vantage TIME_SERIES_INTRADAY response
SAMPLE_JSON = b"""
{
    "Meta Data": {
        "1. Information": "Intraday (5min) open, high, low, close prices and volume",
        "2. Symbol": "TEST",
        "3. Last Refreshed": "2025-04-20 11:20:00",
        "4. Interval": "5min",
        "5. Output Size": "Compact",
        "6. Time Zone": "US/Eastern"
    },
    "Time Series (5min)": {
        "2025-04-20 11:20:00": {
            "1. open": "150.00",
            "2. high": "150.50",
            "3. low": "149.80",
            "4. close": "150.25",
            "5. volume": "10000"
        },
        "2025-04-20 11:15:00": {
            "1. open": "149.80",
            "2. high": "150.10",
            "3. low": "149.70",
            "4. close": "150.00",
            "5. volume": "8500"
        }
    }
}
"""

RATE_LIMIT_JSON = b"""
{
    "Note": "Thank you for using Alpha Vantage! Our standard API call frequency is 5 calls per minute."
}
"""


@pytest.fixture
def sample_json() -> bytes:
    return SAMPLE_JSON


@pytest.fixture
def settings() -> Settings:
    return Settings(alpha_vantage_api_key="demo", symbol="TEST")
