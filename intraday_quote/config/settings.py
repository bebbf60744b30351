"""Configuration settings for the intraday quote fetcher."""

import logging
import os
from dataclasses import dataclass, field

from dotenv import load_dotenv


load_dotenv()

logger = logging.getLogger(__name__)


ALPHA_VANTAGE_URL = "https://www.alphavantage.co/query"
INTRADAY_FUNCTION = "TIME_SERIES_INTRADAY"
DEFAULT_SYMBOL = "IBM"
INTRADAY_INTERVAL = "5min"

# Sent when ALPHA_VANTAGE_API_KEY is missing; the API will reject it
API_KEY_PLACEHOLDER = "YOUR_API_KEY_HERE"


@dataclass
class Settings:
    """Application settings."""

    alpha_vantage_api_key: str = field(
        default_factory=lambda: os.getenv("ALPHA_VANTAGE_API_KEY", "")
    )
    base_url: str = ALPHA_VANTAGE_URL
    function: str = INTRADAY_FUNCTION
    symbol: str = DEFAULT_SYMBOL
    interval: str = INTRADAY_INTERVAL
    timeout: float = 30.0

    def has_alpha_vantage(self) -> bool:
        """Check if Alpha Vantage API key is configured."""
        return bool(self.alpha_vantage_api_key)

    def resolve_api_key(self) -> str:
        """Return the configured key, or the placeholder with a warning."""
        if self.has_alpha_vantage():
            return self.alpha_vantage_api_key
        logger.warning(
            "ALPHA_VANTAGE_API_KEY environment variable not set. Using placeholder."
        )
        return API_KEY_PLACEHOLDER
