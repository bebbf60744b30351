from .settings import (
    ALPHA_VANTAGE_URL,
    API_KEY_PLACEHOLDER,
    DEFAULT_SYMBOL,
    INTRADAY_FUNCTION,
    INTRADAY_INTERVAL,
    Settings,
)

__all__ = [
    "ALPHA_VANTAGE_URL",
    "API_KEY_PLACEHOLDER",
    "DEFAULT_SYMBOL",
    "INTRADAY_FUNCTION",
    "INTRADAY_INTERVAL",
    "Settings",
]
