"""Alpha Vantage fetcher for the 5-minute intraday series.

Free tier: 25 requests/day. One run makes exactly one request.
"""

import logging

import httpx

from intraday_quote.config import Settings
from intraday_quote.data.errors import HTTPStatusError, TransportError


logger = logging.getLogger(__name__)


class AlphaVantageFetcher:
    """Fetches raw intraday responses from Alpha Vantage API."""

    def __init__(self, settings: Settings | None = None) -> None:
        self.settings = settings or Settings()
        self._client: httpx.Client | None = None

    @property
    def client(self) -> httpx.Client:
        """Lazy-initialize HTTP client."""
        if self._client is None:
            self._client = httpx.Client(
                timeout=self.settings.timeout, follow_redirects=True
            )
        return self._client

    def close(self) -> None:
        """Close HTTP client."""
        if self._client is not None:
            self._client.close()
            self._client = None

    def __enter__(self) -> "AlphaVantageFetcher":
        return self

    def __exit__(self, *args) -> None:
        self.close()

    def fetch(
        self,
        base_url: str,
        function: str,
        symbol: str,
        interval: str,
        api_key: str,
    ) -> bytes:
        """
        Perform a single GET and return the body.

        Args:
            base_url: API endpoint, without query string
            function: Alpha Vantage function (e.g., "TIME_SERIES_INTRADAY")
            symbol: Stock symbol (e.g., "IBM")
            interval: Bar interval (e.g., "5min")
            api_key: Alpha Vantage credential

        Returns:
            Raw response body

        Raises:
            TransportError: connection could not be made or request did not complete
            HTTPStatusError: status code other than 200
        """
        params = {
            "function": function,
            "symbol": symbol,
            "interval": interval,
            "apikey": api_key,
        }

        # Never log the key
        logger.info(f"Fetching data from: {base_url}")

        try:
            response = self.client.get(base_url, params=params)
        except httpx.RequestError as e:
            raise TransportError(f"Error fetching data: {e}") from e

        if response.status_code != httpx.codes.OK:
            raise HTTPStatusError(
                response.status_code, response.reason_phrase, response.text
            )

        return response.content

    def fetch_intraday(self, symbol: str | None = None) -> bytes:
        """Fetch the configured intraday series for a symbol."""
        return self.fetch(
            self.settings.base_url,
            self.settings.function,
            symbol or self.settings.symbol,
            self.settings.interval,
            self.settings.resolve_api_key(),
        )
