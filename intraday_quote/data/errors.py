"""Exceptions raised while fetching and decoding intraday data."""


class IntradayQuoteError(Exception):
    """Base class for all intraday quote errors."""


class TransportError(IntradayQuoteError):
    """The request could not be sent or did not complete."""


class HTTPStatusError(IntradayQuoteError):
    """The API answered with a status other than 200."""

    def __init__(self, status_code: int, reason: str, body: str) -> None:
        self.status_code = status_code
        self.reason = reason
        self.body = body
        super().__init__(
            f"API request failed with status {status_code} {reason}: {body}"
        )


class DecodeError(IntradayQuoteError):
    """The response body does not match the intraday response shape."""

    def __init__(self, message: str, raw: bytes) -> None:
        self.raw = raw
        super().__init__(message)


class TimestampParseError(IntradayQuoteError):
    """A series key does not match the timestamp layout."""

    def __init__(self, key: str, layout: str) -> None:
        self.key = key
        self.layout = layout
        super().__init__(f"Could not parse timestamp '{key}' with layout '{layout}'")
