"""Print the intraday report to the terminal."""

import logging
import sys
from datetime import datetime, timedelta
from typing import TextIO

from intraday_quote.models import IntradayResponse, SelectedEntry


logger = logging.getLogger(__name__)


def format_timestamp(timestamp: datetime) -> str:
    """RFC 3339 text: zero offsets are written as "Z"."""
    text = timestamp.isoformat()
    if timestamp.utcoffset() == timedelta(0):
        return text[: -len("+00:00")] + "Z"
    return text


def report(
    response: IntradayResponse,
    selected: SelectedEntry | None,
    out: TextIO | None = None,
) -> None:
    """Print metadata and the latest price, or a no-data message."""
    out = out or sys.stdout

    print(f"Stock Data for: {response.metadata.symbol}", file=out)
    print(f"Last Refreshed: {response.metadata.last_refreshed}", file=out)

    if selected is not None:
        print(
            f"Latest Price ({format_timestamp(selected.timestamp)}): {selected.quote.close}",
            file=out,
        )
        return

    # Usually an API error or rate-limit message sent with a 200 status;
    # the decoder has already logged any notice
    print("No time series data found in the response.", file=out)
    body = response.raw.decode("utf-8", errors="replace")
    logger.warning(f"Raw response body for inspection:\n{body}")
