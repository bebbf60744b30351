"""Pick the latest entry from an intraday series.

The series is a mapping with no meaningful order, so the latest entry is
found by parsing every key and keeping the maximum instant.
"""

import logging
import re
from datetime import datetime, timezone, tzinfo
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from intraday_quote.data.errors import TimestampParseError
from intraday_quote.models import IntradayResponse, SelectedEntry


logger = logging.getLogger(__name__)

# Alpha Vantage format, e.g. "2023-10-27 19:55:00"
TIMESTAMP_LAYOUT = "%Y-%m-%d %H:%M:%S"
TIMESTAMP_PATTERN = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2} [0-9]{2}:[0-9]{2}:[0-9]{2}")


def resolve_time_zone(name: str) -> tzinfo:
    """Resolve an IANA zone name, falling back to UTC."""
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError, OSError):
        # OSError covers tzdata directory names such as "America"
        logger.warning(f"Unknown time zone '{name}', falling back to UTC")
        return timezone.utc


def parse_timestamp(text: str, tz: tzinfo) -> datetime:
    """Parse a series key as wall-clock time in ``tz``."""
    # strptime alone accepts unpadded fields and runs of whitespace
    if not TIMESTAMP_PATTERN.fullmatch(text):
        raise TimestampParseError(text, TIMESTAMP_LAYOUT)
    try:
        parsed = datetime.strptime(text, TIMESTAMP_LAYOUT)
    except ValueError as e:
        raise TimestampParseError(text, TIMESTAMP_LAYOUT) from e
    return parsed.replace(tzinfo=tz)


def select_latest(response: IntradayResponse) -> SelectedEntry | None:
    """
    Find the chronologically latest entry of the series.

    Keys that fail to parse are skipped. When two keys resolve to the same
    instant, whichever is seen first is kept.

    Returns:
        The latest entry, or None if no key could be parsed
    """
    if not response.series:
        return None

    tz = resolve_time_zone(response.metadata.time_zone)

    latest: SelectedEntry | None = None
    latest_instant: datetime | None = None

    for key, quote in response.series.items():
        try:
            current = parse_timestamp(key, tz)
        except TimestampParseError as e:
            logger.warning(f"Skipping entry: {e}")
            continue

        # Same-zone aware datetimes compare by wall time; compare in UTC
        instant = current.astimezone(timezone.utc)
        if latest_instant is None or instant > latest_instant:
            latest = SelectedEntry(timestamp=current, key=key, quote=quote)
            latest_instant = instant

    return latest
