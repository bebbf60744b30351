"""Series selection."""

from .selector import TIMESTAMP_LAYOUT, parse_timestamp, resolve_time_zone, select_latest

__all__ = ["TIMESTAMP_LAYOUT", "parse_timestamp", "resolve_time_zone", "select_latest"]
