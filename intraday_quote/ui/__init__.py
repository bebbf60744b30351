from .reporter import format_timestamp, report

__all__ = ["format_timestamp", "report"]
