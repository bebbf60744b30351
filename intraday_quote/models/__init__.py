"""Data models for the intraday series."""

from .intraday import IntradayResponse, Metadata, Quote, SelectedEntry

__all__ = ["IntradayResponse", "Metadata", "Quote", "SelectedEntry"]
