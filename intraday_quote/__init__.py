"""Fetch an Alpha Vantage intraday series and report the latest quote."""

__version__ = "0.1.0"
