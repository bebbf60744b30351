"""CLI entry point: fetch, decode, select and report."""

import argparse
import logging
import sys

from intraday_quote.config import DEFAULT_SYMBOL, Settings
from intraday_quote.data import (
    AlphaVantageFetcher,
    DecodeError,
    HTTPStatusError,
    IntradayQuoteError,
    decode,
)
from intraday_quote.series import select_latest
from intraday_quote.ui import report


logger = logging.getLogger(__name__)


def run(settings: Settings) -> None:
    """Run the pipeline once. Errors propagate to the caller."""
    with AlphaVantageFetcher(settings) as fetcher:
        raw = fetcher.fetch_intraday()

    response = decode(raw)
    report(response, select_latest(response))


def main(argv: list[str] | None = None) -> None:
    """CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Print the latest 5-minute intraday quote from Alpha Vantage"
    )
    parser.add_argument(
        "--symbol",
        type=str,
        default=DEFAULT_SYMBOL,
        help=f"Symbol to fetch (default: {DEFAULT_SYMBOL})",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )

    settings = Settings(symbol=args.symbol)

    try:
        run(settings)
    except HTTPStatusError as e:
        logger.error(str(e))
        sys.exit(1)
    except DecodeError as e:
        body = e.raw.decode("utf-8", errors="replace")
        logger.error(f"Raw response body:\n{body}")
        logger.error(str(e))
        sys.exit(1)
    except IntradayQuoteError as e:
        logger.error(str(e))
        sys.exit(1)


if __name__ == "__main__":
    main()
