# src/fixer/app.py
"""
Application Entry Point - Command-line Currency Converter

This module is the composition root for the `fixer` command. It sets up
logging from settings, parses arguments and converts an amount between two
currencies using latest or historical rates.

Usage:
    fixer --from EUR --to SEK -n 100
    fixer --from USD --to GBP --date 2012-03-28
    fixer --from EUR --table

Files that USE this module:
- fixer.__main__ (python -m fixer)
- pyproject.toml (fixer console script)

Files that this module USES:
- fixer.shared.logging_conf (setup_logging for logging configuration)
- fixer.config (get_settings for logging configuration)
- fixer.application.rates_service (RatesService and default_client)
- fixer.adapters.formatting.formatter (output formatting)
"""

from __future__ import annotations  # Enable postponed evaluation of annotations

import argparse  # Command-line argument parsing
import logging  # Standard library for logging messages and errors
import sys  # System-specific parameters and functions for exit codes
from datetime import datetime, timezone  # Parsing --date values
from typing import List, Optional

import requests  # Transport errors reported to the user

from fixer.shared.logging_conf import setup_logging  # Configure logging with file rotation
from fixer.shared.validators import validate_currency_code
from fixer.config import get_settings  # Application configuration and settings
from fixer.application.rates_service import RatesService, default_client
from fixer.adapters.formatting.formatter import conversion_line, rates_table
from fixer.adapters.providers.options import base
from fixer.domain.currency import Currency
from fixer.domain.errors import DomainError
from fixer.domain.models import DATE_FORMAT

log = logging.getLogger(__name__)


def _currency(value: str) -> Currency:
    code = value.strip().upper()
    if not validate_currency_code(code):
        raise argparse.ArgumentTypeError(f"invalid currency code: {value!r}")
    return Currency(code)


def _day(value: str) -> datetime:
    try:
        return datetime.strptime(value, DATE_FORMAT).replace(tzinfo=timezone.utc)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"invalid date {value!r}, expected YYYY-MM-DD") from e


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fixer",
        description="Convert amounts between currencies using foreign exchange reference rates.",
    )
    parser.add_argument("--from", dest="from_currency", type=_currency, default=Currency("EUR"),
                        help="currency to convert from (default: EUR)")
    parser.add_argument("--to", dest="to_currency", type=_currency, default=Currency("SEK"),
                        help="currency to convert to (default: SEK)")
    parser.add_argument("-n", "--amount", type=float, default=1.0,
                        help="amount to convert (default: 1)")
    parser.add_argument("--date", type=_day, default=None,
                        help="use historical rates for this day (YYYY-MM-DD)")
    parser.add_argument("--table", action="store_true",
                        help="print all rates quoted against --from instead of converting")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """
    Run the converter.

    Returns:
        Process exit code: 0 on success, 1 when the rates could not be fetched
    """
    args = build_parser().parse_args(argv)

    settings = get_settings()
    setup_logging(
        level=settings.log_level,
        log_file=settings.log_file,
        log_dir=settings.log_dir,
        max_bytes=settings.log_max_bytes,
        backup_count=settings.log_backup_count,
        log_stdout=settings.log_stdout,
    )

    try:
        if args.table:
            client = default_client()
            if args.date is None:
                resp = client.latest(base(args.from_currency))
            else:
                resp = client.at(args.date, base(args.from_currency))
            print(rates_table(resp))
            return 0

        service = RatesService()
        converted = service.convert(args.amount, args.from_currency, args.to_currency, args.date)
    except DomainError as e:
        log.error("Rates API error: %s", e)
        return 1
    except requests.exceptions.RequestException as e:
        log.error("Rates API request failed: %s", e)
        return 1
    except KeyError as e:
        log.error("Missing rate: %s", e)
        return 1
    except ValueError as e:
        log.error("Rates API returned an invalid document: %s", e)
        return 1

    print(conversion_line(args.amount, args.from_currency, converted, args.to_currency))
    return 0


if __name__ == "__main__":
    sys.exit(main())
