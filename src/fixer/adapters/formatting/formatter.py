# src/fixer/adapters/formatting/formatter.py
"""
Rates Formatter - Text Formatting and Presentation

This module formats conversion results and rate tables as plain text for
the command-line converter.

Files that USE this module:
- fixer.app (prints conversion lines and rate tables)
- tests.test_formatter (unit tests)

Files that this module USES:
- fixer.domain.models (Response for rate tables)
"""
from __future__ import annotations

from decimal import Decimal, ROUND_HALF_UP
from typing import List, Optional

from fixer.domain.currency import Currency
from fixer.domain.models import DATE_FORMAT, Response


def _round(value: float, decimals: int) -> Decimal:
    """
    Round half-up to a fixed number of decimals.

    Args:
        value: Value to round
        decimals: Number of decimal places

    Returns:
        Decimal with exactly `decimals` places
    """
    quantum = Decimal(1).scaleb(-decimals)
    return Decimal(str(value)).quantize(quantum, rounding=ROUND_HALF_UP)


def conversion_line(
    amount: float,
    from_currency: Currency,
    converted: float,
    to_currency: Currency,
    decimals: int = 2,
) -> str:
    """
    Format a conversion result.

    Returns:
        String like '1.00 EUR equals 11.23 SEK'
    """
    return (
        f"{_round(amount, decimals)} {from_currency} equals "
        f"{_round(converted, decimals)} {to_currency}"
    )


def rates_table(resp: Optional[Response], decimals: int = 4) -> str:
    """
    Format all rates of a response, one currency per line, sorted by code.

    Args:
        resp: Response to format (can be None)
        decimals: Number of decimal places for rates (default: 4)

    Returns:
        Multi-line string with a header naming base and date, or "N/A"
    """
    if resp is None:
        return "N/A"

    day = resp.date.strftime(DATE_FORMAT) if resp.date is not None else "N/A"
    lines: List[str] = [f"Base: {resp.base or 'N/A'} ({day})"]
    for code in sorted(resp.rates):
        lines.append(f"{code}: {_round(resp.rates[code], decimals)}")
    return "\n".join(lines)
