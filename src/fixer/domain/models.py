# src/fixer/domain/models.py
"""
Domain Models - Rates API Payloads

This module contains the models decoded from the rates API:
- Date values in the API's YYYY-MM-DD format
- Rates quoted against a base currency
- Links describing where a response came from
- The Response aggregate returned to callers

Files that USE this module:
- fixer.adapters.providers.fixer (Client decodes response bodies into Response)
- fixer.application.rates_service (RatesService reads rates from Response)
- fixer.adapters.formatting.formatter (formats Response data)
- tests.* (tests use domain models for test data)

Files that this module USES:
- fixer.domain.currency (Currency type for rate keys)
"""

from __future__ import annotations  # Enable postponed evaluation of annotations

from datetime import date, datetime, timezone  # Date/time utilities for API dates
from typing import Any, Dict, Optional  # Type hints for mappings and optional values

from pydantic import BaseModel, ConfigDict, Field, field_validator  # Strict JSON schema decoding

from fixer.domain.currency import Currency

DATE_FORMAT = "%Y-%m-%d"

# Rates quoted against the base currency (EUR by default)
Rates = Dict[Currency, float]

# Links related to the primary data of the Response ("base", "self")
Links = Dict[str, str]


def parse_date(value: Any) -> datetime:
    """
    Parse an API date literal into a UTC datetime at midnight.

    Args:
        value: Decoded JSON value, expected to be a "YYYY-MM-DD" string

    Returns:
        Timezone-aware datetime in UTC with zero time-of-day

    Raises:
        ValueError: If value is not a string or not in YYYY-MM-DD form
    """
    if not isinstance(value, str):
        raise ValueError(f"date must be a string in YYYY-MM-DD format, got {type(value).__name__}")
    parsed = datetime.strptime(value, DATE_FORMAT)
    return parsed.replace(tzinfo=timezone.utc)


def format_date(when: date) -> str:
    """Format a date or datetime as the API's YYYY-MM-DD path segment, projected to UTC."""
    if isinstance(when, datetime) and when.tzinfo is not None:
        when = when.astimezone(timezone.utc)
    return when.strftime(DATE_FORMAT)


class Response(BaseModel):
    """
    Response data from the foreign exchange rates API.

    Attributes:
        base: Currency all rates are quoted against
        date: Day the rates apply to (UTC midnight), None if the body omitted it
        rates: Mapping of Currency to exchange rate
        links: Provenance links, always set by the client after decoding
    """

    model_config = ConfigDict(strict=True)

    base: Currency = Currency("")
    date: Optional[datetime] = None
    rates: Rates = Field(default_factory=dict)
    links: Links = Field(default_factory=dict)

    @field_validator("date", mode="before")
    @classmethod
    def _parse_date(cls, v: Any) -> Optional[datetime]:
        # Already decoded: direct construction or model_dump() output
        if v is None or isinstance(v, datetime):
            return v
        return parse_date(v)
