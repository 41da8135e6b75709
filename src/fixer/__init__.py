# src/fixer/__init__.py
"""
Fixer - Foreign Exchange Rates API Client

A small client for the foreign exchange rates and currency conversion API
(fixer.io and compatible services). It fetches the latest reference rates or
historical rates for any day since 1999, with optional base currency and
symbol filtering.

Usage:
    import fixer

    resp = fixer.latest(fixer.base(fixer.EUR), fixer.symbols(fixer.SEK))
    print(resp.rates[fixer.SEK])
"""

__version__ = "1.0.0"

from fixer.domain.currency import *  # noqa: F401,F403
from fixer.domain.currency import Currencies, Currency
from fixer.domain.errors import (
    APIError,
    DomainError,
    ErrorKind,
    NilResponseError,
    NotFoundError,
    UnexpectedStatusError,
    UnprocessableEntityError,
    new_error,
    response_error,
)
from fixer.domain.models import Links, Rates, Response, parse_date
from fixer.adapters.providers.fixer import Client, DEFAULT_BASE_URL, DEFAULT_USER_AGENT
from fixer.adapters.providers.options import (
    access_key,
    base,
    base_url,
    http_session,
    symbols,
    timeout,
    user_agent,
)
from fixer.application.rates_service import (
    RatesService,
    at,
    default_client,
    exrates_client,
    latest,
    reset_default_clients,
)

__all__ = [
    "Currency",
    "Currencies",
    "Rates",
    "Links",
    "Response",
    "parse_date",
    "DomainError",
    "APIError",
    "ErrorKind",
    "NilResponseError",
    "UnexpectedStatusError",
    "NotFoundError",
    "UnprocessableEntityError",
    "new_error",
    "response_error",
    "Client",
    "DEFAULT_BASE_URL",
    "DEFAULT_USER_AGENT",
    "http_session",
    "timeout",
    "base_url",
    "access_key",
    "user_agent",
    "base",
    "symbols",
    "RatesService",
    "default_client",
    "exrates_client",
    "reset_default_clients",
    "latest",
    "at",
]
