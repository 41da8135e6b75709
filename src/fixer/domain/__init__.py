# src/fixer/domain/__init__.py
"""
Domain Layer - Pure Business Objects

This package contains currency types, API payload models and the error
taxonomy. No dependencies on transport or configuration.
"""

from fixer.domain.currency import Currencies, Currency, ALL_CURRENCIES
from fixer.domain.models import Links, Rates, Response, format_date, parse_date
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

__all__ = [
    "Currency",
    "Currencies",
    "ALL_CURRENCIES",
    "Rates",
    "Links",
    "Response",
    "format_date",
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
]
