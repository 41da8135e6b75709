# src/fixer/adapters/providers/options.py
"""
Client Options and Query Builders

Client options are callables applied in order by Client(*options); each one
overrides a single concern. Query builders return partial query mappings that
Client.latest and Client.at merge into the request.

Files that USE this module:
- fixer.application.rates_service (builds the default clients)
- fixer.app (base and symbols for the converter request)
- tests.test_client (unit tests)

Files that this module USES:
- fixer.domain.currency (Currency and Currencies serialization)
- fixer.shared.validators (base URL validation)
"""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable, Dict

import requests

from fixer.domain.currency import Currencies, Currency
from fixer.shared.validators import validate_base_url

if TYPE_CHECKING:
    from fixer.adapters.providers.fixer import Client

log = logging.getLogger(__name__)

Option = Callable[["Client"], None]


def http_session(session: requests.Session) -> Option:
    """Use the provided requests.Session as transport."""
    def apply(client: "Client") -> None:
        client._session = session
    return apply


def timeout(seconds: float) -> Option:
    """
    Change the transport timeout.

    Raises:
        ValueError: If seconds is not positive
    """
    if seconds is None or seconds <= 0:
        raise ValueError(f"timeout must be positive, got {seconds!r}")

    def apply(client: "Client") -> None:
        client._timeout = float(seconds)
    return apply


def base_url(raw: str) -> Option:
    """
    Change the base URL.

    A URL that cannot be parsed, or lacks an http(s) scheme or host, is
    ignored and the previous base URL is kept.
    """
    def apply(client: "Client") -> None:
        if validate_base_url(raw):
            client._base_url = raw
        else:
            log.warning("Ignoring invalid base URL %r, keeping %s", raw, client._base_url)
    return apply


def access_key(key: str) -> Option:
    """Set the access key sent as the access_key query parameter."""
    def apply(client: "Client") -> None:
        client._access_key = key
    return apply


def user_agent(ua: str) -> Option:
    """Change the User-Agent header sent by the client."""
    def apply(client: "Client") -> None:
        client._user_agent = ua
    return apply


def base(currency: Currency) -> Dict[str, str]:
    """Query attributes selecting the base currency; empty for an empty currency."""
    query: Dict[str, str] = {}
    if currency:
        query["base"] = str(currency)
    return query


def symbols(*currencies: Currency) -> Dict[str, str]:
    """Query attributes limiting rates to the given currencies, sorted by code."""
    query: Dict[str, str] = {}
    s = str(Currencies(currencies))
    if s:
        query["symbols"] = s
    return query
