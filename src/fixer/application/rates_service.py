# src/fixer/application/rates_service.py
"""
Rates Service - Default Clients and Conversion

This module owns the process-wide default clients and the convenience
functions that delegate to them, plus a small service converting amounts
between currencies using any RateProvider.

The default client is created on first use from Settings (FIXER_ACCESS_KEY,
FIXER_BASE_URL, FIXER_TIMEOUT_SECONDS, FIXER_USER_AGENT) and then reused for
the lifetime of the process. reset_default_clients() drops it, so the next
call reads the settings again.

Files that USE this module:
- fixer (package re-exports latest, at and default_client)
- fixer.app (RatesService for the command-line converter)
- tests.test_rates_service (unit tests)

Files that this module USES:
- fixer.adapters.providers.fixer (Client)
- fixer.adapters.providers.options (client options and query builders)
- fixer.config (get_settings for the default client)
"""
from __future__ import annotations  # Enable postponed evaluation of annotations

import logging
import threading
from datetime import date
from typing import List, Mapping, Optional

from fixer.adapters.providers.base import RateProvider
from fixer.adapters.providers.fixer import Client
from fixer.adapters.providers.options import (
    Option,
    access_key,
    base,
    base_url,
    symbols,
    timeout as timeout_option,
    user_agent,
)
from fixer.config import Settings, get_settings
from fixer.domain.currency import Currency
from fixer.domain.models import Response

log = logging.getLogger(__name__)

EXRATES_BASE_URL = "https://api.exchangeratesapi.io"

_lock = threading.Lock()
_default_client: Optional[Client] = None
_exrates_client: Optional[Client] = None


def _settings_options(cfg: Settings) -> List[Option]:
    """Translate settings into client options, skipping values left empty."""
    options: List[Option] = [timeout_option(cfg.timeout_seconds)]
    if cfg.base_url:
        options.append(base_url(cfg.base_url))
    if cfg.access_key:
        options.append(access_key(cfg.access_key))
    if cfg.user_agent:
        options.append(user_agent(cfg.user_agent))
    return options


def default_client() -> Client:
    """
    Return the process-wide default client, creating it on first use.

    Returns:
        Client configured from Settings
    """
    global _default_client
    with _lock:
        if _default_client is None:
            _default_client = Client(*_settings_options(get_settings()))
            log.info(
                "Default rates client created (base_url=%s, access_key=%s)",
                _default_client.base_url,
                "set" if _default_client.access_key else "unset",
            )
        return _default_client


def exrates_client() -> Client:
    """Return a shared client configured for api.exchangeratesapi.io."""
    global _exrates_client
    with _lock:
        if _exrates_client is None:
            _exrates_client = Client(base_url(EXRATES_BASE_URL))
        return _exrates_client


def reset_default_clients() -> None:
    """Drop the shared clients and cached settings; the next call creates them again."""
    global _default_client, _exrates_client
    with _lock:
        _default_client = None
        _exrates_client = None
        get_settings.cache_clear()


def latest(*attributes: Mapping[str, str], timeout: Optional[float] = None) -> Response:
    """Latest foreign exchange reference rates using the default client."""
    return default_client().latest(*attributes, timeout=timeout)


def at(when: date, *attributes: Mapping[str, str], timeout: Optional[float] = None) -> Response:
    """Historical rates for any day since 1999 using the default client."""
    return default_client().at(when, *attributes, timeout=timeout)


class RatesService:
    """Converts amounts between currencies using a RateProvider."""

    def __init__(self, provider: Optional[RateProvider] = None):
        """
        Initialize the service.

        Args:
            provider: RateProvider to query (defaults to default_client())
        """
        self.provider = provider if provider is not None else default_client()

    def rate(self, from_currency: Currency, to_currency: Currency, when: Optional[date] = None) -> float:
        """
        Get the rate of to_currency per 1 from_currency.

        Args:
            from_currency: Currency to convert from (used as base)
            to_currency: Currency to convert to
            when: Optional day for historical rates (latest when omitted)

        Returns:
            Exchange rate as float (1.0 when both currencies are the same)

        Raises:
            KeyError: If the response does not quote to_currency
        """
        if from_currency == to_currency:
            return 1.0

        attributes = (base(from_currency), symbols(to_currency))
        if when is None:
            resp = self.provider.latest(*attributes)
        else:
            resp = self.provider.at(when, *attributes)

        if to_currency not in resp.rates:
            log.error("Response for %s has no rate for %s: %s", from_currency, to_currency, resp.rates)
            raise KeyError(f"no {to_currency} rate quoted against {from_currency}")
        return resp.rates[to_currency]

    def convert(
        self,
        amount: float,
        from_currency: Currency,
        to_currency: Currency,
        when: Optional[date] = None,
    ) -> float:
        """Convert amount of from_currency into to_currency."""
        return amount * self.rate(from_currency, to_currency, when)
