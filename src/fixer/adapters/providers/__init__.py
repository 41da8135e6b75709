# src/fixer/adapters/providers/__init__.py
"""
Provider Adapters - External API Clients

This package contains the client for the foreign exchange rates API,
its configuration options and query builders.
"""

from fixer.adapters.providers.base import RateProvider
from fixer.adapters.providers.fixer import Client
from fixer.adapters.providers.options import (
    access_key,
    base,
    base_url,
    http_session,
    symbols,
    timeout,
    user_agent,
)

__all__ = [
    "RateProvider",
    "Client",
    "http_session",
    "timeout",
    "base_url",
    "access_key",
    "user_agent",
    "base",
    "symbols",
]
