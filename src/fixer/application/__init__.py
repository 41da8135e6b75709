# src/fixer/application/__init__.py
"""
Application Layer - Use Cases and Services

This package contains the default clients, the convenience functions that
delegate to them and the currency conversion service.
"""

from fixer.application.rates_service import (
    RatesService,
    at,
    default_client,
    exrates_client,
    latest,
    reset_default_clients,
)

__all__ = [
    "RatesService",
    "default_client",
    "exrates_client",
    "reset_default_clients",
    "latest",
    "at",
]
