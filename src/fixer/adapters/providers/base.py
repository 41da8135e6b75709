# src/fixer/adapters/providers/base.py
"""
Base Provider Interface for Exchange Rate Providers

This module defines the abstract base class for exchange rate providers.
It establishes the contract that provider implementations must follow.

Files that USE this module:
- fixer.adapters.providers.fixer (Client implements RateProvider)
- fixer.application.rates_service (RatesService depends on RateProvider)

Files that this module USES:
- fixer.domain.models (Response returned by providers)
"""
from abc import ABC, abstractmethod
from datetime import date
from typing import Mapping, Optional

from fixer.domain.models import Response


class RateProvider(ABC):
    @abstractmethod
    def latest(self, *attributes: Mapping[str, str], timeout: Optional[float] = None) -> Response:
        """Return the latest reference rates, filtered by the query attributes."""
        raise NotImplementedError

    @abstractmethod
    def at(
        self, when: date, *attributes: Mapping[str, str], timeout: Optional[float] = None
    ) -> Response:
        """Return historical rates for the UTC calendar day of when."""
        raise NotImplementedError
