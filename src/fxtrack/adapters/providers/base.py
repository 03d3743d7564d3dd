# src/fxtrack/adapters/providers/base.py
"""
Base Provider Interface for Currency Data Providers

This module defines the abstract base class for all currency data providers.
It establishes the contract that all provider implementations must follow.

Files that USE this module:
- fxtrack.adapters.providers.currency_api (CurrencyApiProvider implements RateProvider)
- fxtrack.application.rate_window (RateWindowFetcher calls rates())
- fxtrack.application.catalog (CurrencyCatalog calls currencies())

Files that this module USES:
- None (pure interface definition)
"""
from abc import ABC, abstractmethod
from datetime import date
from typing import Dict, Optional


class RateProvider(ABC):
    @abstractmethod
    def currencies(self) -> Dict[str, str]:
        """
        Return the currency catalog as {code: display name}.

        Raises:
            CatalogLoadFailure: If the catalog cannot be fetched or parsed
        """
        raise NotImplementedError

    @abstractmethod
    def rates(self, base: str, on: Optional[date] = None) -> Dict[str, float]:
        """
        Return {code: rate} for 1 unit of `base` on day `on` (None = latest).

        Raises:
            RateLookupFailure: If the rates cannot be fetched or parsed
        """
        raise NotImplementedError
