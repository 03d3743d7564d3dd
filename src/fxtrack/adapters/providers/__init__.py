# src/fxtrack/adapters/providers/__init__.py
"""
Provider Adapters - External API Clients

This package contains adapters for external currency data APIs.
All providers implement the RateProvider interface.
"""

from fxtrack.adapters.providers.base import RateProvider
from fxtrack.adapters.providers.currency_api import CurrencyApiProvider

__all__ = [
    "RateProvider",
    "CurrencyApiProvider",
]
