# src/fxtrack/application/__init__.py
"""
Application Layer - Use Cases and Services

This package contains application services that orchestrate domain logic.
No direct I/O dependencies - uses adapters through interfaces.
"""

from fxtrack.application.catalog import CurrencyCatalog
from fxtrack.application.date_range import DateRangeValidator
from fxtrack.application.rate_window import RateWindowFetcher
from fxtrack.application.session import TrackerSession
from fxtrack.application.tracked_set import TrackedSetManager

__all__ = [
    "CurrencyCatalog",
    "DateRangeValidator",
    "RateWindowFetcher",
    "TrackerSession",
    "TrackedSetManager",
]
