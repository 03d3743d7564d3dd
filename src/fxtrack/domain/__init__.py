# src/fxtrack/domain/__init__.py
"""
Domain Layer - Pure Business Objects

This package contains domain models and business rules.
No dependencies on infrastructure or external systems.
"""

from fxtrack.domain.models import (
    RateWindow,
    RateWindowTable,
    window_dates,
)
from fxtrack.domain.errors import (
    CardinalityViolation,
    CatalogLoadFailure,
    DateOutOfRange,
    DomainError,
    RateLookupFailure,
)

__all__ = [
    "RateWindow",
    "RateWindowTable",
    "window_dates",
    "DomainError",
    "CatalogLoadFailure",
    "RateLookupFailure",
    "DateOutOfRange",
    "CardinalityViolation",
]
