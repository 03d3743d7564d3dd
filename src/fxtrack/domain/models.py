# src/fxtrack/domain/models.py
"""
Domain Models - Pure Business Objects

This module contains domain models representing core business concepts:
- The rate window table (ISO day -> rates, or None for a failed day)
- A committed rate window (the table plus the cycle it was fetched for)
- The trailing window of dates ending on an anchor date

Files that USE this module:
- fxtrack.application.* (fetcher and session build and commit windows)
- fxtrack.adapters.formatting.formatter (renders RateWindow)
- tests.* (tests use domain models for test data)

Files that this module USES:
- None (pure domain layer, no external dependencies)
"""

from __future__ import annotations  # Enable postponed evaluation of annotations

from dataclasses import dataclass  # Decorator for creating data classes
from datetime import date, timedelta  # Date arithmetic for the trailing window
from typing import Dict, List, Optional  # Type hints

# ISO day -> {currency code -> rate}, or None when that day's lookup failed
RateWindowTable = Dict[str, Optional[Dict[str, float]]]


def window_dates(anchor: date, days: int) -> List[date]:
    """
    Return the trailing window ending on `anchor`, newest first.

    Args:
        anchor: Most recent day of the window
        days: Window length

    Returns:
        [anchor, anchor - 1 day, ..., anchor - (days - 1) days]
    """
    return [anchor - timedelta(days=offset) for offset in range(days)]


@dataclass(frozen=True)
class RateWindow:
    """
    A rate window committed to visible state.

    Attributes:
        base: Base currency all rates are expressed in (1 base = X target)
        anchor: Most recent day of the window
        table: Rates per ISO day, None for days whose lookup failed
        cycle: Fetch cycle token the table was produced by
    """
    base: str
    anchor: date
    table: RateWindowTable
    cycle: int = 0

    @property
    def dates(self) -> List[str]:
        """ISO days in descending order."""
        return sorted(self.table, reverse=True)

    @property
    def is_empty(self) -> bool:
        """True when every day in the window failed."""
        return all(rates is None for rates in self.table.values())

    def rate(self, day: str, code: str) -> Optional[float]:
        """Rate for `code` on `day`, or None if the day or currency is missing."""
        rates = self.table.get(day)
        if rates is None:
            return None
        return rates.get(code)
