# src/fxtrack/application/rate_window.py
"""
Rate Window Fetcher - Concurrent Per-day Rate Lookups

Builds the rate table for the trailing window ending on an anchor date.
One lookup is issued per day, all at once, and the result is produced only
after every lookup has settled. A failed day becomes None in the table; it
never aborts its siblings and never raises out of fetch_window().

Files that USE this module:
- fxtrack.application.session (TrackerSession.refresh runs fetch cycles)
- fxtrack.adapters.telegram.bot (creates the shared fetcher)
- tests.test_rate_window (unit tests)

Files that this module USES:
- fxtrack.adapters.providers.base (RateProvider.rates for each day)
- fxtrack.domain.models (RateWindowTable, window_dates)
- fxtrack.config (settings.window_days)
"""
from __future__ import annotations

import asyncio
import logging
from concurrent.futures import ThreadPoolExecutor
from datetime import date
from typing import Dict, Optional, Set

from fxtrack.adapters.providers.base import RateProvider
from fxtrack.config import settings
from fxtrack.domain.models import RateWindowTable, window_dates

log = logging.getLogger(__name__)


class RateWindowFetcher:
    """Fan-out/fan-in fetcher for (base, anchor) windows; cycles may overlap."""

    def __init__(self, provider: RateProvider, days: Optional[int] = None):
        """
        Args:
            provider: Blocking rate provider, called once per day
            days: Window length (defaults to settings.window_days)
        """
        self.provider = provider
        self.days = days or settings.window_days
        self._executors: Set[ThreadPoolExecutor] = set()

    async def _lookup(
        self, executor: ThreadPoolExecutor, base: str, day: date
    ) -> Dict[str, float]:
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(executor, self.provider.rates, base, day)

    async def fetch_window(self, base: str, anchor: date) -> RateWindowTable:
        """
        Fetch rates of `base` for every day of the window ending on `anchor`.

        Args:
            base: Base currency code
            anchor: Most recent day of the window

        Returns:
            Table with exactly `days` ISO keys, newest first; None marks a failed day
        """
        days = window_dates(anchor, self.days)
        log.info("Fetching %d-day window for %s ending %s", self.days, base, anchor.isoformat())

        # Each cycle gets its own workers, one per day, so overlapping cycles
        # never queue behind each other
        executor = ThreadPoolExecutor(max_workers=self.days, thread_name_prefix="rate-lookup")
        self._executors.add(executor)
        try:
            results = await asyncio.gather(
                *(self._lookup(executor, base, day) for day in days),
                return_exceptions=True,
            )
        finally:
            self._executors.discard(executor)
            executor.shutdown(wait=False)

        table: RateWindowTable = {}
        failed = 0
        for day, result in zip(days, results):
            key = day.isoformat()
            if isinstance(result, BaseException):
                log.warning("Rate lookup for %s on %s failed: %s", base, key, result)
                table[key] = None
                failed += 1
            else:
                table[key] = result

        log.info(
            "Window for %s ending %s settled: %d/%d days available",
            base, anchor.isoformat(), self.days - failed, self.days,
        )
        return table

    def close(self) -> None:
        """Release the lookup threads of cycles still in flight (their lookups are left to finish)."""
        for executor in list(self._executors):
            executor.shutdown(wait=False)
        self._executors.clear()
