# src/fxtrack/application/session.py
"""
Tracker Session - Per-chat Tracking State

This module holds everything one user is looking at: base currency, anchor
date, tracked currencies, the committed rate window and the error/warning
state shown next to it. It is the only place that commits fetch results, and
it does so through a monotonic cycle token: a fetch cycle that completes
after a newer cycle was started is discarded, so a slow stale cycle can never
overwrite a fresher one.

Files that USE this module:
- fxtrack.adapters.telegram.handlers (one session per chat)
- fxtrack.adapters.formatting.formatter (format_session)
- tests.test_session (unit tests)

Files that this module USES:
- fxtrack.application.rate_window (RateWindowFetcher)
- fxtrack.application.tracked_set (TrackedSetManager)
- fxtrack.application.date_range (DateRangeValidator)
- fxtrack.application.catalog (CurrencyCatalog)
- fxtrack.domain.models (RateWindow)
- fxtrack.domain.errors (DateOutOfRange)
- fxtrack.config (settings.default_base)
"""
from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Optional, Union

from fxtrack.application.catalog import CurrencyCatalog
from fxtrack.application.date_range import DateRangeValidator
from fxtrack.application.rate_window import RateWindowFetcher
from fxtrack.application.tracked_set import TrackedSetManager
from fxtrack.config import settings
from fxtrack.domain.errors import DateOutOfRange
from fxtrack.domain.models import RateWindow

logger = logging.getLogger(__name__)

WINDOW_UNAVAILABLE_ERROR = (
    "Exchange rates are unavailable for the selected dates. Please try again later."
)


class TrackerSession:
    """State and operations behind one chat's tracker view."""

    def __init__(
        self,
        fetcher: RateWindowFetcher,
        catalog: CurrencyCatalog,
        validator: Optional[DateRangeValidator] = None,
        tracked: Optional[TrackedSetManager] = None,
        base: Optional[str] = None,
    ):
        """
        Initialize a session with the default base, today's date and the default set.

        Args:
            fetcher: Shared rate window fetcher
            catalog: Shared currency catalog
            validator: Anchor date validator (its clock also supplies the default anchor)
            tracked: Tracked set manager (defaults to the configured default set)
            base: Initial base currency (defaults to settings.default_base)
        """
        self.fetcher = fetcher
        self.catalog = catalog
        self.validator = validator or DateRangeValidator()
        self.tracked = tracked or TrackedSetManager()
        self.base = base or settings.default_base
        self.anchor: date = self.validator.today()
        self.window: Optional[RateWindow] = None
        self.error: Optional[str] = None
        self._cycle = 0

    @property
    def warning(self) -> bool:
        """At-capacity warning raised by a rejected add."""
        return self.tracked.warning

    @property
    def catalog_error(self) -> Optional[str]:
        return self.catalog.error

    @property
    def cycle(self) -> int:
        """Token of the most recently started fetch cycle."""
        return self._cycle

    async def refresh(self) -> bool:
        """
        Run a fetch cycle for the current (base, anchor).

        Returns:
            True if this cycle's table was committed, False if a newer cycle
            was started while it was in flight
        """
        self._cycle += 1
        token = self._cycle
        base, anchor = self.base, self.anchor
        logger.info("Cycle %d started for %s ending %s", token, base, anchor.isoformat())

        table = await self.fetcher.fetch_window(base, anchor)

        if token != self._cycle:
            logger.warning(
                "Discarding stale cycle %d for %s ending %s (latest is %d)",
                token, base, anchor.isoformat(), self._cycle,
            )
            return False

        self.window = RateWindow(base=base, anchor=anchor, table=table, cycle=token)
        if self.window.is_empty:
            logger.warning("Cycle %d returned no rates for any day", token)
            self.error = WINDOW_UNAVAILABLE_ERROR
        elif self.error == WINDOW_UNAVAILABLE_ERROR:
            # Date and removal errors outlive fetch cycles
            self.error = None
        logger.info("Cycle %d committed", token)
        return True

    async def set_base(self, code: str) -> bool:
        """Switch the base currency and fetch a fresh window for it."""
        self.base = code
        self.window = None
        return await self.refresh()

    async def set_date(self, candidate: Union[str, date, datetime]) -> bool:
        """
        Move the anchor date and fetch a fresh window for it.

        Returns:
            False if the date was rejected (error set, anchor unchanged) or the
            resulting cycle was superseded

        Raises:
            ValueError: If a string candidate is not an ISO date
        """
        try:
            anchor = self.validator.validate(candidate)
        except DateOutOfRange as e:
            logger.info("Rejected anchor date %s: %s", candidate, e)
            self.error = str(e)
            return False

        self.anchor = anchor
        self.error = None
        return await self.refresh()

    def add_currency(self, code: str) -> bool:
        """Track `code`; a rejection shows up as the `warning` flag."""
        return self.tracked.add(code)

    def remove_currency(self, code: str) -> bool:
        """Stop tracking `code`; a rejection shows up as the session error."""
        removed = self.tracked.remove(code)
        self.error = self.tracked.error
        return removed
