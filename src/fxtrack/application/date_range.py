# src/fxtrack/application/date_range.py
"""
Date Range Validator - Rolling Lower Bound for Anchor Dates

Files that USE this module:
- fxtrack.application.session (TrackerSession.set_date)
- tests.test_date_range (unit tests)

Files that this module USES:
- fxtrack.domain.errors (DateOutOfRange)
- fxtrack.shared.validators (parse_iso_date)
- fxtrack.config (settings.min_date_days)
"""
from __future__ import annotations

from datetime import date, datetime, timedelta
from typing import Callable, Optional, Union

from fxtrack.config import settings
from fxtrack.domain.errors import DateOutOfRange
from fxtrack.shared.validators import parse_iso_date


class DateRangeValidator:
    """
    Accepts anchor dates no earlier than `min_days` before today.

    The upper bound (no future dates) belongs to the input layer.
    """

    def __init__(
        self,
        min_days: Optional[int] = None,
        today: Callable[[], date] = date.today,
    ):
        self.min_days = min_days if min_days is not None else settings.min_date_days
        self._today = today

    def today(self) -> date:
        return self._today()

    def min_date(self) -> date:
        return self.today() - timedelta(days=self.min_days)

    def validate(self, candidate: Union[str, date, datetime]) -> date:
        """
        Validate a candidate anchor date.

        Returns:
            The candidate as a date (time component dropped)

        Raises:
            DateOutOfRange: If the candidate is before the allowed window
            ValueError: If a string candidate is not an ISO date
        """
        day = parse_iso_date(candidate)
        if day < self.min_date():
            raise DateOutOfRange(self.min_days)
        return day
