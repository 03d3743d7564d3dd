# src/fxtrack/application/tracked_set.py
"""
Tracked Set Manager - Ordered Set of Tracked Currencies

Maintains the currencies shown as table columns. Insertion order is kept,
duplicates are ignored and the size always stays within
[min_currencies, max_currencies]. A rejected add raises a transient warning
that clears itself after a short delay; a rejected remove leaves a
persistent error until the next successful remove.

Files that USE this module:
- fxtrack.application.session (TrackerSession owns one manager per chat)
- tests.test_tracked_set (unit tests)

Files that this module USES:
- fxtrack.domain.errors (CardinalityViolation)
- fxtrack.shared.scheduler (ScheduledAction for the warning auto-clear)
- fxtrack.config (limits, default set, warning delay)
"""
from __future__ import annotations

import logging
from typing import Iterable, Optional, Tuple

from fxtrack.config import settings
from fxtrack.domain.errors import CardinalityViolation
from fxtrack.shared.scheduler import CallLater, ScheduledAction

logger = logging.getLogger(__name__)


class TrackedSetManager:
    """Invariant-preserving add/remove over the tracked currency list."""

    def __init__(
        self,
        initial: Optional[Iterable[str]] = None,
        min_size: Optional[int] = None,
        max_size: Optional[int] = None,
        warning_delay: Optional[float] = None,
        call_later: Optional[CallLater] = None,
    ):
        """
        Initialize the manager with the default (or given) tracked set.

        Args:
            initial: Starting codes in display order (defaults to settings.default_currencies)
            min_size: Minimum set size (defaults to settings.min_currencies)
            max_size: Maximum set size (defaults to settings.max_currencies)
            warning_delay: Seconds before the at-capacity warning clears itself
            call_later: Scheduler hook passed to ScheduledAction (tests)

        Raises:
            ValueError: If the initial set has duplicates or is out of bounds
        """
        self.min_size = min_size if min_size is not None else settings.min_currencies
        self.max_size = max_size if max_size is not None else settings.max_currencies
        codes = list(initial if initial is not None else settings.default_currencies)
        if len(set(codes)) != len(codes):
            raise ValueError("Initial tracked set contains duplicates")
        if not self.min_size <= len(codes) <= self.max_size:
            raise ValueError(
                f"Initial tracked set must hold {self.min_size}-{self.max_size} currencies"
            )

        self._codes = codes
        self.warning = False
        self.error: Optional[str] = None
        self._clear_warning = ScheduledAction(
            warning_delay if warning_delay is not None else settings.warning_clear_seconds,
            self._on_warning_timeout,
            call_later=call_later,
        )

    @property
    def codes(self) -> Tuple[str, ...]:
        return tuple(self._codes)

    def __len__(self) -> int:
        return len(self._codes)

    def __contains__(self, code: object) -> bool:
        return code in self._codes

    def __iter__(self):
        return iter(tuple(self._codes))

    def check_add(self, code: str) -> None:
        """Raise CardinalityViolation if `code` cannot be added."""
        if code not in self._codes and len(self._codes) >= self.max_size:
            raise CardinalityViolation("max", self.max_size)

    def check_remove(self, code: str) -> None:
        """Raise CardinalityViolation if removing would go below the minimum."""
        if len(self._codes) <= self.min_size:
            raise CardinalityViolation("min", self.min_size)

    def add(self, code: str) -> bool:
        """
        Append `code` to the tracked set.

        Returns:
            True if the set changed. An already tracked code is a no-op; an
            add at capacity is rejected and raises the at-capacity warning.
        """
        if code in self._codes:
            self._reset_warning()
            return False

        try:
            self.check_add(code)
        except CardinalityViolation as e:
            logger.info("Rejected add of %s: %s", code, e)
            self.warning = True
            self._clear_warning.start()
            return False

        self._codes.append(code)
        self._reset_warning()
        logger.debug("Tracking %s (%d currencies)", code, len(self._codes))
        return True

    def remove(self, code: str) -> bool:
        """
        Remove `code`, keeping the order of the remaining codes.

        Returns:
            True unless rejected at the minimum size, in which case `error`
            is set and the set is unchanged.
        """
        try:
            self.check_remove(code)
        except CardinalityViolation as e:
            logger.info("Rejected removal of %s: %s", code, e)
            self.error = str(e)
            return False

        if code in self._codes:
            self._codes.remove(code)
            logger.debug("Stopped tracking %s (%d currencies)", code, len(self._codes))
        self.error = None
        return True

    def _reset_warning(self) -> None:
        self._clear_warning.cancel()
        self.warning = False

    def _on_warning_timeout(self) -> None:
        self.warning = False
