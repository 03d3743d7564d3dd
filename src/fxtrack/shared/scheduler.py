# src/fxtrack/shared/scheduler.py
"""
Scheduled Action - Single-slot Cancellable Delayed Callback

A ScheduledAction owns at most one pending timer. Starting it again cancels
the pending timer and schedules a fresh one, so rapid repeated triggers never
stack callbacks.

A custom call_later hook replaces the default event-loop scheduling; the bot
plugs in its JobQueue (fxtrack.adapters.telegram.jobs).

Files that USE this module:
- fxtrack.application.tracked_set (auto-clears the at-capacity warning)
- fxtrack.adapters.telegram.jobs (CallLater hook type)

Files that this module USES:
- None (pure utility implementation)
"""
from __future__ import annotations

import asyncio
import logging
from typing import Any, Callable, Optional

log = logging.getLogger(__name__)

# call_later(delay, callback) -> handle with a cancel() method
CallLater = Callable[[float, Callable[[], None]], Any]


def _default_call_later(delay: float, callback: Callable[[], None]) -> Any:
    """Schedule on the running event loop (raises RuntimeError outside one)."""
    return asyncio.get_running_loop().call_later(delay, callback)


class ScheduledAction:
    """Run `action` once, `delay` seconds after the latest start()."""

    def __init__(
        self,
        delay: float,
        action: Callable[[], None],
        call_later: Optional[CallLater] = None,
    ):
        self.delay = delay
        self._action = action
        self._call_later = call_later or _default_call_later
        self._handle: Any = None

    @property
    def pending(self) -> bool:
        return self._handle is not None

    def start(self) -> None:
        """(Re)schedule the action; any pending run is cancelled first."""
        self.cancel()
        self._handle = self._call_later(self.delay, self._fire)
        log.debug("Scheduled action in %.1fs", self.delay)

    def cancel(self) -> None:
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

    def _fire(self) -> None:
        self._handle = None
        self._action()
