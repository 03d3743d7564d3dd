# src/fxtrack/adapters/telegram/jobs.py
"""
Telegram Jobs - Delayed Callbacks on the Bot's JobQueue

Adapts the python-telegram-bot JobQueue to the `call_later(delay, callback)`
hook used by ScheduledAction, so session timers (the at-capacity warning
auto-clear) run as one-shot jobs on the bot's scheduler.

Files that USE this module:
- fxtrack.adapters.telegram.handlers (_get_session wires the hook per chat)
- tests.test_jobs (unit tests)

Files that this module USES:
- fxtrack.shared.scheduler (CallLater hook type)
"""
from __future__ import annotations

import logging
from typing import Callable

from telegram.ext import ContextTypes, Job, JobQueue

from fxtrack.shared.scheduler import CallLater

logger = logging.getLogger(__name__)


class JobHandle:
    """Cancellable handle for a scheduled one-shot job."""

    def __init__(self, job: Job):
        self.job = job

    def cancel(self) -> None:
        self.job.schedule_removal()


def job_queue_call_later(job_queue: JobQueue, name: str = "clear_capacity_warning") -> CallLater:
    """
    Build a call_later hook that schedules callbacks with job_queue.run_once.

    Args:
        job_queue: The application's JobQueue
        name: Job name shown in scheduler logs

    Returns:
        Function (delay, callback) -> JobHandle
    """

    def call_later(delay: float, callback: Callable[[], None]) -> JobHandle:
        async def _run(context: ContextTypes.DEFAULT_TYPE) -> None:
            callback()

        job = job_queue.run_once(callback=_run, when=delay, name=name)
        logger.debug("Queued job %s in %.1fs", name, delay)
        return JobHandle(job)

    return call_later
