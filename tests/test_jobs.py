"""
Job Tests - Unit Tests for the JobQueue-backed call_later Hook

Files that USE this module:
- pytest (test runner executes these tests)

Files that this module USES:
- fxtrack.adapters.telegram.jobs (job_queue_call_later, JobHandle)
- fxtrack.application.tracked_set (TrackedSetManager warning timer)
- unittest.mock (Mock for the JobQueue)
"""
import asyncio
from unittest.mock import Mock

from fxtrack.adapters.telegram.jobs import JobHandle, job_queue_call_later
from fxtrack.application.tracked_set import TrackedSetManager

FULL = ["usd", "eur", "jpy", "chf", "cad", "aud", "zar"]


def _fire(job_queue):
    """Run the coroutine callback of the latest run_once call."""
    callback = job_queue.run_once.call_args.kwargs["callback"]
    asyncio.run(callback(Mock()))


class TestJobQueueCallLater:
    def test_schedules_one_shot_job(self):
        job_queue = Mock()
        call_later = job_queue_call_later(job_queue)

        handle = call_later(3.0, Mock())

        job_queue.run_once.assert_called_once()
        kwargs = job_queue.run_once.call_args.kwargs
        assert kwargs["when"] == 3.0
        assert kwargs["name"] == "clear_capacity_warning"
        assert isinstance(handle, JobHandle)
        assert handle.job is job_queue.run_once.return_value

    def test_job_runs_callback(self):
        job_queue = Mock()
        callback = Mock()
        job_queue_call_later(job_queue)(1.0, callback)

        _fire(job_queue)
        callback.assert_called_once_with()

    def test_cancel_removes_job(self):
        job_queue = Mock()
        handle = job_queue_call_later(job_queue)(1.0, Mock())

        handle.cancel()
        job_queue.run_once.return_value.schedule_removal.assert_called_once()


class TestCapacityWarningOnJobQueue:
    def test_warning_cleared_by_job(self):
        job_queue = Mock()
        tracked = TrackedSetManager(FULL, call_later=job_queue_call_later(job_queue))

        assert tracked.add("inr") is False
        assert tracked.warning is True
        assert job_queue.run_once.call_args.kwargs["when"] == 3.0

        _fire(job_queue)
        assert tracked.warning is False

    def test_repeated_rejection_replaces_job(self):
        job_queue = Mock()
        first_job, second_job = Mock(), Mock()
        job_queue.run_once.side_effect = [first_job, second_job]
        tracked = TrackedSetManager(FULL, call_later=job_queue_call_later(job_queue))

        tracked.add("inr")
        tracked.add("inr")

        first_job.schedule_removal.assert_called_once()
        second_job.schedule_removal.assert_not_called()
        assert tracked.warning is True

    def test_successful_change_cancels_pending_job(self):
        job_queue = Mock()
        tracked = TrackedSetManager(FULL, call_later=job_queue_call_later(job_queue))
        tracked.add("inr")

        tracked.add("usd")  # already tracked: no-op that clears the warning
        job_queue.run_once.return_value.schedule_removal.assert_called_once()
        assert tracked.warning is False
