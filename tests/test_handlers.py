"""
Handler Tests - Unit Tests for Telegram Command Handlers

This module drives the command handlers with mocked Telegram updates and
checks the replies and the per-chat session state they leave behind.

Files that USE this module:
- pytest (test runner executes these tests)

Files that this module USES:
- fxtrack.adapters.telegram.handlers (handlers under test)
- unittest.mock (Mock/AsyncMock for Telegram objects)
"""
import asyncio
from datetime import date, timedelta
from unittest.mock import AsyncMock, Mock

import pytest

from fxtrack.adapters.telegram import handlers
from fxtrack.application.catalog import CurrencyCatalog
from fxtrack.application.session import TrackerSession
from fxtrack.application.tracked_set import TrackedSetManager
from fxtrack.domain.errors import CatalogLoadFailure
from fxtrack.domain.models import window_dates

NAMES = {"usd": "US Dollar", "eur": "Euro", "gbp": "British Pound", "inr": "Indian Rupee",
         "jpy": "Japanese Yen", "chf": "Swiss Franc", "cad": "Canadian Dollar",
         "aud": "Australian Dollar", "zar": "South African Rand"}


class StaticFetcher:
    async def fetch_window(self, base, anchor):
        return {day.isoformat(): {"usd": 1.27, "eur": 1.15} for day in window_dates(anchor, 7)}


def _catalog(loaded=True):
    provider = Mock()
    provider.currencies.return_value = dict(NAMES)
    catalog = CurrencyCatalog(provider)
    if loaded:
        catalog.load()
    return catalog


def _update():
    update = Mock()
    update.message.reply_text = AsyncMock()
    return update


def _context(args=(), catalog=None, session=None):
    context = Mock()
    context.args = list(args)
    context.bot_data = {
        handlers.FETCHER_KEY: StaticFetcher(),
        handlers.CATALOG_KEY: catalog or _catalog(),
    }
    context.chat_data = {}
    if session is not None:
        context.chat_data[handlers.SESSION_KEY] = session
    return context


def _run(handler, update, context):
    asyncio.run(handler(update, context))
    return update.message.reply_text.await_args.args[0]


class TestSessionPerChat:
    def test_session_created_once(self):
        context = _context()
        first = handlers._get_session(context)
        assert handlers._get_session(context) is first
        assert first.base == "gbp"


class TestRates:
    def test_shows_table(self):
        update, context = _update(), _context()

        text = _run(handlers.rates, update, context)

        assert text.startswith("<pre>Currency Exchange Tracker")
        assert "1.2700" in text
        assert "N/A" in text  # JPY is not in the stub data


class TestBase:
    def test_changes_base(self):
        update, context = _update(), _context(["EUR"])

        text = _run(handlers.base, update, context)

        assert context.chat_data[handlers.SESSION_KEY].base == "eur"
        assert "Base Currency: EUR - Euro" in text

    def test_unknown_currency(self):
        update, context = _update(), _context(["xyz"])
        assert "Unknown currency: XYZ" in _run(handlers.base, update, context)

    def test_unknown_code_accepted_in_degraded_mode(self):
        update, context = _update(), _context(["xyz"], catalog=_catalog(loaded=False))
        _run(handlers.base, update, context)
        assert context.chat_data[handlers.SESSION_KEY].base == "xyz"

    def test_usage(self):
        update, context = _update(), _context(["dollars"])
        assert "Usage" in _run(handlers.base, update, context)


class TestDate:
    def test_future_date_rejected(self):
        tomorrow = (date.today() + timedelta(days=1)).isoformat()
        update, context = _update(), _context([tomorrow])
        assert "cannot be in the future" in _run(handlers.date_cmd, update, context)

    def test_old_date_rejected(self):
        old = (date.today() - timedelta(days=120)).isoformat()
        update, context = _update(), _context([old])

        text = _run(handlers.date_cmd, update, context)

        assert text == "❌ Date must be within the last 90 days."
        assert context.chat_data[handlers.SESSION_KEY].anchor == date.today()

    def test_bad_format(self):
        update, context = _update(), _context(["10/01/2024"])
        assert "YYYY-MM-DD" in _run(handlers.date_cmd, update, context)

    def test_valid_date(self):
        day = date.today() - timedelta(days=10)
        update, context = _update(), _context([day.isoformat()])

        text = _run(handlers.date_cmd, update, context)

        assert context.chat_data[handlers.SESSION_KEY].anchor == day
        assert f"Date: {day.isoformat()}" in text


class TestAddRemove:
    def test_add_at_capacity_warns(self):
        update, context = _update(), _context(["inr"])

        text = _run(handlers.add, update, context)

        session = context.chat_data[handlers.SESSION_KEY]
        assert "Maximum limit of 7 currencies reached" in text
        assert "inr" not in session.tracked.codes
        assert len(session.tracked) == 7
        context.job_queue.run_once.assert_called_once()
        assert context.job_queue.run_once.call_args.kwargs["name"] == "clear_capacity_warning"

    def test_add_already_tracked(self):
        update, context = _update(), _context(["usd"])
        assert _run(handlers.add, update, context) == "USD is already tracked."

    def test_remove_then_add(self):
        context = _context(["usd"])
        _run(handlers.remove, _update(), context)
        context.args = ["inr"]
        text = _run(handlers.add, _update(), context)

        session = context.chat_data[handlers.SESSION_KEY]
        assert session.tracked.codes == ("eur", "jpy", "chf", "cad", "aud", "zar", "inr")
        assert "INR" in text

    def test_remove_at_minimum(self):
        session = TrackerSession(
            fetcher=StaticFetcher(),
            catalog=_catalog(),
            tracked=TrackedSetManager(initial=["usd", "eur", "jpy"]),
        )
        update, context = _update(), _context(["usd"], session=session)

        text = _run(handlers.remove, update, context)

        assert "Minimum 3 currencies required" in text
        assert session.tracked.codes == ("usd", "eur", "jpy")

    def test_remove_untracked(self):
        update, context = _update(), _context(["inr"])
        assert _run(handlers.remove, update, context) == "INR is not tracked."


class TestCurrencies:
    def test_lists_untracked(self):
        update, context = _update(), _context()

        text = _run(handlers.currencies, update, context)

        assert "INR - Indian Rupee" in text
        assert "GBP - British Pound" in text
        assert "USD - US Dollar" not in text

    def test_retries_failed_catalog(self):
        provider = Mock()
        provider.currencies.side_effect = [CatalogLoadFailure("offline"), dict(NAMES)]
        catalog = CurrencyCatalog(provider)
        catalog.load()
        update, context = _update(), _context(catalog=catalog)

        text = _run(handlers.currencies, update, context)

        assert catalog.loaded
        assert "INR - Indian Rupee" in text

    def test_reports_catalog_error(self):
        provider = Mock()
        provider.currencies.side_effect = CatalogLoadFailure("offline")
        update, context = _update(), _context(catalog=CurrencyCatalog(provider))

        text = _run(handlers.currencies, update, context)
        assert text == "❌ Failed to load currencies. Please try again later."


class TestChunks:
    def test_splits_on_lines(self):
        text = "\n".join(["x" * 10] * 5)
        chunks = handlers._chunks(text, limit=25)
        assert chunks == ["x" * 10 + "\n" + "x" * 10] * 2 + ["x" * 10]

    def test_build_handlers(self):
        assert len(handlers.build_handlers()) == 8
