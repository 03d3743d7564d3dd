"""
Bot and Logging Tests - Application Wiring and Logging Setup

Files that USE this module:
- pytest (test runner executes these tests)

Files that this module USES:
- fxtrack.adapters.telegram.bot (build_application)
- fxtrack.shared.logging_conf (setup_logging)
"""
import asyncio
import logging
from unittest.mock import Mock

from fxtrack.adapters.telegram import bot
from fxtrack.adapters.telegram.handlers import CATALOG_KEY, FETCHER_KEY
from fxtrack.application.catalog import CurrencyCatalog
from fxtrack.application.rate_window import RateWindowFetcher
from fxtrack.domain.errors import CatalogLoadFailure
from fxtrack.shared.logging_conf import setup_logging

TOKEN = "123456789:" + "A" * 35


class TestBuildApplication:
    def test_wires_shared_services(self):
        app = bot.build_application(TOKEN, provider=Mock())
        try:
            assert isinstance(app.bot_data[CATALOG_KEY], CurrencyCatalog)
            assert isinstance(app.bot_data[FETCHER_KEY], RateWindowFetcher)
            assert sum(len(group) for group in app.handlers.values()) == 8
            assert app.job_queue is not None
        finally:
            app.bot_data[FETCHER_KEY].close()

    def test_catalog_failure_does_not_stop_startup(self):
        provider = Mock()
        provider.currencies.side_effect = CatalogLoadFailure("offline")
        app = Mock()
        app.bot_data = {CATALOG_KEY: CurrencyCatalog(provider)}

        asyncio.run(bot._load_catalog(app))

        assert app.bot_data[CATALOG_KEY].loaded is False
        assert app.bot_data[CATALOG_KEY].error is not None


class TestSetupLogging:
    def test_log_dir_creates_rotating_file(self, tmp_path):
        root = logging.getLogger()
        saved, level = list(root.handlers), root.level
        try:
            setup_logging(log_dir=tmp_path / "logs", log_stdout=False)
            logging.getLogger("fxtrack.test").info("hello")
            for handler in root.handlers:
                handler.flush()
            assert "hello" in (tmp_path / "logs" / "fxtrack.log").read_text(encoding="utf-8")
        finally:
            for handler in root.handlers:
                handler.close()
            root.handlers = saved
            root.setLevel(level)
