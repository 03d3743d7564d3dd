# src/fxtrack/adapters/telegram/bot.py
"""
Telegram Bot - Application Builder and Shared Services

This module builds the Telegram application and wires the services shared by
all chats: the currency provider, the currency catalog and the rate window
fetcher. The catalog is loaded once after startup; a failed load leaves the
bot running in degraded mode.

Files that USE this module:
- fxtrack.app (build_application for the bot entry point)

Files that this module USES:
- fxtrack.adapters.providers (CurrencyApiProvider)
- fxtrack.application.catalog (CurrencyCatalog)
- fxtrack.application.rate_window (RateWindowFetcher)
- fxtrack.adapters.telegram.handlers (build_handlers, bot_data keys)
"""

from __future__ import annotations

import asyncio
import logging
from typing import Optional

from telegram.ext import Application

from fxtrack.adapters.providers.base import RateProvider
from fxtrack.adapters.providers.currency_api import CurrencyApiProvider
from fxtrack.adapters.telegram.handlers import CATALOG_KEY, FETCHER_KEY, build_handlers
from fxtrack.application.catalog import CurrencyCatalog
from fxtrack.application.rate_window import RateWindowFetcher

logger = logging.getLogger(__name__)


async def _load_catalog(app: Application) -> None:
    """post_init hook: fetch the currency catalog off the event loop."""
    catalog: CurrencyCatalog = app.bot_data[CATALOG_KEY]
    loop = asyncio.get_running_loop()
    if not await loop.run_in_executor(None, catalog.load):
        logger.warning("Starting without currency names: %s", catalog.error)


async def _close_fetcher(app: Application) -> None:
    """post_shutdown hook: release lookup threads of cycles still in flight."""
    app.bot_data[FETCHER_KEY].close()


def build_application(bot_token: str, provider: Optional[RateProvider] = None) -> Application:
    """
    Build Telegram bot application with handlers and shared services.

    Updates are processed concurrently so a new /base or /date can start a
    fresh fetch cycle while an older one is still in flight.

    Args:
        bot_token: Telegram bot token
        provider: Currency provider (defaults to CurrencyApiProvider)

    Returns:
        Configured Application instance
    """
    provider = provider or CurrencyApiProvider()
    app = (
        Application.builder()
        .token(bot_token)
        .concurrent_updates(True)
        .post_init(_load_catalog)
        .post_shutdown(_close_fetcher)
        .build()
    )
    app.bot_data[CATALOG_KEY] = CurrencyCatalog(provider)
    app.bot_data[FETCHER_KEY] = RateWindowFetcher(provider)

    for h in build_handlers():
        app.add_handler(h)
    return app
