# src/fxtrack/adapters/telegram/handlers.py
"""
Telegram Handlers - Command Processing and User Interaction

This module contains the Telegram bot command handlers. Each chat gets its
own TrackerSession; the commands translate chat messages into calls against
it (/base, /date, /add, /remove) and render the result with the formatter.
Input checks that belong to the input layer live here: code format, catalog
membership, ISO date format and the "no future dates" upper bound.

Files that USE this module:
- fxtrack.adapters.telegram.bot (build_handlers registers the handlers)

Files that this module USES:
- fxtrack.application.session (TrackerSession per chat)
- fxtrack.application.tracked_set (TrackedSetManager per chat)
- fxtrack.adapters.telegram.jobs (JobQueue-backed warning timer)
- fxtrack.application.catalog (CurrencyCatalog shared across chats)
- fxtrack.adapters.formatting.formatter (all formatter functions)
- fxtrack.shared.validators (code normalization, ISO date parsing)
- fxtrack.config (settings for limits shown in help text)
"""
from __future__ import annotations

import asyncio
import html
import logging
from typing import List, Optional

from telegram import Update
from telegram.constants import ParseMode
from telegram.ext import CommandHandler, ContextTypes

from fxtrack.adapters.formatting.formatter import (
    currency_label,
    format_catalog,
    format_session,
    format_tracked,
)
from fxtrack.adapters.telegram.jobs import job_queue_call_later
from fxtrack.application.catalog import CurrencyCatalog
from fxtrack.application.session import TrackerSession
from fxtrack.application.tracked_set import TrackedSetManager
from fxtrack.config import settings
from fxtrack.shared.validators import (
    normalize_currency_code,
    parse_iso_date,
    validate_currency_code,
)

logger = logging.getLogger(__name__)

SESSION_KEY = "session"
CATALOG_KEY = "catalog"
FETCHER_KEY = "fetcher"

# Telegram rejects messages longer than 4096 characters
MESSAGE_LIMIT = 4000

FETCH_ERROR = "❌ Failed to fetch exchange rates. Please try again later."

HELP_TEXT = (
    "💱 Currency Exchange Tracker\n\n"
    "/rates - show the last {days} days of rates\n"
    "/base <code> - change the base currency (e.g. /base eur)\n"
    "/date <YYYY-MM-DD> - change the last day shown (within {min_days} days)\n"
    "/add <code> - track another currency (max {max_cur})\n"
    "/remove <code> - stop tracking a currency (min {min_cur})\n"
    "/tracked - show tracked currencies\n"
    "/currencies - list currencies you can add"
)


def _get_session(context: ContextTypes.DEFAULT_TYPE) -> TrackerSession:
    """
    Return this chat's session, creating it with defaults on first use.

    The at-capacity warning timer runs as a one-shot job on the bot's JobQueue.
    """
    session = context.chat_data.get(SESSION_KEY)
    if session is None:
        session = TrackerSession(
            fetcher=context.bot_data[FETCHER_KEY],
            catalog=context.bot_data[CATALOG_KEY],
            tracked=TrackedSetManager(call_later=job_queue_call_later(context.job_queue)),
        )
        context.chat_data[SESSION_KEY] = session
    return session


def _arg_code(context: ContextTypes.DEFAULT_TYPE) -> Optional[str]:
    """First command argument as a canonical currency code, or None if invalid."""
    if not context.args:
        return None
    code = normalize_currency_code(context.args[0])
    return code if validate_currency_code(code) else None


def _chunks(text: str, limit: int = MESSAGE_LIMIT) -> List[str]:
    """Split text on line boundaries into pieces Telegram accepts."""
    chunks: List[str] = []
    current = ""
    for line in text.splitlines():
        if current and len(current) + len(line) + 1 > limit:
            chunks.append(current)
            current = ""
        current = f"{current}\n{line}" if current else line
    if current:
        chunks.append(current)
    return chunks


async def _reply_view(update: Update, session: TrackerSession) -> None:
    """Send the session view as preformatted HTML so the table stays aligned."""
    text = f"<pre>{html.escape(format_session(session))}</pre>"
    await update.message.reply_text(text, parse_mode=ParseMode.HTML)


async def start(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Handle /start and /help - show usage."""
    await update.message.reply_text(
        HELP_TEXT.format(
            days=settings.window_days,
            min_days=settings.min_date_days,
            max_cur=settings.max_currencies,
            min_cur=settings.min_currencies,
        )
    )


async def rates(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Handle /rates - fetch the current window and show it."""
    session = _get_session(context)
    try:
        committed = await session.refresh()
    except Exception:
        logger.exception("Rate refresh failed")
        await update.message.reply_text(FETCH_ERROR)
        return
    # A superseded cycle is rendered by the command that superseded it
    if committed:
        await _reply_view(update, session)


async def base(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Handle /base <code> - change the base currency."""
    session = _get_session(context)
    code = _arg_code(context)
    if code is None:
        await update.message.reply_text("Usage: /base <code>, e.g. /base eur")
        return
    if not session.catalog.is_known(code):
        await update.message.reply_text(f"⚠️ Unknown currency: {code.upper()}")
        return

    try:
        committed = await session.set_base(code)
    except Exception:
        logger.exception("Base currency change to %s failed", code)
        await update.message.reply_text(FETCH_ERROR)
        return
    if committed:
        await _reply_view(update, session)


async def date_cmd(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Handle /date <YYYY-MM-DD> - change the anchor date."""
    session = _get_session(context)
    if not context.args:
        await update.message.reply_text("Usage: /date YYYY-MM-DD")
        return
    try:
        day = parse_iso_date(context.args[0])
    except ValueError:
        await update.message.reply_text("⚠️ Dates must look like YYYY-MM-DD")
        return
    if day > session.validator.today():
        await update.message.reply_text("⚠️ Date cannot be in the future.")
        return

    try:
        committed = await session.set_date(day)
    except Exception:
        logger.exception("Anchor date change to %s failed", day)
        await update.message.reply_text(FETCH_ERROR)
        return
    if committed:
        await _reply_view(update, session)
    elif session.anchor != day and session.error:
        await update.message.reply_text(f"❌ {session.error}")


async def add(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Handle /add <code> - track another currency."""
    session = _get_session(context)
    code = _arg_code(context)
    if code is None:
        await update.message.reply_text("Usage: /add <code>, e.g. /add inr")
        return
    if not session.catalog.is_known(code):
        await update.message.reply_text(f"⚠️ Unknown currency: {code.upper()}")
        return
    already_tracked = code in session.tracked
    session.add_currency(code)
    if already_tracked:
        await update.message.reply_text(f"{code.upper()} is already tracked.")
        return
    await _reply_view(update, session)


async def remove(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Handle /remove <code> - stop tracking a currency."""
    session = _get_session(context)
    code = _arg_code(context)
    if code is None:
        await update.message.reply_text("Usage: /remove <code>, e.g. /remove usd")
        return
    if code not in session.tracked:
        await update.message.reply_text(f"{code.upper()} is not tracked.")
        return

    session.remove_currency(code)
    await _reply_view(update, session)


async def tracked(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Handle /tracked - show tracked currencies and the capacity warning."""
    session = _get_session(context)
    await update.message.reply_text(
        format_tracked(session.tracked, session.catalog, session.warning)
    )


async def currencies(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """
    Handle /currencies - list catalog currencies that are not tracked yet.

    Retries the catalog load if the startup load failed.
    """
    session = _get_session(context)
    catalog: CurrencyCatalog = session.catalog
    if not catalog.loaded:
        loop = asyncio.get_running_loop()
        await loop.run_in_executor(None, catalog.load)
    if not catalog.loaded:
        await update.message.reply_text(f"❌ {catalog.error}")
        return

    codes = catalog.available(exclude=session.tracked)
    if not codes:
        await update.message.reply_text("No more currencies to add.")
        return
    header = f"Base: {currency_label(session.base, catalog)}\nCurrencies you can add:\n"
    for chunk in _chunks(header + format_catalog(codes, catalog)):
        await update.message.reply_text(chunk)


def build_handlers():
    """
    Build and return list of Telegram bot handlers.

    Returns:
        List of handler instances for registration with bot
    """
    return [
        CommandHandler(["start", "help"], start),
        CommandHandler("rates", rates),
        CommandHandler("base", base),
        CommandHandler("date", date_cmd),
        CommandHandler("add", add),
        CommandHandler("remove", remove),
        CommandHandler("tracked", tracked),
        CommandHandler("currencies", currencies),
    ]
