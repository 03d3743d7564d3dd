# src/fxtrack/app.py
"""
Application Entry Point - Bot Initialization and Startup

This module serves as the composition root for the FXTrack Telegram bot.
It configures logging, validates configuration and starts polling.

Files that USE this module:
- python -m fxtrack (module entry point)
- fxtrack console script (pyproject.toml)

Files that this module USES:
- fxtrack.shared.logging_conf (setup_logging for logging configuration)
- fxtrack.config (settings for configuration management)
- fxtrack.adapters.telegram.bot (build_application)
"""

from __future__ import annotations  # Enable postponed evaluation of annotations for forward references

import logging  # Standard library for logging messages and errors
import os  # Operating system interface for the working directory

from telegram.error import Conflict, NetworkError, TimedOut  # Telegram API error exceptions

from fxtrack.adapters.telegram.bot import build_application  # Application builder with handlers
from fxtrack.config import settings  # Application configuration and settings
from fxtrack.shared.logging_conf import setup_logging  # Configure logging with file rotation


def main() -> None:
    """
    Initialize and start the Telegram bot application.

    This function:
    1. Sets up logging and validates configuration
    2. Builds the application (handlers, catalog, fetcher)
    3. Starts the bot polling loop
    """
    setup_logging(
        level=logging.INFO,
        log_file=settings.log_file,
        log_dir=settings.log_dir,
        max_bytes=settings.log_max_bytes,
        backup_count=settings.log_backup_count,
        log_stdout=settings.log_stdout,
    )
    logger = logging.getLogger(__name__)
    logger.info("Working directory: %s", os.getcwd())

    if not settings.bot_token:
        raise RuntimeError("BOT_TOKEN missing")

    app = build_application(settings.bot_token)

    logger.info(
        "Starting bot polling… base=%s, window=%d days, tracked=%s",
        settings.default_base,
        settings.window_days,
        ",".join(settings.default_currencies),
    )

    try:
        app.run_polling(allowed_updates=None, drop_pending_updates=False)
    except Conflict as e:
        logger.error(
            "Telegram Conflict error: %s (another bot instance is already polling)",
            e,
            exc_info=True,
        )
        raise
    except (TimedOut, NetworkError) as e:
        logger.error(
            "Network error during bot operation (timeout connecting to Telegram API): %s (type: %s)",
            e,
            type(e).__name__,
            exc_info=True,
        )
        raise
    except KeyboardInterrupt:
        logger.info("Bot stopped by user (KeyboardInterrupt)")
        raise
    except Exception as e:
        logger.exception("Unexpected error during bot operation: %s (type: %s)", e, type(e).__name__)
        raise


if __name__ == "__main__":
    main()
