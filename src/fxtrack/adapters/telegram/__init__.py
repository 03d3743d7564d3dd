# src/fxtrack/adapters/telegram/__init__.py
"""
Telegram Adapters - Bot Interface

This package contains Telegram bot adapters:
- Bot application builder
- Command handlers
"""

from fxtrack.adapters.telegram.bot import build_application
from fxtrack.adapters.telegram.handlers import build_handlers

__all__ = [
    "build_application",
    "build_handlers",
]
