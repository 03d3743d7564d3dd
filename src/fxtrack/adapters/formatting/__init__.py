# src/fxtrack/adapters/formatting/__init__.py
"""
Formatting Adapters - Message Formatting

This package contains message formatting adapters for Telegram output.
"""

from fxtrack.adapters.formatting.formatter import (
    format_catalog,
    format_rate,
    format_rate_table,
    format_session,
    format_tracked,
)

__all__ = [
    "format_catalog",
    "format_rate",
    "format_rate_table",
    "format_session",
    "format_tracked",
]
