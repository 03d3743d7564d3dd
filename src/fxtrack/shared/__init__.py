# src/fxtrack/shared/__init__.py
"""
Shared Utilities - Cross-cutting Concerns

This package contains shared utilities used across all layers:
- Validation
- Scheduled actions
- Logging configuration
"""

from fxtrack.shared.validators import (
    normalize_currency_code,
    parse_iso_date,
    validate_bot_token,
    validate_currency_code,
)
from fxtrack.shared.scheduler import ScheduledAction

__all__ = [
    "normalize_currency_code",
    "parse_iso_date",
    "validate_bot_token",
    "validate_currency_code",
    "ScheduledAction",
]
