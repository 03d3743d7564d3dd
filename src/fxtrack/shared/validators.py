# src/fxtrack/shared/validators.py
"""
Input Validation Utilities - Configuration and User Input Validation

This module provides the validation helpers shared by configuration and the
Telegram input layer: bot token format, currency code normalization and
ISO date parsing for user-supplied anchor dates.

Files that USE this module:
- fxtrack.config.settings (uses validation functions in Settings field validators)
- fxtrack.application.date_range (parse_iso_date for string candidates)
- fxtrack.adapters.telegram.handlers (normalizes command arguments)

Files that this module USES:
- None (pure utility functions)
"""
import re
from datetime import date, datetime
from typing import Optional, Union

_CURRENCY_CODE = re.compile(r"^[a-z]{3}$")


def validate_bot_token(token: str) -> bool:
    """
    Validate Telegram bot token format.

    Args:
        token: Bot token to validate

    Returns:
        True if valid, False otherwise
    """
    if not token:
        return False

    # Bot tokens should be in format: 123456789:ABCDEFghijklmnopQRSTUVwxyz
    pattern = r'^\d{8,10}:[A-Za-z0-9_-]{35}$'
    return bool(re.match(pattern, token))


def normalize_currency_code(code: Optional[str]) -> str:
    """
    Return the canonical (stripped, lowercase) form of a currency code.

    Uniqueness of codes is case-insensitive, so every code entering the
    system goes through here first.
    """
    if not code:
        return ""
    return code.strip().lower()


def validate_currency_code(code: str) -> bool:
    """
    Validate a canonical currency code (three lowercase ASCII letters).

    Args:
        code: Code to validate, already normalized

    Returns:
        True if valid, False otherwise
    """
    return bool(code) and bool(_CURRENCY_CODE.match(code))


def parse_iso_date(value: Union[str, date, datetime]) -> date:
    """
    Parse a date-only value from user input.

    Accepts a date, a datetime (time component dropped) or a 'YYYY-MM-DD'
    string.

    Raises:
        ValueError: If the value is not a date or the string is not a valid ISO date
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        raise ValueError(f"Expected a date or YYYY-MM-DD string, got {type(value).__name__}")
    return date.fromisoformat(value.strip())
