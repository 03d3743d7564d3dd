# src/fxtrack/config/settings.py
"""
Settings - Pydantic-based Configuration Management

Provides centralized configuration management using Pydantic Settings.
Supports environment variables with validation and an optional .env file.

Files that USE this module:
- fxtrack.app (loads settings for bot and logging configuration)
- fxtrack.adapters.providers.currency_api (API base URL and HTTP timeout)
- fxtrack.application.* (window size, cardinality bounds, date bound, defaults)
- fxtrack.adapters.formatting.formatter (decimal places, limits in messages)

Files that this module USES:
- fxtrack.shared.validators (validation functions for settings)
"""

from __future__ import annotations  # Enable postponed evaluation of annotations

from typing import List, Optional  # Type hints for lists and optional values

from pydantic import Field, field_validator, model_validator  # Data validation and field configuration
from pydantic_settings import BaseSettings, SettingsConfigDict  # Settings management with Pydantic

from fxtrack.shared.validators import (
    normalize_currency_code,  # Canonical lowercase form of a currency code
    validate_bot_token,  # Validate Telegram bot token format
    validate_currency_code,  # Validate 3-letter currency code
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # --- Telegram ---
    bot_token: str = Field(default="", alias="BOT_TOKEN")

    # --- Currency API ---
    api_base: str = Field(
        default="https://cdn.jsdelivr.net/npm/@fawazahmed0/currency-api",
        alias="CURRENCY_API_BASE",
    )

    # --- HTTP Settings ---
    http_timeout_seconds: int = Field(default=10, alias="HTTP_TIMEOUT_SECONDS", ge=1, le=60)

    # --- Tracking defaults ---
    default_base: str = Field(default="gbp", alias="DEFAULT_BASE")
    default_currencies: List[str] = Field(
        default=["usd", "eur", "jpy", "chf", "cad", "aud", "zar"],
        alias="DEFAULT_CURRENCIES",
    )

    # --- Limits ---
    min_currencies: int = Field(default=3, alias="MIN_CURRENCIES", ge=1)
    max_currencies: int = Field(default=7, alias="MAX_CURRENCIES", ge=1)
    min_date_days: int = Field(default=90, alias="MIN_DATE_DAYS", ge=0)
    window_days: int = Field(default=7, alias="WINDOW_DAYS", ge=1, le=31)

    # --- Display ---
    rate_decimal_places: int = Field(default=4, alias="RATE_DECIMAL_PLACES", ge=0, le=10)
    warning_clear_seconds: float = Field(default=3.0, alias="WARNING_CLEAR_SECONDS", gt=0)

    # --- Logging (for server deployment) ---
    log_file: Optional[str] = Field(default=None, alias="LOG_FILE")
    log_dir: Optional[str] = Field(default=None, alias="LOG_DIR")
    log_stdout: bool = Field(default=True, alias="FXTRACK_LOG_STDOUT")
    log_max_bytes: int = Field(default=10 * 1024 * 1024, alias="LOG_MAX_BYTES")  # 10MB
    log_backup_count: int = Field(default=5, alias="LOG_BACKUP_COUNT")

    @field_validator("bot_token")
    @classmethod
    def validate_bot_token(cls, v: str) -> str:
        """Validate bot token format (an empty token is checked at startup)."""
        if v and not validate_bot_token(v):
            raise ValueError("Invalid BOT_TOKEN format")
        return v

    @field_validator("api_base")
    @classmethod
    def strip_api_base(cls, v: str) -> str:
        return v.rstrip("/")

    @field_validator("default_base")
    @classmethod
    def validate_default_base(cls, v: str) -> str:
        """Normalize and validate the default base currency."""
        code = normalize_currency_code(v)
        if not validate_currency_code(code):
            raise ValueError(f"Invalid DEFAULT_BASE currency code: {v!r}")
        return code

    @field_validator("default_currencies")
    @classmethod
    def validate_default_currencies(cls, v: List[str]) -> List[str]:
        """Normalize codes and reject invalid or duplicate entries."""
        codes = [normalize_currency_code(c) for c in v]
        invalid = [c for c in codes if not validate_currency_code(c)]
        if invalid:
            raise ValueError(f"Invalid currency codes in DEFAULT_CURRENCIES: {invalid}")
        if len(set(codes)) != len(codes):
            raise ValueError("DEFAULT_CURRENCIES must not contain duplicates")
        return codes

    @model_validator(mode="after")
    def check_limits(self) -> "Settings":
        """Cross-field checks for the tracked-set bounds."""
        if self.min_currencies > self.max_currencies:
            raise ValueError("MIN_CURRENCIES must not exceed MAX_CURRENCIES")
        if not self.min_currencies <= len(self.default_currencies) <= self.max_currencies:
            raise ValueError(
                f"DEFAULT_CURRENCIES must hold between {self.min_currencies} "
                f"and {self.max_currencies} codes"
            )
        return self


# Global settings instance
settings = Settings()


# ============================================================================
# Deployment Instructions
# ============================================================================
#
# 1. Put BOT_TOKEN (and any overrides above) into .env
#
# 2. Run the bot in the background:
#    nohup python -m fxtrack > bot.log 2>&1 &
#
# 3. Monitor logs in real-time:
#    tail -f bot.log
#
# 4. Stop the bot:
#    pkill -f "python -m fxtrack"
#
# ============================================================================
