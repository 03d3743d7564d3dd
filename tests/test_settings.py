"""
Settings Tests - Unit Tests for Configuration and Validators

Files that USE this module:
- pytest (test runner executes these tests)

Files that this module USES:
- fxtrack.config.settings (Settings)
- fxtrack.shared.validators (validation helpers)
"""
from datetime import date, datetime

import pytest
from pydantic import ValidationError

from fxtrack.config.settings import Settings
from fxtrack.shared.validators import (
    normalize_currency_code,
    parse_iso_date,
    validate_bot_token,
    validate_currency_code,
)


def _settings(**env):
    return Settings(_env_file=None, **env)


class TestSettings:
    def test_defaults(self):
        s = _settings()
        assert s.default_base == "gbp"
        assert s.default_currencies == ["usd", "eur", "jpy", "chf", "cad", "aud", "zar"]
        assert (s.min_currencies, s.max_currencies) == (3, 7)
        assert s.min_date_days == 90
        assert s.window_days == 7
        assert s.rate_decimal_places == 4
        assert s.warning_clear_seconds == 3.0

    def test_codes_are_normalized(self):
        s = _settings(DEFAULT_BASE=" EUR ", DEFAULT_CURRENCIES=["USD", "Gbp", "jpy"])
        assert s.default_base == "eur"
        assert s.default_currencies == ["usd", "gbp", "jpy"]

    def test_duplicate_defaults_rejected(self):
        with pytest.raises(ValidationError):
            _settings(DEFAULT_CURRENCIES=["usd", "USD", "eur", "jpy"])

    def test_default_set_must_fit_limits(self):
        with pytest.raises(ValidationError):
            _settings(DEFAULT_CURRENCIES=["usd", "eur"])

    def test_min_above_max_rejected(self):
        with pytest.raises(ValidationError):
            _settings(MIN_CURRENCIES=8, MAX_CURRENCIES=7)

    def test_invalid_bot_token_rejected(self):
        with pytest.raises(ValidationError):
            _settings(BOT_TOKEN="not-a-token")

    def test_api_base_trailing_slash_stripped(self):
        assert _settings(CURRENCY_API_BASE="http://x/api/").api_base == "http://x/api"


class TestValidators:
    def test_normalize_currency_code(self):
        assert normalize_currency_code("  USD ") == "usd"
        assert normalize_currency_code(None) == ""

    def test_validate_currency_code(self):
        assert validate_currency_code("usd")
        assert not validate_currency_code("USD")
        assert not validate_currency_code("usdt")
        assert not validate_currency_code("")

    def test_validate_bot_token(self):
        assert validate_bot_token("123456789:" + "A" * 35)
        assert not validate_bot_token("")

    def test_parse_iso_date(self):
        assert parse_iso_date("2024-01-10") == date(2024, 1, 10)
        assert parse_iso_date(datetime(2024, 1, 10, 12, 30)) == date(2024, 1, 10)
        with pytest.raises(ValueError):
            parse_iso_date("2024/01/10")
