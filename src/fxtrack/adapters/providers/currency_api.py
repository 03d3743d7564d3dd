# src/fxtrack/adapters/providers/currency_api.py
"""
Currency API Provider for Daily Exchange Rates

This module implements the client for the free currency API
(@fawazahmed0/currency-api, served from jsDelivr). It provides the currency
catalog and the per-day rates for one base currency, with error handling
that maps every transport or schema problem to a domain error.

Endpoints:
- {api_base}@latest/v1/currencies.json -> {"usd": "US Dollar", ...}
- {api_base}@2024-01-10/v1/currencies/gbp.json -> {"date": "2024-01-10", "gbp": {"usd": 1.27, ...}}

Files that USE this module:
- fxtrack.adapters.telegram.bot (builds the provider for the fetcher and catalog)
- tests.test_providers (unit tests)

Files that this module USES:
- fxtrack.adapters.providers.base (RateProvider interface)
- fxtrack.domain.errors (CatalogLoadFailure, RateLookupFailure)
- fxtrack.config (settings for API configuration)
"""
import logging
from datetime import date
from typing import Any, Dict, Optional

import requests

from fxtrack.adapters.providers.base import RateProvider
from fxtrack.config import settings
from fxtrack.domain.errors import CatalogLoadFailure, RateLookupFailure

log = logging.getLogger(__name__)


class CurrencyApiProvider(RateProvider):
    def __init__(self, base_url: Optional[str] = None, timeout: Optional[int] = None):
        """
        Initialize the currency API provider.

        Args:
            base_url: Optional custom API base (defaults to settings.api_base)
            timeout: Optional HTTP timeout in seconds (defaults to settings.http_timeout_seconds)
        """
        self.base_url = (base_url or settings.api_base).rstrip("/")
        self.timeout = timeout or settings.http_timeout_seconds

    def catalog_url(self) -> str:
        return f"{self.base_url}@latest/v1/currencies.json"

    def rates_url(self, base: str, on: Optional[date] = None) -> str:
        day = on.isoformat() if on else "latest"
        return f"{self.base_url}@{day}/v1/currencies/{base}.json"

    def _get_json(self, url: str) -> Any:
        """
        GET a URL and decode its JSON body.

        Raises:
            RuntimeError: On timeout, transport error, non-2xx status or invalid JSON
        """
        try:
            resp = requests.get(url, timeout=self.timeout)
            resp.raise_for_status()
            return resp.json()
        except requests.exceptions.Timeout as e:
            log.warning("Currency API timeout after %d seconds: %s", self.timeout, url)
            raise RuntimeError(f"Currency API timeout after {self.timeout}s") from e
        except requests.exceptions.HTTPError as e:
            status = e.response.status_code if e.response is not None else "?"
            log.warning("Currency API HTTP error %s: %s", status, url)
            raise RuntimeError(f"Currency API HTTP {status}") from e
        except requests.exceptions.RequestException as e:
            log.warning("Currency API request failed (network/connection error): %s", e)
            raise RuntimeError(f"Currency API request failed: {e}") from e
        except ValueError as e:
            log.error("Currency API returned invalid JSON: %s", url)
            raise RuntimeError(f"Currency API returned invalid JSON: {e}") from e

    def currencies(self) -> Dict[str, str]:
        """
        Fetch the currency catalog.

        Returns:
            {lowercase code: display name}; blank names fall back to the upper case code

        Raises:
            CatalogLoadFailure: If the request fails or the body is not a JSON object
        """
        url = self.catalog_url()
        try:
            data = self._get_json(url)
        except RuntimeError as e:
            raise CatalogLoadFailure(str(e)) from e

        if not isinstance(data, dict):
            log.error("Currency API catalog is not a JSON object: %r", type(data).__name__)
            raise CatalogLoadFailure("Currency catalog has unexpected format")

        catalog = {
            str(code).lower(): (str(name) if name else str(code).upper())
            for code, name in data.items()
        }
        log.info("Currency catalog fetched: %d currencies", len(catalog))
        return catalog

    def rates(self, base: str, on: Optional[date] = None) -> Dict[str, float]:
        """
        Fetch the rates of `base` against every other currency on one day.

        Non-numeric entries in the response are skipped. Rates are returned
        at full precision.

        Raises:
            RateLookupFailure: If the request fails or the response has no rates for `base`
        """
        day = on.isoformat() if on else "latest"
        url = self.rates_url(base, on)
        try:
            data = self._get_json(url)
        except RuntimeError as e:
            raise RateLookupFailure(base, day, str(e)) from e

        # Expect: {"date": "2024-01-10", "gbp": {"usd": 1.27, ...}}
        raw = data.get(base) if isinstance(data, dict) else None
        if not isinstance(raw, dict):
            log.error("Currency API response for %s on %s has no '%s' rates", base, day, base)
            raise RateLookupFailure(base, day, f"response missing '{base}' rates")

        rates: Dict[str, float] = {}
        for code, value in raw.items():
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                continue
            rates[str(code).lower()] = float(value)

        log.debug("Fetched %d rates for %s on %s", len(rates), base, day)
        return rates
