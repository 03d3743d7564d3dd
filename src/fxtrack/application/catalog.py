# src/fxtrack/application/catalog.py
"""
Currency Catalog - Code to Display Name Mapping

Loaded once per process from the provider and immutable afterwards. If the
load fails the catalog stays empty, records a user-visible error and may be
retried; meanwhile codes stay usable without names (degraded mode).

Files that USE this module:
- fxtrack.application.session (session exposes catalog_error)
- fxtrack.adapters.telegram.bot (loads the catalog at startup)
- fxtrack.adapters.telegram.handlers (code checks, /currencies)
- fxtrack.adapters.formatting.formatter (display names)

Files that this module USES:
- fxtrack.adapters.providers.base (RateProvider.currencies)
- fxtrack.domain.errors (CatalogLoadFailure)
"""
from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Iterable, List, Mapping, Optional

from fxtrack.adapters.providers.base import RateProvider
from fxtrack.domain.errors import CatalogLoadFailure

logger = logging.getLogger(__name__)

CATALOG_LOAD_ERROR = "Failed to load currencies. Please try again later."


class CurrencyCatalog:
    """One-shot currency catalog with a degraded empty mode."""

    def __init__(self, provider: RateProvider):
        self.provider = provider
        self._names: Mapping[str, str] = MappingProxyType({})
        self.loaded = False
        self.error: Optional[str] = None

    @property
    def names(self) -> Mapping[str, str]:
        return self._names

    def load(self) -> bool:
        """
        Fetch the catalog unless it is already loaded.

        Returns:
            True if the catalog is loaded after the call
        """
        if self.loaded:
            return True
        try:
            names = self.provider.currencies()
        except CatalogLoadFailure as e:
            logger.error("Currency catalog load failed: %s", e)
            self.error = CATALOG_LOAD_ERROR
            return False

        self._names = MappingProxyType(dict(names))
        self.loaded = True
        self.error = None
        logger.info("Currency catalog loaded: %d currencies", len(self._names))
        return True

    def name(self, code: str) -> Optional[str]:
        return self._names.get(code)

    def is_known(self, code: str) -> bool:
        """True if `code` is in the catalog, or if no catalog is available."""
        if not self.loaded:
            return True
        return code in self._names

    def available(self, exclude: Iterable[str] = ()) -> List[str]:
        """Catalog codes not in `exclude`, sorted."""
        skip = set(exclude)
        return sorted(code for code in self._names if code not in skip)
