# src/fxtrack/adapters/formatting/formatter.py
"""
Message Formatter - Text Formatting and Presentation

This module handles all text formatting for Telegram messages: the rate
window table (one row per day, newest first, one column per tracked
currency), the tracked currency list, catalog listings and the complete
session view with its error and warning lines.

Files that USE this module:
- fxtrack.adapters.telegram.handlers (uses all formatter functions for message display)
- tests.test_formatter (unit tests)

Files that this module USES:
- fxtrack.domain.models (RateWindow)
- fxtrack.application.catalog (CurrencyCatalog for display names)
- fxtrack.application.session (TrackerSession for format_session)
- fxtrack.config (decimal places and tracked-set limit)
"""
from __future__ import annotations

from typing import Iterable, List, Optional, Sequence

from fxtrack.application.catalog import CurrencyCatalog
from fxtrack.application.session import TrackerSession
from fxtrack.config import settings
from fxtrack.domain.models import RateWindow

TITLE = "Currency Exchange Tracker"
NA = "N/A"


def format_rate(value: Optional[float], decimals: Optional[int] = None) -> str:
    """
    Format a single rate.

    Args:
        value: Rate value, or None when unavailable
        decimals: Decimal places (default: settings.rate_decimal_places)

    Returns:
        Fixed-point string like '1.2735', or 'N/A' for a missing rate
    """
    if value is None:
        return NA
    if decimals is None:
        decimals = settings.rate_decimal_places
    return f"{value:.{decimals}f}"


def format_rate_table(
    window: Optional[RateWindow],
    tracked: Sequence[str],
    decimals: Optional[int] = None,
) -> str:
    """
    Format a rate window as a fixed-width table.

    Rows are days in descending order; columns are the tracked currencies in
    tracking order. Missing days and missing currencies print as 'N/A'.

    Args:
        window: Committed rate window (None renders the header only)
        tracked: Tracked currency codes, in column order
        decimals: Decimal places for rates

    Returns:
        Multi-line string meant to be displayed in monospace
    """
    header = ["Date"] + [code.upper() for code in tracked]
    rows: List[List[str]] = []
    if window is not None:
        for day in window.dates:
            rows.append([day] + [format_rate(window.rate(day, code), decimals) for code in tracked])

    widths = [len(h) for h in header]
    for row in rows:
        widths = [max(w, len(cell)) for w, cell in zip(widths, row)]

    def _line(cells: List[str]) -> str:
        first = cells[0].ljust(widths[0])
        rest = [cell.rjust(width) for cell, width in zip(cells[1:], widths[1:])]
        return "  ".join([first] + rest).rstrip()

    lines = [_line(header)]
    lines.extend(_line(row) for row in rows)
    return "\n".join(lines)


def currency_label(code: str, catalog: Optional[CurrencyCatalog] = None) -> str:
    """'USD - US Dollar' when the catalog knows the name, else 'USD'."""
    name = catalog.name(code) if catalog is not None else None
    return f"{code.upper()} - {name}" if name else code.upper()


def format_tracked(
    tracked: Iterable[str],
    catalog: Optional[CurrencyCatalog] = None,
    warning: bool = False,
) -> str:
    """
    Format the tracked currency list.

    Args:
        tracked: Tracked codes in display order
        catalog: Optional catalog for display names
        warning: Whether the at-capacity warning is raised

    Returns:
        One currency per line, plus the warning line if raised
    """
    lines = ["Tracked Currencies:"]
    lines.extend(f"• {currency_label(code, catalog)}" for code in tracked)
    if warning:
        lines.append(f"⚠️ Maximum limit of {settings.max_currencies} currencies reached")
    return "\n".join(lines)


def format_catalog(codes: Iterable[str], catalog: Optional[CurrencyCatalog] = None) -> str:
    """List codes with their display names, one per line."""
    return "\n".join(currency_label(code, catalog) for code in codes)


def format_session(session: TrackerSession) -> str:
    """
    Format everything a session currently shows.

    Args:
        session: Tracker session to render

    Returns:
        Title, base currency, anchor date, rate table and any error lines
    """
    tracked = session.tracked.codes
    lines = [
        TITLE,
        f"Base Currency: {currency_label(session.base, session.catalog)}",
        f"Date: {session.anchor.isoformat()}",
        "",
        format_rate_table(session.window, tracked),
    ]
    if session.warning:
        lines.append(f"⚠️ Maximum limit of {settings.max_currencies} currencies reached")
    if session.error:
        lines.append(f"❌ {session.error}")
    if session.catalog_error:
        lines.append(f"❌ {session.catalog_error}")
    return "\n".join(lines)
