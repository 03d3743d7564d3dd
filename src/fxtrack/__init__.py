# src/fxtrack/__init__.py
"""
FXTrack - Trailing-Window Currency Exchange Tracker

A Telegram bot that tracks daily exchange rates for a chosen base currency
against a small set of tracked currencies over the 7 days ending on a chosen
anchor date, tolerating per-day lookup failures.
"""

__version__ = "1.0.0"
