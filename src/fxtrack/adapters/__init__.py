# src/fxtrack/adapters/__init__.py
"""
Adapters Layer - External Interfaces

This package contains all adapters for external systems:
- Providers (currency API)
- Telegram (bot interface)
- Formatting (output)
"""

__all__ = []
