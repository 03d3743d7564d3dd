# src/fxtrack/domain/errors.py
"""
Domain Errors - Business Logic Exceptions

This module defines domain-specific exceptions that represent
business rule violations and domain errors. None of them is fatal:
each is recovered close to where it is raised.
"""


class DomainError(Exception):
    """Base exception for domain errors."""
    pass


class CatalogLoadFailure(DomainError):
    """Raised when the currency catalog cannot be fetched or parsed."""
    pass


class RateLookupFailure(DomainError):
    """Raised when the rates for one base currency on one day are unavailable."""

    def __init__(self, base: str, day: str, reason: str = ""):
        self.base = base
        self.day = day
        self.reason = reason
        message = f"Rate lookup failed for {base} on {day}"
        super().__init__(f"{message}: {reason}" if reason else message)


class DateOutOfRange(DomainError):
    """Raised when an anchor date is earlier than the allowed window."""

    def __init__(self, min_days: int):
        self.min_days = min_days
        super().__init__(f"Date must be within the last {min_days} days.")


class CardinalityViolation(DomainError):
    """
    Raised when a tracked-set mutation would leave the allowed size bounds.

    Attributes:
        kind: "max" for an add at capacity, "min" for a remove at the minimum
        limit: The bound that would have been crossed
    """

    def __init__(self, kind: str, limit: int):
        self.kind = kind
        self.limit = limit
        if kind == "max":
            message = f"Maximum limit of {limit} currencies reached"
        else:
            message = f"Minimum {limit} currencies required"
        super().__init__(message)
