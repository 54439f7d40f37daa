"""
Domain-specific exception hierarchy for the lunch time calculator.
"""


class LunchTimeError(Exception):
    """Base class for all application-level errors."""


class InvalidSpanError(LunchTimeError, ValueError):
    """Raised when the end of a span precedes its start."""


class InvalidWindowError(LunchTimeError, ValueError):
    """Raised when a lunch window does not open before it closes."""
