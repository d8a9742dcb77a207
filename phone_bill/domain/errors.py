"""
Error types raised while reading a call log.

Only timestamp errors ever propagate out of the parser; malformed lines are
turned into diagnostics, but share the same shape so callers running a strict
policy can raise them too.
"""
from __future__ import annotations

from typing import Optional


class BillingError(Exception):
    """Base class for call log problems."""

    def __init__(self, message: str, line_number: Optional[int] = None, line: str = ""):
        super().__init__(message)
        self.line_number = line_number
        self.line = line


class MalformedLineError(BillingError):
    """A line that does not have exactly three comma-separated fields."""

    def __init__(self, message: str, field_count: int = 0, **kwargs):
        super().__init__(message, **kwargs)
        self.field_count = field_count


class MalformedTimestampError(BillingError):
    """A start or end field that does not match the timestamp format."""

    def __init__(self, message: str, value: str = "", **kwargs):
        super().__init__(message, **kwargs)
        self.value = value
        # Diagnostics for lines before this one, filled in by the parser.
        self.diagnostics: list = []


__all__ = ["BillingError", "MalformedLineError", "MalformedTimestampError"]
