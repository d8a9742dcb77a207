"""
Utilities package for the phone bill calculator.

Exports shared helpers for cross-cutting concerns such as logging.
Keep this package lightweight and free of billing logic.
"""

from phone_bill.utils.logging import configure_logging, get_logger

__all__ = [
    "configure_logging",
    "get_logger",
]
