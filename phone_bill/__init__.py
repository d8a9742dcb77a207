"""
Phone Bill - telephone bill calculator for textual call logs.

Bills every call in a log by time of day (normal rate 08:00-16:00, reduced
rate otherwise), adds a surcharge for minutes past the fifth, and makes calls
to the most frequently called number free.
"""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MIT"

# Public API exports
from phone_bill.billing import (
    AbstractBillCalculator,
    BillCalculator,
    TelephoneBillCalculator,
    calculate,
    calculate_bill,
)
from phone_bill.config import Settings, get_settings
from phone_bill.domain import (
    BillingError,
    BillingRate,
    BillResult,
    CallCharge,
    CallRecord,
    Diagnostic,
    DiagnosticKind,
    MalformedLineError,
    MalformedTimestampError,
    TimestampErrorPolicy,
)
from phone_bill.utils.logging import configure_logging, get_logger

__all__ = [
    # Version info
    "__version__",
    "__license__",
    # Configuration
    "Settings",
    "get_settings",
    # Calculation
    "AbstractBillCalculator",
    "BillCalculator",
    "TelephoneBillCalculator",
    "calculate",
    "calculate_bill",
    # Domain
    "BillingRate",
    "BillResult",
    "CallCharge",
    "CallRecord",
    "Diagnostic",
    "DiagnosticKind",
    "TimestampErrorPolicy",
    # Errors
    "BillingError",
    "MalformedLineError",
    "MalformedTimestampError",
    # Logging
    "configure_logging",
    "get_logger",
]
