"""
Domain package for the phone bill calculator.

Exports the value types and errors shared by the parser, the frequency
analyzer and the cost engine. Keep this package free of billing rules.
"""

from phone_bill.domain.errors import BillingError, MalformedLineError, MalformedTimestampError
from phone_bill.domain.models import (
    ZERO,
    BillingRate,
    BillResult,
    CallCharge,
    CallRecord,
    Diagnostic,
    DiagnosticKind,
    TimestampErrorPolicy,
)

__all__ = [
    "ZERO",
    "BillingRate",
    "BillResult",
    "CallCharge",
    "CallRecord",
    "Diagnostic",
    "DiagnosticKind",
    "TimestampErrorPolicy",
    "BillingError",
    "MalformedLineError",
    "MalformedTimestampError",
]
