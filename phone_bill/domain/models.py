"""
Domain models for the phone bill calculator.

Defines the call record parsed from a log line, the closed set of billing
rates, and the itemized result types produced by the billing pipeline. All
models are frozen: a record is built once while parsing and never mutated.
"""
from __future__ import annotations

from datetime import datetime, timedelta
from decimal import Decimal
from enum import Enum
from typing import Optional, Tuple

from pydantic import BaseModel, Field

from phone_bill.domain.errors import BillingError

ZERO = Decimal("0.00")

_ONE_MINUTE = timedelta(minutes=1)


class BillingRate(Enum):
    """Per-minute rates, in currency units."""

    NORMAL = Decimal("1.00")
    REDUCED = Decimal("0.50")
    ADDITIONAL = Decimal("0.20")

    @property
    def rate(self) -> Decimal:
        return self.value


class TimestampErrorPolicy(str, Enum):
    """
    What to do when a timestamp field does not match the log format.

    FAIL_BATCH: bill nothing and report the failure (the default).
    SKIP_LINE: drop only the offending line.
    RAISE: propagate MalformedTimestampError.
    """

    FAIL_BATCH = "fail_batch"
    SKIP_LINE = "skip_line"
    RAISE = "raise"


class CallRecord(BaseModel):
    """
    One completed call as read from the log.

    `end_time` is not required to be after `start_time`; malformed logs can
    produce negative durations and those are kept as-is.
    """

    phone_number: str = Field(..., description="Called or calling party, opaque token.")
    start_time: datetime = Field(..., description="Call start.")
    end_time: datetime = Field(..., description="Call end.")

    model_config = {
        "frozen": True,
        "populate_by_name": True,
    }

    @property
    def duration(self) -> timedelta:
        return self.end_time - self.start_time

    @property
    def duration_minutes(self) -> int:
        """Whole minutes of the call, truncated toward zero (90s -> 1, -90s -> -1)."""
        minutes = abs(self.duration) // _ONE_MINUTE
        return -minutes if self.duration < timedelta(0) else minutes


class CallCharge(BaseModel):
    """Itemized cost of a single call."""

    record: CallRecord
    duration_minutes: int
    base_rate: Optional[BillingRate] = Field(None, description="None for exempt calls.")
    base_cost: Decimal = ZERO
    surcharge: Decimal = ZERO
    cost: Decimal = ZERO
    exempt: bool = False

    model_config = {"frozen": True}


class DiagnosticKind(str, Enum):
    MALFORMED_LINE = "malformed_line"
    MALFORMED_TIMESTAMP = "malformed_timestamp"


class Diagnostic(BaseModel):
    """A problem found in the log that did not stop the calculation from returning."""

    kind: DiagnosticKind
    line_number: int = Field(..., description="1-based line number in the log.")
    line: str
    message: str

    model_config = {"frozen": True}

    @classmethod
    def from_error(cls, kind: DiagnosticKind, error: BillingError) -> "Diagnostic":
        return cls(kind=kind, line_number=error.line_number or 0, line=error.line, message=str(error))


class BillResult(BaseModel):
    """
    Outcome of billing one call log.

    `failed` distinguishes a batch that was zeroed because of a timestamp
    error from a log that legitimately costs nothing.
    """

    total: Decimal = ZERO
    exempt_number: Optional[str] = None
    charges: Tuple[CallCharge, ...] = ()
    diagnostics: Tuple[Diagnostic, ...] = ()
    failed: bool = False

    model_config = {"frozen": True}

    @property
    def ok(self) -> bool:
        return not self.failed


__all__ = [
    "ZERO",
    "BillingRate",
    "TimestampErrorPolicy",
    "CallRecord",
    "CallCharge",
    "DiagnosticKind",
    "Diagnostic",
    "BillResult",
]
