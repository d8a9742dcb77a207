"""
Telephone bill calculator: the single entry point of the billing pipeline.

    raw log text -> call records -> (records, exempt number) -> total

Usage:
    from phone_bill.billing.calculator import calculate, calculate_bill

    total = calculate(phone_log)          # Decimal, never raises by default
    result = calculate_bill(phone_log)    # BillResult with charges and diagnostics
    if result.failed:
        ...

With the default FAIL_BATCH policy a malformed timestamp anywhere in the log
zeroes the whole bill and is reported through `BillResult.diagnostics` and the
log; callers that need to tell that apart from a genuinely free bill should
use `calculate_bill`.
"""

from __future__ import annotations

from decimal import Decimal

from phone_bill.billing.abstract import AbstractBillCalculator
from phone_bill.billing.cost import charge_calls, sum_charges
from phone_bill.billing.frequency import find_exempt_number
from phone_bill.billing.parser import parse_call_records
from phone_bill.domain.errors import MalformedTimestampError
from phone_bill.domain.models import BillResult, Diagnostic, DiagnosticKind, TimestampErrorPolicy
from phone_bill.utils.logging import get_logger

log = get_logger(__name__)


class TelephoneBillCalculator(AbstractBillCalculator):
    """
    Bill a call log under a fixed timestamp error policy.

    Instances hold no state besides the policy, so one calculator can be
    shared across threads.
    """

    def __init__(self, policy: TimestampErrorPolicy = TimestampErrorPolicy.FAIL_BATCH) -> None:
        self.policy = TimestampErrorPolicy(policy)

    def calculate_bill(self, phone_log: str) -> BillResult:
        try:
            parsed = parse_call_records(phone_log, policy=self.policy)
        except MalformedTimestampError as exc:
            if self.policy is TimestampErrorPolicy.RAISE:
                raise
            log.error(
                "Error occurred while calculating phone bill.",
                exc_info=True,
                extra={"line_number": exc.line_number},
            )
            return BillResult(
                failed=True,
                diagnostics=(
                    *exc.diagnostics,
                    Diagnostic.from_error(DiagnosticKind.MALFORMED_TIMESTAMP, exc),
                ),
            )

        exempt_number = find_exempt_number(parsed.records)
        charges = charge_calls(parsed.records, exempt_number)
        total = sum_charges(charges)

        log.info(
            "Phone bill calculated",
            extra={
                "calls": len(charges),
                "exempt_number": exempt_number,
                "total": str(total),
                "skipped_lines": len(parsed.diagnostics),
            },
        )
        return BillResult(
            total=total,
            exempt_number=exempt_number,
            charges=tuple(charges),
            diagnostics=tuple(parsed.diagnostics),
        )


def calculate_bill(
    phone_log: str, policy: TimestampErrorPolicy = TimestampErrorPolicy.FAIL_BATCH
) -> BillResult:
    return TelephoneBillCalculator(policy).calculate_bill(phone_log)


def calculate(phone_log: str, policy: TimestampErrorPolicy = TimestampErrorPolicy.FAIL_BATCH) -> Decimal:
    """Total cost of the calls in `phone_log`."""
    return TelephoneBillCalculator(policy).calculate(phone_log)


__all__ = ["TelephoneBillCalculator", "calculate", "calculate_bill"]
