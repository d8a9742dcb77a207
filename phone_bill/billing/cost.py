"""
Cost engine: prices each call and sums the bill.

Calls starting in [08:00, 16:00) are charged the normal rate per minute, all
others the reduced rate. Every minute past the fifth adds the additional rate
on top of the base cost. Calls to the exempt number cost nothing.
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Iterable, List, Optional

from phone_bill.domain.models import ZERO, BillingRate, CallCharge, CallRecord
from phone_bill.utils.logging import get_logger

log = get_logger(__name__)

NORMAL_RATE_START_HOUR = 8
NORMAL_RATE_END_HOUR = 16
LONG_CALL_MINUTES = 5


def is_normal_rate_hour(start_time: datetime) -> bool:
    """Only the hour of the start timestamp matters."""
    return NORMAL_RATE_START_HOUR <= start_time.hour < NORMAL_RATE_END_HOUR


def base_rate_for(record: CallRecord) -> BillingRate:
    if is_normal_rate_hour(record.start_time):
        return BillingRate.NORMAL
    return BillingRate.REDUCED


def surcharge_for(duration_minutes: int) -> Decimal:
    if duration_minutes > LONG_CALL_MINUTES:
        return BillingRate.ADDITIONAL.rate * Decimal(duration_minutes - LONG_CALL_MINUTES)
    return ZERO


def charge_call(record: CallRecord, exempt_number: Optional[str]) -> CallCharge:
    """
    Itemize the cost of one call.

    Negative durations (end before start) are billed as computed, which
    yields a negative cost.
    """
    duration_minutes = record.duration_minutes

    if exempt_number is not None and record.phone_number == exempt_number:
        return CallCharge(record=record, duration_minutes=duration_minutes, exempt=True)

    if duration_minutes < 0:
        log.warning(
            "Call ends before it starts",
            extra={"phone_number": record.phone_number, "duration_minutes": duration_minutes},
        )

    base_rate = base_rate_for(record)
    base_cost = base_rate.rate * Decimal(duration_minutes)
    surcharge = surcharge_for(duration_minutes)
    return CallCharge(
        record=record,
        duration_minutes=duration_minutes,
        base_rate=base_rate,
        base_cost=base_cost,
        surcharge=surcharge,
        cost=base_cost + surcharge,
    )


def call_cost(record: CallRecord, exempt_number: Optional[str]) -> Decimal:
    return charge_call(record, exempt_number).cost


def charge_calls(records: Iterable[CallRecord], exempt_number: Optional[str]) -> List[CallCharge]:
    return [charge_call(record, exempt_number) for record in records]


def sum_charges(charges: Iterable[CallCharge]) -> Decimal:
    return sum((charge.cost for charge in charges), ZERO)


def total_cost(records: Iterable[CallRecord], exempt_number: Optional[str]) -> Decimal:
    """Sum of all call costs; an empty log costs exactly zero."""
    return sum_charges(charge_calls(records, exempt_number))


__all__ = [
    "LONG_CALL_MINUTES",
    "NORMAL_RATE_END_HOUR",
    "NORMAL_RATE_START_HOUR",
    "base_rate_for",
    "call_cost",
    "charge_call",
    "charge_calls",
    "is_normal_rate_hour",
    "sum_charges",
    "surcharge_for",
    "total_cost",
]
