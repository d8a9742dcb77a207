"""
Billing package for the phone bill calculator.

Re-exports the pipeline stages (parser, frequency analyzer, cost engine) and
the calculator that strings them together, so downstream code can import from
`phone_bill.billing` directly.
"""

from phone_bill.billing.abstract import AbstractBillCalculator, BillCalculator
from phone_bill.billing.calculator import TelephoneBillCalculator, calculate, calculate_bill
from phone_bill.billing.cost import call_cost, charge_call, total_cost
from phone_bill.billing.frequency import count_calls, find_exempt_number, most_frequent_numbers
from phone_bill.billing.parser import ParseResult, parse_call_records, parse_timestamp

__all__ = [
    # Interfaces
    "AbstractBillCalculator",
    "BillCalculator",
    # Entry points
    "TelephoneBillCalculator",
    "calculate",
    "calculate_bill",
    # Pipeline stages
    "ParseResult",
    "parse_call_records",
    "parse_timestamp",
    "count_calls",
    "most_frequent_numbers",
    "find_exempt_number",
    "call_cost",
    "charge_call",
    "total_cost",
]
