"""
Frequency analyzer: picks the phone number whose calls are free.

The exempt number is the one that appears most often in the log. When several
numbers share the top count, the greatest one by string comparison wins.
"""

from __future__ import annotations

from collections import Counter
from typing import Iterable, List, Optional

from phone_bill.domain.models import CallRecord


def count_calls(records: Iterable[CallRecord]) -> Counter:
    """Occurrences of each phone number; direction of the call is not tracked."""
    return Counter(record.phone_number for record in records)


def most_frequent_numbers(records: Iterable[CallRecord]) -> List[str]:
    """All phone numbers sharing the highest call count, in first-seen order."""
    counts = count_calls(records)
    if not counts:
        return []
    max_count = max(counts.values())
    return [number for number, count in counts.items() if count == max_count]


def find_exempt_number(records: Iterable[CallRecord]) -> Optional[str]:
    """
    Return the exempt phone number, or None for an empty log (nothing is exempt).

    Ties are broken by string maximum, so "9" beats "10".
    """
    candidates = most_frequent_numbers(records)
    if not candidates:
        return None
    return max(candidates)


__all__ = ["count_calls", "most_frequent_numbers", "find_exempt_number"]
