"""
Calculator interface for the phone bill calculator.

Anything that turns a call log into a total should satisfy `BillCalculator`,
so the CLI and embedding applications can swap implementations (for example a
calculator bound to a different timestamp error policy).
"""

from __future__ import annotations

import abc
from decimal import Decimal
from typing import Protocol, runtime_checkable

from phone_bill.domain.models import BillResult


@runtime_checkable
class BillCalculator(Protocol):
    """
    Common interface of bill calculators.
    """

    def calculate(self, phone_log: str) -> Decimal:
        """
        Calculate the total cost of the calls in `phone_log`.

        Parameters
        ----------
        phone_log : str
            Call log, one `<number>,<start>,<end>` record per line.

        Returns
        -------
        Decimal
            The total; zero for an empty log or a failed batch.
        """
        ...


class AbstractBillCalculator(abc.ABC):
    """
    ABC helper for class-based implementations that also itemize the bill.

    Subclasses implement `calculate_bill`; `calculate` returns its total.
    """

    @abc.abstractmethod
    def calculate_bill(self, phone_log: str) -> BillResult:  # pragma: no cover - interface only
        """Bill the log and return the itemized result."""
        raise NotImplementedError

    def calculate(self, phone_log: str) -> Decimal:
        return self.calculate_bill(phone_log).total


__all__ = ["BillCalculator", "AbstractBillCalculator"]
