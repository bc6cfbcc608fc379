"""Debt input model."""

from dataclasses import dataclass
from datetime import date

from debt_planner.models.enums import Priority


@dataclass(frozen=True)
class Debt:
    """A liability to be paid down.

    Amounts are integers in the smallest currency unit (cents) and the
    interest rate is an annual nominal rate in basis points
    (``500`` is 5.00% per year).
    """

    id: str
    name: str
    current_balance: int
    interest_rate: int  # basis points, annual
    minimum_payment: int
    currency: str = "USD"
    priority: Priority | None = None  # informational only
    due_date: date | None = None  # display anchor, not used in interest math
    total_amount: int | None = None  # original amount borrowed

    @property
    def annual_rate(self) -> float:
        """Annual rate as a fraction (1200 bp -> 0.12)."""
        return self.interest_rate / 10000
