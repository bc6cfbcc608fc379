"""Payoff plan models produced by the amortization simulator."""

from dataclasses import dataclass, field
from datetime import date

from debt_planner.models.enums import Strategy


@dataclass
class DebtPayment:
    """Allocation to one debt in one simulated month."""

    debt_id: str
    debt_name: str
    payment: int
    principal_portion: int
    interest_portion: int
    remaining_balance: int
    is_payoff: bool = False  # True only in the month the balance first reaches zero


@dataclass
class MonthlyPayment:
    """All allocations made in one simulated month."""

    month: int  # 1-based
    date: date
    payments: list[DebtPayment] = field(default_factory=list)
    remaining_total_debt: int = 0

    @property
    def total_payment(self) -> int:
        return sum(p.payment for p in self.payments)


@dataclass
class Savings:
    """Improvement over the minimum-only baseline."""

    vs_minimum: int = 0  # interest saved
    time_reduction: int = 0  # months saved


@dataclass(frozen=True)
class DebtResult:
    """Payoff record for a single debt, written once in its payoff month."""

    debt_id: str
    debt_name: str
    months_to_payoff: int
    payoff_date: date
    total_interest: int
    total_paid: int


@dataclass
class PayoffPlan:
    """Result of one simulation run."""

    strategy: Strategy
    total_months: int
    total_interest: int
    monthly_plan: list[MonthlyPayment] = field(default_factory=list)
    savings: Savings = field(default_factory=Savings)
    converged: bool = True
    debt_results: list[DebtResult] = field(default_factory=list)
    total_paid: int = 0

    @property
    def payoff_date(self) -> date | None:
        """Date of the final month, or None when nothing was paid off."""
        if not self.monthly_plan or not self.converged:
            return None
        return self.monthly_plan[-1].date

    @property
    def remaining_total_debt(self) -> int:
        """Outstanding debt after the last simulated month."""
        if not self.monthly_plan:
            return 0
        return self.monthly_plan[-1].remaining_total_debt
