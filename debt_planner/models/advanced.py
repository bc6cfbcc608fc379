"""Models for the compounding-aware single-debt payoff model."""

from dataclasses import dataclass, field
from datetime import date

from debt_planner.models.enums import CompoundingFrequency


@dataclass(frozen=True)
class RateChange:
    """Annual rate (basis points) effective from ``month`` onwards."""

    month: int
    new_rate: int


@dataclass(frozen=True)
class InterestOptions:
    """How interest compounds for an advanced payoff run."""

    compounding_frequency: CompoundingFrequency = CompoundingFrequency.MONTHLY
    variable_rate: bool = False
    rate_changes: tuple[RateChange, ...] = ()


@dataclass
class AdvancedMonth:
    """One month of an advanced payoff run. Amounts are in smallest currency units."""

    month: int
    date: date
    payment: float
    principal_paid: float
    interest_paid: float
    balance_remaining: float
    effective_rate: float  # annual, as a fraction


@dataclass
class AdvancedPayoffResult:
    """Result of an advanced payoff run for a single debt."""

    total_interest: float
    total_months: int
    monthly_breakdown: list[AdvancedMonth] = field(default_factory=list)
    compounding_benefit: float = 0.0
    negative_amortization: bool = False
    paid_off: bool = False


@dataclass
class Allocation:
    """Monthly payment assigned to a debt by the optimizer."""

    debt_id: str
    payment: int
    is_optimal: bool = False


@dataclass(frozen=True)
class MarginalBenefit:
    """Interest saved by paying one probe amount more on a debt each month."""

    debt_id: str
    debt_name: str
    benefit: float


@dataclass
class AllocationResult:
    """Outcome of the greedy allocation optimizer."""

    allocations: list[Allocation]
    total_savings: float
    reasoning: str
    target_debt_id: str | None = None
    marginal_benefits: list[MarginalBenefit] = field(default_factory=list)


@dataclass(frozen=True)
class TargetedStrategy:
    """Extra payment aimed at one specific debt (or none)."""

    name: str
    extra_payment: int
    target_debt_id: str | None = None


@dataclass
class TargetedDebtResult:
    """Per-debt advanced result inside a targeted comparison."""

    debt_id: str
    debt_name: str
    result: AdvancedPayoffResult


@dataclass
class TargetedComparison:
    """Aggregated outcome of one targeted strategy."""

    strategy_name: str
    total_interest: float
    total_months: int
    debt_results: list[TargetedDebtResult]
    monthly_cost: int
