"""Debt payoff domain models."""

from debt_planner.models.advanced import (
    AdvancedMonth,
    AdvancedPayoffResult,
    Allocation,
    AllocationResult,
    InterestOptions,
    MarginalBenefit,
    RateChange,
    TargetedComparison,
    TargetedDebtResult,
    TargetedStrategy,
)
from debt_planner.models.debt import Debt
from debt_planner.models.enums import CompoundingFrequency, Priority, Strategy
from debt_planner.models.plan import (
    DebtPayment,
    DebtResult,
    MonthlyPayment,
    PayoffPlan,
    Savings,
)
from debt_planner.models.scenario import DEFAULT_SCENARIOS, Scenario, ScenarioResult

__all__ = [
    "AdvancedMonth",
    "AdvancedPayoffResult",
    "Allocation",
    "AllocationResult",
    "CompoundingFrequency",
    "DEFAULT_SCENARIOS",
    "Debt",
    "DebtPayment",
    "DebtResult",
    "InterestOptions",
    "MarginalBenefit",
    "MonthlyPayment",
    "PayoffPlan",
    "Priority",
    "RateChange",
    "Savings",
    "Scenario",
    "ScenarioResult",
    "Strategy",
    "TargetedComparison",
    "TargetedDebtResult",
    "TargetedStrategy",
]
