"""Debt payoff strategy engine."""

from debt_planner.engine.advanced import interest_for_month, simulate_advanced
from debt_planner.engine.comparator import best_scenario, compare
from debt_planner.engine.optimizer import compare_targeted, marginal_benefits, optimize_allocation
from debt_planner.engine.simulator import minimum_only_plan, monthly_interest, simulate
from debt_planner.engine.summary import (
    debt_to_income_ratio,
    format_currency,
    format_time_to_freedom,
    total_debt_by_currency,
)

__all__ = [
    "best_scenario",
    "compare",
    "compare_targeted",
    "debt_to_income_ratio",
    "format_currency",
    "format_time_to_freedom",
    "interest_for_month",
    "marginal_benefits",
    "minimum_only_plan",
    "monthly_interest",
    "optimize_allocation",
    "simulate",
    "simulate_advanced",
    "total_debt_by_currency",
]
