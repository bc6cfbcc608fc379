"""Greedy surplus allocation and targeted-payment comparison."""

from __future__ import annotations

import logging
from datetime import date
from typing import Iterable, Sequence

from debt_planner.config import PlannerConfig
from debt_planner.engine.advanced import simulate_advanced
from debt_planner.engine.simulator import validate_debts, validate_payment
from debt_planner.engine.summary import format_currency
from debt_planner.exceptions import InvalidInputError, InvalidScenarioError
from debt_planner.logging import log_context
from debt_planner.models import (
    Allocation,
    AllocationResult,
    Debt,
    InterestOptions,
    MarginalBenefit,
    TargetedComparison,
    TargetedDebtResult,
    TargetedStrategy,
)

logger = logging.getLogger(__name__)


def marginal_benefits(
    debts: Sequence[Debt],
    options: InterestOptions | None = None,
    probe: int | None = None,
    *,
    start_date: date | None = None,
    config: PlannerConfig | None = None,
) -> list[MarginalBenefit]:
    """Interest saved on each debt by paying ``probe`` more than its minimum.

    Returned in input order.
    """
    config = config or PlannerConfig()
    probe = config.advanced.marginal_probe if probe is None else probe
    if isinstance(probe, bool) or not isinstance(probe, int) or probe <= 0:
        raise InvalidInputError(f"probe must be a positive integer, got {probe!r}")
    anchor = start_date or config.resolve_start_date()

    benefits: list[MarginalBenefit] = []
    for debt in debts:
        base = simulate_advanced(
            debt, debt.minimum_payment, options, start_date=anchor, config=config
        )
        improved = simulate_advanced(
            debt, debt.minimum_payment + probe, options, start_date=anchor, config=config
        )
        benefits.append(
            MarginalBenefit(
                debt_id=debt.id,
                debt_name=debt.name,
                benefit=base.total_interest - improved.total_interest,
            )
        )
    return benefits


def _total_interest(
    debts: Sequence[Debt],
    payments: dict[str, int],
    options: InterestOptions | None,
    anchor: date,
    config: PlannerConfig,
) -> float:
    return sum(
        simulate_advanced(
            debt, payments[debt.id], options, start_date=anchor, config=config
        ).total_interest
        for debt in debts
    )


def optimize_allocation(
    debts: Sequence[Debt],
    total_monthly_budget: int,
    options: InterestOptions | None = None,
    *,
    start_date: date | None = None,
    config: PlannerConfig | None = None,
) -> AllocationResult:
    """Send the whole budget surplus to the debt where it saves the most interest.

    Every debt keeps its minimum payment. The amount above the sum of
    minimums goes to the single debt with the largest marginal benefit;
    ties go to the debt listed first. This is a greedy choice, not a
    general optimum.

    Parameters
    ----------
    debts : Sequence[Debt]
        Debts to allocate across.
    total_monthly_budget : int
        Everything available for debt each month, in smallest currency units.
    options : InterestOptions | None
        Compounding settings used to price each debt.
    start_date : date | None
        Schedule anchor.
    config : PlannerConfig | None
        Engine settings.

    Returns
    -------
    AllocationResult
        Per-debt payments, the interest saved and a short explanation.
    """
    config = config or PlannerConfig()
    debt_list = validate_debts(debts)
    validate_payment(total_monthly_budget, "total_monthly_budget")
    anchor = start_date or config.resolve_start_date()

    minimum_required = sum(d.minimum_payment for d in debt_list)
    extra_available = max(0, total_monthly_budget - minimum_required)
    allocations = [Allocation(debt_id=d.id, payment=d.minimum_payment) for d in debt_list]

    if extra_available <= 0 or not debt_list:
        return AllocationResult(
            allocations=allocations,
            total_savings=0.0,
            reasoning="No extra budget available for optimization",
        )

    benefits = marginal_benefits(debt_list, options, start_date=anchor, config=config)
    top_index = max(range(len(benefits)), key=lambda i: (benefits[i].benefit, -i))
    target = debt_list[top_index]
    allocations[top_index].payment += extra_available
    allocations[top_index].is_optimal = True

    base_payments = {d.id: d.minimum_payment for d in debt_list}
    optimized_payments = {a.debt_id: a.payment for a in allocations}
    total_savings = _total_interest(
        debt_list, base_payments, options, anchor, config
    ) - _total_interest(debt_list, optimized_payments, options, anchor, config)

    logger.info(
        "Allocated extra %d to debt %s (marginal benefit %.2f)",
        extra_available,
        target.id,
        benefits[top_index].benefit,
        extra=log_context(
            target_debt_id=target.id,
            extra_available=extra_available,
            total_savings=round(total_savings, 2),
        ),
    )
    return AllocationResult(
        allocations=allocations,
        total_savings=total_savings,
        reasoning=(
            f"Focus extra {format_currency(extra_available, target.currency)} "
            f"on {target.name} (highest marginal benefit)"
        ),
        target_debt_id=target.id,
        marginal_benefits=benefits,
    )


def compare_targeted(
    debts: Sequence[Debt],
    strategies: Iterable[TargetedStrategy],
    options: InterestOptions | None = None,
    *,
    start_date: date | None = None,
    config: PlannerConfig | None = None,
) -> list[TargetedComparison]:
    """Price strategies that aim their extra payment at one named debt.

    Each debt is run independently through the advanced model at its
    minimum, plus the strategy's extra payment if it is the target.
    Total months is the longest of the per-debt runs.
    """
    config = config or PlannerConfig()
    debt_list = validate_debts(debts)
    anchor = start_date or config.resolve_start_date()
    known_ids = {d.id for d in debt_list}
    total_minimum = sum(d.minimum_payment for d in debt_list)

    comparisons: list[TargetedComparison] = []
    for strategy in strategies:
        validate_payment(strategy.extra_payment, f"Strategy {strategy.name} extra_payment")
        if strategy.target_debt_id is not None and strategy.target_debt_id not in known_ids:
            raise InvalidScenarioError(
                f"Strategy {strategy.name} targets unknown debt {strategy.target_debt_id}"
            )

        debt_results: list[TargetedDebtResult] = []
        for debt in debt_list:
            payment = debt.minimum_payment
            if strategy.target_debt_id == debt.id:
                payment += strategy.extra_payment
            result = simulate_advanced(debt, payment, options, start_date=anchor, config=config)
            debt_results.append(
                TargetedDebtResult(debt_id=debt.id, debt_name=debt.name, result=result)
            )

        comparisons.append(
            TargetedComparison(
                strategy_name=strategy.name,
                total_interest=sum(r.result.total_interest for r in debt_results),
                total_months=max((r.result.total_months for r in debt_results), default=0),
                debt_results=debt_results,
                monthly_cost=total_minimum + strategy.extra_payment,
            )
        )
    return comparisons
