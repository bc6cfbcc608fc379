"""What-if comparison of payoff scenarios."""

from __future__ import annotations

import logging
from datetime import date
from typing import Iterable, Sequence

from debt_planner.config import PlannerConfig
from debt_planner.engine.simulator import (
    coerce_strategy,
    minimum_only_plan,
    simulate,
    validate_debts,
    validate_payment,
)
from debt_planner.engine.summary import format_time_to_freedom
from debt_planner.exceptions import InvalidScenarioError
from debt_planner.logging import log_context
from debt_planner.models import DEFAULT_SCENARIOS, Debt, Scenario, ScenarioResult

logger = logging.getLogger(__name__)


def _validate_scenarios(scenarios: Iterable[Scenario]) -> list[Scenario]:
    checked: list[Scenario] = []
    names: set[str] = set()
    for scenario in scenarios:
        if not scenario.name or not scenario.name.strip():
            raise InvalidScenarioError("Scenario name must not be empty")
        if scenario.name in names:
            raise InvalidScenarioError(f"Duplicate scenario name: {scenario.name}")
        names.add(scenario.name)
        validate_payment(scenario.extra_payment, f"Scenario {scenario.name} extra_payment")
        coerce_strategy(scenario.strategy)
        checked.append(scenario)
    return checked


def compare(
    debts: Sequence[Debt],
    scenarios: Iterable[Scenario] = DEFAULT_SCENARIOS,
    *,
    start_date: date | None = None,
    config: PlannerConfig | None = None,
) -> list[ScenarioResult]:
    """Simulate every scenario against the same debts.

    The minimum-only baseline is computed once and shared, so every
    result's ``savings`` is measured against the same reference.

    Parameters
    ----------
    debts : Sequence[Debt]
        Debts to pay down.
    scenarios : Iterable[Scenario]
        Scenarios in display order.
    start_date : date | None
        Date of month 1 for every scenario.
    config : PlannerConfig | None
        Engine settings.

    Returns
    -------
    list[ScenarioResult]
        One result per scenario, in input order.
    """
    config = config or PlannerConfig()
    debt_list = validate_debts(debts)
    scenario_list = _validate_scenarios(scenarios)
    anchor = start_date or config.resolve_start_date()

    baseline = minimum_only_plan(debt_list, start_date=anchor, config=config)
    total_minimum = sum(d.minimum_payment for d in debt_list if d.current_balance > 0)

    results: list[ScenarioResult] = []
    for scenario in scenario_list:
        plan = simulate(
            debt_list,
            scenario.extra_payment,
            scenario.strategy,
            start_date=anchor,
            config=config,
            baseline=baseline,
        )
        results.append(
            ScenarioResult(
                scenario=scenario,
                total_months=plan.total_months,
                total_interest=plan.total_interest,
                total_paid=plan.total_paid,
                monthly_cost=total_minimum + scenario.extra_payment,
                time_to_freedom=format_time_to_freedom(plan.total_months),
                savings=plan.savings,
                converged=plan.converged,
                plan=plan,
            )
        )

    best = best_scenario(results)
    logger.info(
        "Compared %d scenarios against %d debts",
        len(results),
        len(debt_list),
        extra=log_context(
            scenarios=[r.scenario.name for r in results],
            best_scenario=best.scenario.name if best else None,
            baseline_months=baseline.total_months,
        ),
    )
    return results


def best_scenario(results: Sequence[ScenarioResult]) -> ScenarioResult | None:
    """Pick the scenario with the least interest.

    Ties go to fewer months, then to the earlier scenario.
    """
    best: ScenarioResult | None = None
    for result in results:
        if best is None or (result.total_interest, result.total_months) < (
            best.total_interest,
            best.total_months,
        ):
            best = result
    return best
