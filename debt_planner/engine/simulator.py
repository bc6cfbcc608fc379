"""Month-by-month amortization simulator for snowball and avalanche payoff."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Sequence

from debt_planner.config import PlannerConfig, SimulationConfig
from debt_planner.engine.dates import add_months
from debt_planner.exceptions import InvalidDebtError, InvalidInputError
from debt_planner.logging import log_context
from debt_planner.models import (
    Debt,
    DebtPayment,
    DebtResult,
    MonthlyPayment,
    PayoffPlan,
    Savings,
    Strategy,
)

logger = logging.getLogger(__name__)

_MONTHS_BASIS_POINTS = Decimal(12 * 10000)


@dataclass
class _MonthEntry:
    """Working record for one debt during one month."""

    interest: int = 0
    payment: int = 0


def coerce_strategy(strategy: Strategy | str) -> Strategy:
    """Return ``strategy`` as a :class:`Strategy`, rejecting unknown names."""
    try:
        return Strategy(strategy)
    except ValueError as exc:
        raise InvalidInputError(f"Invalid debt payoff strategy: {strategy!r}") from exc


def _check_amount(debt: Debt, field_name: str) -> None:
    value = getattr(debt, field_name)
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidDebtError(
            f"Debt {debt.id}: {field_name} must be an integer, got {value!r}"
        )
    if value < 0:
        raise InvalidDebtError(f"Debt {debt.id}: {field_name} must not be negative, got {value}")


def validate_debts(debts: Sequence[Debt]) -> list[Debt]:
    """Reject debts that would produce a meaningless schedule.

    Parameters
    ----------
    debts : Sequence[Debt]
        Debts to check.

    Returns
    -------
    list[Debt]
        The debts as a list, in input order.

    Raises
    ------
    InvalidDebtError
        If an amount is negative or not an integer, or an id is repeated.
    """
    seen: set[str] = set()
    for debt in debts:
        for field_name in ("current_balance", "interest_rate", "minimum_payment"):
            _check_amount(debt, field_name)
        if debt.id in seen:
            raise InvalidDebtError(f"Duplicate debt id: {debt.id}")
        seen.add(debt.id)
    return list(debts)


def validate_payment(amount: int, name: str = "extra_payment") -> int:
    """Reject a negative or non-integer payment amount."""
    if isinstance(amount, bool) or not isinstance(amount, int):
        raise InvalidInputError(f"{name} must be an integer, got {amount!r}")
    if amount < 0:
        raise InvalidInputError(f"{name} must not be negative, got {amount}")
    return amount


def monthly_interest(balance: int, rate_bp: int, rounding: str) -> int:
    """Interest accrued on ``balance`` for one month, rounded to a whole unit.

    ``round(balance * rate_bp / 10000 / 12)`` evaluated exactly with
    :class:`~decimal.Decimal` and rounded with ``rounding``.
    """
    if balance <= 0 or rate_bp == 0:
        return 0
    exact = Decimal(balance) * Decimal(rate_bp) / _MONTHS_BASIS_POINTS
    return int(exact.quantize(Decimal(1), rounding=rounding))


def _priority_order(
    strategy: Strategy, debts: Sequence[Debt], balances: Sequence[int]
) -> list[int]:
    """Indices of debts with a balance, highest priority first.

    Derived fresh every month; ``sorted`` is stable so ties keep input order.
    """
    active = [i for i, balance in enumerate(balances) if balance > 0]
    if strategy == Strategy.SNOWBALL:
        return sorted(active, key=lambda i: balances[i])
    return sorted(active, key=lambda i: -debts[i].interest_rate)


def _amortize(
    debts: Sequence[Debt],
    extra_payment: int,
    strategy: Strategy,
    *,
    start_date: date,
    settings: SimulationConfig,
    rollover: bool,
) -> PayoffPlan:
    """Run the monthly loop on a private copy of the balances."""
    balances = [debt.current_balance for debt in debts]
    interest_by_debt = [0] * len(debts)
    paid_by_debt = [0] * len(debts)

    # Fixed monthly output: minimums owed at t=0 plus the extra amount
    budget = sum(d.minimum_payment for d in debts if d.current_balance > 0) + extra_payment

    monthly_plan: list[MonthlyPayment] = []
    debt_results: list[DebtResult] = []
    recorded: set[str] = set()
    total_interest = 0
    month = 0

    while any(balance > 0 for balance in balances) and month < settings.max_months:
        month += 1
        month_date = add_months(start_date, month - 1)
        entries: dict[int, _MonthEntry] = {}

        # Interest accrual
        for i, debt in enumerate(debts):
            if balances[i] <= 0:
                continue
            interest = monthly_interest(balances[i], debt.interest_rate, settings.rounding)
            balances[i] += interest
            interest_by_debt[i] += interest
            total_interest += interest
            entries[i] = _MonthEntry(interest=interest)

        # Minimum-payment pass
        consumed = 0
        for i, entry in entries.items():
            paid = min(debts[i].minimum_payment, balances[i])
            balances[i] -= paid
            entry.payment += paid
            consumed += paid

        # Surplus cascades down the priority order within the month
        surplus = budget - consumed if rollover else extra_payment
        for i in _priority_order(strategy, debts, balances):
            if surplus <= 0:
                break
            applied = min(surplus, balances[i])
            balances[i] -= applied
            entries[i].payment += applied
            surplus -= applied

        payments: list[DebtPayment] = []
        for i, entry in entries.items():
            debt = debts[i]
            paid_by_debt[i] += entry.payment
            interest_portion = min(entry.interest, entry.payment)
            is_payoff = balances[i] == 0 and debt.id not in recorded
            if is_payoff:
                recorded.add(debt.id)
                debt_results.append(
                    DebtResult(
                        debt_id=debt.id,
                        debt_name=debt.name,
                        months_to_payoff=month,
                        payoff_date=month_date,
                        total_interest=interest_by_debt[i],
                        total_paid=paid_by_debt[i],
                    )
                )
            payments.append(
                DebtPayment(
                    debt_id=debt.id,
                    debt_name=debt.name,
                    payment=entry.payment,
                    principal_portion=entry.payment - interest_portion,
                    interest_portion=interest_portion,
                    remaining_balance=balances[i],
                    is_payoff=is_payoff,
                )
            )

        monthly_plan.append(
            MonthlyPayment(
                month=month,
                date=month_date,
                payments=payments,
                remaining_total_debt=sum(balances),
            )
        )

    converged = all(balance == 0 for balance in balances)
    return PayoffPlan(
        strategy=strategy,
        total_months=len(monthly_plan),
        total_interest=total_interest,
        monthly_plan=monthly_plan,
        converged=converged,
        debt_results=debt_results,
        total_paid=sum(paid_by_debt),
    )


def minimum_only_plan(
    debts: Sequence[Debt],
    *,
    start_date: date | None = None,
    config: PlannerConfig | None = None,
) -> PayoffPlan:
    """Simulate paying only each debt's own minimum, with no surplus at all.

    Freed minimums are not rolled over, so the ordering strategy has no
    effect on this baseline.
    """
    config = config or PlannerConfig()
    debt_list = validate_debts(debts)
    return _amortize(
        debt_list,
        0,
        Strategy.AVALANCHE,
        start_date=start_date or config.resolve_start_date(),
        settings=config.simulation,
        rollover=False,
    )


def savings_against(plan: PayoffPlan, baseline: PayoffPlan) -> Savings:
    """Interest and months saved by ``plan`` relative to ``baseline``."""
    return Savings(
        vs_minimum=baseline.total_interest - plan.total_interest,
        time_reduction=baseline.total_months - plan.total_months,
    )


def simulate(
    debts: Sequence[Debt],
    extra_payment: int = 0,
    strategy: Strategy | str = Strategy.AVALANCHE,
    *,
    start_date: date | None = None,
    config: PlannerConfig | None = None,
    baseline: PayoffPlan | None = None,
) -> PayoffPlan:
    """Simulate paying down ``debts`` month by month.

    Each month interest accrues on every open balance, every debt receives
    its minimum payment, and whatever is left of the fixed monthly budget
    (sum of opening minimums plus ``extra_payment``) goes to the highest
    priority debt, cascading to the next one if that debt is cleared.

    Parameters
    ----------
    debts : Sequence[Debt]
        Debts in caller order; ties in priority keep this order.
    extra_payment : int
        Monthly amount on top of the minimums, in smallest currency units.
    strategy : Strategy | str
        ``"snowball"`` (smallest balance first) or ``"avalanche"``
        (highest rate first).
    start_date : date | None
        Date of month 1. Defaults to the configured anchor.
    config : PlannerConfig | None
        Engine settings.
    baseline : PayoffPlan | None
        Precomputed minimum-only plan for ``savings``. Computed when omitted.

    Returns
    -------
    PayoffPlan
        The schedule. ``converged`` is False when the month ceiling was hit
        with debt remaining; the partial schedule is still returned.

    Raises
    ------
    InvalidInputError
        On negative amounts, duplicate ids or an unknown strategy.
    """
    config = config or PlannerConfig()
    chosen = coerce_strategy(strategy)
    validate_payment(extra_payment)
    debt_list = validate_debts(debts)

    if not debt_list:
        return PayoffPlan(strategy=chosen, total_months=0, total_interest=0)

    anchor = start_date or config.resolve_start_date()
    logger.debug(
        "Simulating %s payoff of %d debts with extra payment %d from %s",
        chosen.value,
        len(debt_list),
        extra_payment,
        anchor.isoformat(),
    )

    plan = _amortize(
        debt_list,
        extra_payment,
        chosen,
        start_date=anchor,
        settings=config.simulation,
        rollover=config.simulation.rollover_freed_minimums,
    )
    if baseline is None:
        baseline = minimum_only_plan(debt_list, start_date=anchor, config=config)
    plan.savings = savings_against(plan, baseline)

    context = log_context(
        strategy=chosen.value,
        extra_payment=extra_payment,
        total_months=plan.total_months,
        total_interest=plan.total_interest,
        converged=plan.converged,
        remaining_total_debt=plan.remaining_total_debt,
    )
    if not plan.converged:
        logger.warning(
            "%s plan did not amortize within %d months; %d still outstanding",
            chosen.value,
            config.simulation.max_months,
            plan.remaining_total_debt,
            extra=context,
        )
    else:
        logger.info(
            "%s plan: %d months, total interest %d",
            chosen.value,
            plan.total_months,
            plan.total_interest,
            extra=context,
        )
    return plan
