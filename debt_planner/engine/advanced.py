"""Single-debt payoff model with configurable compounding and rate changes.

Unlike the main simulator, this model works in floating point so that
daily, quarterly and annual compounding can be expressed as effective
monthly rates. It is an analysis tool for comparing targeted payments,
not a replacement for the integer schedule.
"""

from __future__ import annotations

import logging
from datetime import date

from debt_planner.config import PlannerConfig
from debt_planner.engine.dates import add_months
from debt_planner.engine.simulator import validate_debts, validate_payment
from debt_planner.exceptions import InvalidInputError
from debt_planner.logging import log_context
from debt_planner.models import (
    AdvancedMonth,
    AdvancedPayoffResult,
    CompoundingFrequency,
    Debt,
    InterestOptions,
)

logger = logging.getLogger(__name__)


def _rate_for_month(debt: Debt, options: InterestOptions, month: int) -> float:
    """Annual rate (fraction) in force for ``month``."""
    rate = debt.annual_rate
    if options.variable_rate and options.rate_changes:
        for change in sorted(options.rate_changes, key=lambda c: c.month):
            if change.month > month:
                break
            rate = change.new_rate / 10000
    return rate


def interest_for_month(
    balance: float,
    annual_rate: float,
    frequency: CompoundingFrequency,
    days_per_month: int = 30,
) -> float:
    """Interest accrued on ``balance`` over one month.

    Parameters
    ----------
    balance : float
        Outstanding balance.
    annual_rate : float
        Nominal annual rate as a fraction.
    frequency : CompoundingFrequency
        How often interest compounds.
    days_per_month : int
        Days per month for daily compounding.

    Returns
    -------
    float
        Interest for the month.
    """
    if frequency == CompoundingFrequency.DAILY:
        daily_rate = annual_rate / frequency.periods_per_year
        return balance * ((1 + daily_rate) ** days_per_month - 1)
    if frequency == CompoundingFrequency.MONTHLY:
        return balance * annual_rate / 12
    periods = frequency.periods_per_year
    effective_monthly = (1 + annual_rate / periods) ** (periods / 12) - 1
    return balance * effective_monthly


def _coerce_options(options: InterestOptions | None) -> InterestOptions:
    if options is None:
        return InterestOptions()
    try:
        frequency = CompoundingFrequency(options.compounding_frequency)
    except ValueError as exc:
        raise InvalidInputError(
            f"Unknown compounding frequency: {options.compounding_frequency!r}"
        ) from exc
    for change in options.rate_changes:
        if change.month < 1 or change.new_rate < 0:
            raise InvalidInputError(f"Invalid rate change: {change}")
    if frequency is options.compounding_frequency:
        return options
    return InterestOptions(
        compounding_frequency=frequency,
        variable_rate=options.variable_rate,
        rate_changes=tuple(options.rate_changes),
    )


def simulate_advanced(
    debt: Debt,
    monthly_payment: int,
    options: InterestOptions | None = None,
    *,
    start_date: date | None = None,
    config: PlannerConfig | None = None,
) -> AdvancedPayoffResult:
    """Pay a fixed amount each month against one debt until it is cleared.

    The run stops when the balance falls to the payoff threshold, when the
    month ceiling is reached, or as soon as a payment fails to reduce the
    principal. In the last case the month is still recorded and
    ``negative_amortization`` is set on the truncated result.

    Parameters
    ----------
    debt : Debt
        The debt to pay down.
    monthly_payment : int
        Fixed payment each month, in smallest currency units.
    options : InterestOptions | None
        Compounding frequency and optional rate schedule.
    start_date : date | None
        Anchor date; month ``m`` is dated ``m`` months after it.
    config : PlannerConfig | None
        Engine settings.

    Returns
    -------
    AdvancedPayoffResult
        Totals and the monthly breakdown.
    """
    config = config or PlannerConfig()
    settings = config.advanced
    validate_debts([debt])
    validate_payment(monthly_payment, "monthly_payment")
    options = _coerce_options(options)
    anchor = start_date or config.resolve_start_date()

    balance = float(debt.current_balance)
    breakdown: list[AdvancedMonth] = []
    total_interest = 0.0
    month = 0
    negative_amortization = False

    while balance > settings.payoff_threshold and month < settings.max_months:
        month += 1
        rate = _rate_for_month(debt, options, month)
        interest = interest_for_month(
            balance, rate, options.compounding_frequency, settings.days_per_month
        )

        principal = min(monthly_payment - interest, balance)
        payment = min(float(monthly_payment), balance + interest)
        balance = max(0.0, balance - principal)
        total_interest += interest

        breakdown.append(
            AdvancedMonth(
                month=month,
                date=add_months(anchor, month),
                payment=payment,
                principal_paid=principal,
                interest_paid=interest,
                balance_remaining=balance,
                effective_rate=rate,
            )
        )

        if principal <= 0 and balance > 0:
            negative_amortization = True
            logger.warning(
                "Payment %d does not cover interest %.2f on debt %s in month %d",
                monthly_payment,
                interest,
                debt.id,
                month,
                extra=log_context(
                    debt_id=debt.id,
                    month=month,
                    payment=monthly_payment,
                    interest=round(interest, 2),
                    effective_rate=rate,
                ),
            )
            break

    simple_interest = debt.current_balance * debt.annual_rate * (month / 12)
    return AdvancedPayoffResult(
        total_interest=total_interest,
        total_months=month,
        monthly_breakdown=breakdown,
        compounding_benefit=simple_interest - total_interest,
        negative_amortization=negative_amortization,
        paid_off=balance <= settings.payoff_threshold,
    )
