"""Display helpers for payoff results."""

from typing import Iterable

from debt_planner.models import Debt

CURRENCY_SYMBOLS = {
    "NGN": "₦",
    "USD": "$",
    "GBP": "£",
}


def format_currency(amount: int, currency: str) -> str:
    """Format an amount in smallest units, e.g. ``format_currency(-12345, "USD") == "-$123.45"``."""
    symbol = CURRENCY_SYMBOLS.get(currency, currency)
    sign = "-" if amount < 0 else ""
    whole, cents = divmod(abs(amount), 100)
    return f"{sign}{symbol}{whole}.{cents:02d}"


def format_time_to_freedom(months: int) -> str:
    """Human-readable time until debt-free."""
    if months <= 0:
        return "Already debt-free!"
    years, remaining = divmod(months, 12)
    if years == 0:
        return f"{months} months"
    if remaining == 0:
        return f"{years} year{'s' if years > 1 else ''}"
    return f"{years}y {remaining}m"


def total_debt_by_currency(debts: Iterable[Debt]) -> dict[str, int]:
    """Sum outstanding balances per currency code without conversion."""
    totals: dict[str, int] = {}
    for debt in debts:
        totals[debt.currency] = totals.get(debt.currency, 0) + debt.current_balance
    return totals


def debt_to_income_ratio(total_debt_payments: int, monthly_income: int) -> float:
    """Monthly debt payments as a percentage of monthly income."""
    if monthly_income <= 0:
        return 0.0
    return total_debt_payments / monthly_income * 100
