"""Month arithmetic for payoff schedules."""

from calendar import monthrange
from datetime import date


def add_months(value: date, months: int) -> date:
    """Return ``value`` shifted by ``months`` calendar months.

    The day is clamped to the last day of the target month, so
    January 31 plus one month is February 28 (or 29).
    """
    index = value.month - 1 + months
    year = value.year + index // 12
    month = index % 12 + 1
    day = min(value.day, monthrange(year, month)[1])
    return value.replace(year=year, month=month, day=day)
