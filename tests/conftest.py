"""Pytest configuration and fixtures."""

from datetime import date

import pytest

from debt_planner.models import Debt


@pytest.fixture
def seed() -> int:
    """Fixed seed for reproducible tests."""
    return 42


@pytest.fixture
def start_date() -> date:
    """Anchor date for month 1 of every schedule."""
    return date(2025, 1, 1)


@pytest.fixture
def credit_card() -> Debt:
    """24% APR card, minimum covers interest with 3000 to spare."""
    return Debt(
        id="cc",
        name="Visa",
        current_balance=300000,
        interest_rate=2400,
        minimum_payment=9000,
    )


@pytest.fixture
def car_loan() -> Debt:
    """6% APR car loan."""
    return Debt(
        id="car",
        name="Auto Loan",
        current_balance=800000,
        interest_rate=600,
        minimum_payment=20000,
    )


@pytest.fixture
def medical_bill() -> Debt:
    """Interest-free medical bill."""
    return Debt(
        id="med",
        name="Clinic Bill",
        current_balance=50000,
        interest_rate=0,
        minimum_payment=5000,
    )


@pytest.fixture
def sample_debts(credit_card: Debt, car_loan: Debt, medical_bill: Debt) -> list[Debt]:
    """Three debts whose balance order and rate order differ."""
    return [credit_card, car_loan, medical_bill]
