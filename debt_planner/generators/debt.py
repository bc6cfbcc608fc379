"""Synthetic debt portfolios for what-if analysis and tests."""

import random
from typing import Iterator

from debt_planner.generators.base import BaseGenerator
from debt_planner.models import Debt, Priority


class DebtGenerator(BaseGenerator):
    """Generate realistic consumer debts.

    Every generated debt has a minimum payment that covers its first
    month's interest plus a slice of principal, so a minimum-only plan
    amortizes well inside the simulator's month ceiling.
    """

    # kind -> (balance range in major units, APR range in basis points,
    #          principal share of the minimum payment)
    PROFILES = {
        "credit_card": ((500, 15000), (1500, 2999), 0.02),
        "student_loan": ((5000, 60000), (300, 800), 0.01),
        "auto_loan": ((4000, 35000), (400, 1200), 0.02),
        "personal_loan": ((1000, 25000), (700, 2400), 0.025),
        "medical": ((200, 8000), (0, 0), 0.05),
    }
    KIND_WEIGHTS = [0.40, 0.20, 0.20, 0.12, 0.08]

    LENDERS = {
        "credit_card": ["Visa", "Mastercard", "Discover", "Amex"],
        "student_loan": ["Federal Direct", "Sallie Mae", "Navient"],
        "auto_loan": ["Auto Finance", "Motor Credit", "Car Loan"],
        "personal_loan": ["Personal Loan", "Consolidation Loan"],
        "medical": ["Hospital Bill", "Clinic Bill"],
    }

    def __init__(
        self,
        seed: int | None = None,
        locale: str = "en_US",
        currency: str = "USD",
    ) -> None:
        super().__init__(seed, locale)
        self.currency = currency

    def generate(self, kind: str | None = None) -> Debt:
        """Generate a single debt.

        Parameters
        ----------
        kind : str | None
            One of ``PROFILES``; chosen at random when omitted.

        Returns
        -------
        Debt
            Generated debt.
        """
        if kind is None:
            kind = random.choices(list(self.PROFILES), weights=self.KIND_WEIGHTS, k=1)[0]
        if kind not in self.PROFILES:
            raise ValueError(f"Unknown debt kind: {kind}")

        (low, high), (rate_low, rate_high), principal_share = self.PROFILES[kind]
        balance = random.randint(low, high) * 100 + random.randint(0, 99)
        rate = random.randint(rate_low, rate_high)

        # Monthly interest rounded up, plus a share of principal
        interest = -(-balance * rate // 120000)
        minimum = max(2500, interest + int(balance * principal_share))
        minimum = -(-minimum // 100) * 100  # whole major units

        lender = random.choice(self.LENDERS[kind])
        return Debt(
            id=self.fake.uuid4(),
            name=f"{lender} {self.fake.lexify('????').upper()}",
            current_balance=balance,
            interest_rate=rate,
            minimum_payment=minimum,
            currency=self.currency,
            priority=random.choice(list(Priority)),
            due_date=self.fake.date_between(start_date="today", end_date="+30d"),
            total_amount=balance + random.randint(0, balance // 2),
        )

    def generate_batch(self, count: int) -> Iterator[Debt]:
        """Generate multiple debts.

        Parameters
        ----------
        count : int
            Number of debts to generate.

        Yields
        ------
        Debt
            Generated debts.
        """
        for _ in range(count):
            yield self.generate()

    def generate_portfolio(self, count: int) -> list[Debt]:
        """Generate ``count`` debts with distinct ids."""
        debts: list[Debt] = []
        ids: set[str] = set()
        while len(debts) < count:
            debt = self.generate()
            if debt.id in ids:
                continue
            ids.add(debt.id)
            debts.append(debt)
        return debts
