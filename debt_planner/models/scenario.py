"""What-if scenario models."""

from dataclasses import dataclass

from debt_planner.models.enums import Strategy
from debt_planner.models.plan import PayoffPlan, Savings


@dataclass(frozen=True)
class Scenario:
    """A named combination of extra payment and strategy."""

    name: str
    extra_payment: int
    strategy: Strategy = Strategy.AVALANCHE


@dataclass
class ScenarioResult:
    """Outcome of simulating one scenario."""

    scenario: Scenario
    total_months: int
    total_interest: int
    total_paid: int
    monthly_cost: int
    time_to_freedom: str
    savings: Savings
    converged: bool
    plan: PayoffPlan


DEFAULT_SCENARIOS: tuple[Scenario, ...] = (
    Scenario(name="Conservative", extra_payment=5000, strategy=Strategy.SNOWBALL),
    Scenario(name="Aggressive", extra_payment=15000, strategy=Strategy.AVALANCHE),
    Scenario(name="Moderate", extra_payment=10000, strategy=Strategy.SNOWBALL),
)
