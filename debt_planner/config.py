"""Configuration management for debt-planner."""

from dataclasses import dataclass, field
from datetime import date
from decimal import ROUND_HALF_EVEN, ROUND_HALF_UP

from debt_planner.exceptions import ConfigurationError

ROUNDING_MODES = {
    "half_up": ROUND_HALF_UP,
    "half_even": ROUND_HALF_EVEN,
}


@dataclass
class SimulationConfig:
    """Settings for the multi-debt amortization simulator."""

    max_months: int = 600
    rounding: str = ROUND_HALF_UP
    rollover_freed_minimums: bool = True

    def __post_init__(self) -> None:
        if self.max_months <= 0:
            raise ConfigurationError(f"max_months must be positive, got {self.max_months}")
        if self.rounding not in ROUNDING_MODES.values():
            raise ConfigurationError(f"Unsupported rounding mode: {self.rounding}")


@dataclass
class AdvancedConfig:
    """Settings for the single-debt compounding model and the optimizer."""

    max_months: int = 1200
    payoff_threshold: float = 0.01
    days_per_month: int = 30
    marginal_probe: int = 100  # one major currency unit

    def __post_init__(self) -> None:
        if self.max_months <= 0:
            raise ConfigurationError(f"max_months must be positive, got {self.max_months}")
        if self.payoff_threshold < 0:
            raise ConfigurationError("payoff_threshold must not be negative")
        if self.days_per_month <= 0:
            raise ConfigurationError("days_per_month must be positive")
        if self.marginal_probe <= 0:
            raise ConfigurationError("marginal_probe must be positive")


@dataclass
class PlannerConfig:
    """Main configuration for debt-planner."""

    simulation: SimulationConfig = field(default_factory=SimulationConfig)
    advanced: AdvancedConfig = field(default_factory=AdvancedConfig)
    start_date: date | None = None
    log_level: str = "INFO"

    def resolve_start_date(self) -> date:
        """Return the schedule anchor: the configured date or this month's first day."""
        if self.start_date is not None:
            return self.start_date
        return date.today().replace(day=1)

    @classmethod
    def from_env(cls) -> "PlannerConfig":
        """Create config from environment variables."""
        import os

        def _int(name: str, default: int) -> int:
            raw = os.getenv(name)
            if raw is None:
                return default
            try:
                return int(raw)
            except ValueError as exc:
                raise ConfigurationError(f"{name} must be an integer, got {raw!r}") from exc

        rounding_name = os.getenv("DEBT_PLANNER_ROUNDING", "half_up").lower()
        if rounding_name not in ROUNDING_MODES:
            raise ConfigurationError(
                f"DEBT_PLANNER_ROUNDING must be one of {sorted(ROUNDING_MODES)}, got {rounding_name!r}"
            )

        simulation = SimulationConfig(
            max_months=_int("DEBT_PLANNER_MAX_MONTHS", 600),
            rounding=ROUNDING_MODES[rounding_name],
            rollover_freed_minimums=os.getenv("DEBT_PLANNER_ROLLOVER", "true").lower() == "true",
        )

        advanced = AdvancedConfig(
            max_months=_int("DEBT_PLANNER_ADVANCED_MAX_MONTHS", 1200),
            marginal_probe=_int("DEBT_PLANNER_MARGINAL_PROBE", 100),
        )

        start_date_str = os.getenv("DEBT_PLANNER_START_DATE")
        start_date = None
        if start_date_str:
            try:
                start_date = date.fromisoformat(start_date_str)
            except ValueError as exc:
                raise ConfigurationError(
                    f"DEBT_PLANNER_START_DATE must be an ISO date, got {start_date_str!r}"
                ) from exc

        return cls(
            simulation=simulation,
            advanced=advanced,
            start_date=start_date,
            log_level=os.getenv("LOG_LEVEL", "INFO"),
        )
