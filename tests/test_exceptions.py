"""Tests for custom exception hierarchy."""

from debt_planner.exceptions import (
    ConfigurationError,
    DebtPlannerError,
    InvalidDebtError,
    InvalidInputError,
    InvalidScenarioError,
)


class TestExceptionHierarchy:
    """Test exception inheritance chain."""

    def test_debt_planner_error_is_exception(self) -> None:
        assert isinstance(DebtPlannerError("test"), Exception)

    def test_invalid_input_is_debt_planner_error(self) -> None:
        assert isinstance(InvalidInputError("test"), DebtPlannerError)

    def test_invalid_debt_is_invalid_input(self) -> None:
        err = InvalidDebtError("test")
        assert isinstance(err, InvalidInputError)
        assert isinstance(err, DebtPlannerError)

    def test_invalid_scenario_is_invalid_input(self) -> None:
        assert isinstance(InvalidScenarioError("test"), InvalidInputError)

    def test_configuration_error_is_debt_planner_error(self) -> None:
        assert isinstance(ConfigurationError("test"), DebtPlannerError)

    def test_exception_message(self) -> None:
        err = InvalidDebtError("Debt cc: current_balance must not be negative, got -1")
        assert str(err) == "Debt cc: current_balance must not be negative, got -1"
