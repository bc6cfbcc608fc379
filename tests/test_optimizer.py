"""Tests for the allocation optimizer and targeted comparisons."""

from datetime import date

import pytest

from debt_planner.engine.advanced import simulate_advanced
from debt_planner.engine.optimizer import compare_targeted, marginal_benefits, optimize_allocation
from debt_planner.engine.summary import format_currency
from debt_planner.exceptions import InvalidInputError, InvalidScenarioError
from debt_planner.models import CompoundingFrequency, Debt, InterestOptions, TargetedStrategy


class TestMarginalBenefits:
    """Tests for marginal_benefits."""

    def test_input_order(self, sample_debts: list[Debt], start_date: date) -> None:
        benefits = marginal_benefits(sample_debts, start_date=start_date)
        assert [b.debt_id for b in benefits] == ["cc", "car", "med"]

    def test_interest_free_debt_has_no_benefit(self, medical_bill: Debt, start_date: date) -> None:
        benefits = marginal_benefits([medical_bill], start_date=start_date)
        assert benefits[0].benefit == 0

    def test_matches_two_runs(self, credit_card: Debt, start_date: date) -> None:
        benefit = marginal_benefits([credit_card], probe=500, start_date=start_date)[0].benefit
        base = simulate_advanced(credit_card, 9000, start_date=start_date)
        improved = simulate_advanced(credit_card, 9500, start_date=start_date)
        assert benefit == pytest.approx(base.total_interest - improved.total_interest)
        assert benefit > 0

    @pytest.mark.parametrize("probe", [0, -100])
    def test_non_positive_probe_rejected(self, sample_debts: list[Debt], probe: int) -> None:
        with pytest.raises(InvalidInputError, match="probe"):
            marginal_benefits(sample_debts, probe=probe)


class TestOptimizeAllocation:
    """Tests for optimize_allocation."""

    def test_no_extra_budget(self, sample_debts: list[Debt], start_date: date) -> None:
        result = optimize_allocation(sample_debts, 34000, start_date=start_date)

        assert result.reasoning == "No extra budget available for optimization"
        assert result.total_savings == 0
        assert result.target_debt_id is None
        assert [a.payment for a in result.allocations] == [9000, 20000, 5000]
        assert not any(a.is_optimal for a in result.allocations)

    def test_budget_below_minimums(self, sample_debts: list[Debt], start_date: date) -> None:
        result = optimize_allocation(sample_debts, 1000, start_date=start_date)
        assert [a.payment for a in result.allocations] == [9000, 20000, 5000]

    def test_surplus_goes_to_highest_benefit(self, sample_debts: list[Debt], start_date: date) -> None:
        result = optimize_allocation(sample_debts, 44000, start_date=start_date)

        assert result.target_debt_id == "cc"
        allocations = {a.debt_id: a for a in result.allocations}
        assert allocations["cc"].payment == 19000
        assert allocations["cc"].is_optimal is True
        assert allocations["car"].payment == 20000
        assert allocations["med"].payment == 5000
        assert sum(a.payment for a in result.allocations) == 44000

    def test_savings_and_reasoning(self, sample_debts: list[Debt], start_date: date) -> None:
        result = optimize_allocation(sample_debts, 44000, start_date=start_date)

        assert result.total_savings > 0
        assert format_currency(10000, "USD") in result.reasoning
        assert "Visa" in result.reasoning
        assert len(result.marginal_benefits) == 3

    def test_savings_equal_to_target_improvement(
        self, sample_debts: list[Debt], credit_card: Debt, start_date: date
    ) -> None:
        """Only the target's payment changes, so only its interest moves."""
        result = optimize_allocation(sample_debts, 44000, start_date=start_date)
        base = simulate_advanced(credit_card, 9000, start_date=start_date)
        boosted = simulate_advanced(credit_card, 19000, start_date=start_date)
        assert result.total_savings == pytest.approx(base.total_interest - boosted.total_interest)

    def test_tie_goes_to_first_debt(self, start_date: date) -> None:
        a = Debt(id="a", name="A", current_balance=10000, interest_rate=0, minimum_payment=1000)
        b = Debt(id="b", name="B", current_balance=20000, interest_rate=0, minimum_payment=1000)
        result = optimize_allocation([a, b], 5000, start_date=start_date)

        assert result.target_debt_id == "a"
        assert result.allocations[0].payment == 4000

    def test_respects_compounding_options(self, sample_debts: list[Debt], start_date: date) -> None:
        options = InterestOptions(compounding_frequency=CompoundingFrequency.DAILY)
        result = optimize_allocation(sample_debts, 44000, options, start_date=start_date)
        assert result.target_debt_id == "cc"

    def test_empty_debts(self, start_date: date) -> None:
        result = optimize_allocation([], 10000, start_date=start_date)
        assert result.allocations == []
        assert result.total_savings == 0

    def test_negative_budget(self, sample_debts: list[Debt]) -> None:
        with pytest.raises(InvalidInputError):
            optimize_allocation(sample_debts, -5)


class TestCompareTargeted:
    """Tests for compare_targeted."""

    def test_targeting_saves_interest(self, sample_debts: list[Debt], start_date: date) -> None:
        none, focus = compare_targeted(
            sample_debts,
            [
                TargetedStrategy(name="Minimums", extra_payment=0),
                TargetedStrategy(name="Card focus", extra_payment=10000, target_debt_id="cc"),
            ],
            start_date=start_date,
        )

        assert none.strategy_name == "Minimums"
        assert focus.total_interest < none.total_interest
        assert none.monthly_cost == 34000
        assert focus.monthly_cost == 44000

    def test_per_debt_results(self, sample_debts: list[Debt], start_date: date) -> None:
        (comparison,) = compare_targeted(
            sample_debts,
            [TargetedStrategy(name="Car focus", extra_payment=5000, target_debt_id="car")],
            start_date=start_date,
        )

        assert [r.debt_id for r in comparison.debt_results] == ["cc", "car", "med"]
        assert comparison.total_months == max(r.result.total_months for r in comparison.debt_results)
        assert comparison.total_interest == pytest.approx(
            sum(r.result.total_interest for r in comparison.debt_results)
        )
        car = comparison.debt_results[1].result
        assert car.monthly_breakdown[0].payment == pytest.approx(25000)

    def test_untargeted_extra_is_unused(self, sample_debts: list[Debt], start_date: date) -> None:
        none, untargeted = compare_targeted(
            sample_debts,
            [
                TargetedStrategy(name="Minimums", extra_payment=0),
                TargetedStrategy(name="Nowhere", extra_payment=10000),
            ],
            start_date=start_date,
        )
        assert untargeted.total_interest == pytest.approx(none.total_interest)

    def test_unknown_target(self, sample_debts: list[Debt]) -> None:
        with pytest.raises(InvalidScenarioError, match="unknown debt"):
            compare_targeted(
                sample_debts,
                [TargetedStrategy(name="Ghost", extra_payment=100, target_debt_id="nope")],
            )
