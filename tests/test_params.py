"""Tests for SimulationInputs, validation and allocation helpers."""

import pytest
from retirement_sim import SimulationInputs
from retirement_sim.params import (
    balance_allocation,
    risk_profile,
    validate_horizon,
    validate_inputs,
)


class TestSimulationInputs:
    def test_horizon_years(self):
        inputs = SimulationInputs(current_age=55, life_expectancy=92)
        assert inputs.horizon_years == 37

    def test_weights_divide_by_100(self):
        inputs = SimulationInputs(stocks_percent=60, bonds_percent=30, cash_percent=10)
        assert inputs.weights == pytest.approx((0.6, 0.3, 0.1))

    def test_weights_not_renormalized(self):
        """Allocation off 100 is divided by 100 as-is, not rescaled."""
        inputs = SimulationInputs(stocks_percent=50, bonds_percent=20, cash_percent=10)
        assert sum(inputs.weights) == pytest.approx(0.8)

    def test_frozen(self):
        inputs = SimulationInputs()
        with pytest.raises(AttributeError):
            inputs.current_age = 40


class TestValidateInputs:
    def test_defaults_valid(self):
        assert validate_inputs(SimulationInputs()) == []

    def test_allocation_must_total_100(self):
        errors = validate_inputs(SimulationInputs(stocks_percent=70, bonds_percent=30, cash_percent=10))
        assert len(errors) == 1
        assert "110%" in errors[0]

    def test_negative_allocation(self):
        errors = validate_inputs(SimulationInputs(stocks_percent=110, bonds_percent=-10, cash_percent=0))
        assert any("bonds allocation -10% is negative" in e for e in errors)

    def test_immediate_retirement_allowed(self):
        inputs = SimulationInputs(current_age=62, retirement_age=62)
        assert validate_inputs(inputs) == []

    def test_retirement_before_current_age(self):
        errors = validate_inputs(SimulationInputs(current_age=60, retirement_age=58))
        assert any("before current age" in e for e in errors)

    def test_life_expectancy_after_retirement(self):
        errors = validate_inputs(SimulationInputs(retirement_age=70, life_expectancy=70))
        assert any("life expectancy" in e for e in errors)

    def test_spending_must_be_positive(self):
        errors = validate_inputs(SimulationInputs(annual_spending=0))
        assert any("annual spending" in e for e in errors)

    def test_negative_savings(self):
        errors = validate_inputs(SimulationInputs(total_savings=-1, monthly_contribution=-5))
        assert len(errors) == 2


class TestValidateHorizon:
    def test_zero_horizon_ok(self):
        validate_horizon(SimulationInputs(current_age=70, retirement_age=70, life_expectancy=70))

    def test_negative_horizon_rejected(self):
        with pytest.raises(ValueError, match="below current age"):
            validate_horizon(SimulationInputs(current_age=70, life_expectancy=65))


class TestBalanceAllocation:
    def test_cash_fills_remainder(self):
        assert balance_allocation(60, 30) == (60, 30, 10)

    def test_overshoot_trims_bonds(self):
        assert balance_allocation(80, 40) == (80, 20, 0)

    def test_all_stocks(self):
        assert balance_allocation(100, 10) == (100, 0, 0)


class TestRiskProfile:
    @pytest.mark.parametrize("stocks, label", [
        (90, "Aggressive"),
        (80, "Aggressive"),
        (60, "Growth"),
        (40, "Moderate"),
        (20, "Conservative"),
        (19, "Very Conservative"),
    ])
    def test_labels(self, stocks, label):
        assert risk_profile(stocks) == label
