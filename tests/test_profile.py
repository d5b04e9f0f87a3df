"""Tests for the financial profile summary and its mapping onto simulation inputs."""

import pytest

from retirement_sim.profile import (
    AssetSection,
    DebtSection,
    ExpenseSection,
    FinancialProfile,
    IncomeSection,
    RealEstateSection,
    SocialSecuritySection,
    completion_percent,
    compute_profile,
    to_simulation_inputs,
)


def _profile(**kwargs):
    profile = FinancialProfile(
        income=IncomeSection(annual_salary=120_000, expected_retirement_age=62),
        expenses=ExpenseSection(monthly_expenses=6_000),
        assets=AssetSection(
            traditional_401k=300_000, traditional_ira=100_000,
            cash_savings=95_000, monthly_contributions=1_500,
        ),
        debts=DebtSection(mortgage_balance=100_000),
        real_estate=RealEstateSection(home_value=400_000),
    )
    for key, value in kwargs.items():
        setattr(profile, key, value)
    return profile


class TestComputeProfile:
    def setup_method(self):
        self.summary = compute_profile(_profile())

    def test_balance_sheet(self):
        assert self.summary.total_savings == 495_000
        assert self.summary.total_debt == 100_000
        assert self.summary.net_worth == 795_000

    def test_cash_flow(self):
        assert self.summary.monthly_income == pytest.approx(10_000)
        assert self.summary.monthly_surplus == pytest.approx(4_000)

    def test_readiness_score(self):
        # 30 (savings rate) + 13.75 (progress) + 20 (time)
        assert self.summary.retirement_ready_score == 64

    def test_no_salary_scores_zero(self):
        summary = compute_profile(_profile(income=IncomeSection(annual_salary=0)))
        assert summary.retirement_ready_score == 0

    def test_score_capped(self):
        rich = _profile(assets=AssetSection(traditional_401k=5_000_000, monthly_contributions=5_000))
        assert compute_profile(rich).retirement_ready_score == 100


class TestCompletion:
    def test_three_of_four(self):
        assert completion_percent(_profile()) == 75

    def test_complete(self):
        profile = _profile(social_security=SocialSecuritySection(monthly_benefit=2_400))
        assert completion_percent(profile) == 100

    def test_empty(self):
        assert completion_percent(FinancialProfile()) == 0


class TestToSimulationInputs:
    def test_mapping(self):
        profile = _profile(
            social_security=SocialSecuritySection(monthly_benefit=2_400, claiming_age=68),
            real_estate=RealEstateSection(home_value=400_000, rental_income=800),
        )
        inputs = to_simulation_inputs(profile, current_age=50)
        assert inputs.current_age == 50
        assert inputs.retirement_age == 62
        assert inputs.life_expectancy == 92
        assert inputs.total_savings == 495_000
        assert inputs.monthly_contribution == 1_500
        assert inputs.annual_spending == 72_000
        assert inputs.social_security_age == 68
        assert inputs.social_security_monthly == 2_400
        assert inputs.other_monthly_income == 800

    def test_retirement_budget_preferred(self):
        profile = _profile(expenses=ExpenseSection(monthly_expenses=6_000, retirement_monthly_expenses=5_000))
        assert to_simulation_inputs(profile, 50).annual_spending == 60_000

    def test_overrides(self):
        inputs = to_simulation_inputs(_profile(), 50, stocks_percent=80, bonds_percent=20, cash_percent=0)
        assert inputs.weights == pytest.approx((0.8, 0.2, 0.0))
