"""Financial profile: derived figures and mapping onto simulation inputs."""

from dataclasses import dataclass, field

from retirement_sim.formatting import round_half_up
from retirement_sim.params import SimulationInputs

# Readiness heuristic constants (not a Monte Carlo result)
ASSUMED_USER_AGE = 55
TARGET_EXPENSE_MULTIPLE = 25  # 25x annual expenses


@dataclass
class IncomeSection:
    annual_salary: float = 0.0
    other_monthly_income: float = 0.0
    expected_retirement_age: int = 62


@dataclass
class ExpenseSection:
    monthly_expenses: float = 0.0
    retirement_monthly_expenses: float = 0.0


@dataclass
class AssetSection:
    traditional_401k: float = 0.0
    traditional_ira: float = 0.0
    roth_accounts: float = 0.0
    brokerage_accounts: float = 0.0
    cash_savings: float = 0.0
    monthly_contributions: float = 0.0

    @property
    def total(self) -> float:
        return (
            self.traditional_401k
            + self.traditional_ira
            + self.roth_accounts
            + self.brokerage_accounts
            + self.cash_savings
        )


@dataclass
class DebtSection:
    mortgage_balance: float = 0.0
    mortgage_monthly_payment: float = 0.0
    other_debt_balance: float = 0.0
    other_debt_monthly_payment: float = 0.0


@dataclass
class SocialSecuritySection:
    monthly_benefit: float = 0.0
    claiming_age: int = 67
    spouse_monthly_benefit: float = 0.0
    spouse_claiming_age: int = 67


@dataclass
class RealEstateSection:
    home_value: float = 0.0
    rental_income: float = 0.0  # monthly


@dataclass
class FinancialProfile:
    income: IncomeSection = field(default_factory=IncomeSection)
    expenses: ExpenseSection = field(default_factory=ExpenseSection)
    assets: AssetSection = field(default_factory=AssetSection)
    debts: DebtSection = field(default_factory=DebtSection)
    social_security: SocialSecuritySection = field(default_factory=SocialSecuritySection)
    real_estate: RealEstateSection = field(default_factory=RealEstateSection)


@dataclass
class ProfileSummary:
    net_worth: float
    total_savings: float
    monthly_income: float
    monthly_surplus: float
    total_debt: float
    retirement_ready_score: int


def compute_profile(profile: FinancialProfile) -> ProfileSummary:
    """Derive net worth, cash flow and a 0-100 readiness score."""
    total_savings = profile.assets.total
    total_debt = profile.debts.mortgage_balance + profile.debts.other_debt_balance
    net_worth = total_savings + profile.real_estate.home_value - total_debt
    monthly_income = profile.income.annual_salary / 12 + profile.income.other_monthly_income
    monthly_surplus = monthly_income - profile.expenses.monthly_expenses

    score = 0
    if profile.income.annual_salary > 0 and profile.expenses.monthly_expenses > 0:
        savings_rate = profile.assets.monthly_contributions / monthly_income
        years_to_retirement = max(0, profile.income.expected_retirement_age - ASSUMED_USER_AGE)
        target_savings = profile.expenses.monthly_expenses * 12 * TARGET_EXPENSE_MULTIPLE
        progress = total_savings / target_savings

        savings_rate_score = min(savings_rate * 100 * 2, 30)  # 15%+ saved → full 30
        progress_score = min(progress * 50, 50)
        time_score = 20 if years_to_retirement > 5 else years_to_retirement * 4
        score = round_half_up(savings_rate_score + progress_score + time_score)
        score = max(0, min(100, score))

    return ProfileSummary(
        net_worth=net_worth,
        total_savings=total_savings,
        monthly_income=monthly_income,
        monthly_surplus=monthly_surplus,
        total_debt=total_debt,
        retirement_ready_score=score,
    )


def completion_percent(profile: FinancialProfile) -> int:
    """Share of the four core sections (income, expenses, assets, Social Security) filled in."""
    sections = [
        profile.income.annual_salary > 0,
        profile.expenses.monthly_expenses > 0,
        profile.assets.total > 0,
        profile.social_security.monthly_benefit > 0,
    ]
    return round_half_up(sum(sections) / len(sections) * 100)


def to_simulation_inputs(
    profile: FinancialProfile,
    current_age: int,
    life_expectancy: int = 92,
    **overrides,
) -> SimulationInputs:
    """Build SimulationInputs from a profile.

    Retirement spending falls back to current expenses when no retirement
    budget is set. Rental income counts as other income. Keyword overrides
    (allocation, inflation_rate, ...) are passed straight through.
    """
    monthly_spending = (
        profile.expenses.retirement_monthly_expenses or profile.expenses.monthly_expenses
    )
    values = dict(
        current_age=current_age,
        retirement_age=profile.income.expected_retirement_age,
        life_expectancy=life_expectancy,
        total_savings=profile.assets.total,
        monthly_contribution=profile.assets.monthly_contributions,
        annual_spending=monthly_spending * 12,
        social_security_age=profile.social_security.claiming_age,
        social_security_monthly=profile.social_security.monthly_benefit,
        other_monthly_income=profile.income.other_monthly_income + profile.real_estate.rental_income,
    )
    values.update(overrides)
    return SimulationInputs(**values)
