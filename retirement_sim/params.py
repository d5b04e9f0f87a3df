"""Simulation inputs, market assumptions and input validation."""

from dataclasses import dataclass, field

DEFAULT_N_SIMULATIONS = 1000

# Age at which worst/median/best balances are reported
REFERENCE_AGE = 85

# Delayed-retirement comparison: retire up to 5 years later, never after 70
MAX_DELAY_YEARS = 5
LATEST_DELAYED_RETIREMENT_AGE = 70

# Social Security cost-of-living adjustment (independent of general inflation)
SOCIAL_SECURITY_COLA = 0.015


@dataclass(frozen=True)
class AssetClassParams:
    """Annual nominal return distribution for one asset class."""

    mean: float
    std: float


@dataclass(frozen=True)
class MarketAssumptions:
    """Return distributions and pairwise correlations for stocks/bonds/cash."""

    stocks: AssetClassParams = field(default_factory=lambda: AssetClassParams(0.10, 0.18))  # S&P 500 long-term
    bonds: AssetClassParams = field(default_factory=lambda: AssetClassParams(0.05, 0.06))   # intermediate govt
    cash: AssetClassParams = field(default_factory=lambda: AssetClassParams(0.03, 0.01))    # money market
    stocks_bonds_correlation: float = -0.2
    stocks_cash_correlation: float = 0.0
    bonds_cash_correlation: float = 0.3


DEFAULT_MARKET = MarketAssumptions()


@dataclass(frozen=True)
class SimulationInputs:

    current_age: int = 55
    retirement_age: int = 62
    life_expectancy: int = 92

    total_savings: float = 800_000
    monthly_contribution: float = 2_000  # pre-retirement only

    # Asset allocation (percent, expected to sum to 100)
    stocks_percent: int = 60
    bonds_percent: int = 30
    cash_percent: int = 10

    annual_spending: float = 72_000  # today's dollars
    spending_smile: bool = True

    social_security_age: int = 67
    social_security_monthly: float = 2_800
    other_monthly_income: float = 0.0

    inflation_rate: float = 0.03
    n_simulations: int = DEFAULT_N_SIMULATIONS

    @property
    def horizon_years(self) -> int:
        return self.life_expectancy - self.current_age

    @property
    def weights(self) -> tuple[float, float, float]:
        """Allocation as fractions; always divided by 100 even if the sum is off."""
        return self.stocks_percent / 100, self.bonds_percent / 100, self.cash_percent / 100


def validate_horizon(inputs: SimulationInputs) -> None:
    """Reject inputs whose life expectancy precedes the current age."""
    if inputs.horizon_years < 0:
        raise ValueError(
            f"life expectancy {inputs.life_expectancy} is below current age {inputs.current_age}"
        )


def validate_inputs(inputs: SimulationInputs) -> list[str]:
    """Validate inputs the way a caller should before simulating. Returns list of error messages."""
    errors = []

    total = inputs.stocks_percent + inputs.bonds_percent + inputs.cash_percent
    if total != 100:
        errors.append(
            f"allocation sums to {total}% "
            f"(stocks {inputs.stocks_percent} / bonds {inputs.bonds_percent} / cash {inputs.cash_percent}), expected 100%"
        )
    for label, pct in (("stocks", inputs.stocks_percent), ("bonds", inputs.bonds_percent), ("cash", inputs.cash_percent)):
        if pct < 0:
            errors.append(f"{label} allocation {pct}% is negative")

    if inputs.retirement_age < inputs.current_age:
        errors.append(
            f"retirement age {inputs.retirement_age} is before current age {inputs.current_age}"
        )
    if inputs.life_expectancy <= inputs.retirement_age:
        errors.append(
            f"life expectancy {inputs.life_expectancy} must be after retirement age {inputs.retirement_age}"
        )

    if inputs.total_savings < 0:
        errors.append(f"total savings {inputs.total_savings:,.0f} is negative")
    if inputs.monthly_contribution < 0:
        errors.append(f"monthly contribution {inputs.monthly_contribution:,.0f} is negative")
    if inputs.annual_spending <= 0:
        errors.append(f"annual spending {inputs.annual_spending:,.0f} must be positive")
    if inputs.n_simulations < 0:
        errors.append(f"simulation count {inputs.n_simulations} is negative")

    return errors


def balance_allocation(stocks: int, bonds: int) -> tuple[int, int, int]:
    """Derive cash so the allocation totals 100, trimming bonds if stocks+bonds overshoot."""
    remaining = 100 - stocks - bonds
    if remaining < 0:
        return stocks, max(0, 100 - stocks), 0
    return stocks, bonds, remaining


def risk_profile(stocks_percent: int) -> str:
    """Label the allocation by its equity share."""
    if stocks_percent >= 80:
        return "Aggressive"
    if stocks_percent >= 60:
        return "Growth"
    if stocks_percent >= 40:
        return "Moderate"
    if stocks_percent >= 20:
        return "Conservative"
    return "Very Conservative"
