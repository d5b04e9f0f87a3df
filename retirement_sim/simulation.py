"""Single-path portfolio simulation."""

from dataclasses import dataclass, field
from enum import Enum
from random import Random
from typing import Callable

from retirement_sim.params import (
    DEFAULT_MARKET,
    SOCIAL_SECURITY_COLA,
    MarketAssumptions,
    SimulationInputs,
)
from retirement_sim.returns import sample_correlated_returns
from retirement_sim.spending import spending_smile_multiplier

ReturnSampler = Callable[[Random, MarketAssumptions], tuple[float, float, float]]


class PathState(Enum):
    ACCUMULATING = "accumulating"
    EXHAUSTED = "exhausted"  # pinned at zero for the rest of the horizon


@dataclass
class Trajectory:
    """Yearly balances (index 0 = starting balance) and whether the money ran out."""

    balances: list[float] = field(default_factory=list)
    exhausted: bool = False
    exhausted_age: int | None = None

    @property
    def success(self) -> bool:
        return not self.exhausted


def annual_spending(inputs: SimulationInputs, age: int, year: int) -> float:
    """Inflation-adjusted spending for simulation year ``year`` (1-based), smile applied."""
    spending = inputs.annual_spending * (1 + inputs.inflation_rate) ** year
    if inputs.spending_smile:
        spending *= spending_smile_multiplier(age - inputs.retirement_age)
    return spending


def retirement_income(inputs: SimulationInputs, age: int, year: int) -> float:
    """Other income (inflation-indexed) plus Social Security once claimed (1.5% COLA)."""
    income = inputs.other_monthly_income * 12 * (1 + inputs.inflation_rate) ** year
    if age >= inputs.social_security_age:
        ss_years = age - inputs.social_security_age
        income += inputs.social_security_monthly * 12 * (1 + SOCIAL_SECURITY_COLA) ** ss_years
    return income


def net_withdrawal(inputs: SimulationInputs, age: int, year: int) -> float:
    """Spending not covered by income; negative when income exceeds spending."""
    return annual_spending(inputs, age, year) - retirement_income(inputs, age, year)


def simulate_path(
    inputs: SimulationInputs,
    horizon_years: int,
    rng: Random,
    market: MarketAssumptions = DEFAULT_MARKET,
    sample_returns: ReturnSampler = sample_correlated_returns,
) -> Trajectory:
    """Evolve one portfolio from current age to life expectancy.

    Contributions land before growth while working (age <= retirement_age);
    withdrawals come after growth once retired. A retired path whose balance
    reaches zero becomes EXHAUSTED and records zero for every remaining year.
    Returns are drawn every year regardless of state so each path consumes
    the same number of random draws.
    """
    stocks_w, bonds_w, cash_w = inputs.weights
    balance = float(inputs.total_savings)
    trajectory = Trajectory(balances=[balance])
    state = PathState.ACCUMULATING

    for year in range(1, horizon_years + 1):
        age = inputs.current_age + year
        stock_r, bond_r, cash_r = sample_returns(rng, market)

        if state is PathState.EXHAUSTED:
            trajectory.balances.append(0.0)
            continue

        portfolio_return = stocks_w * stock_r + bonds_w * bond_r + cash_w * cash_r
        retired = age > inputs.retirement_age

        if not retired:
            balance += inputs.monthly_contribution * 12

        balance *= 1 + portfolio_return

        if retired:
            balance -= net_withdrawal(inputs, age, year)
            if balance <= 0:
                state = PathState.EXHAUSTED
                trajectory.exhausted = True
                trajectory.exhausted_age = age
                balance = 0.0

        trajectory.balances.append(max(balance, 0.0))

    return trajectory
