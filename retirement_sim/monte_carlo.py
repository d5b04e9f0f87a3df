"""Monte Carlo simulation engine."""

import dataclasses
import math
import sys
from dataclasses import dataclass, field
from datetime import datetime, timezone
from random import Random

from retirement_sim.params import (
    DEFAULT_MARKET,
    LATEST_DELAYED_RETIREMENT_AGE,
    MAX_DELAY_YEARS,
    REFERENCE_AGE,
    MarketAssumptions,
    SimulationInputs,
    validate_horizon,
)
from retirement_sim.simulation import Trajectory, simulate_path


MC_PERCENTILES = (10, 25, 50, 75, 90)


@dataclass
class MonteCarloConfig:
    """Configuration for Monte Carlo simulation.

    n_simulations: overrides SimulationInputs.n_simulations when set.
    seed: None draws fresh OS entropy (non-reproducible runs).
    """

    n_simulations: int | None = None
    seed: int | None = None
    market: MarketAssumptions = DEFAULT_MARKET


@dataclass
class PercentileSnapshot:
    age: int
    p10: float = 0.0
    p25: float = 0.0
    p50: float = 0.0
    p75: float = 0.0
    p90: float = 0.0


@dataclass
class ComparisonResult:
    success_rate: float = 0.0
    median_at_85: float = 0.0


@dataclass
class ComparisonBlock:
    """Retire as planned vs. retire ``delay_years`` later."""

    current: ComparisonResult = field(default_factory=ComparisonResult)
    delayed: ComparisonResult = field(default_factory=ComparisonResult)
    delay_years: int = 0


@dataclass
class SimulationResult:
    percentiles: list[PercentileSnapshot] = field(default_factory=list)
    success_rate: float = 0.0  # 0-100
    median_ending_wealth: float = 0.0
    worst_case_at_85: float = 0.0
    median_at_85: float = 0.0
    best_case_at_85: float = 0.0
    comparison: ComparisonBlock = field(default_factory=ComparisonBlock)
    simulation_count: int = 0
    timestamp: str = ""


def percentile_from_sorted(sorted_vals: list[float], fraction: float) -> float:
    """Nearest-rank value at floor(n * fraction); 0 when that index is out of range."""
    idx = math.floor(len(sorted_vals) * fraction)
    if 0 <= idx < len(sorted_vals):
        return sorted_vals[idx]
    return 0.0


def aggregate_percentiles(
    trajectories: list[Trajectory],
    start_age: int,
    horizon_years: int,
) -> list[PercentileSnapshot]:
    """Reduce all trajectories to P10/P25/P50/P75/P90 per simulated year."""
    snapshots = []
    for y in range(horizon_years + 1):
        vals = sorted(t.balances[y] for t in trajectories)
        p10, p25, p50, p75, p90 = (percentile_from_sorted(vals, p / 100) for p in MC_PERCENTILES)
        snapshots.append(PercentileSnapshot(start_age + y, p10, p25, p50, p75, p90))
    return snapshots


def success_rate(success_count: int, n_simulations: int) -> float:
    """Percentage of paths that never ran out of money (0 when nothing was simulated)."""
    if n_simulations <= 0:
        return 0.0
    return success_count / n_simulations * 100


def delay_years_for(retirement_age: int) -> int:
    """Years the comparison batch delays retirement (capped so it never passes 70).

    Plans already retiring after 70 get 0, never a negative delay.
    """
    return max(0, min(MAX_DELAY_YEARS, LATEST_DELAYED_RETIREMENT_AGE - retirement_age))


def reference_index(current_age: int, horizon_years: int) -> int:
    """Trajectory index of the reference age (85), or the final year if 85 is off the horizon."""
    idx = REFERENCE_AGE - current_age
    if 0 <= idx <= horizon_years:
        return idx
    return horizon_years


def run_batch(
    inputs: SimulationInputs,
    n_simulations: int,
    horizon_years: int,
    rng: Random,
    market: MarketAssumptions = DEFAULT_MARKET,
    label: str = "",
    quiet: bool = True,
) -> tuple[list[Trajectory], int]:
    """Simulate n independent paths. Returns (trajectories, success_count)."""
    trajectories: list[Trajectory] = []
    success_count = 0
    for i in range(n_simulations):
        trajectory = simulate_path(inputs, horizon_years, rng, market)
        trajectories.append(trajectory)
        if trajectory.success:
            success_count += 1
        if not quiet and (i + 1) % 100 == 0:
            print(f"\r  {label}: {i + 1}/{n_simulations}", end="", file=sys.stderr)
    if not quiet and n_simulations >= 100:
        print(file=sys.stderr)
    return trajectories, success_count


def run_monte_carlo(
    inputs: SimulationInputs,
    config: MonteCarloConfig | None = None,
    quiet: bool = True,
) -> SimulationResult:
    """Run the primary batch plus a delayed-retirement batch and summarize both.

    Raises ValueError if life expectancy is below the current age.
    """
    validate_horizon(inputs)
    if config is None:
        config = MonteCarloConfig()
    n = config.n_simulations if config.n_simulations is not None else inputs.n_simulations
    years = inputs.horizon_years
    rng = Random(config.seed)

    trajectories, success_count = run_batch(
        inputs, n, years, rng, config.market, label="planned", quiet=quiet,
    )
    percentiles = aggregate_percentiles(trajectories, inputs.current_age, years)
    idx_85 = reference_index(inputs.current_age, years)
    at_85 = percentiles[idx_85]

    # Comparison batch: same plan, retire later
    delay_years = delay_years_for(inputs.retirement_age)
    delayed_inputs = dataclasses.replace(inputs, retirement_age=inputs.retirement_age + delay_years)
    delayed_trajectories, delayed_success_count = run_batch(
        delayed_inputs, n, years, rng, config.market, label="delayed", quiet=quiet,
    )
    delayed_vals = sorted(t.balances[idx_85] for t in delayed_trajectories)
    delayed_median_at_85 = percentile_from_sorted(delayed_vals, 0.5)

    rate = success_rate(success_count, n)
    return SimulationResult(
        percentiles=percentiles,
        success_rate=rate,
        median_ending_wealth=percentiles[-1].p50,
        worst_case_at_85=at_85.p10,
        median_at_85=at_85.p50,
        best_case_at_85=at_85.p90,
        comparison=ComparisonBlock(
            current=ComparisonResult(success_rate=rate, median_at_85=at_85.p50),
            delayed=ComparisonResult(
                success_rate=success_rate(delayed_success_count, n),
                median_at_85=delayed_median_at_85,
            ),
            delay_years=delay_years,
        ),
        simulation_count=n,
        timestamp=datetime.now(timezone.utc).isoformat(),
    )


def run_simple_monte_carlo(
    current_age: int,
    retirement_age: int,
    life_expectancy: int,
    total_savings: float,
    monthly_contribution: float,
    annual_spending: float,
    social_security_age: int,
    social_security_monthly: float,
    inflation_rate: float,
    n_simulations: int = 1000,
    spending_smile: bool = True,
    config: MonteCarloConfig | None = None,
) -> SimulationResult:
    """Run with a balanced 60/30/10 allocation and no other income."""
    inputs = SimulationInputs(
        current_age=current_age,
        retirement_age=retirement_age,
        life_expectancy=life_expectancy,
        total_savings=total_savings,
        monthly_contribution=monthly_contribution,
        stocks_percent=60,
        bonds_percent=30,
        cash_percent=10,
        annual_spending=annual_spending,
        spending_smile=spending_smile,
        social_security_age=social_security_age,
        social_security_monthly=social_security_monthly,
        other_monthly_income=0.0,
        inflation_rate=inflation_rate,
        n_simulations=n_simulations,
    )
    return run_monte_carlo(inputs, config)
