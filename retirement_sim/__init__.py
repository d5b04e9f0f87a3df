"""Retirement Portfolio Monte Carlo Simulation Package."""

from retirement_sim.params import (
    SimulationInputs,
    AssetClassParams,
    MarketAssumptions,
    DEFAULT_MARKET,
    DEFAULT_N_SIMULATIONS,
    REFERENCE_AGE,
    MAX_DELAY_YEARS,
    LATEST_DELAYED_RETIREMENT_AGE,
    SOCIAL_SECURITY_COLA,
    validate_inputs,
    validate_horizon,
    balance_allocation,
    risk_profile,
)
from retirement_sim.returns import sample_correlated_returns
from retirement_sim.simulation import PathState, Trajectory, simulate_path
from retirement_sim.spending import (
    spending_smile_multiplier,
    spending_phase,
    smooth_spending_multiplier,
    SpendingSmileInputs,
    SpendingSmileResult,
    calculate_spending_smile,
)
from retirement_sim.monte_carlo import (
    MonteCarloConfig,
    PercentileSnapshot,
    ComparisonResult,
    ComparisonBlock,
    SimulationResult,
    aggregate_percentiles,
    run_monte_carlo,
    run_simple_monte_carlo,
)
from retirement_sim.weeks import HealthyWeeksInputs, HealthyWeeksResult, calculate_healthy_weeks
from retirement_sim.profile import FinancialProfile, compute_profile, to_simulation_inputs
from retirement_sim.formatting import format_currency

__all__ = [
    "SimulationInputs",
    "AssetClassParams",
    "MarketAssumptions",
    "DEFAULT_MARKET",
    "DEFAULT_N_SIMULATIONS",
    "REFERENCE_AGE",
    "MAX_DELAY_YEARS",
    "LATEST_DELAYED_RETIREMENT_AGE",
    "SOCIAL_SECURITY_COLA",
    "validate_inputs",
    "validate_horizon",
    "balance_allocation",
    "risk_profile",
    "sample_correlated_returns",
    "PathState",
    "Trajectory",
    "simulate_path",
    "spending_smile_multiplier",
    "spending_phase",
    "smooth_spending_multiplier",
    "SpendingSmileInputs",
    "SpendingSmileResult",
    "calculate_spending_smile",
    "MonteCarloConfig",
    "PercentileSnapshot",
    "ComparisonResult",
    "ComparisonBlock",
    "SimulationResult",
    "aggregate_percentiles",
    "run_monte_carlo",
    "run_simple_monte_carlo",
    "HealthyWeeksInputs",
    "HealthyWeeksResult",
    "calculate_healthy_weeks",
    "FinancialProfile",
    "compute_profile",
    "to_simulation_inputs",
    "format_currency",
]
