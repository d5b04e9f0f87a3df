"""Retirement spending smile: Go-Go / Slow-Go / No-Go phases.

Two separate models live here:

* ``spending_smile_multiplier`` is the step function the Monte Carlo engine
  applies year by year (boundaries inclusive at 10 and 20 years retired).
* ``smooth_spending_multiplier`` is a smoothed curve used only by the
  standalone spending-smile analysis (``calculate_spending_smile``).
"""

from dataclasses import dataclass, field

GO_GO_YEARS = 10
SLOW_GO_YEARS = 20

GO_GO_MULTIPLIER = 1.05    # travel, hobbies
SLOW_GO_MULTIPLIER = 0.80  # settling down
NO_GO_MULTIPLIER = 1.05    # healthcare costs rise

# Smoothed curve shape
_GO_GO_FLOOR = 0.95
_NO_GO_RAMP_YEARS = 15


def spending_smile_multiplier(years_retired: int) -> float:
    """Step multiplier used by the Monte Carlo engine."""
    if years_retired <= GO_GO_YEARS:
        return GO_GO_MULTIPLIER
    if years_retired <= SLOW_GO_YEARS:
        return SLOW_GO_MULTIPLIER
    return NO_GO_MULTIPLIER


def spending_phase(years_retired: int) -> str:
    if years_retired <= GO_GO_YEARS:
        return "go-go"
    if years_retired <= SLOW_GO_YEARS:
        return "slow-go"
    return "no-go"


def smooth_spending_multiplier(age: int, retirement_age: int) -> float:
    """Smoothed smile curve: eased decline, parabolic dip, eased healthcare rise."""
    years_retired = age - retirement_age
    if years_retired < 0:
        return 1.0
    if years_retired <= GO_GO_YEARS:
        t = years_retired / GO_GO_YEARS
        return GO_GO_MULTIPLIER - (GO_GO_MULTIPLIER - _GO_GO_FLOOR) * t ** 2
    if years_retired <= SLOW_GO_YEARS:
        t = (years_retired - GO_GO_YEARS) / (SLOW_GO_YEARS - GO_GO_YEARS)
        parabola = 4 * t * (1 - t)  # peaks at mid-phase
        midpoint = (GO_GO_MULTIPLIER + SLOW_GO_MULTIPLIER) / 2
        return midpoint - parabola * (midpoint - SLOW_GO_MULTIPLIER)
    t = min((years_retired - SLOW_GO_YEARS) / _NO_GO_RAMP_YEARS, 1)
    ease_in = 1 - (1 - t) ** 2
    return SLOW_GO_MULTIPLIER + (NO_GO_MULTIPLIER - SLOW_GO_MULTIPLIER) * ease_in


def smile_phase(age: int, retirement_age: int) -> str:
    """Phase label for the analysis tool (strict boundaries at 10 and 20 years)."""
    years_retired = age - retirement_age
    if years_retired < GO_GO_YEARS:
        return "Go-Go"
    if years_retired < SLOW_GO_YEARS:
        return "Slow-Go"
    return "No-Go"


@dataclass
class SpendingPhase:
    name: str
    start_age: int
    end_age: int
    description: str
    average_multiplier: float
    color: str


def spending_phases(retirement_age: int, life_expectancy: int) -> list[SpendingPhase]:
    go_go_end = min(retirement_age + GO_GO_YEARS - 1, life_expectancy)
    slow_go_end = min(retirement_age + SLOW_GO_YEARS - 1, life_expectancy)
    return [
        SpendingPhase(
            "Go-Go", retirement_age, go_go_end,
            "Active years of travel, hobbies and new experiences.",
            GO_GO_MULTIPLIER, "#4A7C59",
        ),
        SpendingPhase(
            "Slow-Go", go_go_end + 1, slow_go_end,
            "Less travel and more time at home; spending eases off.",
            SLOW_GO_MULTIPLIER, "#D4A853",
        ),
        SpendingPhase(
            "No-Go", slow_go_end + 1, life_expectancy,
            "Medical and long-term care costs push spending back up.",
            NO_GO_MULTIPLIER, "#C45B4A",
        ),
    ]


@dataclass
class SpendingSmileInputs:
    retirement_age: int = 65
    life_expectancy: int = 95
    initial_annual_spending: float = 60_000
    inflation_rate: float = 0.03


@dataclass
class YearlySpending:
    age: int
    year: int
    phase: str
    nominal_spending: float
    real_spending: float
    multiplier: float
    cumulative_nominal: float
    cumulative_real: float


@dataclass
class SpendingSummary:
    total_nominal: float = 0.0
    total_real: float = 0.0
    average_annual_nominal: float = 0.0
    average_annual_real: float = 0.0
    peak_spending_age: int = 0
    lowest_spending_age: int = 0
    go_go_total: float = 0.0
    slow_go_total: float = 0.0
    no_go_total: float = 0.0


@dataclass
class FlatComparison:
    """Smile spending vs. a constant real budget over the same years."""

    flat_total: float = 0.0
    smile_total: float = 0.0
    difference: float = 0.0
    percent_difference: float = 0.0


@dataclass
class SpendingSmileResult:
    phases: list[SpendingPhase]
    yearly: list[YearlySpending] = field(default_factory=list)
    summary: SpendingSummary = field(default_factory=SpendingSummary)
    comparison: FlatComparison = field(default_factory=FlatComparison)


def calculate_spending_smile(inputs: SpendingSmileInputs) -> SpendingSmileResult:
    """Project year-by-year retirement spending along the smoothed smile curve."""
    retirement_age = inputs.retirement_age
    base = inputs.initial_annual_spending
    n_years = max(0, inputs.life_expectancy - retirement_age + 1)

    result = SpendingSmileResult(phases=spending_phases(retirement_age, inputs.life_expectancy))
    summary = result.summary
    summary.peak_spending_age = retirement_age
    summary.lowest_spending_age = retirement_age
    phase_totals = {"Go-Go": 0.0, "Slow-Go": 0.0, "No-Go": 0.0}
    peak = 0.0
    lowest = float("inf")
    cumulative_nominal = 0.0
    cumulative_real = 0.0

    for i in range(n_years):
        age = retirement_age + i
        phase = smile_phase(age, retirement_age)
        multiplier = smooth_spending_multiplier(age, retirement_age)
        real = base * multiplier
        nominal = real * (1 + inputs.inflation_rate) ** i

        cumulative_nominal += nominal
        cumulative_real += real
        phase_totals[phase] += real

        if real > peak:
            peak = real
            summary.peak_spending_age = age
        if real < lowest:
            lowest = real
            summary.lowest_spending_age = age

        result.yearly.append(YearlySpending(
            age=age,
            year=i + 1,
            phase=phase,
            nominal_spending=nominal,
            real_spending=real,
            multiplier=multiplier,
            cumulative_nominal=cumulative_nominal,
            cumulative_real=cumulative_real,
        ))

    summary.total_nominal = cumulative_nominal
    summary.total_real = cumulative_real
    if n_years > 0:
        summary.average_annual_nominal = cumulative_nominal / n_years
        summary.average_annual_real = cumulative_real / n_years
    summary.go_go_total = phase_totals["Go-Go"]
    summary.slow_go_total = phase_totals["Slow-Go"]
    summary.no_go_total = phase_totals["No-Go"]

    flat_total = base * n_years
    comparison = result.comparison
    comparison.flat_total = flat_total
    comparison.smile_total = cumulative_real
    comparison.difference = flat_total - cumulative_real
    if flat_total > 0:
        comparison.percent_difference = comparison.difference / flat_total * 100

    return result
