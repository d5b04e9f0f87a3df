"""Chart generation for retirement simulation results."""

from pathlib import Path

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import matplotlib.ticker as ticker

from retirement_sim.formatting import format_currency
from retirement_sim.monte_carlo import SimulationResult
from retirement_sim.spending import SpendingSmileResult

FAN_COLOR = "#4A7C59"      # sage
MEDIAN_COLOR = "#2F5233"
RETIRE_COLOR = "#D4A853"   # gold
DELAY_COLOR = "#C45B4A"    # terracotta


def _format_dollar_axis(ax: plt.Axes):
    ax.yaxis.set_major_formatter(
        ticker.FuncFormatter(lambda x, _: format_currency(x, compact=True) if x != 0 else "$0")
    )


def _save(fig: plt.Figure, output_path: Path, stem: str, name: str) -> Path:
    output_path.mkdir(parents=True, exist_ok=True)
    suffix = f"-{name}" if name else ""
    filepath = output_path / f"{stem}{suffix}.png"
    fig.tight_layout()
    fig.savefig(filepath, dpi=150, bbox_inches="tight")
    plt.close(fig)
    return filepath


def plot_mc_fan(
    result: SimulationResult,
    output_path: Path,
    name: str = "",
    retirement_age: int | None = None,
) -> Path:
    """Generate a fan chart (P10-P90 and P25-P75 bands) for a Monte Carlo result.

    Args:
        result: SimulationResult with yearly percentiles.
        output_path: directory to save the PNG.
        name: optional suffix for the output filename (e.g. "62" → "mc_fan-62.png").
        retirement_age: draws the planned and delayed retirement markers when given.

    Returns:
        Path to the generated PNG file.
    """
    if not result.percentiles:
        raise ValueError("SimulationResult has no percentiles")

    ages = [p.age for p in result.percentiles]
    p10 = [p.p10 for p in result.percentiles]
    p25 = [p.p25 for p in result.percentiles]
    p50 = [p.p50 for p in result.percentiles]
    p75 = [p.p75 for p in result.percentiles]
    p90 = [p.p90 for p in result.percentiles]

    fig, ax = plt.subplots(figsize=(12, 7))
    ax.fill_between(ages, p10, p90, alpha=0.15, color=FAN_COLOR, label="P10–P90")
    ax.fill_between(ages, p25, p75, alpha=0.3, color=FAN_COLOR, label="P25–P75")
    ax.plot(ages, p50, color=MEDIAN_COLOR, linewidth=2, label="Median")

    if retirement_age is not None:
        ax.axvline(retirement_age, color=RETIRE_COLOR, linewidth=1.5, linestyle="--", label=f"Retire at {retirement_age}")
        delay = result.comparison.delay_years
        if delay > 0:
            ax.axvline(retirement_age + delay, color=DELAY_COLOR, linewidth=1.2, linestyle=":",
                       label=f"Retire at {retirement_age + delay}")

    ax.set_title(
        f"Portfolio balance (N={result.simulation_count:,}, success {result.success_rate:.0f}%)"
    )
    ax.set_xlabel("Age")
    ax.set_ylabel("Portfolio balance")
    ax.legend(loc="upper left", fontsize=9)
    ax.grid(True, alpha=0.3)
    _format_dollar_axis(ax)

    return _save(fig, output_path, "mc_fan", name)


def plot_spending_smile(
    smile: SpendingSmileResult,
    output_path: Path,
    name: str = "",
) -> Path:
    """Generate the spending-smile chart (real spending by age, shaded by phase)."""
    if not smile.yearly:
        raise ValueError("SpendingSmileResult has no yearly rows")

    ages = [row.age for row in smile.yearly]
    real = [row.real_spending for row in smile.yearly]
    nominal = [row.nominal_spending for row in smile.yearly]

    fig, ax = plt.subplots(figsize=(12, 6))
    for phase in smile.phases:
        if phase.start_age > phase.end_age:
            continue
        ax.axvspan(phase.start_age - 0.5, phase.end_age + 0.5, color=phase.color, alpha=0.12, label=phase.name)
    ax.plot(ages, real, color=MEDIAN_COLOR, linewidth=2.5, label="Real spending")
    ax.plot(ages, nominal, color="#888888", linewidth=1.2, linestyle="--", label="Nominal spending")

    ax.set_title("Retirement spending smile")
    ax.set_xlabel("Age")
    ax.set_ylabel("Annual spending")
    ax.legend(loc="upper left", fontsize=9)
    ax.grid(True, alpha=0.3)
    _format_dollar_axis(ax)

    return _save(fig, output_path, "spending_smile", name)
