"""CLI entry point for the retirement Monte Carlo simulation."""

import sys
from pathlib import Path

from retirement_sim.config import build_inputs, parse_args
from retirement_sim.formatting import format_currency
from retirement_sim.monte_carlo import MonteCarloConfig, SimulationResult, run_monte_carlo
from retirement_sim.params import SimulationInputs, risk_profile, validate_inputs
from retirement_sim.weeks import weeks_remaining


def _add_args(parser):
    parser.add_argument(
        "--simulations", type=int, default=None,
        help="number of simulated paths per batch (default: 1000)",
    )
    parser.add_argument(
        "--seed", type=int, default=None,
        help="random seed (default: fresh entropy each run)",
    )
    parser.add_argument(
        "--chart", type=Path, default=None,
        help="write a fan chart PNG into this directory",
    )
    parser.add_argument(
        "--name", type=str, default="",
        help="chart filename suffix (e.g. 62 → mc_fan-62.png)",
    )


def _print_header(inputs: SimulationInputs, seed: int | None):
    fc = format_currency
    print("=" * 80)
    print(
        f"Retirement Monte Carlo (age {inputs.current_age}-{inputs.life_expectancy}, "
        f"{inputs.horizon_years} years, retire at {inputs.retirement_age})"
    )
    print(f"  N={inputs.n_simulations:,} / seed={seed if seed is not None else 'random'}")
    print(
        f"  Savings: {fc(inputs.total_savings)} / contributing {fc(inputs.monthly_contribution)}/month"
    )
    print(
        f"  Allocation: {inputs.stocks_percent}/{inputs.bonds_percent}/{inputs.cash_percent} "
        f"stocks/bonds/cash ({risk_profile(inputs.stocks_percent)})"
    )
    smile = "spending smile" if inputs.spending_smile else "flat real spending"
    print(f"  Spending: {fc(inputs.annual_spending)}/year ({smile}, inflation {inputs.inflation_rate:.1%})")
    print(
        f"  Social Security: {fc(inputs.social_security_monthly)}/month from {inputs.social_security_age}"
        f" / other income {fc(inputs.other_monthly_income)}/month"
    )
    print(f"  Healthy weeks remaining (to 85): {weeks_remaining(inputs.current_age):,}")
    print("=" * 80)


def _print_percentiles(result: SimulationResult):
    print()
    print("[Portfolio balance by age]")
    print("─" * 80)
    print(f"{'Age':<6}{'P10':>14}{'P25':>14}{'P50':>14}{'P75':>14}{'P90':>14}")
    print("─" * 80)
    last = len(result.percentiles) - 1
    for i, p in enumerate(result.percentiles):
        if i % 5 == 0 or i == last:
            print(
                f"{p.age:<6}"
                f"{format_currency(p.p10):>14}"
                f"{format_currency(p.p25):>14}"
                f"{format_currency(p.p50):>14}"
                f"{format_currency(p.p75):>14}"
                f"{format_currency(p.p90):>14}"
            )
    print("─" * 80)


def _print_summary(result: SimulationResult, inputs: SimulationInputs):
    fc = format_currency
    comp = result.comparison
    print()
    print(f"Success rate:          {result.success_rate:>6.1f}%")
    print(f"Median ending wealth:  {fc(result.median_ending_wealth):>14}")
    print(f"At 85 (worst/median/best): {fc(result.worst_case_at_85)} / {fc(result.median_at_85)} / {fc(result.best_case_at_85)}")
    print()
    print("[Cost of waiting]")
    print("─" * 60)
    print(f"{'Retire at':<16}{'Success':>12}{'Median at 85':>18}")
    print("─" * 60)
    print(f"{inputs.retirement_age:<16}{comp.current.success_rate:>11.1f}%{fc(comp.current.median_at_85):>18}")
    delayed_age = inputs.retirement_age + comp.delay_years
    print(f"{delayed_age:<16}{comp.delayed.success_rate:>11.1f}%{fc(comp.delayed.median_at_85):>18}")
    print("─" * 60)


def main(argv: list[str] | None = None):
    r, args = parse_args("Retirement Monte Carlo simulation", _add_args, argv)
    try:
        inputs = build_inputs(r)
    except (TypeError, ValueError) as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        raise SystemExit(1)

    errors = validate_inputs(inputs)
    if errors:
        for e in errors:
            print(f"  {e}", file=sys.stderr)
        raise SystemExit(1)

    _print_header(inputs, args.seed)
    result = run_monte_carlo(inputs, MonteCarloConfig(seed=args.seed), quiet=False)
    _print_percentiles(result)
    _print_summary(result, inputs)

    if args.chart is not None:
        from retirement_sim.charts import plot_mc_fan

        path = plot_mc_fan(result, args.chart, name=args.name, retirement_age=inputs.retirement_age)
        print(f"  → {path}", file=sys.stderr)


if __name__ == "__main__":
    main()
