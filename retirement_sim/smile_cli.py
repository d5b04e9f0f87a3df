"""CLI entry point for the spending smile analysis."""

import sys
from pathlib import Path

from retirement_sim.config import parse_args
from retirement_sim.formatting import format_currency
from retirement_sim.spending import SpendingSmileInputs, SpendingSmileResult, calculate_spending_smile


def _add_args(parser):
    parser.add_argument(
        "--chart", type=Path, default=None,
        help="write a spending smile PNG into this directory",
    )
    parser.add_argument(
        "--name", type=str, default="",
        help="chart filename suffix",
    )


def _print_result(result: SpendingSmileResult):
    fc = format_currency
    print("[Phases]")
    for phase in result.phases:
        if phase.start_age > phase.end_age:
            continue
        print(f"  {phase.name:<8} {phase.start_age}-{phase.end_age}  ×{phase.average_multiplier:.2f}  {phase.description}")

    print()
    print(f"{'Age':<6}{'Phase':<10}{'Mult':>7}{'Real':>14}{'Nominal':>14}")
    print("─" * 51)
    for row in result.yearly:
        print(
            f"{row.age:<6}{row.phase:<10}{row.multiplier:>7.3f}"
            f"{fc(row.real_spending):>14}{fc(row.nominal_spending):>14}"
        )
    print("─" * 51)

    s = result.summary
    c = result.comparison
    print(f"Total (real / nominal):   {fc(s.total_real)} / {fc(s.total_nominal)}")
    print(f"Average per year (real):  {fc(s.average_annual_real)}")
    print(f"Peak / lowest real spend: age {s.peak_spending_age} / age {s.lowest_spending_age}")
    print(f"Go-Go / Slow-Go / No-Go:  {fc(s.go_go_total)} / {fc(s.slow_go_total)} / {fc(s.no_go_total)}")
    print(f"vs. flat budget:          {fc(c.flat_total)} flat, {fc(c.difference)} less ({c.percent_difference:.1f}%)")


def main(argv: list[str] | None = None):
    r, args = parse_args("Retirement spending smile analysis", _add_args, argv)
    inputs = SpendingSmileInputs(
        retirement_age=int(r["retirement_age"]),
        life_expectancy=int(r["life_expectancy"]),
        initial_annual_spending=float(r["spending"]),
        inflation_rate=float(r["inflation"]),
    )
    result = calculate_spending_smile(inputs)
    if not result.yearly:
        print("Life expectancy precedes retirement age; nothing to project.", file=sys.stderr)
        raise SystemExit(1)
    _print_result(result)

    if args.chart is not None:
        from retirement_sim.charts import plot_spending_smile

        path = plot_spending_smile(result, args.chart, name=args.name)
        print(f"  → {path}", file=sys.stderr)


if __name__ == "__main__":
    main()
