"""CLI entry point for the healthy weeks calculator."""

from retirement_sim.config import parse_args
from retirement_sim.formatting import format_number, round_half_up
from retirement_sim.weeks import HealthyWeeksInputs, calculate_healthy_weeks


def _add_args(parser):
    parser.add_argument(
        "--later-age", type=int, default=None,
        help="alternative (later) retirement age for the cost-of-waiting comparison",
    )
    parser.add_argument(
        "--healthy-end-age", type=int, default=85,
        help="end of healthy, active life (default: 85)",
    )


def main(argv: list[str] | None = None):
    r, args = parse_args("Healthy weeks remaining", _add_args, argv)
    result = calculate_healthy_weeks(HealthyWeeksInputs(
        current_age=int(r["current_age"]),
        healthy_end_age=args.healthy_end_age,
        retire_age=int(r["retirement_age"]),
        retire_age_later=args.later_age,
    ))

    print(f"Healthy weeks remaining: {format_number(result.weeks_remaining)} "
          f"({result.percent_lived}% of {format_number(result.total_adult_weeks)} adult weeks lived)")

    if result.retirement is not None:
        rw = result.retirement
        print(f"  Until retirement: {format_number(round_half_up(rw.weeks_until_retirement))} weeks")
        print(f"  Healthy retirement: {format_number(rw.healthy_retirement_weeks)} weeks "
              f"(Go-Go {rw.go_go_weeks} / Slow-Go {rw.slow_go_weeks} / No-Go {rw.no_go_weeks})")

    if result.comparison is not None:
        c = result.comparison
        print(f"\nWaiting from {c.early_retire_age} to {c.late_retire_age} costs {c.weeks_lost} weeks "
              f"({c.go_go_weeks_lost} Go-Go weeks, about {c.equivalent_months} months, "
              f"{c.equivalent_saturdays} Saturdays)")

    if result.countdown is not None:
        print("\n[Countdown]")
        for m in result.countdown.milestones:
            print(f"  {m.date:%b %d, %Y}  {m.label} ({m.weeks_from_now} weeks)")


if __name__ == "__main__":
    main()
