"""Healthy weeks: retirement horizons counted in weeks rather than years.

Age 85 marks the end of healthy, active life (the end of Go-Go + Slow-Go),
not life expectancy.
"""

from dataclasses import dataclass, field
from datetime import date, timedelta

from retirement_sim.formatting import round_half_up

ADULT_START_AGE = 20
DEFAULT_HEALTHY_END_AGE = 85
WEEKS_PER_YEAR = 52
WEEKS_PER_MONTH = 4.33


def weeks_remaining(current_age: float, healthy_end_age: int = DEFAULT_HEALTHY_END_AGE) -> int:
    return max(0, round_half_up((healthy_end_age - current_age) * WEEKS_PER_YEAR))


@dataclass
class RetirementWeeks:
    weeks_until_retirement: float
    healthy_retirement_weeks: int
    go_go_weeks: int
    slow_go_weeks: int
    no_go_weeks: int


def retirement_weeks(
    current_age: float, retire_age: int, healthy_end_age: int = DEFAULT_HEALTHY_END_AGE,
) -> RetirementWeeks:
    """Split the healthy retirement years into Go-Go (first 10), Slow-Go (next 10) and No-Go."""
    retirement_years = max(0, healthy_end_age - retire_age)
    go_go_years = min(10, retirement_years)
    slow_go_years = min(10, max(0, retirement_years - 10))
    no_go_years = max(0, retirement_years - 20)
    return RetirementWeeks(
        weeks_until_retirement=max(0, (retire_age - current_age) * WEEKS_PER_YEAR),
        healthy_retirement_weeks=retirement_years * WEEKS_PER_YEAR,
        go_go_weeks=go_go_years * WEEKS_PER_YEAR,
        slow_go_weeks=slow_go_years * WEEKS_PER_YEAR,
        no_go_weeks=no_go_years * WEEKS_PER_YEAR,
    )


@dataclass
class WaitingCost:
    early_retire_age: int
    late_retire_age: int
    weeks_lost: int
    go_go_weeks_lost: int
    equivalent_saturdays: int
    equivalent_months: int
    equivalent_years: int


def cost_of_waiting(early_age: int, late_age: int) -> WaitingCost:
    """Weeks given up by retiring at ``late_age`` instead of ``early_age``.

    Delay eats the start of retirement, so lost weeks come out of Go-Go first.
    """
    years_diff = late_age - early_age
    weeks_lost = years_diff * WEEKS_PER_YEAR
    return WaitingCost(
        early_retire_age=early_age,
        late_retire_age=late_age,
        weeks_lost=weeks_lost,
        go_go_weeks_lost=min(weeks_lost, 10 * WEEKS_PER_YEAR),
        equivalent_saturdays=weeks_lost,
        equivalent_months=round_half_up(weeks_lost / WEEKS_PER_MONTH),
        equivalent_years=years_diff,
    )


@dataclass
class Milestone:
    label: str
    date: date
    weeks_from_now: int


@dataclass
class Countdown:
    target_date: date
    weeks_until: int
    months_until: int
    years_until: float
    milestones: list[Milestone] = field(default_factory=list)


def countdown(current_age: float, retire_age: int, today: date | None = None) -> Countdown:
    if today is None:
        today = date.today()
    weeks_until = round_half_up((retire_age - current_age) * WEEKS_PER_YEAR)

    def at(weeks: int) -> date:
        return today + timedelta(weeks=weeks)

    milestones = []
    if weeks_until > 100:
        milestones.append(Milestone("100 weeks from now", at(100), 100))
    if weeks_until > 0:
        halfway = round_half_up(weeks_until / 2)
        milestones.append(Milestone("Halfway to retirement", at(halfway), halfway))
    milestones.append(Milestone("Your retirement week", at(weeks_until), weeks_until))
    week_500 = weeks_until + 500
    milestones.append(Milestone("500th week of retirement", at(week_500), week_500))
    go_go_end = weeks_until + 10 * WEEKS_PER_YEAR
    milestones.append(Milestone("Go-Go years end", at(go_go_end), go_go_end))

    return Countdown(
        target_date=at(weeks_until),
        weeks_until=weeks_until,
        months_until=round_half_up(weeks_until / WEEKS_PER_MONTH),
        years_until=round_half_up(weeks_until / WEEKS_PER_YEAR * 10) / 10,
        milestones=milestones,
    )


@dataclass
class HealthyWeeksInputs:
    current_age: float = 55
    healthy_end_age: int = DEFAULT_HEALTHY_END_AGE
    retire_age: int | None = None
    retire_age_later: int | None = None


@dataclass
class HealthyWeeksResult:
    total_adult_weeks: int
    weeks_lived: int
    weeks_remaining: int
    percent_lived: int
    retirement: RetirementWeeks | None = None
    comparison: WaitingCost | None = None
    countdown: Countdown | None = None


def calculate_healthy_weeks(inputs: HealthyWeeksInputs, today: date | None = None) -> HealthyWeeksResult:
    end_age = inputs.healthy_end_age
    total_adult_weeks = (end_age - ADULT_START_AGE) * WEEKS_PER_YEAR
    weeks_lived = round_half_up((inputs.current_age - ADULT_START_AGE) * WEEKS_PER_YEAR)
    percent_lived = round_half_up(weeks_lived / total_adult_weeks * 100) if total_adult_weeks > 0 else 100

    result = HealthyWeeksResult(
        total_adult_weeks=total_adult_weeks,
        weeks_lived=weeks_lived,
        weeks_remaining=weeks_remaining(inputs.current_age, end_age),
        percent_lived=percent_lived,
    )
    if inputs.retire_age:
        result.retirement = retirement_weeks(inputs.current_age, inputs.retire_age, end_age)
        result.countdown = countdown(inputs.current_age, inputs.retire_age, today)
        if inputs.retire_age_later:
            result.comparison = cost_of_waiting(inputs.retire_age, inputs.retire_age_later)
    return result
