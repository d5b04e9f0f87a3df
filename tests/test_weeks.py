"""Tests for healthy-weeks calculations."""

from datetime import date, timedelta

from retirement_sim.weeks import (
    HealthyWeeksInputs,
    calculate_healthy_weeks,
    cost_of_waiting,
    countdown,
    retirement_weeks,
    weeks_remaining,
)


class TestWeeksRemaining:
    def test_basic(self):
        assert weeks_remaining(60) == 1300

    def test_past_healthy_end(self):
        assert weeks_remaining(90) == 0

    def test_custom_end_age(self):
        assert weeks_remaining(60, healthy_end_age=80) == 1040


class TestRetirementWeeks:
    def test_phase_split(self):
        r = retirement_weeks(55, 62)
        assert r.weeks_until_retirement == 364
        assert r.healthy_retirement_weeks == 1196
        assert r.go_go_weeks == 520
        assert r.slow_go_weeks == 520
        assert r.no_go_weeks == 156

    def test_late_retirement_shrinks_slow_go(self):
        r = retirement_weeks(60, 70)
        assert r.go_go_weeks == 520
        assert r.slow_go_weeks == 5 * 52
        assert r.no_go_weeks == 0

    def test_already_retired(self):
        assert retirement_weeks(70, 65).weeks_until_retirement == 0


class TestCostOfWaiting:
    def test_five_years(self):
        c = cost_of_waiting(60, 65)
        assert c.weeks_lost == 260
        assert c.go_go_weeks_lost == 260
        assert c.equivalent_saturdays == 260
        assert c.equivalent_months == 60
        assert c.equivalent_years == 5

    def test_go_go_loss_capped(self):
        assert cost_of_waiting(55, 70).go_go_weeks_lost == 520


class TestCountdown:
    def setup_method(self):
        self.today = date(2025, 1, 6)
        self.c = countdown(55, 62, today=self.today)

    def test_milestones(self):
        assert [m.weeks_from_now for m in self.c.milestones] == [100, 182, 364, 864, 884]
        assert self.c.milestones[0].date == self.today + timedelta(weeks=100)

    def test_target(self):
        assert self.c.weeks_until == 364
        assert self.c.target_date == self.today + timedelta(weeks=364)
        assert self.c.months_until == 84
        assert self.c.years_until == 7.0

    def test_close_to_retirement(self):
        c = countdown(64, 65, today=self.today)
        labels = [m.label for m in c.milestones]
        assert "100 weeks from now" not in labels
        assert len(c.milestones) == 4


class TestCalculateHealthyWeeks:
    def test_lifetime_numbers(self):
        result = calculate_healthy_weeks(HealthyWeeksInputs(current_age=60))
        assert result.total_adult_weeks == 3380
        assert result.weeks_lived == 2080
        assert result.percent_lived == 62
        assert result.weeks_remaining == 1300
        assert result.retirement is None
        assert result.countdown is None

    def test_with_retirement_and_comparison(self):
        inputs = HealthyWeeksInputs(current_age=55, retire_age=62, retire_age_later=67)
        result = calculate_healthy_weeks(inputs, today=date(2025, 1, 6))
        assert result.retirement.healthy_retirement_weeks == 1196
        assert result.comparison.weeks_lost == 260
        assert result.countdown.weeks_until == 364


class TestHalfUpRounding:
    """Halves round up, so fractional ages never land on the even neighbour."""

    def test_odd_weeks_until_halfway(self):
        c = countdown(55.21, 62, today=date(2026, 1, 1))
        assert c.weeks_until == 353
        halfway = c.milestones[1]
        assert halfway.label == "Halfway to retirement"
        assert halfway.weeks_from_now == 177
        assert c.years_until == 6.8
