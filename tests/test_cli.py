"""End-to-end tests for the command-line entry points."""

import pytest

from retirement_sim import cli, smile_cli, weeks_cli


@pytest.fixture
def no_config(tmp_path):
    return ["--config", str(tmp_path / "missing.toml")]


class TestMonteCarloCli:
    def test_prints_report(self, no_config, capsys):
        cli.main(no_config + ["--simulations", "50", "--seed", "1"])
        out = capsys.readouterr().out
        assert "Retirement Monte Carlo" in out
        assert "[Portfolio balance by age]" in out
        assert "Success rate:" in out
        assert "[Cost of waiting]" in out

    def test_invalid_allocation_exits(self, no_config, capsys):
        with pytest.raises(SystemExit):
            cli.main(no_config + ["--stocks", "90", "--bonds", "30", "--cash", "10"])
        assert "allocation sums to 130%" in capsys.readouterr().err

    def test_chart_written(self, no_config, tmp_path):
        cli.main(no_config + ["--simulations", "20", "--seed", "2", "--chart", str(tmp_path / "out")])
        assert (tmp_path / "out" / "mc_fan.png").exists()


class TestSmileCli:
    def test_prints_table(self, no_config, capsys):
        smile_cli.main(no_config + ["--retirement-age", "65", "--life-expectancy", "95"])
        out = capsys.readouterr().out
        assert "Go-Go" in out
        assert "vs. flat budget" in out

    def test_empty_projection_exits(self, no_config):
        with pytest.raises(SystemExit):
            smile_cli.main(no_config + ["--retirement-age", "70", "--life-expectancy", "65"])


class TestWeeksCli:
    def test_prints_weeks(self, no_config, capsys):
        weeks_cli.main(no_config + ["--current-age", "55", "--retirement-age", "62", "--later-age", "67"])
        out = capsys.readouterr().out
        assert "Healthy weeks remaining: 1,560" in out
        assert "costs 260 weeks" in out
        assert "[Countdown]" in out
