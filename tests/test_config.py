"""Tests for TOML config loading and CLI > config > default resolution."""

import argparse
from dataclasses import fields

import pytest

from retirement_sim.config import (
    DEFAULTS,
    build_inputs,
    load_config,
    parse_args,
    resolve,
)
from retirement_sim.params import SimulationInputs


class TestLoadConfig:
    def test_missing_file(self, tmp_path):
        assert load_config(tmp_path / "absent.toml") == {}

    def test_allocation_list(self, tmp_path):
        path = tmp_path / "config.toml"
        path.write_text("allocation = [70, 20, 10]\ncurrent_age = 50\n")
        cfg = load_config(path)
        assert cfg == {"current_age": 50, "stocks": 70, "bonds": 20, "cash": 10}

    def test_allocation_table(self, tmp_path):
        path = tmp_path / "config.toml"
        path.write_text("[allocation]\nstocks = 50\nbonds = 50\ncash = 0\n")
        cfg = load_config(path)
        assert (cfg["stocks"], cfg["bonds"], cfg["cash"]) == (50, 50, 0)

    def test_explicit_key_beats_allocation(self, tmp_path):
        path = tmp_path / "config.toml"
        path.write_text("stocks = 40\nallocation = [70, 20, 10]\n")
        assert load_config(path)["stocks"] == 40

    def test_percent_inflation(self, tmp_path):
        path = tmp_path / "config.toml"
        path.write_text("inflation = 3\n")
        assert load_config(path)["inflation"] == pytest.approx(0.03)

    def test_decimal_inflation_untouched(self, tmp_path):
        path = tmp_path / "config.toml"
        path.write_text("inflation = 0.025\n")
        assert load_config(path)["inflation"] == pytest.approx(0.025)

    def test_invalid_toml_exits(self, tmp_path, capsys):
        path = tmp_path / "config.toml"
        path.write_text("current_age = = 50\n")
        with pytest.raises(SystemExit):
            load_config(path)
        assert "Failed to read config file" in capsys.readouterr().err

    @pytest.mark.parametrize("value", ['"3%"', "true"])
    def test_non_numeric_inflation_exits(self, tmp_path, capsys, value):
        path = tmp_path / "config.toml"
        path.write_text(f"inflation = {value}\n")
        with pytest.raises(SystemExit):
            load_config(path)
        assert "Invalid inflation" in capsys.readouterr().err


class TestResolve:
    def test_priority(self):
        args = argparse.Namespace(current_age=45, retirement_age=None)
        config = {"current_age": 50, "retirement_age": 60}
        r = resolve(args, config)
        assert r["current_age"] == 45
        assert r["retirement_age"] == 60
        assert r["life_expectancy"] == DEFAULTS["life_expectancy"]

    def test_defaults_build_default_inputs(self):
        r = resolve(argparse.Namespace(), {})
        assert build_inputs(r) == SimulationInputs()

    def test_defaults_cover_every_input(self):
        assert len(DEFAULTS) == len(fields(SimulationInputs))

    def test_non_numeric_rejected(self):
        r = resolve(argparse.Namespace(), {"savings": "lots"})
        with pytest.raises(ValueError):
            build_inputs(r)


class TestParseArgs:
    def test_flags_and_config(self, tmp_path):
        path = tmp_path / "config.toml"
        path.write_text("spending = 60000\nsocial_security_age = 70\n")
        r, args = parse_args("test", argv=[
            "--config", str(path), "--current-age", "48", "--no-smile",
        ])
        assert r["current_age"] == 48
        assert r["spending"] == 60000
        assert r["social_security_age"] == 70
        assert r["spending_smile"] is False

    def test_smile_defaults_on(self, tmp_path):
        r, _ = parse_args("test", argv=["--config", str(tmp_path / "none.toml")])
        assert r["spending_smile"] is True

    def test_extra_args(self, tmp_path):
        def add(parser):
            parser.add_argument("--seed", type=int, default=None)

        _, args = parse_args("test", add, ["--config", str(tmp_path / "none.toml"), "--seed", "9"])
        assert args.seed == 9
