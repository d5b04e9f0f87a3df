"""TOML config loader with CLI > config > default resolution."""

import argparse
import sys
import tomllib
from pathlib import Path
from typing import Callable

from retirement_sim.params import SimulationInputs

DEFAULT_CONFIG_PATH = Path("config.toml")

DEFAULTS = {
    "current_age": 55,
    "retirement_age": 62,
    "life_expectancy": 92,
    "savings": 800_000.0,
    "monthly_contribution": 2_000.0,
    "stocks": 60,
    "bonds": 30,
    "cash": 10,
    "spending": 72_000.0,
    "spending_smile": True,
    "social_security_age": 67,
    "social_security_monthly": 2_800.0,
    "other_income": 0.0,
    "inflation": 0.03,
    "simulations": 1000,
}


def load_config(path: Path | None = None) -> dict:
    """Load TOML config file. Returns empty dict if file doesn't exist."""
    if path is None:
        path = DEFAULT_CONFIG_PATH
    if not path.exists():
        return {}
    try:
        with open(path, "rb") as f:
            raw = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        print(f"Failed to read config file: {path}: {e}", file=sys.stderr)
        raise SystemExit(1)
    # Normalize allocation: [stocks, bonds, cash] → individual keys
    if "allocation" in raw:
        v = raw.pop("allocation")
        if isinstance(v, list) and len(v) == 3:
            raw.setdefault("stocks", v[0])
            raw.setdefault("bonds", v[1])
            raw.setdefault("cash", v[2])
        elif isinstance(v, dict):
            for key in ("stocks", "bonds", "cash"):
                if key in v:
                    raw.setdefault(key, v[key])
    if "inflation" in raw:
        inflation = raw["inflation"]
        if isinstance(inflation, bool) or not isinstance(inflation, (int, float)):
            print(f"Invalid inflation in config file: {path}: {inflation!r} is not a number", file=sys.stderr)
            raise SystemExit(1)
        # Percent-style inflation (3 → 0.03)
        if inflation >= 1:
            raw["inflation"] = inflation / 100
    return raw


def create_parser(description: str) -> argparse.ArgumentParser:
    """Create argparse parser with shared simulation flags."""
    d = DEFAULTS
    parser = argparse.ArgumentParser(description=description)
    parser.add_argument("--config", type=Path, default=None, help="config file path (default: config.toml)")
    parser.add_argument("--current-age", type=int, default=None, help=f"current age (default: {d['current_age']})")
    parser.add_argument("--retirement-age", type=int, default=None, help=f"planned retirement age (default: {d['retirement_age']})")
    parser.add_argument("--life-expectancy", type=int, default=None, help=f"planning horizon end age (default: {d['life_expectancy']})")
    parser.add_argument("--savings", type=float, default=None, help=f"total invested savings today (default: {d['savings']:,.0f})")
    parser.add_argument("--monthly-contribution", type=float, default=None, help=f"monthly saving until retirement (default: {d['monthly_contribution']:,.0f})")
    parser.add_argument("--stocks", type=int, default=None, help=f"stock allocation %% (default: {d['stocks']})")
    parser.add_argument("--bonds", type=int, default=None, help=f"bond allocation %% (default: {d['bonds']})")
    parser.add_argument("--cash", type=int, default=None, help=f"cash allocation %% (default: {d['cash']})")
    parser.add_argument("--spending", type=float, default=None, help=f"annual retirement spending in today's dollars (default: {d['spending']:,.0f})")
    parser.add_argument("--no-smile", action="store_false", dest="spending_smile", default=None, help="flat real spending instead of the Go-Go/Slow-Go/No-Go smile")
    parser.add_argument("--social-security-age", type=int, default=None, help=f"Social Security claiming age (default: {d['social_security_age']})")
    parser.add_argument("--social-security-monthly", type=float, default=None, help=f"monthly Social Security benefit (default: {d['social_security_monthly']:,.0f})")
    parser.add_argument("--other-income", type=float, default=None, help=f"other monthly retirement income, inflation-indexed (default: {d['other_income']:,.0f})")
    parser.add_argument("--inflation", type=float, default=None, help=f"annual inflation rate as a decimal (default: {d['inflation']})")
    return parser


def resolve(args: argparse.Namespace, config: dict) -> dict:
    """Resolve values with priority: CLI flag > config.toml > hardcoded default."""
    resolved = {}
    for key, default in DEFAULTS.items():
        cli_val = getattr(args, key, None)
        resolved[key] = cli_val if cli_val is not None else config.get(key, default)
    return resolved


def build_inputs(r: dict) -> SimulationInputs:
    """Build SimulationInputs from resolved config dict. Raises ValueError on non-numeric values."""
    return SimulationInputs(
        current_age=int(r["current_age"]),
        retirement_age=int(r["retirement_age"]),
        life_expectancy=int(r["life_expectancy"]),
        total_savings=float(r["savings"]),
        monthly_contribution=float(r["monthly_contribution"]),
        stocks_percent=int(r["stocks"]),
        bonds_percent=int(r["bonds"]),
        cash_percent=int(r["cash"]),
        annual_spending=float(r["spending"]),
        spending_smile=bool(r["spending_smile"]),
        social_security_age=int(r["social_security_age"]),
        social_security_monthly=float(r["social_security_monthly"]),
        other_monthly_income=float(r["other_income"]),
        inflation_rate=float(r["inflation"]),
        n_simulations=int(r["simulations"]),
    )


def parse_args(
    description: str,
    add_args_fn: Callable[[argparse.ArgumentParser], None] | None = None,
    argv: list[str] | None = None,
) -> tuple[dict, argparse.Namespace]:
    """Parse CLI args, load config, resolve values.

    Returns (resolved_dict, namespace).
    namespace: raw argparse.Namespace (for extra CLI args added via add_args_fn).
    """
    parser = create_parser(description)
    if add_args_fn:
        add_args_fn(parser)
    args = parser.parse_args(argv)
    config = load_config(args.config)
    r = resolve(args, config)
    return r, args
