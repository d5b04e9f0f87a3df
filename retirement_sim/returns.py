"""Correlated annual return sampling for stocks, bonds and cash."""

import math
from random import Random

from retirement_sim.params import DEFAULT_MARKET, MarketAssumptions


def gaussian(rng: Random) -> float:
    """Standard normal draw via Box-Muller. Zero uniforms are redrawn to avoid log(0)."""
    u = 0.0
    v = 0.0
    while u == 0.0:
        u = rng.random()
    while v == 0.0:
        v = rng.random()
    return math.sqrt(-2.0 * math.log(u)) * math.cos(2.0 * math.pi * v)


def cholesky_factors(market: MarketAssumptions) -> tuple[float, float, float, float, float]:
    """Closed-form lower-triangular factors of the 3x3 correlation matrix.

    Returns (l21, l22, l31, l32, l33); l11 is always 1.
    """
    rho12 = market.stocks_bonds_correlation
    rho13 = market.stocks_cash_correlation
    rho23 = market.bonds_cash_correlation

    l21 = rho12
    l22 = math.sqrt(max(0.0, 1 - rho12 * rho12))
    l31 = rho13
    # Perfectly correlated stocks/bonds leave no independent bond component
    l32 = (rho23 - rho12 * rho13) / l22 if l22 > 0 else 0.0
    # Clamp guards an invalid (non positive-definite) correlation matrix
    l33 = math.sqrt(max(0.0, 1 - l31 * l31 - l32 * l32))
    return l21, l22, l31, l32, l33


def sample_correlated_returns(
    rng: Random,
    market: MarketAssumptions = DEFAULT_MARKET,
) -> tuple[float, float, float]:
    """Sample one year's (stock, bond, cash) returns using Cholesky decomposition."""
    z1 = gaussian(rng)
    z2 = gaussian(rng)
    z3 = gaussian(rng)

    l21, l22, l31, l32, l33 = cholesky_factors(market)
    e1 = z1
    e2 = l21 * z1 + l22 * z2
    e3 = l31 * z1 + l32 * z2 + l33 * z3

    return (
        market.stocks.mean + market.stocks.std * e1,
        market.bonds.mean + market.bonds.std * e2,
        market.cash.mean + market.cash.std * e3,
    )
