"""Number and currency formatting helpers for text output and chart axes."""

import math
import re


def round_half_up(x: float) -> int:
    """Round to the nearest integer with halves going up (176.5 → 177), unlike round()."""
    return math.floor(x + 0.5)


def format_number(n: float) -> str:
    return f"{n:,}"


def format_currency(amount: float, compact: bool = False) -> str:
    """Format dollars: "$1,234,567", or "$1.2M" / "$800K" when compact."""
    if compact:
        if abs(amount) >= 1_000_000:
            return f"${amount / 1_000_000:.1f}M"
        if abs(amount) >= 1_000:
            return f"${amount / 1_000:.0f}K"
    sign = "-" if amount < 0 else ""
    return f"{sign}${abs(round(amount)):,}"


def parse_currency_input(text: str) -> float:
    """Parse user-typed money ("$1,200.50") into a number; 0 when unparseable.

    Only the leading numeric prefix counts, so "1.2.3" parses as 1.2.
    """
    cleaned = re.sub(r"[^0-9.]", "", text)
    match = re.match(r"\d*\.?\d*", cleaned)
    try:
        return float(match.group())
    except ValueError:
        return 0.0
