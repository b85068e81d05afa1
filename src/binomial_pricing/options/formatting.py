"""Display strings for pricing summaries."""

from __future__ import annotations

import math

from binomial_pricing.options.models.binomial_tree import normalize_option_type
from binomial_pricing.options.types import OptionTypeInput, PricingResult

NOT_AVAILABLE = "n/a"


def _is_missing(value: float | None) -> bool:
    return value is None or not math.isfinite(value)


def _trim_decimals(text: str, min_decimals: int) -> str:
    whole, _, frac = text.partition(".")
    frac = frac.rstrip("0")
    if len(frac) < min_decimals:
        frac = frac.ljust(min_decimals, "0")
    return f"{whole}.{frac}" if frac else whole


def format_currency(value: float | None, symbol: str = "$") -> str:
    """Format as currency with thousands separators and 2 to 4 decimals."""
    if _is_missing(value):
        return NOT_AVAILABLE
    sign = "-" if value < 0 else ""
    body = _trim_decimals(f"{abs(value):,.4f}", min_decimals=2)
    return f"{sign}{symbol}{body}"


def format_percentage(value: float | None) -> str:
    """Format a decimal fraction as a percentage with 2 to 4 decimals."""
    if _is_missing(value):
        return NOT_AVAILABLE
    return f"{_trim_decimals(f'{value * 100:,.4f}', min_decimals=2)}%"


def format_factor(value: float | None) -> str:
    if _is_missing(value):
        return NOT_AVAILABLE
    return f"{value:.4f}"


def summarize(result: PricingResult, option_type: OptionTypeInput) -> dict[str, str]:
    """Labelled display strings for the option price and model constants."""
    side = normalize_option_type(option_type).value.capitalize()
    return {
        f"{side} Option Price": format_currency(result.option_price),
        "Up Factor (u)": format_factor(result.u),
        "Down Factor (d)": format_factor(result.d),
        "Risk-Neutral Probability (p)": format_percentage(result.p),
        "Steps": str(result.steps),
    }
