"""CRR binomial-tree pricing for European options with the full lattice."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from numbers import Integral, Real

import numpy as np

from binomial_pricing.options.errors import (
    DegenerateVolatilityError,
    InvalidParameterError,
    NonFiniteLatticeError,
    ProbabilityBoundsError,
)
from binomial_pricing.options.types import (
    OptionParameters,
    OptionType,
    OptionTypeInput,
    PricingResult,
    TreeNode,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CRRFactors:
    """Per-step constants of a Cox-Ross-Rubinstein tree."""

    dt: float
    u: float
    d: float
    p: float | None
    discount: float


def normalize_option_type(option_type: OptionTypeInput) -> OptionType:
    """Normalize option type labels to `OptionType.CALL`/`OptionType.PUT`."""
    if option_type in ("call", "C"):
        return OptionType.CALL
    if option_type in ("put", "P"):
        return OptionType.PUT
    raise InvalidParameterError(
        "option_type", "must be one of {'call', 'put', 'C', 'P'}"
    )


def _require_real(name: str, value: object) -> float:
    if isinstance(value, bool) or not isinstance(value, Real):
        raise InvalidParameterError(name, f"must be a real number, got {value!r}")
    value = float(value)
    if not math.isfinite(value):
        raise InvalidParameterError(name, f"must be finite, got {value!r}")
    return value


def validate_parameters(params: OptionParameters) -> OptionType:
    """Check every input field and return the normalized option type.

    Raises:
        InvalidParameterError: Naming the first offending field.
    """
    for name in ("spot", "strike", "time_to_expiry"):
        if _require_real(name, getattr(params, name)) <= 0:
            raise InvalidParameterError(name, "must be > 0")

    # Zero volatility is reported separately as a degenerate market.
    if _require_real("volatility", params.volatility) < 0:
        raise InvalidParameterError("volatility", "must be >= 0")
    _require_real("rate", params.rate)

    steps = params.steps
    if isinstance(steps, bool) or not isinstance(steps, Integral):
        raise InvalidParameterError("steps", f"must be an integer, got {steps!r}")
    if steps < 0:
        raise InvalidParameterError("steps", "must be >= 0")

    return normalize_option_type(params.option_type)


def crr_factors(
    T: float,
    sigma: float,
    r: float,
    steps: int,
) -> CRRFactors:
    """Derive `dt`, `u`, `d`, `p` and the one-step discount factor.

    With `steps == 0` there is no transition: `u == d == 1` and `p` is None.

    Raises:
        DegenerateVolatilityError: If `u == d` in float64 for `steps >= 1`.
        ProbabilityBoundsError: If `p` falls outside [0, 1] (arbitrage).
    """
    if steps == 0:
        return CRRFactors(dt=0.0, u=1.0, d=1.0, p=None, discount=1.0)

    dt = T / steps
    u = float(np.exp(sigma * np.sqrt(dt)))
    d = 1.0 / u
    if u == d:
        raise DegenerateVolatilityError(sigma, dt)

    p = (float(np.exp(r * dt)) - d) / (u - d)
    if not 0.0 <= p <= 1.0:
        raise ProbabilityBoundsError(p, sigma, r, dt)
    return CRRFactors(dt=dt, u=u, d=d, p=p, discount=float(np.exp(-r * dt)))


def _intrinsic_value(
    spot: np.ndarray, strike: float, option_type: OptionType
) -> np.ndarray:
    if option_type == OptionType.CALL:
        return np.maximum(spot - strike, 0.0)
    return np.maximum(strike - spot, 0.0)


def build_stock_lattice(S: float, u: float, d: float, steps: int) -> list[np.ndarray]:
    """Forward pass: `S * u**j * d**(i - j)` for every step `i` and `j <= i`."""
    stock = []
    for i in range(steps + 1):
        j = np.arange(i + 1)
        stock.append(S * (u**j) * (d ** (i - j)))
    return stock


def _require_finite(levels: list[np.ndarray], field: str) -> None:
    for i, level in enumerate(levels):
        bad = np.flatnonzero(~np.isfinite(level))
        if bad.size:
            raise NonFiniteLatticeError(i, int(bad[0]), field)


def backward_induction(
    stock: list[np.ndarray],
    K: float,
    option_type: OptionType,
    factors: CRRFactors,
) -> list[np.ndarray]:
    """Terminal payoff, then discounted risk-neutral expectation back to the root.

    Every step's values are kept; index `j + 1` of step `i + 1` is the
    up-successor of node `(i, j)` and index `j` the down-successor.
    """
    steps = len(stock) - 1
    values: list[np.ndarray] = [np.empty(0)] * (steps + 1)
    values[steps] = _intrinsic_value(stock[steps], K, option_type)

    p = factors.p
    for i in range(steps - 1, -1, -1):
        nxt = values[i + 1]
        values[i] = factors.discount * (p * nxt[1:] + (1.0 - p) * nxt[:-1])
    return values


def binomial_tree_price(params: OptionParameters) -> PricingResult:
    """Price a European option with a Cox-Ross-Rubinstein tree.

    The whole lattice is returned alongside the price so it can be tabulated
    or drawn. Work is O(steps**2) in time and memory.

    Args:
        params: Spot, strike, rate, maturity, volatility, step count and side.

    Returns:
        `PricingResult` with the root value, the lattice and `u`, `d`, `p`.

    Raises:
        InvalidParameterError: If an input is non-finite or out of domain.
        DegenerateVolatilityError: If the up and down factors coincide.
        ProbabilityBoundsError: If the risk-neutral probability leaves [0, 1].
        NonFiniteLatticeError: If a node price or value overflows float64.
    """
    opt_type = validate_parameters(params)
    steps = int(params.steps)
    factors = crr_factors(
        T=float(params.time_to_expiry),
        sigma=float(params.volatility),
        r=float(params.rate),
        steps=steps,
    )

    # Overflow surfaces as inf/nan nodes, reported below as a pricing error.
    with np.errstate(over="ignore", invalid="ignore"):
        stock = build_stock_lattice(float(params.spot), factors.u, factors.d, steps)
        values = backward_induction(stock, float(params.strike), opt_type, factors)
    _require_finite(stock, "stock_price")
    _require_finite(values, "option_value")

    lattice = tuple(
        tuple(
            TreeNode(
                stock_price=float(stock[i][j]),
                option_value=float(values[i][j]),
                step=i,
                up_moves=j,
            )
            for j in range(i + 1)
        )
        for i in range(steps + 1)
    )

    option_price = lattice[0][0].option_value
    logger.debug(
        "CRR %s: steps=%d u=%.6f d=%.6f p=%s price=%.6f",
        opt_type.value,
        steps,
        factors.u,
        factors.d,
        factors.p,
        option_price,
    )
    return PricingResult(
        option_price=option_price,
        lattice=lattice,
        u=factors.u,
        d=factors.d,
        p=factors.p,
    )
