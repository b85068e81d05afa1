"""Price a ladder of strikes on one CRR lattice configuration.

This script demonstrates library use without the CLI:
1) build one `OptionParameters` per strike and side,
2) price each with `BinomialTreePricer`,
3) check put-call parity on every strike,
4) print the ladder and the wide lattice of the at-the-money call.
"""

from __future__ import annotations

import argparse
import math
from dataclasses import dataclass, replace

import pandas as pd

from binomial_pricing.options import (
    BinomialTreePricer,
    OptionParameters,
    OptionType,
    format_factor,
    lattice_to_wide,
)


@dataclass(frozen=True)
class ExampleConfig:
    spot: float
    rate: float
    time_to_expiry: float
    volatility: float
    steps: int
    strikes: list[float]


def _parse_args() -> ExampleConfig:
    parser = argparse.ArgumentParser(description="Price a ladder of strikes.")
    parser.add_argument("--spot", type=float, default=100.0)
    parser.add_argument("--rate", type=float, default=0.05)
    parser.add_argument("--time-to-expiry", type=float, default=1.0)
    parser.add_argument("--volatility", type=float, default=0.2)
    parser.add_argument("--steps", type=int, default=5)
    parser.add_argument(
        "--strikes",
        type=float,
        nargs="+",
        default=[80.0, 90.0, 100.0, 110.0, 120.0],
        help="Strikes to price.",
    )
    args = parser.parse_args()

    return ExampleConfig(
        spot=args.spot,
        rate=args.rate,
        time_to_expiry=args.time_to_expiry,
        volatility=args.volatility,
        steps=args.steps,
        strikes=sorted(args.strikes),
    )


def main() -> None:
    cfg = _parse_args()
    pricer = BinomialTreePricer()
    base = OptionParameters(
        spot=cfg.spot,
        strike=cfg.spot,
        rate=cfg.rate,
        time_to_expiry=cfg.time_to_expiry,
        volatility=cfg.volatility,
        steps=cfg.steps,
    )

    rows = []
    for strike in cfg.strikes:
        call = pricer.price(replace(base, strike=strike, option_type=OptionType.CALL))
        put = pricer.price(replace(base, strike=strike, option_type=OptionType.PUT))
        parity = cfg.spot - strike * math.exp(-cfg.rate * cfg.time_to_expiry)
        rows.append(
            {
                "strike": strike,
                "call": call.option_price,
                "put": put.option_price,
                "parity_gap": call.option_price - put.option_price - parity,
            }
        )

    print(pd.DataFrame(rows).to_string(index=False, float_format="{:.6f}".format))

    atm = pricer.price(base)
    print()
    print(
        f"ATM call lattice (u={format_factor(atm.u)}, d={format_factor(atm.d)}, "
        f"p={format_factor(atm.p)})"
    )
    print(lattice_to_wide(atm).round(4).to_string(na_rep=""))


if __name__ == "__main__":
    main()
