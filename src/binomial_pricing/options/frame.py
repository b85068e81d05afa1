"""Tabular views of a priced lattice."""

from __future__ import annotations

from typing import Literal

import numpy as np
import pandas as pd

from binomial_pricing.options.types import PricingResult

LATTICE_COLUMNS = ("step", "up_moves", "stock_price", "option_value")

LatticeValue = Literal["stock_price", "option_value"]


def lattice_to_frame(result: PricingResult) -> pd.DataFrame:
    """Return one row per node, ordered by step then `up_moves`."""
    rows = [
        (node.step, node.up_moves, node.stock_price, node.option_value)
        for level in result.lattice
        for node in level
    ]
    df = pd.DataFrame(rows, columns=list(LATTICE_COLUMNS))
    return df.astype(
        {
            "step": "int64",
            "up_moves": "int64",
            "stock_price": "float64",
            "option_value": "float64",
        }
    )


def lattice_to_wide(
    result: PricingResult, value: LatticeValue = "stock_price"
) -> pd.DataFrame:
    """Pivot the lattice to an `up_moves` x `step` grid of `value`.

    Cells with `up_moves > step` do not exist in the lattice and hold NaN.
    """
    if value not in ("stock_price", "option_value"):
        raise ValueError("value must be 'stock_price' or 'option_value'")

    n = result.steps
    grid = np.full((n + 1, n + 1), np.nan)
    for level in result.lattice:
        for node in level:
            grid[node.up_moves, node.step] = getattr(node, value)

    out = pd.DataFrame(
        grid,
        index=pd.RangeIndex(n + 1, name="up_moves"),
        columns=pd.RangeIndex(n + 1, name="step"),
    )
    # Highest price on top, as the tree is usually drawn.
    return out.iloc[::-1]
