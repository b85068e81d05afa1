"""Shared option-pricing dataclasses and aliases."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Literal, TypeAlias


class OptionType(StrEnum):
    """Canonical option side labels used across pricing code."""

    CALL = "call"
    PUT = "put"


# Tolerant input type accepted at system boundaries (config files/tests).
OptionTypeInput: TypeAlias = OptionType | Literal["call", "put", "C", "P"]


@dataclass(frozen=True)
class OptionParameters:
    """Contract and market inputs for one European option calculation.

    Units:
    - `spot`, `strike`: currency units
    - `rate`: continuously-compounded annual rate in decimals
    - `time_to_expiry`: years
    - `volatility`: annualized, in decimals (0.2 = 20 vol points)
    - `steps`: number of binomial time steps
    """

    spot: float
    strike: float
    rate: float
    time_to_expiry: float
    volatility: float
    steps: int
    option_type: OptionTypeInput = OptionType.CALL


@dataclass(frozen=True, slots=True)
class TreeNode:
    """One lattice position reached after `up_moves` ups out of `step` moves."""

    stock_price: float
    option_value: float
    step: int
    up_moves: int


Lattice: TypeAlias = tuple[tuple[TreeNode, ...], ...]


@dataclass(frozen=True)
class PricingResult:
    """Root option value, the full lattice and the CRR model constants.

    `p` is None for a zero-step lattice, where no transition exists.
    """

    option_price: float
    lattice: Lattice
    u: float
    d: float
    p: float | None

    @property
    def steps(self) -> int:
        return len(self.lattice) - 1

    @property
    def root(self) -> TreeNode:
        return self.lattice[0][0]

    def node(self, step: int, up_moves: int) -> TreeNode:
        """Return node `(step, up_moves)`; raises IndexError outside the lattice."""
        if not 0 <= step <= self.steps or not 0 <= up_moves <= step:
            raise IndexError(
                f"node ({step}, {up_moves}) is outside a {self.steps}-step lattice"
            )
        return self.lattice[step][up_moves]

    def stock_prices(self, step: int) -> tuple[float, ...]:
        return tuple(node.stock_price for node in self.lattice[step])

    def option_values(self, step: int) -> tuple[float, ...]:
        return tuple(node.option_value for node in self.lattice[step])
