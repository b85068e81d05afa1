"""Lattice option-pricing models."""

from .binomial_tree import (
    CRRFactors,
    backward_induction,
    binomial_tree_price,
    build_stock_lattice,
    crr_factors,
    normalize_option_type,
    validate_parameters,
)

__all__ = [
    "CRRFactors",
    "crr_factors",
    "build_stock_lattice",
    "backward_induction",
    "binomial_tree_price",
    "normalize_option_type",
    "validate_parameters",
]
