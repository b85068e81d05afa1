"""Pricing engines used by the CLI and presentation helpers."""

from .base import LatticePriceModel
from .binomial_tree_pricer import BinomialTreePricer

__all__ = [
    "LatticePriceModel",
    "BinomialTreePricer",
]
