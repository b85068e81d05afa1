"""Interface for lattice pricing engines."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from binomial_pricing.options.types import OptionParameters, PricingResult


@runtime_checkable
class LatticePriceModel(Protocol):
    """Pricing capability required by the CLI and presentation helpers."""

    def price(self, params: OptionParameters) -> PricingResult:
        """Return option value, lattice and model constants for one contract."""
