"""Binomial-tree pricing engine for European options."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from numbers import Integral

from binomial_pricing.options.errors import (
    InvalidParameterError,
    StepLimitExceededError,
)
from binomial_pricing.options.models.binomial_tree import (
    binomial_tree_price,
    validate_parameters,
)
from binomial_pricing.options.types import OptionParameters, PricingResult

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BinomialTreePricer:
    """CRR tree pricer with an optional cap on the requested step count.

    The cap bounds latency and lattice size for interactive callers. It is a
    policy of this engine object; `binomial_tree_price` itself accepts any
    non-negative step count.
    """

    max_steps: int | None = None

    def __post_init__(self) -> None:
        cap = self.max_steps
        if cap is None:
            return
        if isinstance(cap, bool) or not isinstance(cap, Integral):
            raise InvalidParameterError(
                "max_steps", f"must be an integer or None, got {cap!r}"
            )
        if cap < 0:
            raise InvalidParameterError("max_steps", "must be >= 0")

    def price(self, params: OptionParameters) -> PricingResult:
        validate_parameters(params)
        if self.max_steps is not None and params.steps > self.max_steps:
            raise StepLimitExceededError(params.steps, self.max_steps)

        logger.debug("Pricing %s", params)
        return binomial_tree_price(params)
