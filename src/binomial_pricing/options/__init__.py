"""European option pricing on a CRR binomial lattice."""

from .engines import BinomialTreePricer, LatticePriceModel
from .errors import (
    DegenerateVolatilityError,
    InvalidParameterError,
    NonFiniteLatticeError,
    PricingError,
    ProbabilityBoundsError,
    StepLimitExceededError,
)
from .formatting import format_currency, format_factor, format_percentage, summarize
from .frame import lattice_to_frame, lattice_to_wide
from .models import (
    CRRFactors,
    binomial_tree_price,
    crr_factors,
    normalize_option_type,
    validate_parameters,
)
from .types import (
    Lattice,
    OptionParameters,
    OptionType,
    OptionTypeInput,
    PricingResult,
    TreeNode,
)

__all__ = [
    "OptionType",
    "OptionTypeInput",
    "OptionParameters",
    "TreeNode",
    "Lattice",
    "PricingResult",
    "PricingError",
    "InvalidParameterError",
    "DegenerateVolatilityError",
    "ProbabilityBoundsError",
    "NonFiniteLatticeError",
    "StepLimitExceededError",
    "LatticePriceModel",
    "BinomialTreePricer",
    "CRRFactors",
    "crr_factors",
    "binomial_tree_price",
    "normalize_option_type",
    "validate_parameters",
    "lattice_to_frame",
    "lattice_to_wide",
    "format_currency",
    "format_percentage",
    "format_factor",
    "summarize",
]
