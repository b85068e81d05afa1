"""Exceptions raised by the binomial pricing engine."""

from __future__ import annotations


class PricingError(ValueError):
    """Base class for pricing failures callers can tell apart from NaN output."""


class InvalidParameterError(PricingError):
    """Raised when one input parameter is outside its valid domain."""

    def __init__(self, parameter: str, message: str) -> None:
        super().__init__(f"{parameter}: {message}")
        self.parameter = parameter


class DegenerateVolatilityError(PricingError):
    """Raised when the up and down factors coincide (zero effective volatility)."""

    def __init__(self, volatility: float, dt: float) -> None:
        super().__init__(
            "degenerate volatility: up and down factors coincide "
            f"(volatility={volatility!r}, dt={dt!r})"
        )
        self.volatility = volatility
        self.dt = dt


class StepLimitExceededError(PricingError):
    """Raised when a pricer's step-count policy rejects a request."""

    def __init__(self, steps: int, max_steps: int) -> None:
        super().__init__(f"steps={steps} exceeds max_steps={max_steps}")
        self.steps = steps
        self.max_steps = max_steps


class ProbabilityBoundsError(PricingError):
    """Raised when the CRR risk-neutral probability falls outside [0, 1].

    The tree then admits arbitrage and the backward induction is numerically
    meaningless, typically because `volatility * sqrt(dt)` is below
    `|rate| * dt`.
    """

    def __init__(self, p: float, volatility: float, rate: float, dt: float) -> None:
        super().__init__(
            f"Invalid CRR risk-neutral probability p={p!r}; increase volatility "
            f"or steps (volatility={volatility!r}, rate={rate!r}, dt={dt!r})"
        )
        self.p = p


class NonFiniteLatticeError(PricingError):
    """Raised when lattice prices or values overflow float64."""

    def __init__(self, step: int, up_moves: int, field: str) -> None:
        super().__init__(
            f"non-finite {field} at node ({step}, {up_moves}); "
            "volatility * sqrt(time_to_expiry * steps) is too large for float64"
        )
        self.step = step
        self.up_moves = up_moves
        self.field = field
