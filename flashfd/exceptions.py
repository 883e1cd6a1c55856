"""Exception hierarchy raised by the flashfd solvers."""

from __future__ import annotations


class FlashError(Exception):
    """Base class of every error raised by flashfd."""


class ConfigurationError(FlashError, ValueError):
    """A parameter or property is invalid for the requested computation.

    Raised before time marching starts, or after it when the computed
    response cannot be rescaled. In both cases the target heating curve is
    left untouched.
    """


class CapabilityMismatchError(FlashError, TypeError):
    """A scheme was asked to solve a problem outside its domain."""


class NonConvergenceError(FlashError, RuntimeError):
    """A nonlinear boundary iteration hit its iteration cap."""

    def __init__(self, label: str, iterations: int, residual: float) -> None:
        self.label = label
        self.iterations = iterations
        self.residual = residual
        super().__init__(
            f"{label}: no convergence after {iterations} iterations "
            f"(last change {residual:.3e})"
        )
