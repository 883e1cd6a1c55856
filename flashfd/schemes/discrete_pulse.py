"""
Pulse functions sampled on the dimensionless grid.

The pulse width is snapped to a whole number of time steps, and
:meth:`DiscretePulse.optimise` shrinks the time step until the pulse spans
at least one step with a small margin. The 2-D variant additionally snaps the
heating-spot radius to the radial grid and refines the grid until the spot
covers at least one radial step.
"""

from __future__ import annotations

import numpy as np

from ..exceptions import CapabilityMismatchError, ConfigurationError
from ..logging import get_logger
from ..problem.pulse import PulseShape
from ..problem.statements import Problem
from ..properties import NumericPropertyKeyword, derive
from .grid import Grid, Grid2D

logger = get_logger(__name__)

# Resolution margin: the calibrated step must be this much finer than the feature.
_MARGIN = 1.05
_TAU_REDUCTION = 1.5
_DENSITY_INCREMENT = 5

_GAUSSIAN_NORM = 5.0 / np.sqrt(np.pi)
_GAUSSIAN_SHARPNESS = 25.0


class DiscretePulse:
    """Temporal pulse profile on the time grid of ``grid``."""

    def __init__(self, problem: Problem, grid: Grid) -> None:
        self.pulse = problem.pulse
        self.time_factor = problem.time_factor()
        self.grid = grid
        self.recalculate()

    def recalculate(self) -> None:
        """Re-snap the pulse width to the current time step."""
        self.width = self.grid.grid_time(self.pulse.width, self.time_factor)

    def evaluate_at(self, time: float | np.ndarray) -> float | np.ndarray:
        """
        Pulse intensity at dimensionless ``time``.

        Every shape integrates to one over the discrete width. Trapezoidal
        pulses are evaluated as rectangular ones.
        """
        w = self.width
        if w <= 0.0:
            raise ConfigurationError(
                "Pulse width collapsed to zero on the time grid; call optimise() first."
            )
        shape = self.pulse.shape
        if shape in (PulseShape.RECTANGULAR, PulseShape.TRAPEZOIDAL):
            return 0.5 / w * (1.0 + np.sign(w - time))
        if shape is PulseShape.TRIANGULAR:
            return (
                1.0 / w
                * (1.0 + np.sign(w - time))
                * (1.0 - np.abs(2.0 * time - w) / w)
            )
        return _GAUSSIAN_NORM / w * np.exp(-_GAUSSIAN_SHARPNESS * (time / w - 0.5) ** 2)

    def optimise(self) -> None:
        """Shrink the time step until ``1.05 * tau <= width``."""
        grid = self.grid
        while _MARGIN * grid.tau > self.width:
            grid.set_time_factor(
                derive(NumericPropertyKeyword.TAU_FACTOR, grid.tau_factor / _TAU_REDUCTION)
            )
            self.recalculate()
            logger.debug(
                "Reduced time step to resolve pulse: tau_factor=%.4g, tau=%.4g, width=%.4g",
                grid.tau_factor,
                grid.tau,
                self.width,
            )


class DiscretePulse2D(DiscretePulse):
    """Pulse with a finite heating spot on the radial grid of a :class:`Grid2D`."""

    def __init__(self, problem: Problem, grid: Grid2D) -> None:
        if not isinstance(grid, Grid2D):
            raise CapabilityMismatchError(
                f"DiscretePulse2D requires a Grid2D, got {type(grid).__name__}."
            )
        self.sample_diameter = problem.diameter
        super().__init__(problem, grid)

    def recalculate(self) -> None:
        super().recalculate()
        self.spot_radius = self.grid.grid_radial_distance(
            0.5 * self.pulse.spot_diameter, 0.5 * self.sample_diameter
        )

    def evaluate_at(
        self, time: float | np.ndarray, radial: float | np.ndarray | None = None
    ) -> float | np.ndarray:
        """Pulse intensity at ``time``, masked by the spot when ``radial`` is given."""
        temporal = super().evaluate_at(time)
        if radial is None:
            return temporal
        return temporal * (0.5 + 0.5 * np.sign(self.spot_radius - radial))

    def optimise(self) -> None:
        """Refine the radial grid until ``1.05 * hy <= spot radius``, then the time step."""
        grid = self.grid
        while _MARGIN * grid.hy > self.spot_radius:
            grid.set_grid_density(
                derive(
                    NumericPropertyKeyword.GRID_DENSITY,
                    grid.grid_density + _DENSITY_INCREMENT,
                )
            )
            self.recalculate()
            logger.debug(
                "Refined grid to resolve heating spot: N=%d, hy=%.4g, spot=%.4g",
                grid.grid_density,
                grid.hy,
                self.spot_radius,
            )
        super().optimise()
