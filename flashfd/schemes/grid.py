"""
Dimensionless space/time grids of the finite-difference schemes.

All lengths are measured in units of the sample thickness (axial) or radius
(radial) and times in units of the diffusion time ``l^2 / a``, so the axial
step is ``hx = 1 / N``.
"""

from __future__ import annotations

import math

from ..exceptions import ConfigurationError
from ..properties import (
    NumericProperty,
    NumericPropertyKeyword,
    derive,
    require_type,
)


def round_half_away(value: float) -> int:
    """Round to the nearest integer, ties away from zero."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


class Grid:
    """
    Uniform one-dimensional grid with ``N`` axial steps.

    The space step ``hx = 1/N`` and the time step ``tau = tau_factor * hx**2``
    are always re-derived together, so they never go out of sync.
    """

    def __init__(self, grid_density: NumericProperty, tau_factor: NumericProperty) -> None:
        self.grid_density = int(require_type(grid_density, NumericPropertyKeyword.GRID_DENSITY))
        self.tau_factor = float(require_type(tau_factor, NumericPropertyKeyword.TAU_FACTOR))
        self.hx = 1.0 / self.grid_density
        self._on_density_change()
        self._derive_tau()

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(N={self.grid_density}, hx={self.hx:.4g}, "
            f"tau_factor={self.tau_factor:.4g}, tau={self.tau:.4g})"
        )

    # ------------------------------------------------------------------
    def _on_density_change(self) -> None:
        pass

    def _derive_tau(self) -> None:
        self.tau = self.tau_factor * self.hx**2

    def set_grid_density(self, prop: NumericProperty) -> None:
        self.grid_density = int(require_type(prop, NumericPropertyKeyword.GRID_DENSITY))
        self.hx = 1.0 / self.grid_density
        self._on_density_change()
        self._derive_tau()

    def set_time_factor(self, prop: NumericProperty) -> None:
        self.tau_factor = float(require_type(prop, NumericPropertyKeyword.TAU_FACTOR))
        self._derive_tau()

    def set(self, keyword: NumericPropertyKeyword, prop: NumericProperty) -> None:
        """Generic property setter."""
        if keyword is NumericPropertyKeyword.GRID_DENSITY:
            self.set_grid_density(prop)
        elif keyword is NumericPropertyKeyword.TAU_FACTOR:
            self.set_time_factor(prop)
        else:
            raise ConfigurationError(f"Property not recognised by {type(self).__name__}: {keyword}")

    def listed_properties(self) -> list[NumericProperty]:
        return [
            derive(NumericPropertyKeyword.GRID_DENSITY, self.grid_density),
            derive(NumericPropertyKeyword.TAU_FACTOR, self.tau_factor),
        ]

    # ------------------------------------------------------------------
    def grid_time(self, time: float, time_factor: float) -> float:
        """Convert a physical time to the nearest whole multiple of ``tau``."""
        return round_half_away((time / time_factor) / self.tau) * self.tau

    def grid_axial_distance(self, distance: float, length_factor: float) -> float:
        """Convert a physical distance to the nearest whole multiple of ``hx``."""
        return round_half_away((distance / length_factor) / self.hx) * self.hx

    def copy(self) -> "Grid":
        return type(self)(
            derive(NumericPropertyKeyword.GRID_DENSITY, self.grid_density),
            derive(NumericPropertyKeyword.TAU_FACTOR, self.tau_factor),
        )


class Grid2D(Grid):
    """
    Grid of the axisymmetric problem, adding the radial step ``hy``.

    ``hy`` follows ``hx`` whenever the density changes, and the time step
    becomes ``tau = tau_factor * (hx**2 + hy**2)``.
    """

    def _on_density_change(self) -> None:
        self.hy = self.hx

    def _derive_tau(self) -> None:
        self.tau = self.tau_factor * (self.hx**2 + self.hy**2)

    def grid_radial_distance(self, radial: float, length_factor: float) -> float:
        """Convert a physical radius to the nearest whole multiple of ``hy``."""
        return round_half_away((radial / length_factor) / self.hy) * self.hy

    def __repr__(self) -> str:
        return f"{super().__repr__()[:-1]}, hy={self.hy:.4g})"
