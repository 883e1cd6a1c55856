"""
Problem statements consumed by the difference schemes.

A :class:`Problem` carries the thermal and geometric parameters of one laser
flash measurement, the pulse, and the :class:`HeatingCurve` the solver fills.
Its :class:`ProblemKind` tells which schemes may solve it.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum

import numpy as np

from ..exceptions import ConfigurationError
from ..properties import NumericPropertyKeyword, derive
from .adiabatic import DEFAULT_TERMS, adiabatic_solution
from .curve import HeatingCurve
from .pulse import Pulse


class Geometry(Enum):
    ONE_DIMENSIONAL = "1d"
    TWO_DIMENSIONAL = "2d"


class BoundaryModel(Enum):
    """Heat-loss model at the sample faces."""

    LINEAR = "linear"
    NONLINEAR = "nonlinear"


class ProblemKind(Enum):
    """Closed set of problem variants, one per geometry and loss model."""

    LINEAR_1D = (Geometry.ONE_DIMENSIONAL, BoundaryModel.LINEAR)
    NONLINEAR_1D = (Geometry.ONE_DIMENSIONAL, BoundaryModel.NONLINEAR)
    LINEAR_2D = (Geometry.TWO_DIMENSIONAL, BoundaryModel.LINEAR)
    NONLINEAR_2D = (Geometry.TWO_DIMENSIONAL, BoundaryModel.NONLINEAR)

    @property
    def geometry(self) -> Geometry:
        return self.value[0]

    @property
    def boundary(self) -> BoundaryModel:
        return self.value[1]

    @property
    def is_nonlinear(self) -> bool:
        return self.boundary is BoundaryModel.NONLINEAR

    @property
    def is_two_dimensional(self) -> bool:
        return self.geometry is Geometry.TWO_DIMENSIONAL

    @classmethod
    def of(cls, geometry: Geometry, boundary: BoundaryModel) -> "ProblemKind":
        return cls((geometry, boundary))


@dataclass
class Problem:
    """
    Laser flash problem statement.

    Args:
        diffusivity: Thermal diffusivity in m^2/s.
        thickness: Sample thickness in m.
        front_biot: Heat-loss Biot number of the irradiated face.
        rear_biot: Heat-loss Biot number of the rear face.
        maximum_temperature: Peak the linear solution is rescaled to.
        pulse: Laser pulse.
        curve: Heating curve the solvers write into.
        geometry: Slab (1-D) or axisymmetric cylinder (2-D).
        boundary: Linearised or radiative (fourth-power) heat losses.
        diameter: Sample diameter in m (2-D only).
        side_biot: Heat-loss Biot number of the lateral surface (2-D only).
        pyrometer_spot: Diameter of the detector field of view in m (2-D only).
        test_temperature: Ambient temperature in K (nonlinear only).
        density: Density in kg/m^3 (nonlinear only).
        specific_heat: Specific heat in J/(kg K) (nonlinear only).
        absorbed_energy: Pulse energy absorbed by the sample in J (nonlinear only).
        nonlinear_precision: Stopping tolerance of the nonlinear boundary iterations.
    """

    diffusivity: float = 1e-6
    thickness: float = 1e-3
    front_biot: float = 0.0
    rear_biot: float = 0.0
    maximum_temperature: float = 1.0
    pulse: Pulse = field(default_factory=Pulse)
    curve: HeatingCurve = field(default_factory=HeatingCurve)
    geometry: Geometry = Geometry.ONE_DIMENSIONAL
    boundary: BoundaryModel = BoundaryModel.LINEAR
    diameter: float = 10e-3
    side_biot: float = 0.0
    pyrometer_spot: float = 10e-3
    test_temperature: float = 298.0
    density: float = 2000.0
    specific_heat: float = 500.0
    absorbed_energy: float = 0.1
    nonlinear_precision: float = 1e-3

    def __post_init__(self) -> None:
        for name in (
            "diffusivity",
            "thickness",
            "maximum_temperature",
            "diameter",
            "pyrometer_spot",
            "test_temperature",
            "density",
            "specific_heat",
            "absorbed_energy",
        ):
            value = getattr(self, name)
            if value <= 0.0:
                raise ConfigurationError(f"{name} must be positive, got {value}.")
        self.nonlinear_precision = derive(
            NumericPropertyKeyword.NONLINEAR_PRECISION, self.nonlinear_precision
        ).value
        for name in ("front_biot", "rear_biot", "side_biot"):
            value = getattr(self, name)
            if value < 0.0:
                raise ConfigurationError(f"{name} must be non-negative, got {value}.")

    # ------------------------------------------------------------------
    @property
    def kind(self) -> ProblemKind:
        return ProblemKind.of(self.geometry, self.boundary)

    def time_factor(self) -> float:
        """Characteristic diffusion time ``l^2 / a`` converting Fourier numbers to seconds."""
        return self.thickness**2 / self.diffusivity

    def maximum_heating(self) -> float:
        """Adiabatic temperature rise ``4 Q / (pi d^2 l rho c_p)`` in kelvin."""
        d = self.pulse.spot_diameter
        return 4.0 * self.absorbed_energy / (
            np.pi * d * d * self.thickness * self.density * self.specific_heat
        )

    def classic_solution(self, terms: int = DEFAULT_TERMS) -> HeatingCurve:
        """Parker adiabatic solution sampled on the time axis of :attr:`curve`."""
        classic = HeatingCurve(self.curve.num_points)
        fourier = self.curve.time / self.time_factor()
        classic.fill(
            self.curve.time,
            adiabatic_solution(fourier, terms) * self.maximum_temperature,
        )
        return classic

    def copy(self) -> "Problem":
        """Independent copy, including its heating curve."""
        return replace(self, curve=self.curve.copy())
