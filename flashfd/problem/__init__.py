"""
Problem statements for laser flash simulations.

* `Problem` – thermal and geometric parameters plus the heating curve.
* `Pulse` / `PulseShape` – the laser pulse acting on the front face.
* `HeatingCurve` – the fixed-length rear-face response.
* `adiabatic_solution` – Parker's analytical reference.
"""

from .adiabatic import adiabatic_solution
from .curve import HeatingCurve
from .pulse import Pulse, PulseShape
from .statements import BoundaryModel, Geometry, Problem, ProblemKind

__all__ = [
    "BoundaryModel",
    "Geometry",
    "HeatingCurve",
    "Problem",
    "ProblemKind",
    "Pulse",
    "PulseShape",
    "adiabatic_solution",
]
