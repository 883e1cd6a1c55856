"""
Finite-difference schemes for the laser flash heat-conduction problem.

* `ExplicitScheme`, `ImplicitScheme`, `MixedScheme` – one-dimensional slab
  solvers (forward Euler, backward Euler and Crank–Nicolson).
* `ADIScheme` – Peaceman–Rachford solver for the axisymmetric cylinder with
  side losses and a finite pyrometer spot.
* `Grid` / `Grid2D` and `DiscretePulse` / `DiscretePulse2D` – the grid and
  pulse pair each solve calibrates before marching.

Every scheme handles both linearised and radiative (fourth-power) face
losses; the latter are resolved by bounded fixed-point iteration.

Example
-------
>>> from flashfd.problem import Problem
>>> from flashfd.schemes import SchemeConfig, create_scheme
>>> problem = Problem(front_biot=0.1, rear_biot=0.1)
>>> scheme = create_scheme("implicit", SchemeConfig(time_limit=0.5))
>>> scheme.solve(problem)
>>> round(problem.curve.max_temperature(), 6)
1.0
"""

from .adi import ADIScheme
from .base import DifferenceScheme
from .config import SchemeConfig
from .discrete_pulse import DiscretePulse, DiscretePulse2D
from .explicit import ExplicitScheme
from .factory import SchemeKind, available_schemes, create_scheme, scheme_class
from .grid import Grid, Grid2D, round_half_away
from .halo import HaloBuffer
from .implicit import ImplicitScheme
from .mixed import MixedScheme

__all__ = [
    "ADIScheme",
    "DifferenceScheme",
    "DiscretePulse",
    "DiscretePulse2D",
    "ExplicitScheme",
    "Grid",
    "Grid2D",
    "HaloBuffer",
    "ImplicitScheme",
    "MixedScheme",
    "SchemeConfig",
    "SchemeKind",
    "available_schemes",
    "create_scheme",
    "round_half_away",
    "scheme_class",
]
