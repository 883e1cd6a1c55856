"""
Alternating-direction implicit scheme for the axisymmetric problems.

The field is stored as ``T[i, j]`` with ``i`` the radial index (units of the
sample radius, step ``hy``) and ``j`` the axial index (units of the
thickness, step ``hx``). In these units the radial operator carries the
aspect factor ``omega = 2 l / d``:

    Lr T = omega**2 / hy**2 [(1 + 1/(2i)) T[i+1] - 2 T[i] + (1 - 1/(2i)) T[i-1]]
    La T = (T[j+1] - 2 T[j] + T[j-1]) / hx**2

with the symmetric limit ``Lr T[0] = 4 omega**2 / hy**2 (T[1] - T[0])`` on
the axis. The side Biot number is referred to the thickness like the face
ones, so on the rim ``dT/dr = -(Bi_side / omega) T`` in radius units. Face
conditions enter through ghost values held in a
:class:`~flashfd.schemes.halo.HaloBuffer`.

Each step is a Peaceman-Rachford pair of half steps: radially implicit with
the axial operator explicit, then axially implicit with the radial operator
explicit. The rear-face signal is averaged over the pyrometer field of view.
"""

from __future__ import annotations

from typing import ClassVar

import numpy as np

from ..logging import get_logger
from ..problem.statements import Problem, ProblemKind
from .base import Advance, DifferenceScheme, Probe
from .discrete_pulse import DiscretePulse, DiscretePulse2D
from .grid import Grid2D, round_half_away
from .halo import HaloBuffer
from .nonlinear import converge, radiative_flux
from .tridiagonal import alpha_coefficients, back_substitute, beta_coefficients

logger = get_logger(__name__)


class ADIScheme(DifferenceScheme):
    """Peaceman-Rachford ADI scheme on a :class:`Grid2D`."""

    DEFAULT_GRID_DENSITY: ClassVar[int] = 30
    DEFAULT_TAU_FACTOR: ClassVar[float] = 1.0

    grid_class: ClassVar[type[Grid2D]] = Grid2D
    pulse_class: ClassVar[type[DiscretePulse2D]] = DiscretePulse2D
    domain: ClassVar[frozenset[ProblemKind]] = frozenset(
        {ProblemKind.LINEAR_2D, ProblemKind.NONLINEAR_2D}
    )

    def detector_index(self, problem: Problem) -> int:
        """Last radial index inside the pyrometer field of view."""
        n = self.grid.grid_density
        index = round_half_away((problem.pyrometer_spot / problem.diameter) / self.grid.hy)
        return min(max(index, 0), n)

    def _prepare(self, problem: Problem, pulse: DiscretePulse) -> tuple[Advance, Probe]:
        grid = self.grid
        n = grid.grid_density
        hx = grid.hx
        hy = grid.hy
        tau = grid.tau
        eps = self.EPS

        omega = 2.0 * problem.thickness / problem.diameter
        radial_scale = omega**2 / hy**2
        last_index = self.detector_index(problem)
        logger.debug(
            "ADI: omega=%.4g, detector averages radial nodes 0..%d of %d",
            omega,
            last_index,
            n,
        )

        indices = np.arange(n + 1, dtype=float)
        inverse = np.zeros(n + 1, dtype=float)
        inverse[1:] = 1.0 / (2.0 * indices[1:])
        lower = radial_scale * (1.0 - inverse)
        upper = radial_scale * (1.0 + inverse)

        # Radial pulse coordinates; the rim node is nudged inside the sample.
        radius = indices * hy
        radius[n] = (n - eps) * hy

        nonlinear = problem.kind.is_nonlinear
        bi1 = problem.front_biot
        bi2 = problem.rear_biot
        bi3 = problem.side_biot
        dT = problem.maximum_heating()
        t0 = problem.test_temperature
        precision = problem.nonlinear_precision
        max_iterations = self.max_iterations

        def loss(values: np.ndarray, biot: float) -> np.ndarray:
            if nonlinear:
                return radiative_flux(values, biot, t0, dT)
            return biot * values

        U = np.zeros((n + 1, n + 1), dtype=float)
        W = np.zeros_like(U)
        V = np.zeros_like(U)
        buffer = HaloBuffer(n)

        def axial_operator(field: np.ndarray, q: np.ndarray) -> np.ndarray:
            buffer.load(field)
            buffer.front[:] = field[:, 1] + 2.0 * hx * (q - loss(field[:, 0], bi1))
            buffer.rear[:] = field[:, n - 1] - 2.0 * hx * loss(field[:, n], bi2)
            return (
                buffer.axial_shift(1) - 2.0 * buffer.interior + buffer.axial_shift(-1)
            ) / hx**2

        def radial_operator(field: np.ndarray) -> np.ndarray:
            buffer.load(field)
            buffer.axis[:] = field[1]
            buffer.side[:] = field[n - 1] - 2.0 * hy / omega * loss(field[n], bi3)
            result = (
                upper[:, None] * buffer.radial_shift(1)
                - 2.0 * radial_scale * buffer.interior
                + lower[:, None] * buffer.radial_shift(-1)
            )
            result[0] = 4.0 * radial_scale * (field[1] - field[0])
            return result

        # Radial half step: lower W[i-1] - b W[i] + upper W[i+1] = -(2U/tau + La U).
        b_radial = 2.0 / tau + 2.0 * radial_scale
        axis_denominator = 2.0 / tau + 4.0 * radial_scale
        alpha_radial = alpha_coefficients(
            lower, b_radial, upper, 4.0 * radial_scale / axis_denominator, n
        )
        side_coupling = 2.0 * radial_scale
        side_flux = 2.0 * upper[n] * hy / omega
        if nonlinear:
            side_denominator = b_radial - side_coupling * alpha_radial[n]
        else:
            side_denominator = b_radial + side_flux * bi3 - side_coupling * alpha_radial[n]

        def radial_pass(qa: np.ndarray) -> None:
            source = 2.0 * U / tau + axial_operator(U, qa)
            beta = beta_coefficients(
                lower, b_radial, alpha_radial, -source, source[0] / axis_denominator
            )
            numerator = side_coupling * beta[n] + source[n]

            if not nonlinear:
                W[:] = back_substitute(alpha_radial, beta, numerator / side_denominator)
                return

            def side() -> np.ndarray:
                W[n] = (numerator - side_flux * radiative_flux(W[n], bi3, t0, dT)) / side_denominator
                return W[n].copy()

            W[n] = U[n]
            converge(side, W[n], precision, max_iterations, "ADI side face")
            W[:] = back_substitute(alpha_radial, beta, W[n].copy())

        # Axial half step: V[j-1]/hx**2 - b V[j] + V[j+1]/hx**2 = -(2W/tau + Lr W).
        a_axial = 1.0 / hx**2
        b_axial = 2.0 / tau + 2.0 / hx**2
        if nonlinear:
            front_denominator = b_axial
            rear_extra = 0.0
        else:
            front_denominator = b_axial + 2.0 * bi1 / hx
            rear_extra = 2.0 * bi2 / hx
        alpha_axial = alpha_coefficients(
            a_axial, b_axial, a_axial, (2.0 / hx**2) / front_denominator, n
        )
        rear_denominator = b_axial + rear_extra - 2.0 / hx**2 * alpha_axial[n]

        def axial_pass(qb: np.ndarray) -> None:
            source = (2.0 * W / tau + radial_operator(W)).T

            def sweep() -> np.ndarray:
                front_source = source[0] + 2.0 * qb / hx
                rear_source = source[n]
                if nonlinear:
                    front_source = front_source - 2.0 / hx * radiative_flux(V[:, 0], bi1, t0, dT)
                    rear_source = rear_source - 2.0 / hx * radiative_flux(V[:, n], bi2, t0, dT)
                beta = beta_coefficients(
                    a_axial, b_axial, alpha_axial, -source, front_source / front_denominator
                )
                last = (2.0 / hx**2 * beta[n] + rear_source) / rear_denominator
                V[:] = back_substitute(alpha_axial, beta, last).T
                return 0.5 * (V[:, 0] + V[:, n])

            if nonlinear:
                converge(sweep, 0.5 * (V[:, 0] + V[:, n]), precision, max_iterations, "ADI axial sweep")
            else:
                sweep()

        def advance(m: int) -> None:
            qa = pulse.evaluate_at((m - 1 + eps) * tau, radius)
            qb = pulse.evaluate_at((m - eps) * tau, radius)
            radial_pass(qa)
            axial_pass(qb)
            U[:] = V

        def probe() -> float:
            return float(np.mean(V[: last_index + 1, n]))

        return advance, probe
