"""Forward-time, centred-space scheme for the one-dimensional problems."""

from __future__ import annotations

from typing import ClassVar

import numpy as np

from ..problem.statements import Problem, ProblemKind
from .base import Advance, DifferenceScheme, Probe
from .discrete_pulse import DiscretePulse
from .nonlinear import converge, radiative_flux


class ExplicitScheme(DifferenceScheme):
    """
    Explicit scheme.

    Interior nodes follow ``V[i] = U[i] + tau/hx**2 (U[i+1] - 2U[i] + U[i-1])``.
    The faces use a half-cell balance that reads the freshly updated neighbour,
    folding in the pulse at the front and the heat loss at both faces. The
    default time-step factor is the stability bound 0.5.
    """

    DEFAULT_GRID_DENSITY: ClassVar[int] = 80
    DEFAULT_TAU_FACTOR: ClassVar[float] = 0.5

    domain: ClassVar[frozenset[ProblemKind]] = frozenset(
        {ProblemKind.LINEAR_1D, ProblemKind.NONLINEAR_1D}
    )

    def _prepare(self, problem: Problem, pulse: DiscretePulse) -> tuple[Advance, Probe]:
        n = self.grid.grid_density
        h = self.grid.hx
        tau = self.grid.tau
        eps = self.EPS

        U = np.zeros(n + 1, dtype=float)
        V = np.zeros(n + 1, dtype=float)

        ratio = tau / h**2
        a11 = h**2 / (2.0 * tau)
        bi1 = problem.front_biot
        bi2 = problem.rear_biot

        def interior() -> None:
            V[1:-1] = U[1:-1] + ratio * (U[2:] - 2.0 * U[1:-1] + U[:-2])

        def probe() -> float:
            return float(V[n])

        if not problem.kind.is_nonlinear:

            def advance(m: int) -> None:
                interior()
                q = pulse.evaluate_at((m - eps) * tau)
                V[0] = (V[1] + a11 * U[0] + h * q) / (1.0 + a11 + h * bi1)
                V[n] = (V[n - 1] + a11 * U[n]) / (1.0 + a11 + h * bi2)
                U[:] = V

            return advance, probe

        a00 = 2.0 * tau / (h**2 + 2.0 * tau)
        dT = problem.maximum_heating()
        t0 = problem.test_temperature
        precision = problem.nonlinear_precision
        max_iterations = self.max_iterations

        def advance_nonlinear(m: int) -> None:
            interior()
            q = pulse.evaluate_at((m - eps) * tau)

            def front() -> float:
                V[0] = a00 * (V[1] + a11 * U[0] + h * (q - radiative_flux(V[0], bi1, t0, dT)))
                return V[0]

            def rear() -> float:
                V[n] = a00 * (V[n - 1] + a11 * U[n] - h * radiative_flux(V[n], bi2, t0, dT))
                return V[n]

            converge(front, V[0], precision, max_iterations, "explicit front face")
            converge(rear, V[n], precision, max_iterations, "explicit rear face")
            U[:] = V

        return advance_nonlinear, probe
