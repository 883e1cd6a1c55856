"""Crank-Nicolson scheme for the one-dimensional problems."""

from __future__ import annotations

from typing import ClassVar

import numpy as np

from ..problem.statements import Problem, ProblemKind
from .base import Advance, DifferenceScheme, Probe
from .discrete_pulse import DiscretePulse
from .nonlinear import converge, radiative_flux
from .tridiagonal import alpha_coefficients, back_substitute, beta_coefficients


class MixedScheme(DifferenceScheme):
    """
    Semi-implicit (Crank-Nicolson) scheme.

    The diffusion operator is averaged between the old and new layers, which
    gives ``b = 2/tau + 2/hx**2`` and a right-hand side carrying the explicit
    half of the Laplacian. The pulse is sampled just after the start and just
    before the end of each step and the two samples are summed.
    """

    DEFAULT_GRID_DENSITY: ClassVar[int] = 30
    DEFAULT_TAU_FACTOR: ClassVar[float] = 1.0

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
        rhs = np.zeros(n + 1, dtype=float)

        h2 = h**2
        a = c = 1.0 / h2
        b = 2.0 / tau + 2.0 / h2
        bi1 = problem.front_biot
        bi2 = problem.rear_biot

        def explicit_half() -> None:
            rhs[1:-1] = -2.0 * U[1:-1] / tau - (U[2:] - 2.0 * U[1:-1] + U[:-2]) / h2

        def pulse_sum(m: int) -> float:
            return pulse.evaluate_at((m - 1 + eps) * tau) + pulse.evaluate_at((m - eps) * tau)

        def probe() -> float:
            return float(V[n])

        if not problem.kind.is_nonlinear:
            front_denominator = bi1 * h * tau + h2 + tau
            alpha = alpha_coefficients(a, b, c, tau / front_denominator, n)
            rear_denominator = bi2 * h * tau + h2 - tau * (alpha[n] - 1.0)

            def advance(m: int) -> None:
                explicit_half()
                beta1 = (
                    h2 * U[0] - bi1 * h * tau * U[0]
                    + h * tau * pulse_sum(m)
                    - tau * (U[0] - U[1])
                ) / front_denominator
                beta = beta_coefficients(a, b, alpha, rhs, beta1)
                last = (
                    (h2 - bi2 * h * tau) * U[n]
                    + tau * beta[n]
                    - tau * (U[n] - U[n - 1])
                ) / rear_denominator
                V[:] = back_substitute(alpha, beta, last)
                U[:] = V

            return advance, probe

        alpha = alpha_coefficients(a, b, c, tau / (h2 + tau), n)
        rear_denominator = h2 + tau - tau * alpha[n]
        dT = problem.maximum_heating()
        t0 = problem.test_temperature
        precision = problem.nonlinear_precision
        max_iterations = self.max_iterations

        def advance_nonlinear(m: int) -> None:
            explicit_half()
            q = pulse_sum(m)
            front_old = radiative_flux(U[0], bi1, t0, dT)
            rear_old = radiative_flux(U[n], bi2, t0, dT)

            def sweep() -> float:
                beta1 = (
                    (h2 - tau) * U[0] + tau * U[1]
                    + h * tau * q
                    - h * tau * (radiative_flux(V[0], bi1, t0, dT) + front_old)
                ) / (h2 + tau)
                beta = beta_coefficients(a, b, alpha, rhs, beta1)
                last = (
                    tau * beta[n] + (h2 - tau) * U[n] + tau * U[n - 1]
                    - h * tau * (radiative_flux(V[n], bi2, t0, dT) + rear_old)
                ) / rear_denominator
                V[:] = back_substitute(alpha, beta, last)
                return 0.5 * (V[0] + V[n])

            converge(sweep, 0.5 * (V[0] + V[n]), precision, max_iterations, "mixed boundary sweep")
            U[:] = V

        return advance_nonlinear, probe
