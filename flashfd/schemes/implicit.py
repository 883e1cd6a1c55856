"""Fully implicit scheme for the one-dimensional problems."""

from __future__ import annotations

from typing import ClassVar

import numpy as np

from ..problem.statements import Problem, ProblemKind
from .base import Advance, DifferenceScheme, Probe
from .discrete_pulse import DiscretePulse
from .nonlinear import converge, radiative_flux
from .tridiagonal import alpha_coefficients, back_substitute, beta_coefficients


class ImplicitScheme(DifferenceScheme):
    """
    Backward-Euler scheme.

    Each step solves ``a V[i-1] - b V[i] + c V[i+1] = -U[i]/tau`` with
    ``a = c = 1/hx**2`` and ``b = 1/tau + 2/hx**2`` by the Thomas sweep. The
    front face enters through ``alpha_1``/``beta_1`` and the rear value is
    obtained in closed form before back substitution. Unconditionally stable.
    """

    DEFAULT_GRID_DENSITY: ClassVar[int] = 30
    DEFAULT_TAU_FACTOR: ClassVar[float] = 0.25

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

        a = c = 1.0 / h**2
        b = 1.0 / tau + 2.0 / h**2
        h2 = h**2
        bi1 = problem.front_biot
        bi2 = problem.rear_biot

        def probe() -> float:
            return float(V[n])

        if not problem.kind.is_nonlinear:
            front_denominator = 2.0 * bi1 * h * tau + 2.0 * tau + h2
            alpha = alpha_coefficients(a, b, c, 2.0 * tau / front_denominator, n)
            rear_denominator = 2.0 * bi2 * h * tau + h2 - 2.0 * tau * (alpha[n] - 1.0)

            def advance(m: int) -> None:
                q = pulse.evaluate_at((m - eps) * tau)
                beta1 = (h2 * U[0] + 2.0 * h * tau * q) / front_denominator
                beta = beta_coefficients(a, b, alpha, -U / tau, beta1)
                last = (h2 * U[n] + 2.0 * tau * beta[n]) / rear_denominator
                V[:] = back_substitute(alpha, beta, last)
                U[:] = V

            return advance, probe

        alpha = alpha_coefficients(a, b, c, 2.0 * tau / (h2 + 2.0 * tau), n)
        rear_denominator = h2 + 2.0 * tau - 2.0 * tau * alpha[n]
        dT = problem.maximum_heating()
        t0 = problem.test_temperature
        precision = problem.nonlinear_precision
        max_iterations = self.max_iterations

        def advance_nonlinear(m: int) -> None:
            q = pulse.evaluate_at((m - eps) * tau)
            rhs = -U / tau

            def sweep() -> float:
                beta1 = (
                    h2 * U[0] + 2.0 * h * tau * (q - radiative_flux(V[0], bi1, t0, dT))
                ) / (h2 + 2.0 * tau)
                beta = beta_coefficients(a, b, alpha, rhs, beta1)
                last = (
                    h2 * U[n] + 2.0 * tau * beta[n]
                    - 2.0 * h * tau * radiative_flux(V[n], bi2, t0, dT)
                ) / rear_denominator
                V[:] = back_substitute(alpha, beta, last)
                return 0.5 * (V[0] + V[n])

            converge(sweep, 0.5 * (V[0] + V[n]), precision, max_iterations, "implicit boundary sweep")
            U[:] = V

        return advance_nonlinear, probe
