"""Radiative boundary flux and the bounded fixed-point loop used to resolve it."""

from __future__ import annotations

from typing import Callable

import numpy as np

from ..exceptions import NonConvergenceError


def radiative_flux(
    u: float | np.ndarray,
    biot: float,
    test_temperature: float,
    maximum_heating: float,
) -> float | np.ndarray:
    """
    Normalised radiative loss at a face with dimensionless temperature ``u``.

    ``f(u) = Bi T0 / (4 dT) * ((u dT / T0 + 1)**4 - 1)``, where ``T0`` is the
    test temperature and ``dT`` the adiabatic temperature rise. For small
    ``u dT / T0`` this reduces to the linear loss ``Bi * u``.
    """
    ratio = maximum_heating / test_temperature
    return biot / (4.0 * ratio) * ((u * ratio + 1.0) ** 4 - 1.0)


def converge(
    iterate: Callable[[], float | np.ndarray],
    initial: float | np.ndarray,
    precision: float,
    max_iterations: int,
    label: str,
) -> float | np.ndarray:
    """
    Run ``iterate`` until its result changes by at most ``precision``.

    ``iterate`` performs one substitution and returns the tracked value(s);
    the largest absolute change is compared against ``precision``.

    Raises:
        NonConvergenceError: If ``max_iterations`` substitutions are not enough.
    """
    previous = np.asarray(initial, dtype=float).copy()
    residual = np.inf
    for _ in range(max_iterations):
        current = iterate()
        residual = float(np.max(np.abs(np.asarray(current) - previous)))
        if residual <= precision:
            return current
        previous = np.asarray(current, dtype=float).copy()
    raise NonConvergenceError(label, max_iterations, residual)
