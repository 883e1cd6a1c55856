"""Analytical rear-face response of an adiabatic slab (Parker et al., 1961)."""

from __future__ import annotations

import numpy as np

DEFAULT_TERMS = 30

_FOURIER_EPS = 1e-8


def adiabatic_solution(fourier: np.ndarray | float, terms: int = DEFAULT_TERMS) -> np.ndarray:
    """
    Normalised rear-face temperature of an adiabatic slab after an instantaneous pulse.

    ``T(l, Fo) / T_max = 1 + 2 * sum_{n=1}^{terms} (-1)^n exp(-n^2 pi^2 Fo)``

    Parameters
    ----------
    fourier:
        Fourier number(s) ``Fo = a t / l^2``.
    terms:
        Number of series terms kept.

    Returns
    -------
    numpy.ndarray
        Normalised temperatures, zero where ``Fo`` is effectively zero.
    """
    if terms < 1:
        raise ValueError(f"terms must be at least 1, got {terms}.")
    fo = np.atleast_1d(np.asarray(fourier, dtype=float))
    n = np.arange(1, terms + 1, dtype=float)
    signs = np.where(n % 2 == 0, 1.0, -1.0)
    series = np.exp(-np.outer(fo, (n * np.pi) ** 2)) @ signs
    result = 1.0 + 2.0 * series
    result[fo < _FOURIER_EPS] = 0.0
    return result
