"""
Thomas algorithm in sweep form.

The systems solved by the implicit schemes read

    a_i V[i-1] - b_i V[i] + c_i V[i+1] = F[i],   i = 1 .. n-1,

closed by a front relation ``V[0] = alpha_1 V[1] + beta_1`` and a rear value
``V[n]`` that each scheme derives from its own boundary condition. The sweep
coefficients are split so ``alpha`` (which depends only on the operator) can
be computed once per solve, while ``beta`` is refreshed every step.

``F`` may be two-dimensional; the sweep then runs along axis 0 for every
column at once.
"""

from __future__ import annotations

import numpy as np


def _as_profile(coefficient: float | np.ndarray, size: int) -> np.ndarray:
    return np.broadcast_to(np.asarray(coefficient, dtype=float), (size,))


def alpha_coefficients(
    a: float | np.ndarray,
    b: float | np.ndarray,
    c: float | np.ndarray,
    alpha1: float,
    n: int,
) -> np.ndarray:
    """Return ``alpha[0..n]`` with ``alpha[1] = alpha1``; ``alpha[0]`` is unused."""
    a = _as_profile(a, n + 1)
    b = _as_profile(b, n + 1)
    c = _as_profile(c, n + 1)
    alpha = np.zeros(n + 1, dtype=float)
    alpha[1] = alpha1
    for i in range(1, n):
        alpha[i + 1] = c[i] / (b[i] - a[i] * alpha[i])
    return alpha


def beta_coefficients(
    a: float | np.ndarray,
    b: float | np.ndarray,
    alpha: np.ndarray,
    rhs: np.ndarray,
    beta1: float | np.ndarray,
) -> np.ndarray:
    """Return ``beta`` shaped like ``rhs``, with ``beta[1] = beta1``."""
    n = alpha.size - 1
    a = _as_profile(a, n + 1)
    b = _as_profile(b, n + 1)
    beta = np.zeros_like(rhs, dtype=float)
    beta[1] = beta1
    for i in range(1, n):
        beta[i + 1] = (a[i] * beta[i] - rhs[i]) / (b[i] - a[i] * alpha[i])
    return beta


def back_substitute(
    alpha: np.ndarray, beta: np.ndarray, last: float | np.ndarray
) -> np.ndarray:
    """Recover ``V`` from ``V[j] = alpha[j+1] V[j+1] + beta[j+1]`` given ``V[n]``."""
    n = alpha.size - 1
    solution = np.empty_like(beta, dtype=float)
    solution[n] = last
    for j in range(n - 1, -1, -1):
        solution[j] = alpha[j + 1] * solution[j + 1] + beta[j + 1]
    return solution
