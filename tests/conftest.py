"""Pytest configuration and shared fixtures for flashfd tests.

This module provides:
- A deterministic numpy RNG fixture
- Builders for the problem statements used across the scheme tests
"""

import os
from typing import Callable

import numpy as np
import pytest

from flashfd.problem import Geometry, HeatingCurve, Problem, Pulse


@pytest.fixture(scope="function")
def rng() -> np.random.Generator:
    """Provide a deterministic numpy RNG for tests.

    Uses seed from TEST_RNG_SEED environment variable (default: 0).
    """
    seed = int(os.environ.get("TEST_RNG_SEED", "0"))
    return np.random.default_rng(seed)


@pytest.fixture(scope="function", autouse=True)
def set_random_seeds() -> None:
    """Seed numpy's global generator for every test."""
    np.random.seed(int(os.environ.get("TEST_RNG_SEED", "0")))


@pytest.fixture
def make_problem() -> Callable[..., Problem]:
    """Return a builder of problems with a unit diffusion time (``l^2/a = 1 s``).

    Keyword arguments override :class:`Problem` fields; ``pulse_width`` and
    ``num_points`` are shortcuts for the pulse and curve.
    """

    def build(pulse_width: float = 0.02, num_points: int = 50, **overrides) -> Problem:
        spot = overrides.pop("spot_diameter", 10e-3)
        fields = dict(
            diffusivity=1e-6,
            thickness=1e-3,
            pulse=Pulse(width=pulse_width, spot_diameter=spot),
            curve=HeatingCurve(num_points),
        )
        fields.update(overrides)
        return Problem(**fields)

    return build


@pytest.fixture
def make_problem_2d(make_problem: Callable[..., Problem]) -> Callable[..., Problem]:
    """Like ``make_problem`` but for the axisymmetric geometry."""

    def build(**overrides) -> Problem:
        overrides.setdefault("geometry", Geometry.TWO_DIMENSIONAL)
        return make_problem(**overrides)

    return build
