from __future__ import annotations

import math

import numpy as np
import pytest

from flashfd.exceptions import NonConvergenceError
from flashfd.schemes.nonlinear import converge, radiative_flux


def test_radiative_flux_linearises_for_small_heating() -> None:
    u = np.linspace(0.0, 1.0, 11)
    flux = radiative_flux(u, biot=0.3, test_temperature=300.0, maximum_heating=1e-3)
    np.testing.assert_allclose(flux, 0.3 * u, rtol=1e-4)


def test_radiative_flux_exceeds_linear_loss_when_hot() -> None:
    flux = radiative_flux(1.0, biot=0.3, test_temperature=300.0, maximum_heating=30.0)
    assert flux > 0.3
    assert radiative_flux(0.0, 0.3, 300.0, 30.0) == 0.0


def test_converge_reaches_fixed_point() -> None:
    state = {"x": 1.0}

    def iterate() -> float:
        state["x"] = math.cos(state["x"])
        return state["x"]

    result = converge(iterate, state["x"], 1e-10, 500, "cosine")
    assert result == pytest.approx(0.7390851332, abs=1e-8)


def test_converge_tracks_arrays() -> None:
    state = {"x": np.array([1.0, 2.0])}

    def iterate() -> np.ndarray:
        state["x"] = 0.5 * state["x"]
        return state["x"]

    result = converge(iterate, state["x"], 1e-6, 100, "halving")
    assert np.all(np.abs(result) < 1e-5)


def test_converge_raises_at_cap() -> None:
    counter = {"calls": 0}

    def iterate() -> float:
        counter["calls"] += 1
        return float(counter["calls"])

    with pytest.raises(NonConvergenceError) as info:
        converge(iterate, 0.0, 1e-3, 7, "diverging loop")
    assert counter["calls"] == 7
    assert info.value.iterations == 7
    assert "diverging loop" in str(info.value)
    assert isinstance(info.value, RuntimeError)
