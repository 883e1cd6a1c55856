from __future__ import annotations

import numpy as np
import pytest

from flashfd.exceptions import ConfigurationError
from flashfd.problem import (
    BoundaryModel,
    Geometry,
    HeatingCurve,
    Problem,
    ProblemKind,
    Pulse,
    PulseShape,
)


def test_time_factor_is_diffusion_time() -> None:
    problem = Problem(diffusivity=2e-6, thickness=2e-3)
    assert problem.time_factor() == pytest.approx(2.0)


def test_maximum_heating_formula() -> None:
    problem = Problem(
        thickness=1e-3,
        density=2000.0,
        specific_heat=500.0,
        absorbed_energy=0.1,
        pulse=Pulse(spot_diameter=10e-3),
    )
    expected = 4.0 * 0.1 / (np.pi * 1e-4 * 1e-3 * 2000.0 * 500.0)
    assert problem.maximum_heating() == pytest.approx(expected)


@pytest.mark.parametrize(
    "geometry, boundary, kind",
    [
        (Geometry.ONE_DIMENSIONAL, BoundaryModel.LINEAR, ProblemKind.LINEAR_1D),
        (Geometry.ONE_DIMENSIONAL, BoundaryModel.NONLINEAR, ProblemKind.NONLINEAR_1D),
        (Geometry.TWO_DIMENSIONAL, BoundaryModel.LINEAR, ProblemKind.LINEAR_2D),
        (Geometry.TWO_DIMENSIONAL, BoundaryModel.NONLINEAR, ProblemKind.NONLINEAR_2D),
    ],
)
def test_kind_tags_geometry_and_boundary(
    geometry: Geometry, boundary: BoundaryModel, kind: ProblemKind
) -> None:
    problem = Problem(geometry=geometry, boundary=boundary)
    assert problem.kind is kind
    assert kind.geometry is geometry
    assert kind.is_nonlinear == (boundary is BoundaryModel.NONLINEAR)
    assert kind.is_two_dimensional == (geometry is Geometry.TWO_DIMENSIONAL)


@pytest.mark.parametrize(
    "field, value",
    [("diffusivity", 0.0), ("thickness", -1e-3), ("front_biot", -0.1), ("diameter", 0.0)],
)
def test_invalid_parameters_rejected(field: str, value: float) -> None:
    with pytest.raises(ConfigurationError, match=field):
        Problem(**{field: value})


def test_pulse_validation() -> None:
    with pytest.raises(ConfigurationError):
        Pulse(width=0.0)
    with pytest.raises(ConfigurationError):
        Pulse(spot_diameter=-1.0)
    with pytest.raises(ConfigurationError):
        Pulse(shape="square")
    assert Pulse().shape is PulseShape.RECTANGULAR


def test_copy_does_not_share_curve() -> None:
    problem = Problem(curve=HeatingCurve(10))
    twin = problem.copy()
    twin.curve.scale(2.0)
    twin.curve.temperature[0] = 5.0
    assert problem.curve.temperature[0] == 0.0
    assert twin.pulse is problem.pulse


def test_classic_solution_sampled_on_curve_times() -> None:
    problem = Problem(maximum_temperature=2.0, curve=HeatingCurve(11))
    problem.curve.fill(np.linspace(0.0, 1.0, 11), np.zeros(11))
    classic = problem.classic_solution()
    np.testing.assert_allclose(classic.time, problem.curve.time)
    assert classic.temperature[0] == 0.0
    assert classic.temperature[-1] == pytest.approx(2.0, rel=1e-3)
    assert np.all(np.diff(classic.temperature) >= 0.0)


@pytest.mark.parametrize("value", [0.0, 0.5])
def test_nonlinear_precision_checked_against_property_range(value: float) -> None:
    with pytest.raises(ConfigurationError, match="outside"):
        Problem(nonlinear_precision=value)


def test_nonlinear_precision_kept_as_float() -> None:
    assert Problem(nonlinear_precision=1e-4).nonlinear_precision == pytest.approx(1e-4)
