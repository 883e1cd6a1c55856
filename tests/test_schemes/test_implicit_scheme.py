from __future__ import annotations

import numpy as np
import pytest

from flashfd.exceptions import NonConvergenceError
from flashfd.problem import BoundaryModel
from flashfd.schemes import ImplicitScheme, SchemeConfig


def _solve(problem, n: int, time_limit: float = 0.3, **config) -> np.ndarray:
    scheme = ImplicitScheme(SchemeConfig(grid_density=n, tau_factor=0.25, time_limit=time_limit, **config))
    scheme.solve(problem)
    return problem.curve.temperature.copy()


def test_defaults() -> None:
    scheme = ImplicitScheme()
    assert scheme.grid.grid_density == 30
    assert scheme.grid.tau_factor == pytest.approx(0.25)


@pytest.mark.parametrize("n, expected", [(10, 4), (20, 16), (40, 64)])
def test_steps_per_sample(make_problem, n: int, expected: int) -> None:
    problem = make_problem(num_points=30)
    scheme = ImplicitScheme(SchemeConfig(grid_density=n, tau_factor=0.25, time_limit=0.3))
    assert scheme.steps_per_sample(problem, 30) == expected


def test_refinement_converges(make_problem) -> None:
    curves = [_solve(make_problem(num_points=30), n) for n in (10, 20, 40)]
    coarse = np.max(np.abs(curves[0] - curves[1]))
    fine = np.max(np.abs(curves[1] - curves[2]))
    assert fine < coarse
    assert coarse / fine > 1.5


def test_sample_times_shared_across_refinements(make_problem) -> None:
    times = []
    for n in (10, 20):
        problem = make_problem(num_points=30)
        _solve(problem, n)
        times.append(problem.curve.time.copy())
    np.testing.assert_allclose(times[0], times[1])
    assert times[0][1] == pytest.approx(0.01)


def test_linear_rear_loss_lowers_late_signal(make_problem) -> None:
    adiabatic = _solve(make_problem(), 20, time_limit=1.0)
    lossy = _solve(make_problem(rear_biot=1.0), 20, time_limit=1.0)
    # Both are normalised to their peak; losses make the curve peak and fall.
    assert lossy[-1] < adiabatic[-1]


def test_nonlinear_run_terminates(make_problem) -> None:
    problem = make_problem(boundary=BoundaryModel.NONLINEAR, front_biot=0.2, rear_biot=0.2)
    _solve(problem, 20, time_limit=0.5)
    assert problem.curve.max_temperature() == pytest.approx(problem.maximum_temperature)
    assert 0.0 < problem.maximum_temperature < problem.maximum_heating()


def test_nonlinear_iteration_cap_raises(make_problem) -> None:
    problem = make_problem(boundary=BoundaryModel.NONLINEAR, front_biot=0.2)
    with pytest.raises(NonConvergenceError, match="implicit"):
        _solve(problem, 20, max_iterations=1)
