from __future__ import annotations

import numpy as np
import pytest

from flashfd.exceptions import ConfigurationError
from flashfd.problem import HeatingCurve
from flashfd.properties import NumericPropertyKeyword, derive


def test_new_curve_is_zeroed() -> None:
    curve = HeatingCurve(5)
    assert len(curve) == 5
    assert np.all(curve.time == 0.0)
    assert np.all(curve.temperature == 0.0)


def test_fill_and_summaries() -> None:
    curve = HeatingCurve(4)
    curve.fill([0.0, 0.1, 0.2, 0.3], [0.0, 0.5, 2.0, 1.5])
    assert curve.max_temperature() == pytest.approx(2.0)
    assert curve.time_limit() == pytest.approx(0.3)
    curve.scale(0.5)
    assert curve.max_temperature() == pytest.approx(1.0)


def test_fill_rejects_wrong_length() -> None:
    curve = HeatingCurve(4)
    with pytest.raises(ConfigurationError):
        curve.fill([0.0, 1.0], [0.0, 1.0])


def test_set_num_points_requires_numpoints_property() -> None:
    curve = HeatingCurve(4)
    curve.set_num_points(derive(NumericPropertyKeyword.NUMPOINTS, 8))
    assert len(curve.time) == 8
    with pytest.raises(ConfigurationError):
        curve.set_num_points(derive(NumericPropertyKeyword.GRID_DENSITY, 8))


def test_too_few_points_rejected() -> None:
    with pytest.raises(ConfigurationError):
        HeatingCurve(1)


def test_copy_is_independent() -> None:
    curve = HeatingCurve(3)
    curve.fill([0.0, 1.0, 2.0], [0.0, 1.0, 1.0])
    twin = curve.copy()
    twin.scale(3.0)
    assert curve.max_temperature() == pytest.approx(1.0)
    assert twin.max_temperature() == pytest.approx(3.0)
