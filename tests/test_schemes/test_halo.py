from __future__ import annotations

import numpy as np

from flashfd.schemes.halo import HaloBuffer


def _loaded(n: int = 4) -> tuple[HaloBuffer, np.ndarray]:
    buffer = HaloBuffer(n)
    field = np.arange((n + 1) ** 2, dtype=float).reshape(n + 1, n + 1)
    buffer.load(field)
    return buffer, field


def test_interior_holds_field() -> None:
    buffer, field = _loaded()
    np.testing.assert_array_equal(buffer.interior, field)
    assert buffer.data.shape == (7, 7)


def test_named_halos_sit_outside_each_face() -> None:
    buffer, _ = _loaded()
    buffer.axis[:] = -1.0
    buffer.side[:] = -2.0
    buffer.front[:] = -3.0
    buffer.rear[:] = -4.0
    assert np.all(buffer.data[0, 1:-1] == -1.0)
    assert np.all(buffer.data[-1, 1:-1] == -2.0)
    assert np.all(buffer.data[1:-1, 0] == -3.0)
    assert np.all(buffer.data[1:-1, -1] == -4.0)
    # Writing halos never touches the field itself.
    assert np.all(buffer.interior >= 0.0)


def test_shifted_views() -> None:
    buffer, field = _loaded()
    buffer.side[:] = 100.0
    buffer.rear[:] = 200.0
    plus_radial = buffer.radial_shift(1)
    np.testing.assert_array_equal(plus_radial[:-1], field[1:])
    assert np.all(plus_radial[-1] == 100.0)
    plus_axial = buffer.axial_shift(1)
    np.testing.assert_array_equal(plus_axial[:, :-1], field[:, 1:])
    assert np.all(plus_axial[:, -1] == 200.0)
    np.testing.assert_array_equal(buffer.radial_shift(-1)[1:], field[:-1])
    np.testing.assert_array_equal(buffer.axial_shift(-1)[:, 1:], field[:, :-1])
