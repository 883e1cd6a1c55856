"""Fixed-length rear-face temperature history."""

from __future__ import annotations

import numpy as np

from ..exceptions import ConfigurationError
from ..properties import NumericProperty, NumericPropertyKeyword, derive, require_type


class HeatingCurve:
    """
    Ordered ``(time, temperature)`` samples of the rear-face response.

    The number of points is fixed at construction (or through
    :meth:`set_num_points`); solvers overwrite the samples in one go with
    :meth:`fill`.
    """

    def __init__(self, num_points: int = 100) -> None:
        self.num_points = int(derive(NumericPropertyKeyword.NUMPOINTS, num_points).value)
        self.reinit()

    def __len__(self) -> int:
        return self.num_points

    def __repr__(self) -> str:
        return (
            f"HeatingCurve(num_points={self.num_points}, "
            f"time_limit={self.time_limit():.4g}, peak={self.max_temperature():.4g})"
        )

    def reinit(self) -> None:
        """Reset every sample to zero."""
        self.time = np.zeros(self.num_points, dtype=float)
        self.temperature = np.zeros(self.num_points, dtype=float)

    def set_num_points(self, prop: NumericProperty) -> None:
        self.num_points = int(require_type(prop, NumericPropertyKeyword.NUMPOINTS))
        self.reinit()

    def fill(self, time: np.ndarray, temperature: np.ndarray) -> None:
        """Replace all samples at once."""
        time = np.asarray(time, dtype=float)
        temperature = np.asarray(temperature, dtype=float)
        if time.shape != (self.num_points,) or temperature.shape != (self.num_points,):
            raise ConfigurationError(
                f"Expected {self.num_points} samples, got time {time.shape} "
                f"and temperature {temperature.shape}."
            )
        self.time = time.copy()
        self.temperature = temperature.copy()

    def scale(self, factor: float) -> None:
        self.temperature *= factor

    def max_temperature(self) -> float:
        return float(np.max(self.temperature))

    def time_limit(self) -> float:
        return float(self.time[-1])

    def copy(self) -> "HeatingCurve":
        twin = HeatingCurve(self.num_points)
        twin.time = self.time.copy()
        twin.temperature = self.temperature.copy()
        return twin
