"""Ghost-padded field storage for the two-dimensional scheme."""

from __future__ import annotations

import numpy as np


class HaloBuffer:
    """
    ``(n + 1) x (n + 1)`` field indexed ``[radial i, axial j]`` with one ghost
    layer on every side.

    The ghost layers are exposed by name so boundary closures read as the
    physics they implement:

    * ``axis`` – ``i = -1``, mirror image across the symmetry axis;
    * ``side`` – ``i = n + 1``, beyond the lateral surface;
    * ``front`` – ``j = -1``, in front of the irradiated face;
    * ``rear`` – ``j = n + 1``, behind the rear face.

    Corner cells are never read.
    """

    def __init__(self, n: int) -> None:
        self.n = n
        self.data = np.zeros((n + 3, n + 3), dtype=float)

    @property
    def interior(self) -> np.ndarray:
        return self.data[1:-1, 1:-1]

    def load(self, field: np.ndarray) -> None:
        self.interior[:] = field

    # ------------------------------------------------------------------
    @property
    def axis(self) -> np.ndarray:
        return self.data[0, 1:-1]

    @property
    def side(self) -> np.ndarray:
        return self.data[-1, 1:-1]

    @property
    def front(self) -> np.ndarray:
        return self.data[1:-1, 0]

    @property
    def rear(self) -> np.ndarray:
        return self.data[1:-1, -1]

    # ------------------------------------------------------------------
    def radial_shift(self, offset: int) -> np.ndarray:
        """View whose ``[i, j]`` entry is the field at ``[i + offset, j]``."""
        return self.data[1 + offset : self.n + 2 + offset, 1:-1]

    def axial_shift(self, offset: int) -> np.ndarray:
        """View whose ``[i, j]`` entry is the field at ``[i, j + offset]``."""
        return self.data[1:-1, 1 + offset : self.n + 2 + offset]
