"""Physical description of the laser pulse."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from ..exceptions import ConfigurationError


class PulseShape(Enum):
    """Temporal shapes of the heating pulse, each normalised to unit area."""

    RECTANGULAR = "rectangular"
    # Evaluated exactly like RECTANGULAR; the ramps are not modelled.
    TRAPEZOIDAL = "trapezoidal"
    TRIANGULAR = "triangular"
    GAUSSIAN = "gaussian"


@dataclass(frozen=True)
class Pulse:
    """
    Laser pulse acting on the front face.

    Args:
        shape: Temporal shape.
        width: Pulse duration in seconds.
        spot_diameter: Diameter of the heated spot in metres. Only the
            two-dimensional problems use it.
    """

    shape: PulseShape = PulseShape.RECTANGULAR
    width: float = 1.5e-3
    spot_diameter: float = 10e-3

    def __post_init__(self) -> None:
        if not isinstance(self.shape, PulseShape):
            raise ConfigurationError(f"Unknown pulse shape {self.shape!r}.")
        if self.width <= 0.0:
            raise ConfigurationError(f"Pulse width must be positive, got {self.width}.")
        if self.spot_diameter <= 0.0:
            raise ConfigurationError(
                f"Spot diameter must be positive, got {self.spot_diameter}."
            )
