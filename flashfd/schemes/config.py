"""Construction-time configuration shared by all difference schemes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..properties import NumericPropertyKeyword, definition, derive

DEFAULT_MAX_ITERATIONS = int(definition(NumericPropertyKeyword.MAX_ITERATIONS).default)


@dataclass(frozen=True)
class SchemeConfig:
    """
    Configuration of a difference scheme.

    Args:
        grid_density: Number of axial steps ``N``. ``None`` uses the scheme default.
        tau_factor: Time-step factor. ``None`` uses the scheme default.
        time_limit: Physical duration of the simulated curve in seconds.
        hide_details: When True, only the time limit is listed among the
            adjustable properties; grid density and tau factor stay internal.
        max_iterations: Cap on each nonlinear boundary iteration.
    """

    grid_density: Optional[int] = None
    tau_factor: Optional[float] = None
    time_limit: float = 1.0
    hide_details: bool = True
    max_iterations: int = DEFAULT_MAX_ITERATIONS

    def __post_init__(self) -> None:
        # Property construction performs range and type validation.
        if self.grid_density is not None:
            derive(NumericPropertyKeyword.GRID_DENSITY, self.grid_density)
        if self.tau_factor is not None:
            derive(NumericPropertyKeyword.TAU_FACTOR, self.tau_factor)
        derive(NumericPropertyKeyword.TIME_LIMIT, self.time_limit)
        derive(NumericPropertyKeyword.MAX_ITERATIONS, self.max_iterations)
