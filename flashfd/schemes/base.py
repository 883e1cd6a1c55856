"""
Common machinery of the finite-difference schemes.

A scheme owns one grid. Each call to :meth:`DifferenceScheme.solve` builds a
discrete pulse on that grid, calibrates both, marches the temperature field
for ``(counts - 1) * interval`` raw steps and records the rear-face signal
every ``interval`` steps. The heating curve of the problem is written only
after the march completes.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import replace
from typing import Callable, ClassVar

import numpy as np

from ..exceptions import CapabilityMismatchError, ConfigurationError
from ..logging import get_logger
from ..problem.statements import Problem, ProblemKind
from ..properties import (
    NumericProperty,
    NumericPropertyKeyword,
    derive,
    require_type,
)
from .config import SchemeConfig
from .discrete_pulse import DiscretePulse
from .grid import Grid, round_half_away

logger = get_logger(__name__)

Advance = Callable[[int], None]
Probe = Callable[[], float]


class DifferenceScheme(ABC):
    """
    Base class of all schemes.

    Subclasses declare their defaults, their grid and pulse classes, and the
    set of problem kinds they can solve, and implement :meth:`_prepare`.
    """

    DEFAULT_GRID_DENSITY: ClassVar[int] = 30
    DEFAULT_TAU_FACTOR: ClassVar[float] = 0.25

    # Offset keeping pulse samples strictly inside a time step.
    EPS: ClassVar[float] = 1e-7

    grid_class: ClassVar[type[Grid]] = Grid
    pulse_class: ClassVar[type[DiscretePulse]] = DiscretePulse
    domain: ClassVar[frozenset[ProblemKind]] = frozenset()

    def __init__(self, config: SchemeConfig | None = None) -> None:
        self.config = config if config is not None else SchemeConfig()
        grid_density = self.config.grid_density or self.DEFAULT_GRID_DENSITY
        tau_factor = self.config.tau_factor or self.DEFAULT_TAU_FACTOR
        self.grid = self.grid_class(
            derive(NumericPropertyKeyword.GRID_DENSITY, grid_density),
            derive(NumericPropertyKeyword.TAU_FACTOR, tau_factor),
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.grid!r}, time_limit={self.time_limit})"

    # ------------------------------------------------------------------
    @property
    def time_limit(self) -> float:
        return self.config.time_limit

    @property
    def max_iterations(self) -> int:
        return self.config.max_iterations

    def set_time_limit(self, prop: NumericProperty) -> None:
        value = require_type(prop, NumericPropertyKeyword.TIME_LIMIT)
        self.config = replace(self.config, time_limit=float(value))

    def set(self, keyword: NumericPropertyKeyword, prop: NumericProperty) -> None:
        """Generic property setter; grid properties are forwarded to the grid."""
        if keyword in (NumericPropertyKeyword.GRID_DENSITY, NumericPropertyKeyword.TAU_FACTOR):
            self.grid.set(keyword, prop)
        elif keyword is NumericPropertyKeyword.TIME_LIMIT:
            self.set_time_limit(prop)
        elif keyword is NumericPropertyKeyword.MAX_ITERATIONS:
            value = require_type(prop, NumericPropertyKeyword.MAX_ITERATIONS)
            self.config = replace(self.config, max_iterations=int(value))
        else:
            raise ConfigurationError(f"Property not recognised by {type(self).__name__}: {keyword}")

    def listed_properties(self) -> list[NumericProperty]:
        """Adjustable properties; grid details are listed only if not hidden."""
        listed = [derive(NumericPropertyKeyword.TIME_LIMIT, self.time_limit)]
        if not self.config.hide_details:
            listed.extend(self.grid.listed_properties())
        return listed

    def copy(self) -> "DifferenceScheme":
        """Independent scheme with the same configuration and grid state."""
        twin = type(self)(self.config)
        twin.grid = self.grid.copy()
        return twin

    # ------------------------------------------------------------------
    def supports(self, kind: ProblemKind) -> bool:
        return kind in self.domain

    def solve(self, problem: Problem) -> None:
        """
        Compute the rear-face heating curve of ``problem``.

        Raises:
            CapabilityMismatchError: If the problem kind is outside the scheme domain.
            ConfigurationError: If the grid is too coarse for the requested samples.
            NonConvergenceError: If a nonlinear boundary iteration does not converge.
        """
        if not self.supports(problem.kind):
            raise CapabilityMismatchError(
                f"{type(self).__name__} cannot solve {problem.kind.name} problems."
            )

        pulse = self.pulse_class(problem, self.grid)
        pulse.optimise()

        counts = problem.curve.num_points
        interval = self.steps_per_sample(problem, counts)
        logger.info(
            "%s: solving %s problem on %r, %d samples x %d steps",
            type(self).__name__,
            problem.kind.name,
            self.grid,
            counts,
            interval,
        )

        advance, probe = self._prepare(problem, pulse)
        signal = np.zeros(counts, dtype=float)
        signal[0] = probe()
        for w in range(1, counts):
            for m in range((w - 1) * interval + 1, w * interval + 1):
                advance(m)
            signal[w] = probe()

        self._write_curve(problem, signal, interval)

    def steps_per_sample(self, problem: Problem, counts: int) -> int:
        """Raw time steps between two recorded samples."""
        interval = round_half_away(
            self.time_limit / (counts * self.grid.tau * problem.time_factor())
        )
        if interval < 1:
            raise ConfigurationError(
                f"Time step tau={self.grid.tau:.4g} is too coarse to record {counts} "
                f"points within {self.time_limit} s; increase the time limit or refine the grid."
            )
        return interval

    @abstractmethod
    def _prepare(self, problem: Problem, pulse: DiscretePulse) -> tuple[Advance, Probe]:
        """
        Allocate the transient fields of one solve.

        Returns ``advance(m)``, which performs raw time step ``m`` (1-based),
        and ``probe()``, which reads the current rear-face signal.
        """

    # ------------------------------------------------------------------
    def _write_curve(self, problem: Problem, signal: np.ndarray, interval: int) -> None:
        peak = float(np.max(signal))
        if peak <= 0.0:
            raise ConfigurationError(
                "Rear-face signal never rose above zero; check the pulse and the time limit."
            )

        step_time = interval * self.grid.tau * problem.time_factor()
        time = np.arange(signal.size, dtype=float) * step_time

        if problem.kind.is_nonlinear:
            temperature = signal * problem.maximum_heating()
            problem.maximum_temperature = float(np.max(temperature))
        else:
            temperature = signal * (problem.maximum_temperature / peak)

        problem.curve.fill(time, temperature)
        logger.debug(
            "%s: curve written, peak %.4g at t=%.4g s",
            type(self).__name__,
            problem.maximum_temperature,
            time[int(np.argmax(temperature))],
        )
