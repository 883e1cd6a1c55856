"""Benchmark the wall time of one solve per scheme."""

import time
from typing import Dict

import flashfd as ff


def benchmark_scheme(
    kind: ff.SchemeKind,
    grid_density: int,
    time_limit: float = 1.0,
    repeats: int = 3,
) -> Dict[str, float]:
    """Time repeated solves of a default problem.

    Args:
        kind: Scheme to benchmark.
        grid_density: Grid density passed to the scheme.
        time_limit: Simulated time in seconds.
        repeats: Number of timed solves.

    Returns:
        Dictionary with timing results.
    """
    geometry = ff.Geometry.TWO_DIMENSIONAL if kind is ff.SchemeKind.ADI else ff.Geometry.ONE_DIMENSIONAL
    scheme = ff.create_scheme(kind, ff.SchemeConfig(grid_density=grid_density, time_limit=time_limit))

    problem = ff.Problem(geometry=geometry)

    # Warmup
    scheme.solve(problem)

    start = time.perf_counter()
    for _ in range(repeats):
        scheme.solve(ff.Problem(geometry=geometry))
    total_time = time.perf_counter() - start

    return {
        "grid_density": scheme.grid.grid_density,
        "steps_per_solve": (len(problem.curve) - 1)
        * scheme.steps_per_sample(problem, len(problem.curve)),
        "time_per_solve_sec": total_time / repeats,
    }


if __name__ == "__main__":
    print("Benchmarking difference schemes...")
    for kind, density in [
        (ff.SchemeKind.EXPLICIT, 80),
        (ff.SchemeKind.IMPLICIT, 30),
        (ff.SchemeKind.MIXED, 30),
        (ff.SchemeKind.ADI, 30),
    ]:
        results = benchmark_scheme(kind, density)
        print(f"{kind.value} (N={results['grid_density']}):")
        print(f"  Steps per solve: {results['steps_per_solve']}")
        print(f"  Time per solve: {results['time_per_solve_sec']*1e3:.1f} ms")
