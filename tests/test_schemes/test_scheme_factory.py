from __future__ import annotations

import pytest

from flashfd.exceptions import ConfigurationError
from flashfd.problem import ProblemKind
from flashfd.schemes import (
    ADIScheme,
    ExplicitScheme,
    ImplicitScheme,
    MixedScheme,
    SchemeConfig,
    SchemeKind,
    available_schemes,
    create_scheme,
)


@pytest.mark.parametrize(
    "kind, cls",
    [
        (SchemeKind.EXPLICIT, ExplicitScheme),
        (SchemeKind.IMPLICIT, ImplicitScheme),
        (SchemeKind.MIXED, MixedScheme),
        (SchemeKind.ADI, ADIScheme),
        ("Mixed", MixedScheme),
        ("adi", ADIScheme),
    ],
)
def test_create_scheme(kind, cls) -> None:
    assert type(create_scheme(kind)) is cls


def test_create_scheme_passes_config() -> None:
    scheme = create_scheme("explicit", SchemeConfig(grid_density=50, time_limit=0.2))
    assert scheme.grid.grid_density == 50
    assert scheme.time_limit == pytest.approx(0.2)


def test_unknown_scheme_rejected() -> None:
    with pytest.raises(ConfigurationError, match="Supported values"):
        create_scheme("spectral")


@pytest.mark.parametrize(
    "problem_kind, expected",
    [
        (ProblemKind.LINEAR_1D, [SchemeKind.EXPLICIT, SchemeKind.IMPLICIT, SchemeKind.MIXED]),
        (ProblemKind.NONLINEAR_1D, [SchemeKind.EXPLICIT, SchemeKind.IMPLICIT, SchemeKind.MIXED]),
        (ProblemKind.LINEAR_2D, [SchemeKind.ADI]),
        (ProblemKind.NONLINEAR_2D, [SchemeKind.ADI]),
    ],
)
def test_available_schemes(problem_kind: ProblemKind, expected: list[SchemeKind]) -> None:
    assert available_schemes(problem_kind) == expected
