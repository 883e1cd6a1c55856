"""Factory selecting a difference scheme from a closed set of kinds."""

from __future__ import annotations

from enum import Enum

from ..exceptions import ConfigurationError
from ..problem.statements import ProblemKind
from .adi import ADIScheme
from .base import DifferenceScheme
from .config import SchemeConfig
from .explicit import ExplicitScheme
from .implicit import ImplicitScheme
from .mixed import MixedScheme


class SchemeKind(Enum):
    EXPLICIT = "explicit"
    IMPLICIT = "implicit"
    MIXED = "mixed"
    ADI = "adi"


_SCHEMES: dict[SchemeKind, type[DifferenceScheme]] = {
    SchemeKind.EXPLICIT: ExplicitScheme,
    SchemeKind.IMPLICIT: ImplicitScheme,
    SchemeKind.MIXED: MixedScheme,
    SchemeKind.ADI: ADIScheme,
}


def scheme_class(kind: SchemeKind | str) -> type[DifferenceScheme]:
    """Return the scheme class registered for ``kind`` (enum member or its value)."""
    if isinstance(kind, str):
        try:
            kind = SchemeKind(kind.lower())
        except ValueError:
            supported = ", ".join(k.value for k in SchemeKind)
            raise ConfigurationError(
                f"Unsupported scheme '{kind}'. Supported values: {supported}."
            ) from None
    return _SCHEMES[kind]


def create_scheme(
    kind: SchemeKind | str, config: SchemeConfig | None = None
) -> DifferenceScheme:
    """
    Create a difference scheme.

    Args:
        kind: Scheme kind, as a :class:`SchemeKind` or its string value.
        config: Scheme configuration. Defaults to the scheme's own defaults.

    Returns:
        A freshly constructed scheme.

    Raises:
        ConfigurationError: If ``kind`` is not a known scheme.
    """
    return scheme_class(kind)(config)


def available_schemes(problem_kind: ProblemKind) -> list[SchemeKind]:
    """Scheme kinds able to solve problems of ``problem_kind``."""
    return [kind for kind, cls in _SCHEMES.items() if problem_kind in cls.domain]
