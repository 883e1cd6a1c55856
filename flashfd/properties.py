"""
Typed numeric properties used to configure grids and difference schemes.

A :class:`NumericProperty` couples a value with a
:class:`NumericPropertyKeyword`. Setters that accept a property check the
keyword first, so a tau factor can never be passed where a grid density is
expected. Values are validated against the definition table on creation.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union

from .exceptions import ConfigurationError

Number = Union[int, float]


class NumericPropertyKeyword(Enum):
    """Names of the configurable numeric properties."""

    GRID_DENSITY = "grid_density"
    TAU_FACTOR = "tau_factor"
    TIME_LIMIT = "time_limit"
    NUMPOINTS = "numpoints"
    NONLINEAR_PRECISION = "nonlinear_precision"
    MAX_ITERATIONS = "max_iterations"


@dataclass(frozen=True)
class PropertyDefinition:
    """Descriptor, admissible range and default value of a keyword."""

    descriptor: str
    minimum: Number
    maximum: Number
    default: Number
    integer: bool = False


_DEFINITIONS: dict[NumericPropertyKeyword, PropertyDefinition] = {
    NumericPropertyKeyword.GRID_DENSITY: PropertyDefinition(
        "Grid density", 5, 1000, 30, integer=True
    ),
    NumericPropertyKeyword.TAU_FACTOR: PropertyDefinition(
        "Time step factor", 1e-6, 1.0, 0.25
    ),
    NumericPropertyKeyword.TIME_LIMIT: PropertyDefinition(
        "Calculation time limit (s)", 1e-6, 1e4, 1.0
    ),
    NumericPropertyKeyword.NUMPOINTS: PropertyDefinition(
        "Number of heating curve points", 2, 10000, 100, integer=True
    ),
    NumericPropertyKeyword.NONLINEAR_PRECISION: PropertyDefinition(
        "Nonlinear iteration precision", 1e-10, 1e-1, 1e-3
    ),
    NumericPropertyKeyword.MAX_ITERATIONS: PropertyDefinition(
        "Nonlinear iteration cap", 1, 1_000_000, 1000, integer=True
    ),
}


def definition(keyword: NumericPropertyKeyword) -> PropertyDefinition:
    """Return the definition registered for ``keyword``."""
    return _DEFINITIONS[keyword]


@dataclass(frozen=True)
class NumericProperty:
    """An immutable, validated value tagged with its keyword."""

    keyword: NumericPropertyKeyword
    value: Number

    def __post_init__(self) -> None:
        entry = definition(self.keyword)
        value = self.value
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ConfigurationError(
                f"{entry.descriptor} must be numeric, got {type(value).__name__}."
            )
        if entry.integer:
            if float(value) != int(value):
                raise ConfigurationError(
                    f"{entry.descriptor} must be an integer, got {value}."
                )
            object.__setattr__(self, "value", int(value))
        else:
            object.__setattr__(self, "value", float(value))
        if not entry.minimum <= self.value <= entry.maximum:
            raise ConfigurationError(
                f"{entry.descriptor} = {self.value} is outside "
                f"[{entry.minimum}, {entry.maximum}]."
            )

    @property
    def descriptor(self) -> str:
        return definition(self.keyword).descriptor

    def __str__(self) -> str:
        return f"{self.descriptor}: {self.value}"


def default_property(keyword: NumericPropertyKeyword) -> NumericProperty:
    """Return the property holding the default value of ``keyword``."""
    return NumericProperty(keyword, definition(keyword).default)


def derive(keyword: NumericPropertyKeyword, value: Number) -> NumericProperty:
    """Return a new property of kind ``keyword`` holding ``value``."""
    return NumericProperty(keyword, value)


def require_type(prop: NumericProperty, keyword: NumericPropertyKeyword) -> Number:
    """Return the value of ``prop`` after checking it is of kind ``keyword``.

    Raises:
        ConfigurationError: If ``prop`` is not a property or has another kind.
    """
    if not isinstance(prop, NumericProperty):
        raise ConfigurationError(
            f"Expected a NumericProperty of kind {keyword.name}, "
            f"got {type(prop).__name__}."
        )
    if prop.keyword is not keyword:
        raise ConfigurationError(
            f"Illegal type: {prop.keyword.name} given where {keyword.name} is expected."
        )
    return prop.value
