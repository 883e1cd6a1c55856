"""flashfd - finite-difference solvers for laser flash heat conduction."""

__version__ = "0.1.0"

# Configuration and errors
from .exceptions import (
    CapabilityMismatchError,
    ConfigurationError,
    FlashError,
    NonConvergenceError,
)
from .logging import configure_logging, get_logger, set_log_level

# Problem statements
from .problem import (
    BoundaryModel,
    Geometry,
    HeatingCurve,
    Problem,
    ProblemKind,
    Pulse,
    PulseShape,
    adiabatic_solution,
)
from .properties import (
    NumericProperty,
    NumericPropertyKeyword,
    default_property,
    derive,
)

# Schemes
from .schemes import (
    ADIScheme,
    DifferenceScheme,
    ExplicitScheme,
    Grid,
    Grid2D,
    ImplicitScheme,
    MixedScheme,
    SchemeConfig,
    SchemeKind,
    available_schemes,
    create_scheme,
)

__all__ = [
    "ADIScheme",
    "BoundaryModel",
    "CapabilityMismatchError",
    "ConfigurationError",
    "DifferenceScheme",
    "ExplicitScheme",
    "FlashError",
    "Geometry",
    "Grid",
    "Grid2D",
    "HeatingCurve",
    "ImplicitScheme",
    "MixedScheme",
    "NonConvergenceError",
    "NumericProperty",
    "NumericPropertyKeyword",
    "Problem",
    "ProblemKind",
    "Pulse",
    "PulseShape",
    "SchemeConfig",
    "SchemeKind",
    "__version__",
    "adiabatic_solution",
    "available_schemes",
    "configure_logging",
    "create_scheme",
    "default_property",
    "derive",
    "get_logger",
    "set_log_level",
]
