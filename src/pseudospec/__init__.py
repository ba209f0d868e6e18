"""Public API surface for pseudospec.

Defines package metadata and exported interfaces.
"""

from typing import Final

# Private API imports (accessible but not in __all__)
# Users can access private functions via: pseudospec._basis_impl._function_name, etc.
from . import (
    _basis_impl,  # noqa: F401
    _basis_utils,  # noqa: F401
)

# Public API imports
from .basis import tabulate_Chebyshev_basis_1D, tabulate_cosine_basis_1D
from .diff_matrix import build_diff_matrices, compute_barycentric_weights
from .errors import (
    CoefficientLengthError,
    DimensionMismatchError,
    GridError,
    IllConditionedError,
    SpectralError,
)
from .grid import generate_grid, generate_periodic_grid
from .periodic import build_periodic_diff_matrices, checked_inverse, reciprocal_condition_number
from .quad import clenshaw_curtis_integral, quadrature_weights
from .spectral import (
    ChebyshevInterpolant,
    MixedInterpolant2D,
    mixed_interpolant_2D,
    periodic_derivative,
    spectral_derivative,
    spectral_integrate,
    spectral_interpolant,
)
from .tolerance import (
    get_conservative_tolerance,
    get_default_tolerance,
    get_machine_epsilon,
    get_rcond_tolerance,
    get_strict_tolerance,
)
from .transform import evaluate, evaluate_cosine, forward_cosine_transform, forward_transform

# Package metadata
__version__: Final[str] = "0.1.0"
__license__: Final[str] = "MIT"
__author__: Final[str] = "pseudospec developers"

# Public interface: only functions/classes that don't start with _
__all__ = [
    "ChebyshevInterpolant",
    "CoefficientLengthError",
    "DimensionMismatchError",
    "GridError",
    "IllConditionedError",
    "MixedInterpolant2D",
    "SpectralError",
    "__author__",
    "__license__",
    "__version__",
    "build_diff_matrices",
    "build_periodic_diff_matrices",
    "checked_inverse",
    "clenshaw_curtis_integral",
    "compute_barycentric_weights",
    "evaluate",
    "evaluate_cosine",
    "forward_cosine_transform",
    "forward_transform",
    "generate_grid",
    "generate_periodic_grid",
    "get_conservative_tolerance",
    "get_default_tolerance",
    "get_machine_epsilon",
    "get_rcond_tolerance",
    "get_strict_tolerance",
    "mixed_interpolant_2D",
    "periodic_derivative",
    "quadrature_weights",
    "reciprocal_condition_number",
    "spectral_derivative",
    "spectral_integrate",
    "spectral_interpolant",
    "tabulate_Chebyshev_basis_1D",
    "tabulate_cosine_basis_1D",
]
