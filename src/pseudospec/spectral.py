"""Spectral interpolation, differentiation and integration of callables.

Thin compositions over the engine: sample a vectorized callable on a
collocation grid, transform or differentiate the samples, and package the
result as an interpolant, a vector of derivative values or a scalar.

Domain convention: :func:`spectral_derivative` builds its matrices on the
canonical grid over [-1, 1] and rescales an order-k result by
``(2 / (b - a))**k`` exactly once. Matrices returned by
:func:`pseudospec.diff_matrix.build_diff_matrices` for physical points are
already in physical units and must not be rescaled again.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Callable
from typing import Any

import numpy as np
import numpy.typing as npt
from numpy.polynomial import chebyshev

from ._basis_utils import _as_vector_1D
from .basis import tabulate_Chebyshev_basis_1D, tabulate_cosine_basis_1D
from .diff_matrix import build_diff_matrices
from .errors import CoefficientLengthError, DimensionMismatchError, GridError
from .grid import generate_grid, generate_periodic_grid
from .periodic import build_periodic_diff_matrices
from .quad import clenshaw_curtis_integral
from .tolerance import ensure_float_dtype
from .transform import evaluate, forward_cosine_transform, forward_transform

logger = logging.getLogger(__name__)


def _sample(
    f: Callable[..., Any], *grids: npt.NDArray[np.float32 | np.float64]
) -> npt.NDArray[np.float32 | np.float64]:
    """Evaluate a vectorized callable on grid arrays of a common shape.

    A scalar result is broadcast to the grid shape (constant functions).

    Raises:
        DimensionMismatchError: If the result cannot be matched to the grid shape.
    """
    dtype = grids[0].dtype
    values = np.asarray(f(*grids), dtype=dtype)
    if values.ndim == 0:
        return np.full(grids[0].shape, values, dtype=dtype)
    if values.shape != grids[0].shape:
        raise DimensionMismatchError(
            f"function returned shape {values.shape} on a grid of shape {grids[0].shape}; "
            "the function must be vectorized"
        )
    return values


def _validate_interval(a: float, b: float) -> tuple[float, float]:
    """Check that a domain [a, b] has finite, distinct endpoints."""
    a = float(a)
    b = float(b)
    if not (math.isfinite(a) and math.isfinite(b)):
        raise GridError("interval endpoints must be finite")
    if a == b:
        raise GridError("interval endpoints must be different")
    return a, b


class ChebyshevInterpolant:
    """Continuous interpolant defined by Chebyshev coefficients on [a, b].

    Calling the interpolant maps the points affinely onto [-1, 1] and
    evaluates the expansion there.
    """

    def __init__(self, coeffs: npt.ArrayLike, a: float = -1.0, b: float = 1.0) -> None:
        """Initialize the interpolant.

        Args:
            coeffs (npt.ArrayLike): 1D array of at least 1 Chebyshev coefficient.
            a (float): Left end of the domain. Defaults to -1.
            b (float): Right end of the domain. Defaults to 1.

        Raises:
            DimensionMismatchError: If the coefficients are not a 1D array.
            CoefficientLengthError: If the coefficient vector is empty.
            GridError: If a == b.
        """
        coeffs = _as_vector_1D(coeffs, "coeffs")
        if coeffs.shape[0] < 1:
            raise CoefficientLengthError("coefficient vector must not be empty")
        self._coeffs = coeffs.copy()
        self._coeffs.flags.writeable = False
        self._a, self._b = _validate_interval(a, b)

    @classmethod
    def from_values(
        cls, values: npt.ArrayLike, a: float = -1.0, b: float = 1.0
    ) -> ChebyshevInterpolant:
        """Create the interpolant of values sampled at ``generate_grid(a, b, n)``."""
        return cls(forward_transform(values), a, b)

    @property
    def coeffs(self) -> npt.NDArray[np.float32 | np.float64]:
        """Get the (read-only) Chebyshev coefficients."""
        return self._coeffs

    @property
    def domain(self) -> tuple[float, float]:
        """Get the domain endpoints (a, b)."""
        return self._a, self._b

    def __len__(self) -> int:
        return self._coeffs.shape[0]

    def __repr__(self) -> str:
        return f"ChebyshevInterpolant(n={len(self)}, domain={self.domain})"

    def _to_reference(self, x: npt.ArrayLike) -> Any:
        x = np.asarray(x, dtype=np.result_type(np.asarray(x).dtype, np.float32))
        return (2.0 * x - (self._a + self._b)) / (self._b - self._a)

    def __call__(self, x: npt.ArrayLike) -> Any:
        """Evaluate the interpolant at point(s) of the domain.

        Returns:
            A scalar for scalar x, otherwise an array with the shape of x.
        """
        return evaluate(self._coeffs, self._to_reference(x))

    def derivative(self, order: int = 1) -> ChebyshevInterpolant:
        """Get the interpolant of the order-th derivative on the same domain.

        Raises:
            ValueError: If order is negative.
        """
        if order < 0:
            raise ValueError("order must be non-negative")
        scale = 2.0 / (self._b - self._a)
        coeffs = chebyshev.chebder(self._coeffs.astype(np.float64), m=order, scl=scale)
        return ChebyshevInterpolant(np.asarray(coeffs, dtype=self._coeffs.dtype), self._a, self._b)

    def integral(self) -> float:
        """Integrate the interpolant over its domain with Clenshaw-Curtis weights."""
        coeffs = self._coeffs
        if coeffs.shape[0] % 2 == 0:
            # A trailing zero coefficient leaves the expansion unchanged.
            coeffs = np.append(coeffs, 0.0)
        return clenshaw_curtis_integral(coeffs, self._a, self._b)


def spectral_interpolant(
    f: Callable[[npt.NDArray[np.float32 | np.float64]], Any],
    a: float,
    b: float,
    n: int,
    dtype: npt.DTypeLike = np.float64,
) -> ChebyshevInterpolant:
    """Interpolate a vectorized function on n Chebyshev-Gauss-Lobatto points of [a, b].

    Args:
        f (Callable): Vectorized function of one array argument.
        a (float): Left end of the interval.
        b (float): Right end of the interval.
        n (int): Number of sampling points (expansion length). Must be at least 2.
        dtype (npt.DTypeLike): float32 or float64. Defaults to float64.

    Returns:
        ChebyshevInterpolant: The interpolant on [a, b].

    Raises:
        GridError: If n is less than 2 or a == b.
        DimensionMismatchError: If f does not return one value per point.
    """
    points = generate_grid(a, b, n, dtype)
    logger.debug("Interpolating on %d Chebyshev points over [%g, %g]", n, a, b)
    return ChebyshevInterpolant(forward_transform(_sample(f, points)), a, b)


def spectral_derivative(
    f: Callable[[npt.NDArray[np.float32 | np.float64]], Any],
    a: float,
    b: float,
    n: int,
    order: int = 1,
    dtype: npt.DTypeLike = np.float64,
) -> tuple[npt.NDArray[np.float32 | np.float64], npt.NDArray[np.float32 | np.float64]]:
    """Differentiate a vectorized function at the Chebyshev points of [a, b].

    Args:
        f (Callable): Vectorized function of one array argument.
        a (float): Left end of the interval.
        b (float): Right end of the interval.
        n (int): Number of points. Must be at least 2.
        order (int): Derivative order: 0, 1 or 2. Defaults to 1.
        dtype (npt.DTypeLike): float32 or float64. Defaults to float64.

    Returns:
        tuple[npt.NDArray, npt.NDArray]: The points of [a, b] and the values of
        the order-th derivative there.

    Raises:
        ValueError: If order is not 0, 1 or 2.
        GridError: If n is less than 2 or a == b.
        DimensionMismatchError: If f does not return one value per point.
    """
    if order not in (0, 1, 2):
        raise ValueError(f"order must be 0, 1 or 2, got {order}")
    a, b = _validate_interval(a, b)

    points = generate_grid(a, b, n, dtype)
    values = _sample(f, points)
    matrices = build_diff_matrices(generate_grid(-1.0, 1.0, n, dtype))
    scale = (2.0 / (b - a)) ** order
    logger.debug("Order-%d derivative on %d points, domain scale factor %g", order, n, scale)
    return points, (matrices[order] @ values) * np.asarray(scale, dtype=points.dtype)


def spectral_integrate(
    f: Callable[[npt.NDArray[np.float32 | np.float64]], Any],
    a: float,
    b: float,
    n: int = 101,
    dtype: npt.DTypeLike = np.float64,
) -> float:
    """Integrate a vectorized function over [a, b] with Clenshaw-Curtis quadrature.

    Args:
        f (Callable): Vectorized function of one array argument.
        a (float): Lower limit.
        b (float): Upper limit.
        n (int): Number of sampling points. An even n is raised to n + 1, since
            the weights are only defined for an odd number of coefficients.
            Defaults to 101.
        dtype (npt.DTypeLike): float32 or float64. Defaults to float64.

    Returns:
        float: The integral estimate.

    Raises:
        GridError: If n is less than 2 or a == b.
        DimensionMismatchError: If f does not return one value per point.

    Example:
        >>> round(spectral_integrate(np.exp, 0.0, 1.0, 11), 12)
        1.718281828459
    """
    if isinstance(n, int | np.integer) and not isinstance(n, bool) and n % 2 == 0:
        logger.debug(
            "Clenshaw-Curtis needs an odd number of points, using %d instead of %d", n + 1, n
        )
        n += 1
    points = generate_grid(a, b, n, dtype)
    coeffs = forward_transform(_sample(f, points))
    return clenshaw_curtis_integral(coeffs, a, b)


def periodic_derivative(
    f: Callable[[npt.NDArray[np.float32 | np.float64]], Any],
    n: int,
    order: int = 1,
    rcond_threshold: float | None = None,
    dtype: npt.DTypeLike = np.float64,
) -> tuple[npt.NDArray[np.float32 | np.float64], npt.NDArray[np.float32 | np.float64]]:
    """Differentiate a vectorized function at the angles ``j*pi/n`` of [0, pi].

    Args:
        f (Callable): Vectorized function of one array argument (the angle).
        n (int): Highest harmonic; the grid has n + 1 angles. Must be at least 1.
        order (int): Derivative order: 1 or 2. Defaults to 1.
        rcond_threshold (float | None): Conditioning threshold forwarded to
            :func:`pseudospec.periodic.build_periodic_diff_matrices`.
        dtype (npt.DTypeLike): float32 or float64. Defaults to float64.

    Returns:
        tuple[npt.NDArray, npt.NDArray]: The angles and the derivative values there.

    Raises:
        ValueError: If order is not 1 or 2.
        GridError: If n is less than 1.
        IllConditionedError: If the construction is rejected as ill-conditioned.
    """
    if order not in (1, 2):
        raise ValueError(f"order must be 1 or 2, got {order}")
    theta = generate_periodic_grid(n, dtype)
    values = _sample(f, theta)
    D1, D2 = build_periodic_diff_matrices(n, rcond_threshold, dtype)
    logger.debug("Order-%d periodic derivative on %d angles", order, n + 1)
    return theta, (D1 if order == 1 else D2) @ values


class MixedInterpolant2D:
    r"""Mixed cosine/Chebyshev reconstruction on [0, pi] x [a, b].

    \[
    f(\theta, x) \approx \sum_{k=0}^{K} \sum_{l=0}^{L-1} c_{kl} \cos(k\theta)\, T_l(\hat{x}),
    \]

    where \( \hat{x} \) is x mapped affinely from [a, b] onto [-1, 1].
    """

    def __init__(self, coeffs: npt.ArrayLike, a: float = -1.0, b: float = 1.0) -> None:
        """Initialize the reconstruction.

        Args:
            coeffs (npt.ArrayLike): Array of shape (K + 1, L); rows index cosine
                harmonics, columns Chebyshev degrees.
            a (float): Left end of the x domain. Defaults to -1.
            b (float): Right end of the x domain. Defaults to 1.

        Raises:
            DimensionMismatchError: If the coefficients are not a non-empty 2D array.
            GridError: If a == b.
        """
        coeffs = np.array(coeffs)
        if coeffs.ndim != 2 or coeffs.size == 0:  # noqa: PLR2004
            raise DimensionMismatchError("coefficients must be a non-empty 2D array")
        if coeffs.dtype not in (np.float32, np.float64):
            coeffs = coeffs.astype(np.float64)
        coeffs.flags.writeable = False
        self._coeffs = coeffs
        self._a, self._b = _validate_interval(a, b)

    @property
    def coeffs(self) -> npt.NDArray[np.float32 | np.float64]:
        """Get the (read-only) coefficient array."""
        return self._coeffs

    @property
    def domain(self) -> tuple[float, float]:
        """Get the x domain endpoints (a, b)."""
        return self._a, self._b

    def __call__(self, theta: npt.ArrayLike, x: npt.ArrayLike) -> Any:
        """Evaluate at broadcast-compatible angle(s) and point(s).

        Returns:
            A scalar for scalar inputs, otherwise an array of the broadcast shape.
        """
        theta_b, x_b = np.broadcast_arrays(
            np.asarray(theta, dtype=np.float64), np.asarray(x, dtype=np.float64)
        )
        x_ref = (2.0 * x_b - (self._a + self._b)) / (self._b - self._a)
        n_harmonics, n_degrees = self._coeffs.shape
        C = tabulate_cosine_basis_1D(n_harmonics - 1, np.array(theta_b))
        T = tabulate_Chebyshev_basis_1D(n_degrees - 1, np.array(x_ref))
        values = np.einsum("...k,kl,...l->...", C, self._coeffs, T)
        return values[()]


def mixed_interpolant_2D(
    f: Callable[[npt.NDArray[np.float32 | np.float64], npt.NDArray[np.float32 | np.float64]], Any],
    n_theta: int,
    n_x: int,
    a: float = -1.0,
    b: float = 1.0,
    dtype: npt.DTypeLike = np.float64,
) -> MixedInterpolant2D:
    """Reconstruct f(theta, x) on [0, pi] x [a, b] in the mixed cosine/Chebyshev basis.

    Args:
        f (Callable): Vectorized function of (theta, x) arrays.
        n_theta (int): Highest cosine harmonic; n_theta + 1 angles are sampled.
        n_x (int): Number of Chebyshev points along x.
        a (float): Left end of the x domain. Defaults to -1.
        b (float): Right end of the x domain. Defaults to 1.
        dtype (npt.DTypeLike): float32 or float64. Defaults to float64.

    Returns:
        MixedInterpolant2D: The reconstruction.

    Raises:
        GridError: If n_theta is less than 1, n_x is less than 2 or a == b.
        DimensionMismatchError: If f does not return one value per grid point.
    """
    dtype = ensure_float_dtype(dtype)
    theta = generate_periodic_grid(n_theta, dtype)
    x = generate_grid(a, b, n_x, dtype)
    theta_grid, x_grid = np.meshgrid(theta, x, indexing="ij")
    values = _sample(f, theta_grid, x_grid)

    coeffs = np.apply_along_axis(forward_cosine_transform, 0, values)
    coeffs = np.apply_along_axis(forward_transform, 1, coeffs)
    logger.debug("Mixed reconstruction with %d harmonics x %d Chebyshev terms", n_theta + 1, n_x)
    return MixedInterpolant2D(coeffs, a, b)
