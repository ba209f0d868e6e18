"""Forward spectral transforms and evaluation of spectral expansions."""

from __future__ import annotations

from typing import Any

import numpy as np
import numpy.typing as npt
import scipy.fft

from ._basis_utils import _as_vector_1D
from .basis import tabulate_Chebyshev_basis_1D, tabulate_cosine_basis_1D
from .errors import CoefficientLengthError


def _dct1_coefficients(
    values: npt.NDArray[np.float32 | np.float64],
) -> npt.NDArray[np.float32 | np.float64]:
    """Coefficients of the cosine expansion interpolating values at ``j*pi/(N-1)``.

    Unnormalized DCT-I divided by (N - 1), first and last entries halved.
    """
    n = values.shape[0]
    coeffs = scipy.fft.dct(values, type=1) / float(n - 1)
    coeffs[0] *= 0.5
    coeffs[-1] *= 0.5
    return coeffs.astype(values.dtype, copy=False)


def forward_transform(values: npt.ArrayLike) -> npt.NDArray[np.float32 | np.float64]:
    r"""Compute Chebyshev coefficients from values on the canonical Lobatto grid.

    The values must be sampled at ``generate_grid(-1, 1, n)``, i.e. at
    \( x_j = -\cos(j\pi/(n-1)) \) in ascending order (for a physical interval
    [a, b], sample at ``generate_grid(a, b, n)``; the affine map is the
    caller's concern). The coefficients \( c_k \) satisfy

    \[
    \sum_{k=0}^{n-1} c_k T_k(x_j) = v_j, \quad j = 0, \dots, n-1,
    \]

    and are obtained in O(n log n) from a type-1 discrete cosine transform
    scaled by 1 / (n - 1) (the orthonormal-DCT output scaled by
    sqrt(2 / (n - 1))), with the first and last coefficients halved to undo
    the double weight of the two boundary nodes.

    Args:
        values (npt.ArrayLike): 1D array of n >= 2 samples.

    Returns:
        npt.NDArray[np.float32 | np.float64]: The n coefficients, ascending degree.
        float32 input gives float32 output; other inputs give float64.

    Raises:
        DimensionMismatchError: If the values are not a 1D array.
        CoefficientLengthError: If fewer than 2 values are given.
    """
    v = _as_vector_1D(values, "values")
    if v.shape[0] < 2:  # noqa: PLR2004
        raise CoefficientLengthError("forward transform needs at least 2 values")
    # The transform runs over x = cos(theta), which is the descending grid.
    return _dct1_coefficients(np.ascontiguousarray(v[::-1]))


def evaluate(coeffs: npt.ArrayLike, x: npt.ArrayLike) -> Any:
    """Evaluate a Chebyshev expansion at the given point(s).

    The Chebyshev polynomials are tabulated with the three-term recurrence and
    contracted with the coefficients.

    Args:
        coeffs (npt.ArrayLike): 1D array of n >= 1 Chebyshev coefficients.
        x (npt.ArrayLike): Evaluation point(s), expected in [-1, 1]. Values
            outside are extrapolated with no accuracy guarantee.

    Returns:
        A scalar for scalar x, otherwise an array with the shape of x.

    Raises:
        DimensionMismatchError: If the coefficients are not a 1D array.
        CoefficientLengthError: If the coefficient vector is empty.
    """
    c = _as_vector_1D(coeffs, "coeffs")
    if c.shape[0] < 1:
        raise CoefficientLengthError("coefficient vector must not be empty")
    T = tabulate_Chebyshev_basis_1D(c.shape[0] - 1, x)
    return T @ c


def forward_cosine_transform(values: npt.ArrayLike) -> npt.NDArray[np.float32 | np.float64]:
    r"""Compute cosine-series coefficients from values on the angular grid.

    The n + 1 values must be sampled at ``generate_periodic_grid(n)``, i.e. at
    \( \theta_j = j\pi/n \). The coefficients \( a_k \) satisfy
    \( \sum_{k=0}^{n} a_k \cos(k\theta_j) = v_j \).

    Args:
        values (npt.ArrayLike): 1D array of n + 1 >= 2 samples.

    Returns:
        npt.NDArray[np.float32 | np.float64]: The n + 1 coefficients.

    Raises:
        DimensionMismatchError: If the values are not a 1D array.
        CoefficientLengthError: If fewer than 2 values are given.
    """
    v = _as_vector_1D(values, "values")
    if v.shape[0] < 2:  # noqa: PLR2004
        raise CoefficientLengthError("cosine transform needs at least 2 values")
    return _dct1_coefficients(v)


def evaluate_cosine(coeffs: npt.ArrayLike, theta: npt.ArrayLike) -> Any:
    """Evaluate a cosine series ``sum_k a_k cos(k*theta)`` at the given angle(s).

    Args:
        coeffs (npt.ArrayLike): 1D array of coefficients.
        theta (npt.ArrayLike): Angle(s).

    Returns:
        A scalar for scalar theta, otherwise an array with the shape of theta.

    Raises:
        DimensionMismatchError: If the coefficients are not a 1D array.
        CoefficientLengthError: If the coefficient vector is empty.
    """
    a = _as_vector_1D(coeffs, "coeffs")
    if a.shape[0] < 1:
        raise CoefficientLengthError("coefficient vector must not be empty")
    C = tabulate_cosine_basis_1D(a.shape[0] - 1, theta)
    return C @ a
