"""Clenshaw-Curtis quadrature from Chebyshev coefficients."""

from __future__ import annotations

import math

import numpy as np
import numpy.typing as npt

from ._basis_utils import _as_vector_1D
from .errors import CoefficientLengthError
from .tolerance import ensure_float_dtype


def _validate_n_coeffs(n: int) -> None:
    """Validate the length of a coefficient vector for Clenshaw-Curtis weights.

    Raises:
        CoefficientLengthError: If n is not a positive odd integer.
    """
    if isinstance(n, bool) or not isinstance(n, int | np.integer):
        raise CoefficientLengthError("number of coefficients must be an integer")
    if n < 1:
        raise CoefficientLengthError("number of coefficients must be at least 1")
    if n % 2 == 0:
        raise CoefficientLengthError(
            f"number of coefficients must be odd, got {n}; sample with n + 1 points instead"
        )


def quadrature_weights(
    length: float, n: int, dtype: npt.DTypeLike = np.float64
) -> npt.NDArray[np.float32 | np.float64]:
    r"""Get the Clenshaw-Curtis weights paired with even-indexed Chebyshev coefficients.

    Since \( \int_{-1}^{1} T_{2k}(x)\,dx = 2 / (1 - 4k^2) \) and odd-degree
    polynomials integrate to zero over a symmetric interval, the integral over
    an interval of length L of an n-term expansion is ``w @ coeffs[0::2]`` with

    \[
    w_k = \frac{L}{1 - 4k^2}, \quad k = 0, \dots, \lceil n/2 \rceil - 1.
    \]

    Args:
        length (float): Interval length ``b - a``. Negative lengths give the
            integral with reversed orientation.
        n (int): Length of the coefficient vector. Must be odd.
        dtype (npt.DTypeLike): float32 or float64. Defaults to float64.

    Returns:
        npt.NDArray[np.float32 | np.float64]: The ``(n + 1) // 2`` weights.

    Raises:
        CoefficientLengthError: If n is not a positive odd integer.
        ValueError: If the length is not finite or dtype is not float32 or float64.

    Example:
        >>> quadrature_weights(2.0, 5)
        array([ 2.        , -0.66666667, -0.13333333])
    """
    _validate_n_coeffs(n)
    ensure_float_dtype(dtype)
    length = float(length)
    if not math.isfinite(length):
        raise ValueError("interval length must be finite")

    m = (n + 1) // 2
    k = np.arange(m, dtype=np.float64)
    weights = length / (1.0 - 4.0 * k * k)
    return weights.astype(dtype)


def clenshaw_curtis_integral(coeffs: npt.ArrayLike, a: float, b: float) -> float:
    """Integrate a Chebyshev expansion over [a, b].

    The coefficients describe the function in the variable mapped from
    [a, b] onto [-1, 1], as returned by
    :func:`pseudospec.transform.forward_transform` for values sampled at
    ``generate_grid(a, b, n)``.

    Args:
        coeffs (npt.ArrayLike): 1D array with an odd number of coefficients.
        a (float): Lower limit.
        b (float): Upper limit.

    Returns:
        float: The integral estimate.

    Raises:
        DimensionMismatchError: If the coefficients are not a 1D array.
        CoefficientLengthError: If the number of coefficients is even.
    """
    c = _as_vector_1D(coeffs, "coeffs")
    weights = quadrature_weights(float(b) - float(a), c.shape[0], np.float64)
    return float(weights @ c[0::2].astype(np.float64))
