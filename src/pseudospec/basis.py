"""Tabulation of the Chebyshev and cosine bases used by the spectral transforms."""

from __future__ import annotations

import numpy as np
import numpy.typing as npt

from ._basis_impl import _tabulate_Chebyshev_basis_1D_impl, _tabulate_cosine_basis_1D_impl


def tabulate_Chebyshev_basis_1D(
    degree: int,
    pts: npt.ArrayLike,
    out: npt.NDArray[np.float32 | np.float64] | None = None,
) -> npt.NDArray[np.float32 | np.float64]:
    r"""Evaluate the Chebyshev polynomials of the first kind up to the given degree.

    The polynomials are defined on [-1, 1] by \( T_k(\cos\theta) = \cos(k\theta) \)
    and are evaluated with the three-term recurrence
    \( T_{k+1}(x) = 2x T_k(x) - T_{k-1}(x) \).

    Args:
        degree (int): Highest degree. Must be non-negative.
        pts (npt.ArrayLike): Evaluation points in [-1, 1]. Can be a scalar, list, or
            numpy array. Points outside [-1, 1] are extrapolated. Types different
            from float32 or float64 are automatically converted to float64.
        out (npt.NDArray[np.float32 | np.float64] | None): Optional C-contiguous
            output array. Defaults to None.

    Returns:
        npt.NDArray[np.float32 | np.float64]: Evaluated basis functions, with the same shape
        as the input points and the last dimension equal to (degree + 1).

    Raises:
        ValueError: If degree is negative, or if `out` has the wrong shape or dtype.

    Example:
        >>> tabulate_Chebyshev_basis_1D(3, [-1.0, 0.5, 1.0])
        array([[ 1. , -1. ,  1. , -1. ],
               [ 1. ,  0.5, -0.5, -1. ],
               [ 1. ,  1. ,  1. ,  1. ]])
    """
    return _tabulate_Chebyshev_basis_1D_impl(degree, pts, out)


def tabulate_cosine_basis_1D(
    n_harmonics: int,
    theta: npt.ArrayLike,
    out: npt.NDArray[np.float32 | np.float64] | None = None,
) -> npt.NDArray[np.float32 | np.float64]:
    """Evaluate the cosine harmonics cos(k*theta), k = 0..n_harmonics.

    Args:
        n_harmonics (int): Highest harmonic index. Must be non-negative.
        theta (npt.ArrayLike): Angles. Can be a scalar, list, or numpy array.
        out (npt.NDArray[np.float32 | np.float64] | None): Optional C-contiguous
            output array. Defaults to None.

    Returns:
        npt.NDArray[np.float32 | np.float64]: Evaluated harmonics, with the same shape
        as the input angles and the last dimension equal to (n_harmonics + 1).

    Raises:
        ValueError: If n_harmonics is negative, or if `out` has the wrong shape or dtype.
    """
    return _tabulate_cosine_basis_1D_impl(n_harmonics, theta, out)
