"""Differentiation matrices for the trigonometric (periodic) basis.

On the angular grid ``theta_j = j*pi/n`` a function is expanded in the
harmonics ``cos(k*theta)``, k = 0..n. With ``C = cos(outer(theta, k))`` and
``S = sin(outer(theta, k))`` the operators are

    D1 = (S * k)    @ inv(-C)
    D2 = (C * k**2) @ inv(-C)

so both derivatives share a single inversion. The inversion is only carried
out after the reciprocal condition number of ``-C`` has been checked.
"""

from __future__ import annotations

import numpy as np
import numpy.typing as npt
import scipy.linalg

from .errors import DimensionMismatchError, IllConditionedError
from .grid import generate_periodic_grid
from .tolerance import ensure_float_dtype, get_rcond_tolerance


def reciprocal_condition_number(matrix: npt.ArrayLike) -> float:
    """Compute the 2-norm reciprocal condition number of a square matrix.

    Args:
        matrix (npt.ArrayLike): Square matrix.

    Returns:
        float: Ratio of the smallest to the largest singular value; 0.0 for a
        zero matrix and for matrices containing non-finite entries.

    Raises:
        DimensionMismatchError: If the matrix is not square.
    """
    A = np.asarray(matrix, dtype=np.float64)
    if A.ndim != 2 or A.shape[0] != A.shape[1]:  # noqa: PLR2004
        raise DimensionMismatchError(f"expected a square matrix, got shape {A.shape}")
    if A.size == 0:
        raise DimensionMismatchError("expected a non-empty matrix")
    if not np.all(np.isfinite(A)):
        return 0.0

    s = scipy.linalg.svdvals(A)
    if s[0] == 0.0:
        return 0.0
    return float(s[-1] / s[0])


def checked_inverse(matrix: npt.ArrayLike, rcond_threshold: float) -> npt.NDArray[np.float64]:
    """Invert a square matrix, refusing when it is singular or nearly so.

    Args:
        matrix (npt.ArrayLike): Square matrix.
        rcond_threshold (float): Smallest accepted reciprocal condition number.

    Returns:
        npt.NDArray[np.float64]: The inverse.

    Raises:
        DimensionMismatchError: If the matrix is not square.
        IllConditionedError: If the reciprocal condition number is below the threshold.
    """
    rcond = reciprocal_condition_number(matrix)
    if not rcond >= rcond_threshold:
        raise IllConditionedError(rcond, float(rcond_threshold))
    try:
        return scipy.linalg.inv(np.asarray(matrix, dtype=np.float64))
    except np.linalg.LinAlgError as exc:
        raise IllConditionedError(0.0, float(rcond_threshold)) from exc


def build_periodic_diff_matrices(
    n: int,
    rcond_threshold: float | None = None,
    dtype: npt.DTypeLike = np.float64,
) -> tuple[npt.NDArray[np.float32 | np.float64], npt.NDArray[np.float32 | np.float64]]:
    """Build first and second derivative operators on the angular grid ``j*pi/n``.

    On this grid the cosine matrix is a type-1 DCT matrix, whose reciprocal
    condition number is at least 0.5 for every n, so the default threshold
    never rejects a construction; rejection requires a caller-supplied
    ``rcond_threshold``.

    Args:
        n (int): Highest harmonic. The grid has n + 1 points. Must be at least 1.
        rcond_threshold (float | None): Smallest accepted reciprocal condition
            number of the cosine matrix. Defaults to
            :func:`pseudospec.tolerance.get_rcond_tolerance` for the dtype.
        dtype (npt.DTypeLike): float32 or float64. Defaults to float64.
            Computation is carried out in float64.

    Returns:
        tuple[npt.NDArray, npt.NDArray]: The (n+1) x (n+1) matrices ``(D1, D2)``.
        Applied to values sampled on :func:`pseudospec.grid.generate_periodic_grid`
        they return the derivatives of the cosine interpolant at the same angles.

    Raises:
        GridError: If n is less than 1.
        ValueError: If dtype is not float32 or float64.
        IllConditionedError: If the cosine matrix is too close to singular.
    """
    dtype = ensure_float_dtype(dtype)
    if rcond_threshold is None:
        rcond_threshold = get_rcond_tolerance(dtype)

    theta = generate_periodic_grid(n, np.float64)
    harmonics = np.arange(n + 1, dtype=np.float64)
    M = np.outer(theta, harmonics)
    C = np.cos(M)
    S = np.sin(M)

    inv_neg_C = checked_inverse(-C, rcond_threshold)

    D1 = (S * harmonics) @ inv_neg_C
    D2 = (C * harmonics**2) @ inv_neg_C
    return D1.astype(dtype), D2.astype(dtype)
