"""Differentiation matrices for the polynomial (non-periodic) basis.

The matrices act on vectors of function values at a point set and return
the values of the derivatives of the interpolating polynomial at the same
points. Off-diagonal entries follow from the barycentric weights of the
nodes; every diagonal entry is the negated sum of the off-diagonal entries
of its row, so that constants are differentiated to zero row by row.
"""

from __future__ import annotations

import numpy as np
import numpy.typing as npt

from ._basis_impl import nb_jit
from ._basis_utils import _as_vector_1D
from .errors import GridError


def _validate_point_set(points: npt.ArrayLike) -> npt.NDArray[np.float32 | np.float64]:
    """Normalize a point set and check it has at least 2 distinct finite nodes.

    Raises:
        DimensionMismatchError: If the points are not a 1D array.
        GridError: If there are fewer than 2 nodes, a non-finite node or duplicate nodes.
    """
    x = _as_vector_1D(points, "points")
    if x.shape[0] < 2:  # noqa: PLR2004
        raise GridError("point set must have at least 2 nodes")
    if not np.all(np.isfinite(x)):
        raise GridError("point set must contain only finite nodes")
    sorted_x = np.sort(x)
    if np.any(sorted_x[1:] == sorted_x[:-1]):
        raise GridError("point set must not contain duplicate nodes")
    return x


def compute_barycentric_weights(points: npt.ArrayLike) -> npt.NDArray[np.float32 | np.float64]:
    r"""Compute the barycentric weights of a point set.

    \[
    w_j = \frac{1}{\prod_{k \neq j} (x_j - x_k)}
    \]

    The products are accumulated as sums of logarithms and the weights are
    normalized so that the largest magnitude is 1; plain products underflow
    for a few hundred nodes. Only the ratios \( w_j / w_i \) enter the
    differentiation matrices, so the normalization does not change them.

    Args:
        points (npt.ArrayLike): 1D array of distinct nodes.

    Returns:
        npt.NDArray[np.float32 | np.float64]: The normalized barycentric weights,
        with the dtype of the points (float64 for non-float input).

    Raises:
        DimensionMismatchError: If the points are not a 1D array.
        GridError: If there are fewer than 2 nodes or duplicate nodes.
    """
    x = _validate_point_set(points)
    n = x.shape[0]
    x64 = x.astype(np.float64)
    diffs = x64[:, None] - x64[None, :]
    diffs[np.diag_indices(n)] = 1.0

    log_abs_prod = np.sum(np.log(np.abs(diffs)), axis=1)
    signs = np.prod(np.sign(diffs), axis=1)
    w = signs * np.exp(log_abs_prod.min() - log_abs_prod)
    return w.astype(x.dtype)


@nb_jit(
    nopython=True,
    cache=True,
    parallel=False,
)
def _build_diff_matrices_core(
    x: npt.NDArray[np.float64],
    w: npt.NDArray[np.float64],
    D1: npt.NDArray[np.float64],
    D2: npt.NDArray[np.float64],
) -> None:
    """Fill the first and second order differentiation matrices.

    Off-diagonal entries use the recursion

        D1_ij = (w_j / w_i) / (x_i - x_j)
        D2_ij = 2 (w_j / w_i * D1_ii - D1_ij) / (x_i - x_j)

    and each diagonal is the negated sum of its row's off-diagonal entries.
    D1's diagonal must be complete before D2's off-diagonal entries are formed.

    Args:
        x (npt.NDArray[np.float64]): Nodes, length n.
        w (npt.NDArray[np.float64]): Barycentric weights, length n.
        D1 (npt.NDArray[np.float64]): Output n x n array for the first derivative.
        D2 (npt.NDArray[np.float64]): Output n x n array for the second derivative.
    """
    n = x.shape[0]

    for i in range(n):
        row_sum = 0.0
        for j in range(n):
            if j != i:
                D1[i, j] = (w[j] / w[i]) / (x[i] - x[j])
                row_sum += D1[i, j]
        D1[i, i] = -row_sum

    for i in range(n):
        row_sum = 0.0
        for j in range(n):
            if j != i:
                D2[i, j] = 2.0 * ((w[j] / w[i]) * D1[i, i] - D1[i, j]) / (x[i] - x[j])
                row_sum += D2[i, j]
        D2[i, i] = -row_sum


def build_diff_matrices(
    points: npt.ArrayLike,
) -> tuple[
    npt.NDArray[np.float32 | np.float64],
    npt.NDArray[np.float32 | np.float64],
    npt.NDArray[np.float32 | np.float64],
]:
    """Build the order 0, 1 and 2 differentiation matrices for a point set.

    Any set of distinct nodes is accepted. Accuracy is best on
    Chebyshev-Gauss-Lobatto points (see :func:`pseudospec.grid.generate_grid`);
    on equispaced nodes the matrices are exact for polynomials but amplify
    errors rapidly as n grows.

    The matrices differentiate with respect to the coordinates of the given
    points: matrices built on a grid over [a, b] need no further rescaling.

    Args:
        points (npt.ArrayLike): 1D array of n >= 2 distinct nodes.

    Returns:
        tuple[npt.NDArray, npt.NDArray, npt.NDArray]: The n x n matrices
        ``(M0, M1, M2)``. ``M0`` is the identity; ``M1 @ f(points)`` and
        ``M2 @ f(points)`` approximate the first and second derivatives of f at
        the points, exactly when f is a polynomial of degree < n. The dtype
        follows the points (float64 for non-float input). Computation is
        carried out in float64.

    Raises:
        DimensionMismatchError: If the points are not a 1D array.
        GridError: If there are fewer than 2 nodes or duplicate nodes.
    """
    x = _validate_point_set(points)
    dtype = x.dtype
    n = x.shape[0]

    x64 = x.astype(np.float64)
    w = compute_barycentric_weights(x64)

    D1 = np.zeros((n, n), dtype=np.float64)
    D2 = np.zeros((n, n), dtype=np.float64)
    _build_diff_matrices_core(x64, w, D1, D2)

    M0 = np.eye(n, dtype=dtype)
    return M0, D1.astype(dtype, copy=False), D2.astype(dtype, copy=False)
