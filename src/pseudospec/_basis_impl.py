"""Numba-backed core implementations for 1D Chebyshev and cosine bases."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, TypeVar, cast

import numba as nb
import numpy as np
import numpy.typing as npt

from ._basis_utils import (
    _compute_final_output_shape_1D,
    _input_shape,
    _normalize_points_1D,
    _validate_out_array_1D,
)

F = TypeVar("F", bound=Callable[..., Any])

if TYPE_CHECKING:
    # During type-checking, make the decorator a no-op that preserves types.
    def nb_jit(*args: object, **kwargs: object) -> Callable[[F], F]:
        def decorator(func: F) -> F:
            return func

        return decorator
else:
    # At runtime, use the real Numba decorator.
    nb_jit = nb.jit  # type: ignore[attr-defined]


@nb_jit(
    nopython=True,
    cache=True,
    parallel=False,
)
def _tabulate_Chebyshev_basis_1D_core(
    n: np.int32,
    t: npt.NDArray[np.float32 | np.float64],
    out: npt.NDArray[np.float32 | np.float64],
) -> None:
    """Evaluate Chebyshev polynomials of the first kind T_0..T_n at points t.

    Uses the three-term recurrence
    T_0(x) = 1, T_1(x) = x, T_i(x) = 2x T_{i-1}(x) - T_{i-2}(x),
    which stays stable near x = +-1 for high degrees, unlike expanded
    monomial forms.

    Args:
        n (np.int32): Highest degree. Must be non-negative.
        t (npt.NDArray[np.float32 | np.float64]): 1D array of evaluation points.
            Points outside [-1, 1] are extrapolated.
        out (npt.NDArray[np.float32 | np.float64]): Output array of shape
            (len(t), n+1) and dtype matching t. No validation is performed
            inside this numba-compiled function.
    """
    num_pts = t.shape[0]

    for j in range(num_pts):
        out[j, 0] = 1.0

    if n == 0:
        return

    for j in range(num_pts):
        out[j, 1] = t[j]

    for i in range(2, n + 1):
        for j in range(num_pts):
            out[j, i] = 2.0 * t[j] * out[j, i - 1] - out[j, i - 2]


@nb_jit(
    nopython=True,
    cache=True,
    parallel=False,
)
def _tabulate_cosine_basis_1D_core(
    n: np.int32,
    t: npt.NDArray[np.float32 | np.float64],
    out: npt.NDArray[np.float32 | np.float64],
) -> None:
    """Evaluate the cosine harmonics cos(k t), k = 0..n, at angles t.

    Args:
        n (np.int32): Highest harmonic. Must be non-negative.
        t (npt.NDArray[np.float32 | np.float64]): 1D array of angles.
        out (npt.NDArray[np.float32 | np.float64]): Output array of shape
            (len(t), n+1) and dtype matching t.
    """
    for j in range(t.shape[0]):
        for k in range(n + 1):
            out[j, k] = np.cos(k * t[j])


def _tabulate_basis_1D_impl_helper(
    n: int,
    t: npt.ArrayLike,
    core_func: Callable[
        [np.int32, npt.NDArray[np.float32 | np.float64], npt.NDArray[np.float32 | np.float64]],
        None,
    ],
    out: npt.NDArray[np.float32 | np.float64] | None = None,
) -> npt.NDArray[np.float32 | np.float64]:
    """Common implementation for tabulating 1D basis functions.

    Handles input normalization, output allocation/validation, and dtype dispatching
    for calling the appropriate core function.

    Args:
        n (int): Highest degree (or harmonic) of the basis. Must be non-negative.
        t (npt.ArrayLike): Evaluation points. Can be a scalar, list, or numpy array.
            Types different from float32 or float64 are automatically converted to float64.
        core_func: Core function to call for computation.
        out (npt.NDArray[np.float32 | np.float64] | None): Optional output array
            where the result will be stored. If None, a new array is allocated.
            Must have the correct shape and dtype if provided. Defaults to None.

    Returns:
        npt.NDArray[np.float32 | np.float64]: Evaluated basis functions, with the same shape
        as the input points and the last dimension equal to n + 1.
        If `out` was provided, returns the same array.

    Raises:
        ValueError: If n is negative, or if `out` is provided and has incorrect
            shape or dtype.
    """
    if n < 0:
        raise ValueError("degree must be non-negative")

    input_shape = _input_shape(t)
    t = _normalize_points_1D(t)
    num_pts = t.shape[0]
    n_basis = n + 1

    expected_normalized_shape = (num_pts, n_basis)
    expected_final_shape = _compute_final_output_shape_1D(input_shape, n_basis)

    if out is None:
        out = np.empty(expected_final_shape, dtype=t.dtype)
    else:
        _validate_out_array_1D(out, expected_final_shape, cast(npt.DTypeLike, t.dtype))

    B_normalized = out.reshape(expected_normalized_shape)

    core_func(np.int32(n), t, B_normalized)

    return out


def _tabulate_Chebyshev_basis_1D_impl(
    n: int,
    t: npt.ArrayLike,
    out: npt.NDArray[np.float32 | np.float64] | None = None,
) -> npt.NDArray[np.float32 | np.float64]:
    """Evaluate the Chebyshev polynomials T_0..T_n at the given points.

    See :func:`pseudospec.basis.tabulate_Chebyshev_basis_1D`.
    """
    return _tabulate_basis_1D_impl_helper(n, t, _tabulate_Chebyshev_basis_1D_core, out)


def _tabulate_cosine_basis_1D_impl(
    n: int,
    t: npt.ArrayLike,
    out: npt.NDArray[np.float32 | np.float64] | None = None,
) -> npt.NDArray[np.float32 | np.float64]:
    """Evaluate the cosine harmonics cos(0 t)..cos(n t) at the given angles.

    See :func:`pseudospec.basis.tabulate_cosine_basis_1D`.
    """
    return _tabulate_basis_1D_impl_helper(n, t, _tabulate_cosine_basis_1D_core, out)
