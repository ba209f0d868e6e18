"""Utility functions for array normalization and validation."""

import numpy as np
from numpy import typing as npt

from .errors import DimensionMismatchError


def _normalize_points_1D(pts: npt.ArrayLike) -> npt.NDArray[np.float32 | np.float64]:
    """Normalize points to a 1D float array for basis function evaluation.

    Converts input points (scalar, list, or numpy array) to a 1D numpy array
    with floating point dtype. Types different from float32 or float64 are
    automatically converted to float64.
    Zero-dimensional arrays (scalars) are converted to 1D arrays with a single
    element. Multi-dimensional arrays are flattened to 1D.

    Returns:
        A contiguous 1D numpy array with dtype np.float32 or np.float64.
    """
    if not isinstance(pts, np.ndarray):
        pts = np.array(pts)

    if pts.dtype not in (np.float32, np.float64):
        pts = pts.astype(np.float64)

    if pts.ndim == 0:
        pts = np.array([pts], dtype=pts.dtype)
    elif pts.ndim > 1:
        pts = pts.ravel()

    return np.ascontiguousarray(pts)


def _as_vector_1D(arr: npt.ArrayLike, name: str) -> npt.NDArray[np.float32 | np.float64]:
    """Convert an array-like to a contiguous 1D float array without flattening.

    Types different from float32 or float64 are converted to float64.

    Args:
        arr (npt.ArrayLike): Input vector.
        name (str): Name used in error messages.

    Returns:
        npt.NDArray[np.float32 | np.float64]: The vector.

    Raises:
        DimensionMismatchError: If the input is not one-dimensional.
    """
    vec = np.asarray(arr)
    if vec.ndim != 1:
        raise DimensionMismatchError(f"{name} must be a 1D array, got {vec.ndim} dimensions")
    if vec.dtype not in (np.float32, np.float64):
        vec = vec.astype(np.float64)
    return np.ascontiguousarray(vec)


def _input_shape(pts: npt.ArrayLike) -> tuple[int, ...]:
    """Get the shape of the evaluation points before normalization."""
    if isinstance(pts, np.ndarray):
        return pts.shape
    elif isinstance(pts, list | tuple):
        return np.array(pts).shape
    else:  # scalar
        return ()


def _compute_final_output_shape_1D(input_shape: tuple[int, ...], n_basis: int) -> tuple[int, ...]:
    """Compute the final output shape for a 1D basis tabulation.

    Args:
        input_shape (tuple[int, ...]): The shape of the input points (before normalization).
        n_basis (int): The number of basis functions.

    Returns:
        tuple[int, ...]: ``(n_basis,)`` for scalar input, ``(*input_shape, n_basis)`` otherwise.
    """
    if len(input_shape) == 0:
        return (n_basis,)
    else:
        return (*input_shape, n_basis)


def _validate_out_array_1D(
    out: npt.NDArray[np.float32 | np.float64],
    expected_shape: tuple[int, ...],
    expected_dtype: npt.DTypeLike,
) -> None:
    """Validate that the output array has the correct shape and dtype.

    This function follows NumPy's style for output array validation.

    Args:
        out (npt.NDArray[np.float32 | np.float64]): The output array to validate.
        expected_shape (tuple[int, ...]): The expected shape of the output array.
        expected_dtype (npt.DTypeLike): The expected dtype (should be np.float32 or np.float64).

    Raises:
        DimensionMismatchError: If the array shape does not match.
        ValueError: If the dtype does not match or the array is not writeable.
    """
    if out.shape != expected_shape:
        raise DimensionMismatchError(
            f"Output array has shape {out.shape}, but expected shape {expected_shape}"
        )
    if out.dtype != expected_dtype:
        raise ValueError(f"Output array has dtype {out.dtype}, but expected dtype {expected_dtype}")
    if not out.flags.writeable:
        raise ValueError("Output array is not writeable")
    if not out.flags.c_contiguous:
        raise ValueError("Output array must be C-contiguous")
