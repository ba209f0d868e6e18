"""Precision configuration: dtype-keyed tolerances and conditioning thresholds."""

from functools import cache
from typing import Any, NamedTuple, cast

import numpy as np
from numpy import typing as npt


@cache
def _ensure_float_dtype_by_name(name: str) -> np.dtype[np.floating[Any]]:
    """Cached validator returning a supported floating dtype from its canonical name.

    Args:
        name (str): Canonical NumPy dtype name (e.g., "float64").

    Returns:
        np.dtype[np.floating[Any]]: Validated floating-point dtype.

    Raises:
        ValueError: If dtype is not float32 or float64.
    """
    dtype_obj = np.dtype(name)
    if dtype_obj.type not in (np.float32, np.float64):
        raise ValueError("dtype must be float32 or float64")
    return cast(np.dtype[np.floating[Any]], dtype_obj)


def ensure_float_dtype(dtype: npt.DTypeLike) -> np.dtype[np.floating[Any]]:
    """Normalize and validate a dtype-like into float32 or float64.

    Raises:
        ValueError: If dtype is not float32 or float64.
    """
    try:
        dtype_obj = np.dtype(dtype)
    except TypeError as exc:
        raise ValueError("dtype must be float32 or float64") from exc
    return _ensure_float_dtype_by_name(dtype_obj.name)


class _TolerancePreset(NamedTuple):
    """Tolerance values for the supported floating-point types."""

    float32: float
    float64: float


_TOLERANCE_PRESETS = {
    "default": _TolerancePreset(1e-6, 1e-12),
    "strict": _TolerancePreset(5e-7, 1e-15),
    "conservative": _TolerancePreset(1e-4, 1e-10),
    # Smallest acceptable reciprocal condition number of a matrix before inversion.
    "rcond": _TolerancePreset(1e-5, 1e-12),
}


def _get_tolerance(dtype: npt.DTypeLike, preset: _TolerancePreset) -> float:
    """Get the tolerance value for a specific dtype from a preset.

    Raises:
        ValueError: If dtype is not float32 or float64.
    """
    dtype_obj = ensure_float_dtype(dtype)
    if dtype_obj.type == np.float32:
        return preset.float32
    else:  # if dtype_obj.type == np.float64:
        return preset.float64


def get_default_tolerance(dtype: npt.DTypeLike = np.float64) -> float:
    """Get a reasonable default tolerance for floating-point comparisons.

    Args:
        dtype (npt.DTypeLike): float32 or float64. Defaults to float64.

    Returns:
        float: Recommended tolerance value for the given dtype.

    Raises:
        ValueError: If dtype is not float32 or float64.

    Example:
        >>> get_default_tolerance(np.float32)
        1e-06
        >>> get_default_tolerance("float64")
        1e-12
    """
    return _get_tolerance(dtype, _TOLERANCE_PRESETS["default"])


def get_strict_tolerance(dtype: npt.DTypeLike = np.float64) -> float:
    """Get a strict tolerance, a few ulps above machine epsilon."""
    return _get_tolerance(dtype, _TOLERANCE_PRESETS["strict"])


def get_conservative_tolerance(dtype: npt.DTypeLike = np.float64) -> float:
    """Get a conservative tolerance for comparisons of derived quantities.

    Spectral derivatives lose roughly one digit per differentiation order,
    so second-order results are usually compared against this tolerance.
    """
    return _get_tolerance(dtype, _TOLERANCE_PRESETS["conservative"])


def get_rcond_tolerance(dtype: npt.DTypeLike = np.float64) -> float:
    """Get the default reciprocal-condition-number threshold for matrix inversion.

    Args:
        dtype (npt.DTypeLike): float32 or float64. Defaults to float64.

    Returns:
        float: Inversions whose reciprocal condition number falls below this
            value are rejected as ill-conditioned.

    Raises:
        ValueError: If dtype is not float32 or float64.
    """
    return _get_tolerance(dtype, _TOLERANCE_PRESETS["rcond"])


def get_machine_epsilon(dtype: npt.DTypeLike = np.float64) -> float:
    """Get machine epsilon for float32 or float64.

    Raises:
        ValueError: If dtype is not float32 or float64.
    """
    return float(np.finfo(ensure_float_dtype(dtype)).eps)
