"""Chebyshev-Gauss-Lobatto and angular collocation grids."""

from __future__ import annotations

import math

import numpy as np
import numpy.typing as npt

from .errors import GridError
from .tolerance import ensure_float_dtype


def _validate_n_pts_and_dtype(n_pts: int, min_pts: int, dtype: npt.DTypeLike) -> None:
    """Validate the number of points and dtype.

    Args:
        n_pts (int): The number of points.
        min_pts (int): Minimum accepted number of points.
        dtype (npt.DTypeLike): The dtype of the nodes. It must be float32 or float64.

    Raises:
        GridError: If n_pts is not an integer or is less than min_pts.
        ValueError: If dtype is not float32 or float64.
    """
    if isinstance(n_pts, bool) or not isinstance(n_pts, int | np.integer):
        raise GridError("number of points must be an integer")
    if n_pts < min_pts:
        raise GridError(f"number of points must be at least {min_pts}")
    ensure_float_dtype(dtype)


def generate_grid(
    a: float, b: float, n: int, dtype: npt.DTypeLike = np.float64
) -> npt.NDArray[np.float32 | np.float64]:
    r"""Get the n Chebyshev-Gauss-Lobatto points mapped affinely onto [a, b].

    The nodes are

    \[
    x_j = \frac{(a - b)\cos(j\pi/(n-1)) + (a + b)}{2}, \quad j = 0, \dots, n-1,
    \]

    so that ``x[0] == a`` and ``x[-1] == b`` whichever endpoint is larger, and the
    nodes cluster quadratically towards both ends. With ``a=-1, b=1`` this is
    the canonical (ascending) grid expected by
    :func:`pseudospec.transform.forward_transform`.

    Args:
        a (float): First endpoint, ``x[0]``.
        b (float): Last endpoint, ``x[-1]``. Must differ from a.
        n (int): The number of points. Must be at least 2.
        dtype (npt.DTypeLike): float32 or float64. Defaults to float64.

    Returns:
        npt.NDArray[np.float32 | np.float64]: The n nodes, strictly monotonic,
        as a read-only array.

    Raises:
        GridError: If n is less than 2, or the endpoints coincide or are not finite.
        ValueError: If dtype is not float32 or float64.

    Example:
        >>> generate_grid(-1.0, 1.0, 3)
        array([-1.,  0.,  1.])
    """
    _validate_n_pts_and_dtype(n, 2, dtype)

    a = float(a)
    b = float(b)
    if not (math.isfinite(a) and math.isfinite(b)):
        raise GridError("interval endpoints must be finite")
    if a == b:
        raise GridError("interval endpoints must be different")

    theta = np.arange(n, dtype=np.float64) * (np.pi / float(n - 1))
    nodes = 0.5 * ((a - b) * np.cos(theta) + (a + b))
    # Endpoints exactly, not through cos(0) and cos(pi)
    nodes[0] = a
    nodes[-1] = b
    if n % 2 == 1:
        nodes[n // 2] = 0.5 * (a + b)

    nodes = nodes.astype(dtype)
    if np.any(nodes[1:] == nodes[:-1]):
        raise GridError("interval too short for the requested number of points in this dtype")
    nodes.flags.writeable = False
    return nodes


def generate_periodic_grid(
    n: int, dtype: npt.DTypeLike = np.float64
) -> npt.NDArray[np.float32 | np.float64]:
    """Get the n + 1 equally spaced angles ``theta_j = j*pi/n`` on [0, pi].

    Args:
        n (int): Highest harmonic index. Must be at least 1.
        dtype (npt.DTypeLike): float32 or float64. Defaults to float64.

    Returns:
        npt.NDArray[np.float32 | np.float64]: The n + 1 angles, read-only.

    Raises:
        GridError: If n is less than 1.
        ValueError: If dtype is not float32 or float64.
    """
    _validate_n_pts_and_dtype(n, 1, dtype)

    theta = np.arange(n + 1, dtype=np.float64) * (np.pi / float(n))
    theta[-1] = np.pi
    theta = theta.astype(dtype)
    theta.flags.writeable = False
    return theta
