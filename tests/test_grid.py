"""Tests for Chebyshev-Gauss-Lobatto and angular grids in pseudospec.grid."""

from __future__ import annotations

import numpy as np
import numpy.testing as nptest
import numpy.typing as npt
import pytest
from numpy.polynomial import chebyshev

from pseudospec.errors import GridError
from pseudospec.grid import generate_grid, generate_periodic_grid
from pseudospec.tolerance import get_default_tolerance, get_strict_tolerance


class TestGenerateGrid:
    """Tests for generate_grid."""

    @pytest.mark.parametrize("n", [0, 1, -3])
    def test_too_few_points_raises(self, n: int) -> None:
        with pytest.raises(GridError, match="at least 2"):
            generate_grid(-1.0, 1.0, n)

    def test_non_integer_n_raises(self) -> None:
        with pytest.raises(GridError, match="integer"):
            generate_grid(-1.0, 1.0, 4.0)  # type: ignore[arg-type]

    def test_equal_endpoints_raise(self) -> None:
        with pytest.raises(GridError, match="different"):
            generate_grid(2.0, 2.0, 5)

    @pytest.mark.parametrize(("a", "b"), [(np.inf, 1.0), (0.0, np.nan)])
    def test_non_finite_endpoints_raise(self, a: float, b: float) -> None:
        with pytest.raises(GridError, match="finite"):
            generate_grid(a, b, 5)

    def test_invalid_dtype_raises(self) -> None:
        with pytest.raises(ValueError, match="float32 or float64"):
            generate_grid(-1.0, 1.0, 4, np.int32)

    def test_grid_error_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            generate_grid(-1.0, 1.0, 1)

    @pytest.mark.parametrize("n", [2, 3, 8, 33, 100])
    @pytest.mark.parametrize(("a", "b"), [(-1.0, 1.0), (0.0, 3.0), (-2.5, 7.0)])
    def test_endpoints_and_increasing(self, n: int, a: float, b: float) -> None:
        x = generate_grid(a, b, n)
        assert x.shape == (n,)
        assert x[0] == a
        assert x[-1] == b
        assert np.all(np.diff(x) > 0.0)

    @pytest.mark.parametrize("n", [2, 5, 16])
    def test_reversed_interval_is_decreasing(self, n: int) -> None:
        x = generate_grid(3.0, -1.0, n)
        assert x[0] == 3.0
        assert x[-1] == -1.0
        assert np.all(np.diff(x) < 0.0)
        nptest.assert_allclose(x, generate_grid(-1.0, 3.0, n)[::-1], atol=1e-14)

    @pytest.mark.parametrize("n", [2, 3, 6, 21])
    def test_matches_formula(self, n: int) -> None:
        a, b = 0.5, 4.0
        j = np.arange(n)
        expected = ((a - b) * np.cos(j * np.pi / (n - 1)) + (a + b)) / 2.0
        nptest.assert_allclose(generate_grid(a, b, n), expected, atol=1e-14)

    @pytest.mark.parametrize("n", [2, 7, 30])
    def test_canonical_grid_is_chebyshev_2nd_kind(self, n: int) -> None:
        nptest.assert_allclose(
            generate_grid(-1.0, 1.0, n),
            chebyshev.chebpts2(n),
            atol=get_strict_tolerance(np.float64),
        )

    def test_two_points_are_endpoints(self) -> None:
        nptest.assert_array_equal(generate_grid(-4.0, 9.0, 2), np.array([-4.0, 9.0]))

    @pytest.mark.parametrize("n", [3, 9, 25])
    def test_odd_grid_midpoint_and_symmetry(self, n: int) -> None:
        x = generate_grid(-1.0, 1.0, n)
        assert x[n // 2] == 0.0
        nptest.assert_allclose(x, -x[::-1], atol=get_default_tolerance(np.float64))

    def test_nodes_cluster_at_endpoints(self) -> None:
        x = generate_grid(-1.0, 1.0, 21)
        spacing = np.diff(x)
        assert spacing[0] < spacing[len(spacing) // 2] / 5.0
        assert spacing[-1] < spacing[len(spacing) // 2] / 5.0

    @pytest.mark.parametrize("dtype", [np.float32, np.float64])
    def test_dtype(self, dtype: npt.DTypeLike) -> None:
        x = generate_grid(0.0, 1.0, 9, dtype)
        assert x.dtype == np.dtype(dtype)
        assert x[0] == 0.0
        assert x[-1] == 1.0

    def test_repeat_calls_are_identical(self) -> None:
        nptest.assert_array_equal(generate_grid(0.1, 2.3, 17), generate_grid(0.1, 2.3, 17))

    def test_grid_is_read_only(self) -> None:
        x = generate_grid(0.0, 1.0, 5)
        with pytest.raises(ValueError):
            x[0] = 2.0


class TestGeneratePeriodicGrid:
    """Tests for generate_periodic_grid."""

    def test_invalid_n_raises(self) -> None:
        with pytest.raises(GridError, match="at least 1"):
            generate_periodic_grid(0)

    @pytest.mark.parametrize("n", [1, 4, 16])
    def test_equispaced_on_zero_pi(self, n: int) -> None:
        theta = generate_periodic_grid(n)
        assert theta.shape == (n + 1,)
        assert theta[0] == 0.0
        assert theta[-1] == np.pi
        nptest.assert_allclose(np.diff(theta), np.pi / n, atol=1e-14)

    def test_dtype(self) -> None:
        assert generate_periodic_grid(3, np.float32).dtype == np.float32

    def test_grid_is_read_only(self) -> None:
        assert not generate_periodic_grid(4).flags.writeable
