"""Tests for the forward Chebyshev and cosine transforms and their evaluation."""

from __future__ import annotations

import numpy as np
import numpy.testing as nptest
import numpy.typing as npt
import pytest
from numpy.polynomial import chebyshev
from scipy.special import iv

from pseudospec.errors import CoefficientLengthError, DimensionMismatchError
from pseudospec.grid import generate_grid, generate_periodic_grid
from pseudospec.tolerance import get_conservative_tolerance, get_default_tolerance
from pseudospec.transform import (
    evaluate,
    evaluate_cosine,
    forward_cosine_transform,
    forward_transform,
)


class TestForwardTransform:
    """Tests for forward_transform."""

    def test_too_short_raises(self) -> None:
        with pytest.raises(CoefficientLengthError, match="at least 2"):
            forward_transform([1.0])

    def test_two_dimensional_raises(self) -> None:
        with pytest.raises(DimensionMismatchError, match="1D"):
            forward_transform(np.ones((3, 3)))

    def test_two_points(self) -> None:
        # f(-1) = 1, f(1) = 5 is the line 3 + 2x
        nptest.assert_allclose(forward_transform([1.0, 5.0]), [3.0, 2.0])

    @pytest.mark.parametrize("k", [0, 1, 3, 6])
    def test_single_chebyshev_polynomial(self, k: int) -> None:
        n = 7
        x = generate_grid(-1.0, 1.0, n)
        values = chebyshev.chebval(x, np.eye(n)[k])
        expected = np.zeros(n)
        expected[k] = 1.0
        nptest.assert_allclose(forward_transform(values), expected, atol=1e-14)

    @pytest.mark.parametrize("n", [3, 8, 21])
    def test_matches_vandermonde_solve(self, n: int) -> None:
        x = generate_grid(-1.0, 1.0, n)
        values = np.sin(3.0 * x) + x**2
        expected = np.linalg.solve(chebyshev.chebvander(x, n - 1), values)
        nptest.assert_allclose(forward_transform(values), expected, atol=1e-12)

    @pytest.mark.parametrize("n", [2, 3, 8, 33, 200])
    def test_round_trip_at_grid_points(self, n: int) -> None:
        x = generate_grid(-1.0, 1.0, n)
        values = np.cos(4.0 * x) * np.exp(x / 2.0)
        coeffs = forward_transform(values)
        nptest.assert_allclose(evaluate(coeffs, x), values, atol=get_default_tolerance(np.float64))

    @pytest.mark.parametrize("n", [8, 12, 16])
    def test_coefficients_of_exp_decay(self, n: int) -> None:
        coeffs = forward_transform(np.exp(generate_grid(-1.0, 1.0, n)))
        assert abs(coeffs[-1]) < 1e-4 * abs(coeffs[0])

    def test_decay_improves_with_n(self) -> None:
        last = [
            abs(forward_transform(np.exp(generate_grid(-1.0, 1.0, n)))[-1]) for n in (6, 9, 12)
        ]
        assert last[1] < last[0]
        assert last[2] < last[1]

    def test_exp_coefficients_match_bessel_series(self) -> None:
        # exp(x) = I_0(1) + 2 sum_k I_k(1) T_k(x)
        n = 20
        coeffs = forward_transform(np.exp(generate_grid(-1.0, 1.0, n)))
        expected = 2.0 * iv(np.arange(n), 1.0)
        expected[0] *= 0.5
        nptest.assert_allclose(coeffs[:10], expected[:10], atol=1e-14)

    @pytest.mark.parametrize("dtype", [np.float32, np.float64])
    def test_preserves_dtype(self, dtype: npt.DTypeLike) -> None:
        x = generate_grid(-1.0, 1.0, 9, dtype)
        coeffs = forward_transform(np.exp(x))
        assert coeffs.dtype == np.dtype(dtype)
        nptest.assert_allclose(
            evaluate(coeffs, x), np.exp(x), atol=get_conservative_tolerance(dtype)
        )

    def test_integer_values_promoted(self) -> None:
        assert forward_transform([1, 2, 3]).dtype == np.float64

    def test_input_not_modified(self) -> None:
        values = np.array([1.0, -2.0, 0.5, 4.0])
        original = values.copy()
        forward_transform(values)
        nptest.assert_array_equal(values, original)

    def test_repeat_calls_are_identical(self) -> None:
        values = np.sin(generate_grid(-1.0, 1.0, 65))
        nptest.assert_array_equal(forward_transform(values), forward_transform(values))


class TestEvaluate:
    """Tests for evaluate."""

    def test_empty_coefficients_raise(self) -> None:
        with pytest.raises(CoefficientLengthError, match="empty"):
            evaluate([], 0.0)

    def test_two_dimensional_coefficients_raise(self) -> None:
        with pytest.raises(DimensionMismatchError, match="1D"):
            evaluate(np.ones((2, 2)), 0.0)

    def test_scalar_point_gives_scalar(self) -> None:
        result = evaluate([1.0, 2.0, 3.0], 0.5)
        assert np.ndim(result) == 0
        # 1 + 2*0.5 + 3*(2*0.25 - 1)
        assert result == pytest.approx(0.5)

    def test_array_shape_is_preserved(self, rng: np.random.Generator) -> None:
        x = rng.uniform(-1.0, 1.0, size=(4, 3))
        coeffs = np.array([0.3, -1.0, 0.25, 2.0])
        result = evaluate(coeffs, x)
        assert result.shape == (4, 3)
        nptest.assert_allclose(result, chebyshev.chebval(x, coeffs), atol=1e-14)

    def test_extrapolation(self) -> None:
        # x^2 = (T_0 + T_2) / 2
        assert evaluate([0.5, 0.0, 0.5], 2.0) == pytest.approx(4.0)

    def test_high_degree_at_endpoints(self) -> None:
        coeffs = np.ones(501)
        assert evaluate(coeffs, 1.0) == 501.0
        assert evaluate(coeffs, -1.0) == 1.0

    def test_interpolant_between_grid_points(self, rng: np.random.Generator) -> None:
        coeffs = forward_transform(np.exp(generate_grid(-1.0, 1.0, 20)))
        x = rng.uniform(-1.0, 1.0, size=50)
        nptest.assert_allclose(evaluate(coeffs, x), np.exp(x), atol=1e-13)


class TestCosineTransform:
    """Tests for forward_cosine_transform and evaluate_cosine."""

    def test_too_short_raises(self) -> None:
        with pytest.raises(CoefficientLengthError):
            forward_cosine_transform([2.0])

    def test_single_harmonic(self) -> None:
        n = 6
        theta = generate_periodic_grid(n)
        expected = np.zeros(n + 1)
        expected[2] = 1.0
        nptest.assert_allclose(forward_cosine_transform(np.cos(2 * theta)), expected, atol=1e-14)

    @pytest.mark.parametrize("n", [1, 5, 24])
    def test_round_trip(self, n: int) -> None:
        theta = generate_periodic_grid(n)
        values = np.exp(np.cos(theta)) + 0.3 * np.cos(theta)
        coeffs = forward_cosine_transform(values)
        nptest.assert_allclose(evaluate_cosine(coeffs, theta), values, atol=1e-13)

    def test_evaluate_between_grid_points(self, rng: np.random.Generator) -> None:
        coeffs = forward_cosine_transform(np.exp(np.cos(generate_periodic_grid(24))))
        theta = rng.uniform(0.0, np.pi, size=30)
        nptest.assert_allclose(evaluate_cosine(coeffs, theta), np.exp(np.cos(theta)), atol=1e-13)

    def test_evaluate_empty_raises(self) -> None:
        with pytest.raises(CoefficientLengthError):
            evaluate_cosine(np.array([]), 0.0)
