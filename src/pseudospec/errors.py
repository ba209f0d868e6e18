"""Exceptions raised by the spectral engine."""

from __future__ import annotations


class SpectralError(Exception):
    """Base exception for all spectral engine errors."""


class GridError(SpectralError, ValueError):
    """Invalid point set: too few points, duplicate nodes or a degenerate interval."""


class CoefficientLengthError(SpectralError, ValueError):
    """Coefficient or value vector whose length is not valid for the requested operation."""


class DimensionMismatchError(SpectralError, ValueError):
    """Array with the wrong number of dimensions or incompatible shapes."""


class IllConditionedError(SpectralError, ArithmeticError):
    """Matrix inversion rejected because the matrix is singular or nearly so.

    Attributes:
        rcond (float): Measured reciprocal condition number (0.0 if exactly singular).
        threshold (float): Threshold the measurement was compared against.
    """

    def __init__(self, rcond: float, threshold: float) -> None:
        self.rcond = rcond
        self.threshold = threshold
        super().__init__(
            f"Ill-conditioned construction: reciprocal condition number {rcond:.3e} "
            f"is below the threshold {threshold:.3e}"
        )
