"""
Solver dispatch for regression.

This module provides fit_linear() and fit_polynomial() (public API) and
backend selection.
"""

from __future__ import annotations

from numpy.typing import ArrayLike

from pystatcore.core.exceptions import InvalidParametersError
from pystatcore.regression.design import RegressionDesign
from pystatcore.regression.solution import LinearRegression, PolynomialRegression
from pystatcore.regression.backends.cpu import (
    CPULinearBackend,
    CPUNormalEquationsBackend,
)


def fit_linear(
    x: ArrayLike,
    y: ArrayLike,
    *,
    backend: str = 'cpu',
) -> LinearRegression:
    """
    Fit a simple linear regression y = intercept + slope * x.

    Args:
        x: Predictor values. Any 1D array-like.
        y: Response values, same length as x.
        backend: 'cpu' (default)

    Returns:
        LinearRegression with slope, intercept, r_squared and correlation

    Raises:
        EmptyInputError: If x or y is empty
        DimensionError: If x and y differ in length
        InsufficientDataError: If fewer than 2 observations
        InvalidCalculationError: If all x values are identical

    Example:
        >>> from pystatcore.regression import fit_linear
        >>> model = fit_linear([1, 2, 3, 4], [3, 5, 7, 9])
        >>> model.slope, model.intercept
        (2.0, 1.0)
    """
    design = RegressionDesign.for_linear(x, y)
    result = _get_backend(backend, design).solve(design)
    return LinearRegression(_result=result, _design=design)


def fit_polynomial(
    x: ArrayLike,
    y: ArrayLike,
    degree: int,
    *,
    backend: str = 'cpu',
) -> PolynomialRegression:
    """
    Fit a least-squares polynomial of the given degree.

    Args:
        x: Predictor values. Any 1D array-like.
        y: Response values, same length as x.
        degree: Polynomial degree, >= 1. Needs more than `degree` points.
        backend: 'cpu' (default)

    Returns:
        PolynomialRegression with coefficients indexed by power of x

    Raises:
        EmptyInputError: If x or y is empty
        DimensionError: If x and y differ in length
        InvalidParametersError: If degree < 1
        InsufficientDataError: If len(x) <= degree
        SingularMatrixError: If the normal equations are singular
    """
    design = RegressionDesign.for_polynomial(x, y, degree)
    result = _get_backend(backend, design).solve(design)
    return PolynomialRegression(_result=result, _design=design)


def _get_backend(choice: str, design: RegressionDesign):
    """
    Select and instantiate the backend for the design's model.

    Raises:
        InvalidParametersError: If unknown backend specified
    """
    if choice not in ('cpu', 'auto'):
        raise InvalidParametersError(f"Unknown backend: {choice!r}")
    if design.model == 'linear':
        return CPULinearBackend()
    return CPUNormalEquationsBackend()
