"""
Least-squares regression.

Public API:
    fit_linear(x, y) -> LinearRegression
    fit_polynomial(x, y, degree) -> PolynomialRegression

Both fitted models provide predict(), residuals(), mean_squared_error(),
root_mean_squared_error() and summary().

Example:
    >>> from pystatcore.regression import fit_polynomial
    >>> model = fit_polynomial([1, 2, 3, 4, 5], [1, 4, 9, 16, 25], degree=2)
    >>> print(model.coefficients)
    >>> print(model.summary())
"""

from pystatcore.regression.design import RegressionDesign
from pystatcore.regression.solution import (
    LinearRegression,
    LinearParams,
    PolynomialRegression,
    PolynomialParams,
)
from pystatcore.regression.solvers import fit_linear, fit_polynomial

__all__ = [
    "fit_linear",
    "fit_polynomial",
    "RegressionDesign",
    "LinearRegression",
    "LinearParams",
    "PolynomialRegression",
    "PolynomialParams",
]
