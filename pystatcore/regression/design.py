"""
Regression Design.

Design validates paired (x, y) observations and, for polynomial fits,
builds the Vandermonde design matrix. Backends trust what they get here.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pystatcore.core.exceptions import InvalidParametersError
from pystatcore.core.validation import (
    check_array,
    check_1d,
    check_finite,
    check_non_empty,
    check_consistent_length,
    check_min_samples,
)


@dataclass(frozen=True)
class RegressionDesign:
    """
    Regression problem definition.

    Immutable after construction.

    Construction:
        RegressionDesign.for_linear(x, y)                # y = a + b*x
        RegressionDesign.for_polynomial(x, y, degree=2)  # y = sum_j c_j x^j
    """
    model: str
    _x: NDArray[np.floating[Any]]
    _y: NDArray[np.floating[Any]]
    _degree: int
    _n: int

    @classmethod
    def for_linear(cls, x: ArrayLike, y: ArrayLike) -> RegressionDesign:
        """
        Build a simple linear regression design.

        Raises:
            EmptyInputError: If x or y is empty
            DimensionError: If x and y differ in length
            InsufficientDataError: If fewer than 2 observations
        """
        x_arr, y_arr = _paired_arrays(x, y)
        check_min_samples(x_arr, 2, 'x')
        return cls(model='linear', _x=x_arr, _y=y_arr, _degree=1, _n=len(x_arr))

    @classmethod
    def for_polynomial(
        cls,
        x: ArrayLike,
        y: ArrayLike,
        degree: int,
    ) -> RegressionDesign:
        """
        Build a polynomial regression design of the given degree.

        Raises:
            EmptyInputError: If x or y is empty
            DimensionError: If x and y differ in length
            InvalidParametersError: If degree < 1
            InsufficientDataError: If there are not more points than the degree
        """
        x_arr, y_arr = _paired_arrays(x, y)
        if isinstance(degree, bool) or int(degree) != degree:
            raise InvalidParametersError(f"degree must be an integer, got {degree!r}")
        degree = int(degree)
        if degree < 1:
            raise InvalidParametersError(f"degree must be >= 1, got {degree}")
        check_min_samples(x_arr, degree + 1, 'x')
        return cls(
            model='polynomial', _x=x_arr, _y=y_arr, _degree=degree, _n=len(x_arr),
        )

    # === Properties ===

    @property
    def x(self) -> NDArray[np.floating[Any]]:
        """Predictor values (n,)."""
        return self._x

    @property
    def y(self) -> NDArray[np.floating[Any]]:
        """Response values (n,)."""
        return self._y

    @property
    def degree(self) -> int:
        """Polynomial degree (1 for a linear fit)."""
        return self._degree

    @property
    def n(self) -> int:
        """Number of observations."""
        return self._n

    def vandermonde(self) -> NDArray[np.floating[Any]]:
        """Design matrix X with X[i, j] = x_i ** j, shape (n, degree + 1)."""
        return np.vander(self._x, self._degree + 1, increasing=True)


def _paired_arrays(
    x: ArrayLike,
    y: ArrayLike,
) -> tuple[NDArray[np.floating[Any]], NDArray[np.floating[Any]]]:
    """Empty check first, then length, then shape and finiteness."""
    x_arr = check_array(x, 'x')
    y_arr = check_array(y, 'y')
    check_non_empty(x_arr, 'x')
    check_non_empty(y_arr, 'y')
    x_arr = x_arr.ravel() if x_arr.ndim == 0 else x_arr
    y_arr = y_arr.ravel() if y_arr.ndim == 0 else y_arr
    if y_arr.ndim == 2 and y_arr.shape[1] == 1:
        y_arr = y_arr.ravel()
    check_1d(x_arr, 'x')
    check_1d(y_arr, 'y')
    check_consistent_length(x_arr, y_arr, names=('x', 'y'))
    check_finite(x_arr, 'x')
    check_finite(y_arr, 'y')
    return x_arr, y_arr
