"""
Regression solution types.

Contains the parameter payloads and user-facing model wrappers.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING
import math
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pystatcore.core.result import Result
from pystatcore.core.validation import (
    check_1d,
    check_array,
    check_consistent_length,
    check_finite,
)

if TYPE_CHECKING:
    from pystatcore.regression.design import RegressionDesign


@dataclass(frozen=True)
class LinearParams:
    """
    Parameter payload for simple linear regression.

    This is the immutable data computed by backends.
    """
    slope: float
    intercept: float
    r_squared: float
    correlation: float
    n: int


@dataclass(frozen=True)
class PolynomialParams:
    """
    Parameter payload for polynomial regression.

    coefficients[j] multiplies x ** j.
    """
    coefficients: NDArray[np.floating[Any]]
    degree: int
    r_squared: float
    rss: float
    tss: float
    n: int


class _FittedModel:
    """Prediction and error metrics shared by the regression models."""

    _result: Result[Any]

    def _evaluate(self, x: NDArray[np.floating[Any]]) -> NDArray[np.floating[Any]]:
        raise NotImplementedError

    def predict(self, x: float | ArrayLike) -> float | NDArray[np.floating[Any]]:
        """
        Predicted response at x.

        A scalar input returns a float; an array-like returns an array.
        """
        if np.ndim(x) == 0:
            return float(self._evaluate(np.array([float(x)]))[0])
        return self._evaluate(np.asarray(x, dtype=np.float64))

    def residuals(self, x: ArrayLike, y: ArrayLike) -> NDArray[np.floating[Any]]:
        """
        Observed minus predicted, y_i - predict(x_i).

        Empty x and y give an empty array.
        """
        x_arr = _as_points(x, 'x')
        y_arr = _as_points(y, 'y')
        check_consistent_length(x_arr, y_arr, names=('x', 'y'))
        return y_arr - self._evaluate(x_arr)

    def mean_squared_error(self, x: ArrayLike, y: ArrayLike) -> float:
        """Mean of squared residuals; nan when there are no points."""
        r = self.residuals(x, y)
        if len(r) == 0:
            return math.nan
        return float(np.mean(r ** 2))

    def root_mean_squared_error(self, x: ArrayLike, y: ArrayLike) -> float:
        """Square root of the mean squared error."""
        return math.sqrt(self.mean_squared_error(x, y))

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings


@dataclass(frozen=True)
class LinearRegression(_FittedModel):
    """
    Fitted simple linear regression y = intercept + slope * x.

    Wraps the backend Result; the fit never changes after construction.
    """
    _result: Result[LinearParams]
    _design: 'RegressionDesign | None' = None

    @property
    def slope(self) -> float:
        return self._result.params.slope

    @property
    def intercept(self) -> float:
        return self._result.params.intercept

    @property
    def r_squared(self) -> float:
        return self._result.params.r_squared

    @property
    def correlation(self) -> float:
        """Pearson correlation of x and y (nan when y is constant)."""
        return self._result.params.correlation

    @property
    def coefficients(self) -> NDArray[np.floating[Any]]:
        """[intercept, slope], indexed by power of x."""
        return np.array([self.intercept, self.slope])

    def _evaluate(self, x: NDArray[np.floating[Any]]) -> NDArray[np.floating[Any]]:
        return self.intercept + self.slope * x

    def summary(self) -> str:
        """Generate a text summary of the fit."""
        lines = [
            "Linear Regression Results",
            "=" * 60,
            f"Observations: {self._result.params.n}",
            f"Equation: y = {self.intercept:.6g} + {self.slope:.6g} * x",
            f"Slope: {self.slope:.6f}",
            f"Intercept: {self.intercept:.6f}",
            f"Correlation: {self.correlation:.6f}",
            f"R-squared: {self.r_squared:.6f}",
            "-" * 60,
            f"Backend: {self.backend_name}",
        ]
        if self.timing:
            lines.append(f"Time: {self.timing.get('total_seconds', 0):.4f}s")
        for w in self.warnings:
            lines.append(f"Warning: {w}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"LinearRegression(slope={self.slope:.4g}, "
            f"intercept={self.intercept:.4g}, r_squared={self.r_squared:.4f})"
        )


@dataclass(frozen=True)
class PolynomialRegression(_FittedModel):
    """
    Fitted polynomial regression y = sum_j coefficients[j] * x ** j.
    """
    _result: Result[PolynomialParams]
    _design: 'RegressionDesign | None' = None

    @property
    def coefficients(self) -> NDArray[np.floating[Any]]:
        """Coefficients indexed by power of x (read-only array)."""
        return self._result.params.coefficients

    @property
    def degree(self) -> int:
        return self._result.params.degree

    @property
    def r_squared(self) -> float:
        return self._result.params.r_squared

    @property
    def rss(self) -> float:
        """Residual sum of squares on the training data."""
        return self._result.params.rss

    @property
    def tss(self) -> float:
        """Total sum of squares on the training data."""
        return self._result.params.tss

    def _evaluate(self, x: NDArray[np.floating[Any]]) -> NDArray[np.floating[Any]]:
        # Horner's rule, highest power first
        out = np.zeros_like(x, dtype=np.float64)
        for c in self.coefficients[::-1]:
            out = out * x + c
        return out

    def summary(self) -> str:
        """Generate a text summary with one row per coefficient."""
        lines = [
            "Polynomial Regression Results",
            "=" * 60,
            f"Observations: {self._result.params.n}",
            f"Degree: {self.degree}",
            f"R-squared: {self.r_squared:.6f}",
            "",
            "Coefficients:",
            "-" * 60,
            f"{'Power':<8} {'Estimate':>14}",
            "-" * 60,
        ]
        for j, coef in enumerate(self.coefficients):
            lines.append(f"  x^{j:<5d} {coef:14.6f}")
        lines.append("-" * 60)
        lines.append(f"Backend: {self.backend_name}")
        if self.timing:
            lines.append(f"Time: {self.timing.get('total_seconds', 0):.4f}s")
        for w in self.warnings:
            lines.append(f"Warning: {w}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"PolynomialRegression(degree={self.degree}, "
            f"r_squared={self.r_squared:.4f})"
        )


def _as_points(values: ArrayLike, name: str) -> NDArray[np.floating[Any]]:
    """1D finite float array; unlike as_sample, empty input is allowed."""
    arr = check_array(values, name)
    if arr.ndim == 0:
        arr = arr.reshape(1)
    check_1d(arr, name)
    check_finite(arr, name)
    return arr
