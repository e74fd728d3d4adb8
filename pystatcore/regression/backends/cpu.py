"""
CPU reference backends for regression.

CPULinearBackend uses the closed-form least-squares solution for a single
predictor. CPUNormalEquationsBackend solves X'X beta = X'y for the
Vandermonde design with Gaussian elimination and partial pivoting.
"""

from __future__ import annotations

from typing import Any
import math
import numpy as np

from pystatcore.core.exceptions import InvalidCalculationError
from pystatcore.core.result import Result
from pystatcore.core.compute.timing import Timer
from pystatcore.core.compute.linalg import transpose, multiply, solve
from pystatcore.regression.design import RegressionDesign
from pystatcore.regression.solution import LinearParams, PolynomialParams


class CPULinearBackend:
    """
    Closed-form simple linear regression.

    Implements the Backend protocol for RegressionDesign -> LinearParams.
    """

    @property
    def name(self) -> str:
        return 'cpu_closed_form'

    def solve(self, design: RegressionDesign) -> Result[LinearParams]:
        """
        Fit y = intercept + slope * x.

        Algorithm:
            slope = Sxy / Sxx, intercept = mean(y) - slope * mean(x),
            correlation = Sxy / sqrt(Sxx * Syy), r^2 = correlation^2

        Raises:
            InvalidCalculationError: If x has zero variance
        """
        timer = Timer()
        timer.start()
        warnings_list: list[str] = []

        x = design.x
        y = design.y

        with timer.section('sums_of_squares'):
            x_mean = float(np.mean(x))
            y_mean = float(np.mean(y))
            dx = x - x_mean
            dy = y - y_mean
            sxx = float(dx @ dx)
            syy = float(dy @ dy)
            sxy = float(dx @ dy)

        if sxx == 0.0:
            raise InvalidCalculationError(
                "Cannot fit a line: x has zero variance (all values identical)"
            )

        with timer.section('coefficients'):
            slope = sxy / sxx
            intercept = y_mean - slope * x_mean

            if syy == 0.0:
                # Constant y is fit exactly by a horizontal line
                correlation = math.nan
                r_squared = 1.0
                warnings_list.append(
                    "y is constant: correlation undefined, fit is exact"
                )
            else:
                correlation = sxy / math.sqrt(sxx * syy)
                r_squared = correlation ** 2

        timer.stop()

        params = LinearParams(
            slope=slope,
            intercept=intercept,
            r_squared=r_squared,
            correlation=correlation,
            n=design.n,
        )

        info: dict[str, Any] = {
            'method': 'closed_form',
            'sxx': sxx,
            'syy': syy,
            'sxy': sxy,
        }

        return Result(
            params=params,
            info=info,
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warnings_list),
        )


class CPUNormalEquationsBackend:
    """
    Polynomial least squares via the normal equations.

    Implements the Backend protocol for RegressionDesign -> PolynomialParams.
    No regularization: an ill-conditioned X'X surfaces as SingularMatrixError.
    """

    @property
    def name(self) -> str:
        return 'cpu_normal_equations'

    def solve(self, design: RegressionDesign) -> Result[PolynomialParams]:
        """
        Solve for polynomial coefficients.

        Algorithm:
            1. Build Vandermonde X (column j = x ** j)
            2. Form X'X and X'y
            3. Solve by Gaussian elimination with partial pivoting
            4. R^2 = 1 - RSS/TSS

        Raises:
            SingularMatrixError: If X'X is singular to working tolerance
        """
        timer = Timer()
        timer.start()

        y = design.y

        with timer.section('design_matrix'):
            X = design.vandermonde()

        with timer.section('normal_equations'):
            Xt = transpose(X)
            XtX = multiply(Xt, X)
            Xty = multiply(Xt, y)

        with timer.section('solve'):
            coefficients = solve(XtX, Xty)
            # Fitted models are immutable; callers get a read-only view
            coefficients.setflags(write=False)

        with timer.section('statistics'):
            residuals = y - X @ coefficients
            rss = float(residuals @ residuals)
            centered = y - np.mean(y)
            tss = float(centered @ centered)
            if tss == 0.0:
                r_squared = 1.0 if rss == 0.0 else 0.0
            else:
                r_squared = 1.0 - rss / tss

        timer.stop()

        params = PolynomialParams(
            coefficients=coefficients,
            degree=design.degree,
            r_squared=r_squared,
            rss=rss,
            tss=tss,
            n=design.n,
        )

        info: dict[str, Any] = {
            'method': 'normal_equations',
            'n_coefficients': design.degree + 1,
        }

        return Result(
            params=params,
            info=info,
            timing=timer.result(),
            backend_name=self.name,
            warnings=(),
        )
