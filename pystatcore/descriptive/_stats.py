"""
Kernels shared by the descriptive backend and the scalar functions.

Inputs are validated float64 arrays; nothing here re-validates.
"""

from __future__ import annotations

import math
import numpy as np
from numpy.typing import NDArray
from scipy.stats import rankdata

from pystatcore.core.exceptions import InvalidCalculationError


def median_of_sorted(x: NDArray) -> float:
    """Middle value, or the mean of the two middle values for even n."""
    n = len(x)
    mid = n // 2
    if n % 2 == 0:
        return float((x[mid - 1] + x[mid]) / 2.0)
    return float(x[mid])


def mode_values(x: NDArray) -> list[float]:
    """
    Most frequent values, ascending.

    Empty when no value occurs more than once.
    """
    values, counts = np.unique(x, return_counts=True)
    top = counts.max()
    if top < 2:
        return []
    return [float(v) for v in values[counts == top]]


def sum_of_squares(x: NDArray) -> float:
    """Sum of squared deviations from the mean."""
    d = x - np.mean(x)
    return float(d @ d)


def cross_products(x: NDArray, y: NDArray) -> float:
    """Sum of (x_i - mean x)(y_i - mean y)."""
    return float((x - np.mean(x)) @ (y - np.mean(y)))


def pearson(x: NDArray, y: NDArray) -> float:
    """
    Pearson correlation Sxy / sqrt(Sxx * Syy).

    Raises:
        InvalidCalculationError: If either variable has zero variance
    """
    denom = math.sqrt(sum_of_squares(x) * sum_of_squares(y))
    if not denom > 0:
        raise InvalidCalculationError(
            "Correlation undefined: one or both variables have zero variance"
        )
    r = cross_products(x, y) / denom
    # Rounding can push |r| a hair past 1
    return max(-1.0, min(1.0, r))


def average_ranks(x: NDArray) -> NDArray:
    """1-based ranks; tied values share the mean of their ranks."""
    return rankdata(x, method='average').astype(np.float64)
