"""
Solver dispatch for descriptive statistics.

Provides describe() as the comprehensive entry point, plus individual
functions: mean(), median(), mode(), total(), var(), sd(), quantile(),
quartiles(), iqr(), histogram(), cor(), cov().
"""

from __future__ import annotations

from typing import Literal, Sequence
import math
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pystatcore.core.exceptions import InvalidParametersError
from pystatcore.core.validation import (
    as_sample,
    check_array,
    check_consistent_length,
    check_finite,
    check_min_samples,
)
from pystatcore.descriptive.design import DescriptiveDesign
from pystatcore.descriptive.solution import DescriptiveSolution
from pystatcore.descriptive.backends.cpu import CPUDescriptiveBackend
from pystatcore.descriptive.histogram import (
    Histogram,
    equal_width_histogram,
    edge_histogram,
)
from pystatcore.descriptive._quantile import interpolated_quantile
from pystatcore.descriptive._stats import (
    average_ranks,
    cross_products,
    median_of_sorted,
    mode_values,
    pearson,
    sum_of_squares,
)


CorMethod = Literal['pearson', 'spearman']


def _ensure_design(data: ArrayLike | DescriptiveDesign) -> DescriptiveDesign:
    """Convert raw array to DescriptiveDesign if needed."""
    if isinstance(data, DescriptiveDesign):
        return data
    return DescriptiveDesign.from_array(data)


def _get_backend(backend: str):
    """Select backend based on preference."""
    if backend in ('cpu', 'auto'):
        return CPUDescriptiveBackend()
    raise InvalidParametersError(f"Unknown backend: {backend!r}")


def describe(
    data: ArrayLike | DescriptiveDesign,
    *,
    backend: str = 'cpu',
) -> DescriptiveSolution:
    """
    Compute comprehensive descriptive statistics.

    Computes: count, sum, mean, median, mode, population variance and
    standard deviation, minimum, maximum and range.

    Parameters
    ----------
    data : array-like or DescriptiveDesign
        1D numeric sample.
    backend : str
        'cpu' (default).

    Returns
    -------
    DescriptiveSolution with all statistics populated.

    Raises
    ------
    EmptyInputError
        If data has no elements.
    """
    design = _ensure_design(data)
    result = _get_backend(backend).solve(design)
    return DescriptiveSolution(_result=result, _design=design)


# --- Single statistics ---

def mean(x: ArrayLike) -> float:
    """Arithmetic mean. Raises EmptyInputError on empty input."""
    arr = as_sample(x, 'x')
    return float(np.sum(arr) / len(arr))


def median(x: ArrayLike) -> float:
    """Middle value of the sorted sample (mean of the middle two for even n)."""
    arr = as_sample(x, 'x')
    return median_of_sorted(np.sort(arr))


def mode(x: ArrayLike) -> list[float]:
    """
    Most frequent value(s), sorted ascending.

    Returns an empty list when no value occurs more than once.
    """
    arr = as_sample(x, 'x')
    return mode_values(arr)


def total(x: ArrayLike) -> float:
    """Sum of all values; 0.0 for empty input."""
    arr = check_array(x, 'x').ravel()
    if arr.size == 0:
        return 0.0
    check_finite(arr, 'x')
    return float(np.sum(arr))


def var(x: ArrayLike, *, sample: bool = False) -> float:
    """
    Variance.

    Parameters
    ----------
    x : array-like
        1D numeric sample.
    sample : bool
        If True, divide by n - 1 (requires n >= 2). Default divides by n.

    Raises
    ------
    EmptyInputError
        If x is empty.
    InsufficientDataError
        If sample=True and n < 2.
    """
    arr = as_sample(x, 'x')
    n = len(arr)
    if sample:
        check_min_samples(arr, 2, 'x')
        return sum_of_squares(arr) / (n - 1)
    return sum_of_squares(arr) / n


def sd(x: ArrayLike, *, sample: bool = False) -> float:
    """Standard deviation, the square root of var(x, sample=sample)."""
    return math.sqrt(var(x, sample=sample))


# --- Percentiles ---

def quantile(
    x: ArrayLike,
    percentile: float | ArrayLike,
) -> float | NDArray[np.floating]:
    """
    Percentile by linear interpolation on the sorted sample.

    The value sits at fractional rank percentile/100 * (n - 1).

    Parameters
    ----------
    x : array-like
        1D numeric sample.
    percentile : float or array-like
        Percentile(s) in [0, 100].

    Returns
    -------
    float for a scalar percentile, NDArray otherwise.

    Raises
    ------
    EmptyInputError
        If x is empty.
    InvalidParametersError
        If any percentile is outside [0, 100].
    """
    arr = as_sample(x, 'x')
    scalar = np.ndim(percentile) == 0
    probs = np.atleast_1d(np.asarray(percentile, dtype=np.float64))
    values = interpolated_quantile(np.sort(arr), probs)
    if scalar:
        return float(values[0])
    return values


def quartiles(x: ArrayLike) -> tuple[float, float, float]:
    """First, second and third quartiles (25th, 50th, 75th percentiles)."""
    arr = as_sample(x, 'x')
    q1, q2, q3 = interpolated_quantile(np.sort(arr), np.array([25.0, 50.0, 75.0]))
    return float(q1), float(q2), float(q3)


def iqr(x: ArrayLike) -> float:
    """Interquartile range, Q3 - Q1."""
    q1, _, q3 = quartiles(x)
    return q3 - q1


# --- Histogram ---

def histogram(x: ArrayLike, bins: int | Sequence[float] = 10) -> Histogram:
    """
    Frequency histogram.

    Parameters
    ----------
    x : array-like
        1D numeric sample.
    bins : int or sequence of float
        Number of equal-width bins between min(x) and max(x), or explicit
        bin edges. With edges, values outside the outer edges are not
        counted. The last bin is closed on both sides.

    Raises
    ------
    EmptyInputError
        If x is empty.
    InvalidParametersError
        If bins < 1 or fewer than 2 edges are given.
    """
    arr = as_sample(x, 'x')
    if np.ndim(bins) == 0:
        if isinstance(bins, bool) or int(bins) != bins:
            raise InvalidParametersError(f"bins must be an integer, got {bins!r}")
        return equal_width_histogram(arr, int(bins))
    return edge_histogram(arr, bins)


# --- Association ---

def cor(
    x: ArrayLike,
    y: ArrayLike,
    *,
    method: CorMethod = 'pearson',
) -> float:
    """
    Correlation coefficient between two samples.

    Parameters
    ----------
    x, y : array-like
        1D numeric samples of equal length.
    method : str
        'pearson' (linear) or 'spearman' (Pearson on average ranks,
        ties share the mean rank).

    Returns
    -------
    float in [-1, 1].

    Raises
    ------
    EmptyInputError
        If x or y is empty.
    DimensionError
        If x and y differ in length.
    InvalidCalculationError
        If either sample has zero variance.
    InvalidParametersError
        If method is not 'pearson' or 'spearman'.
    """
    if method not in ('pearson', 'spearman'):
        raise InvalidParametersError(
            f"Unknown correlation method: {method!r}. "
            f"Must be 'pearson' or 'spearman'."
        )
    x_arr, y_arr = _paired(x, y)
    if method == 'spearman':
        x_arr = average_ranks(x_arr)
        y_arr = average_ranks(y_arr)
    return pearson(x_arr, y_arr)


def cov(x: ArrayLike, y: ArrayLike, *, sample: bool = False) -> float:
    """
    Covariance between two samples.

    Parameters
    ----------
    x, y : array-like
        1D numeric samples of equal length.
    sample : bool
        If True, divide by n - 1 (requires n >= 2). Default divides by n.

    Raises
    ------
    EmptyInputError
        If x or y is empty.
    DimensionError
        If x and y differ in length.
    InsufficientDataError
        If sample=True and n < 2.
    """
    x_arr, y_arr = _paired(x, y)
    n = len(x_arr)
    if sample:
        check_min_samples(x_arr, 2, 'x')
        return cross_products(x_arr, y_arr) / (n - 1)
    return cross_products(x_arr, y_arr) / n


def _paired(x: ArrayLike, y: ArrayLike) -> tuple[NDArray, NDArray]:
    x_arr = as_sample(x, 'x')
    y_arr = as_sample(y, 'y')
    check_consistent_length(x_arr, y_arr, names=('x', 'y'))
    return x_arr, y_arr
