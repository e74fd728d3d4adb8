"""
Linear-interpolation sample quantiles.

The quantile at percentile p sits at fractional rank h = p/100 * (n - 1)
on the sorted sample (0-based) and interpolates between its neighbours:

    Q(p) = x[floor(h)] + (h - floor(h)) * (x[floor(h) + 1] - x[floor(h)])

This is type 7 in Hyndman & Fan (1996), the default of R and NumPy.

Reference:
    Hyndman, R.J. and Fan, Y. (1996) "Sample Quantiles in Statistical
    Packages", The American Statistician, 50(4), 361-365.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from pystatcore.core.exceptions import InvalidParametersError


def interpolated_quantile(x: NDArray, percentiles: NDArray) -> NDArray:
    """
    Quantiles of a sorted sample at the given percentiles.

    Parameters
    ----------
    x : NDArray
        1D sorted array, non-empty, no NaN values.
    percentiles : NDArray
        1D array of percentiles in [0, 100].

    Returns
    -------
    NDArray
        Quantile values, one per percentile.
    """
    percentiles = np.asarray(percentiles, dtype=np.float64)
    if np.any(np.isnan(percentiles)) or np.any((percentiles < 0) | (percentiles > 100)):
        raise InvalidParametersError(
            f"percentile must be between 0 and 100, got {percentiles.tolist()}"
        )

    n = len(x)
    if n == 1:
        return np.full(len(percentiles), x[0])

    h = percentiles / 100.0 * (n - 1)
    lo = np.floor(h).astype(np.intp)
    # p = 100 lands exactly on the last element
    hi = np.minimum(lo + 1, n - 1)
    frac = h - lo
    return x[lo] + frac * (x[hi] - x[lo])
