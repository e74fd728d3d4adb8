"""
Shared compute infrastructure for pystatcore.

This module provides the numeric kernels that the hypothesis, regression
and distribution modules are built on, plus timing utilities.

IMPORTANT: This is NOT where domain-specific backends live. Those go in
{domain}/backends/. This module contains shared NUMERIC infrastructure.

Submodules:
    special: Incomplete gamma/beta, normal CDF and quantile
    linalg: Transpose, multiply, Gaussian elimination
    tolerances: Iteration caps and numeric thresholds
    timing: Execution timing utilities
"""

from pystatcore.core.compute.special import (
    lower_incomplete_gamma_p,
    upper_incomplete_gamma_q,
    regularized_incomplete_beta,
    normal_cdf,
    normal_quantile,
)
from pystatcore.core.compute.timing import Timer, timed

__all__ = [
    # Special functions
    "lower_incomplete_gamma_p",
    "upper_incomplete_gamma_q",
    "regularized_incomplete_beta",
    "normal_cdf",
    "normal_quantile",
    # Timing
    "Timer",
    "timed",
]
