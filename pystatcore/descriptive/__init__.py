"""
Descriptive statistics module.

Public API:
    describe(x)      - All summary statistics at once
    mean(x), median(x), mode(x), total(x)
    var(x), sd(x)    - Population (default) or sample variance / sd
    quantile(x, p)   - Linear-interpolation percentile, p in [0, 100]
    quartiles(x)     - (Q1, Q2, Q3)
    iqr(x)           - Q3 - Q1
    histogram(x)     - Equal-width or explicit-edge frequency table
    cor(x, y)        - Pearson or Spearman correlation
    cov(x, y)        - Population (default) or sample covariance
"""

from pystatcore.descriptive.design import DescriptiveDesign
from pystatcore.descriptive.solution import DescriptiveParams, DescriptiveSolution
from pystatcore.descriptive.histogram import Histogram, HistogramBin
from pystatcore.descriptive.solvers import (
    describe,
    mean,
    median,
    mode,
    total,
    var,
    sd,
    quantile,
    quartiles,
    iqr,
    histogram,
    cor,
    cov,
)

__all__ = [
    "describe",
    "mean",
    "median",
    "mode",
    "total",
    "var",
    "sd",
    "quantile",
    "quartiles",
    "iqr",
    "histogram",
    "cor",
    "cov",
    "DescriptiveDesign",
    "DescriptiveParams",
    "DescriptiveSolution",
    "Histogram",
    "HistogramBin",
]
