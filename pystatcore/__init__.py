"""
pystatcore: statistical computation primitives for Python.

Descriptive statistics, probability distributions, correlation, hypothesis
tests and least-squares regression, built on a small numerical core of
special functions and a dense linear solver.

Submodules:
    descriptive: Summary statistics, percentiles, histograms, correlation
    distributions: Normal, Uniform, Exponential, Poisson, RandomSource
    hypothesis: Chi-squared and t tests
    regression: Simple linear and polynomial least squares
    core: Exceptions, result envelope, special functions, linear solver
"""

__version__ = "0.1.0"

from pystatcore import core
from pystatcore import descriptive
from pystatcore import distributions
from pystatcore import hypothesis
from pystatcore import regression

__all__ = [
    "__version__",
    "core",
    "descriptive",
    "distributions",
    "hypothesis",
    "regression",
]
