"""
Hypothesis testing module.

Turns raw statistics into calibrated significance results using the
incomplete gamma (chi-squared) and incomplete beta (Student t) functions.

Public API:
    t_test(x, y)              - one-sample, Welch two-sample, paired t-test
    chisq_test(observed)      - goodness-of-fit or independence chi-squared test

Supporting distribution functions live in
pystatcore.hypothesis.distribution_functions.
"""

from pystatcore.hypothesis.solvers import t_test, chisq_test
from pystatcore.hypothesis.design import HypothesisDesign
from pystatcore.hypothesis._common import ConfidenceInterval, HypothesisParams
from pystatcore.hypothesis.solution import HypothesisResult
from pystatcore.hypothesis.distribution_functions import (
    chisq_cdf,
    chisq_pvalue,
    t_cdf,
    t_pvalue,
    t_critical_value,
)

__all__ = [
    "t_test",
    "chisq_test",
    "HypothesisDesign",
    "HypothesisParams",
    "HypothesisResult",
    "ConfidenceInterval",
    "chisq_cdf",
    "chisq_pvalue",
    "t_cdf",
    "t_pvalue",
    "t_critical_value",
]
