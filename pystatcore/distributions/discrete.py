"""
Discrete distributions: Poisson.
"""

from __future__ import annotations

from dataclasses import dataclass
import math

from scipy.special import gammaln

from pystatcore.core.compute.special import upper_incomplete_gamma_q
from pystatcore.core.validation import check_positive
from pystatcore.distributions.random_source import RandomSource, Size


@dataclass(frozen=True)
class Poisson:
    """
    Poisson distribution with mean `rate`.

    Raises:
        InvalidParametersError: If rate <= 0
    """
    rate: float

    def __post_init__(self):
        check_positive(self.rate, 'rate')

    @property
    def mean(self) -> float:
        return self.rate

    @property
    def variance(self) -> float:
        return self.rate

    @property
    def std(self) -> float:
        return math.sqrt(self.rate)

    def pmf(self, k: int) -> float:
        """
        P(X = k), computed in log space so large k cannot overflow.

        0 for negative k.
        """
        if k < 0:
            return 0.0
        return math.exp(k * math.log(self.rate) - self.rate - float(gammaln(k + 1)))

    def pdf(self, x: float) -> float:
        """Mass at the integer nearest x; nan for nan."""
        if math.isnan(x):
            return math.nan
        return self.pmf(int(round(x)))

    def cdf(self, x: float) -> float:
        """
        P(X <= floor(x)).

        Uses the identity P(X <= k) = Q(k + 1, rate) with Q the regularized
        upper incomplete gamma function. nan for nan.
        """
        if math.isnan(x):
            return math.nan
        if x < 0:
            return 0.0
        if math.isinf(x):
            return 1.0
        k = math.floor(x)
        return upper_incomplete_gamma_q(k + 1, self.rate)

    def sample(self, rng: RandomSource, size: Size = None):
        return rng.poisson(self.rate, size)
