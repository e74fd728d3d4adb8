"""
Continuous distributions: Normal, Uniform, Exponential.
"""

from __future__ import annotations

from dataclasses import dataclass
import math

from pystatcore.core.exceptions import InvalidParametersError
from pystatcore.core.compute.special import normal_cdf, normal_quantile
from pystatcore.core.validation import check_positive
from pystatcore.distributions.random_source import RandomSource, Size


_SQRT_2PI = math.sqrt(2.0 * math.pi)


@dataclass(frozen=True)
class Normal:
    """
    Normal distribution N(mean, std ** 2).

    Raises:
        InvalidParametersError: If std <= 0
    """
    mean: float = 0.0
    std: float = 1.0

    def __post_init__(self):
        if not math.isfinite(self.mean):
            raise InvalidParametersError(f"mean must be finite, got {self.mean}")
        check_positive(self.std, 'std')

    @property
    def variance(self) -> float:
        return self.std * self.std

    def pdf(self, x: float) -> float:
        z = (x - self.mean) / self.std
        return math.exp(-0.5 * z * z) / (self.std * _SQRT_2PI)

    def cdf(self, x: float) -> float:
        return normal_cdf(self.z_score(x))

    def ppf(self, p: float) -> float:
        """Inverse CDF; -inf at p = 0, +inf at p = 1, nan outside [0, 1]."""
        return self.value_for_z_score(normal_quantile(p))

    def z_score(self, x: float) -> float:
        """Number of standard deviations x lies from the mean."""
        return (x - self.mean) / self.std

    def value_for_z_score(self, z: float) -> float:
        """Value lying z standard deviations from the mean."""
        return self.mean + z * self.std

    def sample(self, rng: RandomSource, size: Size = None):
        return rng.normal(self.mean, self.std, size)


@dataclass(frozen=True)
class Uniform:
    """
    Continuous uniform distribution on [low, high].

    Raises:
        InvalidParametersError: If low >= high
    """
    low: float = 0.0
    high: float = 1.0

    def __post_init__(self):
        if not (math.isfinite(self.low) and math.isfinite(self.high)):
            raise InvalidParametersError(
                f"bounds must be finite, got low={self.low}, high={self.high}"
            )
        if not self.low < self.high:
            raise InvalidParametersError(
                f"low must be less than high, got low={self.low}, high={self.high}"
            )

    @property
    def mean(self) -> float:
        return (self.low + self.high) / 2.0

    @property
    def variance(self) -> float:
        return (self.high - self.low) ** 2 / 12.0

    @property
    def std(self) -> float:
        return math.sqrt(self.variance)

    def pdf(self, x: float) -> float:
        if self.low <= x <= self.high:
            return 1.0 / (self.high - self.low)
        return 0.0

    def cdf(self, x: float) -> float:
        if x < self.low:
            return 0.0
        if x > self.high:
            return 1.0
        return (x - self.low) / (self.high - self.low)

    def sample(self, rng: RandomSource, size: Size = None):
        return rng.uniform(self.low, self.high, size)


@dataclass(frozen=True)
class Exponential:
    """
    Exponential distribution with rate lambda (mean 1 / rate).

    Raises:
        InvalidParametersError: If rate <= 0
    """
    rate: float = 1.0

    def __post_init__(self):
        check_positive(self.rate, 'rate')

    @property
    def mean(self) -> float:
        return 1.0 / self.rate

    @property
    def variance(self) -> float:
        return 1.0 / (self.rate * self.rate)

    @property
    def std(self) -> float:
        return 1.0 / self.rate

    def pdf(self, x: float) -> float:
        if x < 0:
            return 0.0
        return self.rate * math.exp(-self.rate * x)

    def cdf(self, x: float) -> float:
        if x < 0:
            return 0.0
        return -math.expm1(-self.rate * x)

    def ppf(self, p: float) -> float:
        """Inverse CDF -ln(1 - p) / rate; +inf at p = 1, nan outside [0, 1]."""
        if math.isnan(p) or p < 0.0 or p > 1.0:
            return math.nan
        if p == 1.0:
            return math.inf
        return -math.log1p(-p) / self.rate

    def sample(self, rng: RandomSource, size: Size = None):
        return rng.exponential(self.rate, size)
