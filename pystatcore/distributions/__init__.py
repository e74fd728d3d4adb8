"""
Probability distributions and random number generation.

Public API:
    Normal(mean, std)       - pdf, cdf, ppf, z_score, value_for_z_score
    Uniform(low, high)      - pdf, cdf
    Exponential(rate)       - pdf, cdf, ppf
    Poisson(rate)           - pmf, pdf, cdf
    RandomSource(seed)      - seedable generator passed to sample()

Every distribution satisfies the Distribution protocol.

Example:
    >>> from pystatcore.distributions import Normal, RandomSource
    >>> rng = RandomSource(seed=1)
    >>> Normal(10, 2).sample(rng, size=5)
"""

from pystatcore.distributions.base import Distribution
from pystatcore.distributions.random_source import RandomSource
from pystatcore.distributions.continuous import Normal, Uniform, Exponential
from pystatcore.distributions.discrete import Poisson

__all__ = [
    "Distribution",
    "RandomSource",
    "Normal",
    "Uniform",
    "Exponential",
    "Poisson",
]
