"""
Distribution protocol.

Defines the structural interface every distribution satisfies.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable
import numpy as np
from numpy.typing import NDArray

from pystatcore.distributions.random_source import RandomSource, Size


@runtime_checkable
class Distribution(Protocol):
    """
    Protocol for univariate probability distributions.

    Implementations are frozen dataclasses. They hold parameters only;
    randomness comes from the RandomSource handed to sample().
    """

    def pdf(self, x: float) -> float:
        """Density (or mass, for discrete distributions) at x."""
        ...

    def cdf(self, x: float) -> float:
        """P(X <= x)."""
        ...

    def sample(
        self,
        rng: RandomSource,
        size: Size = None,
    ) -> float | NDArray[np.floating[Any]]:
        """Draw from the distribution using rng."""
        ...

    @property
    def mean(self) -> float:
        ...

    @property
    def variance(self) -> float:
        ...

    @property
    def std(self) -> float:
        ...
