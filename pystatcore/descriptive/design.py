"""
DescriptiveDesign: data wrapper for descriptive statistics.

Wraps a validated 1D sample and provides metadata for the descriptive
statistics pipeline.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pystatcore.core.validation import as_sample


@dataclass(frozen=True)
class DescriptiveDesign:
    """
    Design for descriptive statistics.

    Wraps a non-empty, finite 1D sample. Immutable after construction;
    the sorted copy is computed once and shared by median, quantiles,
    minimum and maximum.

    Construction:
        DescriptiveDesign.from_array(data)
    """
    _data: NDArray[np.floating[Any]]
    _sorted: NDArray[np.floating[Any]]
    _n: int

    @classmethod
    def from_array(cls, data: ArrayLike, name: str = 'x') -> DescriptiveDesign:
        """
        Build DescriptiveDesign from array-like data.

        Raises:
            EmptyInputError: If data has no elements
            DimensionError: If data is not 1D
            ValidationError: If data contains NaN or Inf
        """
        arr = as_sample(data, name)
        return cls(_data=arr, _sorted=np.sort(arr), _n=len(arr))

    @property
    def data(self) -> NDArray[np.floating[Any]]:
        """Sample values in input order."""
        return self._data

    @property
    def sorted(self) -> NDArray[np.floating[Any]]:
        """Sample values in ascending order."""
        return self._sorted

    @property
    def n(self) -> int:
        """Number of observations."""
        return self._n

    def __repr__(self) -> str:
        return f"DescriptiveDesign(n={self._n})"
