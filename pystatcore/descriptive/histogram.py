"""
Frequency histograms.

Bins are half-open [lower, upper) except the last, which is closed on both
sides so the maximum is counted.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Sequence
import numpy as np
from numpy.typing import NDArray

from pystatcore.core.exceptions import InvalidParametersError
from pystatcore.core.validation import check_array, check_finite


@dataclass(frozen=True)
class HistogramBin:
    """A single histogram bin."""
    lower_bound: float
    upper_bound: float
    frequency: int
    relative_frequency: float

    @property
    def midpoint(self) -> float:
        return (self.lower_bound + self.upper_bound) / 2.0

    @property
    def width(self) -> float:
        return self.upper_bound - self.lower_bound


@dataclass(frozen=True)
class Histogram:
    """
    Frequency distribution of a sample.

    total_count is the sample size, so with explicit edges the frequencies
    may sum to less than total_count when values fall outside the edges.
    """
    bins: tuple[HistogramBin, ...]
    total_count: int

    @property
    def frequencies(self) -> NDArray[np.int64]:
        return np.array([b.frequency for b in self.bins], dtype=np.int64)

    @property
    def edges(self) -> NDArray[np.floating[Any]]:
        if not self.bins:
            return np.array([], dtype=np.float64)
        return np.array(
            [b.lower_bound for b in self.bins] + [self.bins[-1].upper_bound],
            dtype=np.float64,
        )

    def __len__(self) -> int:
        return len(self.bins)

    def __iter__(self):
        return iter(self.bins)

    def summary(self) -> str:
        lines = [
            f"Histogram ({len(self.bins)} bins, n={self.total_count})",
            f"{'Lower':>12} {'Upper':>12} {'Count':>8} {'Rel.Freq':>10}",
        ]
        for b in self.bins:
            lines.append(
                f"{b.lower_bound:12.6g} {b.upper_bound:12.6g} "
                f"{b.frequency:8d} {b.relative_frequency:10.4f}"
            )
        return "\n".join(lines)


def equal_width_histogram(x: NDArray, bins: int) -> Histogram:
    """
    Histogram with `bins` equal-width bins spanning [min(x), max(x)].

    A zero-range sample puts every value in the first bin.
    """
    if isinstance(bins, bool) or bins < 1:
        raise InvalidParametersError(f"bins must be at least 1, got {bins}")

    lo = float(np.min(x))
    hi = float(np.max(x))
    width = (hi - lo) / bins

    if width == 0.0:
        index = np.zeros(len(x), dtype=np.intp)
    else:
        index = np.floor((x - lo) / width).astype(np.intp)
        index = np.minimum(index, bins - 1)

    counts = np.bincount(index, minlength=bins)
    edges = lo + width * np.arange(bins + 1)
    return _build(edges, counts, len(x))


def edge_histogram(x: NDArray, edges: Sequence[float]) -> Histogram:
    """
    Histogram over explicit bin edges (sorted before use).

    Values outside [edges[0], edges[-1]] are not counted.
    """
    e = check_array(edges, 'edges').ravel()
    if len(e) < 2:
        raise InvalidParametersError(f"Need at least 2 bin edges, got {len(e)}")
    check_finite(e, 'edges')
    e = np.sort(e)
    k = len(e) - 1

    index = np.searchsorted(e, x, side='right') - 1
    # Last bin is closed on the right
    index[x == e[-1]] = k - 1
    inside = (index >= 0) & (index < k)

    counts = np.bincount(index[inside], minlength=k)
    return _build(e, counts, len(x))


def _build(edges: NDArray, counts: NDArray, total: int) -> Histogram:
    bins = tuple(
        HistogramBin(
            lower_bound=float(edges[i]),
            upper_bound=float(edges[i + 1]),
            frequency=int(counts[i]),
            relative_frequency=float(counts[i]) / total,
        )
        for i in range(len(counts))
    )
    return Histogram(bins=bins, total_count=total)
