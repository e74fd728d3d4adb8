"""
Descriptive statistics solution types.

Contains the parameter payload and user-facing solution wrapper.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING

from pystatcore.core.result import Result

if TYPE_CHECKING:
    from pystatcore.descriptive.design import DescriptiveDesign


@dataclass(frozen=True)
class DescriptiveParams:
    """
    Parameter payload for descriptive statistics.

    Variance and standard deviation are population (divide by n).
    """
    count: int
    total: float
    mean: float
    median: float
    mode: tuple[float, ...]
    variance: float
    sd: float
    minimum: float
    maximum: float
    range: float


@dataclass(frozen=True)
class DescriptiveSolution:
    """
    User-facing descriptive statistics results.

    Wraps Result[DescriptiveParams] and provides convenient accessors.
    """
    _result: Result[DescriptiveParams]
    _design: 'DescriptiveDesign | None' = None

    @property
    def count(self) -> int:
        return self._result.params.count

    @property
    def total(self) -> float:
        """Sum of all values."""
        return self._result.params.total

    @property
    def mean(self) -> float:
        return self._result.params.mean

    @property
    def median(self) -> float:
        return self._result.params.median

    @property
    def mode(self) -> list[float]:
        """Most frequent value(s), ascending; empty if no value repeats."""
        return list(self._result.params.mode)

    @property
    def variance(self) -> float:
        """Population variance."""
        return self._result.params.variance

    @property
    def sd(self) -> float:
        """Population standard deviation."""
        return self._result.params.sd

    @property
    def minimum(self) -> float:
        return self._result.params.minimum

    @property
    def maximum(self) -> float:
        return self._result.params.maximum

    @property
    def range(self) -> float:
        """maximum - minimum."""
        return self._result.params.range

    # --- Metadata ---

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def summary(self) -> str:
        """Render the statistics as a two-column text table."""
        p = self._result.params
        mode = ", ".join(f"{m:g}" for m in p.mode) if p.mode else "none"
        rows = [
            ("Count", f"{p.count}"),
            ("Sum", f"{p.total:.6g}"),
            ("Mean", f"{p.mean:.6g}"),
            ("Median", f"{p.median:.6g}"),
            ("Mode", mode),
            ("Variance", f"{p.variance:.6g}"),
            ("Std. Dev.", f"{p.sd:.6g}"),
            ("Min", f"{p.minimum:.6g}"),
            ("Max", f"{p.maximum:.6g}"),
            ("Range", f"{p.range:.6g}"),
        ]
        lines = ["Descriptive Statistics", "=" * 40]
        lines.extend(f"{label:<12} {value:>26}" for label, value in rows)
        return "\n".join(lines)

    def __repr__(self) -> str:
        p = self._result.params
        return (
            f"DescriptiveSolution(count={p.count}, mean={p.mean:.4g}, "
            f"sd={p.sd:.4g})"
        )
