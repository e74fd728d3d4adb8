"""
Common types for hypothesis testing.

Defines HypothesisParams (the payload every test backend returns),
ConfidenceInterval and the set of valid alternatives.
"""

from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any, Iterator
import math
import warnings

from pystatcore.core.exceptions import InvalidParametersError


VALID_ALTERNATIVES = ("two.sided", "less", "greater")


@contextmanager
def collect_runtime_warnings(warnings_list: list[str]) -> Iterator[None]:
    """
    Move RuntimeWarnings raised inside the block into warnings_list.

    The special functions report an iteration cap through warnings.warn;
    test kernels wrap their p-value calls in this so the message ends up in
    Result.warnings. Other warning categories are re-emitted unchanged.
    """
    with warnings.catch_warnings(record=True) as caught:
        warnings.simplefilter("always", RuntimeWarning)
        yield
    for w in caught:
        if issubclass(w.category, RuntimeWarning):
            warnings_list.append(str(w.message))
        else:
            warnings.warn_explicit(w.message, w.category, w.filename, w.lineno)


@dataclass(frozen=True)
class ConfidenceInterval:
    """
    Immutable confidence interval.

    One-sided intervals use an infinite bound on the open side.

    Attributes
    ----------
    lower : float
        Lower bound (may be -inf).
    upper : float
        Upper bound (may be +inf).
    confidence_level : float
        Coverage, e.g. 0.95.
    """
    lower: float
    upper: float
    confidence_level: float = 0.95

    def __post_init__(self) -> None:
        if math.isnan(self.lower) or math.isnan(self.upper):
            raise InvalidParametersError(
                f"confidence interval bounds must not be NaN, "
                f"got [{self.lower}, {self.upper}]"
            )
        if self.lower > self.upper:
            raise InvalidParametersError(
                f"confidence interval requires lower <= upper, "
                f"got [{self.lower}, {self.upper}]"
            )

    @property
    def point_estimate(self) -> float:
        """Center of the interval (infinite for one-sided intervals)."""
        return (self.lower + self.upper) / 2.0

    @property
    def margin_of_error(self) -> float:
        """Half-width of the interval."""
        return (self.upper - self.lower) / 2.0

    def contains(self, value: float) -> bool:
        """Check if a value is within the interval (bounds inclusive)."""
        return self.lower <= value <= self.upper


@dataclass(frozen=True)
class HypothesisParams:
    """
    Parameter payload for hypothesis tests.

    Every test returns this same structure; test-specific extras go in
    the `extras` dict.

    Attributes
    ----------
    statistic : float
        Test statistic value (nan when undefined, e.g. constant data).
    statistic_name : str
        Name of the test statistic ("t", "X-squared").
    degrees_of_freedom : float or None
        Distribution degrees of freedom (fractional for Welch).
    p_value : float
        p-value of the test.
    alpha : float
        Significance level the result is judged against.
    confidence_interval : ConfidenceInterval or None
        Interval for the estimated quantity, when the test defines one.
    estimate : dict or None
        Point estimate(s), e.g. {"mean of x": 5.1, "mean of y": 3.2}.
    null_value : dict or None
        Hypothesized value under H0, e.g. {"mean": 5.0}.
    alternative : str
        "two.sided", "less", or "greater".
    description : str
        Human-readable description of the test performed.
    data_name : str
        Description of the data, e.g. "x and y".
    extras : dict or None
        Test-specific additional outputs (observed/expected counts for
        chi-squared tests).
    """
    statistic: float
    statistic_name: str
    degrees_of_freedom: float | None
    p_value: float
    alpha: float
    confidence_interval: ConfidenceInterval | None
    estimate: dict[str, float] | None
    null_value: dict[str, float] | None
    alternative: str
    description: str
    data_name: str
    extras: dict[str, Any] | None = None
