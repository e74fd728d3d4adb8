"""
Hypothesis test solution types.

HypothesisResult wraps Result[HypothesisParams] and renders a text summary.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING
import math

from pystatcore.core.result import Result
from pystatcore.hypothesis._common import ConfidenceInterval, HypothesisParams

if TYPE_CHECKING:
    from pystatcore.hypothesis.design import HypothesisDesign


@dataclass(frozen=True)
class HypothesisResult:
    """
    User-facing hypothesis test results.

    Created once by a test function and never mutated. `is_significant`
    is derived: p_value < alpha (False when the p-value is undefined).
    """
    _result: Result[HypothesisParams]
    _design: 'HypothesisDesign | None' = None

    # --- Standard fields ---

    @property
    def statistic(self) -> float:
        """Test statistic value."""
        return self._result.params.statistic

    @property
    def statistic_name(self) -> str:
        """Name of the test statistic (e.g. 't', 'X-squared')."""
        return self._result.params.statistic_name

    @property
    def p_value(self) -> float:
        """p-value of the test."""
        return self._result.params.p_value

    @property
    def degrees_of_freedom(self) -> float | None:
        """Degrees of freedom, if the test has them."""
        return self._result.params.degrees_of_freedom

    @property
    def alpha(self) -> float:
        """Significance level."""
        return self._result.params.alpha

    @property
    def is_significant(self) -> bool:
        """True when p_value < alpha."""
        return bool(self.p_value < self.alpha)

    @property
    def confidence_interval(self) -> ConfidenceInterval | None:
        """Confidence interval at level 1 - alpha, if computed."""
        return self._result.params.confidence_interval

    @property
    def description(self) -> str:
        """Human-readable description of the test."""
        return self._result.params.description

    @property
    def alternative(self) -> str:
        """Alternative hypothesis direction."""
        return self._result.params.alternative

    @property
    def estimate(self) -> dict[str, float] | None:
        """Point estimate(s)."""
        return self._result.params.estimate

    @property
    def null_value(self) -> dict[str, float] | None:
        """Hypothesized value under H0."""
        return self._result.params.null_value

    @property
    def data_name(self) -> str:
        """Description of the data."""
        return self._result.params.data_name

    # --- Test-specific extras ---

    @property
    def extras(self) -> dict[str, Any] | None:
        """Test-specific additional outputs."""
        return self._result.params.extras

    @property
    def observed(self):
        """For chisq_test: observed counts."""
        e = self._result.params.extras
        return e.get('observed') if e else None

    @property
    def expected(self):
        """For chisq_test: expected counts under H0."""
        e = self._result.params.extras
        return e.get('expected') if e else None

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

    # --- Formatting ---

    def summary(self) -> str:
        """
        Format the result as a text block.

        Produces output like:
            Welch two-sample t-test (H0: mu1 - mu2 = 0)

        data:  x and y
        t = -3, df = 8, p-value = 0.01707
        alternative hypothesis: true difference in means is not equal to 0
        95 percent confidence interval:
         -5.305  -0.6950
        significant at alpha = 0.05: yes
        """
        p = self._result.params
        lines = [f"\t{p.description}", "", f"data:  {p.data_name}"]

        parts = [f"{p.statistic_name} = {p.statistic:.5g}"]
        if p.degrees_of_freedom is not None:
            parts.append(f"df = {p.degrees_of_freedom:.5g}")
        parts.append(f"p-value = {_format_pvalue(p.p_value)}")
        lines.append(", ".join(parts))

        if p.null_value:
            nv_name, nv_val = next(iter(p.null_value.items()))
            relation = {
                "two.sided": "is not equal to",
                "less": "is less than",
                "greater": "is greater than",
            }[p.alternative]
            lines.append(
                f"alternative hypothesis: true {nv_name} {relation} {nv_val:g}"
            )

        ci = p.confidence_interval
        if ci is not None:
            pct = round(ci.confidence_level * 100, 4)
            lines.append(f"{pct:g} percent confidence interval:")
            lines.append(f" {_format_number(ci.lower)}  {_format_number(ci.upper)}")

        if p.estimate is not None:
            lines.append("sample estimates:")
            names = list(p.estimate.keys())
            vals = list(p.estimate.values())
            lines.append(" ".join(f"{n:>16s}" for n in names))
            lines.append(" ".join(f"{v:16.7g}" for v in vals))

        verdict = "yes" if self.is_significant else "no"
        lines.append(f"significant at alpha = {p.alpha:g}: {verdict}")

        for w in self._result.warnings:
            lines.append(f"Warning: {w}")

        lines.append("")
        return "\n".join(lines)

    def __repr__(self) -> str:
        p = self._result.params
        return (
            f"HypothesisResult(description={p.description!r}, "
            f"{p.statistic_name}={p.statistic:.4g}, p_value={p.p_value:.4g}, "
            f"is_significant={self.is_significant})"
        )


def _format_pvalue(p: float) -> str:
    """Format p-value for display."""
    if math.isnan(p):
        return "NA"
    if p < 2.2e-16:
        return "< 2.2e-16"
    if p < 0.001:
        return f"{p:.4e}"
    return f"{p:.4g}"


def _format_number(x: float) -> str:
    """Format a number, handling infinity."""
    if math.isinf(x):
        return "-Inf" if x < 0 else "Inf"
    return f"{x:.7g}"
