"""
Chi-squared and Student t distribution functions.

Composes the special functions into the CDFs, p-values and critical
values the tests need:

    chi-squared CDF:  P(df/2, x/2)
    t CDF:            1 - I_{df/(df+t²)}(df/2, 1/2) / 2   for t >= 0
    t critical value: Cornish-Fisher expansion around Φ⁻¹(1 - α')

For df > NORMAL_APPROXIMATION_DF the t-distribution is replaced by the
standard normal.
"""

from __future__ import annotations

import math

from pystatcore.core.compute.special import (
    lower_incomplete_gamma_p,
    upper_incomplete_gamma_q,
    regularized_incomplete_beta,
    normal_cdf,
    normal_quantile,
)
from pystatcore.core.compute.tolerances import NORMAL_APPROXIMATION_DF


def chisq_cdf(x: float, df: float) -> float:
    """Chi-squared CDF, P(X <= x). Zero for x <= 0."""
    if x <= 0:
        return 0.0
    return lower_incomplete_gamma_p(df / 2.0, x / 2.0)


def chisq_pvalue(statistic: float, df: float) -> float:
    """
    Upper-tail probability 1 - P(df/2, statistic/2).

    Evaluated as Q(df/2, statistic/2) so that tiny p-values do not
    cancel to zero.
    """
    if statistic <= 0:
        return 1.0
    return upper_incomplete_gamma_q(df / 2.0, statistic / 2.0)


def t_cdf(t: float, df: float) -> float:
    """Student t CDF, P(T <= t)."""
    if df > NORMAL_APPROXIMATION_DF:
        return normal_cdf(t)
    upper = _t_upper_tail(abs(t), df)
    return 1.0 - upper if t >= 0 else upper


def _t_upper_tail(t_abs: float, df: float) -> float:
    """P(T > |t|), computed without forming 1 - CDF."""
    if df > NORMAL_APPROXIMATION_DF:
        return normal_cdf(-t_abs)
    x = df / (df + t_abs * t_abs)
    return 0.5 * regularized_incomplete_beta(x, df / 2.0, 0.5)


def t_pvalue(t: float, df: float, alternative: str) -> float:
    """
    p-value of a t statistic.

    Args:
        t: Test statistic
        df: Degrees of freedom (> 0)
        alternative: "two.sided", "less" or "greater"

    Returns:
        p-value, or nan if t or df is undefined
    """
    if math.isnan(t) or math.isnan(df) or df <= 0:
        return math.nan

    tail = _t_upper_tail(abs(t), df)

    if alternative == "two.sided":
        return min(1.0, 2.0 * tail)
    if alternative == "less":
        return tail if t < 0 else 1.0 - tail
    # greater
    return tail if t > 0 else 1.0 - tail


def t_critical_value(alpha: float, df: float, two_sided: bool = True) -> float:
    """
    Approximate upper critical value of the t-distribution.

    Uses the Cornish-Fisher expansion of the t quantile around the normal
    quantile z = Φ⁻¹(1 - α'), with α' = α/2 for two-sided intervals:

        t ≈ z + g1/df + g2/df² + g3/df³

    The expansion is asymptotic in 1/df; at very small df it
    underestimates the true quantile.
    """
    adjusted = alpha / 2.0 if two_sided else alpha
    z = normal_quantile(1.0 - adjusted)

    if df > NORMAL_APPROXIMATION_DF:
        return z

    g1 = (z ** 3 + z) / 4.0
    g2 = (5 * z ** 5 + 16 * z ** 3 + 3 * z) / 96.0
    g3 = (3 * z ** 7 + 19 * z ** 5 + 17 * z ** 3 - 15 * z) / 384.0

    return z + g1 / df + g2 / df ** 2 + g3 / df ** 3
