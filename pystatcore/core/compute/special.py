"""
Special functions with no closed form.

Provides the regularized incomplete gamma and beta functions and the
standard normal CDF/quantile used to turn test statistics into p-values
and critical values.

All functions are pure scalar kernels. Parameter domains are documented
preconditions, not runtime-checked contracts: out-of-domain input returns
a sentinel (0, a boundary value, or nan) and callers validate first.

Iteration caps:
    The series and continued fractions stop after
    SPECIAL_FUNCTIONS.max_iterations terms. Hitting the cap returns the
    best available approximation and emits a RuntimeWarning; pass
    strict=True to raise ConvergenceError instead.
"""

from __future__ import annotations

import math
import warnings

from scipy.special import erfc, gammaln

from pystatcore.core.compute.tolerances import (
    ACKLAM_P_LOW,
    SPECIAL_FUNCTIONS,
    IterationControl,
)
from pystatcore.core.exceptions import ConvergenceError


# Acklam's rational approximation to the inverse normal CDF.
# Central region numerator / denominator in r = (p - 0.5)^2
_A = (
    -3.969683028665376e+01,
    2.209460984245205e+02,
    -2.759285104469687e+02,
    1.383577518672690e+02,
    -3.066479806614716e+01,
    2.506628277459239e+00,
)
_B = (
    -5.447609879822406e+01,
    1.615858368580409e+02,
    -1.556989798598866e+02,
    6.680131188771972e+01,
    -1.328068155288572e+01,
)
# Tail numerator / denominator in q = sqrt(-2 ln p)
_C = (
    -7.784894002430293e-03,
    -3.223964580411365e-01,
    -2.400758277161838e+00,
    -2.549732539343734e+00,
    4.374664141464968e+00,
    2.938163982698783e+00,
)
_D = (
    7.784695709041462e-03,
    3.224671290700398e-01,
    2.445134137142996e+00,
    3.754408661907416e+00,
)


# --- Incomplete gamma ---

def lower_incomplete_gamma_p(
    a: float,
    x: float,
    *,
    strict: bool = False,
    control: IterationControl = SPECIAL_FUNCTIONS,
) -> float:
    """
    Lower regularized incomplete gamma function P(a, x).

    P(a, x) = γ(a, x) / Γ(a), in [0, 1].

    Below x = a + 1 the power series converges quickly; above it the
    series needs O(x) terms, so the Lentz continued fraction for the
    complement Q(a, x) is used and 1 - Q returned.

    Args:
        a: Shape parameter, a > 0
        x: Upper integration limit, x >= 0
        strict: Raise ConvergenceError instead of warning on the cap
        control: Iteration cap and tolerances

    Returns:
        P(a, x). Returns 0.0 when a <= 0, x < 0 or x == 0.
    """
    if a <= 0 or x <= 0:
        return 0.0
    if x < a + 1:
        return _gamma_series(a, x, strict, control)
    return 1.0 - _gamma_continued_fraction(a, x, strict, control)


def upper_incomplete_gamma_q(
    a: float,
    x: float,
    *,
    strict: bool = False,
    control: IterationControl = SPECIAL_FUNCTIONS,
) -> float:
    """
    Upper regularized incomplete gamma function Q(a, x) = 1 - P(a, x).

    Evaluated on the same branch split as P, so the continued fraction
    value is returned directly in the upper tail without cancellation.

    Returns 1.0 when x <= 0 (and a > 0); 0.0 when a <= 0.
    """
    if a <= 0:
        return 0.0
    if x <= 0:
        return 1.0
    if x < a + 1:
        return 1.0 - _gamma_series(a, x, strict, control)
    return _gamma_continued_fraction(a, x, strict, control)


def _gamma_prefactor(a: float, x: float) -> float:
    """exp(-x + a ln x - lnΓ(a)), formed in log space to avoid overflow."""
    return math.exp(-x + a * math.log(x) - float(gammaln(a)))


def _gamma_series(
    a: float,
    x: float,
    strict: bool,
    control: IterationControl,
) -> float:
    """Series representation of P(a, x), valid for x < a + 1."""
    ap = a
    total = 1.0 / a
    delta = total
    converged = False
    iterations = 0

    for iterations in range(1, control.max_iterations + 1):
        ap += 1.0
        delta *= x / ap
        total += delta
        if abs(delta) < abs(total) * control.tolerance:
            converged = True
            break

    if not converged:
        _report_cap(
            "incomplete gamma series", iterations,
            abs(delta / total), strict, control,
        )

    return total * _gamma_prefactor(a, x)


def _gamma_continued_fraction(
    a: float,
    x: float,
    strict: bool,
    control: IterationControl,
) -> float:
    """Modified Lentz continued fraction for Q(a, x), valid for x >= a + 1."""
    tiny = control.tiny
    b = x + 1.0 - a
    c = 1.0 / tiny
    d = 1.0 / b
    h = d
    delta = h
    converged = False
    iterations = 0

    for iterations in range(1, control.max_iterations + 1):
        an = -iterations * (iterations - a)
        b += 2.0
        d = an * d + b
        if abs(d) < tiny:
            d = tiny
        c = b + an / c
        if abs(c) < tiny:
            c = tiny
        d = 1.0 / d
        delta = d * c
        h *= delta
        if abs(delta - 1.0) < control.tolerance:
            converged = True
            break

    if not converged:
        _report_cap(
            "incomplete gamma continued fraction", iterations,
            abs(delta - 1.0), strict, control,
        )

    return _gamma_prefactor(a, x) * h


# --- Incomplete beta ---

def regularized_incomplete_beta(
    x: float,
    a: float,
    b: float,
    *,
    strict: bool = False,
    control: IterationControl = SPECIAL_FUNCTIONS,
) -> float:
    """
    Regularized incomplete beta function I_x(a, b).

    The continued fraction converges rapidly for x < (a+1)/(a+b+2);
    above that point the symmetry I_x(a, b) = 1 - I_{1-x}(b, a) moves the
    evaluation back into the stable regime.

    Args:
        x: Evaluation point, 0 <= x <= 1
        a, b: Shape parameters, both > 0
        strict: Raise ConvergenceError instead of warning on the cap
        control: Iteration cap and tolerances

    Returns:
        I_x(a, b). x is returned unchanged at the boundaries 0 and 1.
        Out of domain: 0.0 for x < 0 or non-positive shapes, 1.0 for x > 1.
    """
    if x == 0.0 or x == 1.0:
        return x
    if a <= 0 or b <= 0 or x < 0.0:
        return 0.0
    if x > 1.0:
        return 1.0

    log_front = (
        float(gammaln(a + b)) - float(gammaln(a)) - float(gammaln(b))
        + a * math.log(x) + b * math.log1p(-x)
    )
    front = math.exp(log_front)

    if x > (a + 1.0) / (a + b + 2.0):
        return 1.0 - front * _beta_continued_fraction(1.0 - x, b, a, strict, control) / b
    return front * _beta_continued_fraction(x, a, b, strict, control) / a


def _beta_continued_fraction(
    x: float,
    a: float,
    b: float,
    strict: bool,
    control: IterationControl,
) -> float:
    """
    Modified Lentz evaluation of the incomplete beta continued fraction.

    Each iteration applies one even term d_{2m} = m(b-m)x / ((a+2m-1)(a+2m))
    and one odd term d_{2m+1} = -(a+m)(a+b+m)x / ((a+2m)(a+2m+1)).
    """
    tiny = control.tiny
    qab = a + b
    qap = a + 1.0
    qam = a - 1.0

    c = 1.0
    d = 1.0 - qab * x / qap
    if abs(d) < tiny:
        d = tiny
    d = 1.0 / d
    h = d
    delta = h
    converged = False
    iterations = 0

    for iterations in range(1, control.max_iterations + 1):
        m2 = 2 * iterations

        # Even step
        aa = iterations * (b - iterations) * x / ((qam + m2) * (a + m2))
        d = 1.0 + aa * d
        if abs(d) < tiny:
            d = tiny
        c = 1.0 + aa / c
        if abs(c) < tiny:
            c = tiny
        d = 1.0 / d
        h *= d * c

        # Odd step
        aa = -(a + iterations) * (qab + iterations) * x / ((a + m2) * (qap + m2))
        d = 1.0 + aa * d
        if abs(d) < tiny:
            d = tiny
        c = 1.0 + aa / c
        if abs(c) < tiny:
            c = tiny
        d = 1.0 / d
        delta = d * c
        h *= delta

        if abs(delta - 1.0) < control.tolerance:
            converged = True
            break

    if not converged:
        _report_cap(
            "incomplete beta continued fraction", iterations,
            abs(delta - 1.0), strict, control,
        )

    return h


# --- Normal distribution ---

def normal_cdf(z: float) -> float:
    """
    Standard normal CDF Φ(z).

    Computed as 0.5 * erfc(-z / √2), which keeps full relative precision
    in the lower tail where 1 + erf(...) would cancel.
    """
    return float(0.5 * erfc(-z / math.sqrt(2.0)))


def normal_quantile(p: float) -> float:
    """
    Standard normal quantile Φ⁻¹(p) by Acklam's rational approximation.

    Three regions: low tail p < 0.02425, central, high tail
    p > 1 - 0.02425. The tails use q = sqrt(-2 ln p) (or ln(1 - p)); the
    central region uses p - 0.5 directly. No refinement step is applied;
    relative error is about 1.15e-9.

    Returns:
        Φ⁻¹(p) for 0 < p < 1; -inf at p == 0, +inf at p == 1, nan otherwise.
    """
    if math.isnan(p) or p < 0.0 or p > 1.0:
        return math.nan
    if p == 0.0:
        return -math.inf
    if p == 1.0:
        return math.inf

    p_high = 1.0 - ACKLAM_P_LOW

    if p < ACKLAM_P_LOW:
        q = math.sqrt(-2.0 * math.log(p))
        return _tail_ratio(q)

    if p <= p_high:
        q = p - 0.5
        r = q * q
        num = (((((_A[0] * r + _A[1]) * r + _A[2]) * r + _A[3]) * r + _A[4]) * r + _A[5]) * q
        den = ((((_B[0] * r + _B[1]) * r + _B[2]) * r + _B[3]) * r + _B[4]) * r + 1.0
        return num / den

    q = math.sqrt(-2.0 * math.log1p(-p))
    return -_tail_ratio(q)


def _tail_ratio(q: float) -> float:
    num = ((((_C[0] * q + _C[1]) * q + _C[2]) * q + _C[3]) * q + _C[4]) * q + _C[5]
    den = (((_D[0] * q + _D[1]) * q + _D[2]) * q + _D[3]) * q + 1.0
    return num / den


# --- Helpers ---

def _report_cap(
    what: str,
    iterations: int,
    final_change: float,
    strict: bool,
    control: IterationControl,
) -> None:
    """Warn (or raise, when strict) that an evaluation stopped at its cap."""
    message = (
        f"{what} did not converge in {iterations} iterations "
        f"(last relative change {final_change:.3e}, tolerance {control.tolerance:.0e})"
    )
    if strict:
        raise ConvergenceError(
            message,
            iterations=iterations,
            final_change=final_change,
            reason='max_iterations',
            threshold=control.tolerance,
        )
    warnings.warn(message, RuntimeWarning, stacklevel=3)
