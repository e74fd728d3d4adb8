"""
Solver dispatch for hypothesis tests.

Provides t_test() and chisq_test().
"""

from __future__ import annotations

from typing import Literal
from numpy.typing import ArrayLike

from pystatcore.core.exceptions import InvalidParametersError
from pystatcore.hypothesis.design import HypothesisDesign
from pystatcore.hypothesis.solution import HypothesisResult
from pystatcore.hypothesis.backends.cpu import CPUHypothesisBackend


Alternative = Literal["two.sided", "less", "greater"]


def _get_backend(backend: str = 'cpu'):
    """Select backend for hypothesis tests. Only the CPU backend exists."""
    if backend in ('cpu', 'auto'):
        return CPUHypothesisBackend()
    raise InvalidParametersError(f"Unknown backend: {backend!r}. Use 'cpu'.")


def t_test(
    x: ArrayLike | HypothesisDesign,
    y: ArrayLike | None = None,
    *,
    mu: float = 0.0,
    paired: bool = False,
    alternative: Alternative = "two.sided",
    alpha: float = 0.05,
    backend: str = 'cpu',
) -> HypothesisResult:
    """
    Student's t-test.

    Parameters
    ----------
    x : array-like or HypothesisDesign
        Sample data. 1D numeric vector with at least 2 observations.
    y : array-like or None
        Optional second sample. Without `paired`, runs Welch's two-sample
        test with Welch-Satterthwaite degrees of freedom (variances are
        not assumed equal).
    mu : float
        Hypothesized mean (one-sample), mean difference (paired) or
        difference in means (two-sample). Default 0.
    paired : bool
        If True, test the mean of x - y. x and y must have equal length.
    alternative : str
        "two.sided" (default), "less", or "greater".
    alpha : float
        Significance level; the confidence interval has level 1 - alpha.
    backend : str
        'cpu' (default).

    Returns
    -------
    HypothesisResult

    Raises
    ------
    InsufficientDataError
        If a sample has fewer than 2 observations.
    DimensionError
        If a paired test gets samples of different lengths.
    InvalidParametersError
        On an unknown alternative or alpha outside (0, 1).
    """
    if isinstance(x, HypothesisDesign):
        design = x
    else:
        design = HypothesisDesign.for_t_test(
            x, y,
            mu=mu,
            paired=paired,
            alternative=alternative,
            alpha=alpha,
        )

    be = _get_backend(backend)
    result = be.solve(design)
    return HypothesisResult(_result=result, _design=design)


def chisq_test(
    observed: ArrayLike | HypothesisDesign,
    expected: ArrayLike | None = None,
    *,
    alpha: float = 0.05,
    backend: str = 'cpu',
) -> HypothesisResult:
    """
    Pearson's chi-squared test.

    Parameters
    ----------
    observed : array-like or HypothesisDesign
        A 1D vector of observed frequencies (goodness-of-fit) or a 2D
        contingency table (test of independence).
    expected : array-like or None
        Expected frequencies for the goodness-of-fit test, same length as
        `observed`. If None, a uniform distribution is assumed. Not allowed
        with a contingency table.
    alpha : float
        Significance level. Default 0.05.
    backend : str
        'cpu' (default).

    Returns
    -------
    HypothesisResult
        With extras observed, expected and residuals.

    Raises
    ------
    InsufficientDataError
        Fewer than 2 categories.
    DimensionError
        Length mismatch, or a ragged contingency table.
    InvalidParametersError
        Non-positive expected frequency, or a table smaller than 2x2.
    """
    if isinstance(observed, HypothesisDesign):
        design = observed
    else:
        design = HypothesisDesign.for_chisq_test(observed, expected, alpha=alpha)

    be = _get_backend(backend)
    result = be.solve(design)
    return HypothesisResult(_result=result, _design=design)
