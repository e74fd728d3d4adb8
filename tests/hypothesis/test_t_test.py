"""
Tests for t_test().

Reference p-values come from scipy.stats (ttest_1samp, ttest_ind with
equal_var=False, ttest_rel). Confidence intervals use a Cornish-Fisher
critical value, so they are checked against exact t quantiles with a
looser tolerance.
"""

import math

import numpy as np
import pytest
from numpy.testing import assert_allclose
from scipy import stats

from pystatcore.core.compute.special import normal_cdf
from pystatcore.core.exceptions import (
    DimensionError,
    InsufficientDataError,
    InvalidParametersError,
)
from pystatcore.hypothesis import ConfidenceInterval, HypothesisDesign, t_test


SAMPLE = [2.0, 4.0, 4.0, 4.0, 5.0, 5.0, 7.0, 9.0]


class TestOneSampleTTest:
    """One-sample t-test: H0: mean(x) = mu."""

    def test_null_mean_exact(self):
        """Sample mean equals mu: t = 0, p = 1."""
        result = t_test(SAMPLE, mu=5)
        assert result.statistic == pytest.approx(0.0, abs=1e-15)
        assert result.degrees_of_freedom == 7.0
        assert result.p_value == pytest.approx(1.0, abs=1e-12)
        assert not result.is_significant
        assert result.estimate == {"mean of x": pytest.approx(5.0)}
        assert result.null_value == {"mean": 5.0}

    def test_reproducible(self):
        a = t_test(SAMPLE, mu=4)
        b = t_test(SAMPLE, mu=4)
        assert a.statistic == b.statistic
        assert a.p_value == b.p_value
        assert a.confidence_interval == b.confidence_interval

    def test_matches_scipy(self):
        x = [1, 2, 3, 4, 5]
        result = t_test(x)
        ref = stats.ttest_1samp(x, 0.0)
        assert result.statistic == pytest.approx(ref.statistic, rel=1e-12)
        assert result.p_value == pytest.approx(ref.pvalue, rel=1e-7)
        assert result.is_significant

    def test_two_sided_symmetric_under_sign_flip(self):
        """Negating the data and mu flips t but keeps the p-value."""
        x = np.array(SAMPLE)
        up = t_test(x, mu=3.5)
        down = t_test(-x, mu=-3.5)
        assert down.statistic == pytest.approx(-up.statistic, rel=1e-12)
        assert down.p_value == pytest.approx(up.p_value, rel=1e-12)

    def test_one_sided_matches_scipy(self):
        x = [1, 2, 3, 4, 5]
        greater = t_test(x, alternative="greater")
        less = t_test(x, alternative="less")
        assert greater.p_value == pytest.approx(
            stats.ttest_1samp(x, 0.0, alternative="greater").pvalue, rel=1e-7,
        )
        assert less.p_value == pytest.approx(
            stats.ttest_1samp(x, 0.0, alternative="less").pvalue, rel=1e-7,
        )
        assert greater.p_value + less.p_value == pytest.approx(1.0, abs=1e-12)

    def test_confidence_interval(self):
        result = t_test(SAMPLE, mu=5)
        ci = result.confidence_interval
        se = np.std(SAMPLE, ddof=1) / math.sqrt(len(SAMPLE))
        half = stats.t.ppf(0.975, 7) * se
        assert isinstance(ci, ConfidenceInterval)
        assert ci.confidence_level == pytest.approx(0.95)
        assert_allclose([ci.lower, ci.upper], [5 - half, 5 + half], rtol=1e-3)
        assert ci.contains(5.0)
        assert ci.point_estimate == pytest.approx(5.0)

    def test_confidence_level_follows_alpha(self):
        result = t_test(SAMPLE, alpha=0.01)
        assert result.confidence_interval.confidence_level == pytest.approx(0.99)
        wider = result.confidence_interval.margin_of_error
        narrower = t_test(SAMPLE, alpha=0.05).confidence_interval.margin_of_error
        assert wider > narrower

    def test_one_sided_interval_unbounded(self):
        greater = t_test(SAMPLE, alternative="greater").confidence_interval
        less = t_test(SAMPLE, alternative="less").confidence_interval
        assert greater.upper == math.inf and math.isfinite(greater.lower)
        assert less.lower == -math.inf and math.isfinite(less.upper)

    def test_large_df_uses_normal(self, rng):
        x = rng.normal(0.2, 1.0, size=150)
        result = t_test(x)
        assert result.degrees_of_freedom == 149.0
        expected = 2.0 * normal_cdf(-abs(result.statistic))
        assert result.p_value == pytest.approx(expected, rel=1e-12)

    def test_constant_data(self):
        """Zero standard error leaves t undefined."""
        result = t_test([3.0, 3.0, 3.0], mu=3)
        assert math.isnan(result.statistic)
        assert math.isnan(result.p_value)
        assert result.confidence_interval is None
        assert not result.is_significant
        assert "data are essentially constant" in result.warnings

    def test_summary_format(self):
        s = t_test(SAMPLE, mu=4).summary()
        assert "One-sample t-test" in s
        assert "data:  x" in s
        assert "p-value" in s
        assert "confidence interval" in s
        assert "sample estimates" in s
        assert "significant at alpha = 0.05" in s

    def test_metadata(self):
        result = t_test(SAMPLE)
        assert result.backend_name == "cpu_hypothesis"
        assert result.info["test_type"] == "t_one_sample"
        assert "total_seconds" in result.timing


class TestTwoSampleTTest:
    """Welch two-sample t-test."""

    def test_matches_scipy_welch(self):
        x = [1, 2, 3, 4, 5]
        y = [4, 5, 6, 7, 8]
        result = t_test(x, y)
        ref = stats.ttest_ind(x, y, equal_var=False)
        assert result.statistic == pytest.approx(-3.0, rel=1e-12)
        assert result.degrees_of_freedom == pytest.approx(8.0, rel=1e-12)
        assert result.p_value == pytest.approx(ref.pvalue, rel=1e-7)
        assert result.estimate == {
            "mean of x": pytest.approx(3.0),
            "mean of y": pytest.approx(6.0),
        }

    def test_unequal_variances(self, rng):
        x = rng.normal(0.0, 1.0, size=12)
        y = rng.normal(0.8, 3.0, size=20)
        result = t_test(x, y)
        ref = stats.ttest_ind(x, y, equal_var=False)
        assert result.statistic == pytest.approx(ref.statistic, rel=1e-10)
        assert result.p_value == pytest.approx(ref.pvalue, rel=1e-6)
        # Welch-Satterthwaite df is fractional
        assert result.degrees_of_freedom != int(result.degrees_of_freedom)

    def test_mu_shifts_statistic(self):
        x = [1, 2, 3, 4, 5]
        y = [4, 5, 6, 7, 8]
        assert t_test(x, y, mu=-3).statistic == pytest.approx(0.0, abs=1e-12)

    def test_description(self):
        result = t_test([1, 2, 3], [2, 3, 5])
        assert result.description.startswith("Welch two-sample t-test")

    def test_y_too_small(self):
        with pytest.raises(InsufficientDataError):
            t_test([1, 2, 3], [1])


class TestPairedTTest:

    def test_matches_scipy(self):
        x = [1, 2, 3, 4, 5]
        y = [2, 4, 5, 4, 7]
        result = t_test(x, y, paired=True)
        ref = stats.ttest_rel(x, y)
        assert result.statistic == pytest.approx(ref.statistic, rel=1e-12)
        assert result.degrees_of_freedom == 4.0
        assert result.p_value == pytest.approx(ref.pvalue, rel=1e-7)
        assert result.estimate == {"mean difference": pytest.approx(-1.4)}

    def test_equals_one_sample_on_differences(self):
        x = np.array([5.1, 4.8, 6.0, 5.5, 5.9])
        y = np.array([4.9, 4.9, 5.2, 5.0, 5.1])
        paired = t_test(x, y, paired=True)
        one = t_test(x - y)
        assert paired.statistic == pytest.approx(one.statistic, rel=1e-12)
        assert paired.p_value == pytest.approx(one.p_value, rel=1e-12)

    def test_length_mismatch(self):
        with pytest.raises(DimensionError):
            t_test([1, 2, 3], [1, 2], paired=True)

    def test_requires_y(self):
        with pytest.raises(InvalidParametersError):
            t_test([1, 2, 3], paired=True)


class TestConfidenceInterval:

    def test_derived_values(self):
        ci = ConfidenceInterval(1.0, 3.0, 0.9)
        assert ci.point_estimate == 2.0
        assert ci.margin_of_error == 1.0
        assert ci.contains(1.0) and ci.contains(3.0)
        assert not ci.contains(3.5)

    def test_lower_above_upper(self):
        with pytest.raises(InvalidParametersError):
            ConfidenceInterval(2.0, 1.0)

    def test_nan_bound(self):
        with pytest.raises(InvalidParametersError):
            ConfidenceInterval(math.nan, 1.0)


class TestValidation:

    def test_single_observation(self):
        with pytest.raises(InsufficientDataError):
            t_test([1.0])

    def test_empty(self):
        with pytest.raises(InsufficientDataError):
            t_test([])

    def test_bad_alternative(self):
        with pytest.raises(InvalidParametersError, match="alternative"):
            t_test(SAMPLE, alternative="two-sided")

    @pytest.mark.parametrize("alpha", [0.0, 1.0, -0.1, 1.5])
    def test_bad_alpha(self, alpha):
        with pytest.raises(InvalidParametersError):
            t_test(SAMPLE, alpha=alpha)

    def test_accepts_design(self):
        design = HypothesisDesign.for_t_test(SAMPLE, mu=5)
        assert t_test(design).p_value == pytest.approx(1.0, abs=1e-12)
