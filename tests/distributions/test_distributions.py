"""
Tests for Normal, Uniform, Exponential and Poisson.

Densities and CDFs are checked against scipy.stats.
"""

import math

import numpy as np
import pytest
from scipy import stats

from pystatcore.core.exceptions import InvalidParametersError
from pystatcore.distributions import (
    Distribution,
    Exponential,
    Normal,
    Poisson,
    RandomSource,
    Uniform,
)


class TestProtocol:

    @pytest.mark.parametrize("dist", [
        Normal(), Uniform(), Exponential(), Poisson(3.0),
    ])
    def test_satisfies_protocol(self, dist):
        assert isinstance(dist, Distribution)

    def test_frozen(self):
        with pytest.raises(AttributeError):
            Normal().mean = 3.0


class TestNormal:

    @pytest.mark.parametrize("x", [-3.0, -0.7, 0.0, 1.3, 4.2])
    def test_pdf_cdf_match_scipy(self, x):
        d = Normal(1.0, 2.0)
        ref = stats.norm(1.0, 2.0)
        assert d.pdf(x) == pytest.approx(ref.pdf(x), rel=1e-12)
        assert d.cdf(x) == pytest.approx(ref.cdf(x), rel=1e-10)

    def test_standard_defaults(self):
        d = Normal()
        assert d.cdf(0.0) == pytest.approx(0.5)
        assert d.pdf(0.0) == pytest.approx(1.0 / math.sqrt(2.0 * math.pi))
        assert d.variance == 1.0

    @pytest.mark.parametrize("p", [0.001, 0.025, 0.3, 0.5, 0.9, 0.999])
    def test_ppf_matches_scipy(self, p):
        d = Normal(10.0, 3.0)
        assert d.ppf(p) == pytest.approx(stats.norm.ppf(p, 10.0, 3.0), rel=1e-8)

    def test_ppf_inverts_cdf(self):
        d = Normal(-2.0, 0.5)
        for x in (-3.0, -2.0, -1.2):
            assert d.ppf(d.cdf(x)) == pytest.approx(x, abs=1e-7)

    def test_ppf_bounds(self):
        d = Normal()
        assert d.ppf(0.0) == -math.inf
        assert d.ppf(1.0) == math.inf
        assert math.isnan(d.ppf(1.5))

    def test_z_score_round_trip(self):
        d = Normal(100.0, 15.0)
        assert d.z_score(130.0) == pytest.approx(2.0)
        assert d.value_for_z_score(-1.0) == pytest.approx(85.0)

    @pytest.mark.parametrize("std", [0.0, -1.0, math.nan, math.inf])
    def test_bad_std(self, std):
        with pytest.raises(InvalidParametersError):
            Normal(0.0, std)

    def test_bad_mean(self):
        with pytest.raises(InvalidParametersError):
            Normal(math.inf, 1.0)

    def test_sample_moments(self):
        rng = RandomSource(seed=7)
        draws = Normal(5.0, 2.0).sample(rng, size=20000)
        assert draws.shape == (20000,)
        assert np.mean(draws) == pytest.approx(5.0, abs=0.05)
        assert np.std(draws) == pytest.approx(2.0, abs=0.05)


class TestUniform:

    def test_pdf(self):
        d = Uniform(2.0, 6.0)
        assert d.pdf(3.0) == 0.25
        assert d.pdf(2.0) == 0.25
        assert d.pdf(6.0) == 0.25
        assert d.pdf(1.0) == 0.0
        assert d.pdf(7.0) == 0.0

    def test_cdf(self):
        d = Uniform(2.0, 6.0)
        assert d.cdf(1.0) == 0.0
        assert d.cdf(3.0) == 0.25
        assert d.cdf(6.0) == 1.0
        assert d.cdf(10.0) == 1.0

    def test_moments(self):
        d = Uniform(0.0, 12.0)
        assert d.mean == 6.0
        assert d.variance == pytest.approx(12.0)
        assert d.std == pytest.approx(math.sqrt(12.0))

    @pytest.mark.parametrize("low,high", [(1.0, 1.0), (2.0, 1.0), (0.0, math.inf)])
    def test_bad_bounds(self, low, high):
        with pytest.raises(InvalidParametersError):
            Uniform(low, high)

    def test_sample_in_range(self):
        draws = Uniform(-1.0, 1.0).sample(RandomSource(seed=3), size=1000)
        assert np.all((draws >= -1.0) & (draws < 1.0))


class TestExponential:

    @pytest.mark.parametrize("x", [0.0, 0.1, 1.0, 5.0])
    def test_pdf_cdf_match_scipy(self, x):
        d = Exponential(2.0)
        ref = stats.expon(scale=0.5)
        assert d.pdf(x) == pytest.approx(ref.pdf(x), rel=1e-12)
        assert d.cdf(x) == pytest.approx(ref.cdf(x), rel=1e-12, abs=1e-300)

    def test_negative_support(self):
        d = Exponential(1.0)
        assert d.pdf(-1.0) == 0.0
        assert d.cdf(-1.0) == 0.0

    def test_moments(self):
        d = Exponential(4.0)
        assert d.mean == 0.25
        assert d.variance == 0.0625
        assert d.std == 0.25

    def test_ppf(self):
        d = Exponential(2.0)
        assert d.ppf(0.5) == pytest.approx(math.log(2.0) / 2.0)
        assert d.ppf(0.0) == 0.0
        assert d.ppf(1.0) == math.inf
        assert math.isnan(d.ppf(-0.1))

    def test_bad_rate(self):
        with pytest.raises(InvalidParametersError):
            Exponential(0.0)

    def test_sample_mean(self):
        draws = Exponential(0.5).sample(RandomSource(seed=11), size=20000)
        assert np.all(draws >= 0.0)
        assert np.mean(draws) == pytest.approx(2.0, rel=0.05)


class TestPoisson:

    @pytest.mark.parametrize("k", [0, 1, 3, 7, 15])
    def test_pmf_matches_scipy(self, k):
        assert Poisson(3.5).pmf(k) == pytest.approx(stats.poisson.pmf(k, 3.5), rel=1e-10)

    def test_pmf_large_k_finite(self):
        p = Poisson(500.0).pmf(500)
        assert p == pytest.approx(stats.poisson.pmf(500, 500.0), rel=1e-8)

    def test_pmf_negative(self):
        assert Poisson(2.0).pmf(-1) == 0.0

    def test_pdf_rounds(self):
        d = Poisson(2.0)
        assert d.pdf(2.2) == d.pmf(2)

    @pytest.mark.parametrize("x", [0, 2, 2.7, 5, 12])
    def test_cdf_matches_scipy(self, x):
        assert Poisson(4.0).cdf(x) == pytest.approx(stats.poisson.cdf(x, 4.0), rel=1e-9)

    def test_nan_input(self):
        d = Poisson(2.0)
        assert math.isnan(d.cdf(math.nan))
        assert math.isnan(d.pdf(math.nan))

    def test_cdf_bounds(self):
        d = Poisson(4.0)
        assert d.cdf(-0.5) == 0.0
        assert d.cdf(math.inf) == 1.0

    def test_moments(self):
        d = Poisson(9.0)
        assert d.mean == 9.0
        assert d.variance == 9.0
        assert d.std == 3.0

    def test_bad_rate(self):
        with pytest.raises(InvalidParametersError):
            Poisson(-1.0)

    def test_sample(self):
        draws = Poisson(3.0).sample(RandomSource(seed=5), size=20000)
        assert np.all(draws >= 0)
        assert np.mean(draws) == pytest.approx(3.0, rel=0.05)
