"""
Tests for cor(): Pearson and Spearman correlation.
"""

import numpy as np
import pytest
from scipy import stats

from pystatcore.core.exceptions import (
    DimensionError,
    EmptyInputError,
    InvalidCalculationError,
    InvalidParametersError,
)
from pystatcore.descriptive import cor


class TestPearson:

    def test_perfect_positive(self):
        assert cor([1, 2, 3, 4], [2, 4, 6, 8]) == pytest.approx(1.0)

    def test_perfect_negative(self):
        assert cor([1, 2, 3, 4], [8, 6, 4, 2]) == pytest.approx(-1.0)

    def test_matches_numpy(self, rng):
        x = rng.standard_normal(50)
        y = 0.6 * x + rng.standard_normal(50)
        assert cor(x, y) == pytest.approx(np.corrcoef(x, y)[0, 1], rel=1e-12)

    def test_symmetric(self, rng):
        x = rng.standard_normal(20)
        y = rng.standard_normal(20)
        assert cor(x, y) == pytest.approx(cor(y, x), rel=1e-14)

    def test_bounded(self, rng):
        x = rng.standard_normal(10)
        assert -1.0 <= cor(x, 3.0 * x + 1.0) <= 1.0

    def test_invariant_to_affine_transform(self, rng):
        x = rng.standard_normal(25)
        y = rng.standard_normal(25)
        assert cor(2.0 * x + 5.0, y) == pytest.approx(cor(x, y), rel=1e-12)


class TestSpearman:

    def test_monotone_nonlinear(self):
        x = [1, 2, 3, 4, 5]
        y = [1, 8, 27, 64, 125]
        assert cor(x, y, method='spearman') == pytest.approx(1.0)
        assert cor(x, y) < 1.0

    def test_with_ties_matches_scipy(self):
        x = [1, 2, 2, 3, 4, 4, 5]
        y = [2, 1, 4, 3, 6, 5, 7]
        ref = stats.spearmanr(x, y).statistic
        assert cor(x, y, method='spearman') == pytest.approx(ref, rel=1e-12)

    def test_random_matches_scipy(self, rng):
        x = rng.standard_normal(40)
        y = x ** 3 + rng.standard_normal(40)
        ref = stats.spearmanr(x, y).statistic
        assert cor(x, y, method='spearman') == pytest.approx(ref, rel=1e-12)


class TestValidation:

    def test_constant_variable(self):
        with pytest.raises(InvalidCalculationError, match="zero variance"):
            cor([1, 1, 1], [1, 2, 3])

    def test_length_mismatch(self):
        with pytest.raises(DimensionError):
            cor([1, 2, 3], [1, 2])

    def test_empty(self):
        with pytest.raises(EmptyInputError):
            cor([], [])

    def test_unknown_method(self):
        with pytest.raises(InvalidParametersError, match="Unknown correlation method"):
            cor([1, 2, 3], [3, 2, 1], method='kendall')
