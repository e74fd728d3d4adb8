"""
Tests for input validation utilities.

Validates every function in core/validation.py.
"""

import numpy as np
import pytest

from pystatcore.core.exceptions import (
    DimensionError,
    EmptyInputError,
    InsufficientDataError,
    InvalidParametersError,
    ValidationError,
)
from pystatcore.core.validation import (
    as_sample,
    check_1d,
    check_2d,
    check_array,
    check_consistent_length,
    check_finite,
    check_min_samples,
    check_non_empty,
    check_open_unit_interval,
    check_positive,
)


class TestCheckArray:
    """check_array converts to ndarray and rejects non-numeric data."""

    def test_list_to_float_array(self):
        result = check_array([1, 2, 3], "x")
        assert isinstance(result, np.ndarray)
        assert np.issubdtype(result.dtype, np.floating)
        np.testing.assert_array_equal(result, [1.0, 2.0, 3.0])

    def test_bool_promoted(self):
        result = check_array([True, False], "x")
        np.testing.assert_array_equal(result, [1.0, 0.0])

    def test_empty_list_allowed(self):
        result = check_array([], "x")
        assert result.size == 0

    def test_ragged_rows_rejected(self):
        with pytest.raises(DimensionError):
            check_array([[1.0, 2.0], [3.0]], "matrix")

    def test_strings_rejected(self):
        with pytest.raises(ValidationError):
            check_array(["a", "b"], "x")


class TestShapeChecks:

    def test_check_1d_passes(self):
        check_1d(np.zeros(3), "x")

    def test_check_1d_rejects_2d(self):
        with pytest.raises(DimensionError, match="expected 1D"):
            check_1d(np.zeros((2, 2)), "x")

    def test_check_2d_rejects_1d(self):
        with pytest.raises(DimensionError, match="expected 2D"):
            check_2d(np.zeros(3), "X")

    def test_consistent_length_mismatch(self):
        with pytest.raises(DimensionError, match="x=3, y=2"):
            check_consistent_length(np.zeros(3), np.zeros(2), names=("x", "y"))

    def test_consistent_length_name_count(self):
        with pytest.raises(ValueError):
            check_consistent_length(np.zeros(3), np.zeros(3), names=("x",))


class TestValueChecks:

    def test_check_finite_nan(self):
        with pytest.raises(ValidationError, match="1 NaN"):
            check_finite(np.array([1.0, np.nan]), "x")

    def test_check_finite_inf(self):
        with pytest.raises(ValidationError, match="1 Inf"):
            check_finite(np.array([1.0, np.inf]), "x")

    def test_check_non_empty(self):
        with pytest.raises(EmptyInputError):
            check_non_empty(np.array([]), "x")

    def test_check_min_samples_attributes(self):
        with pytest.raises(InsufficientDataError) as exc_info:
            check_min_samples(np.zeros(1), 2, "x")
        assert exc_info.value.required == 2
        assert exc_info.value.actual == 1

    @pytest.mark.parametrize("value", [0.0, -1.0, np.inf, np.nan])
    def test_check_positive_rejects(self, value):
        with pytest.raises(InvalidParametersError):
            check_positive(value, "rate")

    @pytest.mark.parametrize("value", [0.0, 1.0, -0.5, 1.5])
    def test_open_unit_interval_rejects(self, value):
        with pytest.raises(InvalidParametersError):
            check_open_unit_interval(value, "alpha")

    def test_open_unit_interval_accepts(self):
        check_open_unit_interval(0.05, "alpha")


class TestAsSample:

    def test_scalar_becomes_length_one(self):
        result = as_sample(3.0, "x")
        assert result.shape == (1,)

    def test_empty_reports_empty_first(self):
        with pytest.raises(EmptyInputError):
            as_sample([], "x")

    def test_rejects_matrix(self):
        with pytest.raises(DimensionError):
            as_sample([[1.0, 2.0], [3.0, 4.0]], "x")

    def test_rejects_nan(self):
        with pytest.raises(ValidationError):
            as_sample([1.0, np.nan], "x")
