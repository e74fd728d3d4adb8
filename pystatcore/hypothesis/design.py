"""
HypothesisDesign: tagged union for hypothesis test inputs.

Uses factory classmethods per test type. The `test_type` field identifies
which fields are populated. Immutable after construction.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import NDArray, ArrayLike

from pystatcore.core.exceptions import (
    DimensionError,
    EmptyInputError,
    InsufficientDataError,
    InvalidParametersError,
)
from pystatcore.core.validation import (
    check_array,
    check_1d,
    check_finite,
    check_min_samples,
    check_open_unit_interval,
)
from pystatcore.hypothesis._common import VALID_ALTERNATIVES


def _validate_alternative(alternative: str) -> str:
    """Validate and return alternative hypothesis string."""
    if alternative not in VALID_ALTERNATIVES:
        raise InvalidParametersError(
            f"alternative must be one of {VALID_ALTERNATIVES}, got {alternative!r}"
        )
    return alternative


def _validate_alpha(alpha: float) -> float:
    """Validate significance level is in (0, 1)."""
    check_open_unit_interval(alpha, "alpha")
    return float(alpha)


def _to_float64_1d(x: ArrayLike, name: str) -> NDArray[np.floating[Any]]:
    """Convert to a finite 1D float64 array (empty allowed)."""
    arr = check_array(x, name)
    if arr.ndim == 0:
        arr = arr.reshape(1)
    check_1d(arr, name)
    check_finite(arr, name)
    return arr


@dataclass(frozen=True)
class HypothesisDesign:
    """
    Design for hypothesis tests.

    Uses a tagged-union approach: the `test_type` field identifies which
    fields are populated. Factory classmethods validate inputs.

    Do not construct directly; use factory classmethods.
    """
    test_type: str

    # Numeric vectors
    _x: NDArray[np.floating[Any]] | None = None
    _y: NDArray[np.floating[Any]] | None = None

    # Test configuration
    _mu: float = 0.0
    _alternative: str = "two.sided"
    _alpha: float = 0.05

    # Chi-squared inputs
    _table: NDArray[np.floating[Any]] | None = None
    _expected: NDArray[np.floating[Any]] | None = None

    # Metadata
    _data_name: str = ""

    # --- Properties ---

    @property
    def x(self) -> NDArray[np.floating[Any]] | None:
        return self._x

    @property
    def y(self) -> NDArray[np.floating[Any]] | None:
        return self._y

    @property
    def table(self) -> NDArray[np.floating[Any]] | None:
        return self._table

    @property
    def expected(self) -> NDArray[np.floating[Any]] | None:
        return self._expected

    @property
    def mu(self) -> float:
        return self._mu

    @property
    def alternative(self) -> str:
        return self._alternative

    @property
    def alpha(self) -> float:
        return self._alpha

    @property
    def data_name(self) -> str:
        return self._data_name

    # --- Factory classmethods ---

    @classmethod
    def for_t_test(
        cls,
        x: ArrayLike,
        y: ArrayLike | None = None,
        *,
        mu: float = 0.0,
        paired: bool = False,
        alternative: str = "two.sided",
        alpha: float = 0.05,
    ) -> HypothesisDesign:
        """Build design for t_test()."""
        alternative = _validate_alternative(alternative)
        alpha = _validate_alpha(alpha)

        x_arr = _to_float64_1d(x, "x")
        y_arr = None
        data_name = "x"

        if y is None:
            if paired:
                raise InvalidParametersError("Paired t-test requires both x and y")
            check_min_samples(x_arr, 2, "x")
            test_type = "t_one_sample"
        else:
            y_in = _to_float64_1d(y, "y")
            data_name = "x and y"

            if paired:
                if len(x_arr) != len(y_in):
                    raise DimensionError(
                        f"Paired samples must have equal length: "
                        f"len(x)={len(x_arr)}, len(y)={len(y_in)}"
                    )
                check_min_samples(x_arr, 2, "x")
                # The paired test is a one-sample test on the differences
                x_arr = x_arr - y_in
                test_type = "t_paired"
            else:
                check_min_samples(x_arr, 2, "x")
                check_min_samples(y_in, 2, "y")
                y_arr = y_in
                test_type = "t_two_sample"

        return cls(
            test_type=test_type,
            _x=x_arr,
            _y=y_arr,
            _mu=float(mu),
            _alternative=alternative,
            _alpha=alpha,
            _data_name=data_name,
        )

    @classmethod
    def for_chisq_test(
        cls,
        observed: ArrayLike,
        expected: ArrayLike | None = None,
        *,
        alpha: float = 0.05,
    ) -> HypothesisDesign:
        """
        Build design for chisq_test().

        If observed is 2D, it's a test of independence on a contingency
        table. If observed is 1D it's a goodness-of-fit test, against
        `expected` when given, else against the uniform distribution.
        """
        alpha = _validate_alpha(alpha)
        obs = check_array(observed, "observed")

        if obs.ndim == 2:
            if expected is not None:
                raise InvalidParametersError(
                    "expected frequencies are only used for goodness-of-fit "
                    "(1D observed); independence expectations come from the margins"
                )
            return cls._independence(obs, alpha)

        if obs.ndim != 1:
            raise DimensionError(
                f"observed: expected 1D counts or a 2D contingency table, "
                f"got {obs.ndim}D with shape {obs.shape}"
            )

        check_finite(obs, "observed")

        if expected is None:
            # Uniform: every category expects total / k
            k = len(obs)
            check_min_samples(obs, 2, "observed")
            exp = np.full(k, obs.sum() / k)
            data_name = "observed (uniform expected)"
        else:
            exp = _to_float64_1d(expected, "expected")
            if len(obs) != len(exp):
                raise DimensionError(
                    f"Observed and expected must have equal length: "
                    f"len(observed)={len(obs)}, len(expected)={len(exp)}"
                )
            check_min_samples(obs, 2, "observed")
            data_name = "observed and expected"

        if np.any(obs < 0):
            raise InvalidParametersError("All observed counts must be non-negative")
        if np.any(exp <= 0):
            raise InvalidParametersError("Expected frequencies must be positive")

        return cls(
            test_type="chisq_gof",
            _x=obs,
            _expected=exp,
            _alpha=alpha,
            _data_name=data_name,
        )

    @classmethod
    def _independence(
        cls,
        table: NDArray[np.floating[Any]],
        alpha: float,
    ) -> HypothesisDesign:
        if table.size == 0:
            raise EmptyInputError("observed: contingency table is empty")
        check_finite(table, "observed")

        n_rows, n_cols = table.shape
        if n_rows < 2 or n_cols < 2:
            raise InvalidParametersError(
                f"Contingency table must be at least 2x2, got {n_rows}x{n_cols}"
            )
        if np.any(table < 0):
            raise InvalidParametersError(
                "All entries in contingency table must be non-negative"
            )
        if table.sum() <= 0:
            raise InsufficientDataError(
                "Contingency table has no observations",
                required=1,
                actual=0,
            )

        return cls(
            test_type="chisq_independence",
            _table=table.copy(),
            _alpha=alpha,
            _data_name="observed",
        )
