"""
Exception hierarchy for pystatcore.

All exceptions inherit from PyStatCoreError to allow catching any
library-specific error. Validation failures (bad inputs) and numerical
failures (a computation that cannot proceed) are kept in separate
branches so callers can tell "fix your data" from "this problem is
numerically degenerate".

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class PyStatCoreError(Exception):
    """Base exception for all pystatcore errors."""
    pass


class ValidationError(PyStatCoreError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class EmptyInputError(ValidationError):
    """A sample or collection has zero elements where at least one is required."""

    def __init__(self, message: str = "Cannot perform operation on empty input"):
        super().__init__(message)


class InsufficientDataError(ValidationError):
    """
    Sample size is below the statistical minimum for the procedure.

    Attributes:
        required: Minimum number of observations needed
        actual: Number of observations supplied
    """

    def __init__(
        self,
        message: str | None = None,
        *,
        required: int,
        actual: int,
    ):
        if message is None:
            message = (
                f"Insufficient data: requires {required} elements, got {actual}"
            )
        super().__init__(message)
        self.required = required
        self.actual = actual


class InvalidParametersError(ValidationError):
    """
    Structurally invalid input.

    Raised for out-of-range parameters (non-positive rates, percentiles
    outside [0, 100], bad alternative strings) and malformed collections.
    """
    pass


class DimensionError(InvalidParametersError):
    """
    Array dimensions are incorrect or inconsistent.

    Raised when array shapes don't match expected dimensions, when
    multiple arrays have inconsistent lengths, or when a table is ragged.
    """
    pass


class NumericalError(PyStatCoreError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation.
    """
    pass


class InvalidCalculationError(NumericalError):
    """A derived quantity is undefined (e.g. a zero-variance denominator)."""
    pass


class SingularMatrixError(NumericalError):
    """
    Matrix is singular or nearly singular.

    Raised by Gaussian elimination when the selected pivot is numerically
    zero and the elimination cannot safely divide.

    Attributes:
        matrix_name: Name/description of the problematic matrix
        pivot_index: Column at which elimination broke down, if known
        pivot_value: Magnitude of the rejected pivot, if known
    """

    def __init__(
        self,
        message: str,
        matrix_name: str | None = None,
        pivot_index: int | None = None,
        pivot_value: float | None = None,
    ):
        super().__init__(message)
        self.matrix_name = matrix_name
        self.pivot_index = pivot_index
        self.pivot_value = pivot_value


class ConvergenceError(PyStatCoreError):
    """
    Iterative algorithm failed to converge.

    Raised when a series or continued fraction exhausts its iteration cap
    without meeting the stopping tolerance, and the caller asked for
    strict behaviour.

    Attributes:
        iterations: Number of iterations completed
        final_change: Last relative change observed
        reason: Why convergence failed (e.g., 'max_iterations')
        threshold: The convergence threshold that was not met
    """

    def __init__(
        self,
        message: str,
        iterations: int,
        final_change: float | None = None,
        reason: str | None = None,
        threshold: float | None = None
    ):
        super().__init__(message)
        self.iterations = iterations
        self.final_change = final_change
        self.reason = reason
        self.threshold = threshold
