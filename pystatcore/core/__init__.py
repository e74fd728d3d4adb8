"""
Core infrastructure for pystatcore.

This module provides shared abstractions, utilities, and numeric kernels
used by all domain-specific submodules (hypothesis, regression,
descriptive, distributions).

Key components:
    protocols: Backend protocol
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Special functions, linear solver, tolerances, timing
"""

from pystatcore.core.protocols import Backend
from pystatcore.core.result import Result
from pystatcore.core.exceptions import (
    PyStatCoreError,
    ValidationError,
    EmptyInputError,
    InsufficientDataError,
    InvalidParametersError,
    DimensionError,
    NumericalError,
    InvalidCalculationError,
    SingularMatrixError,
    ConvergenceError,
)

__all__ = [
    # Protocols
    "Backend",
    # Result
    "Result",
    # Exceptions
    "PyStatCoreError",
    "ValidationError",
    "EmptyInputError",
    "InsufficientDataError",
    "InvalidParametersError",
    "DimensionError",
    "NumericalError",
    "InvalidCalculationError",
    "SingularMatrixError",
    "ConvergenceError",
]
