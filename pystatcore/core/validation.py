"""
Input validation utilities for pystatcore.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - No default handling of edge cases
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import numpy as np
from numpy.typing import ArrayLike, NDArray
from typing import Any

from pystatcore.core.exceptions import (
    ValidationError,
    DimensionError,
    EmptyInputError,
    InsufficientDataError,
    InvalidParametersError,
)


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.floating[Any]]:
    """
    Validate and convert input to numpy array.

    Accepts any array-like and converts to a float64 numpy array. Rejects
    ragged nested sequences and inputs that result in object or other
    non-numeric dtypes.

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray with floating dtype

    Raises:
        DimensionError: If input is a ragged (non-rectangular) sequence
        ValidationError: If input cannot be converted to numeric array
    """
    try:
        result = np.asarray(array)
    except ValueError as e:
        # numpy refuses inhomogeneous nested sequences
        raise DimensionError(f"{name}: rows must all have the same length ({e})") from e
    except TypeError as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise DimensionError(
            f"{name}: converted to object dtype, indicating ragged rows or non-numeric data"
        )

    # An empty list comes back as float64 already; bool/int are promoted below
    if result.size > 0 and not (
        np.issubdtype(result.dtype, np.number) or result.dtype == np.bool_
    ):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    if not np.issubdtype(result.dtype, np.floating):
        result = result.astype(np.float64)

    return result


def check_finite(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array contains no NaN or Inf values.

    Raises:
        ValidationError: If array contains non-finite values
    """
    if not np.all(np.isfinite(array)):
        n_nan = int(np.sum(np.isnan(array)))
        n_inf = int(np.sum(np.isinf(array)))
        raise ValidationError(
            f"{name}: contains non-finite values ({n_nan} NaN, {n_inf} Inf)"
        )


def check_ndim(array: NDArray[np.floating[Any]], ndim: int, name: str) -> None:
    """
    Verify array has exactly the specified number of dimensions.

    Raises:
        DimensionError: If array has wrong number of dimensions
    """
    if array.ndim != ndim:
        raise DimensionError(
            f"{name}: expected {ndim}D array, got {array.ndim}D with shape {array.shape}"
        )


def check_1d(array: NDArray[np.floating[Any]], name: str) -> None:
    """Verify array is 1-dimensional."""
    check_ndim(array, 1, name)


def check_2d(array: NDArray[np.floating[Any]], name: str) -> None:
    """Verify array is 2-dimensional."""
    check_ndim(array, 2, name)


def check_non_empty(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array has at least one element.

    Raises:
        EmptyInputError: If array is empty
    """
    if array.size == 0:
        raise EmptyInputError(f"{name}: cannot perform operation on empty input")


def check_consistent_length(
    *arrays: NDArray[np.floating[Any]],
    names: tuple[str, ...]
) -> None:
    """
    Verify all arrays have the same length (first dimension).

    Raises:
        ValueError: If number of names doesn't match number of arrays
        DimensionError: If arrays have inconsistent lengths
    """
    if len(arrays) != len(names):
        raise ValueError(
            f"Number of arrays ({len(arrays)}) must match number of names ({len(names)})"
        )

    if len(arrays) < 2:
        return

    lengths = [arr.shape[0] for arr in arrays]
    if len(set(lengths)) > 1:
        details = ", ".join(f"{name}={length}" for name, length in zip(names, lengths))
        raise DimensionError(f"Inconsistent lengths: {details}")


def check_min_samples(array: NDArray[np.floating[Any]], min_samples: int, name: str) -> None:
    """
    Verify array has at least the minimum number of samples.

    Raises:
        InsufficientDataError: If array has fewer than min_samples
    """
    n = array.shape[0]
    if n < min_samples:
        raise InsufficientDataError(
            f"{name}: requires at least {min_samples} samples, got {n}",
            required=min_samples,
            actual=n,
        )


def check_positive(value: float, name: str) -> None:
    """
    Verify a scalar parameter is strictly positive.

    Raises:
        InvalidParametersError: If value <= 0 or not finite
    """
    if not np.isfinite(value) or value <= 0:
        raise InvalidParametersError(f"{name} must be positive, got {value}")


def check_open_unit_interval(value: float, name: str) -> None:
    """
    Verify a probability-like parameter lies in (0, 1).

    Raises:
        InvalidParametersError: If value is outside (0, 1)
    """
    if not (0.0 < value < 1.0):
        raise InvalidParametersError(f"{name} must be in (0, 1), got {value}")


def as_sample(x: ArrayLike, name: str) -> NDArray[np.floating[Any]]:
    """
    Convert an array-like to a validated 1D float64 sample.

    Runs check_array, check_1d, check_non_empty and check_finite in that
    order, so an empty input reports EmptyInputError before anything else.
    """
    arr = check_array(x, name)
    if arr.ndim == 0:
        arr = arr.reshape(1)
    check_1d(arr, name)
    check_non_empty(arr, name)
    check_finite(arr, name)
    return arr
