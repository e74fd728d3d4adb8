"""
Dense linear-system solver: Gaussian elimination with partial pivoting.

Provides transpose, multiply and solve: exactly what forming and solving
the polynomial normal equations X'X β = X'y needs. Systems are small
(degree + 1 unknowns), so clarity of the elimination beats calling into
LAPACK here, and the pivot threshold is ours to control.

Numeric semantics:
    No regularization or damping is applied. A near-singular system whose
    pivots stay above PIVOT_TOLERANCE silently yields a poorly conditioned
    answer; that is a precision boundary, not a correctness bug.
"""

from __future__ import annotations

from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pystatcore.core.compute.tolerances import PIVOT_TOLERANCE
from pystatcore.core.exceptions import DimensionError, SingularMatrixError
from pystatcore.core.validation import (
    check_1d,
    check_2d,
    check_array,
    check_finite,
    check_non_empty,
)


def transpose(matrix: ArrayLike) -> NDArray[np.floating[Any]]:
    """
    Transpose a 2D matrix.

    Args:
        matrix: Rectangular row-major matrix (rows x cols)

    Returns:
        New (cols x rows) array. Empty input yields an empty (0, 0) array.

    Raises:
        DimensionError: If matrix is ragged or not 2D
    """
    arr = check_array(matrix, 'matrix')
    if arr.size == 0:
        return np.zeros((0, 0), dtype=np.float64)
    check_2d(arr, 'matrix')
    return arr.T.copy()


def multiply(a: ArrayLike, b: ArrayLike) -> NDArray[np.floating[Any]]:
    """
    Matrix product A @ B.

    A 1D b is treated as a column vector and the result is returned as a
    1D vector (matrix-vector product).

    Raises:
        DimensionError: If either operand is empty, not 2D (a) / 1D-or-2D (b),
            or the inner dimensions disagree
    """
    A = check_array(a, 'a')
    B = check_array(b, 'b')

    if A.size == 0 or B.size == 0:
        raise DimensionError(
            f"Cannot multiply empty matrices: a has shape {A.shape}, b has shape {B.shape}"
        )
    check_2d(A, 'a')
    if B.ndim not in (1, 2):
        raise DimensionError(f"b: expected 1D or 2D array, got {B.ndim}D")

    if A.shape[1] != B.shape[0]:
        raise DimensionError(
            f"Inner dimensions disagree: a is {A.shape[0]}x{A.shape[1]}, "
            f"b has {B.shape[0]} rows"
        )

    return A @ B


def solve(a: ArrayLike, b: ArrayLike) -> NDArray[np.floating[Any]]:
    """
    Solve Ax = b by Gaussian elimination with partial pivoting.

    Algorithm:
        1. Build the augmented matrix [A | b] (a private copy)
        2. For each pivot column, swap in the remaining row with the
           largest |value| in that column
        3. Reject the pivot if |pivot| <= PIVOT_TOLERANCE
        4. Eliminate below the pivot
        5. Back-substitute from the last row to the first

    Partial pivoting matters here: Vandermonde-derived normal equations
    are badly conditioned and small pivots amplify rounding error.

    Args:
        a: Square coefficient matrix (n x n)
        b: Right-hand side (n,)

    Returns:
        Solution vector x of length n

    Raises:
        EmptyInputError: If the system is empty
        DimensionError: If a is not square or b has the wrong length
        SingularMatrixError: If a pivot is numerically zero
    """
    A = check_array(a, 'a')
    rhs = check_array(b, 'b')
    check_non_empty(A, 'a')
    check_2d(A, 'a')
    check_1d(rhs, 'b')
    check_finite(A, 'a')
    check_finite(rhs, 'b')

    n = A.shape[0]
    if A.shape[1] != n:
        raise DimensionError(f"a: expected a square matrix, got shape {A.shape}")
    if rhs.shape[0] != n:
        raise DimensionError(
            f"b: expected length {n} to match a, got {rhs.shape[0]}"
        )

    augmented = np.column_stack([A, rhs]).astype(np.float64, copy=True)

    # Forward elimination
    for col in range(n):
        pivot_row = col + int(np.argmax(np.abs(augmented[col:, col])))
        if pivot_row != col:
            augmented[[col, pivot_row]] = augmented[[pivot_row, col]]

        pivot = augmented[col, col]
        if abs(pivot) <= PIVOT_TOLERANCE:
            raise SingularMatrixError(
                f"Matrix is singular: pivot {abs(pivot):.3e} in column {col} "
                f"is below tolerance {PIVOT_TOLERANCE:.0e}",
                matrix_name='a',
                pivot_index=col,
                pivot_value=float(abs(pivot)),
            )

        factors = augmented[col + 1:, col] / pivot
        augmented[col + 1:, col:] -= np.outer(factors, augmented[col, col:])

    # Back substitution
    solution = np.zeros(n, dtype=np.float64)
    for i in range(n - 1, -1, -1):
        acc = augmented[i, n] - augmented[i, i + 1:n] @ solution[i + 1:]
        solution[i] = acc / augmented[i, i]

    return solution
