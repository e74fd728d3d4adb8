"""
Linear algebra kernels for pystatcore.

Only what regression needs: transpose, multiply, and a dense solver
(Gaussian elimination with partial pivoting). This is not a matrix
library.

All functions follow these conventions:
    - Inputs are any array-like; ragged rows raise DimensionError
    - Outputs are new float64 numpy arrays; inputs are never mutated
    - Errors are raised immediately with clear messages
"""

from pystatcore.core.compute.linalg.gauss import (
    multiply,
    solve,
    transpose,
)

__all__ = [
    "transpose",
    "multiply",
    "solve",
]
