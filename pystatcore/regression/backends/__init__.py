"""
Regression backends.

Available backends:
    CPULinearBackend: closed-form simple linear regression
    CPUNormalEquationsBackend: polynomial fit via the normal equations
"""

from pystatcore.regression.backends.cpu import (
    CPULinearBackend,
    CPUNormalEquationsBackend,
)

__all__ = [
    "CPULinearBackend",
    "CPUNormalEquationsBackend",
]
