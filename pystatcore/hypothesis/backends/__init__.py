"""
Hypothesis test backends.

Available backends:
    CPUHypothesisBackend: CPU reference implementation
"""

from pystatcore.hypothesis.backends.cpu import CPUHypothesisBackend

__all__ = [
    "CPUHypothesisBackend",
]
