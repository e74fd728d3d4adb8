"""
Descriptive statistics backends.

Available backends:
    CPUDescriptiveBackend: CPU reference implementation
"""

from pystatcore.descriptive.backends.cpu import CPUDescriptiveBackend

__all__ = [
    "CPUDescriptiveBackend",
]
