"""
Generic result container for all pystatcore computations.

The Result class provides a standardized envelope that the hypothesis,
regression and descriptive backends use. Domains define their own
parameter payloads; the envelope carries what is shared: method metadata,
timing and non-fatal warnings.

Design decisions:
    - Generic over parameter payload P for type safety
    - info dict for flexible metadata (test type, method, rank)
    - timing is optional (don't burden unit tests)
    - Immutable (frozen=True) so a result can never be edited after the fact
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

P = TypeVar('P')  # Parameter payload type


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope for statistical computations.

    Type Parameters:
        P: The domain-specific parameter payload type

    Attributes:
        params: Domain-specific parameters (coefficients, statistics, etc.)
        info: Structured metadata (method, test type, diagnostics)
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the backend that produced this result
        warnings: Non-fatal issues encountered during computation

    Examples:
        >>> Result(
        ...     params=PolynomialParams(coefficients=beta, ...),
        ...     info={'method': 'normal_equations', 'degree': 2},
        ...     timing={'total_seconds': 0.001},
        ...     backend_name='cpu_normal_equations'
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)
