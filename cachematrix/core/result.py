"""
Generic result container for cachematrix computations.

Every inversion backend returns its payload inside a Result so that timing,
backend identity and non-fatal warnings travel with the numbers.

Design decisions:
    - Generic over parameter payload P for type safety
    - info dict for flexible metadata (method, factorization details)
    - timing is optional (don't burden unit tests)
    - Immutable (frozen=True) so a cached result cannot drift
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

P = TypeVar('P')  # Parameter payload type


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope for linear algebra computations.

    Type Parameters:
        P: The domain-specific parameter payload type

    Attributes:
        params: Domain-specific payload (solution matrix, condition estimate)
        info: Structured metadata (method, dimensions)
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the backend that produced this result
        warnings: Non-fatal issues encountered during computation

    Examples:
        >>> Result(
        ...     params=InverseParams(x=inv, rcond=0.25, n=2, is_inverse=True),
        ...     info={'method': 'lu', 'n': 2},
        ...     timing={'total_seconds': 0.0001},
        ...     backend_name='cpu_lu'
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
