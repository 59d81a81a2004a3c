"""
Generic result container for recmatrix computations.

The Result class provides a standardized envelope that richer entry points
(such as matrix.invert) use to return a payload together with timing,
method metadata, and non-fatal warnings.

Design decisions:
    - Generic over parameter payload P for type safety
    - info dict for flexible metadata (method, order, expansion bound)
    - timing is optional (don't burden unit tests)
    - Immutable (frozen=True), matching the value semantics of matrices
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

P = TypeVar('P')  # Parameter payload type


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope for matrix computations.

    Type Parameters:
        P: The operation-specific payload type

    Attributes:
        params: Operation-specific payload (inverse, determinant, etc.)
        info: Structured metadata (method, order, max_order)
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the algorithm that produced this result
        warnings: Non-fatal issues encountered during computation

    Examples:
        >>> Result(
        ...     params=InverseParams(inverse=inv, determinant=-2, adjugate=adj),
        ...     info={'method': 'adjugate', 'order': 2},
        ...     timing={'total_seconds': 0.0001},
        ...     backend_name='cofactor_expansion'
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
