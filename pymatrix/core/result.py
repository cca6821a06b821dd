"""
Generic result container for pymatrix computations.

The Result class is the envelope every algorithm (determinant, Cramer's
rule, row reduction) returns its payload in. Shared tooling for timing
and warnings works on the envelope while each algorithm defines its own
parameter structure.

Design decisions:
    - Generic over parameter payload P for type safety
    - info dict for flexible metadata (method, tolerance, expansion axis)
    - timing is optional (don't burden unit tests)
    - Immutable (frozen=True)
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

P = TypeVar('P')  # Parameter payload type


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope for matrix computations.
    
    Type Parameters:
        P: The algorithm-specific parameter payload type
        
    Attributes:
        params: Algorithm-specific payload (determinant, solution, RREF)
        info: Structured metadata (method, tolerance, dimensions)
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the implementation that produced this result
        warnings: Non-fatal issues encountered during computation
        
    Examples:
        >>> Result(
        ...     params=DeterminantParams(value=-2.0, n=2),
        ...     info={'method': 'cofactor', 'axis': 'column', 'index': 0},
        ...     timing={'total_seconds': 0.0001},
        ...     backend_name='cpu_cofactor'
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
