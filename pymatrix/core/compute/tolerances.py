"""
Numerical thresholds for pymatrix.

Every magic number the algorithms depend on lives here so it can be
documented, imported by tests, and overridden per call:

- PIVOT_TOLERANCE: Gauss-Jordan treats |entry| <= tol as exact zero
- SINGULAR_TOLERANCE: Cramer's rule treats |det(A)| <= tol as singular
- MAX_COFACTOR_DIMENSION: ceiling on n for O(n!) cofactor expansion
- ILL_CONDITIONED_THRESHOLD: condition number that triggers a warning

Tolerance tiers are used by the test suite for numerical comparison.
"""

from dataclasses import dataclass

from pymatrix.core.exceptions import ValidationError


# Entries with magnitude at or below this are not eligible as pivots.
PIVOT_TOLERANCE = 1e-10

# |det(A)| at or below this means the system has no unique solution.
SINGULAR_TOLERANCE = 1e-10

# 10! = 3,628,800 terms; anything larger does not finish in useful time.
MAX_COFACTOR_DIMENSION = 10

# At cond(A) = 1e12 only ~4 significant digits of the solution survive
# in float64.
ILL_CONDITIONED_THRESHOLD = 1e12


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


# Exact arithmetic results (integer inputs, small dimensions)
EXACT_FP64 = ToleranceTier(
    rtol=1e-10,
    atol=1e-12,
    name='exact_fp64',
    description='Double precision, results that are exact up to round-off',
)

# Algebraic identities checked elementwise (A + B - B == A, Ax == b, ...)
PROPERTY_FP64 = ToleranceTier(
    rtol=0.0,
    atol=1e-9,
    name='property_fp64',
    description='Double precision, algebraic identities after several operations',
)


def check_tolerance(tol: float, name: str) -> float:
    """
    Validate a user-supplied tolerance.
    
    Args:
        tol: Tolerance value
        name: Parameter name for error messages
        
    Returns:
        The tolerance as a float
        
    Raises:
        ValidationError: If tol is negative or not a finite number
    """
    try:
        value = float(tol)
    except (TypeError, ValueError) as e:
        raise ValidationError(f"{name}: expected a number, got {tol!r}") from e
    
    if not value >= 0.0 or value == float('inf'):
        raise ValidationError(f"{name}: must be finite and >= 0, got {value}")
    
    return value
