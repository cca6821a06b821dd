"""
Shared compute infrastructure for pymatrix.

Submodules:
    timing: Execution timing utilities
    tolerances: Numerical thresholds and comparison tiers
"""

from pymatrix.core.compute.timing import Timer, timed
from pymatrix.core.compute.tolerances import (
    PIVOT_TOLERANCE,
    SINGULAR_TOLERANCE,
    MAX_COFACTOR_DIMENSION,
    ILL_CONDITIONED_THRESHOLD,
    ToleranceTier,
    EXACT_FP64,
    PROPERTY_FP64,
)

__all__ = [
    # Timing
    "Timer",
    "timed",
    # Tolerances
    "PIVOT_TOLERANCE",
    "SINGULAR_TOLERANCE",
    "MAX_COFACTOR_DIMENSION",
    "ILL_CONDITIONED_THRESHOLD",
    "ToleranceTier",
    "EXACT_FP64",
    "PROPERTY_FP64",
]
