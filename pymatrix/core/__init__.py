"""
Core infrastructure for pymatrix.

This module provides shared abstractions and utilities used by all
algorithm submodules (ops, determinant, rref, cramer).

Key components:
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    formatting: Plain-text matrix rendering
    compute: Timing and numerical tolerances
"""

from pymatrix.core.result import Result
from pymatrix.core.exceptions import (
    PyMatrixError,
    ValidationError,
    DimensionError,
    ShapeMismatchError,
    NonSquareError,
    DegenerateDimensionError,
    DimensionLimitError,
    NumericalError,
    SingularMatrixError,
)
from pymatrix.core.formatting import format_matrix

__all__ = [
    # Result
    "Result",
    # Exceptions
    "PyMatrixError",
    "ValidationError",
    "DimensionError",
    "ShapeMismatchError",
    "NonSquareError",
    "DegenerateDimensionError",
    "DimensionLimitError",
    "NumericalError",
    "SingularMatrixError",
    # Presentation
    "format_matrix",
]
