"""
pymatrix: a small dense-matrix algebra engine.

Operates on rectangular float64 matrices given as any array-like.
Inputs are never modified; every returned matrix is a new read-only
array.

Submodules:
    ops: add, subtract, multiply, transpose, minor
    determinant: cofactor-expansion determinant
    cramer: square systems by Cramer's rule
    rref: Gauss-Jordan reduction to reduced row echelon form
"""

__version__ = "0.1.0"

from pymatrix.ops import add, subtract, multiply, transpose, minor
from pymatrix.determinant import determinant, DeterminantSolution
from pymatrix.cramer import solve, CramerSolution
from pymatrix.rref import rref, RREFSolution
from pymatrix.core.formatting import format_matrix
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

__all__ = [
    "__version__",
    # Operations
    "add",
    "subtract",
    "multiply",
    "transpose",
    "minor",
    "determinant",
    "solve",
    "rref",
    # Solutions
    "DeterminantSolution",
    "CramerSolution",
    "RREFSolution",
    # Presentation
    "format_matrix",
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
]
