"""
Determinants by cofactor expansion.

Public API:
    determinant(A) -> DeterminantSolution
"""

from pymatrix.determinant.solution import DeterminantSolution
from pymatrix.determinant.solvers import determinant

__all__ = ["determinant", "DeterminantSolution"]
