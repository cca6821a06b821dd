"""
Row reduction to reduced row echelon form.

Public API:
    rref(A) -> RREFSolution
"""

from pymatrix.rref.solution import RREFSolution
from pymatrix.rref.solvers import rref

__all__ = ["rref", "RREFSolution"]
