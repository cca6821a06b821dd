"""
Square linear systems by Cramer's rule.

Public API:
    solve(A, b) -> CramerSolution
"""

from pymatrix.cramer.solution import CramerSolution
from pymatrix.cramer.solvers import solve

__all__ = ["solve", "CramerSolution"]
