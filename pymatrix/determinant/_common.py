"""
Parameter payload for determinant results.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class DeterminantParams:
    """Determinant of an n x n matrix by cofactor expansion."""

    value: float                 # det(A)
    n: int                       # matrix dimension
    n_minors: int                # minors built during the expansion
