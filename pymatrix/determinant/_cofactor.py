"""
Recursive cofactor (Laplace) expansion along the first column.

    det(A) = sum_r (-1)^r * A[r, 0] * det(minor(A, r, 0))

Base cases are n == 1 (the single entry) and n == 2 (ad - bc). The
recursion has branching factor n and depth n, so the work is O(n!).
Each call builds its own minors; nothing is cached.

Callers validate: the input here is a finite, square float64 array with
n >= 1.
"""

from __future__ import annotations

from typing import Any

import numpy as np
from numpy.typing import NDArray

from pymatrix.ops.structure import _minor


def cofactor_determinant(A: NDArray[np.floating[Any]]) -> float:
    """Determinant of a validated square matrix."""
    n = A.shape[0]
    if n == 1:
        return float(A[0, 0])
    if n == 2:
        return float(A[0, 0] * A[1, 1] - A[0, 1] * A[1, 0])

    total = 0.0
    for r in range(n):
        sign = -1.0 if r % 2 else 1.0
        total += sign * A[r, 0] * cofactor_determinant(_minor(A, r, 0))
    return float(total)


def count_minors(n: int) -> int:
    """
    Number of minors cofactor_determinant() builds for an n x n matrix.

    m(n) = n * (1 + m(n-1)) for n >= 3, and 0 for n <= 2.
    """
    count = 0
    for k in range(3, n + 1):
        count = k * (1 + count)
    return count
