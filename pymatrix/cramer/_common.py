"""
Parameter payload for Cramer's rule results.
"""

from __future__ import annotations

from dataclasses import dataclass

from numpy.typing import NDArray


@dataclass(frozen=True)
class CramerParams:
    """Solution of A x = b by Cramer's rule."""

    x: NDArray                    # (n,) — x_c = det(A_c) / det(A)
    determinant: float            # det(A)
    column_determinants: NDArray  # (n,) — det(A_c), column c replaced by b
    condition_number: float       # 2-norm condition number of A
