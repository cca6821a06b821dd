"""
Parameter payload for row reduction results.
"""

from __future__ import annotations

from dataclasses import dataclass

from numpy.typing import NDArray


@dataclass(frozen=True)
class RREFParams:
    """Reduced row echelon form produced by Gauss-Jordan elimination."""

    matrix: NDArray                   # (m, n) — RREF of the input
    pivot_columns: tuple[int, ...]    # pivot column of row 0, 1, ... in order
    row_swaps: int                    # row interchanges performed
    tolerance: float                  # |entry| <= tolerance is treated as zero

    @property
    def rank(self) -> int:
        return len(self.pivot_columns)
