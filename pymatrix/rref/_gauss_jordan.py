"""
Gauss-Jordan elimination to reduced row echelon form.

Two cursors drive the reduction: ``row`` (the next row to receive a
pivot) and ``lead`` (the column being reduced). For each lead column the
remaining rows are scanned top-down for the first entry with magnitude
above the tolerance:

- found: swap it into ``row``, scale that row so the pivot is exactly 1,
  eliminate the column from every other row, then advance both cursors
- not found: the column has no pivot; advance ``lead`` only

Reduction stops when either cursor runs off the matrix.
"""

from __future__ import annotations

from typing import Any

import numpy as np
from numpy.typing import NDArray

from pymatrix.rref._common import RREFParams


def _find_pivot(
    work: NDArray[np.floating[Any]],
    start_row: int,
    lead: int,
    tol: float,
) -> int | None:
    """First row at or below ``start_row`` usable as a pivot in ``lead``."""
    for i in range(start_row, work.shape[0]):
        if abs(work[i, lead]) > tol:
            return i
    return None


def gauss_jordan(A: NDArray[np.floating[Any]], tol: float) -> RREFParams:
    """Reduce a validated matrix to RREF.

    Parameters
    ----------
    A : NDArray
        (m, n) finite float64 matrix. Not modified.
    tol : float
        Pivot threshold; entries with |value| <= tol are never pivots.

    Returns
    -------
    RREFParams
    """
    work = A.copy()
    n_rows, n_cols = work.shape

    pivot_columns: list[int] = []
    row_swaps = 0
    row = 0
    lead = 0

    while row < n_rows and lead < n_cols:
        pivot_row = _find_pivot(work, row, lead, tol)
        if pivot_row is None:
            lead += 1
            continue

        if pivot_row != row:
            work[[row, pivot_row]] = work[[pivot_row, row]]
            row_swaps += 1

        work[row] /= work[row, lead]
        work[row, lead] = 1.0

        for k in range(n_rows):
            if k != row:
                factor = work[k, lead]
                if factor != 0.0:
                    work[k] -= factor * work[row]
                    work[k, lead] = 0.0

        pivot_columns.append(lead)
        row += 1
        lead += 1

    work.flags.writeable = False
    return RREFParams(
        matrix=work,
        pivot_columns=tuple(pivot_columns),
        row_swaps=row_swaps,
        tolerance=tol,
    )
