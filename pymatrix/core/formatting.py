"""
Plain-text rendering of matrices.

Used by the summary() methods of every Solution. Each row becomes one
bracketed line; the first entry is left unpadded and every following
entry is right-aligned to a fixed width:

    [ 1       2       3]
    [ 3       5       6]
"""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike

from pymatrix.core.exceptions import ValidationError
from pymatrix.core.validation import check_matrix


def format_scalar(value: float, precision: int = 4) -> str:
    """Format one entry to ``precision`` significant digits."""
    # +0.0 folds negative zero, which elimination produces routinely
    return f"{float(value) + 0.0:.{precision}g}"


def format_matrix(matrix: ArrayLike, *, precision: int = 4, width: int = 8) -> str:
    """
    Render a matrix as aligned text.

    Parameters
    ----------
    matrix : array-like
        2D matrix to render.
    precision : int
        Significant digits per entry (default 4).
    width : int
        Field width for every entry after the first in a row (default 8).

    Returns
    -------
    str
        One line per row, joined by newlines. Empty string for an empty
        matrix.
    """
    if precision < 1:
        raise ValidationError(f"precision: must be >= 1, got {precision}")
    if width < 0:
        raise ValidationError(f"width: must be >= 0, got {width}")

    A = check_matrix(matrix, 'matrix')
    if A.size == 0:
        return ""

    lines = []
    for row in A:
        cells = [format_scalar(v, precision) for v in row]
        body = cells[0] + "".join(f"{c:>{width}}" for c in cells[1:])
        lines.append(f"[ {body}]")
    return "\n".join(lines)


def format_vector(values, *, name: str = 'x', precision: int = 4) -> str:
    """Render a solution vector as ``x1 = ...`` lines, 1-based."""
    return "\n".join(
        f"{name}{i} = {format_scalar(v, precision)}"
        for i, v in enumerate(np.asarray(values, dtype=np.float64).ravel(), start=1)
    )
