"""
Cramer's rule.

For a square system A x = b with det(A) != 0:

    x_c = det(A_c) / det(A)

where A_c is A with column c replaced by b. Every determinant comes from
the cofactor expansion, so the total cost is (n + 1) expansions of
O(n!) each.

References:
    Cramer, G. (1750). Introduction a l'analyse des lignes courbes
        algebriques.
"""

from __future__ import annotations

from typing import Any

import numpy as np
from numpy.typing import NDArray

from pymatrix.core.compute.timing import Timer
from pymatrix.core.exceptions import SingularMatrixError
from pymatrix.cramer._common import CramerParams
from pymatrix.determinant._cofactor import cofactor_determinant
from pymatrix.ops.structure import _replace_column


def cramer_solve(
    A: NDArray[np.floating[Any]],
    b: NDArray[np.floating[Any]],
    tol: float,
    timer: Timer,
) -> CramerParams:
    """Solve a validated square system.

    Parameters
    ----------
    A : NDArray
        (n, n) coefficient matrix, n >= 1.
    b : NDArray
        (n, 1) right-hand side.
    tol : float
        |det(A)| <= tol is reported as singular.
    timer : Timer
        Receives 'determinant' and 'substitution' sections.

    Returns
    -------
    CramerParams

    Raises
    ------
    SingularMatrixError
        If det(A) is within tol of zero.
    """
    n = A.shape[0]

    with timer.section('determinant'):
        d = cofactor_determinant(A)

    if abs(d) <= tol:
        raise SingularMatrixError(
            f"Coefficient matrix is singular: |det(A)| = {abs(d):.3g} <= "
            f"tol = {tol:.3g}. The system has no unique solution.",
            matrix_name='A',
            determinant=d,
            tolerance=tol,
        )

    with timer.section('substitution'):
        column_dets = np.array(
            [cofactor_determinant(_replace_column(A, b, c)) for c in range(n)],
            dtype=np.float64,
        )

    x = column_dets / d
    x.flags.writeable = False
    column_dets.flags.writeable = False

    return CramerParams(
        x=x,
        determinant=d,
        column_determinants=column_dets,
        condition_number=float(np.linalg.cond(A)),
    )
