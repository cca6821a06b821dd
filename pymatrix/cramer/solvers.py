"""
Public API for solving square linear systems.

    solve(A, b) -> CramerSolution

Validation order: A square, A non-empty, b an n x 1 column, dimension
ceiling, then the singularity check inside the algorithm.
"""

from __future__ import annotations

import warnings

from numpy.typing import ArrayLike

from pymatrix.core.result import Result
from pymatrix.core.compute.timing import Timer
from pymatrix.core.compute.tolerances import (
    ILL_CONDITIONED_THRESHOLD,
    MAX_COFACTOR_DIMENSION,
    SINGULAR_TOLERANCE,
    check_tolerance,
)
from pymatrix.core.exceptions import ShapeMismatchError
from pymatrix.core.validation import (
    check_dimension_limit,
    check_matrix,
    check_nonempty,
    check_square,
)
from pymatrix.cramer._cramer import cramer_solve
from pymatrix.cramer.solution import CramerSolution
from pymatrix.ops.structure import as_column


def solve(
    A: ArrayLike,
    b: ArrayLike,
    *,
    tol: float = SINGULAR_TOLERANCE,
    max_dimension: int | None = MAX_COFACTOR_DIMENSION,
) -> CramerSolution:
    """Solve A x = b by Cramer's rule.

    Parameters
    ----------
    A : array-like
        (n, n) coefficient matrix.
    b : array-like
        Right-hand side, (n, 1) column or length-n vector.
    tol : float
        |det(A)| at or below tol is treated as singular
        (default SINGULAR_TOLERANCE = 1e-10).
    max_dimension : int or None
        Largest n accepted (default MAX_COFACTOR_DIMENSION); None disables
        the check.

    Returns
    -------
    CramerSolution

    Raises
    ------
    NonSquareError
        If A is not square.
    DegenerateDimensionError
        If A is 0x0.
    ShapeMismatchError
        If b is not a column with n rows.
    DimensionLimitError
        If n exceeds max_dimension.
    SingularMatrixError
        If det(A) is within tol of zero.
    """
    A = check_matrix(A, 'A')
    n = check_square(A, 'A')
    check_nonempty(A, 'A', 'solve')

    b = as_column(b, 'b')
    if b.shape[0] != n:
        raise ShapeMismatchError(
            f"solve: b has {b.shape[0]} rows but A is {n}x{n}",
            operation='solve',
            left_shape=A.shape,
            right_shape=b.shape,
        )

    tol = check_tolerance(tol, 'tol')
    check_dimension_limit(n, max_dimension, 'A')

    timer = Timer()
    timer.start()

    params = cramer_solve(A, b, tol, timer)

    timer.stop()

    warns: list[str] = []
    if params.condition_number > ILL_CONDITIONED_THRESHOLD:
        msg = (
            f"Coefficient matrix is ill-conditioned "
            f"(cond = {params.condition_number:.3g}); "
            f"the solution may be inaccurate"
        )
        warnings.warn(msg, RuntimeWarning, stacklevel=2)
        warns.append(msg)

    result = Result(
        params=params,
        info={
            "method": "cramer",
            "determinant_method": "cofactor",
            "tol": tol,
            "max_dimension": max_dimension,
        },
        timing=timer.result(),
        backend_name="cpu_cramer",
        warnings=tuple(warns),
    )

    return CramerSolution(_result=result)
