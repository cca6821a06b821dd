"""
Public API for determinants.

    determinant(A) -> DeterminantSolution

Validates the input, applies the dimension ceiling, runs the cofactor
expansion and wraps the Result in a Solution.
"""

from __future__ import annotations

from numpy.typing import ArrayLike

from pymatrix.core.result import Result
from pymatrix.core.compute.timing import Timer
from pymatrix.core.compute.tolerances import MAX_COFACTOR_DIMENSION
from pymatrix.core.exceptions import DegenerateDimensionError
from pymatrix.core.validation import check_dimension_limit, check_matrix, check_square
from pymatrix.determinant._common import DeterminantParams
from pymatrix.determinant._cofactor import cofactor_determinant, count_minors
from pymatrix.determinant.solution import DeterminantSolution


def determinant(
    A: ArrayLike,
    *,
    max_dimension: int | None = MAX_COFACTOR_DIMENSION,
) -> DeterminantSolution:
    """Determinant by recursive cofactor expansion along the first column.

    Parameters
    ----------
    A : array-like
        Square matrix.
    max_dimension : int or None
        Largest n accepted (default MAX_COFACTOR_DIMENSION). The expansion
        costs O(n!); None disables the check.

    Returns
    -------
    DeterminantSolution

    Raises
    ------
    NonSquareError
        If A is not square.
    DegenerateDimensionError
        If A is 0x0.
    DimensionLimitError
        If n exceeds max_dimension.
    """
    A = check_matrix(A, 'A')
    n = check_square(A, 'A')

    if n == 0:
        raise DegenerateDimensionError(
            "determinant: A is 0x0; the determinant is undefined",
            operation='determinant',
            shape=A.shape,
        )

    check_dimension_limit(n, max_dimension, 'A')

    timer = Timer()
    timer.start()

    with timer.section('expansion'):
        value = cofactor_determinant(A)

    timer.stop()

    params = DeterminantParams(value=value, n=n, n_minors=count_minors(n))

    result = Result(
        params=params,
        info={
            "method": "cofactor",
            "axis": "column",
            "index": 0,
            "max_dimension": max_dimension,
        },
        timing=timer.result(),
        backend_name="cpu_cofactor",
        warnings=(),
    )

    return DeterminantSolution(_result=result)
