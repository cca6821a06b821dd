"""
Public API for row reduction.

    rref(A) -> RREFSolution
"""

from __future__ import annotations

from numpy.typing import ArrayLike

from pymatrix.core.result import Result
from pymatrix.core.compute.timing import Timer
from pymatrix.core.compute.tolerances import PIVOT_TOLERANCE, check_tolerance
from pymatrix.core.validation import check_matrix
from pymatrix.rref._gauss_jordan import gauss_jordan
from pymatrix.rref.solution import RREFSolution


def rref(A: ArrayLike, *, tol: float = PIVOT_TOLERANCE) -> RREFSolution:
    """Reduced row echelon form by Gauss-Jordan elimination.

    The caller's matrix is never modified; elimination runs on a copy.

    Parameters
    ----------
    A : array-like
        Matrix of any shape, including empty.
    tol : float
        Entries with magnitude at or below tol are treated as zero when
        searching for pivots (default PIVOT_TOLERANCE = 1e-10).

    Returns
    -------
    RREFSolution
    """
    A = check_matrix(A, 'A')
    tol = check_tolerance(tol, 'tol')

    timer = Timer()
    timer.start()

    with timer.section('elimination'):
        params = gauss_jordan(A, tol)

    timer.stop()

    result = Result(
        params=params,
        info={"method": "gauss-jordan", "tol": tol},
        timing=timer.result(),
        backend_name="cpu_gauss_jordan",
        warnings=(),
    )

    return RREFSolution(_result=result)
