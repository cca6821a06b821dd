"""
Structural matrix operations: transpose, minor extraction, column
substitution.

minor() and replace_column() are the building blocks of cofactor
expansion and Cramer's rule. Their underscore-prefixed counterparts skip
validation and are called from the inner loops of those algorithms,
which have already validated their input.
"""

from __future__ import annotations

from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymatrix.core.exceptions import DegenerateDimensionError, ShapeMismatchError
from pymatrix.core.validation import (
    check_array,
    check_finite,
    check_index,
    check_matrix,
    check_square,
    freeze,
)


def transpose(A: ArrayLike) -> NDArray[np.floating[Any]]:
    """
    Transpose R[j, i] = A[i, j].

    An empty matrix transposes to an empty matrix.
    """
    A = check_matrix(A, 'A')
    return freeze(A.T.copy())


def _minor(
    A: NDArray[np.floating[Any]],
    row: int,
    col: int,
) -> NDArray[np.floating[Any]]:
    """Delete one row and one column, keeping the order of the rest."""
    return np.delete(np.delete(A, row, axis=0), col, axis=1)


def minor(A: ArrayLike, row: int, col: int) -> NDArray[np.floating[Any]]:
    """
    Submatrix of a square matrix with one row and one column removed.

    Parameters
    ----------
    A : array-like
        Square matrix of size n >= 2.
    row : int
        Row to delete, 0 <= row < n.
    col : int
        Column to delete, 0 <= col < n.

    Returns
    -------
    NDArray
        (n-1) x (n-1) matrix; remaining rows and columns keep their
        relative order.

    Raises
    ------
    NonSquareError
        If A is not square.
    DegenerateDimensionError
        If n < 2.
    ValidationError
        If either index is out of range.
    """
    A = check_matrix(A, 'A')
    n = check_square(A, 'A')
    if n < 2:
        raise DegenerateDimensionError(
            f"minor: requires a matrix of size >= 2, got {n}x{n}",
            operation='minor',
            shape=A.shape,
        )
    row = check_index(row, n, 'row')
    col = check_index(col, n, 'col')
    return freeze(_minor(A, row, col))


def as_column(b: ArrayLike, name: str) -> NDArray[np.floating[Any]]:
    """
    Convert a right-hand side to an n x 1 column.

    A 1D vector of length n is reshaped to (n, 1); a 2D input must
    already have exactly one column.
    """
    b = check_array(b, name)
    if b.ndim == 1:
        b = b.reshape(-1, 1)
    if b.ndim != 2 or b.shape[1] != 1:
        raise ShapeMismatchError(
            f"{name}: expected a column vector (n x 1), got shape {b.shape}",
            operation='as_column',
            right_shape=b.shape,
        )
    check_finite(b, name)
    return b


def _replace_column(
    A: NDArray[np.floating[Any]],
    column: NDArray[np.floating[Any]],
    col: int,
) -> NDArray[np.floating[Any]]:
    """Copy of A with column ``col`` overwritten by ``column`` (n x 1)."""
    result = A.copy()
    result[:, col] = column[:, 0]
    return result


def replace_column(A: ArrayLike, b: ArrayLike, col: int) -> NDArray[np.floating[Any]]:
    """
    Copy of A with one column replaced by the entries of b.

    Raises
    ------
    ShapeMismatchError
        If b is not a column with as many rows as A.
    ValidationError
        If col is out of range.
    """
    A = check_matrix(A, 'A')
    column = as_column(b, 'b')
    if column.shape[0] != A.shape[0]:
        raise ShapeMismatchError(
            f"replace_column: b has {column.shape[0]} rows but A has {A.shape[0]}",
            operation='replace_column',
            left_shape=A.shape,
            right_shape=column.shape,
        )
    col = check_index(col, A.shape[1], 'col')
    return freeze(_replace_column(A, column, col))
