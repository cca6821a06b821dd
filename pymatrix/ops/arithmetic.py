"""
Elementwise addition/subtraction and matrix multiplication.

All functions take array-likes, never modify them, and return a new
read-only float64 matrix.
"""

from __future__ import annotations

from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymatrix.core.exceptions import ShapeMismatchError
from pymatrix.core.validation import check_matrix, check_nonempty, freeze


def _check_same_shape(
    A: NDArray[np.floating[Any]],
    B: NDArray[np.floating[Any]],
    operation: str,
) -> None:
    if A.shape != B.shape:
        raise ShapeMismatchError(
            f"{operation}: operands must have the same shape, "
            f"got {A.shape[0]}x{A.shape[1]} and {B.shape[0]}x{B.shape[1]}",
            operation=operation,
            left_shape=A.shape,
            right_shape=B.shape,
        )


def _prepare_elementwise(A: ArrayLike, B: ArrayLike, operation: str):
    A = check_matrix(A, 'A')
    B = check_matrix(B, 'B')
    check_nonempty(A, 'A', operation)
    check_nonempty(B, 'B', operation)
    _check_same_shape(A, B, operation)
    return A, B


def add(A: ArrayLike, B: ArrayLike) -> NDArray[np.floating[Any]]:
    """
    Elementwise sum R[i, j] = A[i, j] + B[i, j].

    Raises
    ------
    DegenerateDimensionError
        If either operand is empty.
    ShapeMismatchError
        If the operands differ in shape.
    """
    A, B = _prepare_elementwise(A, B, 'add')
    return freeze(A + B)


def subtract(A: ArrayLike, B: ArrayLike) -> NDArray[np.floating[Any]]:
    """
    Elementwise difference R[i, j] = A[i, j] - B[i, j].

    Raises
    ------
    DegenerateDimensionError
        If either operand is empty.
    ShapeMismatchError
        If the operands differ in shape.
    """
    A, B = _prepare_elementwise(A, B, 'subtract')
    return freeze(A - B)


def multiply(A: ArrayLike, B: ArrayLike) -> NDArray[np.floating[Any]]:
    """
    Matrix product R = A B.

    R has shape (A.rows, B.cols) with R[i, j] = sum_k A[i, k] * B[k, j].

    Raises
    ------
    DegenerateDimensionError
        If either operand is empty.
    ShapeMismatchError
        If A's column count differs from B's row count.
    """
    A = check_matrix(A, 'A')
    B = check_matrix(B, 'B')
    check_nonempty(A, 'A', 'multiply')
    check_nonempty(B, 'B', 'multiply')

    if A.shape[1] != B.shape[0]:
        raise ShapeMismatchError(
            f"multiply: inner dimensions must agree, A is "
            f"{A.shape[0]}x{A.shape[1]} but B is {B.shape[0]}x{B.shape[1]} "
            f"({A.shape[1]} != {B.shape[0]})",
            operation='multiply',
            left_shape=A.shape,
            right_shape=B.shape,
        )

    return freeze(A @ B)
