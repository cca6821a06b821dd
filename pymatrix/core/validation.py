"""
Input validation utilities for pymatrix.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - No default handling of edge cases
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import numpy as np
from numpy.typing import ArrayLike, NDArray
from typing import Any

from pymatrix.core.exceptions import (
    ValidationError,
    DimensionError,
    NonSquareError,
    DegenerateDimensionError,
    DimensionLimitError,
)


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.floating[Any]]:
    """
    Validate and convert input to a float64 numpy array.
    
    Accepts any array-like and converts to a fresh numpy array, so the
    caller's object is never aliased. Objects exposing ``.values`` (e.g.
    pandas DataFrames) are unwrapped first. Ragged nested sequences and
    non-numeric data are rejected.
    
    Args:
        array: Input to validate
        name: Parameter name for error messages
        
    Returns:
        numpy.ndarray with float64 dtype, never sharing memory with the input
        
    Raises:
        ValidationError: If input cannot be converted to numeric array
    """
    if hasattr(array, 'values') and not isinstance(array, np.ndarray):
        array = array.values
    
    try:
        result = np.array(array, copy=True)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e
    
    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating ragged rows, "
            f"mixed types or non-numeric data"
        )

    # Reject non-numeric dtypes (strings, bytes, bool, datetime, etc.)
    if not np.issubdtype(result.dtype, np.number):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    if np.issubdtype(result.dtype, np.complexfloating):
        raise ValidationError(
            f"{name}: complex dtype {result.dtype}, expected real numbers"
        )

    if result.dtype != np.float64:
        result = result.astype(np.float64)

    return result


def check_finite(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array contains no NaN or Inf values.
    
    Args:
        array: Array to check
        name: Parameter name for error messages
        
    Raises:
        ValidationError: If array contains non-finite values
    """
    if not np.all(np.isfinite(array)):
        n_nan = int(np.sum(np.isnan(array)))
        n_inf = int(np.sum(np.isinf(array)))
        raise ValidationError(
            f"{name}: contains non-finite values ({n_nan} NaN, {n_inf} Inf)"
        )


def check_ndim(array: NDArray[np.floating[Any]], ndim: int, name: str) -> None:
    """
    Verify array has exactly the specified number of dimensions.
    
    Args:
        array: Array to check
        ndim: Required number of dimensions
        name: Parameter name for error messages
        
    Raises:
        DimensionError: If array has wrong number of dimensions
    """
    if array.ndim != ndim:
        raise DimensionError(
            f"{name}: expected {ndim}D array, got {array.ndim}D with shape {array.shape}"
        )


def check_2d(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array is 2-dimensional.
    
    Args:
        array: Array to check
        name: Parameter name for error messages
        
    Raises:
        DimensionError: If array is not 2D
    """
    check_ndim(array, 2, name)


def check_matrix(matrix: ArrayLike, name: str) -> NDArray[np.floating[Any]]:
    """
    Convert input to a rectangular, finite float64 matrix.
    
    The literal empty sequence ``[]`` is treated as the 0x0 matrix.
    
    Args:
        matrix: Array-like with rows of equal length
        name: Parameter name for error messages
        
    Returns:
        2D float64 array owned by the caller
        
    Raises:
        ValidationError: If input is ragged, non-numeric or non-finite
        DimensionError: If input is not 2D
    """
    result = check_array(matrix, name)
    if result.ndim == 1 and result.size == 0:
        result = result.reshape(0, 0)
    check_2d(result, name)
    check_finite(result, name)
    return result


def check_square(matrix: NDArray[np.floating[Any]], name: str) -> int:
    """
    Verify matrix is square.
    
    Args:
        matrix: 2D array to check
        name: Parameter name for error messages
        
    Returns:
        The dimension n of the n x n matrix
        
    Raises:
        NonSquareError: If the row and column counts differ
    """
    rows, cols = matrix.shape
    if rows != cols:
        raise NonSquareError(
            f"{name}: expected a square matrix, got shape {rows}x{cols}",
            matrix_name=name,
            shape=(rows, cols),
        )
    return rows


def check_nonempty(
    matrix: NDArray[np.floating[Any]],
    name: str,
    operation: str,
) -> None:
    """
    Verify matrix has at least one row and one column.
    
    Args:
        matrix: 2D array to check
        name: Parameter name for error messages
        operation: Operation name for error messages
        
    Raises:
        DegenerateDimensionError: If either dimension is zero
    """
    if matrix.size == 0:
        rows, cols = matrix.shape
        raise DegenerateDimensionError(
            f"{operation}: {name} has shape {rows}x{cols}; "
            f"the result is undefined for an empty matrix",
            operation=operation,
            shape=(rows, cols),
        )


def check_dimension_limit(n: int, limit: int | None, name: str) -> None:
    """
    Refuse factorial-cost work above a configured ceiling.
    
    Args:
        n: Matrix dimension
        limit: Maximum allowed dimension, or None for no limit
        name: Parameter name for error messages
        
    Raises:
        DimensionLimitError: If n exceeds limit
    """
    if limit is not None and n > limit:
        raise DimensionLimitError(
            f"{name}: cofactor expansion of a {n}x{n} matrix exceeds the "
            f"limit of {limit} (cost grows as n!). Pass max_dimension=None "
            f"to lift the limit.",
            n=n,
            limit=limit,
        )


def check_index(index: int, size: int, name: str) -> int:
    """
    Verify an integer index lies in [0, size).
    
    Negative indices are rejected rather than wrapped.
    
    Args:
        index: Index to check
        size: Length of the indexed axis
        name: Parameter name for error messages
        
    Returns:
        The index as a Python int
        
    Raises:
        ValidationError: If index is not an integer or is out of range
    """
    if isinstance(index, (bool, np.bool_)) or not isinstance(index, (int, np.integer)):
        raise ValidationError(f"{name}: expected an integer index, got {index!r}")
    if not 0 <= index < size:
        raise ValidationError(
            f"{name}: index {index} out of range for axis of length {size}"
        )
    return int(index)


def freeze(matrix: NDArray[np.floating[Any]]) -> NDArray[np.floating[Any]]:
    """Mark an array read-only and return it."""
    matrix.flags.writeable = False
    return matrix
