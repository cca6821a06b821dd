"""
Supporting matrix primitives.

Public API:
    add(A, B)              - Elementwise sum
    subtract(A, B)         - Elementwise difference
    multiply(A, B)         - Matrix product
    transpose(A)           - Transpose
    minor(A, row, col)     - Delete one row and one column
    replace_column(A, b, c) - Substitute column c with b
"""

from pymatrix.ops.arithmetic import add, subtract, multiply
from pymatrix.ops.structure import transpose, minor, replace_column, as_column

__all__ = [
    "add",
    "subtract",
    "multiply",
    "transpose",
    "minor",
    "replace_column",
    "as_column",
]
