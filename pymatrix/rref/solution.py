"""
Solution wrapper for row reduction results.
"""

from __future__ import annotations

from pymatrix.core.formatting import format_matrix
from pymatrix.core.result import Result
from pymatrix.rref._common import RREFParams


class RREFSolution:
    """Reduced row echelon form of a matrix.

    Every nonzero row has a leading 1 strictly to the right of the leading 1
    of the row above it, and every pivot column is zero outside its pivot
    row.
    """

    __slots__ = ('_result',)

    def __init__(self, _result: Result[RREFParams]) -> None:
        self._result = _result

    @property
    def matrix(self):
        """The RREF matrix (read-only), same shape as the input."""
        return self._result.params.matrix

    @property
    def pivot_columns(self) -> tuple[int, ...]:
        return self._result.params.pivot_columns

    @property
    def rank(self) -> int:
        """Number of pivots."""
        return self._result.params.rank

    @property
    def row_swaps(self) -> int:
        return self._result.params.row_swaps

    @property
    def tolerance(self) -> float:
        return self._result.params.tolerance

    @property
    def info(self) -> dict:
        return self._result.info

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def timing(self):
        return self._result.timing

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def summary(self) -> str:
        """Plain-text summary with the reduced matrix."""
        rows, cols = self.matrix.shape
        lines = [
            "Reduced Row Echelon Form (Gauss-Jordan)",
            "=" * 50,
            f"  shape = {rows}x{cols}, rank = {self.rank}, "
            f"row swaps = {self.row_swaps}",
            f"  pivot columns = {list(self.pivot_columns)}",
            f"  tolerance = {self.tolerance:g}",
            "",
        ]
        body = format_matrix(self.matrix)
        if body:
            lines.append(body)
        return "\n".join(lines)

    def __repr__(self) -> str:
        rows, cols = self.matrix.shape
        return (
            f"RREFSolution(shape=({rows}, {cols}), rank={self.rank}, "
            f"pivot_columns={self.pivot_columns})"
        )
