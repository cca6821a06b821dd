"""
Solution wrapper for determinant results.
"""

from __future__ import annotations

from pymatrix.core.result import Result
from pymatrix.determinant._common import DeterminantParams


class DeterminantSolution:
    """Determinant of a square matrix.

    ``float(solution)`` gives the determinant itself.
    """

    __slots__ = ('_result',)

    def __init__(self, _result: Result[DeterminantParams]) -> None:
        self._result = _result

    @property
    def value(self) -> float:
        """det(A)."""
        return self._result.params.value

    @property
    def n(self) -> int:
        return self._result.params.n

    @property
    def n_minors(self) -> int:
        """Minors built during the expansion."""
        return self._result.params.n_minors

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

    def __float__(self) -> float:
        return self.value

    def summary(self) -> str:
        """Plain-text summary of the expansion."""
        lines = [
            "Determinant (cofactor expansion along column 0)",
            "=" * 50,
            f"  n = {self.n}",
            f"  minors built = {self.n_minors}",
            f"  det(A) = {self.value:.10g}",
        ]
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"DeterminantSolution(n={self.n}, value={self.value!r})"
