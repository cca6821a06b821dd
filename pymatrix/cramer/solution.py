"""
Solution wrapper for Cramer's rule results.
"""

from __future__ import annotations

from pymatrix.core.formatting import format_vector
from pymatrix.core.result import Result
from pymatrix.core.validation import freeze
from pymatrix.cramer._common import CramerParams


class CramerSolution:
    """Solution x of the square system A x = b.

    Behaves as a read-only sequence over x: ``len(sol)``, ``sol[i]`` and
    iteration all refer to the solution components in variable order.
    """

    __slots__ = ('_result',)

    def __init__(self, _result: Result[CramerParams]) -> None:
        self._result = _result

    @property
    def x(self):
        """Solution vector, shape (n,)."""
        return self._result.params.x

    @property
    def determinant(self) -> float:
        """det(A)."""
        return self._result.params.determinant

    @property
    def column_determinants(self):
        """det(A_c) for every column c, shape (n,)."""
        return self._result.params.column_determinants

    @property
    def condition_number(self) -> float:
        return self._result.params.condition_number

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

    def as_column(self):
        """x as an (n, 1) matrix, ready to multiply by A."""
        return freeze(self.x.reshape(-1, 1).copy())

    def __len__(self) -> int:
        return len(self.x)

    def __getitem__(self, index):
        return self.x[index]

    def __iter__(self):
        return iter(self.x.tolist())

    def summary(self) -> str:
        """Plain-text summary in x1 = ..., x2 = ... form."""
        lines = [
            "Cramer's rule",
            "=" * 50,
            f"  n = {len(self)}",
            f"  det(A) = {self.determinant:.10g}",
            f"  cond(A) = {self.condition_number:.4g}",
            "",
            format_vector(self.x),
        ]
        for w in self.warnings:
            lines.append(f"  Warning: {w}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"CramerSolution(n={len(self)}, x={self.x.tolist()})"
