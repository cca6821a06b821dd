"""
Tests for rref() (Gauss-Jordan elimination).

Checks the reduced row echelon form structure: a leading 1 in each
nonzero row, strictly increasing pivot columns, zero elsewhere in every
pivot column, zero rows at the bottom.
"""

import numpy as np
import pytest
from numpy.testing import assert_allclose, assert_array_equal

from pymatrix import rref, RREFSolution
from pymatrix.core.compute.tolerances import PIVOT_TOLERANCE, PROPERTY_FP64
from pymatrix.core.exceptions import ValidationError


def assert_is_rref(R, pivot_columns, tol=PROPERTY_FP64.atol):
    """Assert the structural RREF invariants."""
    n_rows = R.shape[0]
    assert list(pivot_columns) == sorted(set(pivot_columns))
    for r, c in enumerate(pivot_columns):
        assert R[r, c] == 1.0
        others = np.delete(R[:, c], r)
        assert_allclose(others, 0.0, atol=tol)
        # nothing nonzero left of the pivot
        assert_allclose(R[r, :c], 0.0, atol=tol)
    for r in range(len(pivot_columns), n_rows):
        assert_allclose(R[r], 0.0, atol=tol)


class TestLiteralScenario:

    def test_augmented_system(self, rref_scenario):
        sol = rref(rref_scenario)
        assert_allclose(
            sol.matrix,
            [[1, 0, 0, 2], [0, 1, 0, 4], [0, 0, 1, -3]],
            atol=PROPERTY_FP64.atol,
        )
        assert sol.pivot_columns == (0, 1, 2)
        assert sol.rank == 3
        assert_is_rref(sol.matrix, sol.pivot_columns)

    def test_input_unchanged(self, rref_scenario):
        before = rref_scenario.copy()
        rref(rref_scenario)
        assert_array_equal(rref_scenario, before)


class TestStructure:

    def test_identity_is_fixed_point(self):
        sol = rref(np.eye(3))
        assert_array_equal(sol.matrix, np.eye(3))
        assert sol.row_swaps == 0

    def test_zero_matrix(self):
        sol = rref(np.zeros((2, 3)))
        assert_array_equal(sol.matrix, np.zeros((2, 3)))
        assert sol.rank == 0
        assert sol.pivot_columns == ()

    def test_skips_zero_column(self):
        sol = rref([[0, 1, 2], [0, 2, 5]])
        assert_allclose(sol.matrix, [[0, 1, 0], [0, 0, 1]], atol=PROPERTY_FP64.atol)
        assert sol.pivot_columns == (1, 2)

    def test_row_swap_when_leading_entry_is_zero(self):
        sol = rref([[0, 2], [3, 0]])
        assert_array_equal(sol.matrix, np.eye(2))
        assert sol.row_swaps == 1

    def test_rank_deficient(self, matrix_b):
        sol = rref(matrix_b)
        assert sol.rank == 2
        assert_is_rref(sol.matrix, sol.pivot_columns)
        assert_allclose(sol.matrix[2], 0.0, atol=PROPERTY_FP64.atol)

    def test_wide_matrix_stops_at_last_row(self):
        sol = rref([[1, 2, 3, 4]])
        assert_array_equal(sol.matrix, [[1, 2, 3, 4]])
        assert sol.pivot_columns == (0,)

    def test_tall_matrix_stops_at_last_column(self):
        sol = rref([[2], [4], [6]])
        assert_array_equal(sol.matrix, [[1], [0], [0]])
        assert sol.rank == 1

    def test_empty(self):
        sol = rref([])
        assert sol.matrix.shape == (0, 0)
        assert sol.rank == 0

    @pytest.mark.parametrize("shape", [(3, 3), (3, 5), (5, 3), (4, 4)])
    def test_random_matrices(self, rng, shape):
        A = rng.standard_normal(shape)
        sol = rref(A)
        assert_is_rref(sol.matrix, sol.pivot_columns)
        assert sol.rank == np.linalg.matrix_rank(A)

    def test_idempotent(self, rng):
        A = rng.standard_normal((3, 5))
        A[2] = A[0] + A[1]
        once = rref(A).matrix
        twice = rref(once).matrix
        assert_allclose(twice, once, atol=PROPERTY_FP64.atol)

    def test_idempotent_literal(self, rref_scenario):
        once = rref(rref_scenario).matrix
        assert_allclose(rref(once).matrix, once, atol=PROPERTY_FP64.atol)

    def test_result_read_only(self, rref_scenario):
        assert not rref(rref_scenario).matrix.flags.writeable


class TestTolerance:

    def test_default(self):
        assert rref(np.eye(2)).tolerance == PIVOT_TOLERANCE

    def test_sub_tolerance_entry_is_not_a_pivot(self):
        sol = rref([[1e-12, 1.0], [0.0, 1.0]])
        assert sol.pivot_columns == (1,)

    def test_zero_tolerance_accepts_tiny_pivot(self):
        sol = rref([[1e-12, 1.0], [0.0, 1.0]], tol=0.0)
        assert sol.pivot_columns == (0, 1)

    def test_negative_tolerance_rejected(self):
        with pytest.raises(ValidationError, match="tol"):
            rref(np.eye(2), tol=-1.0)


class TestSolution:

    def test_solution_type(self, rref_scenario):
        sol = rref(rref_scenario)
        assert isinstance(sol, RREFSolution)
        assert sol.info["method"] == "gauss-jordan"
        assert sol.backend_name == "cpu_gauss_jordan"
        assert "elimination" in sol.timing

    def test_summary(self, rref_scenario):
        text = rref(rref_scenario).summary()
        assert "rank = 3" in text
        assert "[ 1       0       0       2]" in text

    def test_repr(self, rref_scenario):
        assert "rank=3" in repr(rref(rref_scenario))
