"""
Tests for the pymatrix exception hierarchy.

Validates:
    - Inheritance chain (all exceptions catchable via PyMatrixError)
    - Diagnostic attributes on the shape, square, degenerate, limit and
      singular errors
    - Default attribute values (None for optional attributes)
"""

import pytest

from pymatrix.core.exceptions import (
    DegenerateDimensionError,
    DimensionError,
    DimensionLimitError,
    NonSquareError,
    NumericalError,
    PyMatrixError,
    ShapeMismatchError,
    SingularMatrixError,
    ValidationError,
)


# ═══════════════════════════════════════════════════════════════════════
# Inheritance hierarchy
# ═══════════════════════════════════════════════════════════════════════


class TestInheritance:
    """Every exception is catchable via PyMatrixError."""

    def test_validation_error_is_pymatrix_error(self):
        with pytest.raises(PyMatrixError):
            raise ValidationError("bad input")

    def test_dimension_error_is_validation_error(self):
        with pytest.raises(ValidationError):
            raise DimensionError("wrong shape")

    @pytest.mark.parametrize("exc", [
        ShapeMismatchError("mismatch"),
        NonSquareError("not square"),
        DegenerateDimensionError("empty"),
    ])
    def test_shape_errors_are_dimension_errors(self, exc):
        with pytest.raises(DimensionError):
            raise exc

    def test_dimension_limit_is_validation_error(self):
        err = DimensionLimitError("too big", n=12, limit=10)
        assert isinstance(err, ValidationError)
        assert not isinstance(err, DimensionError)

    def test_singular_matrix_error_is_numerical_error(self):
        with pytest.raises(NumericalError):
            raise SingularMatrixError("singular")

    def test_singular_is_not_validation_error(self):
        """Singularity is a property of the numbers, not of the input shape."""
        err = SingularMatrixError("singular")
        assert not isinstance(err, ValidationError)


# ═══════════════════════════════════════════════════════════════════════
# Diagnostic attributes
# ═══════════════════════════════════════════════════════════════════════


class TestShapeMismatchError:

    def test_all_attributes(self):
        err = ShapeMismatchError(
            "add: shapes differ",
            operation="add",
            left_shape=(2, 2),
            right_shape=(3, 3),
        )
        assert str(err) == "add: shapes differ"
        assert err.operation == "add"
        assert err.left_shape == (2, 2)
        assert err.right_shape == (3, 3)

    def test_defaults_are_none(self):
        err = ShapeMismatchError("mismatch")
        assert err.operation is None
        assert err.left_shape is None
        assert err.right_shape is None


class TestNonSquareError:

    def test_all_attributes(self):
        err = NonSquareError("A is 2x3", matrix_name="A", shape=(2, 3))
        assert err.matrix_name == "A"
        assert err.shape == (2, 3)

    def test_defaults_are_none(self):
        err = NonSquareError("not square")
        assert err.matrix_name is None
        assert err.shape is None


class TestDegenerateDimensionError:

    def test_all_attributes(self):
        err = DegenerateDimensionError(
            "empty", operation="determinant", shape=(0, 0)
        )
        assert err.operation == "determinant"
        assert err.shape == (0, 0)


class TestDimensionLimitError:

    def test_required_attributes(self):
        err = DimensionLimitError("too big", n=11, limit=10)
        assert err.n == 11
        assert err.limit == 10


class TestSingularMatrixError:

    def test_all_attributes(self):
        err = SingularMatrixError(
            "det(A) = 0",
            matrix_name="A",
            determinant=0.0,
            tolerance=1e-10,
        )
        assert str(err) == "det(A) = 0"
        assert err.matrix_name == "A"
        assert err.determinant == 0.0
        assert err.tolerance == 1e-10

    def test_defaults_are_none(self):
        err = SingularMatrixError("singular")
        assert err.matrix_name is None
        assert err.determinant is None
        assert err.tolerance is None

    def test_catchable_with_attributes(self):
        with pytest.raises(SingularMatrixError) as exc_info:
            raise SingularMatrixError("singular", matrix_name="A", determinant=1e-14)
        assert exc_info.value.determinant == pytest.approx(1e-14)
