"""
Exception hierarchy for pymatrix.

All exceptions inherit from PyMatrixError to allow catching any
library-specific error. Operation-specific failures inherit from the
appropriate base class here.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class PyMatrixError(Exception):
    """Base exception for all pymatrix errors."""
    pass


class ValidationError(PyMatrixError):
    """
    Input validation failed.
    
    Raised when user-provided inputs fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Array dimensions are incorrect or inconsistent.
    
    Raised when array shapes don't match expected dimensions or
    when multiple arrays have inconsistent shapes.
    """
    pass


class ShapeMismatchError(DimensionError):
    """
    Operand shapes are incompatible for a binary operation.
    
    Raised by add/subtract when the shapes differ, and by multiply when
    the inner dimensions disagree.
    
    Attributes:
        operation: Name of the operation that was attempted
        left_shape: Shape of the left operand
        right_shape: Shape of the right operand
    """
    
    def __init__(
        self,
        message: str,
        operation: str | None = None,
        left_shape: tuple[int, ...] | None = None,
        right_shape: tuple[int, ...] | None = None,
    ):
        super().__init__(message)
        self.operation = operation
        self.left_shape = left_shape
        self.right_shape = right_shape


class NonSquareError(DimensionError):
    """
    Matrix is required to be square but is not.
    
    Attributes:
        matrix_name: Name/description of the problematic matrix
        shape: Actual shape of the matrix
    """
    
    def __init__(
        self,
        message: str,
        matrix_name: str | None = None,
        shape: tuple[int, ...] | None = None,
    ):
        super().__init__(message)
        self.matrix_name = matrix_name
        self.shape = shape


class DegenerateDimensionError(DimensionError):
    """
    Matrix has zero rows or columns where a result is undefined.
    
    Attributes:
        operation: Name of the operation that was attempted
        shape: Actual shape of the offending matrix
    """
    
    def __init__(
        self,
        message: str,
        operation: str | None = None,
        shape: tuple[int, ...] | None = None,
    ):
        super().__init__(message)
        self.operation = operation
        self.shape = shape


class DimensionLimitError(ValidationError):
    """
    Matrix is too large for an algorithm with factorial cost.
    
    Cofactor expansion does O(n!) work; requests beyond the configured
    ceiling are refused instead of running for an unbounded time.
    
    Attributes:
        n: Requested matrix dimension
        limit: Configured ceiling
    """
    
    def __init__(self, message: str, n: int, limit: int):
        super().__init__(message)
        self.n = n
        self.limit = limit


class NumericalError(PyMatrixError):
    """
    Numerical computation failed.
    
    Base class for errors arising from numerical issues during computation.
    """
    pass


class SingularMatrixError(NumericalError):
    """
    Matrix is singular or nearly singular.
    
    Raised when an operation requires a unique solution but the
    coefficient matrix has a determinant within tolerance of zero.
    
    Attributes:
        matrix_name: Name/description of the problematic matrix
        determinant: The determinant that triggered the failure, if computed
        tolerance: Threshold the determinant was compared against
    """
    
    def __init__(
        self, 
        message: str,
        matrix_name: str | None = None,
        determinant: float | None = None,
        tolerance: float | None = None,
    ):
        super().__init__(message)
        self.matrix_name = matrix_name
        self.determinant = determinant
        self.tolerance = tolerance
