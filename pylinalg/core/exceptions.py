"""
Exception hierarchy for PyLinalg.

All exceptions inherit from PyLinalgError to allow catching any
library-specific error. Operand-compatibility failures derive from
ValidationError; failures of the arithmetic itself derive from
NumericalError.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class PyLinalgError(Exception):
    """Base exception for all PyLinalg errors."""
    pass


class ValidationError(PyLinalgError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class SizeMismatchError(ValidationError):
    """
    Vector lengths disagree.

    Raised by vector-vector and vector-list operations (add, sub, dot,
    linear_combination, lerp, angle_cos, cross_product) when operand
    lengths differ.

    Attributes:
        expected: Length required by the left/first operand
        actual: Length of the offending operand
    """

    def __init__(
        self,
        message: str,
        expected: int | None = None,
        actual: int | None = None
    ):
        super().__init__(message)
        self.expected = expected
        self.actual = actual


class ShapeMismatchError(ValidationError):
    """
    Matrix shapes disagree.

    Raised by matrix-matrix operations (add, sub, horizontal
    concatenation), by row-literal construction with ragged rows, and by
    Vector.reshape when rows * cols differs from the vector size.

    Attributes:
        expected_shape: Shape required by the receiver, as (rows, cols)
        actual_shape: Shape of the offending operand, as (rows, cols)
    """

    def __init__(
        self,
        message: str,
        expected_shape: tuple[int, int] | None = None,
        actual_shape: tuple[int, int] | None = None
    ):
        super().__init__(message)
        self.expected_shape = expected_shape
        self.actual_shape = actual_shape


class DimensionMismatchError(ValidationError):
    """
    Inner dimensions of a product disagree.

    Raised by mul_vec and mul_mat, and by cross_product when its operands
    are not 3-dimensional.

    Attributes:
        expected: Dimension required by the receiver
        actual: Dimension supplied
    """

    def __init__(
        self,
        message: str,
        expected: int | None = None,
        actual: int | None = None
    ):
        super().__init__(message)
        self.expected = expected
        self.actual = actual


class NotSquareError(ValidationError):
    """
    Operation requires a square matrix.

    Attributes:
        shape: Actual shape of the matrix, as (rows, cols)
    """

    def __init__(self, message: str, shape: tuple[int, int] | None = None):
        super().__init__(message)
        self.shape = shape


class UnsupportedTypeError(ValidationError):
    """
    Scalar kind is neither real nor complex, or the operation is not
    defined for the scalar kind (e.g. cross product of complex vectors).

    Attributes:
        dtype: Offending dtype or Python type, if known
    """

    def __init__(self, message: str, dtype: object | None = None):
        super().__init__(message)
        self.dtype = dtype


class NumericalError(PyLinalgError):
    """
    Numerical computation failed.

    Base class for errors arising from the values themselves rather than
    from operand shapes or types.
    """
    pass


class SingularMatrixError(NumericalError):
    """
    Matrix is singular.

    Raised when a matrix operation requires invertibility but the computed
    determinant is exactly zero, or a zero pivot is met during elimination.

    Attributes:
        determinant: Computed determinant, if available
        pivot_index: Elimination step at which a zero pivot was met, if any
    """

    def __init__(
        self,
        message: str,
        determinant: complex | float | None = None,
        pivot_index: int | None = None
    ):
        super().__init__(message)
        self.determinant = determinant
        self.pivot_index = pivot_index


class DegenerateInputError(NumericalError):
    """
    Input is degenerate for the requested quantity.

    Raised by angle_cos when either vector has zero Euclidean norm.
    """
    pass


class DivisionByZeroError(NumericalError):
    """
    Division by an exactly-zero scalar.

    Raised by Vector.div before any element is modified.
    """
    pass
