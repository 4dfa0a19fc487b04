"""
Matrix: column-major collection of equal-length Vector columns.

m[c] is the live column Vector c, so m[c][r] reads or assigns the element at
row r, column c. rows() is the shared column length (0 when there are no
columns); cols() is the number of columns.

Mutators (add, sub, scl) delegate column-wise to the Vector mutators and
return None. Products, transpose, flatten, concatenation and the elimination
algorithms return new matrices and never modify the receiver.
"""

from __future__ import annotations

from typing import Any, Iterable, Sequence

import numpy as np
from numpy.typing import ArrayLike, DTypeLike, NDArray

from pylinalg.core.compute.tolerances import MATRIX_EQUALITY
from pylinalg.core.exceptions import (
    DimensionMismatchError,
    ShapeMismatchError,
    SingularMatrixError,
    ValidationError,
)
from pylinalg.core.scalar import ScalarKind, fma, magnitude, scalar_kind, value_kind
from pylinalg.core.validation import (
    check_array,
    check_same_shape,
    check_size,
    check_square,
)
from pylinalg.matrix import _elimination
from pylinalg.vector import Vector


class Matrix:
    """
    Dense real or complex matrix, stored by column.

    Construction:
        Matrix([[1, 2], [3, 4]])       from row literals (validated)
        Matrix(2.0)                    4x4 matrix with 2.0 on the diagonal
        Matrix(other)                  independent copy
        Matrix()                       empty (0 x 0)
        Matrix.from_columns(columns)   columns as given, no transposition
        Matrix.zeros(cols, rows)       zero-filled, explicit (cols, rows) size
        Matrix.identity(n)             n x n identity
    """

    __slots__ = ('_columns',)
    __hash__ = None  # mutable

    def __init__(self, rows: Any = None):
        if rows is None:
            self._columns: list[Vector] = []
        elif isinstance(rows, Matrix):
            self._columns = [col.copy() for col in rows._columns]
        elif np.isscalar(rows) or isinstance(rows, np.generic):
            value_kind(rows)
            data = np.zeros((4, 4), dtype=np.result_type(rows, np.float64))
            np.fill_diagonal(data, rows)
            self._columns = _columns_of(data)
        else:
            self._columns = _columns_of(_validated_rows(rows))

    @classmethod
    def from_columns(cls, columns: Iterable[Vector | ArrayLike]) -> Matrix:
        """
        Build a matrix whose columns are the given vectors, in order.

        Raises:
            ShapeMismatchError: If the columns differ in length
        """
        vectors = [Vector(col) for col in columns]
        if vectors:
            n_rows = vectors[0].size()
            for c, vec in enumerate(vectors):
                if vec.size() != n_rows:
                    raise ShapeMismatchError(
                        f"from_columns: column {c} has {vec.size()} rows, expected {n_rows}",
                        expected_shape=(n_rows, len(vectors)),
                        actual_shape=(vec.size(), len(vectors)),
                    )
            dtype = np.result_type(*(vec.dtype for vec in vectors))
            vectors = [Vector(vec, dtype=dtype) for vec in vectors]

        mat = cls.__new__(cls)
        mat._columns = vectors
        return mat

    @classmethod
    def zeros(cls, cols: int, rows: int, *, dtype: DTypeLike = np.float64) -> Matrix:
        """Zero-filled matrix with `cols` columns of length `rows`."""
        cols = check_size(cols, "cols")
        rows = check_size(rows, "rows")
        scalar_kind(dtype)
        mat = cls.__new__(cls)
        mat._columns = [Vector(rows, dtype=dtype) for _ in range(cols)]
        return mat

    @classmethod
    def identity(cls, n: int, *, dtype: DTypeLike = np.float64) -> Matrix:
        """n x n identity matrix."""
        n = check_size(n, "n")
        scalar_kind(dtype)
        return cls._from_rows(np.eye(n, dtype=dtype))

    @classmethod
    def _from_rows(cls, data: NDArray[Any]) -> Matrix:
        """Adopt a validated row-major 2-D array."""
        mat = cls.__new__(cls)
        mat._columns = _columns_of(data)
        return mat

    # --- Introspection ---

    def rows(self) -> int:
        """Number of rows."""
        return self._columns[0].size() if self._columns else 0

    def cols(self) -> int:
        """Number of columns."""
        return len(self._columns)

    def shape(self) -> tuple[int, int]:
        """Shape as (rows, cols)."""
        return (self.rows(), self.cols())

    def is_square(self) -> bool:
        return self.rows() == self.cols()

    @property
    def kind(self) -> ScalarKind:
        """Scalar kind of the elements (REAL for an empty matrix)."""
        return self._columns[0].kind if self._columns else ScalarKind.REAL

    @property
    def dtype(self) -> np.dtype:
        """Storage dtype (float64 for an empty matrix)."""
        return self._columns[0].dtype if self._columns else np.dtype(np.float64)

    def __len__(self) -> int:
        return len(self._columns)

    def __getitem__(self, col: int) -> Vector:
        return self._columns[col]

    def copy(self) -> Matrix:
        """Independent copy."""
        return Matrix(self)

    def to_numpy(self) -> NDArray[Any]:
        """Row-major (rows x cols) numpy copy."""
        if not self._columns:
            return np.zeros((0, 0), dtype=self.dtype)
        return np.stack([col.to_numpy() for col in self._columns], axis=1)

    def _stacked_columns(self) -> NDArray[Any]:
        """(cols x rows) working copy, one stored column per array row."""
        if not self._columns:
            return np.zeros((0, 0), dtype=self.dtype)
        return np.stack([col.to_numpy() for col in self._columns])

    # --- In-place arithmetic ---

    def add(self, other: Matrix) -> None:
        """
        Element-wise addition, in place.

        Raises:
            ShapeMismatchError: If shapes differ
        """
        check_same_shape(self.shape(), other.shape(), "add")
        for col, other_col in zip(self._columns, other._columns):
            col.add(other_col)

    def sub(self, other: Matrix) -> None:
        """
        Element-wise subtraction, in place.

        Raises:
            ShapeMismatchError: If shapes differ
        """
        check_same_shape(self.shape(), other.shape(), "sub")
        for col, other_col in zip(self._columns, other._columns):
            col.sub(other_col)

    def scl(self, scalar: Any) -> None:
        """Uniform scale, in place."""
        for col in self._columns:
            col.scl(scalar)

    # --- Products ---

    def mul_vec(self, vec: Vector) -> Vector:
        """
        Apply the matrix to a vector in column-major convention.

        result[c] = sum_r self[c][r] * vec[r], so the result has cols()
        elements. Real data accumulates with fused multiply-adds.

        Raises:
            DimensionMismatchError: If rows() != vec.size()
        """
        if self.rows() != vec.size():
            raise DimensionMismatchError(
                f"mul_vec: matrix has {self.rows()} rows but vector has {vec.size()} elements",
                expected=self.rows(),
                actual=vec.size(),
            )

        dtype = np.result_type(self.dtype, vec.dtype)
        fused = scalar_kind(dtype) is ScalarKind.REAL
        result = np.zeros(self.cols(), dtype=dtype)

        for c, col in enumerate(self._columns):
            for r in range(self.rows()):
                if fused:
                    result[c] = fma(col[r], vec[r], result[c])
                else:
                    result[c] += col[r] * vec[r]

        return Vector._wrap(result)

    def mul_mat(self, other: Matrix) -> Matrix:
        """
        Standard matrix product self @ other.

        The result is rows() x other.cols(). Real data accumulates with fused
        multiply-adds. O(rows * cols * other.cols).

        Raises:
            DimensionMismatchError: If cols() != other.rows()
        """
        if self.cols() != other.rows():
            raise DimensionMismatchError(
                f"mul_mat: left matrix has {self.cols()} columns but right matrix "
                f"has {other.rows()} rows",
                expected=self.cols(),
                actual=other.rows(),
            )

        dtype = np.result_type(self.dtype, other.dtype)
        fused = scalar_kind(dtype) is ScalarKind.REAL
        result = np.zeros((other.cols(), self.rows()), dtype=dtype)

        for c in range(other.cols()):
            for r in range(self.rows()):
                for k in range(self.cols()):
                    if fused:
                        result[c, r] = fma(self[k][r], other[c][k], result[c, r])
                    else:
                        result[c, r] += self[k][r] * other[c][k]

        return Matrix._from_rows(result.T)

    # --- Structure ---

    def trace(self) -> Any:
        """
        Sum of the main diagonal.

        Raises:
            NotSquareError: If the matrix is not square
        """
        check_square(self.shape(), "Trace")
        result = self.dtype.type(0)
        for i in range(self.cols()):
            result += self._columns[i][i]
        return result

    def transpose(self) -> Matrix:
        """New matrix with rows and columns exchanged."""
        return Matrix._from_rows(self._stacked_columns())

    def flatten(self) -> Vector:
        """All elements in storage (column-major) order."""
        if not self._columns:
            return Vector()
        return Vector._wrap(np.concatenate([col.to_numpy() for col in self._columns]))

    def __or__(self, other: Matrix) -> Matrix:
        """
        Horizontal concatenation: other's columns appended after self's.

        Raises:
            ShapeMismatchError: If the row counts differ
        """
        if not isinstance(other, Matrix):
            return NotImplemented
        if self.rows() != other.rows():
            raise ShapeMismatchError(
                f"Horizontal concatenation requires equal row counts, got "
                f"{self.rows()} and {other.rows()}",
                expected_shape=(self.rows(), other.cols()),
                actual_shape=other.shape(),
            )
        return Matrix.from_columns(self._columns + other._columns)

    # --- Elimination ---

    def row_echelon(self) -> Matrix:
        """
        Row echelon form, computed on a working copy.

        See pylinalg.matrix._elimination.row_echelon for the exact pivoting
        rules. O(rows * cols * min(rows, cols)).
        """
        return Matrix._from_rows(_elimination.row_echelon(self.to_numpy()).rows)

    def determinant(self) -> Any:
        """
        Determinant.

        1x1 and 2x2 use the closed forms; larger matrices use Gaussian
        elimination with zero-avoiding row swaps. O(n^3).

        Raises:
            NotSquareError: If the matrix is not square
        """
        check_square(self.shape(), "Determinant")
        if self.rows() == 1:
            return self._columns[0][0]
        if self.rows() == 2:
            a, b = self._columns
            return a[0] * b[1] - b[0] * a[1]
        return _elimination.determinant(self._stacked_columns()).value

    def inverse(self) -> Matrix:
        """
        Inverse by Gauss-Jordan elimination with magnitude pivoting. O(n^3).

        Raises:
            NotSquareError: If the matrix is not square
            SingularMatrixError: If the determinant is exactly zero, or a
                zero pivot is met during elimination
        """
        check_square(self.shape(), "Inverse")
        det = self.determinant()
        if det == 0:
            raise SingularMatrixError(
                "Matrix is singular and cannot be inverted",
                determinant=det,
            )
        return Matrix._from_rows(_elimination.gauss_jordan_inverse(self.to_numpy()).rows)

    def rank(self) -> int:
        """Number of rows of the row echelon form with a nonzero entry."""
        return _elimination.count_nonzero_rows(self.row_echelon().to_numpy())

    # --- Comparison and display ---

    def __eq__(self, other: object) -> bool:
        """Shapes equal and every element within MATRIX_EQUALITY.atol in magnitude."""
        if not isinstance(other, Matrix):
            return NotImplemented
        if self.shape() != other.shape():
            return False
        for col, other_col in zip(self._columns, other._columns):
            for a, b in zip(col, other_col):
                if magnitude(a - b) > MATRIX_EQUALITY.atol:
                    return False
        return True

    def __str__(self) -> str:
        rows = (
            str(Vector._wrap(np.array([col[r] for col in self._columns], dtype=self.dtype)))
            for r in range(self.rows())
        )
        return '{' + ', '.join(rows) + '}'

    def __repr__(self) -> str:
        return f"Matrix({self.to_numpy().tolist()!r})"


def _validated_rows(rows: Sequence[Any]) -> NDArray[Any]:
    """Row literals -> row-major 2-D array, rejecting ragged input."""
    if isinstance(rows, np.ndarray):
        data = check_array(rows, "rows")
        if data.ndim != 2:
            raise ValidationError(
                f"rows: expected 2D data, got {data.ndim}D with shape {data.shape}"
            )
        return data

    try:
        rows = [list(row) for row in rows]
    except TypeError as e:
        raise ValidationError(f"rows: expected a sequence of row sequences: {e}") from e
    if not rows:
        return np.zeros((0, 0))

    n_cols = len(rows[0])
    for i, row in enumerate(rows):
        if len(row) != n_cols:
            raise ShapeMismatchError(
                f"All rows must have the same size: row {i} has {len(row)} "
                f"elements, expected {n_cols}",
                expected_shape=(len(rows), n_cols),
                actual_shape=(len(rows), len(row)),
            )
    if n_cols == 0:
        return np.zeros((0, 0))

    data = check_array(rows, "rows")
    if data.ndim != 2:
        raise ValidationError(
            f"rows: expected 2D data, got {data.ndim}D with shape {data.shape}"
        )
    return data


def _columns_of(data: NDArray[Any]) -> list[Vector]:
    """Split a row-major 2-D array into independent column Vectors."""
    return [Vector._wrap(data[:, c].copy()) for c in range(data.shape[1])]
