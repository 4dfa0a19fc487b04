"""
Vector: fixed-length sequence of real or complex scalars.

Storage is a 1-D numpy array whose dtype fixes the scalar kind for the
lifetime of the vector. The length never changes after construction.

Mutators (add, sub, scl, div, item assignment) modify the receiver and
return None. Every other operation returns a new, independently owned value.
Preconditions are checked before any element is touched, so a failing
mutator leaves the receiver unchanged.
"""

from __future__ import annotations

from typing import Any, Iterator, TYPE_CHECKING

import numpy as np
from numpy.typing import ArrayLike, DTypeLike, NDArray

from pylinalg.core.exceptions import DivisionByZeroError, ShapeMismatchError
from pylinalg.core.scalar import (
    ScalarKind,
    combine_kinds,
    fma,
    magnitude,
    muladd,
    real_dtype,
    scalar_kind,
    value_kind,
)
from pylinalg.core.validation import (
    check_1d,
    check_array,
    check_same_size,
    check_size,
    check_writable,
)

if TYPE_CHECKING:
    from pylinalg.matrix import Matrix


def _format_scalar(value: Any) -> str:
    return format(value.item() if hasattr(value, 'item') else value, 'g')


class Vector:
    """
    Mathematical vector of n real or complex scalars.

    Construction:
        Vector(3)                    zero-filled, length 3, float64
        Vector(3, dtype=complex)     zero-filled complex
        Vector([1, 2, 3])            from a literal sequence
        Vector(other)                independent copy of another Vector
    """

    __slots__ = ('_data', '_kind')
    __hash__ = None  # mutable

    def __init__(
        self,
        values: int | ArrayLike | Vector = 0,
        *,
        dtype: DTypeLike | None = None
    ):
        if isinstance(values, Vector):
            data = values._data.copy()
        elif isinstance(values, (int, np.integer)) and not isinstance(values, (bool, np.bool_)):
            n = check_size(values, "size")
            data = np.zeros(n, dtype=np.float64 if dtype is None else dtype)
        else:
            data = check_array(values, "values")
            check_1d(data, "values")

        if dtype is not None and data.dtype != np.dtype(dtype):
            check_writable(scalar_kind(dtype), scalar_kind(data.dtype), "Vector")
            data = data.astype(dtype)

        self._kind = scalar_kind(data.dtype)
        self._data: NDArray[Any] = data

    @classmethod
    def _wrap(cls, data: NDArray[Any]) -> Vector:
        """Adopt an already-validated array without copying."""
        vec = cls.__new__(cls)
        vec._kind = scalar_kind(data.dtype)
        vec._data = data
        return vec

    # --- Introspection ---

    @property
    def kind(self) -> ScalarKind:
        """Scalar kind of the elements."""
        return self._kind

    @property
    def dtype(self) -> np.dtype:
        """Storage dtype."""
        return self._data.dtype

    def size(self) -> int:
        """Number of elements."""
        return self._data.shape[0]

    def __len__(self) -> int:
        return self._data.shape[0]

    def copy(self) -> Vector:
        """Independent copy."""
        return Vector._wrap(self._data.copy())

    def to_numpy(self) -> NDArray[Any]:
        """Independent numpy copy of the elements."""
        return self._data.copy()

    # --- Element access ---

    def __getitem__(self, index: int | slice) -> Any:
        if isinstance(index, slice):
            return Vector._wrap(self._data[index].copy())
        return self._data[index]

    def __setitem__(self, index: int, value: Any) -> None:
        check_writable(self._kind, value_kind(value), "Vector item assignment")
        self._data[index] = value

    def __iter__(self) -> Iterator[Any]:
        return iter(self._data)

    # --- In-place arithmetic ---

    def add(self, other: Vector) -> None:
        """
        Element-wise addition, in place.

        Raises:
            SizeMismatchError: If lengths differ
            UnsupportedTypeError: If other is complex and self is real
        """
        check_same_size(self.size(), other.size(), "add")
        check_writable(self._kind, other._kind, "add")
        self._data += other._data

    def sub(self, other: Vector) -> None:
        """
        Element-wise subtraction, in place.

        Raises:
            SizeMismatchError: If lengths differ
            UnsupportedTypeError: If other is complex and self is real
        """
        check_same_size(self.size(), other.size(), "sub")
        check_writable(self._kind, other._kind, "sub")
        self._data -= other._data

    def scl(self, scalar: Any) -> None:
        """Uniform scale, in place."""
        check_writable(self._kind, value_kind(scalar), "scl")
        self._data *= scalar

    def div(self, scalar: Any) -> None:
        """
        Uniform division, in place.

        Raises:
            DivisionByZeroError: If scalar is exactly zero
        """
        check_writable(self._kind, value_kind(scalar), "div")
        if scalar == 0:
            raise DivisionByZeroError("div: cannot divide a vector by zero")
        self._data /= scalar

    # --- Reductions ---

    def dot(self, other: Vector) -> float | complex:
        """
        Dot product.

        For complex operands the left operand is conjugated, so
        u.dot(v) == conj(v.dot(u)). Real operands accumulate with a fused
        multiply-add per element.

        Raises:
            SizeMismatchError: If lengths differ
        """
        check_same_size(self.size(), other.size(), "dot")
        kind = combine_kinds(self._kind, other._kind)

        acc = 0j if kind is ScalarKind.COMPLEX else 0.0
        for a, b in zip(self._data, other._data):
            acc = muladd(kind, a, b, acc)

        if kind is ScalarKind.COMPLEX:
            return complex(acc)
        return float(acc)

    def norm_1(self) -> float:
        """Manhattan norm: sum of element magnitudes."""
        acc = real_dtype(self.dtype).type(0)
        for x in self._data:
            acc += magnitude(x)
        return float(acc)

    def norm(self) -> float:
        """Euclidean norm, accumulated as fma(|x|, |x|, acc)."""
        acc = 0.0
        for x in self._data:
            m = magnitude(x)
            acc = fma(m, m, acc)
        return float(np.sqrt(acc))

    def norm_inf(self) -> float:
        """Supremum norm: largest element magnitude."""
        return float(np.abs(self._data).max(initial=0.0))

    # --- Conversion ---

    def reshape(self, rows: int, cols: int) -> Matrix:
        """
        Reshape into a rows x cols Matrix.

        Consecutive runs of `cols` elements become the matrix rows, in order.

        Raises:
            ShapeMismatchError: If rows * cols != size()
        """
        from pylinalg.matrix import Matrix

        rows = check_size(rows, "rows")
        cols = check_size(cols, "cols")
        if rows * cols != self.size():
            raise ShapeMismatchError(
                f"reshape: cannot reshape vector of size {self.size()} "
                f"into ({rows}, {cols})",
                expected_shape=(rows, cols),
                actual_shape=(self.size(), 1),
            )
        # Row-major reading: column c holds every cols-th element from c.
        return Matrix.from_columns(
            [Vector._wrap(self._data[c::cols].copy()) for c in range(cols)]
        )

    # --- Comparison and display ---

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return self.size() == other.size() and bool(np.all(self._data == other._data))

    def __str__(self) -> str:
        return '[' + ', '.join(_format_scalar(x) for x in self._data) + ']'

    def __repr__(self) -> str:
        return f"Vector({self._data.tolist()!r})"
