"""
Input validation utilities for PyLinalg.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting,
resizing or broadcasting operands.

Design principles:
    - No silent type coercion (except integer -> float64 promotion)
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Operation names included in all error messages
"""

from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pylinalg.core.exceptions import (
    NotSquareError,
    ShapeMismatchError,
    SizeMismatchError,
    UnsupportedTypeError,
    ValidationError,
)
from pylinalg.core.scalar import ScalarKind


def check_array(values: ArrayLike, name: str) -> NDArray[Any]:
    """
    Validate and convert input to a numeric numpy array.

    Integer input is promoted to float64; floating and complex dtypes are
    preserved. The returned array never aliases the input.

    Args:
        values: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray with a floating or complex dtype

    Raises:
        ValidationError: If input cannot be converted to an array
        UnsupportedTypeError: If input is boolean or non-numeric
    """
    try:
        result = np.array(values)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise UnsupportedTypeError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data",
            dtype=result.dtype,
        )

    if result.dtype == np.bool_ or not np.issubdtype(result.dtype, np.number):
        raise UnsupportedTypeError(
            f"{name}: non-numeric dtype {result.dtype}, expected real or complex data",
            dtype=result.dtype,
        )

    if np.issubdtype(result.dtype, np.integer):
        result = result.astype(np.float64)

    return result


def check_1d(array: NDArray[Any], name: str) -> None:
    """
    Verify array is 1-dimensional.

    Raises:
        ValidationError: If array is not 1D
    """
    if array.ndim != 1:
        raise ValidationError(
            f"{name}: expected 1D data, got {array.ndim}D with shape {array.shape}"
        )


def check_size(size: Any, name: str) -> int:
    """
    Verify a requested container size is a non-negative integer.

    Raises:
        ValidationError: If size is not a non-negative integer
    """
    if isinstance(size, (bool, np.bool_)) or not isinstance(size, (int, np.integer)):
        raise ValidationError(f"{name}: expected an integer size, got {size!r}")
    if size < 0:
        raise ValidationError(f"{name}: size must be non-negative, got {size}")
    return int(size)


def check_same_size(expected: int, actual: int, operation: str) -> None:
    """
    Verify two vector lengths agree.

    Raises:
        SizeMismatchError: If the lengths differ
    """
    if expected != actual:
        raise SizeMismatchError(
            f"{operation}: vectors must have the same size, got {expected} and {actual}",
            expected=expected,
            actual=actual,
        )


def check_same_shape(
    expected: tuple[int, int],
    actual: tuple[int, int],
    operation: str
) -> None:
    """
    Verify two matrix shapes agree.

    Raises:
        ShapeMismatchError: If the shapes differ
    """
    if expected != actual:
        raise ShapeMismatchError(
            f"{operation}: matrices must have the same shape, got {expected} and {actual}",
            expected_shape=expected,
            actual_shape=actual,
        )


def check_square(shape: tuple[int, int], operation: str) -> None:
    """
    Verify a matrix shape is square.

    Raises:
        NotSquareError: If rows != cols
    """
    if shape[0] != shape[1]:
        raise NotSquareError(
            f"{operation} can only be computed on a square matrix, got shape {shape}",
            shape=shape,
        )


def check_writable(target: ScalarKind, source: ScalarKind, operation: str) -> None:
    """
    Verify values of kind `source` can be stored in a container of kind `target`.

    Raises:
        UnsupportedTypeError: If complex values would be written into real storage
    """
    if target is ScalarKind.REAL and source is ScalarKind.COMPLEX:
        raise UnsupportedTypeError(
            f"{operation}: cannot store complex values in a real container",
            dtype=complex,
        )
