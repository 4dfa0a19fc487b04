"""
Core infrastructure for PyLinalg.

This module provides the scalar abstraction, exception hierarchy, validators
and result envelope shared by the vector and matrix sub-packages.

Key components:
    scalar: Scalar kinds and kind-dependent arithmetic (magnitude, fma, muladd)
    exceptions: Exception hierarchy
    validation: Input validators
    result: Generic Result[P] envelope
    compute: Timing and tolerance tiers
"""

from pylinalg.core.result import Result
from pylinalg.core.scalar import ScalarKind, magnitude, real_dtype
from pylinalg.core.exceptions import (
    PyLinalgError,
    ValidationError,
    SizeMismatchError,
    ShapeMismatchError,
    DimensionMismatchError,
    NotSquareError,
    UnsupportedTypeError,
    NumericalError,
    SingularMatrixError,
    DegenerateInputError,
    DivisionByZeroError,
)

__all__ = [
    # Result
    "Result",
    # Scalar abstraction
    "ScalarKind",
    "magnitude",
    "real_dtype",
    # Exceptions
    "PyLinalgError",
    "ValidationError",
    "SizeMismatchError",
    "ShapeMismatchError",
    "DimensionMismatchError",
    "NotSquareError",
    "UnsupportedTypeError",
    "NumericalError",
    "SingularMatrixError",
    "DegenerateInputError",
    "DivisionByZeroError",
]
