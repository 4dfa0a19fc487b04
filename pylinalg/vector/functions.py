"""
Free functions over vectors.

All four return new vectors (or scalars) and never modify their inputs.
Real-valued paths use a fused multiply-add per element so that each output
element is rounded once per accumulation step.
"""

from __future__ import annotations

from typing import Any, Sequence

import numpy as np

from pylinalg.core.exceptions import (
    DegenerateInputError,
    DimensionMismatchError,
    SizeMismatchError,
    UnsupportedTypeError,
)
from pylinalg.core.scalar import ScalarKind, combine_kinds, fma, value_kind
from pylinalg.core.validation import check_same_size
from pylinalg.vector._vector import Vector


def _result_dtype(vectors: Sequence[Vector], scalars: Sequence[Any]) -> np.dtype:
    dtypes = [v.dtype for v in vectors]
    dtypes += [np.complex128 if value_kind(s) is ScalarKind.COMPLEX else np.float64
               for s in scalars]
    return np.result_type(*dtypes) if dtypes else np.dtype(np.float64)


def linear_combination(vectors: Sequence[Vector], scalars: Sequence[Any]) -> Vector:
    """
    Compute sum_i scalars[i] * vectors[i].

    Terms are accumulated left to right, one fused multiply-add per element
    per term for real data.

    Args:
        vectors: Vectors of equal length
        scalars: One coefficient per vector

    Returns:
        New Vector; empty input yields an empty Vector

    Raises:
        SizeMismatchError: If the lists differ in length, or the vectors do
    """
    vectors = list(vectors)
    scalars = list(scalars)
    if len(vectors) != len(scalars):
        raise SizeMismatchError(
            f"linear_combination: got {len(vectors)} vectors and {len(scalars)} scalars",
            expected=len(vectors),
            actual=len(scalars),
        )
    if not vectors:
        return Vector()

    n = vectors[0].size()
    for vec in vectors:
        check_same_size(n, vec.size(), "linear_combination")

    dtype = _result_dtype(vectors, scalars)
    result = np.zeros(n, dtype=dtype)
    fused = combine_kinds(*(value_kind(s) for s in scalars),
                          *(v.kind for v in vectors)) is ScalarKind.REAL

    for scalar, vec in zip(scalars, vectors):
        for j in range(n):
            if fused:
                result[j] = fma(scalar, vec[j], result[j])
            else:
                result[j] = scalar * vec[j] + result[j]

    return Vector._wrap(result)


def lerp(u: Vector, v: Vector, t: Any) -> Vector:
    """
    Linear interpolation u + t * (v - u).

    t is not clamped: values outside [0, 1] extrapolate.

    Raises:
        SizeMismatchError: If u and v differ in length
    """
    check_same_size(u.size(), v.size(), "lerp")

    dtype = _result_dtype([u, v], [t])
    result = np.zeros(u.size(), dtype=dtype)
    fused = combine_kinds(u.kind, v.kind, value_kind(t)) is ScalarKind.REAL

    for i in range(u.size()):
        if fused:
            result[i] = fma(t, v[i] - u[i], u[i])
        else:
            result[i] = t * (v[i] - u[i]) + u[i]

    return Vector._wrap(result)


def angle_cos(u: Vector, v: Vector) -> float | complex:
    """
    Cosine of the angle between u and v: dot(u, v) / (|u| * |v|).

    Raises:
        SizeMismatchError: If u and v differ in length
        DegenerateInputError: If either vector has zero Euclidean norm
    """
    check_same_size(u.size(), v.size(), "angle_cos")

    u_norm = u.norm()
    v_norm = v.norm()
    if u_norm == 0 or v_norm == 0:
        raise DegenerateInputError(
            "angle_cos: cannot compute an angle with a zero-length vector"
        )

    return u.dot(v) / (u_norm * v_norm)


def cross_product(u: Vector, v: Vector) -> Vector:
    """
    Right-hand-rule cross product of two real 3-vectors.

    Each component is a single fused multiply-add against the negated
    cross term, e.g. r0 = fma(u1, v2, -(u2 * v1)).

    Raises:
        UnsupportedTypeError: If either vector is complex
        SizeMismatchError: If u and v differ in length
        DimensionMismatchError: If the vectors are not 3-dimensional
    """
    if combine_kinds(u.kind, v.kind) is ScalarKind.COMPLEX:
        raise UnsupportedTypeError(
            "cross_product is only defined for real-valued vectors",
            dtype=np.result_type(u.dtype, v.dtype),
        )
    check_same_size(u.size(), v.size(), "cross_product")
    if u.size() != 3:
        raise DimensionMismatchError(
            f"cross_product: vectors must be 3-dimensional, got {u.size()}",
            expected=3,
            actual=u.size(),
        )

    result = np.empty(3, dtype=np.result_type(u.dtype, v.dtype))
    result[0] = fma(u[1], v[2], -(u[2] * v[1]))
    result[1] = fma(u[2], v[0], -(u[0] * v[2]))
    result[2] = fma(u[0], v[1], -(u[1] * v[0]))

    return Vector._wrap(result)
