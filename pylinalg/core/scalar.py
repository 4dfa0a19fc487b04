"""
Scalar abstraction shared by Vector and Matrix.

Every container holds a single scalar kind, resolved once from its numpy
dtype when the container is built:

    REAL     any numpy floating dtype (integers are promoted to float64)
    COMPLEX  any numpy complexfloating dtype

Anything else is rejected with UnsupportedTypeError at construction, so the
kernels below never see an unknown kind. Behaviour bifurcates on the kind in
exactly three places:

    magnitude()   |v| for REAL, sqrt(fma(re, re, im*im)) for COMPLEX
    real_dtype()  the dtype reductions (norms) accumulate in
    muladd()      fused multiply-add for REAL, conj(a)*b + acc for COMPLEX
"""

from __future__ import annotations

import math
from enum import Enum
from fractions import Fraction
from typing import Any

import numpy as np
from numpy.typing import DTypeLike

from pylinalg.core.exceptions import UnsupportedTypeError


class ScalarKind(Enum):
    """Closed set of supported scalar kinds."""
    REAL = 'real'
    COMPLEX = 'complex'


def scalar_kind(dtype: DTypeLike) -> ScalarKind:
    """
    Resolve the scalar kind of a storage dtype.

    Args:
        dtype: numpy dtype (or anything np.dtype accepts)

    Returns:
        ScalarKind.REAL or ScalarKind.COMPLEX

    Raises:
        UnsupportedTypeError: If the dtype is neither floating nor complex
    """
    dt = np.dtype(dtype)
    if np.issubdtype(dt, np.complexfloating):
        return ScalarKind.COMPLEX
    if np.issubdtype(dt, np.floating):
        return ScalarKind.REAL
    raise UnsupportedTypeError(
        f"Unsupported scalar dtype {dt}: expected a floating or complex dtype",
        dtype=dt,
    )


def combine_kinds(*kinds: ScalarKind) -> ScalarKind:
    """Kind of an operation mixing the given kinds (COMPLEX dominates)."""
    if ScalarKind.COMPLEX in kinds:
        return ScalarKind.COMPLEX
    return ScalarKind.REAL


def value_kind(value: Any) -> ScalarKind:
    """
    Resolve the scalar kind of a single Python or numpy scalar.

    Raises:
        UnsupportedTypeError: For booleans and non-numeric values
    """
    if isinstance(value, (bool, np.bool_)):
        raise UnsupportedTypeError(
            f"Boolean scalars are not supported: {value!r}", dtype=type(value)
        )
    if isinstance(value, (complex, np.complexfloating)):
        return ScalarKind.COMPLEX
    if isinstance(value, (int, float, np.integer, np.floating)):
        return ScalarKind.REAL
    raise UnsupportedTypeError(
        f"Cannot use value of type {type(value).__name__} as a scalar",
        dtype=type(value),
    )


def real_dtype(dtype: DTypeLike) -> np.dtype:
    """
    Dtype that reductions over the given storage dtype accumulate in.

    complex128 maps to float64, complex64 to float32; real dtypes map to
    themselves.
    """
    dt = np.dtype(dtype)
    scalar_kind(dt)
    return np.zeros(0, dtype=dt).real.dtype


def magnitude(value: Any) -> float:
    """
    Non-negative magnitude of a real or complex scalar.

    The complex branch evaluates sqrt(re*re + im*im) with the first product
    fused into the addition.

    Raises:
        UnsupportedTypeError: If value is neither real nor complex
    """
    if value_kind(value) is ScalarKind.COMPLEX:
        re = float(value.real)
        im = float(value.imag)
        return math.sqrt(fma(re, re, im * im))
    v = float(value)
    return -v if v < 0.0 else v


def _fma_exact(a: float, b: float, c: float) -> float:
    if not (math.isfinite(a) and math.isfinite(b) and math.isfinite(c)):
        return a * b + c
    exact = Fraction(a) * Fraction(b) + Fraction(c)
    try:
        return float(exact)
    except OverflowError:
        return math.inf if exact > 0 else -math.inf


_fma = getattr(math, 'fma', _fma_exact)


def fma(a: Any, b: Any, c: Any) -> float:
    """
    Fused multiply-add a*b + c with a single rounding.

    Uses math.fma where the interpreter provides it (3.13+), otherwise an
    exact rational evaluation rounded once.
    """
    return _fma(float(a), float(b), float(c))


def muladd(kind: ScalarKind, a: Any, b: Any, acc: Any) -> Any:
    """
    Conjugate-aware multiply-accumulate used by dot products.

    REAL:    fma(a, b, acc)
    COMPLEX: acc + conj(a) * b, unfused
    """
    if kind is ScalarKind.COMPLEX:
        return acc + np.conj(a) * b
    return fma(a, b, acc)
