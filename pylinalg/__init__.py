"""
PyLinalg: dense linear algebra over real and complex scalars.

A small kernel of vector and matrix value types with the classic operations:
arithmetic, norms, dot/cross products, linear combination and interpolation,
and the Gaussian-elimination family (row echelon form, determinant, inverse,
rank).

Submodules:
    vector: Vector type and free vector functions
    matrix: Matrix type and the analyze() elimination report
    core: Scalar abstraction, exceptions, validation, result envelope
"""

__version__ = "0.1.0"

from pylinalg.vector import (
    Vector,
    angle_cos,
    cross_product,
    lerp,
    linear_combination,
)
from pylinalg.matrix import Matrix, analyze
from pylinalg.core.scalar import ScalarKind

__all__ = [
    "__version__",
    "Vector",
    "Matrix",
    "ScalarKind",
    "linear_combination",
    "lerp",
    "angle_cos",
    "cross_product",
    "analyze",
]
