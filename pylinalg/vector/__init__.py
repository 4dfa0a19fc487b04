"""
Vector module.

Public API:
    Vector                          - fixed-length real/complex vector
    linear_combination(vs, scalars) - sum of scaled vectors
    lerp(u, v, t)                   - linear interpolation
    angle_cos(u, v)                 - cosine of the angle between two vectors
    cross_product(u, v)             - 3D cross product (real only)
"""

from pylinalg.vector._vector import Vector
from pylinalg.vector.functions import (
    angle_cos,
    cross_product,
    lerp,
    linear_combination,
)

__all__ = [
    "Vector",
    "linear_combination",
    "lerp",
    "angle_cos",
    "cross_product",
]
