"""
Tolerance tiers for numerical comparison.

Defines the precision expectations that are not exact:
- MATRIX_EQUALITY: Matrix == (elimination results accumulate rounding error)
- NEAR_SINGULAR: pivot-ratio threshold below which inverse() warns

Zero pivots, zero determinants and Vector equality compare exactly.
"""

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


# Matrix equality: per-element magnitude of the difference
MATRIX_EQUALITY = ToleranceTier(
    rtol=0.0,
    atol=1e-5,
    name='matrix_equality',
    description='Absolute 1e-5 on per-element magnitude difference',
)

# Smallest/largest pivot magnitude ratio during Gauss-Jordan inversion.
# Below this, the inverse is returned but flagged as ill-conditioned.
NEAR_SINGULAR = ToleranceTier(
    rtol=float(np.finfo(np.float64).eps),
    atol=0.0,
    name='near_singular',
    description='Pivot ratio at float64 machine epsilon',
)
