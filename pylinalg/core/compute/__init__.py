"""
Shared compute infrastructure for PyLinalg.

Submodules:
    timing: Execution timing utilities
    tolerances: Tolerance tiers for numerical comparison
"""

from pylinalg.core.compute.timing import Timer
from pylinalg.core.compute.tolerances import (
    MATRIX_EQUALITY,
    NEAR_SINGULAR,
    ToleranceTier,
)

__all__ = [
    # Timing
    "Timer",
    # Tolerances
    "ToleranceTier",
    "MATRIX_EQUALITY",
    "NEAR_SINGULAR",
]
