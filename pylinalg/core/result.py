"""
Generic result container for PyLinalg report-style computations.

The Result class is the envelope returned by multi-step APIs such as
pylinalg.matrix.analyze(). Plain Vector/Matrix methods return bare values;
the envelope exists for callers who also want timing, diagnostics and the
warnings raised along the way.

Design decisions:
    - Generic over parameter payload P for type safety
    - info dict for flexible metadata (pivots, row swaps, singularity)
    - timing is optional (don't burden unit tests)
    - Immutable (frozen=True) for reproducibility
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

import numpy as np

P = TypeVar('P')  # Parameter payload type


def _default_provenance() -> dict[str, str]:
    """Version metadata recorded on every Result."""
    from pylinalg import __version__
    return {
        'pylinalg_version': __version__,
        'numpy_version': np.__version__,
    }


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope for linear-algebra computations.

    Type Parameters:
        P: The parameter payload type

    Attributes:
        params: Computed values (echelon form, determinant, inverse, ...)
        info: Structured metadata (shape, pivots, row swaps, singularity)
        timing: Execution timing breakdown, or None if not measured
        algorithm: Identifier of the code path that produced this result
        warnings: Non-fatal issues encountered during computation
        provenance: Library versions that produced the result

    Examples:
        >>> Result(
        ...     params=EliminationParams(rank=2, determinant=-2.0),
        ...     info={'shape': (2, 2), 'row_swaps': 0},
        ...     timing={'total_seconds': 0.001, 'determinant': 0.0002},
        ...     algorithm='gaussian_elimination'
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    algorithm: str
    warnings: tuple[str, ...] = field(default_factory=tuple)
    provenance: dict[str, str] = field(default_factory=_default_provenance)

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)
