"""
Gaussian elimination kernels.

Each kernel takes a numpy working copy it is free to overwrite and returns a
frozen trace of what it did. Matrix methods unwrap the traces; analyze()
reports them.

Pivoting differs between kernels:
    row_echelon   first nonzero entry in the lead column, no magnitude test
    determinant   swap only to avoid an exactly-zero pivot
    inverse       largest-magnitude entry in the pivot column
All zero tests are exact.
"""

from __future__ import annotations

import warnings
from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import NDArray

from pylinalg.core.compute.tolerances import NEAR_SINGULAR
from pylinalg.core.exceptions import SingularMatrixError
from pylinalg.core.scalar import ScalarKind, fma, magnitude, scalar_kind


@dataclass(frozen=True)
class EchelonForm:
    """
    Row echelon reduction trace.

    Attributes:
        rows: Reduced matrix, row-major (rows x cols)
        pivot_columns: Lead column of each pivot row, top to bottom
        row_swaps: Number of row exchanges performed
        back_substituted: False when the forward pass ran out of columns
            and returned before back-substitution
    """
    rows: NDArray[Any]
    pivot_columns: tuple[int, ...]
    row_swaps: int
    back_substituted: bool


@dataclass(frozen=True)
class DeterminantTrace:
    """Determinant value and the number of swaps that set its sign."""
    value: Any
    row_swaps: int


@dataclass(frozen=True)
class InverseTrace:
    """
    Gauss-Jordan inversion trace.

    Attributes:
        rows: Inverse, row-major (n x n)
        row_swaps: Number of row exchanges performed
        min_pivot: Smallest pivot magnitude met
        max_pivot: Largest pivot magnitude met
    """
    rows: NDArray[Any]
    row_swaps: int
    min_pivot: float
    max_pivot: float


def row_echelon(a: NDArray[Any]) -> EchelonForm:
    """
    Reduce a row-major working array to row echelon form, in place.

    Forward pass: for each row r, scan down the lead column from r for the
    first nonzero entry; when the column is exhausted move the lead one
    column right and rescan. Running out of columns ends the reduction
    immediately, skipping back-substitution. When the pivot is found at row
    i > r, row r is exchanged with row i - 1 (not row i), so i == r + 1
    moves nothing and is not counted as a swap. The pivot row is divided by
    its lead entry when that entry is nonzero, and the lead column is
    cleared below it.

    Back pass: every nonzero row, bottom to top, clears the column of its
    first nonzero entry in all rows above.

    O(rows * cols * min(rows, cols)).
    """
    n_rows, n_cols = a.shape
    lead = 0
    swaps = 0
    pivots: list[int] = []

    for r in range(n_rows):
        if lead >= n_cols:
            break

        i = r
        while a[i, lead] == 0:
            i += 1
            if i == n_rows:
                i = r
                lead += 1
                if lead == n_cols:
                    return EchelonForm(a, tuple(pivots), swaps, False)

        if i > r + 1:
            a[[r, i - 1]] = a[[i - 1, r]]
            swaps += 1

        pivot = a[r, lead]
        if pivot != 0:
            a[r] /= pivot

        for j in range(r + 1, n_rows):
            a[j] -= a[j, lead] * a[r]

        pivots.append(lead)
        lead += 1

    for r in range(n_rows - 1, -1, -1):
        nonzero = np.flatnonzero(a[r])
        if nonzero.size == 0:
            continue
        pivot_col = nonzero[0]
        for i in range(r - 1, -1, -1):
            a[i] -= a[i, pivot_col] * a[r]

    return EchelonForm(a, tuple(pivots), swaps, True)


def count_nonzero_rows(a: NDArray[Any]) -> int:
    """Rows of a row-major array holding at least one exactly-nonzero entry."""
    return int(np.count_nonzero(np.any(a != 0, axis=1)))


def determinant(work: NDArray[Any]) -> DeterminantTrace:
    """
    Determinant of a square working array by Gaussian elimination, in place.

    `work` holds the matrix columns as its rows; since det(A) == det(A.T)
    the elimination runs directly over that layout. When the diagonal entry
    is exactly zero the first later line with a nonzero entry in that
    position is swapped up; if none exists the determinant is exactly zero.
    Pivots are not normalised. Real data eliminates with fused multiply-adds.

    O(n^3).
    """
    n = work.shape[0]
    dtype = work.dtype
    fused = scalar_kind(dtype) is ScalarKind.REAL
    swaps = 0

    for i in range(n):
        if work[i, i] == 0:
            for j in range(i + 1, n):
                if work[j, i] != 0:
                    work[[i, j]] = work[[j, i]]
                    swaps += 1
                    break
            else:
                return DeterminantTrace(dtype.type(0), swaps)

        for j in range(i + 1, n):
            factor = work[j, i] / work[i, i]
            for k in range(i, n):
                if fused:
                    work[j, k] = fma(-factor, work[i, k], work[j, k])
                else:
                    work[j, k] -= factor * work[i, k]

    det = dtype.type(1 if swaps % 2 == 0 else -1)
    for i in range(n):
        det *= work[i, i]

    return DeterminantTrace(det, swaps)


def gauss_jordan_inverse(a: NDArray[Any]) -> InverseTrace:
    """
    Invert a square row-major array by Gauss-Jordan elimination on [A | I].

    Each step selects, among the remaining rows, the one with the largest
    pivot-column magnitude, normalises it, and clears the pivot column in
    every other row above and below.

    Emits a RuntimeWarning when the smallest/largest pivot magnitude ratio
    falls below the NEAR_SINGULAR tolerance.

    Raises:
        SingularMatrixError: If a pivot is exactly zero

    O(n^3).
    """
    n = a.shape[0]
    aug = np.concatenate([a, np.eye(n, dtype=a.dtype)], axis=1)
    swaps = 0
    pivot_magnitudes: list[float] = []

    for i in range(n):
        pivot_row = i
        for j in range(i, n):
            if magnitude(aug[j, i]) > magnitude(aug[pivot_row, i]):
                pivot_row = j

        if pivot_row != i:
            aug[[i, pivot_row]] = aug[[pivot_row, i]]
            swaps += 1

        pivot = aug[i, i]
        if pivot == 0:
            raise SingularMatrixError(
                f"Matrix is singular: zero pivot at elimination step {i}",
                pivot_index=i,
            )
        pivot_magnitudes.append(magnitude(pivot))

        aug[i] /= pivot
        for r in range(n):
            if r == i:
                continue
            aug[r] -= aug[r, i] * aug[i]

    min_pivot = min(pivot_magnitudes, default=0.0)
    max_pivot = max(pivot_magnitudes, default=0.0)
    if max_pivot and min_pivot / max_pivot < NEAR_SINGULAR.rtol:
        warnings.warn(
            f"Matrix is nearly singular (pivot ratio {min_pivot / max_pivot:.3e}); "
            f"the inverse may be inaccurate",
            RuntimeWarning,
            stacklevel=3,
        )

    return InverseTrace(aug[:, n:].copy(), swaps, min_pivot, max_pivot)
