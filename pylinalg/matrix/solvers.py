"""
Solver dispatch for elimination reports.

Provides analyze() as a one-shot entry point running the elimination
algorithms on a matrix and returning their values together with pivot
diagnostics, per-algorithm timing and any warnings raised.
"""

from __future__ import annotations

import warnings
from typing import Iterable, Literal

from numpy.typing import ArrayLike

from pylinalg.core.compute.timing import Timer
from pylinalg.core.exceptions import SingularMatrixError, ValidationError
from pylinalg.core.result import Result
from pylinalg.core.validation import check_square
from pylinalg.matrix import _elimination
from pylinalg.matrix._matrix import Matrix
from pylinalg.matrix.solution import EliminationParams, EliminationSolution


Algorithm = Literal['row_echelon', 'rank', 'determinant', 'inverse']

ALL_ALGORITHMS = frozenset({'row_echelon', 'rank', 'determinant', 'inverse'})


def _ensure_matrix(data: ArrayLike | Matrix) -> Matrix:
    """Convert row literals to Matrix if needed."""
    if isinstance(data, Matrix):
        return data
    return Matrix(data)


def _requested(matrix: Matrix, compute: Algorithm | Iterable[Algorithm] | None) -> set[str]:
    if compute is None:
        requested = {'row_echelon', 'rank'}
        if matrix.is_square():
            requested |= {'determinant', 'inverse'}
        return requested

    if isinstance(compute, str):
        compute = (compute,)
    requested = set(compute)
    unknown = requested - ALL_ALGORITHMS
    if unknown:
        raise ValidationError(
            f"Unknown algorithm(s): {sorted(unknown)}. "
            f"Must be drawn from {sorted(ALL_ALGORITHMS)}."
        )
    if requested & {'determinant', 'inverse'}:
        check_square(matrix.shape(), "Determinant/inverse")
    return requested


def analyze(
    data: ArrayLike | Matrix,
    *,
    compute: Algorithm | Iterable[Algorithm] | None = None,
) -> EliminationSolution:
    """
    Run elimination algorithms on a matrix and report the results.

    The matrix is never modified.

    Parameters
    ----------
    data : Matrix or row literals
        Matrix to analyse.
    compute : str or iterable of str, optional
        Any of 'row_echelon', 'rank', 'determinant', 'inverse'. By default
        row echelon form and rank are always computed, the determinant for
        square matrices, and the inverse for square non-singular matrices.

    Returns
    -------
    EliminationSolution

    Raises
    ------
    ValidationError
        If compute names an unknown algorithm.
    NotSquareError
        If determinant or inverse is explicitly requested for a non-square
        matrix.
    SingularMatrixError
        If inverse is explicitly requested for a singular matrix.
    """
    matrix = _ensure_matrix(data)
    explicit = compute is not None
    requested = _requested(matrix, compute)

    timer = Timer()
    timer.start()

    info: dict = {'shape': matrix.shape(), 'kind': matrix.kind.value}
    row_echelon = None
    rank = None
    determinant = None
    inverse = None

    with warnings.catch_warnings(record=True) as caught:
        warnings.simplefilter('always')

        if requested & {'row_echelon', 'rank'}:
            with timer.section('row_echelon'):
                echelon = _elimination.row_echelon(matrix.to_numpy())
            info['pivot_columns'] = echelon.pivot_columns
            info['row_swaps'] = echelon.row_swaps
            info['back_substituted'] = echelon.back_substituted

            if 'row_echelon' in requested:
                row_echelon = Matrix._from_rows(echelon.rows)
            if 'rank' in requested:
                with timer.section('rank'):
                    rank = _elimination.count_nonzero_rows(echelon.rows)

        if requested & {'determinant', 'inverse'}:
            with timer.section('determinant'):
                if matrix.rows() > 2:
                    det_trace = _elimination.determinant(matrix._stacked_columns())
                    determinant = det_trace.value
                    info['determinant_row_swaps'] = det_trace.row_swaps
                else:
                    determinant = matrix.determinant()
            info['singular'] = bool(determinant == 0)

        if 'inverse' in requested:
            if info['singular']:
                if explicit:
                    raise SingularMatrixError(
                        "Matrix is singular and cannot be inverted",
                        determinant=determinant,
                    )
            else:
                with timer.section('inverse'):
                    inv_trace = _elimination.gauss_jordan_inverse(matrix.to_numpy())
                inverse = Matrix._from_rows(inv_trace.rows)
                info['inverse_row_swaps'] = inv_trace.row_swaps
                info['pivot_ratio'] = (
                    inv_trace.min_pivot / inv_trace.max_pivot if inv_trace.max_pivot else None
                )

    timer.stop()

    for w in caught:
        warnings.warn(w.message, w.category, stacklevel=2)

    result = Result(
        params=EliminationParams(
            row_echelon=row_echelon,
            rank=rank,
            determinant=determinant,
            inverse=inverse,
        ),
        info=info,
        timing=timer.result(),
        algorithm='gaussian_elimination',
        warnings=tuple(str(w.message) for w in caught),
    )

    return EliminationSolution(_result=result, _matrix=matrix)
