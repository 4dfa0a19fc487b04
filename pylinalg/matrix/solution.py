"""
Elimination report types.

Contains the parameter payload and user-facing solution wrapper returned by
analyze().
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING

from pylinalg.core.result import Result

if TYPE_CHECKING:
    from pylinalg.matrix._matrix import Matrix


@dataclass(frozen=True)
class EliminationParams:
    """
    Parameter payload for an elimination report.

    Fields are None when the corresponding algorithm was not run (not
    requested, matrix not square, or matrix singular for the inverse).
    """
    row_echelon: Matrix | None = None
    rank: int | None = None
    determinant: Any = None
    inverse: Matrix | None = None


@dataclass
class EliminationSolution:
    """
    User-facing elimination report.

    Wraps Result[EliminationParams] and provides convenient accessors.
    """
    _result: Result[EliminationParams]
    _matrix: Matrix

    @property
    def row_echelon(self) -> Matrix | None:
        """Row echelon form of the analysed matrix."""
        return self._result.params.row_echelon

    @property
    def rank(self) -> int | None:
        return self._result.params.rank

    @property
    def determinant(self) -> Any:
        return self._result.params.determinant

    @property
    def inverse(self) -> Matrix | None:
        """Inverse, or None if not computed."""
        return self._result.params.inverse

    @property
    def is_singular(self) -> bool | None:
        """True/False once the determinant is known, else None."""
        return self._result.info.get('singular')

    @property
    def pivot_columns(self) -> tuple[int, ...] | None:
        """Lead column of each row echelon pivot row."""
        return self._result.info.get('pivot_columns')

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    @property
    def result(self) -> Result[EliminationParams]:
        """Underlying result envelope."""
        return self._result

    def summary(self) -> str:
        """Plain-text report of everything that was computed."""
        rows, cols = self._matrix.shape()
        lines = [
            f"Elimination report for {rows}x{cols} {self._result.info['kind']} matrix",
            "=" * 50,
        ]
        if self.rank is not None:
            lines.append(f"Rank:            {self.rank}")
        if self.determinant is not None:
            lines.append(f"Determinant:     {self.determinant}")
        if self.is_singular is not None:
            lines.append(f"Singular:        {self.is_singular}")
        if self.pivot_columns is not None:
            lines.append(f"Pivot columns:   {list(self.pivot_columns)}")
        if self.row_echelon is not None:
            lines.append(f"Row echelon:     {self.row_echelon}")
        if self.inverse is not None:
            lines.append(f"Inverse:         {self.inverse}")
        for w in self.warnings:
            lines.append(f"Warning: {w}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        rows, cols = self._matrix.shape()
        return f"EliminationSolution(shape=({rows}, {cols}), rank={self.rank})"
