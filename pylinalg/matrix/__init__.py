"""
Matrix module.

Public API:
    Matrix             - dense real/complex matrix stored by column
    analyze(matrix)    - row echelon form, rank, determinant and inverse in
                         one report with pivot diagnostics and timing
"""

from pylinalg.matrix._matrix import Matrix
from pylinalg.matrix.solution import EliminationParams, EliminationSolution
from pylinalg.matrix.solvers import analyze

__all__ = [
    "Matrix",
    "analyze",
    "EliminationParams",
    "EliminationSolution",
]
