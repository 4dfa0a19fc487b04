"""
Tests for analyze() and the EliminationSolution report.
"""

import numpy as np
import pytest

from pylinalg import Matrix, analyze
from pylinalg.core.exceptions import (
    NotSquareError,
    SingularMatrixError,
    ValidationError,
)
from pylinalg.matrix import EliminationParams, EliminationSolution


class TestDefaultCompute:

    def test_square_non_singular(self):
        sol = analyze(Matrix([[4, 7], [2, 6]]))
        assert isinstance(sol, EliminationSolution)
        assert sol.rank == 2
        assert sol.determinant == 10
        assert sol.is_singular is False
        assert sol.row_echelon == Matrix.identity(2)
        assert sol.inverse == Matrix([[0.6, -0.7], [-0.2, 0.4]])
        assert sol.warnings == ()

    def test_accepts_row_literals(self):
        sol = analyze([[1, 2], [2, 4]])
        assert sol.rank == 1
        assert sol.is_singular is True

    def test_singular_skips_inverse(self, singular_3x3):
        sol = analyze(singular_3x3)
        assert sol.determinant == 0
        assert sol.is_singular is True
        assert sol.inverse is None
        assert sol.rank == 2
        assert sol.info['determinant_row_swaps'] == 0
        assert 'inverse_row_swaps' not in sol.info

    def test_non_square_skips_determinant(self):
        sol = analyze(Matrix([[1, 2, 3], [2, 4, 6]]))
        assert sol.rank == 1
        assert sol.determinant is None
        assert sol.inverse is None
        assert sol.is_singular is None

    def test_matches_matrix_methods(self, well_conditioned):
        m = Matrix(well_conditioned)
        sol = analyze(m)
        assert sol.rank == m.rank()
        assert sol.row_echelon == m.row_echelon()
        assert sol.inverse == m.inverse()
        np.testing.assert_allclose(sol.determinant, m.determinant(), rtol=1e-14)

    def test_matrix_unchanged(self, well_conditioned):
        m = Matrix(well_conditioned)
        analyze(m)
        np.testing.assert_array_equal(m.to_numpy(), well_conditioned)


class TestExplicitCompute:

    def test_rank_only(self):
        sol = analyze(Matrix([[1, 2], [3, 4]]), compute=['rank'])
        assert sol.rank == 2
        assert sol.row_echelon is None
        assert sol.determinant is None
        assert sol.inverse is None

    def test_determinant_only(self):
        sol = analyze(Matrix([[0, 1, 0], [1, 0, 0], [0, 0, 1]]), compute=['determinant'])
        assert sol.determinant == -1
        assert sol.info['determinant_row_swaps'] == 1
        assert sol.rank is None
        assert sol.pivot_columns is None

    def test_single_name_string(self):
        sol = analyze(Matrix([[1, 2], [3, 4]]), compute='rank')
        assert sol.rank == 2
        assert sol.row_echelon is None

    def test_single_unknown_name_reported_whole(self):
        with pytest.raises(ValidationError, match=r"\['lu'\]"):
            analyze(Matrix([[1]]), compute='lu')

    def test_unknown_algorithm(self):
        with pytest.raises(ValidationError, match="Unknown algorithm"):
            analyze(Matrix([[1]]), compute=['lu'])

    def test_determinant_not_square(self):
        with pytest.raises(NotSquareError):
            analyze(Matrix([[1, 2, 3]]), compute=['determinant'])

    def test_inverse_singular(self, singular_3x3):
        with pytest.raises(SingularMatrixError):
            analyze(singular_3x3, compute=['inverse'])


class TestDiagnostics:

    def test_info(self):
        sol = analyze(Matrix([[1, 2], [2, 4]]))
        assert sol.info['shape'] == (2, 2)
        assert sol.info['kind'] == 'real'
        assert sol.pivot_columns == (0,)
        assert sol.info['row_swaps'] == 0
        assert sol.info['back_substituted'] is False

    def test_complex_kind(self, well_conditioned_complex):
        sol = analyze(Matrix(well_conditioned_complex))
        assert sol.info['kind'] == 'complex'
        np.testing.assert_allclose(sol.determinant, np.linalg.det(well_conditioned_complex),
                                   rtol=1e-10)

    def test_timing_sections(self):
        sol = analyze(Matrix([[4, 7], [2, 6]]))
        for key in ('total_seconds', 'row_echelon', 'rank', 'determinant', 'inverse'):
            assert key in sol.timing
            assert sol.timing[key] >= 0.0

    def test_pivot_ratio(self):
        sol = analyze(Matrix([[2, 0], [0, 1]]))
        assert sol.info['pivot_ratio'] == 0.5
        assert sol.info['inverse_row_swaps'] == 0

    def test_near_singular_warning_captured(self):
        with pytest.warns(RuntimeWarning, match="nearly singular"):
            sol = analyze(Matrix([[1.0, 0.0], [0.0, 1e-20]]))
        assert sol.result.has_warning("nearly singular")
        assert sol.inverse is not None

    def test_result_envelope(self):
        sol = analyze(Matrix([[1, 0], [0, 1]]))
        assert sol.result.algorithm == 'gaussian_elimination'
        assert isinstance(sol.result.params, EliminationParams)
        assert 'pylinalg_version' in sol.result.provenance


class TestReport:

    def test_summary(self):
        text = analyze(Matrix([[4, 7], [2, 6]])).summary()
        assert "2x2 real matrix" in text
        assert "Rank:" in text
        assert "Determinant:" in text
        assert "Inverse:" in text

    def test_summary_lists_warnings(self):
        with pytest.warns(RuntimeWarning):
            sol = analyze(Matrix([[1.0, 0.0], [0.0, 1e-20]]))
        assert "Warning: Matrix is nearly singular" in sol.summary()

    def test_repr(self):
        sol = analyze(Matrix([[1, 2, 3]]))
        assert repr(sol) == "EliminationSolution(shape=(1, 3), rank=1)"
