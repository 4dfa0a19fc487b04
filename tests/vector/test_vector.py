"""
Tests for Vector construction, in-place arithmetic, reductions and reshape.
"""

import numpy as np
import pytest

from pylinalg import Vector
from pylinalg.core.exceptions import (
    DivisionByZeroError,
    ShapeMismatchError,
    SizeMismatchError,
    UnsupportedTypeError,
    ValidationError,
)
from pylinalg.core.scalar import ScalarKind


# ═══════════════════════════════════════════════════════════════════════
# Construction
# ═══════════════════════════════════════════════════════════════════════


class TestConstruction:

    def test_from_literal(self):
        v = Vector([1, 2, 3])
        assert v.size() == 3
        assert len(v) == 3
        assert v.kind is ScalarKind.REAL
        assert v.dtype == np.float64

    def test_zero_filled(self):
        v = Vector(4)
        np.testing.assert_array_equal(v.to_numpy(), np.zeros(4))

    def test_zero_filled_complex(self):
        v = Vector(2, dtype=complex)
        assert v.kind is ScalarKind.COMPLEX

    def test_default_is_empty(self):
        assert Vector().size() == 0

    def test_complex_literal(self):
        v = Vector([1 + 2j, 3])
        assert v.kind is ScalarKind.COMPLEX
        assert v[1] == 3

    def test_copy_constructor_is_independent(self):
        v = Vector([1.0, 2.0])
        w = Vector(v)
        w[0] = 10.0
        assert v[0] == 1.0

    def test_rejects_2d(self):
        with pytest.raises(ValidationError):
            Vector([[1, 2], [3, 4]])

    def test_rejects_float_scalar(self):
        with pytest.raises(ValidationError):
            Vector(5.0)

    def test_rejects_negative_size(self):
        with pytest.raises(ValidationError):
            Vector(-1)

    def test_rejects_strings(self):
        with pytest.raises(UnsupportedTypeError):
            Vector(["a", "b"])

    def test_rejects_booleans(self):
        with pytest.raises(UnsupportedTypeError):
            Vector([True, False])

    def test_complex_literal_into_real_dtype_rejected(self):
        with pytest.raises(UnsupportedTypeError):
            Vector([1 + 2j, 3j], dtype=np.float64)

    def test_complex_vector_into_real_dtype_rejected(self):
        with pytest.raises(UnsupportedTypeError):
            Vector(Vector([1 + 2j]), dtype=np.float64)

    def test_real_literal_widened_to_complex(self):
        v = Vector([1, 2], dtype=np.complex128)
        assert v.kind is ScalarKind.COMPLEX
        assert v == Vector([1 + 0j, 2 + 0j])

    def test_copy_with_dtype_is_independent(self):
        v = Vector([1.0, 2.0])
        w = Vector(v, dtype=np.float64)
        w[0] = 10.0
        assert v[0] == 1.0

    def test_integer_dtype_rejected(self):
        with pytest.raises(UnsupportedTypeError):
            Vector([1.0, 2.0], dtype=np.int64)


# ═══════════════════════════════════════════════════════════════════════
# Element access
# ═══════════════════════════════════════════════════════════════════════


class TestElementAccess:

    def test_negative_index(self):
        assert Vector([1, 2, 3])[-1] == 3

    def test_slice_returns_new_vector(self):
        v = Vector([1, 2, 3, 4])
        s = v[1:3]
        assert isinstance(s, Vector)
        assert s == Vector([2, 3])
        s[0] = 99
        assert v[1] == 2

    def test_assignment(self):
        v = Vector(3)
        v[1] = 5
        assert v == Vector([0, 5, 0])

    def test_complex_into_real_rejected(self):
        v = Vector([1.0, 2.0])
        with pytest.raises(UnsupportedTypeError):
            v[0] = 1j
        assert v == Vector([1.0, 2.0])

    def test_iteration(self):
        assert list(Vector([1, 2, 3])) == [1.0, 2.0, 3.0]

    def test_to_numpy_is_copy(self):
        v = Vector([1.0, 2.0])
        arr = v.to_numpy()
        arr[0] = 42.0
        assert v[0] == 1.0

    def test_unhashable(self):
        with pytest.raises(TypeError):
            hash(Vector([1.0]))


# ═══════════════════════════════════════════════════════════════════════
# In-place arithmetic
# ═══════════════════════════════════════════════════════════════════════


class TestArithmetic:

    def test_add(self):
        u = Vector([2, 3])
        result = u.add(Vector([5, 7]))
        assert result is None
        assert u == Vector([7, 10])

    def test_sub(self):
        u = Vector([2, 3])
        u.sub(Vector([5, 7]))
        assert u == Vector([-3, -4])

    def test_add_size_mismatch(self):
        """Adding length-3 and length-2 vectors fails and leaves the receiver alone."""
        u = Vector([1, 2, 3])
        with pytest.raises(SizeMismatchError):
            u.add(Vector([1, 2]))
        assert u == Vector([1, 2, 3])

    def test_sub_size_mismatch(self):
        with pytest.raises(SizeMismatchError):
            Vector([1, 2]).sub(Vector([1, 2, 3]))

    def test_add_complex_into_real_rejected(self):
        u = Vector([1.0, 2.0])
        with pytest.raises(UnsupportedTypeError):
            u.add(Vector([1j, 0]))
        assert u == Vector([1.0, 2.0])

    def test_add_real_into_complex(self):
        u = Vector([1j, 2])
        u.add(Vector([1.0, 1.0]))
        assert u == Vector([1 + 1j, 3])

    def test_scl(self):
        u = Vector([2, 3])
        u.scl(2.0)
        assert u == Vector([4, 6])

    def test_scl_round_trip(self):
        u = Vector([1.5, -2.25, 3.0])
        u.scl(2)
        u.scl(0.5)
        assert u == Vector([1.5, -2.25, 3.0])

    def test_scl_complex_on_real_rejected(self):
        with pytest.raises(UnsupportedTypeError):
            Vector([1.0]).scl(1j)

    def test_div(self):
        u = Vector([2, 4])
        u.div(2)
        assert u == Vector([1, 2])

    def test_div_by_zero(self):
        u = Vector([2, 4])
        with pytest.raises(DivisionByZeroError):
            u.div(0)
        assert u == Vector([2, 4])

    def test_add_sub_round_trip(self, rng):
        data = rng.standard_normal(6)
        u = Vector(data)
        v = Vector(rng.standard_normal(6))
        u.add(v)
        u.sub(v)
        np.testing.assert_allclose(u.to_numpy(), data, atol=1e-14)


# ═══════════════════════════════════════════════════════════════════════
# Reductions
# ═══════════════════════════════════════════════════════════════════════


class TestDot:

    def test_real(self):
        result = Vector([1, 2, 3]).dot(Vector([4, 5, 6]))
        assert result == 32
        assert isinstance(result, float)

    def test_orthogonal(self):
        assert Vector([1, 0]).dot(Vector([0, 1])) == 0.0

    def test_size_mismatch(self):
        with pytest.raises(SizeMismatchError):
            Vector([1, 2]).dot(Vector([1, 2, 3]))

    def test_complex_conjugates_left(self):
        u = Vector([1j, 1])
        assert u.dot(u) == 2
        assert isinstance(u.dot(u), complex)

    def test_conjugate_symmetry(self, rng):
        u = Vector(rng.standard_normal(5) + 1j * rng.standard_normal(5))
        v = Vector(rng.standard_normal(5) + 1j * rng.standard_normal(5))
        np.testing.assert_allclose(u.dot(v), np.conj(v.dot(u)), rtol=1e-14)

    def test_matches_numpy_vdot(self, rng):
        a = rng.standard_normal(7) + 1j * rng.standard_normal(7)
        b = rng.standard_normal(7) + 1j * rng.standard_normal(7)
        np.testing.assert_allclose(Vector(a).dot(Vector(b)), np.vdot(a, b), rtol=1e-12, atol=1e-13)


class TestNorms:

    def test_real_norms(self):
        v = Vector([-1, 2, -3])
        assert v.norm_1() == 6.0
        assert v.norm_inf() == 3.0
        np.testing.assert_allclose(v.norm(), np.sqrt(14.0), rtol=1e-15)

    def test_pythagorean(self):
        assert Vector([3, 4]).norm() == 5.0

    def test_complex_norms_are_real(self):
        v = Vector([3 + 4j, 1])
        assert v.norm_1() == 6.0
        assert v.norm_inf() == 5.0
        assert isinstance(v.norm(), float)
        np.testing.assert_allclose(v.norm(), np.sqrt(26.0), rtol=1e-15)

    def test_empty(self):
        v = Vector()
        assert v.norm_1() == 0.0
        assert v.norm() == 0.0
        assert v.norm_inf() == 0.0
        assert Vector(0, dtype=complex).norm_inf() == 0.0

    def test_norm_inf_returns_float(self):
        assert isinstance(Vector([1j, -2]).norm_inf(), float)
        assert Vector([1j, -2]).norm_inf() == 2.0

    def test_norm_ordering(self, rng):
        v = Vector(rng.standard_normal(10))
        assert v.norm_inf() <= v.norm() <= v.norm_1()

    def test_matches_numpy(self, rng):
        data = rng.standard_normal(8) + 1j * rng.standard_normal(8)
        v = Vector(data)
        np.testing.assert_allclose(v.norm(), np.linalg.norm(data), rtol=1e-13)
        np.testing.assert_allclose(v.norm_1(), np.linalg.norm(data, 1), rtol=1e-13)
        np.testing.assert_allclose(v.norm_inf(), np.linalg.norm(data, np.inf), rtol=1e-13)


# ═══════════════════════════════════════════════════════════════════════
# Reshape, equality, display
# ═══════════════════════════════════════════════════════════════════════


class TestReshape:

    def test_row_major_reading(self):
        m = Vector([1, 2, 3, 4, 5, 6]).reshape(2, 3)
        assert m.shape() == (2, 3)
        np.testing.assert_array_equal(m.to_numpy(), [[1, 2, 3], [4, 5, 6]])

    def test_single_column(self):
        m = Vector([1, 2, 3]).reshape(3, 1)
        np.testing.assert_array_equal(m.to_numpy(), [[1], [2], [3]])

    def test_mismatch(self):
        with pytest.raises(ShapeMismatchError):
            Vector([1, 2, 3]).reshape(2, 2)

    def test_result_is_independent(self):
        v = Vector([1, 2, 3, 4])
        m = v.reshape(2, 2)
        m[0][0] = 99
        assert v[0] == 1


class TestEqualityAndDisplay:

    def test_exact_equality(self):
        assert Vector([1, 2]) == Vector([1.0, 2.0])
        assert Vector([1, 2]) != Vector([1, 2 + 1e-12])

    def test_different_sizes_not_equal(self):
        assert Vector([1]) != Vector([1, 1])

    def test_str(self):
        assert str(Vector([1, 2.5, -3])) == "[1, 2.5, -3]"
        assert str(Vector()) == "[]"

    def test_repr(self):
        assert repr(Vector([1, 2])) == "Vector([1.0, 2.0])"
