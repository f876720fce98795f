"""Tests for Vector3 and VectorX.

Tests cover:
- Construction, field access and flattening
- Arithmetic and size checks
- Planar and signed angles
- Exact vs approximate equality
"""

import math

import numpy as np
import pytest

from geocore import SizeMismatchError, Vector3, VectorX


class TestVector3Basics:
    """Test Vector3 construction and access."""

    def test_default_is_zero(self):
        """Test default constructor gives the zero vector."""
        assert Vector3() == Vector3.zero()
        assert Vector3().to_list() == [0.0, 0.0, 0.0]

    def test_unit_vectors(self):
        """Test unit vector factories."""
        assert Vector3.unit_x().to_list() == [1.0, 0.0, 0.0]
        assert Vector3.unit_y().to_list() == [0.0, 1.0, 0.0]
        assert Vector3.unit_z().to_list() == [0.0, 0.0, 1.0]

    def test_field_and_index_access(self):
        """Test named fields and indices address the same storage."""
        v = Vector3(1, 2, 3)
        assert (v.x, v.y, v.z) == (1.0, 2.0, 3.0)
        v[1] = 5
        assert v.y == 5.0
        v.z = -1
        assert v[2] == -1.0

    def test_data_property(self):
        """Test data getter and setter."""
        v = Vector3()
        v.data = [4, 5, 6]
        assert v.data == [4.0, 5.0, 6.0]

    def test_from_array_rejects_wrong_length(self):
        """Test from_array requires exactly three values."""
        assert Vector3.from_array([1, 2, 3]) == Vector3(1, 2, 3)
        with pytest.raises(SizeMismatchError, match="exactly 3"):
            Vector3.from_array([1, 2])
        with pytest.raises(SizeMismatchError):
            Vector3().assign([1, 2, 3, 4])

    def test_size_mismatch_is_value_error(self):
        """Test SizeMismatchError can be caught as ValueError."""
        with pytest.raises(ValueError):
            Vector3.from_array([])

    def test_to_numpy_is_a_copy(self):
        """Test to_numpy does not expose internal storage."""
        v = Vector3(1, 2, 3)
        arr = v.to_numpy()
        arr[0] = 100
        assert v.x == 1.0

    def test_copy_is_independent(self):
        """Test copy creates an independent vector."""
        v = Vector3(1, 2, 3)
        c = v.copy()
        c.x = 7
        assert v.x == 1.0


class TestVector3Arithmetic:
    """Test Vector3 operators."""

    def test_add_sub_neg(self):
        """Test componentwise operators."""
        a = Vector3(1, 2, 3)
        b = Vector3(4, 5, 6)
        assert a + b == Vector3(5, 7, 9)
        assert b - a == Vector3(3, 3, 3)
        assert -a == Vector3(-1, -2, -3)

    def test_scalar_multiply_both_sides(self):
        """Test scalar multiplication from the left and the right."""
        v = Vector3(1, 2, 3)
        assert v * 2 == Vector3(2, 4, 6)
        assert 2 * v == Vector3(2, 4, 6)
        assert v / 2 == Vector3(0.5, 1, 1.5)

    def test_unsupported_operand(self):
        """Test multiplying by a non-scalar raises TypeError."""
        with pytest.raises(TypeError):
            Vector3(1, 2, 3) * object()
        with pytest.raises(TypeError):
            Vector3(1, 2, 3) * Vector3(1, 2, 3)

    def test_dot_cross_norm(self):
        """Test dot, cross and norm."""
        a = Vector3(1, 2, 3)
        b = Vector3(4, 5, 6)
        assert a.dot(b) == 32.0
        assert Vector3.unit_x().cross(Vector3.unit_y()) == Vector3.unit_z()
        assert Vector3(3, 4, 0).norm() == 5.0

    def test_normalize_vs_normalize_inplace(self):
        """Test normalize returns a new vector and normalize_inplace mutates."""
        v = Vector3(3, 4, 0)
        n = v.normalize()
        assert n.approx(Vector3(0.6, 0.8, 0))
        assert v == Vector3(3, 4, 0)
        v.normalize_inplace()
        assert v.approx(Vector3(0.6, 0.8, 0))


class TestVector3Angles:
    """Test angle_to and signed_angle_to."""

    def test_angle_to_quarter_turn(self):
        """Test planar angle between X and Y."""
        assert Vector3.unit_x().angle_to(Vector3.unit_y()) == pytest.approx(math.pi / 2)
        assert Vector3.unit_y().angle_to(Vector3.unit_x()) == pytest.approx(-math.pi / 2)

    def test_angle_to_wraps(self):
        """Test the result is brought back into (-pi, pi]."""
        a = Vector3(-1, -1, 0)
        b = Vector3(-1, 1, 0)
        assert a.angle_to(b) == pytest.approx(-math.pi / 2)
        assert b.angle_to(a) == pytest.approx(math.pi / 2)

    def test_signed_angle_sign_follows_axis(self):
        """Test the sign depends on the reference axis."""
        x, y = Vector3.unit_x(), Vector3.unit_y()
        assert x.signed_angle_to(y, Vector3.unit_z()) == pytest.approx(math.pi / 2)
        assert x.signed_angle_to(y, -Vector3.unit_z()) == pytest.approx(-math.pi / 2)

    def test_signed_angle_clamps_acos(self):
        """Test parallel vectors do not push acos out of its domain."""
        v = Vector3(0.1, 0.2, 0.3)
        angle = v.signed_angle_to(v * 3.0, Vector3.unit_z())
        assert abs(angle) < 1e-7
        angle = v.signed_angle_to(v * -7.0, Vector3.unit_z())
        assert abs(abs(angle) - math.pi) < 1e-7


class TestVector3Equality:
    """Test exact and approximate equality."""

    def test_exact_equality(self):
        """Test == is exact per field."""
        assert Vector3(1, 2, 3) == Vector3(1, 2, 3)
        assert Vector3(1, 2, 3) != Vector3(1, 2, 3 + 1e-15)

    def test_approx(self):
        """Test approx uses an absolute per-field tolerance."""
        a = Vector3(1, 2, 3)
        assert a.approx(Vector3(1, 2, 3 + 1e-13))
        assert not a.approx(Vector3(1, 2, 3.1))
        assert a.approx(Vector3(1, 2, 3.1), 0.2)

    def test_approx_rejects_negative_tolerance(self):
        """Test a negative tolerance is rejected."""
        with pytest.raises(ValueError, match="below minimum"):
            Vector3().approx(Vector3(), -1.0)

    def test_unhashable(self):
        """Test mutable vectors are unhashable."""
        with pytest.raises(TypeError):
            hash(Vector3())


class TestVectorX:
    """Test VectorX."""

    def test_default_is_empty(self):
        """Test default construction gives an empty vector."""
        assert VectorX().size == 0
        assert VectorX(3).to_list() == [0.0, 0.0, 0.0]

    def test_from_array_sizes_to_input(self):
        """Test from_array and assign resize to the input length."""
        v = VectorX.from_array([1, 2, 3, 4])
        assert v.size == 4
        v.assign([5, 6])
        assert v.to_list() == [5.0, 6.0]

    def test_resize_discards_contents(self):
        """Test resize gives a zero-filled vector."""
        v = VectorX.from_array([1, 2, 3])
        v.resize(5)
        assert v.to_list() == [0.0] * 5

    def test_conservative_resize_keeps_contents(self):
        """Test conservative_resize keeps the leading values."""
        v = VectorX.from_array([1, 2, 3])
        v.conservative_resize(5)
        assert v.to_list() == [1.0, 2.0, 3.0, 0.0, 0.0]
        v.conservative_resize(2)
        assert v.to_list() == [1.0, 2.0]

    def test_arithmetic(self):
        """Test elementwise arithmetic and dot."""
        a = VectorX.from_array([1, 2, 3, 4])
        b = VectorX.from_array([4, 3, 2, 1])
        assert a + b == VectorX.from_array([5, 5, 5, 5])
        assert (a - b).to_list() == [-3.0, -1.0, 1.0, 3.0]
        assert 2 * a == a * 2
        assert a.dot(b) == 20.0
        assert VectorX.from_array([3, 4]).norm() == 5.0

    def test_size_mismatch(self):
        """Test binary operations reject vectors of different sizes."""
        a = VectorX.from_array([1, 2, 3])
        b = VectorX.from_array([1, 2])
        with pytest.raises(SizeMismatchError):
            a + b
        with pytest.raises(SizeMismatchError):
            a.dot(b)

    def test_different_sizes_never_equal(self):
        """Test vectors of different sizes are neither equal nor approx-equal."""
        a = VectorX.from_array([1, 2])
        b = VectorX.from_array([1, 2, 0])
        assert a != b
        assert not a.approx(b, 10.0)

    def test_normalize(self):
        """Test normalize and normalize_inplace."""
        v = VectorX.from_array([0, 3, 4])
        np.testing.assert_allclose(v.normalize().to_numpy(), [0, 0.6, 0.8])
        v.normalize_inplace()
        assert v.approx(VectorX.from_array([0, 0.6, 0.8]))
