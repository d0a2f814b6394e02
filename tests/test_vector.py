"""Unit tests for the vector module.

Tests cover:
- Vector3 construction, coercion and immutability
- Arithmetic operators and type errors for unsupported operands
- dot, cross, length and normalize
- Vector4 homogeneous helpers
- NumPy array conversion and shape checks
"""

import dataclasses
import math

import numpy as np
import pytest

from raysphere.core.errors import InvalidDirectionError, RaysphereError
from raysphere.core.vector import Vector3, Vector4


class TestVector3Basics:
    """Tests for Vector3 construction and value semantics."""

    def test_components_are_floats(self):
        """Test that integer and numpy inputs are stored as Python floats."""
        v = Vector3(1, np.float32(2.5), np.int64(3))
        assert type(v.x) is float
        assert type(v.y) is float
        assert type(v.z) is float
        assert v == Vector3(1.0, 2.5, 3.0)

    def test_is_immutable(self):
        """Test that assigning a component raises."""
        v = Vector3(1.0, 2.0, 3.0)
        with pytest.raises(dataclasses.FrozenInstanceError):
            v.x = 5.0

    def test_hashable_by_value(self):
        """Test that equal vectors hash equally."""
        assert hash(Vector3(1.0, 2.0, 3.0)) == hash(Vector3(1, 2, 3))
        assert len({Vector3(1.0, 0.0, 0.0), Vector3(1.0, 0.0, 0.0)}) == 1

    def test_iteration_and_indexing(self):
        """Test tuple-like access to components."""
        v = Vector3(4.0, 5.0, 6.0)
        assert list(v) == [4.0, 5.0, 6.0]
        assert v[0] == 4.0
        assert v[2] == 6.0
        assert len(v) == 3

    def test_named_constructors(self):
        """Test zero and unit axis constructors."""
        assert Vector3.zero() == Vector3(0.0, 0.0, 0.0)
        assert Vector3.unit_x() == Vector3(1.0, 0.0, 0.0)
        assert Vector3.unit_y() == Vector3(0.0, 1.0, 0.0)
        assert Vector3.unit_z() == Vector3(0.0, 0.0, 1.0)


class TestVector3Arithmetic:
    """Tests for Vector3 operators."""

    def test_add_sub(self):
        a = Vector3(1.0, 2.0, 3.0)
        b = Vector3(0.5, -1.0, 2.0)
        assert a + b == Vector3(1.5, 1.0, 5.0)
        assert a - b == Vector3(0.5, 3.0, 1.0)

    def test_negation(self):
        assert -Vector3(1.0, -2.0, 0.0) == Vector3(-1.0, 2.0, -0.0)

    def test_scalar_multiply_both_sides(self):
        """Test v * s and s * v give the same result."""
        v = Vector3(1.0, 2.0, 3.0)
        assert v * 2.0 == Vector3(2.0, 4.0, 6.0)
        assert 2.0 * v == Vector3(2.0, 4.0, 6.0)
        assert v * 3 == Vector3(3.0, 6.0, 9.0)

    def test_scalar_divide(self):
        assert Vector3(2.0, 4.0, 8.0) / 2.0 == Vector3(1.0, 2.0, 4.0)

    def test_vector_times_vector_is_type_error(self):
        """Test that component-wise products are not silently allowed."""
        with pytest.raises(TypeError):
            Vector3(1.0, 2.0, 3.0) * Vector3(1.0, 1.0, 1.0)

    def test_add_scalar_is_type_error(self):
        with pytest.raises(TypeError):
            Vector3(1.0, 2.0, 3.0) + 1.0


class TestVector3Products:
    """Tests for dot, cross, length and normalize."""

    def test_dot(self):
        assert Vector3(1.0, 2.0, 3.0).dot(Vector3(4.0, -5.0, 6.0)) == 12.0

    def test_dot_orthogonal_is_zero(self):
        assert Vector3.unit_x().dot(Vector3.unit_y()) == 0.0

    def test_cross_right_handed(self):
        """Test x cross y = z and the cyclic permutations."""
        assert Vector3.unit_x().cross(Vector3.unit_y()) == Vector3.unit_z()
        assert Vector3.unit_y().cross(Vector3.unit_z()) == Vector3.unit_x()
        assert Vector3.unit_z().cross(Vector3.unit_x()) == Vector3.unit_y()

    def test_cross_is_perpendicular(self):
        a = Vector3(1.0, 2.0, 3.0)
        b = Vector3(-2.0, 0.5, 4.0)
        c = a.cross(b)
        assert abs(c.dot(a)) < 1e-12
        assert abs(c.dot(b)) < 1e-12

    def test_cross_anticommutative(self):
        a = Vector3(1.0, 2.0, 3.0)
        b = Vector3(-2.0, 0.5, 4.0)
        assert a.cross(b) == -b.cross(a)

    def test_length(self):
        v = Vector3(3.0, 4.0, 12.0)
        assert v.length_squared() == 169.0
        assert v.length() == 13.0

    def test_normalize(self):
        n = Vector3(0.0, 3.0, 4.0).normalize()
        assert abs(n.length() - 1.0) < 1e-12
        assert n.is_close(Vector3(0.0, 0.6, 0.8))

    def test_normalize_zero_raises(self):
        """Test that a zero vector has no direction."""
        with pytest.raises(InvalidDirectionError):
            Vector3.zero().normalize()

    def test_normalize_nan_raises(self):
        with pytest.raises(InvalidDirectionError):
            Vector3(math.nan, 0.0, 1.0).normalize()

    def test_invalid_direction_is_value_error(self):
        """Test the error is catchable both as package error and ValueError."""
        with pytest.raises(ValueError):
            Vector3.zero().normalize()
        with pytest.raises(RaysphereError):
            Vector3.zero().normalize()

    def test_is_finite(self):
        assert Vector3(1.0, 2.0, 3.0).is_finite()
        assert not Vector3(math.inf, 0.0, 0.0).is_finite()


class TestVector3Arrays:
    """Tests for NumPy conversion."""

    def test_to_array(self):
        arr = Vector3(1.0, 2.0, 3.0).to_array()
        assert arr.dtype == np.float64
        assert arr.shape == (3,)
        np.testing.assert_array_equal(arr, [1.0, 2.0, 3.0])

    def test_from_array(self):
        assert Vector3.from_array(np.array([1, 2, 3])) == Vector3(1.0, 2.0, 3.0)
        assert Vector3.from_array([0.5, 0.25, 0.125]) == Vector3(0.5, 0.25, 0.125)

    @pytest.mark.parametrize("bad", [[1.0, 2.0], [1.0, 2.0, 3.0, 4.0], [[1.0, 2.0, 3.0]]])
    def test_from_array_rejects_wrong_shape(self, bad):
        """Test that a row/column shaped or wrong-length input is refused."""
        with pytest.raises(ValueError):
            Vector3.from_array(bad)


class TestVector4:
    """Tests for the homogeneous Vector4."""

    def test_from_point_and_direction(self):
        v = Vector3(1.0, 2.0, 3.0)
        assert Vector4.from_point(v) == Vector4(1.0, 2.0, 3.0, 1.0)
        assert Vector4.from_direction(v) == Vector4(1.0, 2.0, 3.0, 0.0)

    def test_xyz_drops_w(self):
        assert Vector4(1.0, 2.0, 3.0, 7.0).xyz == Vector3(1.0, 2.0, 3.0)

    def test_arithmetic(self):
        a = Vector4(1.0, 2.0, 3.0, 1.0)
        b = Vector4(1.0, 1.0, 1.0, 0.0)
        assert a + b == Vector4(2.0, 3.0, 4.0, 1.0)
        assert a - b == Vector4(0.0, 1.0, 2.0, 1.0)
        assert 2 * b == Vector4(2.0, 2.0, 2.0, 0.0)
        assert a.dot(b) == 6.0

    def test_mixing_with_vector3_is_type_error(self):
        with pytest.raises(TypeError):
            Vector4(1.0, 2.0, 3.0, 1.0) + Vector3(1.0, 2.0, 3.0)

    def test_from_array_rejects_three_components(self):
        with pytest.raises(ValueError):
            Vector4.from_array([1.0, 2.0, 3.0])


class TestNumpyScalars:
    """Tests for NumPy scalars on the left of an operator."""

    def test_numpy_float_times_vector3(self):
        """Test np.float64 * Vector3 goes through Vector3.__rmul__."""
        result = np.float64(2.0) * Vector3(1.0, 2.0, 3.0)
        assert type(result) is Vector3
        assert result == Vector3(2.0, 4.0, 6.0)

    def test_numpy_int_times_vector3(self):
        result = np.int64(3) * Vector3(1.0, 2.0, 3.0)
        assert type(result) is Vector3
        assert result == Vector3(3.0, 6.0, 9.0)

    def test_numpy_float_times_vector4(self):
        result = np.float64(2.0) * Vector4(1.0, 2.0, 3.0, 1.0)
        assert type(result) is Vector4
        assert result == Vector4(2.0, 4.0, 6.0, 2.0)

    def test_rng_scalar_times_vector3(self):
        scale = np.random.default_rng(42).uniform(1.0, 2.0)
        assert type(scale * Vector3.unit_x()) is Vector3


class TestVectorEdgeCases:
    """Tests for max_abs, extreme normalization and is_close type checks."""

    def test_max_abs(self):
        assert Vector3(1.0, -7.0, 3.0).max_abs() == 7.0
        assert Vector3.zero().max_abs() == 0.0

    @pytest.mark.parametrize("scale", [1e-200, 1e200])
    def test_normalize_extreme_magnitudes(self, scale):
        """Test normalize does not underflow or overflow through length()."""
        n = (Vector3(0.0, 3.0, 4.0) * scale).normalize()
        assert n.is_close(Vector3(0.0, 0.6, 0.8))

    def test_is_close_wrong_type_raises(self):
        with pytest.raises(TypeError):
            Vector3(1.0, 2.0, 3.0).is_close((1.0, 2.0, 3.0))
        with pytest.raises(TypeError):
            Vector4(1.0, 2.0, 3.0, 1.0).is_close(Vector3(1.0, 2.0, 3.0))
