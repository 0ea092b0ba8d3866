"""Tests for the shared vector behaviour (construction, access, arithmetic)."""
import copy
from decimal import Decimal

import numpy as np
import pytest

from vecmath import (
    Vector2B,
    Vector2D,
    Vector2F,
    Vector2I,
    Vector2M,
    Vector2SB,
    Vector3F,
    Vector3I,
    Vector4B,
    Vector4F,
    Vector4I,
)


class TestConstruction:
    def test_components_by_name(self):
        v = Vector4F(1, 2, 3, 4)
        assert (v.X, v.Y, v.Z, v.W) == (1.0, 2.0, 3.0, 4.0)

    def test_storage_uses_kind_dtype(self):
        assert isinstance(Vector2SB(1, 2).X, np.int8)
        assert Vector2F(1, 2).to_array().dtype == np.float32
        assert Vector2D(1, 2).to_array().dtype == np.float64

    def test_wrong_component_count(self):
        with pytest.raises(ValueError, match="There must be 3 and only 3"):
            Vector3F(1, 2)

    def test_two_components_have_no_z(self):
        assert not hasattr(Vector2F(1, 2), "Z")

    def test_out_of_range_component(self):
        with pytest.raises(OverflowError):
            Vector2B(256, 0)

    def test_float_component_for_integer_kind(self):
        with pytest.raises(TypeError):
            Vector2I(1.5, 2)

    def test_decimal_components(self):
        v = Vector2M("1.25", 2)
        assert v.X == Decimal("1.25")
        assert isinstance(v.Y, Decimal)

    def test_decimal_rejects_nan(self):
        with pytest.raises(ValueError):
            Vector2M(float("nan"), 0)

    def test_filled_zero_one(self):
        assert Vector3I.filled(7) == Vector3I(7, 7, 7)
        assert Vector3F.zero() == Vector3F(0, 0, 0)
        assert Vector3F.one() == Vector3F(1, 1, 1)
        assert Vector3F.zero().is_zero()
        assert not Vector3F.one().is_zero()

    def test_unit(self):
        assert Vector4F.unit("Z") == Vector4F(0, 0, 1, 0)
        assert Vector2I.unit(1) == Vector2I(0, 1)
        assert Vector3F.unit("x") == Vector3F(1, 0, 0)

    def test_unit_unknown_axis(self):
        with pytest.raises(IndexError):
            Vector2F.unit("Z")

    def test_from_array(self):
        assert Vector3F.from_array(np.array([1.0, 2.0, 3.0])) == Vector3F(1, 2, 3)
        assert Vector2I.from_tuple((5, 6)) == Vector2I(5, 6)
        with pytest.raises(ValueError):
            Vector2I.from_array([1, 2, 3])


class TestComponentAccess:
    def test_index(self):
        v = Vector3I(4, 5, 6)
        assert v[0] == 4
        assert v[2] == 6
        assert v["y"] == 5

    def test_index_out_of_range(self):
        v = Vector3I(1, 2, 3)
        with pytest.raises(IndexError, match="run from 0 to 2"):
            v[3]
        with pytest.raises(IndexError):
            v[-1]

    def test_set_by_name_and_index(self):
        v = Vector2F(0, 0)
        v.X = 2.5
        v[1] = 3
        assert v == Vector2F(2.5, 3)

    def test_set_out_of_range(self):
        v = Vector2B(0, 0)
        with pytest.raises(OverflowError):
            v.Y = 300
        assert v == Vector2B(0, 0)

    def test_iteration_and_len(self):
        v = Vector3I(1, 2, 3)
        assert list(v) == [1, 2, 3]
        assert len(v) == 3
        assert v.to_tuple() == (1, 2, 3)

    def test_to_dict(self):
        assert Vector3F(1, 2, 3).to_dict() == {"x": 1.0, "y": 2.0, "z": 3.0}
        assert Vector2M("1.5", 2).to_dict() == {"x": "1.5", "y": "2"}

    def test_to_array_is_a_copy(self):
        v = Vector2I(1, 2)
        arr = v.to_array()
        arr[0] = 9
        assert v.X == 1


class TestEqualityAndFormatting:
    def test_structural_equality(self):
        assert Vector2F(1, 2) == Vector2F(1, 2)
        assert Vector2F(1, 2) != Vector2F(2, 1)

    def test_different_types_never_equal(self):
        assert Vector2F(1, 2) != Vector2D(1, 2)
        assert Vector2I(1, 2) != (1, 2)

    def test_unhashable(self):
        with pytest.raises(TypeError):
            hash(Vector2F(1, 2))

    def test_copy_is_independent(self):
        a = Vector2F(1, 2)
        b = a.copy()
        b.X = 5
        assert a.X == 1
        assert copy.copy(a) == a

    def test_repr_and_str(self):
        v = Vector2I(1, -2)
        assert repr(v) == "Vector2I(1, -2)"
        assert str(v) == "X:1 Y:-2"


class TestArithmetic:
    def test_add_sub(self):
        assert Vector2F(1, 2) + Vector2F(3, 4) == Vector2F(4, 6)
        assert Vector2F(1, 2) - Vector2F(3, 4) == Vector2F(-2, -2)

    def test_scalars(self):
        assert Vector3I(1, 2, 3) * 2 == Vector3I(2, 4, 6)
        assert 2 * Vector3I(1, 2, 3) == Vector3I(2, 4, 6)
        assert Vector2F(2, 4) / 2 == Vector2F(1, 2)
        assert 10 - Vector2I(1, 2) == Vector2I(9, 8)

    def test_numpy_scalar_on_the_left(self):
        assert np.float32(2) * Vector2F(1, 2) == Vector2F(2, 4)

    def test_negation(self):
        assert -Vector2I(1, -2) == Vector2I(-1, 2)
        assert Vector2F(1, -2).negate() == Vector2F(-1, 2)

    def test_no_implicit_conversion(self):
        with pytest.raises(TypeError):
            Vector2B(1, 2) + Vector2F(1, 2)
        with pytest.raises(TypeError):
            Vector2I(1, 2) * 1.5
        with pytest.raises(TypeError):
            Vector2F(1, 2) + Vector3F(1, 2, 3)

    def test_signed_wraparound(self):
        assert Vector2SB(127, -128) + Vector2SB(1, -1) == Vector2SB(-128, 127)

    def test_unsigned_wraparound(self):
        assert Vector2B(0, 255) - Vector2B(1, 0) == Vector2B(255, 255)

    def test_integer_division_truncates_toward_zero(self):
        assert Vector2I(7, -7) / 2 == Vector2I(3, -3)
        assert Vector2I(-7, 7) / Vector2I(2, -2) == Vector2I(-3, -3)
        assert Vector2I(6, -6) / 3 == Vector2I(2, -2)

    def test_integer_division_by_zero(self):
        with pytest.raises(ZeroDivisionError):
            Vector2I(1, 2) / 0
        with pytest.raises(ZeroDivisionError):
            Vector2I(1, 2) / Vector2I(1, 0)

    def test_float_division_by_zero_is_infinite(self):
        v = Vector2F(1, -1) / 0
        assert np.isposinf(v.X)
        assert np.isneginf(v.Y)

    def test_decimal_arithmetic_is_exact(self):
        assert Vector2M("0.1", "0.2") + Vector2M("0.2", "0.1") == Vector2M("0.3", "0.3")

    def test_decimal_division_by_zero(self):
        with pytest.raises(ZeroDivisionError):
            Vector2M(1, 2) / 0


class TestCommonOperations:
    def test_dot(self):
        assert Vector3I(1, 2, 3).dot(Vector3I(4, 5, 6)) == 32

    def test_dot_wraps_narrow_kinds(self):
        result = Vector2SB(100, 100).dot(Vector2SB(2, 1))
        assert result == 44
        assert isinstance(result, np.int8)

    def test_dot_requires_same_type(self):
        with pytest.raises(TypeError, match="Can only calculate dot product"):
            Vector2I(1, 2).dot(Vector2F(1, 2))

    def test_length_and_distance_squared(self):
        assert Vector2F(3, 4).length_squared() == 25
        assert Vector2I(1, 1).distance_squared(Vector2I(4, 5)) == 25

    def test_minimum_maximum(self):
        a, b = Vector3I(1, 5, 3), Vector3I(2, 4, 3)
        assert a.minimum(b) == Vector3I(1, 4, 3)
        assert a.maximum(b) == Vector3I(2, 5, 3)

    def test_clamp_scalar_bounds(self):
        v = Vector4I(-5, 0, 5, 10)
        assert v.clamp(0, 6) is None
        assert v == Vector4I(0, 0, 5, 6)

    def test_clamp_vector_bounds(self):
        v = Vector2F(-1, 5)
        v.clamp(Vector2F(0, 0), Vector2F(1, 2))
        assert v == Vector2F(0, 2)

    def test_as_dimension_fills_with_one(self):
        assert Vector2B(3, 4).as_dimension(4) == Vector4B(3, 4, 1, 1)

    def test_as_dimension_drops_components(self):
        assert Vector4I(1, 2, 3, 4).as_dimension(2) == Vector2I(1, 2)

    def test_as_dimension_invalid(self):
        with pytest.raises(ValueError):
            Vector2I(1, 2).as_dimension(5)
