"""Tests for Vec3 class."""

import pytest
import math
import numpy as np

from raymath.vec3 import Vec3, Point3, Color, dot, cross


class TestVec3Creation:
    """Test Vec3 construction."""

    def test_default_constructor(self):
        v = Vec3()
        assert v.x == 0.0
        assert v.y == 0.0
        assert v.z == 0.0

    def test_value_constructor(self):
        v = Vec3(1.0, 2.0, 3.0)
        assert v.x == 1.0
        assert v.y == 2.0
        assert v.z == 3.0

    def test_broadcast_constructor(self):
        v = Vec3(1.5)
        assert v.x == 1.5
        assert v.y == 1.5
        assert v.z == 1.5

    def test_two_components_rejected(self):
        with pytest.raises(TypeError):
            Vec3(1.0, 2.0)

    def test_integers_promoted(self):
        v = Vec3(1, 2, 3)
        assert isinstance(v.x, float)

    def test_from_array_copies(self):
        arr = np.array([1.0, 2.0, 3.0])
        v = Vec3.from_array(arr)
        arr[0] = 10.0
        assert v.x == 1.0

    def test_color_aliases(self):
        c = Color(0.5, 0.6, 0.7)
        assert c.r == 0.5
        assert c.g == 0.6
        assert c.b == 0.7

    def test_point_alias(self):
        assert Point3 is Vec3


class TestVec3Arithmetic:
    """Test Vec3 arithmetic operations."""

    def test_negation(self):
        neg = -Vec3(1, 2, 3)
        assert neg == Vec3(-1, -2, -3)

    def test_addition(self):
        assert Vec3(1, 2, 3) + Vec3(4, 5, 6) == Vec3(5, 7, 9)

    def test_addition_scalar(self):
        assert Vec3(1, 2, 3) + 10 == Vec3(11, 12, 13)
        assert 10 + Vec3(1, 2, 3) == Vec3(11, 12, 13)

    def test_subtraction(self):
        assert Vec3(4, 5, 6) - Vec3(1, 2, 3) == Vec3(3, 3, 3)

    def test_scale_both_sides(self):
        v = Vec3(1, 2, 3)
        assert v * 2 == Vec3(2, 4, 6)
        assert 2 * v == Vec3(2, 4, 6)

    def test_numpy_scalar_on_left(self):
        result = np.float64(2.0) * Vec3(1, 2, 3)
        assert isinstance(result, Vec3)
        assert result == Vec3(2, 4, 6)

    def test_elementwise_product(self):
        v1 = Vec3(1, 2, 3)
        v2 = Vec3(2, 2, 2)
        assert v1 * v2 == Vec3(2, 4, 6)
        assert dot(v1, v2) == 12.0

    def test_division(self):
        assert Vec3(2, 4, 6) / 2 == Vec3(1, 2, 3)

    def test_division_by_vector(self):
        assert Vec3(2, 4, 6) / Vec3(2, 4, 3) == Vec3(1, 1, 2)

    def test_division_by_zero_is_infinite(self):
        v = Vec3(1, -1, 0) / 0
        assert v.x == math.inf
        assert v.y == -math.inf
        assert math.isnan(v.z)

    def test_operations_do_not_mutate(self):
        v = Vec3(1, 2, 3)
        _ = v + Vec3(1)
        _ = v * 3
        _ = v / 2
        assert v == Vec3(1, 2, 3)

    def test_unsupported_operand(self):
        with pytest.raises(TypeError):
            Vec3(1, 2, 3) + "a"


class TestVec3InPlace:
    """Test Vec3 in-place operators."""

    def test_iadd(self):
        v = Vec3(1, 2, 3)
        alias = v
        v += Vec3(1, 1, 1)
        assert alias == Vec3(2, 3, 4)

    def test_itruediv_scalar(self):
        v = Vec3(2, 4, 6)
        v /= 2
        assert v == Vec3(1, 2, 3)

    def test_itruediv_vector(self):
        v = Vec3(2, 4, 6)
        v /= Vec3(1, 2, 3)
        assert v == Vec3(2, 2, 2)


class TestVec3VectorOps:
    """Test Vec3 vector operations."""

    def test_length(self):
        assert Vec3(3, 4, 0).length() == 5.0

    def test_squared_length(self):
        assert Vec3(3, 4, 0).squared_length() == 25.0

    def test_sum(self):
        assert Vec3(1, 2, 3).sum() == 6.0

    def test_floor(self):
        assert Vec3(1.7, -0.2, 3.0).floor() == Vec3(1, -1, 3)

    def test_normalized(self):
        v = Vec3(3, 4, 0)
        n = v.normalized()
        assert abs(n.length() - 1.0) < 1e-10
        assert v == Vec3(3, 4, 0)

    def test_normalize_in_place(self):
        v = Vec3(0, 0, 5)
        v.normalize()
        assert v == Vec3(0, 0, 1)

    @pytest.mark.parametrize("components", [(1, 2, 3), (-0.3, 1e-4, 7), (1e6, -1e6, 2)])
    def test_normalized_is_unit(self, components):
        assert Vec3(*components).normalized().length() == pytest.approx(1.0)

    def test_normalize_zero_vector_is_nan(self):
        n = Vec3().normalized()
        assert all(math.isnan(c) for c in n)

        v = Vec3()
        v.normalize()
        assert math.isnan(v.x)

    def test_dot_product(self):
        assert dot(Vec3(1, 0, 0), Vec3(0, 1, 0)) == 0.0
        assert Vec3(1, 2, 3).dot(Vec3(4, 5, 6)) == 32.0  # 1*4 + 2*5 + 3*6

    def test_dot_commutes(self):
        v1 = Vec3(1.5, -2, 0.25)
        v2 = Vec3(-3, 4, 8)
        assert dot(v1, v2) == dot(v2, v1)

    def test_cross_product(self):
        assert cross(Vec3(1, 0, 0), Vec3(0, 1, 0)) == Vec3(0, 0, 1)
        assert Vec3(0, 1, 0).cross(Vec3(0, 0, 1)) == Vec3(1, 0, 0)
        assert cross(Vec3(0, 0, 1), Vec3(1, 0, 0)) == Vec3(0, 1, 0)

    def test_cross_middle_component(self):
        assert cross(Vec3(1, 2, 3), Vec3(4, 5, 6)) == Vec3(-3, 6, -3)

    def test_cross_anticommutes_and_is_orthogonal(self):
        v1 = Vec3(1.5, -2, 0.25)
        v2 = Vec3(-3, 4, 8)
        assert cross(v1, v2) == -cross(v2, v1)
        assert dot(v1, cross(v1, v2)) == pytest.approx(0.0, abs=1e-9)
        assert dot(v2, cross(v1, v2)) == pytest.approx(0.0, abs=1e-9)


class TestVec3Comparison:
    """Test Vec3 comparison operations."""

    def test_equality(self):
        assert Vec3(1, 2, 3) == Vec3(1, 2, 3)

    def test_inequality(self):
        assert Vec3(1, 2, 3) != Vec3(1, 2, 4)

    def test_equality_is_exact(self):
        assert Vec3(1, 2, 3) != Vec3(1 + 1e-12, 2, 3)

    def test_scalar_equality_requires_all(self):
        assert Vec3(2, 2, 2) == 2
        assert not (Vec3(2, 2, 3) == 2)

    def test_scalar_le_requires_all(self):
        assert Vec3(2, 2, 2) <= 2
        assert Vec3(-1, 0, 2) <= 2
        assert not (Vec3(2, 3, 2) <= 2)

    def test_unhashable(self):
        with pytest.raises(TypeError):
            hash(Vec3())


class TestVec3Indexing:
    """Test Vec3 indexing."""

    def test_getitem(self):
        v = Vec3(1, 2, 3)
        assert v[0] == 1
        assert v[1] == 2
        assert v[2] == 3

    def test_out_of_range_returns_zero(self):
        v = Vec3(1, 2, 3)
        assert v[3] == 0.0
        assert v[100] == 0.0
        assert v[-1] == 0.0

    def test_iteration(self):
        assert list(Vec3(1, 2, 3)) == [1.0, 2.0, 3.0]
        assert len(Vec3()) == 3


class TestVec3Formatting:
    """Test Vec3 string forms."""

    def test_str(self):
        assert str(Vec3(1, 2.5, -3)) == "(x:1 y:2.5 z:-3)"

    def test_repr(self):
        assert repr(Vec3(1, 2, 3)) == "Vec3(1.0, 2.0, 3.0)"


class TestVec3Utility:
    """Test Vec3 utility methods."""

    def test_copy_is_independent(self):
        v = Vec3(1, 2, 3)
        c = v.copy()
        c += Vec3(1)
        assert v == Vec3(1, 2, 3)

    def test_to_array(self):
        arr = Vec3(1, 2, 3).to_array()
        assert isinstance(arr, np.ndarray)
        assert arr.tolist() == [1.0, 2.0, 3.0]
