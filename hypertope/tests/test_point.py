"""Tests for the Point vector primitive."""
import numpy
import pytest

from hypertope._point import Point, distance, distance_sq


class TestConstruction:
    """Tests for building points."""

    def test_zero_vector_from_int(self):
        """Point(n) is the zero vector of dimension n."""
        p = Point(3)
        assert p.dimensions() == 3
        assert numpy.all(p.coordinates == 0.0)

    def test_copies_coordinates(self):
        """Coordinates are copied, not aliased."""
        coords = numpy.array([1.0, 2.0])
        p = Point(coords)
        coords[0] = 5.0
        assert p[0] == 1.0

    def test_integer_input_becomes_float(self):
        p = Point([1, 2])
        assert p.coordinates.dtype == float


class TestArithmetic:
    """Tests for the pure vector operations."""

    def test_add_subtract(self):
        a = Point([1.0, 2.0, 3.0])
        b = Point([0.5, -1.0, 2.0])
        numpy.testing.assert_allclose(a.add(b).coordinates, [1.5, 1.0, 5.0])
        numpy.testing.assert_allclose(a.subtract(b).coordinates,
                                      [0.5, 3.0, 1.0])

    def test_add_does_not_mutate(self):
        a = Point([1.0, 2.0])
        a.add(Point([1.0, 1.0]))
        numpy.testing.assert_allclose(a.coordinates, [1.0, 2.0])

    def test_dot_and_magnitudes(self):
        a = Point([3.0, 4.0])
        assert a.dot(Point([1.0, 0.0])) == 3.0
        assert a.sq_magnitude() == 25.0
        assert a.magnitude() == pytest.approx(5.0)

    def test_project(self):
        """Projection keeps only the component along the direction."""
        p = Point([1.0, 1.0]).project(Point([2.0, 0.0]))
        numpy.testing.assert_allclose(p.coordinates, [1.0, 0.0])

    def test_distances(self):
        a = Point([0.0, 0.0])
        b = Point([3.0, 4.0])
        assert distance_sq(a, b) == pytest.approx(25.0)
        assert distance(a, b) == pytest.approx(5.0)

    def test_apply_matrix(self):
        """A quarter turn maps e_x onto e_y."""
        m = numpy.array([[0.0, -1.0], [1.0, 0.0]])
        p = Point([1.0, 0.0]).apply_matrix(m)
        numpy.testing.assert_allclose(p.coordinates, [0.0, 1.0], atol=1e-15)


class TestDimensionMismatch:
    """Mismatched dimensions fail immediately."""

    @pytest.mark.parametrize("op", ["add", "subtract", "dot", "translate"])
    def test_binary_ops_raise(self, op):
        with pytest.raises(ValueError):
            getattr(Point([1.0, 2.0]), op)(Point([1.0, 2.0, 3.0]))

    def test_matrix_shape_raises(self):
        with pytest.raises(ValueError):
            Point([1.0, 2.0]).apply_matrix(numpy.eye(3))


class TestInPlace:
    """scale, translate and resize mutate the point."""

    def test_scale_returns_self(self):
        p = Point([1.0, -2.0])
        assert p.scale(3.0) is p
        numpy.testing.assert_allclose(p.coordinates, [3.0, -6.0])

    def test_translate(self):
        p = Point([1.0, 1.0])
        p.translate(Point([0.5, -1.0]))
        numpy.testing.assert_allclose(p.coordinates, [1.5, 0.0])

    def test_resize_pads_with_zeros(self):
        p = Point([1.0, 2.0]).resize(4)
        numpy.testing.assert_allclose(p.coordinates, [1.0, 2.0, 0.0, 0.0])

    def test_resize_truncates(self):
        p = Point([1.0, 2.0, 3.0]).resize(1)
        assert p.dimensions() == 1
        assert p[0] == 1.0
