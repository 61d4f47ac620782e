"""Unit tests for geometry primitives."""

import math

import pytest

from boroughmap.core.geometry import (
    distance_to_ring,
    distance_to_segment,
    point_in_ring,
    point_on_segment,
)
from boroughmap.domain import Coordinate, Ring


def at(x: float, y: float) -> Coordinate:
    """Point from planar (x=lon, y=lat) values."""
    return Coordinate(lat=y, lon=x)


class TestPointOnSegment:
    """Tests for exact point-on-segment checks."""

    def test_midpoint(self):
        assert point_on_segment(0.5, 0.0, 0.0, 0.0, 1.0, 0.0)

    def test_endpoint(self):
        assert point_on_segment(1.0, 1.0, 0.0, 0.0, 1.0, 1.0)

    def test_collinear_beyond_end(self):
        assert not point_on_segment(1.5, 0.0, 0.0, 0.0, 1.0, 0.0)

    def test_off_line(self):
        assert not point_on_segment(0.5, 0.1, 0.0, 0.0, 1.0, 0.0)


class TestPointInRing:
    """Tests for point-in-ring with the inclusive boundary convention."""

    def test_center_inside(self, unit_square: Ring):
        assert point_in_ring(at(0.5, 0.5), unit_square)

    def test_outside(self, unit_square: Ring):
        assert not point_in_ring(at(1.5, 0.5), unit_square)
        assert not point_in_ring(at(0.5, -0.0001), unit_square)

    @pytest.mark.parametrize(
        "x, y",
        [
            (0.5, 0.0),  # bottom edge
            (1.0, 0.5),  # right edge
            (0.5, 1.0),  # top edge
            (0.0, 0.5),  # left edge
            (0.0, 0.0),  # vertex
            (1.0, 1.0),  # vertex
        ],
    )
    def test_boundary_counts_as_inside(self, unit_square: Ring, x: float, y: float):
        """Points on edges and vertices are contained."""
        assert point_in_ring(at(x, y), unit_square)

    def test_concave_ring(self):
        """A point in the notch of a U shape is outside."""
        u_shape = Ring.from_lonlat(
            [[0, 0], [3, 0], [3, 3], [2, 3], [2, 1], [1, 1], [1, 3], [0, 3], [0, 0]]
        )
        assert point_in_ring(at(0.5, 2.0), u_shape)
        assert point_in_ring(at(2.5, 2.0), u_shape)
        assert not point_in_ring(at(1.5, 2.0), u_shape)

    def test_ray_through_vertex(self):
        """A ray passing exactly through a vertex is counted once."""
        diamond = Ring.from_lonlat([[1, 0], [2, 1], [1, 2], [0, 1], [1, 0]])
        assert point_in_ring(at(0.5, 1.0), diamond)
        assert not point_in_ring(at(-0.5, 1.0), diamond)

    def test_orientation_independent(self, make_square):
        clockwise = Ring.from_lonlat(list(reversed(make_square(0.0, 0.0))))
        assert point_in_ring(at(0.25, 0.75), clockwise)


class TestDistance:
    """Tests for distance computations."""

    def test_perpendicular_distance(self):
        assert distance_to_segment(1.0, 1.0, 0.0, 0.0, 2.0, 0.0) == pytest.approx(1.0)

    def test_distance_clamped_to_endpoint(self):
        assert distance_to_segment(3.0, 4.0, -1.0, 0.0, 0.0, 0.0) == pytest.approx(5.0)

    def test_zero_length_segment(self):
        assert distance_to_segment(3.0, 4.0, 0.0, 0.0, 0.0, 0.0) == pytest.approx(5.0)

    def test_distance_outside_ring(self, unit_square: Ring):
        assert distance_to_ring(at(1.0005, 0.5), unit_square) == pytest.approx(0.0005)

    def test_distance_to_corner(self, unit_square: Ring):
        expected = math.hypot(0.003, 0.004)
        assert distance_to_ring(at(1.003, 1.004), unit_square) == pytest.approx(expected)

    def test_distance_inside_is_to_boundary(self, unit_square: Ring):
        assert distance_to_ring(at(0.5, 0.9), unit_square) == pytest.approx(0.1)

    def test_distance_on_boundary_is_zero(self, unit_square: Ring):
        assert distance_to_ring(at(0.5, 1.0), unit_square) == 0.0
