"""Geometric operations for containment and distance tests.

This module provides the planar primitives used by the classifier:
- Point-on-segment testing (exact, for the inclusive boundary convention)
- Point-in-ring testing (ray casting algorithm)
- Point-to-segment and point-to-ring distances

Longitude is treated as x and latitude as y. Distances stay in raw degrees;
no projection is applied. All functions are pure and stateless.
"""

import math

from boroughmap.domain import Coordinate, Ring


def point_on_segment(
    x: float, y: float, x1: float, y1: float, x2: float, y2: float
) -> bool:
    """Check whether (x, y) lies exactly on the segment (x1, y1)-(x2, y2).

    Uses an exact collinearity test followed by a bounding-box check.

    Examples:
        >>> point_on_segment(0.5, 0.0, 0.0, 0.0, 1.0, 0.0)
        True
        >>> point_on_segment(1.5, 0.0, 0.0, 0.0, 1.0, 0.0)
        False
    """
    cross = (x2 - x1) * (y - y1) - (y2 - y1) * (x - x1)
    if cross != 0.0:
        return False
    return min(x1, x2) <= x <= max(x1, x2) and min(y1, y2) <= y <= max(y1, y2)


def point_in_ring(point: Coordinate, ring: Ring) -> bool:
    """Determine if a point is inside or on the boundary of a ring.

    Points on an edge or vertex count as contained. Interior points are
    decided by casting a horizontal ray to the east and counting edge
    crossings: odd means inside, even means outside.

    Args:
        point: The point to test
        ring: Closed ring to test against

    Returns:
        True if the point is inside the ring or on its boundary

    Examples:
        >>> square = Ring.from_lonlat([[0, 0], [2, 0], [2, 2], [0, 2], [0, 0]])
        >>> point_in_ring(Coordinate(lat=1.0, lon=1.0), square)
        True
        >>> point_in_ring(Coordinate(lat=2.0, lon=1.0), square)  # On edge
        True
        >>> point_in_ring(Coordinate(lat=3.0, lon=3.0), square)
        False
    """
    x, y = point.lon, point.lat
    coords = ring.coordinates
    n = len(coords)

    inside = False
    j = n - 1

    for i in range(n):
        xi, yi = coords[i].lon, coords[i].lat
        xj, yj = coords[j].lon, coords[j].lat

        if point_on_segment(x, y, xj, yj, xi, yi):
            return True

        # Check if ray from point intersects edge (j, i)
        if ((yi > y) != (yj > y)) and (x < (xj - xi) * (y - yi) / (yj - yi) + xi):
            inside = not inside

        j = i

    return inside


def distance_to_segment(
    x: float, y: float, x1: float, y1: float, x2: float, y2: float
) -> float:
    """Euclidean distance from (x, y) to the segment (x1, y1)-(x2, y2).

    Projects the point onto the infinite line, then clamps to the segment
    endpoints.

    Examples:
        >>> distance_to_segment(1.0, 1.0, 0.0, 0.0, 2.0, 0.0)
        1.0
    """
    dx = x2 - x1
    dy = y2 - y1

    # Handle zero-length segment
    segment_length_sq = dx * dx + dy * dy
    if segment_length_sq == 0.0:
        return math.hypot(x - x1, y - y1)

    t = ((x - x1) * dx + (y - y1) * dy) / segment_length_sq
    t = max(0.0, min(1.0, t))

    return math.hypot(x - (x1 + t * dx), y - (y1 + t * dy))


def distance_to_ring(point: Coordinate, ring: Ring) -> float:
    """Minimum distance from a point to the boundary of a ring, in degrees.

    The result is the distance to the nearest edge whether the point lies
    inside or outside the ring.

    Args:
        point: The point to measure from
        ring: Closed ring to measure to

    Returns:
        Distance to the closest edge in the ring's angular unit
    """
    x, y = point.lon, point.lat
    coords = ring.coordinates

    min_distance = math.inf
    for k in range(len(coords) - 1):
        a = coords[k]
        b = coords[k + 1]
        distance = distance_to_segment(x, y, a.lon, a.lat, b.lon, b.lat)
        if distance < min_distance:
            min_distance = distance

    return min_distance
