"""Shared fixtures for boroughmap tests."""

from collections.abc import Callable

import pytest

from boroughmap.domain import Region, RegionBoundary, RegionStore, Ring


def square_lonlat(
    x0: float, y0: float, size: float = 1.0, per_side: int = 1
) -> list[list[float]]:
    """Closed counter-clockwise square in [lon, lat] order.

    Each side is split into ``per_side`` edges, so the ring has
    ``4 * per_side + 1`` coordinates.
    """
    step = size / per_side
    coords: list[list[float]] = []
    for i in range(per_side):
        coords.append([x0 + i * step, y0])
    for i in range(per_side):
        coords.append([x0 + size, y0 + i * step])
    for i in range(per_side):
        coords.append([x0 + size - i * step, y0 + size])
    for i in range(per_side):
        coords.append([x0, y0 + size - i * step])
    coords.append(coords[0])
    return coords


@pytest.fixture
def make_square() -> Callable[..., list[list[float]]]:
    """Factory for closed squares in [lon, lat] order."""
    return square_lonlat


@pytest.fixture
def unit_square() -> Ring:
    """Unit square with corners (0, 0) and (1, 1)."""
    return Ring.from_lonlat(square_lonlat(0.0, 0.0))


@pytest.fixture
def unit_square_store(unit_square: Ring) -> RegionStore:
    """Store with Manhattan as the unit square."""
    return RegionStore.from_boundaries(
        [RegionBoundary(Region.MANHATTAN, full=unit_square, simplified=unit_square)]
    )


@pytest.fixture
def five_region_store() -> RegionStore:
    """Five unit squares spaced two degrees apart along the x axis."""
    boundaries = []
    for index, region in enumerate(Region.boroughs()):
        ring = Ring.from_lonlat(square_lonlat(index * 2.0, 0.0))
        boundaries.append(RegionBoundary(region, full=ring, simplified=ring))
    return RegionStore.from_boundaries(boundaries)
